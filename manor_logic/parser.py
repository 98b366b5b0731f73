"""Verb + noun command parsing."""

from typing import NamedTuple


class Command(NamedTuple):
    verb: str
    noun: str


def parse(raw: str) -> Command:
    """Split raw input into a lower-cased verb and the lower-cased rest of the line.

    Nothing is validated here; unknown verbs are left for the room handlers to reject.
    """
    if not raw or not raw.strip():
        return Command("", "")

    parts = raw.strip().split(maxsplit=1)
    verb = parts[0].lower()
    noun = parts[1].strip().lower() if len(parts) > 1 else ""
    return Command(verb, noun)
