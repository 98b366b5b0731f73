#!/usr/bin/env python3
"""Console entry point: wire settings, sinks and player into a game and run it."""

import sys
from datetime import datetime

from manor_logic.audio import AudioManager, NullAudio
from manor_logic.config import ConfigError, load_settings
from manor_logic.context import GameContext
from manor_logic.display import ConsoleDisplay
from manor_logic.engine import GameEngine, Outcome
from manor_logic.logger import Logger
from manor_logic.player import Player
from manor_logic.timer import Timer


def build_engine(settings) -> GameEngine:
    ctx = GameContext(
        timer=Timer(settings.time_limit_seconds),
        player=Player(),
        display=ConsoleDisplay(settings.time_limit_seconds, settings.type_delay_ms),
        audio=AudioManager(settings.audio_dir) if settings.audio_enabled else NullAudio(),
    )
    return GameEngine(ctx)


def transcript_reader(log: Logger):
    """Wrap input() so every line the player types lands in the session log."""

    def read_line(prompt: str) -> str:
        line = input(prompt)
        log.log(f"> {line}")
        return line

    return read_line


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    engine = build_engine(settings)
    log = None
    read_line = input
    if settings.log_dir:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log = Logger(settings.log_dir, f"session_{stamp}", "console", echo=False)
        read_line = transcript_reader(log)

    exit_code = 0
    try:
        outcome = engine.run(read_line)
    except KeyboardInterrupt:
        print("\nThanks for playing!")
        outcome = Outcome.QUIT
    except Exception as e:
        print(f"\nERROR: the manor collapsed unexpectedly: {e}", file=sys.stderr)
        outcome = None
        exit_code = 1
    finally:
        engine.audio.stop_music()

    if log is not None:
        state = engine.get_state()
        log.log(f"[OUTCOME: {outcome.value if outcome else 'error'}]")
        log.log(f"  Cards: {', '.join(state['cards']) or 'none'}")
        log.log(f"  Moves: {state['moves']}")
        log.log(f"  Time left: {state['remaining_seconds']}s")
        log.close()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
