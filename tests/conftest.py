import pytest

from manor_logic.audio import NullAudio
from manor_logic.context import GameContext
from manor_logic.display import NullDisplay
from manor_logic.engine import GameEngine
from manor_logic.player import Player
from manor_logic.timer import Timer


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingDisplay(NullDisplay):
    def __init__(self):
        self.events = []
        self.jumpscares = []
        self.frames = []

    def clear(self):
        self.events.append(("clear", ""))

    def frame(self, room_title, seconds_remaining, card_count, card_total=4):
        self.frames.append((room_title, seconds_remaining, card_count, card_total))

    def type(self, text):
        self.events.append(("type", text))

    def toast(self, text):
        self.events.append(("toast", text))

    def hint(self, text):
        self.events.append(("hint", text))

    def show_intro(self):
        self.events.append(("intro", ""))

    def show_jumpscare(self, jumpscare_id, duration_ms=600):
        self.jumpscares.append((jumpscare_id, duration_ms))

    def texts(self, kind=None):
        return [text for k, text in self.events if k != "clear" and (kind is None or k == kind)]

    def since_clear(self):
        """Text shown during the current input cycle."""
        out = []
        for kind, text in self.events:
            if kind == "clear":
                out = []
            else:
                out.append(text)
        return "\n".join(out)


class RecordingAudio(NullAudio):
    def __init__(self):
        self.calls = []

    def play_music(self, sound_id):
        self.calls.append(("music", sound_id))

    def stop_music(self):
        self.calls.append(("stop", None))

    def play_sfx(self, sound_id):
        self.calls.append(("sfx", sound_id))

    def sfx(self):
        return [sound_id for kind, sound_id in self.calls if kind == "sfx"]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def ctx(clock, display, audio):
    return GameContext(timer=Timer(480, clock), player=Player(), display=display, audio=audio)


@pytest.fixture
def new_engine(ctx):
    """Engine that has not been started (menu phase not run)."""
    return GameEngine(ctx)


@pytest.fixture
def engine(new_engine):
    """Engine past the menu, standing in the foyer with the timer running."""
    new_engine.start()
    return new_engine
