"""Headless game session: send a command, get back the text it produced."""

import time
from typing import Callable

from manor_logic.context import GameContext
from manor_logic.display import BufferDisplay
from manor_logic.engine import GameEngine
from manor_logic.timer import Timer


class HeadlessSession:
    """Skips the menu; the timer starts with `start()` or the first command."""

    def __init__(self, time_limit_seconds: int = 480, clock: Callable[[], float] = time.monotonic):
        self.display = BufferDisplay()
        self.engine = GameEngine(GameContext(timer=Timer(time_limit_seconds, clock), display=self.display))

    def start(self) -> str:
        self.engine.start()
        return self._output()

    def execute(self, command: str) -> str:
        self.engine.step(command)
        return self._output()

    def is_over(self) -> bool:
        return self.engine.is_over()

    def is_won(self) -> bool:
        return self.engine.is_won()

    def get_state(self) -> dict:
        return self.engine.get_state()

    def _output(self) -> str:
        text = self.display.drain()
        if self.display.hud:
            return f"{self.display.hud}\n\n{text}"
        return text
