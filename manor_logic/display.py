"""Display sinks. The engine only talks to these; none of them hold game state."""

import time

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from manor_logic.timer import format_clock
from manor_logic.world import GAME_TITLE, INTRO_TEXT, JUMPSCARE_ART, JumpscareId


class NullDisplay:
    """Renders nothing. Also documents the display interface."""

    def clear(self) -> None:
        pass

    def frame(self, room_title: str, seconds_remaining: int, card_count: int, card_total: int = 4) -> None:
        pass

    def type(self, text: str) -> None:
        pass

    def toast(self, text: str) -> None:
        pass

    def hint(self, text: str) -> None:
        pass

    def show_intro(self) -> None:
        pass

    def show_jumpscare(self, jumpscare_id: JumpscareId, duration_ms: int = 600) -> None:
        pass


class BufferDisplay(NullDisplay):
    """Collects output as plain text lines, for the MCP server and the playtest runner."""

    def __init__(self):
        self.lines: list[str] = []
        self.hud = ""

    def clear(self) -> None:
        self.lines.clear()

    def frame(self, room_title: str, seconds_remaining: int, card_count: int, card_total: int = 4) -> None:
        self.hud = f"Room: {room_title} | Time: {format_clock(seconds_remaining)} | Cards: {card_count}/{card_total}"

    def type(self, text: str) -> None:
        self.lines.append(text)

    def toast(self, text: str) -> None:
        self.lines.append(text)

    def hint(self, text: str) -> None:
        self.lines.append(f"[{text}]")

    def show_intro(self) -> None:
        self.lines.append(INTRO_TEXT)

    def show_jumpscare(self, jumpscare_id: JumpscareId, duration_ms: int = 600) -> None:
        self.lines.append(JUMPSCARE_ART.get(jumpscare_id, ""))

    def drain(self) -> str:
        """Return everything shown since the last drain and forget it."""
        text = "\n".join(line for line in self.lines if line)
        self.lines.clear()
        return text


class ConsoleDisplay(NullDisplay):
    """Terminal renderer with a typewriter effect, built on rich.

    Terminal errors never reach the engine: characters the terminal cannot encode
    are replaced before printing and a failed write is dropped.
    """

    BAR_WIDTH = 24

    def __init__(self, total_seconds: int = 480, type_delay_ms: int = 10, console: Console | None = None):
        self.console = console or Console(highlight=False)
        self.total_seconds = total_seconds
        self.type_delay_ms = type_delay_ms

    def _fit(self, text: str) -> str:
        """Replace characters the terminal's encoding cannot show."""
        encoding = self.console.encoding
        try:
            return text.encode(encoding, "replace").decode(encoding)
        except LookupError:
            return text

    def _print(self, *objects, **kwargs) -> None:
        objects = [self._fit(obj) if isinstance(obj, str) else obj for obj in objects]
        try:
            self.console.print(*objects, **kwargs)
        except Exception:
            return

    def clear(self) -> None:
        try:
            self.console.clear()
        except Exception:
            self._print("\n" + "-" * 32 + "\n")

    def frame(self, room_title: str, seconds_remaining: int, card_count: int, card_total: int = 4) -> None:
        pct = min(1.0, max(0.0, seconds_remaining / max(1, self.total_seconds)))
        fill = int(pct * self.BAR_WIDTH)
        bar = "#" * fill + "-" * (self.BAR_WIDTH - fill)
        colour = "green" if pct > 0.5 else ("yellow" if pct > 0.2 else "red")
        body = (
            f"Room: [bold]{escape(room_title)}[/]\n"
            f"Time: [{colour}]{format_clock(seconds_remaining)} \\[{bar}][/]\n"
            f"Cards: {card_count}/{card_total}"
        )
        self._print(Panel(self._fit(body), title=GAME_TITLE, border_style="green"))

    def type(self, text: str) -> None:
        if self.type_delay_ms <= 0:
            self._print(text, markup=False)
            return
        delay = self.type_delay_ms / 1000
        for ch in text:
            self._print(ch, end="", markup=False)
            time.sleep(delay)
        self._print()

    def toast(self, text: str) -> None:
        self._print(f"[cyan]{escape(text)}[/]")

    def hint(self, text: str) -> None:
        self._print(f"[yellow]{escape('[' + text + ']')}[/]")

    def show_intro(self) -> None:
        self.clear()
        prev = self.type_delay_ms
        self.type_delay_ms = max(12, prev)
        try:
            self.type(INTRO_TEXT)
        finally:
            self.type_delay_ms = prev

    def show_jumpscare(self, jumpscare_id: JumpscareId, duration_ms: int = 600) -> None:
        self._flash(2, 70)
        try:
            self.console.bell()
        except Exception:
            pass
        art = JUMPSCARE_ART.get(jumpscare_id, "")
        self._print(Panel(escape(self._fit(art)), title="JUMPSCARE", border_style="bold red"))
        time.sleep(max(200, duration_ms) / 1000)
        # Left on screen until the next command clears it

    def _flash(self, times: int, pause_ms: int) -> None:
        for _ in range(times):
            self._print(" " * self.console.width, style="reverse")
            time.sleep(pause_ms / 1000)
