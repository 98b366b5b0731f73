import builtins

import pytest

from manor_logic import console
from manor_logic.audio import AudioManager, NullAudio
from manor_logic.config import Settings
from manor_logic.display import ConsoleDisplay
from mcp_manor import server


def feed_input(monkeypatch, *lines):
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)


def test_build_engine_respects_audio_switch(tmp_path):
    engine = console.build_engine(Settings(audio_enabled=False, type_delay_ms=0))
    assert isinstance(engine.audio, NullAudio)
    assert not isinstance(engine.audio, AudioManager)
    assert isinstance(engine.display, ConsoleDisplay)

    engine = console.build_engine(Settings(audio_dir=str(tmp_path)))
    assert isinstance(engine.audio, AudioManager)


def test_console_main_writes_transcript(tmp_path, monkeypatch, capsys):
    settings = Settings(audio_enabled=False, type_delay_ms=0, log_dir=str(tmp_path))
    monkeypatch.setattr(console, "load_settings", lambda: settings)
    feed_input(monkeypatch, "play", "tutorial", "quit")

    with pytest.raises(SystemExit) as exc:
        console.main()

    assert exc.value.code == 0
    assert "Thanks for playing!" in capsys.readouterr().out
    [log_file] = list(tmp_path.glob("session_*_console.log"))
    transcript = log_file.read_text()
    assert "> tutorial" in transcript
    assert "[OUTCOME: quit]" in transcript
    assert "Cards: beetle" in transcript


def test_console_main_reports_crashes(monkeypatch, capsys):
    monkeypatch.setattr(console, "load_settings", lambda: Settings(audio_enabled=False, type_delay_ms=0))

    def boom(prompt=""):
        raise RuntimeError("floor gave way")

    monkeypatch.setattr(builtins, "input", boom)
    with pytest.raises(SystemExit) as exc:
        console.main()
    assert exc.value.code == 1
    assert "floor gave way" in capsys.readouterr().err


def test_mcp_tools_drive_a_session():
    opening = server.new_game()
    assert "Foyer" in opening
    assert "beetle" in server.act("tutorial")
    server.go("living")
    assert "Cards: beetle" in server.cards()
    status = server.status()
    assert "Room: living" in status
    assert "Outcome: playing" in status
