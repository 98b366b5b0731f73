from manor_logic.logger import Logger
from manor_logic.session import HeadlessSession
from playtest.report import aggregate, load_runs, model_label
from playtest.tool_runner import TOOL_SCHEMAS, ToolRunner


def test_session_returns_hud_and_text(clock):
    session = HeadlessSession(480, clock)
    opening = session.start()
    assert opening.startswith("Room: Foyer | Time: 08:00 | Cards: 0/4")
    assert "pizza guy" in opening

    out = session.execute("tutorial")
    assert "beetle" in out
    assert session.get_state()["cards"] == ["beetle"]


def test_tool_runner_plays_to_the_escape():
    runner = ToolRunner()
    runner.start()
    steps = [
        ("act", {"command": "tutorial"}),
        ("go", {"room": "living"}),
        ("act", {"command": "enter b3"}),
        ("go", {"room": "hallway"}),
        ("act", {"command": "set clock 9:15"}),
        ("go", {"room": "kitchen"}),
        ("act", {"command": "light candles"}),
        ("back", {}),
        ("go", {"room": "bedroom"}),
    ]
    for tool, args in steps:
        runner.execute_tool(tool, args)
        assert not runner.check_over()

    out = runner.execute_tool("act", {"command": "rotate head east"})
    assert "YOU ESCAPE" in out
    assert runner.check_win()


def test_tool_runner_unknown_tool_and_reset():
    runner = ToolRunner()
    runner.start()
    assert runner.execute_tool("dance", {}) == "Unknown tool: 'dance'"
    runner.execute_tool("act", {"command": "tutorial"})
    runner.reset()
    assert runner.session.get_state()["cards"] == []


def test_tool_runner_accepts_non_string_commands():
    runner = ToolRunner()
    runner.start()
    out = runner.execute_tool("act", {"command": 3})
    assert out.startswith("Room: Foyer")
    assert not runner.check_over()
    assert runner.execute_tool("act", {}).startswith("Room: Foyer")


def test_tool_schemas_match_runner():
    names = {schema["function"]["name"] for schema in TOOL_SCHEMAS}
    assert names == {"look", "go", "back", "act", "inventory"}


def test_report_aggregates_json_runs(tmp_path):
    runs = [
        {"model": "openrouter/x/alpha", "label": "alpha", "won": True, "total_tokens": 1000,
         "turns": 10, "cards": ["beetle", "rat", "raven", "snake"], "outcome": "won"},
        {"model": "openrouter/x/alpha", "label": "alpha", "won": False, "total_tokens": 3000,
         "turns": 30, "cards": ["beetle"], "outcome": "timed_out"},
    ]
    for i, run in enumerate(runs):
        log = Logger(str(tmp_path), f"alpha_{i}", "tools", echo=False)
        log.write_json(run)
        log.close()
    (tmp_path / "broken.json").write_text("{not json")

    loaded = load_runs(str(tmp_path))
    assert len(loaded) == 2

    stats = aggregate(loaded)["alpha"]
    assert stats["runs"] == 2
    assert stats["wins"] == 1
    assert stats["win_pct"] == 50
    assert stats["avg_tokens"] == 2000
    assert stats["avg_cards"] == 2.5
    assert stats["timeouts"] == 1


def test_logger_tees_to_file(tmp_path, capsys):
    log = Logger(str(tmp_path), "some/model name", "tools")
    log.log("hello")
    log.close()
    assert capsys.readouterr().out == "hello\n"
    assert (tmp_path / "some_model_name_tools.log").read_text() == "hello\n"


def test_model_label():
    assert model_label("openrouter/google/gemini-2.5-flash") == "gemini-2.5-flash"
    assert model_label("plain") == "plain"
