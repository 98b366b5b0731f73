#!/usr/bin/env python3
"""Playtest harness: an LLM plays the terminal side of the manor and the run is recorded."""

import argparse
import json
import os
import sys
from datetime import datetime

import yaml
from dotenv import load_dotenv
import litellm

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from manor_logic.config import load_settings
from manor_logic.logger import Logger
from playtest.tool_runner import ToolRunner, TOOL_SCHEMAS

# Load .env from project root
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

SYSTEM_PROMPT = """\
You are Player 1 in a two-player escape room called The Mad Manor.
Your goal: collect all four cards (beetle, rat, raven, snake) before the timer runs out.
The front door opens by itself the moment you hold all four.

Player 2 holds a physical diorama of the house and has radioed you what it shows:
- The map of the living room floor has square B3 circled.
- The little clock in the diorama hallway reads 9:15.
- The marble bust in the diorama bedroom faces the sunrise.

You have tools available to explore and interact with the manor:
- look: examine the current room
- go: move to a neighbouring room
- back: step back along the route
- act: type any other command (tutorial, enter <square>, set clock h:mm, rotate head <dir>, light candles, ...)
- inventory: check carried items and cards

Use the tools to move through the house and solve the puzzles.
If you are stuck, respond with: GIVE_UP
"""

NUDGE = "Use the available tools to interact with the game."

MODE = "tools"
DEFAULT_MAX_TURNS = 150


def parse_tool_calls(message) -> list[tuple[str, str, dict]]:
    """(call id, tool name, arguments) for every tool call in a model reply.

    Arguments that are not a JSON object are replaced by an empty dict.
    """
    calls = []
    for tc in message.tool_calls or []:
        try:
            arguments = json.loads(tc.function.arguments or "{}")
        except json.JSONDecodeError:
            arguments = {}
        if not isinstance(arguments, dict):
            arguments = {}
        calls.append((tc.id, tc.function.name, arguments))
    return calls


def run_playtest(model: str, token_limit: int, time_limit: int, log: Logger,
                 max_turns: int = DEFAULT_MAX_TURNS) -> dict:
    runner = ToolRunner(time_limit)
    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": f"Game started. You are in the foyer.\n\n{runner.start()}"},
    ]

    prompt_tokens = completion_tokens = turns = 0
    commands = []
    stop = None

    log.log(f"=== Playtest: {model} ===")
    log.log(f"Limits: {token_limit} tokens, {max_turns} turns, {time_limit}s on the clock")
    log.log()

    while stop is None:
        if prompt_tokens + completion_tokens >= token_limit:
            stop = "token_limit"
            log.log(f"[TOKEN LIMIT HIT: {prompt_tokens + completion_tokens}]")
            break
        if turns >= max_turns:
            stop = "turn_limit"
            log.log(f"[TURN LIMIT HIT: {turns}]")
            break

        try:
            response = litellm.completion(
                model=model,
                messages=messages,
                tools=TOOL_SCHEMAS,
                temperature=0,
                max_tokens=200,
            )
        except Exception as e:
            stop = "api_error"
            log.log(f"[API ERROR: {e}]")
            break

        turns += 1
        prompt_tokens += response.usage.prompt_tokens
        completion_tokens += response.usage.completion_tokens
        log.log(f"[Turn {turns}] total tokens: {prompt_tokens + completion_tokens}")

        message = response.choices[0].message
        calls = parse_tool_calls(message)

        if not calls:
            content = (message.content or "").strip()
            log.log(f"  LLM: {content or '(empty)'}")
            if "GIVE_UP" in content.upper():
                stop = "gave_up"
                log.log("  [MODEL GAVE UP]")
                break
            messages.append({"role": "assistant", "content": content})
            messages.append({"role": "user", "content": NUDGE})
            continue

        messages.append(message.model_dump())
        for call_id, name, arguments in calls:
            result = runner.execute_tool(name, arguments)
            commands.append({"tool": name, "args": arguments})
            log.log(f"  TOOL: {name}({arguments})")
            log.log(f"  OUT:  {result[:200]}")
            messages.append({"role": "tool", "tool_call_id": call_id, "content": result})
            if runner.check_over():
                stop = "escaped" if runner.check_win() else "game_over"
                log.log("\n  *** ESCAPED ***" if stop == "escaped" else "\n  *** GAME OVER ***")
                break

    result = {
        "model": model,
        "mode": MODE,
        "won": stop == "escaped",
        "gave_up": stop == "gave_up",
        "stop_reason": stop,
        "total_tokens": prompt_tokens + completion_tokens,
        "prompt_tokens": prompt_tokens,
        "completion_tokens": completion_tokens,
        "turns": turns,
        "commands": commands,
        "timestamp": datetime.now().isoformat(),
    }
    state = runner.session.get_state()
    result.update(outcome=state["outcome"], cards=state["cards"], moves=state["moves"])
    _log_summary(log, result)
    return result


def _log_summary(log: Logger, result: dict):
    log.log()
    log.log("=== Results ===")
    for key in ("model", "won", "gave_up", "stop_reason", "outcome", "moves", "total_tokens", "turns"):
        log.log(f"  {key + ':':<14}{result[key]}")
    log.log(f"  {'cards:':<14}{len(result['cards'])}/4 {', '.join(result['cards'])}")
    log.log(f"  {'log:':<14}{log.path}")


def record_run(model: str, label: str, log_dir: str, token_limit: int, time_limit: int,
               max_turns: int = DEFAULT_MAX_TURNS) -> dict:
    """Play one run and write its `.log` and `.json` files under log_dir."""
    log = Logger(log_dir, label, MODE)
    try:
        result = run_playtest(model, token_limit, time_limit, log, max_turns)
        result["label"] = label
        log.write_json(result)
    finally:
        log.close()
    return result


def print_comparison(results: list[dict]):
    print(f"\n{'='*72}")
    print("  PLAYTEST COMPARISON")
    print(f"{'='*72}")
    print(f"  {'Model':<24} {'Result':<12} {'Cards':<6} {'Tokens':>8} {'Turns':>6}")
    for r in results:
        verdict = "ESCAPED" if r["won"] else (r.get("stop_reason") or r["outcome"]).upper()
        print(f"  {r.get('label', r['model']):<24} {verdict:<12} {len(r['cards'])}/4    "
              f"{r['total_tokens']:>8} {r['turns']:>6}")


def load_models(models_file: str) -> list[dict]:
    with open(models_file) as f:
        data = yaml.safe_load(f) or {}
    return data.get("models", [])


def main(argv: list[str] | None = None):
    project_root = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..")

    parser = argparse.ArgumentParser(description="Run an LLM playtest of The Mad Manor")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--model", help="Single model name (e.g. openrouter/openai/gpt-oss-120b)")
    group.add_argument("--all", action="store_true", help="Run all models from models.yaml")
    parser.add_argument("--models-file", default=os.path.join(project_root, "models.yaml"),
                        help="Path to models.yaml")
    parser.add_argument("--token-limit", type=int, default=50000, help="Max total tokens before stopping")
    parser.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS, help="Max model replies per run")
    parser.add_argument("--time-limit", type=int, default=None, help="Game timer in seconds (default: settings)")
    parser.add_argument("--log-dir", default=os.path.join(project_root, "playtest", "logs"),
                        help="Directory for log files")
    args = parser.parse_args(argv)

    time_limit = args.time_limit
    if time_limit is None:
        time_limit = load_settings().time_limit_seconds

    if args.all:
        entries = load_models(args.models_file)
        if not entries:
            print(f"ERROR: No models found in {args.models_file}")
            sys.exit(1)
    else:
        entries = [{"name": args.model}]

    results = []
    for entry in entries:
        label = entry.get("label", entry["name"])
        print(f"\n--- {label} ({entry['name']}) ---\n")
        results.append(record_run(entry["name"], label, args.log_dir, args.token_limit,
                                  time_limit, args.max_turns))
    print_comparison(results)


if __name__ == "__main__":
    main()
