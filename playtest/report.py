#!/usr/bin/env python3
"""Generate aggregate report from all playtest JSON logs."""

import json
import os
import sys
from collections import defaultdict


def load_runs(log_dir: str) -> list[dict]:
    """Load all JSON run files from the log directory."""
    runs = []
    for fname in sorted(os.listdir(log_dir)):
        if not fname.endswith(".json"):
            continue
        path = os.path.join(log_dir, fname)
        try:
            with open(path) as f:
                data = json.load(f)
            # Must have required fields
            if "model" in data and "won" in data and "total_tokens" in data:
                data["_file"] = fname
                runs.append(data)
        except (OSError, json.JSONDecodeError):
            continue
    return runs


def model_label(model: str) -> str:
    """Extract a short label from a model name like openrouter/google/gemini-2.5-flash."""
    parts = model.split("/")
    return parts[-1] if parts else model


def aggregate(runs: list[dict]) -> dict[str, dict]:
    """Per-label totals: runs, wins, win rate, token and turn averages, average cards found."""
    grouped = defaultdict(list)
    for r in runs:
        grouped[r.get("label", model_label(r["model"]))].append(r)

    stats = {}
    for label, entries in grouped.items():
        n = len(entries)
        wins = sum(1 for e in entries if e["won"])
        tokens = [e["total_tokens"] for e in entries]
        stats[label] = {
            "runs": n,
            "wins": wins,
            "win_pct": wins / n * 100,
            "avg_tokens": sum(tokens) / n,
            "min_tokens": min(tokens),
            "max_tokens": max(tokens),
            "avg_turns": sum(e.get("turns", 0) for e in entries) / n,
            "avg_cards": sum(len(e.get("cards", [])) for e in entries) / n,
            "timeouts": sum(1 for e in entries if e.get("outcome") == "timed_out"),
        }
    return stats


def generate_report(log_dir: str):
    runs = load_runs(log_dir)
    if not runs:
        print("No playtest runs found.")
        return

    stats = aggregate(runs)

    print()
    print("=" * 100)
    print("  PLAYTEST REPORT")
    print("=" * 100)
    print()

    header = (
        f"  {'Model':<28} {'Runs':>4} {'Wins':>4} {'Win%':>5} {'Cards':>6} {'T/O':>4}"
        f" {'Avg Tok':>8} {'Min Tok':>8} {'Max Tok':>8} {'Avg Turns':>10}"
    )
    print(header)
    print("  " + "-" * (len(header) - 2))

    for label in sorted(stats):
        s = stats[label]
        print(
            f"  {label:<28} {s['runs']:>4} {s['wins']:>4} {s['win_pct']:>4.0f}% {s['avg_cards']:>6.1f}"
            f" {s['timeouts']:>4} {s['avg_tokens']:>8.0f} {s['min_tokens']:>8} {s['max_tokens']:>8}"
            f" {s['avg_turns']:>10.1f}"
        )

    total_runs = len(runs)
    total_wins = sum(1 for r in runs if r["won"])
    total_tokens = sum(r["total_tokens"] for r in runs)
    print("  " + "-" * (len(header) - 2))
    print(f"  Total runs: {total_runs}   Total escapes: {total_wins}   Total tokens: {total_tokens:,}")

    # Leaderboard: best avg tokens among winners only
    print()
    print("  LEADERBOARD (avg tokens to escape, winners only)")
    print("  " + "-" * 50)

    leaderboard = []
    for label in stats:
        winners = [r for r in runs if r.get("label", model_label(r["model"])) == label and r["won"]]
        if not winners:
            continue
        avg = sum(e["total_tokens"] for e in winners) / len(winners)
        leaderboard.append((avg, label, len(winners)))

    leaderboard.sort()
    for i, (avg, label, n) in enumerate(leaderboard, 1):
        print(f"  {i}. {label:<28} {avg:>8.0f} avg tokens  ({n} escapes)")

    print()


def main():
    script_dir = os.path.dirname(os.path.abspath(__file__))
    log_dir = sys.argv[1] if len(sys.argv) > 1 else os.path.join(script_dir, "logs")

    if not os.path.isdir(log_dir):
        print(f"ERROR: Log directory not found: {log_dir}")
        sys.exit(1)

    generate_report(log_dir)


if __name__ == "__main__":
    main()
