#!/usr/bin/env python3
"""MCP server for The Mad Manor: the terminal side of the game as tools."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mcp.server.fastmcp import FastMCP
from manor_logic.config import load_settings
from manor_logic.session import HeadlessSession

settings = load_settings()
mcp = FastMCP("The Mad Manor")
session = HeadlessSession(settings.time_limit_seconds)


@mcp.tool()
def new_game() -> str:
    """Start over in the foyer with no cards and a fresh timer."""
    global session
    session = HeadlessSession(settings.time_limit_seconds)
    return session.start()


@mcp.tool()
def look() -> str:
    """Look around the current room."""
    return session.execute("look")


@mcp.tool()
def go(room: str) -> str:
    """Move to a neighbouring room: living, hallway, bedroom or kitchen."""
    return session.execute(f"go {room}")


@mcp.tool()
def back() -> str:
    """Step back to the previous room along the route."""
    return session.execute("back")


@mcp.tool()
def act(command: str) -> str:
    """Type any other command, e.g. 'tutorial', 'enter a1', 'set clock 3:30', 'rotate head north', 'light candles'."""
    return session.execute(command)


@mcp.tool()
def inventory() -> str:
    """List carried items and collected cards."""
    return session.execute("inventory")


@mcp.tool()
def cards() -> str:
    """List collected cards."""
    return session.execute("cards")


@mcp.tool()
def help() -> str:
    """Show available commands and the ones that make sense in this room."""
    return session.execute("help")


@mcp.tool()
def status() -> str:
    """Get current game state: room, cards, time left, moves, and outcome."""
    state = session.get_state()
    lines = [
        f"Room: {state['current_room']}",
        f"Cards: {', '.join(state['cards']) or 'none'}",
        f"Inventory: {', '.join(state['inventory']) or 'empty'}",
        f"Time left: {state['remaining_seconds']}s",
        f"Moves: {state['moves']}",
        f"Outcome: {state['outcome']}",
    ]
    return "\n".join(lines)


if __name__ == "__main__":
    mcp.run()
