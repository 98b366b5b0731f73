"""Tool runner: wraps a headless manor session as tool-callable functions for litellm tool calling."""

from manor_logic.session import HeadlessSession

# OpenAI function-calling tool schemas
TOOL_SCHEMAS = [
    {
        "type": "function",
        "function": {
            "name": "look",
            "description": "Examine the current room.",
            "parameters": {"type": "object", "properties": {}, "required": []},
        },
    },
    {
        "type": "function",
        "function": {
            "name": "go",
            "description": "Move to a neighbouring room.",
            "parameters": {
                "type": "object",
                "properties": {
                    "room": {
                        "type": "string",
                        "description": "The room to move to",
                        "enum": ["living", "hallway", "bedroom", "kitchen"],
                    }
                },
                "required": ["room"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "back",
            "description": "Step back to the previous room along the route.",
            "parameters": {"type": "object", "properties": {}, "required": []},
        },
    },
    {
        "type": "function",
        "function": {
            "name": "act",
            "description": "Type any other game command, e.g. 'tutorial', 'enter a1', 'set clock 3:30', "
                           "'rotate head north', 'light candles', 'pickup book', 'inspect book'.",
            "parameters": {
                "type": "object",
                "properties": {
                    "command": {
                        "type": "string",
                        "description": "The full command line to type",
                    }
                },
                "required": ["command"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "inventory",
            "description": "Check carried items and collected cards.",
            "parameters": {"type": "object", "properties": {}, "required": []},
        },
    },
]


class ToolRunner:
    def __init__(self, time_limit_seconds: int = 480):
        self.time_limit_seconds = time_limit_seconds
        self.session = HeadlessSession(time_limit_seconds)

    def start(self) -> str:
        """Return the opening frame and room description."""
        return self.session.start()

    def execute_tool(self, tool_name: str, arguments: dict) -> str:
        """Execute a tool call against the session. Returns the text the game showed."""
        if tool_name == "look":
            return self.session.execute("look")
        elif tool_name == "go":
            room = arguments.get("room", "")
            return self.session.execute(f"go {room}")
        elif tool_name == "back":
            return self.session.execute("back")
        elif tool_name == "act":
            command = arguments.get("command", "")
            return self.session.execute(str(command))
        elif tool_name == "inventory":
            return self.session.execute("inventory")
        else:
            return f"Unknown tool: '{tool_name}'"

    def check_win(self) -> bool:
        return self.session.is_won()

    def check_over(self) -> bool:
        return self.session.is_over()

    def reset(self):
        self.session = HeadlessSession(self.time_limit_seconds)
