"""The Mad Manor world definition: rooms, cards, sounds, connections, and puzzle answers."""

from enum import Enum


class Room(Enum):
    FOYER = "foyer"
    LIVING = "living"
    HALLWAY = "hallway"
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    ESCAPE = "escape"


class Card(Enum):
    BEETLE = "beetle"  # foyer tutorial
    RAT = "rat"        # living room grid
    RAVEN = "raven"    # hallway clock
    SNAKE = "snake"    # bedroom bust


class SoundId(Enum):
    MENU_THEME = "menu_theme"
    GAME_LOOP = "game_loop"
    KEY = "key"
    DOOR_BEDROOM = "door_bedroom"
    CARD_GAINED = "card_gained"
    WIN = "win"
    JUMPSCARE = "jumpscare"


class JumpscareId(Enum):
    SHADOW = "shadow"
    SLAM = "slam"
    WHISPER = "whisper"


CARD_TOTAL = len(Card)

GAME_TITLE = "THE MAD MANOR"

ROOMS = {
    Room.FOYER: {
        "name": "Foyer",
        "look": (
            "FOYER: You're a pizza guy who delivered to the wrong house. The air is stale.\n"
            "Ahead, a skeleton and a door to what seems to be a \"living\" room.\n"
            "Try: tutorial | go living"
        ),
        "summary": "You're a pizza guy who delivered to the wrong house.",
        "try": "Try: look | tutorial | go living",
    },
    Room.LIVING: {
        "name": "Living Room",
        "look": (
            "LIVING ROOM: A scuffed floor \"grid\" (3x3) with a loose \"board\". "
            "A dusty \"book\" rests nearby.\n"
            "Ask Player 2 which square of the grid is marked on the map, then: enter <square>"
        ),
        "summary": "A scuffed floor grid and a loose board.",
        "try": "Try: look | enter <square> | back",
    },
    Room.HALLWAY: {
        "name": "Hallway",
        "look": (
            "HALLWAY: Portraits line the walls. A wall \"clock\" with loose hands ticks softly.\n"
            "Doors lead to the \"bedroom\" and the \"kitchen\".\n"
            "You can solve the clock here (ask Player 2 for the time on the map), or explore the rooms."
        ),
        "summary": "Portraits and a ticking clock. Doors lead to the bedroom and the kitchen.",
        "try": "Try: look | set clock h:mm | go bedroom | go kitchen | back",
    },
    Room.BEDROOM: {
        "name": "Bedroom",
        "look": (
            "BEDROOM: A marble \"bust\" on a pedestal. The \"head\" rotates. "
            "A plaque: \"Greet the first light.\""
        ),
        "summary": "A marble bust with a rotating head.",
        "try": "Try: look | rotate head <direction> | back",
    },
    Room.KITCHEN: {
        "name": "Kitchen",
        "look": (
            "KITCHEN: Soot-blackened \"candles\" line the counter. "
            "A faint morse chart is scratched into the wall."
        ),
        "summary": "Soot-blackened candles. A faint morse chart scratched into the wall.",
        "try": "Try: look | light candles | back",
    },
    Room.ESCAPE: {
        "name": "Main Door",
        "look": "Night air floods in. Freedom!",
        "summary": "Night air floods in. Freedom!",
        "try": "",
    },
}

# Forward moves allowed by `go`; the hallway gate is checked by the engine.
EXITS = {
    Room.FOYER: (Room.LIVING,),
    Room.LIVING: (Room.HALLWAY,),
    Room.HALLWAY: (Room.BEDROOM, Room.KITCHEN),
    Room.BEDROOM: (Room.HALLWAY,),
    Room.KITCHEN: (Room.HALLWAY,),
}

# Strict predecessor along the route; anything not listed goes back to the foyer.
BACK = {
    Room.LIVING: Room.FOYER,
    Room.HALLWAY: Room.LIVING,
    Room.BEDROOM: Room.HALLWAY,
    Room.KITCHEN: Room.HALLWAY,
}

# Answers Player 2 reads off the diorama
LIVING_ANSWER = "b3"
CLOCK_ANSWER = "9:15"
BUST_ANSWER = "head east"

KITCHEN_MESSAGE = "“SEARCH BENEATH THE BUST, LEFT FRONT.”"

# Items lying around that can be picked up
ITEMS = {
    "pizza_box": {
        "name": "pizza box",
        "description": "A lukewarm pepperoni pizza. The order slip reads '13 Mortlake Lane'. This is 31.",
        "points": 5,
        "location": Room.FOYER,
    },
    "book": {
        "name": "dusty book",
        "description": "Someone underlined two letters and a digit in pencil: 'B ... then 3'.",
        "points": 10,
        "location": Room.LIVING,
    },
}

# Shown by `help` in the menu
SETUP_TEXT = (
    "Two-player setup:\n"
    "- Player 1: terminal (you)\n"
    "- Player 2: physical diorama/map\n"
    "Talk to each other with the walkie talkies. The path is linear until the hallway, "
    "then choose the bedroom or the kitchen. The hallway clock is solved in place."
)

INTRO_TEXT = (
    f"{GAME_TITLE}\n\n"
    "You and your buddy delivered pizza to the WRONG house...\n\n"
    f"Find all {CARD_TOTAL} cards to put together the riddle, and the front door will let you go."
)

COMMANDS_TEXT = (
    "Commands: look | inspect <x> | pickup <x> | inventory | cards | enter <ans> | "
    "set clock h:mm | rotate head <dir> | light candles | go <room> | back | help | quit"
)

JUMPSCARE_ART = {
    JumpscareId.SHADOW: (
        "   .-.\n"
        "  (o o)   A shadow flickers,\n"
        "   |O|    too close.\n"
        "   | |"
    ),
    JumpscareId.SLAM: (
        "+---------+\n"
        "|  BANG!  |\n"
        "+---------+"
    ),
    JumpscareId.WHISPER: (
        "  ~ ~ ~\n"
        " ( sss )  A whisper brushes your ear.\n"
        "  ~ ~ ~"
    ),
}

TIMEOUT_TEXT = "Time's up! The mansion swallows the light..."
WIN_TEXT = "The main door groans open, your cards resonate in the stone. YOU ESCAPE!"
FAREWELL_TEXT = "Thanks for playing!"
