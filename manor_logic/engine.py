"""Core game engine: room/puzzle state machine. All output goes through the context sinks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from manor_logic.context import GameContext
from manor_logic.parser import Command, parse
from manor_logic.player import Item
from manor_logic.world import (
    BACK,
    BUST_ANSWER,
    CARD_TOTAL,
    CLOCK_ANSWER,
    COMMANDS_TEXT,
    EXITS,
    FAREWELL_TEXT,
    ITEMS,
    KITCHEN_MESSAGE,
    LIVING_ANSWER,
    ROOMS,
    SETUP_TEXT,
    TIMEOUT_TEXT,
    WIN_TEXT,
    Card,
    JumpscareId,
    Room,
    SoundId,
)

MENU_PROMPT = "\n[Menu] Type 'play', 'help', or 'quit': "
GAME_PROMPT = "\n> "


class Outcome(Enum):
    PLAYING = "playing"
    WON = "won"
    TIMED_OUT = "timed_out"
    QUIT = "quit"


@dataclass
class PuzzleState:
    solved: bool = False


@dataclass
class KitchenState:
    hint_given: bool = False
    jumpscare_used: bool = False


@dataclass
class RoomStates:
    living: PuzzleState = field(default_factory=PuzzleState)
    clock: PuzzleState = field(default_factory=PuzzleState)
    bedroom: PuzzleState = field(default_factory=PuzzleState)
    kitchen: KitchenState = field(default_factory=KitchenState)


class GameEngine:
    def __init__(self, ctx: GameContext):
        self.ctx = ctx
        self.current_room = Room.FOYER
        self.rooms = RoomStates()
        self.moves = 0
        self.started = False
        self.outcome = Outcome.PLAYING

        self._globals = {
            "quit": self._quit,
            "help": self._help,
            "inventory": self._inventory,
            "inv": self._inventory,
            "bag": self._inventory,
            "cards": self._cards,
            "back": self._back,
            "go": self._go,
            "pickup": self._pickup,
            "take": self._pickup,
            "inspect": self._inspect,
            "examine": self._inspect,
        }
        self._handlers = {
            Room.FOYER: self._foyer,
            Room.LIVING: self._living,
            Room.HALLWAY: self._hallway,
            Room.BEDROOM: self._bedroom,
            Room.KITCHEN: self._kitchen,
            Room.ESCAPE: self._escape_room,
        }

    @property
    def display(self):
        return self.ctx.display

    @property
    def audio(self):
        return self.ctx.audio

    @property
    def player(self):
        return self.ctx.player

    @property
    def timer(self):
        return self.ctx.timer

    @property
    def room_title(self) -> str:
        room = ROOMS.get(self.current_room)
        return room["name"] if room else "Unknown"

    def is_over(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    def is_won(self) -> bool:
        return self.outcome is Outcome.WON

    def get_state(self) -> dict:
        return {
            "current_room": getattr(self.current_room, "value", str(self.current_room)),
            "cards": [c.value for c in Card if c in self.player.cards],
            "inventory": [i.id for i in self.player.inventory],
            "points": self.player.inventory.points,
            "solved": {
                "living": self.rooms.living.solved,
                "clock": self.rooms.clock.solved,
                "bedroom": self.rooms.bedroom.solved,
            },
            "kitchen_hint_given": self.rooms.kitchen.hint_given,
            "moves": self.moves,
            "remaining_seconds": self.timer.remaining_seconds,
            "outcome": self.outcome.value,
        }

    # -- session flow --

    def run(self, read_line: Callable[[str], str] = input) -> Outcome:
        """Menu phase, then the input loop until escape, timeout or quit."""
        if not self.run_menu(read_line):
            return self.outcome

        self.start()
        while not self.is_over():
            try:
                raw = read_line(GAME_PROMPT)
            except EOFError:
                raw = "quit"
            self.step(raw)
        return self.outcome

    def run_menu(self, read_line: Callable[[str], str] = input) -> bool:
        """Returns True once the player types 'play'. The timer is not running yet."""
        self.display.clear()
        self.display.show_intro()
        self.audio.play_music(SoundId.MENU_THEME)

        while True:
            try:
                choice = read_line(MENU_PROMPT)
            except EOFError:
                choice = "quit"
            choice = choice.strip().lower()

            if choice == "play":
                return True

            if choice == "help":
                self.display.type(SETUP_TEXT)
                continue

            if choice == "quit":
                self.display.type("Goodbye!")
                self.audio.stop_music()
                self.outcome = Outcome.QUIT
                return False

            self.display.toast("Unknown option. Type 'play', 'help', or 'quit'.")

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        self.timer.start()
        self.audio.play_music(SoundId.GAME_LOOP)
        self._redraw()
        self.describe_room()

    def step(self, raw: str) -> Outcome:
        """Run one input cycle. Does nothing once the session has ended."""
        if self.is_over():
            return self.outcome
        if not self.started:
            self.start()

        command = parse(raw)
        self.moves += 1
        self._redraw()

        if self.timer.expired:
            self._time_up()
            return self.outcome

        handler = self._globals.get(command.verb)
        if handler is not None:
            handler(command.noun)
            return self.outcome

        room_handler = self._handlers.get(self.current_room, self._lost)
        room_handler(command)
        if self.is_over():
            return self.outcome

        # A card awarded by the handler above can complete the set
        if self.player.has_all_cards() and self.current_room is not Room.ESCAPE:
            self._escape()
        return self.outcome

    def describe_room(self) -> None:
        room = ROOMS.get(self.current_room)
        if room is None:
            self.display.type("Dust and darkness.")
            return
        self.display.type(room["name"] + ":")
        self.display.type(room["summary"])
        if room["try"]:
            self.display.type(room["try"])

    def _redraw(self) -> None:
        self.display.clear()
        self.display.frame(self.room_title, self.timer.remaining_seconds, self.player.card_count, CARD_TOTAL)

    def _finish(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.timer.stop()
        self.audio.stop_music()

    def _time_up(self) -> None:
        self.display.type(TIMEOUT_TEXT)
        self.display.type("GAME OVER")
        self._finish(Outcome.TIMED_OUT)

    def _escape(self) -> None:
        self.current_room = Room.ESCAPE
        self._finish(Outcome.WON)
        self.audio.play_sfx(SoundId.WIN)
        self.display.type(WIN_TEXT)

    def _award(self, card: Card) -> bool:
        if not self.player.add_card(card):
            return False
        self.audio.play_sfx(SoundId.CARD_GAINED)
        return True

    def _enter(self, room: Room) -> None:
        self.current_room = room
        if room is Room.BEDROOM:
            self.audio.play_sfx(SoundId.DOOR_BEDROOM)

    # -- global commands --

    def _quit(self, _noun: str) -> None:
        self.display.type(FAREWELL_TEXT)
        self._finish(Outcome.QUIT)

    def _help(self, _noun: str) -> None:
        self.display.type(COMMANDS_TEXT)
        room = ROOMS.get(self.current_room)
        if room and room["try"]:
            self.display.hint(room["try"])

    def _inventory(self, _noun: str) -> None:
        self.display.type(self.player.inventory.list_all())
        self.display.type(self.player.cards_listing())

    def _cards(self, _noun: str) -> None:
        self.display.type(self.player.cards_listing())

    def _back(self, _noun: str) -> None:
        self.current_room = BACK.get(self.current_room, Room.FOYER)
        self.describe_room()

    def _go(self, target: str) -> None:
        exits = EXITS.get(self.current_room)
        if exits is None:
            self.display.toast("You hesitate, unsure of the way.")
        elif (self.current_room is Room.LIVING and target == Room.HALLWAY.value
              and not self.rooms.living.solved):
            self.display.hint("The way forward is blocked. Solve the living room first.")
        else:
            dest = next((r for r in exits if r.value == target), None)
            if dest is None:
                choices = " | ".join(f"go {r.value}" for r in exits)
                self.display.toast(f"From the {self.room_title}, you can: {choices} | back")
            else:
                self._enter(dest)
        self.describe_room()

    def _find_item(self, name: str) -> str | None:
        for item_id, data in ITEMS.items():
            if name in (item_id, data["name"]) or data["name"].endswith(" " + name):
                return item_id
        return None

    def _pickup(self, name: str) -> None:
        if not name:
            self.display.toast("Pick up what?")
            return

        item_id = self._find_item(name)
        if item_id is not None and self.player.has_item(item_id):
            self.display.hint(f"You already have the {ITEMS[item_id]['name']}.")
            return
        if item_id is None or ITEMS[item_id]["location"] is not self.current_room:
            self.display.toast(f"There's no '{name}' here to pick up.")
            return

        data = ITEMS[item_id]
        self.player.give_item(Item(item_id, data["name"], data["description"], data["points"]))
        self.display.type(f"You pick up the {data['name']}.")

    def _inspect(self, name: str) -> None:
        if not name:
            self.display.toast("Inspect what?")
            return

        item_id = self._find_item(name)
        if item_id is not None and (self.player.has_item(item_id)
                                    or ITEMS[item_id]["location"] is self.current_room):
            data = ITEMS[item_id]
            self.display.type(f"{data['name'].capitalize()}: {data['description']}")
            return
        self.display.hint("You see nothing special.")

    # -- room handlers --

    def _lost(self, _command: Command) -> None:
        self.display.toast("You feel... lost? (unknown room)")

    def _escape_room(self, _command: Command) -> None:
        self._finish(Outcome.WON)
        self.audio.play_sfx(SoundId.WIN)
        self.display.type(ROOMS[Room.ESCAPE]["look"])

    def _foyer(self, command: Command) -> None:
        if command.verb == "look":
            self.display.type(ROOMS[Room.FOYER]["look"])
            return

        if command.verb == "tutorial":
            if self._award(Card.BEETLE):
                self.display.type("Player 2 hands you a carved \"beetle\" card.")
            else:
                self.display.hint("You already took the tutorial card.")
            return

        self.display.hint(ROOMS[Room.FOYER]["try"])

    def _living(self, command: Command) -> None:
        state = self.rooms.living

        if command.verb == "look":
            self.display.type(ROOMS[Room.LIVING]["look"])
            return

        if command.verb == "enter":
            if command.noun == LIVING_ANSWER:
                if not state.solved:
                    state.solved = True
                    self.audio.play_sfx(SoundId.KEY)
                    self._award(Card.RAT)
                    self.display.type(
                        "You lift the board at B3. A recess holds a \"rat\" card. "
                        "Doors creak open toward the hallway."
                    )
                else:
                    self.display.hint("Already solved. Try: go hallway")
                return
            self.display.hint("Wrong spot. Hint in the \"book\": B then 3.")
            return

        self.display.hint("Try: go hallway" if state.solved else ROOMS[Room.LIVING]["try"])

    def _hallway(self, command: Command) -> None:
        if not self.rooms.living.solved:
            self.display.hint("The hallway latch won't budge yet. Solve the living room first.")
            self.current_room = Room.LIVING
            self.describe_room()
            return

        state = self.rooms.clock

        if command.verb == "look":
            self.display.type(ROOMS[Room.HALLWAY]["look"])
            return

        if command.verb == "set":
            if command.noun.startswith("clock "):
                time = command.noun[len("clock "):].strip()
                if time == CLOCK_ANSWER:
                    if not state.solved:
                        state.solved = True
                        self._award(Card.RAVEN)
                        self.display.type(
                            "Gears catch; a narrow recess opens in the hallway panel. "
                            "You take the \"raven\" card."
                        )
                    else:
                        self.display.hint("The hallway clock is already set. Maybe check the bedroom or kitchen.")
                    return
                self.display.hint("The hands slip back. Ask Player 2 for the time on the diorama clock.")
                return
            self.display.hint("Usage: set clock h:mm (e.g., set clock 12:00)")
            return

        self.display.hint(ROOMS[Room.HALLWAY]["try"])

    def _bedroom(self, command: Command) -> None:
        state = self.rooms.bedroom

        if command.verb == "look":
            self.display.type(ROOMS[Room.BEDROOM]["look"])
            return

        if command.verb == "rotate":
            if command.noun == BUST_ANSWER:
                if not state.solved:
                    state.solved = True
                    self._award(Card.SNAKE)
                    self.display.type("Stone clicks; an alcove opens. You take the \"snake\" card.")
                else:
                    self.display.hint("Already solved. Type 'back' to return to the hallway.")
                return
            self.display.hint("Usage: rotate head <north|east|south|west>. The plaque says: greet the first light.")
            return

        self.display.hint(ROOMS[Room.BEDROOM]["try"])

    def _kitchen(self, command: Command) -> None:
        state = self.rooms.kitchen

        if command.verb == "look":
            self.display.type(ROOMS[Room.KITCHEN]["look"])
            self.display.type("Something about these candles feels staged.")
            return

        # False puzzle: never a card, only the pointer back to the bedroom
        if command.verb == "light":
            if command.noun.startswith("candles"):
                if not state.hint_given:
                    if not state.jumpscare_used:
                        state.jumpscare_used = True
                        self.audio.play_sfx(SoundId.JUMPSCARE)
                        self.display.show_jumpscare(JumpscareId.WHISPER, 500)
                    state.hint_given = True
                    self.display.type("The flames gutter and reveal a greasy message along the backsplash:")
                    self.display.hint(KITCHEN_MESSAGE)
                    self.display.type("(Head back to the bedroom.)")
                else:
                    self.display.hint(f"The message is already visible: {KITCHEN_MESSAGE}")
                return
            self.display.hint("Usage: light candles")
            return

        self.display.hint(ROOMS[Room.KITCHEN]["try"])
