"""Bundle of the collaborators a game session runs against."""

from dataclasses import dataclass, field

from manor_logic.audio import NullAudio
from manor_logic.display import NullDisplay
from manor_logic.player import Player
from manor_logic.timer import Timer


@dataclass
class GameContext:
    timer: Timer
    player: Player = field(default_factory=Player)
    display: NullDisplay = field(default_factory=NullDisplay)
    audio: NullAudio = field(default_factory=NullAudio)
