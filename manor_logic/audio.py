"""Audio sinks. Playback problems never reach the game engine."""

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from manor_logic.world import SoundId

SOUND_FILES = {
    SoundId.MENU_THEME: "menu_theme.wav",
    SoundId.GAME_LOOP: "game_loop.wav",
    SoundId.KEY: "key.wav",
    SoundId.DOOR_BEDROOM: "door_bedroom.wav",
    SoundId.CARD_GAINED: "card_gained.wav",
    SoundId.WIN: "win.wav",
    SoundId.JUMPSCARE: "jumpscare.wav",
}


class NullAudio:
    """Plays nothing. Used headless and in tests."""

    def play_music(self, sound_id: SoundId) -> None:
        pass

    def stop_music(self) -> None:
        pass

    def play_sfx(self, sound_id: SoundId) -> None:
        pass


class AudioManager(NullAudio):
    """Best-effort WAV player on pygame.mixer. Missing files or devices mean silence."""

    def __init__(self, base_dir: str = "assets/audio"):
        self.base_dir = Path(base_dir)
        self.current_music: SoundId | None = None
        self._sfx_cache: dict[SoundId, pygame.mixer.Sound] = {}
        self._ready: bool | None = None

    def _init_mixer(self) -> bool:
        if self._ready is None:
            try:
                if pygame.mixer.get_init() is None:
                    pygame.mixer.init()
                self._ready = True
            except pygame.error:
                self._ready = False
        return self._ready

    def resolve(self, sound_id: SoundId) -> Path | None:
        filename = SOUND_FILES.get(sound_id)
        if filename is None:
            return None
        path = self.base_dir / filename
        return path if path.is_file() else None

    def play_music(self, sound_id: SoundId) -> None:
        if self.current_music == sound_id:
            return
        path = self.resolve(sound_id)
        if path is None or not self._init_mixer():
            return
        self.stop_music()
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops=-1)
            self.current_music = sound_id
        except pygame.error:
            self.current_music = None

    def stop_music(self) -> None:
        if self.current_music is None:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error:
            pass
        finally:
            self.current_music = None

    def play_sfx(self, sound_id: SoundId) -> None:
        path = self.resolve(sound_id)
        if path is None or not self._init_mixer():
            return
        try:
            sound = self._sfx_cache.get(sound_id)
            if sound is None:
                sound = pygame.mixer.Sound(str(path))
                self._sfx_cache[sound_id] = sound
            sound.play()
        except pygame.error:
            pass
