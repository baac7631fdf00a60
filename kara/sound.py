"""Sound effects and background music."""

import logging
import os

import pygame

from .defs import SoundId

log = logging.getLogger(__name__)

SOUND_FILES = {
    SoundId.WALK: "166506__yoyodaman234__concrete-footstep-4.ogg",
    SoundId.DOOR: "117415__joedeshon__wooden-door-close.ogg",
    SoundId.CHEST: "391947__ssierra1202__chest-openning-crack.ogg",
    SoundId.COIN: "368203__kermite607__coin-dropped.ogg",
    SoundId.ITEM: "571629__ugila__item-pickup.ogg",
    SoundId.SECRET: "195486__qubodup__nice-game-find.ogg",
    SoundId.CHAT: "273833__alienxxx__micro-clicks-001.ogg",
    SoundId.BAT: "468442__breviceps__video-game-squeak.ogg",
}


class SoundPlayer:
    """Plays the game's sound effects and music through a mixer."""

    def __init__(self, mixer=None):
        self._mixer = mixer if mixer is not None else pygame.mixer
        self._sounds = {}
        self._music = None

    @property
    def music(self):
        """Filename of the loaded music, or None."""
        return self._music

    def load_sounds(self, directory="sound"):
        """Load every sound effect; ones that fail to load stay silent."""
        for sound_id, name in SOUND_FILES.items():
            path = os.path.join(directory, name)
            try:
                self._sounds[sound_id] = self._mixer.Sound(path)
            except (OSError, pygame.error) as exc:
                log.warning("Couldn't load sound %s: %s", path, exc)
                self._sounds[sound_id] = None

    def load_music(self, filename):
        """Replace the current music with ``filename``."""
        if self._music is not None:
            self._mixer.music.stop()
            self._music = None
        try:
            self._mixer.music.load(filename)
        except (OSError, pygame.error) as exc:
            log.warning("Couldn't load music %s: %s", filename, exc)
            return
        self._music = filename

    def play_music(self, loop):
        """Start the loaded music, looping forever if ``loop`` is true."""
        if self._music is not None:
            self._mixer.music.play(-1 if loop else 0)

    def play(self, sound_id, channel=-1):
        """Play a sound effect on ``channel``, or any free channel if negative."""
        sound = self._sounds.get(SoundId(sound_id))
        if sound is None:
            return
        if channel < 0:
            sound.play()
        else:
            self._mixer.Channel(channel).play(sound)