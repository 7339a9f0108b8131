"""
Generated sound effects.

No audio assets ship with the game: the sword and grunt sounds are short
sine tones built at startup. Without an audio device the bank is empty and
play() does nothing.
"""

import array
import logging
import math
from typing import Dict

import pygame


logger = logging.getLogger("code_knight.audio")

SAMPLE_RATE = 22050

# name -> (frequency Hz, duration s, volume 0..1)
TONES = {
    "attack": (520, 0.06, 0.35),  # sword
    "hurt": (140, 0.18, 0.4),     # grunt
}


def generate_tone(frequency: int, duration: float, volume: float) -> pygame.mixer.Sound:
    """Sine tone matching the mixer's sample rate and channel count (mixer must be initialised)."""
    sample_rate, _, channels = pygame.mixer.get_init()
    total_samples = int(sample_rate * duration)
    amplitude = int(32767 * volume)
    buffer = array.array("h")
    for i in range(total_samples):
        sample = int(amplitude * math.sin(2 * math.pi * frequency * (i / sample_rate)))
        buffer.extend([sample] * channels)
    return pygame.mixer.Sound(buffer=buffer.tobytes())


class SoundBank:
    """Named sounds; silently empty when audio is unavailable or disabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        if enabled:
            self._load()

    def _load(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            for name, (freq, duration, volume) in TONES.items():
                self.sounds[name] = generate_tone(freq, duration, volume)
        except pygame.error as e:
            # gracefully degrade when audio is unavailable
            logger.warning("Audio disabled: %s", e)
            self.sounds = {}

    @property
    def available(self) -> bool:
        return bool(self.sounds)

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            # Restart from the top if it is still playing.
            sound.stop()
            sound.play()
