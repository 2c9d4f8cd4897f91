"""Tone cues for wall bounces and paddle hits.

Sounds are synthesized with numpy the first time a (pitch, duration) pair
is asked for, so the game ships without audio files.
"""
import logging
import re
from typing import Dict, Protocol, Tuple

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
VOLUME_DB = -10.0
THIRTY_SECOND = 0.0625  # seconds, a 32nd note at 120 bpm

WALL_CUE = ("C4", THIRTY_SECOND)
PADDLE_CUE = ("E4", THIRTY_SECOND)

_SEMITONES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d)$")


def note_to_frequency(note: str) -> float:
    """Equal-tempered frequency of a scientific-pitch note name, A4 = 440 Hz."""
    m = _NOTE_RE.match(note)
    if not m:
        raise ValueError(f"not a note name: {note!r}")
    letter, accidental, octave = m.groups()
    semitone = _SEMITONES[letter.upper()] + {"#": 1, "b": -1, "": 0}[accidental]
    midi = 12 * (int(octave) + 1) + semitone
    return 440.0 * 2 ** ((midi - 69) / 12)


def synth_wave(freq: float, duration: float, sample_rate: int = SAMPLE_RATE, volume_db: float = VOLUME_DB) -> np.ndarray:
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    # triangle oscillator with a percussive decay
    wave = 2 * np.abs(2 * (t * freq - np.floor(t * freq + 0.5))) - 1
    wave *= np.exp(-6 * t / max(duration, 1e-6))
    wave *= 10 ** (volume_db / 20)
    return np.int16(wave * 32767)


class AudioSink(Protocol):
    def trigger(self, pitch: str, duration: float) -> None: ...


class NullAudio:
    def trigger(self, pitch, duration):
        pass


class ToneAudio:
    def __init__(self, sample_rate: int = SAMPLE_RATE, channels: int = 2):
        self.sample_rate = sample_rate
        self.channels = channels
        self._cache: Dict[Tuple[str, float], pygame.mixer.Sound] = {}

    def sound(self, pitch: str, duration: float) -> pygame.mixer.Sound:
        key = (pitch, duration)
        if key not in self._cache:
            wave = synth_wave(note_to_frequency(pitch), duration, self.sample_rate)
            if self.channels > 1:
                wave = np.column_stack([wave] * self.channels)
            self._cache[key] = pygame.sndarray.make_sound(np.ascontiguousarray(wave))
        return self._cache[key]

    def trigger(self, pitch, duration):
        self.sound(pitch, duration).play()


def open_audio(muted: bool = False) -> AudioSink:
    if muted:
        logger.info("Audio muted")
        return NullAudio()
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init(SAMPLE_RATE, -16, 2, 512)
    except pygame.error as e:
        logger.warning("Audio unavailable, continuing without sound: %s", e)
        return NullAudio()
    freq, _, channels = pygame.mixer.get_init()
    audio = ToneAudio(freq, channels)
    # warm the cache so the first hit doesn't stall a frame
    for pitch, duration in (WALL_CUE, PADDLE_CUE):
        audio.sound(pitch, duration)
    logger.info("Audio ready (%d Hz, %d channels)", freq, channels)
    return audio
