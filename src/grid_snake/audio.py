"""Procedural chime cues for Grid Snake, played through pygame.mixer."""

from __future__ import annotations

import logging
import math
from array import array
from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

logger = logging.getLogger(__name__)


# ===========================
#  Tone Configuration
# ===========================


@dataclass(frozen=True)
class Tone:
    freq: float
    duration_ms: int
    waveform: str = "sine"  # "sine", "square", "triangle", "sawtooth"
    volume: float = 0.08
    delay_ms: int = 0
    release_ms: int = 12


Chime = Tuple[Tone, ...]

CHIMES: Dict[str, Chime] = {
    "eat": (
        Tone(520, 60, "square", 0.12),
        Tone(750, 80, "square", 0.10, delay_ms=70),
    ),
    "start": (
        Tone(300, 60, "triangle", 0.08),
        Tone(500, 80, "triangle", 0.08, delay_ms=80),
    ),
    "pause": (Tone(280, 80, "triangle", 0.08),),
    "resume": (Tone(700, 80, "triangle", 0.08),),
    "over": (
        Tone(480, 160, "sawtooth", 0.10),
        Tone(360, 160, "sawtooth", 0.10, delay_ms=170),
        Tone(240, 220, "sawtooth", 0.09, delay_ms=330),
    ),
}


def _wave(waveform: str, cycle_pos: float) -> float:
    if waveform == "square":
        return 1.0 if cycle_pos < 0.5 else -1.0
    if waveform == "triangle":
        return 4.0 * abs(cycle_pos - 0.5) - 1.0
    if waveform == "sawtooth":
        return 2.0 * cycle_pos - 1.0
    return math.sin(2.0 * math.pi * cycle_pos)


def render_chime(chime: Chime, sample_rate: int) -> array:
    """Mix the tones of ``chime`` at their offsets into signed 16-bit mono."""

    end_ms = max(tone.delay_ms + tone.duration_ms for tone in chime)
    total = max(1, int(sample_rate * end_ms / 1000))
    samples = [0.0] * total

    for tone in chime:
        start = int(sample_rate * tone.delay_ms / 1000)
        count = max(1, int(sample_rate * tone.duration_ms / 1000))
        release = min(count, int(sample_rate * tone.release_ms / 1000))
        for idx in range(count):
            pos = start + idx
            if pos >= total:
                break
            t = idx / sample_rate
            # short linear fade-out avoids a click at the cut
            env = 1.0
            if release and idx >= count - release:
                env = (count - idx) / release
            wave = _wave(tone.waveform, (tone.freq * t) % 1.0)
            samples[pos] += tone.volume * env * wave

    return array(
        "h",
        (int(max(-32767, min(32767, val * 32767))) for val in samples),
    )


# ===========================
#   Audio Engine
# ===========================


class ChimeAudio:
    """Mixer init plus the four gameplay cues; silent when unavailable."""

    def __init__(self, sample_rate: int = 22050) -> None:
        self.enabled = False
        self.muted = False
        self.sample_rate = sample_rate
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self._init_audio()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
        except pygame.error as exc:
            logger.info("audio disabled: %s", exc)
            self.enabled = False
            self.sounds.clear()
            return

        mixer_info = pygame.mixer.get_init()
        if mixer_info:
            self.sample_rate = mixer_info[0]
            channels = mixer_info[2]
        else:
            channels = 1
        self.enabled = True

        for name, chime in CHIMES.items():
            mono = render_chime(chime, self.sample_rate)
            if channels > 1:
                # mixer may refuse mono; interleave the same sample per channel
                mono = array("h", (val for val in mono for _ in range(channels)))
            self.sounds[name] = pygame.mixer.Sound(buffer=mono)

    def play(self, name: str) -> None:
        if not self.enabled or self.muted:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.info("audio disabled after playback error: %s", exc)
            self.enabled = False

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if not self.muted:
            self.play("resume")
        return self.muted

    # --- Feedback hooks ------------------------------------------------

    def on_eat(self) -> None:
        self.play("eat")

    def on_start(self) -> None:
        self.play("start")

    def on_pause_resume(self, resuming: bool) -> None:
        self.play("resume" if resuming else "pause")

    def on_game_over(self) -> None:
        self.play("over")
