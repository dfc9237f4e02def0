"""Lightweight sine-tone synthesis."""

from __future__ import annotations

import math
import struct

from ear_trainer import config
from ear_trainer.audio.base import BufferedEngine
from ear_trainer.theory.note import Note


def render_sine_pcm(frequency: float, sec: float = config.TONE_DURATION_SEC, vol: float = config.TONE_VOLUME) -> bytes:
    """Return mono signed 16-bit PCM of a sine at *frequency*.

    The length is rounded to a whole number of cycles so the buffer loops without a click.
    """
    cycles = max(1, round(frequency * sec))
    n_samples = max(1, round(cycles * config.SAMPLE_RATE / frequency))

    data = bytearray()
    for i in range(n_samples):
        t = i / config.SAMPLE_RATE
        sample = math.sin(2.0 * math.pi * frequency * t)
        value = int(32767 * vol * sample)
        data += struct.pack("<h", value)
    return bytes(data)


class SineEngine(BufferedEngine):
    """Hold a looping sine tone until stopped."""

    loops = -1

    def __init__(self, note: Note, volume: float = config.TONE_VOLUME):
        super().__init__(note)
        self.volume = volume

    def render(self, note: Note) -> bytes:
        return render_sine_pcm(note.frequency, vol=self.volume)
