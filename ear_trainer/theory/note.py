"""Immutable note value."""

from __future__ import annotations

from dataclasses import dataclass

from ear_trainer import config


@dataclass(frozen=True)
class Note:
    id: int  # MIDI note number
    name: str  # Pitch class, e.g. "A" or "C♯"
    frequency: float  # Hz
    octave: int

    @property
    def description(self) -> str:
        return f"{self.name}{self.octave} - {self.frequency:.2f} Hz"

    @property
    def is_valid(self) -> bool:
        """True when frequency, octave and MIDI id are all within playable bounds."""
        return (
            self.frequency > 0
            and config.MIN_OCTAVE <= self.octave <= config.MAX_OCTAVE
            and config.MIN_MIDI <= self.id <= config.MAX_MIDI
        )

    def __str__(self) -> str:
        return self.description


DEFAULT_NOTE = Note(id=config.REFERENCE_MIDI, name="A", frequency=config.REFERENCE_FREQUENCY, octave=4)
