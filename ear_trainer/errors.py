"""Exceptions raised by the ear trainer."""

from __future__ import annotations


class EarTrainerError(Exception):
    """Base class for ear trainer errors."""


class EmptyPoolError(EarTrainerError, ValueError):
    """No candidate notes to choose from."""


class UnknownPitchClassError(EarTrainerError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown pitch class: {name!r}")
        self.name = name


class InvalidNoteError(EarTrainerError, ValueError):
    """A computed note falls outside the playable MIDI/octave range."""


class InstrumentUnavailableError(EarTrainerError, RuntimeError):
    def __init__(self, instrument: str, reason: str = "not found"):
        super().__init__(f"Instrument {instrument!r} unavailable: {reason}")
        self.instrument = instrument
        self.reason = reason
