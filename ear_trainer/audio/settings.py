"""Playback configuration values passed by value to every play call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Sine:
    """Generated sine tone."""

    kind = "sine"


@dataclass(frozen=True)
class Sampler:
    """SoundFont instrument, referenced by file name inside the soundfont folder."""

    instrument: str
    kind = "sampler"


SynthesisMode = Union[Sine, Sampler]


@dataclass(frozen=True)
class PlaybackSettings:
    mode: SynthesisMode = Sine()

    @property
    def instrument(self) -> str | None:
        return self.mode.instrument if isinstance(self.mode, Sampler) else None

    @classmethod
    def sine(cls) -> "PlaybackSettings":
        return cls(Sine())

    @classmethod
    def sampler(cls, instrument: str) -> "PlaybackSettings":
        return cls(Sampler(instrument))
