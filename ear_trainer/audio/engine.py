"""Build the engine matching a PlaybackSettings value."""

from __future__ import annotations

from typing import Callable

from ear_trainer import config
from ear_trainer.audio.base import AudioEngine
from ear_trainer.audio.catalog import resolve_soundfont
from ear_trainer.audio.settings import PlaybackSettings, Sampler
from ear_trainer.audio.sine import SineEngine
from ear_trainer.errors import InstrumentUnavailableError
from ear_trainer.theory.note import Note

EngineFactory = Callable[[Note, PlaybackSettings], AudioEngine]


def build_engine(note: Note, settings: PlaybackSettings, soundfont_dir: str = config.SOUNDFONT_DIR) -> AudioEngine:
    """Return a new engine for *settings*.

    Raises InstrumentUnavailableError if a sampler instrument is not in *soundfont_dir*.
    """
    if isinstance(settings.mode, Sampler):
        path = resolve_soundfont(soundfont_dir, settings.mode.instrument)
        if path is None:
            raise InstrumentUnavailableError(settings.mode.instrument, f"not found in {soundfont_dir}")
        # FluidSynth is only loaded once a sampler is actually requested.
        from ear_trainer.audio.sampler import SamplerEngine

        return SamplerEngine(note, path)
    return SineEngine(note)


def engine_factory_for(soundfont_dir: str) -> EngineFactory:
    def factory(note: Note, settings: PlaybackSettings) -> AudioEngine:
        return build_engine(note, settings, soundfont_dir)

    return factory
