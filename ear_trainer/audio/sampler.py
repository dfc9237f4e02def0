"""SoundFont playback rendered offline through FluidSynth."""

from __future__ import annotations

import logging
import os

import fluidsynth
import numpy as np

from ear_trainer import config
from ear_trainer.audio.base import BufferedEngine
from ear_trainer.errors import InstrumentUnavailableError
from ear_trainer.theory.note import Note

logger = logging.getLogger(__name__)

SAMPLER_CHANNEL = 0


class SamplerEngine(BufferedEngine):
    """Play notes from program 0, bank 0 of a SoundFont.

    Each note is rendered once (note-on, hold, note-off, release tail) into a
    mono buffer; FluidSynth renders interleaved stereo so only the left
    channel is kept.
    """

    def __init__(self, note: Note, soundfont_path: str, velocity: int = config.NOTE_VELOCITY):
        super().__init__(note)
        self.soundfont_path = soundfont_path
        self.velocity = max(1, min(int(velocity), 127))

        self.synth = fluidsynth.Synth(gain=config.SAMPLER_GAIN, samplerate=float(config.SAMPLE_RATE))
        sfid = self.synth.sfload(soundfont_path)
        if sfid == -1:
            self.synth.delete()
            raise InstrumentUnavailableError(os.path.basename(soundfont_path), "could not be loaded")
        self.synth.program_select(SAMPLER_CHANNEL, sfid, 0, 0)
        logger.info("Loaded SoundFont %s", soundfont_path)

    def render(self, note: Note) -> bytes:
        self.synth.noteon(SAMPLER_CHANNEL, note.id, self.velocity)
        held = self.synth.get_samples(int(config.SAMPLE_RATE * config.SAMPLER_NOTE_SEC))
        self.synth.noteoff(SAMPLER_CHANNEL, note.id)
        tail = self.synth.get_samples(int(config.SAMPLE_RATE * config.SAMPLER_RELEASE_SEC))
        stereo = np.concatenate((held, tail))
        return fluidsynth.raw_audio_string(stereo[::2])

    def close(self) -> None:
        self.stop()
        self.synth.delete()
