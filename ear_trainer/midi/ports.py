"""MIDI output selection and the played-note mirror."""

from __future__ import annotations

import logging
from typing import Optional

import mido

from ear_trainer import config
from ear_trainer.theory.note import Note

logger = logging.getLogger(__name__)


def pick_midi_output() -> str | None:
    names = mido.get_output_names()
    if config.MIDI_OUTPUT_NAME_CONTAINS:
        for name in names:
            if config.MIDI_OUTPUT_NAME_CONTAINS.lower() in name.lower():
                return name

    return names[0] if names else None


class MidiMirror:
    """Forward every played note to a MIDI output so external gear can follow along."""

    def __init__(self, port, channel: int = config.MIDI_MIRROR_CHANNEL, velocity: int = config.NOTE_VELOCITY):
        self.port = port
        self.channel = channel
        self.velocity = velocity
        self.sounding: Optional[int] = None

    def note_on(self, note: Note) -> None:
        self.note_off()
        self.port.send(mido.Message("note_on", channel=self.channel, note=note.id, velocity=self.velocity))
        self.sounding = note.id

    def note_off(self) -> None:
        if self.sounding is None:
            return
        self.port.send(mido.Message("note_off", channel=self.channel, note=self.sounding, velocity=0))
        self.sounding = None

    def close(self) -> None:
        self.note_off()
        self.port.close()


def open_midi_mirror() -> MidiMirror | None:
    """Open the configured output port, or return None when no port is available."""
    name = pick_midi_output()
    if name is None:
        logger.warning("No MIDI outputs found; MIDI mirror disabled")
        return None
    logger.info("Mirroring notes to MIDI output %s", name)
    return MidiMirror(mido.open_output(name))
