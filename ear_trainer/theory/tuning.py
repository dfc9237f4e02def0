"""Equal-tempered tuning: MIDI/frequency conversion and note enumeration."""

from __future__ import annotations

import logging
from typing import Iterable, List

from ear_trainer import config
from ear_trainer.errors import InvalidNoteError, UnknownPitchClassError
from ear_trainer.theory.note import Note

logger = logging.getLogger(__name__)

PITCH_CLASS_NAMES = ("C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯", "A", "A♯", "B")
NATURAL_INDICES = (0, 2, 4, 5, 7, 9, 11)
ACCIDENTAL_INDICES = tuple(i for i in range(len(PITCH_CLASS_NAMES)) if i not in NATURAL_INDICES)

FULL_OCTAVE_RANGE = range(config.MIN_OCTAVE, config.MAX_OCTAVE + 1)


def frequency_from_midi(midi: int) -> float:
    return config.REFERENCE_FREQUENCY * (2.0 ** ((midi - config.REFERENCE_MIDI) / 12.0))


def midi_from_octave_and_index(octave: int, index: int) -> int:
    return (octave + 1) * 12 + index


def _indices(include_accidentals: bool) -> Iterable[int]:
    return range(len(PITCH_CLASS_NAMES)) if include_accidentals else NATURAL_INDICES


def pitch_class_names(include_accidentals: bool = False) -> List[str]:
    """Return pitch-class names in ascending order, naturals only unless *include_accidentals*."""
    return [PITCH_CLASS_NAMES[i] for i in _indices(include_accidentals)]


def accidental_names() -> List[str]:
    return [PITCH_CLASS_NAMES[i] for i in ACCIDENTAL_INDICES]


def pitch_class_index(name: str) -> int:
    try:
        return PITCH_CLASS_NAMES.index(name)
    except ValueError:
        raise UnknownPitchClassError(name) from None


def _build_note(octave: int, index: int) -> Note:
    midi = midi_from_octave_and_index(octave, index)
    return Note(id=midi, name=PITCH_CLASS_NAMES[index], frequency=frequency_from_midi(midi), octave=octave)


def enumerate_notes(octaves: Iterable[int] = FULL_OCTAVE_RANGE, include_accidentals: bool = False) -> List[Note]:
    """Build every valid note over *octaves*, octave-major then ascending pitch class.

    Notes outside the MIDI range (e.g. G♯9 and above) are left out rather than reported.
    """
    notes: list[Note] = []
    for octave in octaves:
        for index in _indices(include_accidentals):
            note = _build_note(octave, index)
            if note.is_valid:
                notes.append(note)
    return notes


def note_from_name_and_octave(name: str, octave: int) -> Note:
    """Return the note named *name* in *octave*.

    Raises UnknownPitchClassError for names outside the pitch-class table and
    InvalidNoteError when the result is not a playable note.
    """
    note = _build_note(octave, pitch_class_index(name))
    if not note.is_valid:
        logger.debug("Rejected out-of-range note %s (midi %d)", note.description, note.id)
        raise InvalidNoteError(f"{name}{octave} is outside the playable range (midi {note.id})")
    return note
