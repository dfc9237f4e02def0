"""User-adjustable trainer settings and the note pool derived from them."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from ear_trainer import config
from ear_trainer.audio.catalog import list_soundfonts
from ear_trainer.audio.settings import PlaybackSettings
from ear_trainer.errors import EmptyPoolError
from ear_trainer.theory.note import Note
from ear_trainer.theory.tuning import accidental_names, enumerate_notes, pitch_class_names
from ear_trainer.utils.observable import Observable
from ear_trainer.utils.ranges import clamp_octave, octave_span

logger = logging.getLogger(__name__)

MODE_KINDS = ("sine", "sampler")


class TrainerSettings(Observable):
    """Generation range, playback mode and instrument selection.

    Every change regenerates ``notes`` when it affects the pool and is
    published as (field, value).
    """

    def __init__(
        self,
        soundfont_dir: str = config.SOUNDFONT_DIR,
        low_octave: int = config.DEFAULT_LOW_OCTAVE,
        high_octave: int = config.DEFAULT_HIGH_OCTAVE,
        include_accidentals: bool = False,
        mode_kind: str = "sine",
        selected_soundfont: str = config.DEFAULT_SOUNDFONT,
    ) -> None:
        super().__init__()
        self.soundfont_dir = soundfont_dir
        self._low_octave = clamp_octave(low_octave)
        self._high_octave = max(self._low_octave, clamp_octave(high_octave))
        self._include_accidentals = include_accidentals
        self._mode_kind = self._checked_mode(mode_kind)
        self._selected_soundfont = selected_soundfont

        self.notes: List[Note] = []
        self.available_soundfonts: List[str] = []
        self.update_notes()
        self.update_soundfonts()

    @property
    def include_accidentals(self) -> bool:
        return self._include_accidentals

    @include_accidentals.setter
    def include_accidentals(self, value: bool) -> None:
        self._include_accidentals = bool(value)
        self.publish("include_accidentals", self._include_accidentals)
        self.update_notes()

    @property
    def low_octave(self) -> int:
        return self._low_octave

    @low_octave.setter
    def low_octave(self, value: int) -> None:
        self._low_octave = clamp_octave(value)
        if self._low_octave > self._high_octave:
            self._high_octave = self._low_octave
            self.publish("high_octave", self._high_octave)
        self.publish("low_octave", self._low_octave)
        self.update_notes()

    @property
    def high_octave(self) -> int:
        return self._high_octave

    @high_octave.setter
    def high_octave(self, value: int) -> None:
        self._high_octave = clamp_octave(value)
        if self._high_octave < self._low_octave:
            self._low_octave = self._high_octave
            self.publish("low_octave", self._low_octave)
        self.publish("high_octave", self._high_octave)
        self.update_notes()

    @property
    def mode_kind(self) -> str:
        return self._mode_kind

    @mode_kind.setter
    def mode_kind(self, value: str) -> None:
        self._mode_kind = self._checked_mode(value)
        self.publish("mode_kind", self._mode_kind)

    @property
    def selected_soundfont(self) -> str:
        return self._selected_soundfont

    @selected_soundfont.setter
    def selected_soundfont(self, value: str) -> None:
        self._selected_soundfont = value
        self.publish("selected_soundfont", value)

    @property
    def octave_range(self) -> range:
        return octave_span(self._low_octave, self._high_octave)

    @property
    def natural_names(self) -> List[str]:
        return pitch_class_names(include_accidentals=False)

    @property
    def accidental_names(self) -> List[str]:
        return accidental_names() if self._include_accidentals else []

    @property
    def choice_names(self) -> List[str]:
        return pitch_class_names(self._include_accidentals)

    @property
    def playback(self) -> PlaybackSettings:
        if self._mode_kind == "sampler":
            return PlaybackSettings.sampler(self._selected_soundfont)
        return PlaybackSettings.sine()

    def set_octave_range(self, low: int, high: int) -> None:
        """Apply both bounds at once; *low* wins if they cross."""
        low, high = clamp_octave(low), clamp_octave(high)
        self._low_octave = low
        self._high_octave = max(low, high)
        self.publish("low_octave", self._low_octave)
        self.publish("high_octave", self._high_octave)
        self.update_notes()

    def update_notes(self) -> None:
        self.notes = enumerate_notes(self.octave_range, self._include_accidentals)
        logger.debug(
            "Note pool: %d notes over octaves %d..%d (accidentals=%s)",
            len(self.notes),
            self._low_octave,
            self._high_octave,
            self._include_accidentals,
        )
        self.publish("notes", self.notes)

    def update_soundfonts(self) -> None:
        self.available_soundfonts = list_soundfonts(self.soundfont_dir)
        self.publish("available_soundfonts", self.available_soundfonts)

    def random_note(self, rng: Optional[random.Random] = None) -> Note:
        if not self.notes:
            raise EmptyPoolError("No notes match the current octave range and accidental filter")
        return (rng or random).choice(self.notes)

    @staticmethod
    def _checked_mode(value: str) -> str:
        if value not in MODE_KINDS:
            raise ValueError(f"Unknown playback mode {value!r}; expected one of {', '.join(MODE_KINDS)}")
        return value
