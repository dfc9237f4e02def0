"""Quiz round state: the target note and the result of the last guess."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from ear_trainer import config
from ear_trainer.audio.session import PlaybackSession
from ear_trainer.audio.settings import PlaybackSettings
from ear_trainer.errors import EmptyPoolError
from ear_trainer.theory.note import DEFAULT_NOTE, Note
from ear_trainer.theory.tuning import note_from_name_and_octave
from ear_trainer.utils.observable import Observable

logger = logging.getLogger(__name__)


class GameSession(Observable):
    """Track the note to identify and evaluate guesses against it.

    ``guess_result`` is None until a guess is checked, then True or False until
    the next round starts. Changes are published as "current_note" and
    "guess_result".
    """

    def __init__(
        self,
        player: PlaybackSession,
        rng: Optional[random.Random] = None,
        duration: float = config.TONE_DURATION_SEC,
    ) -> None:
        super().__init__()
        self.player = player
        self.rng = rng or random.Random()
        self.duration = duration

        self.current_note: Note = DEFAULT_NOTE
        self.guess_result: Optional[bool] = None

    def start_round(self, note: Note) -> None:
        self.current_note = note
        self.publish("current_note", note)
        self._set_result(None)

    def play_random(self, candidates: Sequence[Note], settings: PlaybackSettings) -> Note:
        if not candidates:
            raise EmptyPoolError("No notes match the current octave range and accidental filter")
        note = self.rng.choice(candidates)
        self.start_round(note)
        self.player.play(note, settings, self.duration)
        return note

    def replay(self, settings: PlaybackSettings) -> None:
        self.player.play(self.current_note, settings, self.duration)

    def play_guess(self, name: str, settings: PlaybackSettings) -> Note:
        """Play pitch class *name* in the octave of the current note."""
        note = note_from_name_and_octave(name, self.current_note.octave)
        self.player.play(note, settings, self.duration)
        return note

    def check_guess(self, name: str) -> bool:
        correct = name == self.current_note.name
        logger.info("Guessed %s, actual %s", name, self.current_note.name)
        self._set_result(correct)
        return correct

    def _set_result(self, result: Optional[bool]) -> None:
        self.guess_result = result
        self.publish("guess_result", result)
