from __future__ import annotations

import random

import pytest

from ear_trainer.audio.settings import PlaybackSettings
from ear_trainer.errors import EmptyPoolError, InvalidNoteError, UnknownPitchClassError
from ear_trainer.game.session import GameSession
from ear_trainer.theory.note import DEFAULT_NOTE
from ear_trainer.theory.tuning import enumerate_notes, note_from_name_and_octave

SINE = PlaybackSettings.sine()
G4 = note_from_name_and_octave("G", 4)


@pytest.fixture
def game(player):
    return GameSession(player, rng=random.Random(7), duration=0.5)


def test_starts_unanswered_on_a4(game):
    assert game.current_note == DEFAULT_NOTE
    assert game.guess_result is None


def test_correct_guess(game):
    game.start_round(G4)

    assert game.check_guess("G") is True
    assert game.guess_result is True


def test_sharp_guess_is_incorrect(game):
    game.start_round(G4)

    assert game.check_guess("G♯") is False
    assert game.guess_result is False


def test_guess_has_no_audio_side_effect(game, player):
    game.start_round(G4)
    game.check_guess("A")

    assert player.calls == []


def test_later_guess_overwrites_result(game):
    game.start_round(G4)
    game.check_guess("A")
    game.check_guess("G")

    assert game.guess_result is True


def test_new_round_resets_result(game):
    game.start_round(G4)
    game.check_guess("G")
    game.start_round(note_from_name_and_octave("D", 3))

    assert game.guess_result is None


def test_play_random_picks_from_candidates(game, player):
    candidates = enumerate_notes(range(3, 5))
    game.start_round(G4)
    game.check_guess("C")

    note = game.play_random(candidates, SINE)

    assert note in candidates
    assert game.current_note == note
    assert game.guess_result is None
    assert player.calls == [(note, SINE, 0.5)]


def test_play_random_is_reproducible_with_seed(player):
    candidates = enumerate_notes(range(2, 7), include_accidentals=True)
    first = GameSession(player, rng=random.Random(3))
    second = GameSession(player, rng=random.Random(3))

    picks_a = [first.play_random(candidates, SINE) for _ in range(10)]
    picks_b = [second.play_random(candidates, SINE) for _ in range(10)]

    assert picks_a == picks_b


def test_play_random_empty_pool(game, player):
    game.start_round(G4)

    with pytest.raises(EmptyPoolError):
        game.play_random([], SINE)

    assert game.current_note == G4
    assert player.calls == []


def test_replay_keeps_result(game, player):
    game.start_round(G4)
    game.check_guess("B")
    settings = PlaybackSettings.sampler("Piano.sf2")

    game.replay(settings)

    assert game.guess_result is False
    assert player.calls == [(G4, settings, 0.5)]


def test_play_guess_uses_current_octave(game, player):
    game.start_round(note_from_name_and_octave("C", 2))

    note = game.play_guess("E", SINE)

    assert note.id == 40
    assert note.octave == 2
    assert player.calls == [(note, SINE, 0.5)]
    assert game.current_note.name == "C"


def test_play_guess_unknown_name(game, player):
    with pytest.raises(UnknownPitchClassError):
        game.play_guess("H", SINE)
    assert player.calls == []


def test_play_guess_out_of_range(game, player):
    game.start_round(note_from_name_and_octave("G", 9))

    with pytest.raises(InvalidNoteError):
        game.play_guess("B", SINE)
    assert player.calls == []


def test_changes_are_published(game):
    events = []
    game.subscribe(lambda field, value: events.append((field, value)))

    game.start_round(G4)
    game.check_guess("G")

    assert events == [("current_note", G4), ("guess_result", None), ("guess_result", True)]


def test_unsubscribe(game):
    events = []
    unsubscribe = game.subscribe(lambda field, value: events.append(field))
    unsubscribe()
    unsubscribe()

    game.start_round(G4)

    assert events == []
