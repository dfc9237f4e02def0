"""Shared fakes: engines, timers and players that never touch an audio device."""

from __future__ import annotations

from typing import Callable, List

import pytest

from ear_trainer.audio.session import PlaybackSession


class FakeEngine:
    def __init__(self, note, settings=None):
        self.note = note
        self.settings = settings
        self.played: list = []
        self.stops = 0
        self.closed = False

    def set_note(self, note):
        self.note = note

    def play(self):
        self.played.append(self.note)

    def stop(self):
        self.stops += 1

    def close(self):
        self.closed = True


class FakeTimer:
    def __init__(self, interval: float, function: Callable[[], None]):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False
        self.daemon = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


class EngineRecorder:
    """Engine factory that remembers every engine it builds."""

    def __init__(self):
        self.built: List[FakeEngine] = []

    def __call__(self, note, settings):
        engine = FakeEngine(note, settings)
        self.built.append(engine)
        return engine


class TimerRecorder:
    def __init__(self):
        self.timers: List[FakeTimer] = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer


class FakePlayer:
    def __init__(self):
        self.calls: list = []

    def play(self, note, settings, duration=1.0):
        self.calls.append((note, settings, duration))


@pytest.fixture
def engines() -> EngineRecorder:
    return EngineRecorder()


@pytest.fixture
def timers() -> TimerRecorder:
    return TimerRecorder()


@pytest.fixture
def fallbacks() -> List[FakeEngine]:
    return []


@pytest.fixture
def session(engines, timers, fallbacks) -> PlaybackSession:
    def fallback(note):
        engine = FakeEngine(note)
        fallbacks.append(engine)
        return engine

    return PlaybackSession(engine_factory=engines, timer_factory=timers, fallback_factory=fallback)


@pytest.fixture
def player() -> FakePlayer:
    return FakePlayer()
