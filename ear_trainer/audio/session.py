"""Playback session: one live engine, reused while the settings stay the same."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from ear_trainer import config
from ear_trainer.audio.base import AudioEngine
from ear_trainer.audio.engine import EngineFactory, build_engine
from ear_trainer.audio.settings import PlaybackSettings
from ear_trainer.audio.sine import SineEngine
from ear_trainer.errors import InstrumentUnavailableError
from ear_trainer.midi.ports import MidiMirror
from ear_trainer.theory.note import Note
from ear_trainer.utils.observable import Observable

logger = logging.getLogger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


@dataclass(frozen=True)
class DegradationEvent:
    """Requested playback could not be honoured and a sine tone was used instead."""

    requested: PlaybackSettings
    reason: str


class PlaybackSession(Observable):
    """Own at most one audio engine and stop it automatically after each note.

    Published fields: "degraded" (DegradationEvent), "playing" (Note) and "stopped" (None).
    """

    def __init__(
        self,
        engine_factory: EngineFactory = build_engine,
        timer_factory: TimerFactory = threading.Timer,
        midi_mirror: Optional[MidiMirror] = None,
        fallback_factory: Callable[[Note], AudioEngine] = SineEngine,
    ) -> None:
        super().__init__()
        self._engine_factory = engine_factory
        self._timer_factory = timer_factory
        self._fallback_factory = fallback_factory
        self.midi_mirror = midi_mirror

        self.engine: Optional[AudioEngine] = None
        self.engine_settings: Optional[PlaybackSettings] = None
        self.last_degradation: Optional[DegradationEvent] = None
        self._pending_stop: Optional[threading.Timer] = None
        self._lock = threading.RLock()

    def play(self, note: Note, settings: PlaybackSettings, duration: float = config.TONE_DURATION_SEC) -> None:
        with self._lock:
            self._cancel_pending_stop()
            if self.engine is not None and self.engine_settings == settings:
                self.engine.set_note(note)
            else:
                self._discard_engine()
                self.engine = self._build_engine(note, settings)
                self.engine_settings = settings
            self._start(note)
            self._schedule_stop(duration)

    def stop(self) -> None:
        with self._lock:
            self._cancel_pending_stop()
            self._halt()

    def close(self) -> None:
        with self._lock:
            self.stop()
            self._discard_engine()
            if self.midi_mirror is not None:
                self.midi_mirror.close()
                self.midi_mirror = None

    def _build_engine(self, note: Note, settings: PlaybackSettings) -> AudioEngine:
        try:
            return self._engine_factory(note, settings)
        except InstrumentUnavailableError as exc:
            reason = str(exc)
        except Exception as exc:
            logger.exception("Could not set up %s engine", settings.mode.kind)
            reason = f"engine setup failed: {exc}"

        logger.warning("Falling back to sine tone: %s", reason)
        event = DegradationEvent(requested=settings, reason=reason)
        self.last_degradation = event
        engine = self._fallback_factory(note)
        self.publish("degraded", event)
        return engine

    def _start(self, note: Note) -> None:
        try:
            self.engine.play()
        except Exception:
            logger.exception("Failed to start playback of %s", note.description)
            return

        if self.midi_mirror is not None:
            try:
                self.midi_mirror.note_on(note)
            except Exception:
                logger.exception("MIDI mirror failed for %s", note.description)
        self.publish("playing", note)

    def _halt(self) -> None:
        if self.engine is None:
            return
        try:
            self.engine.stop()
        except Exception:
            logger.exception("Failed to stop engine")
        if self.midi_mirror is not None:
            try:
                self.midi_mirror.note_off()
            except Exception:
                logger.exception("MIDI mirror failed on note off")
        self.publish("stopped", None)

    def _discard_engine(self) -> None:
        engine, self.engine = self.engine, None
        self.engine_settings = None
        if engine is None:
            return
        try:
            engine.stop()
        except Exception:
            logger.exception("Failed to stop engine")
        close = getattr(engine, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception:
            logger.exception("Failed to release engine")

    def _schedule_stop(self, duration: float) -> None:
        timer: Optional[threading.Timer] = None

        def fire() -> None:
            with self._lock:
                # A stop replaced by a newer play must not cut that note short.
                if self._pending_stop is not timer:
                    return
                self._pending_stop = None
                self._halt()

        timer = self._timer_factory(duration, fire)
        timer.daemon = True
        self._pending_stop = timer
        timer.start()

    def _cancel_pending_stop(self) -> None:
        timer, self._pending_stop = self._pending_stop, None
        if timer is not None:
            timer.cancel()
