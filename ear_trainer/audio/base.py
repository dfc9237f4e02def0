"""Engine protocol and the mixer-backed engine base class."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Protocol

import pygame

from ear_trainer import config
from ear_trainer.audio.mixer import sound_from_pcm
from ear_trainer.theory.note import Note

logger = logging.getLogger(__name__)


class AudioEngine(Protocol):
    def set_note(self, note: Note) -> None: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...


class BufferedEngine:
    """Render one PCM buffer per MIDI note, cache it, and play it on a mixer channel."""

    loops = 0

    def __init__(self, note: Note):
        self.note = note
        self.tone_cache: Dict[int, pygame.mixer.Sound] = {}
        self._tone_lock = threading.Lock()
        self._channel: Optional[pygame.mixer.Channel] = None

    def render(self, note: Note) -> bytes:
        raise NotImplementedError

    def set_note(self, note: Note) -> None:
        self.note = note

    def _get_tone(self, note: Note) -> pygame.mixer.Sound:
        with self._tone_lock:
            if note.id in self.tone_cache:
                return self.tone_cache[note.id]

        tone = sound_from_pcm(self.render(note))
        with self._tone_lock:
            self.tone_cache[note.id] = tone
        return tone

    def play(self) -> None:
        tone = self._get_tone(self.note)
        if self._channel is not None:
            self._channel.stop()
        channel = pygame.mixer.find_channel(True)
        channel.play(tone, loops=self.loops, fade_ms=config.FADE_IN_MS)
        self._channel = channel
        logger.debug("%s playing %s", type(self).__name__, self.note.description)

    def stop(self) -> None:
        channel, self._channel = self._channel, None
        if channel is not None:
            channel.fadeout(config.FADE_OUT_MS)
