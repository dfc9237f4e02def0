"""pygame mixer setup shared by every engine."""

from __future__ import annotations

import logging
import threading

import pygame

from ear_trainer import config

logger = logging.getLogger(__name__)

_init_lock = threading.Lock()


def init_mixer() -> None:
    """Initialise the mono 16-bit mixer once; later calls are no-ops."""
    with _init_lock:
        if pygame.mixer.get_init() is not None:
            return
        pygame.mixer.pre_init(config.SAMPLE_RATE, size=-16, channels=1, buffer=config.MIXER_BUFFER)
        pygame.mixer.init()
        pygame.mixer.set_num_channels(config.MIXER_CHANNELS)
        logger.debug("Mixer initialised: %s", pygame.mixer.get_init())


def sound_from_pcm(data: bytes) -> pygame.mixer.Sound:
    init_mixer()
    return pygame.mixer.Sound(buffer=data)


def shutdown_mixer() -> None:
    with _init_lock:
        if pygame.mixer.get_init() is not None:
            pygame.mixer.quit()
