"""SoundFont discovery helpers."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)

SOUNDFONT_SUFFIX = ".sf2"


def list_soundfonts(folder: str) -> List[str]:
    """Return sorted ".sf2" file names found directly in *folder*."""
    if not os.path.isdir(folder):
        logger.debug("SoundFont folder %s does not exist", folder)
        return []

    soundfonts = []
    for filename in sorted(os.listdir(folder)):
        if filename.lower().endswith(SOUNDFONT_SUFFIX) and os.path.isfile(os.path.join(folder, filename)):
            soundfonts.append(filename)
    return soundfonts


def resolve_soundfont(folder: str, name: str) -> Optional[str]:
    """Return the path of SoundFont *name* in *folder*, with or without its suffix, or None."""
    if not name:
        return None
    stem = name[: -len(SOUNDFONT_SUFFIX)] if name.lower().endswith(SOUNDFONT_SUFFIX) else name
    for filename in list_soundfonts(folder):
        if filename[: -len(SOUNDFONT_SUFFIX)] == stem:
            return os.path.join(folder, filename)
    return None
