"""Small range helpers."""

from __future__ import annotations

from ear_trainer import config


def clamp(value: int, min_value: int, max_value: int) -> int:
    """Return *value* limited to the inclusive range [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def clamp_octave(octave: int) -> int:
    return clamp(int(octave), config.MIN_OCTAVE, config.MAX_OCTAVE)


def octave_span(low: int, high: int) -> range:
    """Inclusive octave range; empty when *low* > *high*."""
    return range(low, high + 1)
