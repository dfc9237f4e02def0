"""Centralized configuration for the ear trainer."""

from __future__ import annotations

# Note range
MIN_OCTAVE, MAX_OCTAVE = -1, 9
MIN_MIDI, MAX_MIDI = 0, 127
DEFAULT_LOW_OCTAVE = 3
DEFAULT_HIGH_OCTAVE = 6

# Tuning reference (A4)
REFERENCE_MIDI = 69
REFERENCE_FREQUENCY = 440.0

# Audio synthesis
SAMPLE_RATE = 44100
MIXER_BUFFER = 512
MIXER_CHANNELS = 16
TONE_DURATION_SEC = 1.0  # How long a played note sounds before the auto-stop
TONE_VOLUME = 0.2
FADE_IN_MS = 8
FADE_OUT_MS = 25

# SoundFont sampler
SOUNDFONT_DIR = "soundfonts"  # Folder with .sf2 files
DEFAULT_SOUNDFONT = "HappyMellow.sf2"
SAMPLER_NOTE_SEC = 1.5  # Rendered note length before note-off
SAMPLER_RELEASE_SEC = 0.5
SAMPLER_GAIN = 0.6
NOTE_VELOCITY = 64

# MIDI mirror (forward played notes to an external port)
MIDI_MIRROR = False
MIDI_OUTPUT_NAME_CONTAINS = ""  # First device if empty
MIDI_MIRROR_CHANNEL = 0

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
