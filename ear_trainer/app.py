"""Console front end for the ear trainer."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional, TextIO

from ear_trainer import config
from ear_trainer.audio.engine import engine_factory_for
from ear_trainer.audio.mixer import shutdown_mixer
from ear_trainer.audio.session import PlaybackSession
from ear_trainer.errors import EarTrainerError
from ear_trainer.game.session import GameSession
from ear_trainer.game.settings import MODE_KINDS, TrainerSettings
from ear_trainer.midi.ports import open_midi_mirror
from ear_trainer.theory.tuning import PITCH_CLASS_NAMES

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  n            play a new random note
  r            replay the current note
  X            guess pitch class X (e.g. C, F#, G♯) and hear it
  ?X           hear pitch class X in the current octave
  t            toggle sharps
  o LOW HIGH   set the octave range
  m MODE       playback mode: sine or sampler
  i NAME       select a SoundFont
  l            list SoundFonts
  s            show settings
  h            this help
  q            quit"""


def normalize_name(text: str) -> str:
    """Accept "c#" style input for pitch-class names."""
    text = text.strip()
    if not text:
        return text
    return text[0].upper() + text[1:].replace("#", "♯")


class TrainerApp:
    def __init__(
        self,
        settings: TrainerSettings,
        player: PlaybackSession,
        rng: Optional[random.Random] = None,
        duration: float = config.TONE_DURATION_SEC,
        out: TextIO = sys.stdout,
    ) -> None:
        self.settings = settings
        self.player = player
        self.game = GameSession(player, rng=rng, duration=duration)
        self.out = out
        self.round_started = False

        self.game.subscribe(self._on_game_change)
        self.player.subscribe(self._on_player_change)
        self.settings.subscribe(self._on_settings_change)

        self.commands: dict[str, Callable[[List[str]], None]] = {
            "n": self._new_note,
            "r": self._replay,
            "t": self._toggle_accidentals,
            "o": self._set_octaves,
            "m": self._set_mode,
            "i": self._select_soundfont,
            "l": self._list_soundfonts,
            "s": self._show_settings,
            "h": self._show_help,
        }

    def say(self, text: str) -> None:
        print(text, file=self.out)

    def run(self, lines=None) -> None:
        self.say(HELP_TEXT)
        source = lines if lines is not None else self._prompt()
        try:
            for line in source:
                if not self.handle(line):
                    break
        finally:
            self._cleanup()

    def _prompt(self):
        while True:
            try:
                yield input("> ")
            except EOFError:
                return

    def handle(self, line: str) -> bool:
        """Execute one command line; return False to quit."""
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0], parts[1:]
        if command.lower() == "q":
            return False

        name = normalize_name(command)
        try:
            # Pitch classes win over single-letter commands.
            if name in PITCH_CLASS_NAMES:
                self._check_guess(name)
            elif command.lower() in self.commands:
                self.commands[command.lower()](args)
            elif command.startswith("?"):
                self._hear_guess(normalize_name(command[1:]))
            else:
                self._check_guess(name)
        except (EarTrainerError, ValueError) as exc:
            self.say(f"! {exc}")
        return True

    def _new_note(self, args: List[str]) -> None:
        self.game.play_random(self.settings.notes, self.settings.playback)
        self.round_started = True
        self.say("Which note was that? Choices: " + " ".join(self.settings.choice_names))

    def _replay(self, args: List[str]) -> None:
        if not self.round_started:
            self.say("No note yet; press n")
            return
        self.game.replay(self.settings.playback)

    def _hear_guess(self, name: str) -> None:
        note = self.game.play_guess(name, self.settings.playback)
        self.say(f"That was {note.name}{note.octave}")

    def _check_guess(self, name: str) -> None:
        if not self.round_started:
            self.say("No note yet; press n")
            return
        if name not in PITCH_CLASS_NAMES:
            self.say(f"Unknown choice {name!r}; pick one of: " + " ".join(self.settings.choice_names))
            return
        self.game.check_guess(name)
        self.game.play_guess(name, self.settings.playback)

    def _toggle_accidentals(self, args: List[str]) -> None:
        self.settings.include_accidentals = not self.settings.include_accidentals

    def _set_octaves(self, args: List[str]) -> None:
        if len(args) != 2:
            self.say("Usage: o LOW HIGH")
            return
        self.settings.set_octave_range(int(args[0]), int(args[1]))

    def _set_mode(self, args: List[str]) -> None:
        if len(args) != 1:
            self.say("Usage: m " + "|".join(MODE_KINDS))
            return
        self.settings.mode_kind = args[0].lower()

    def _select_soundfont(self, args: List[str]) -> None:
        if not args:
            self.say("Usage: i NAME")
            return
        self.settings.selected_soundfont = " ".join(args)

    def _list_soundfonts(self, args: List[str]) -> None:
        self.settings.update_soundfonts()
        fonts = self.settings.available_soundfonts
        if not fonts:
            self.say(f"No SoundFonts in {self.settings.soundfont_dir}")
            return
        for name in fonts:
            marker = "*" if name == self.settings.selected_soundfont else " "
            self.say(f" {marker} {name}")

    def _show_settings(self, args: List[str]) -> None:
        s = self.settings
        self.say(
            f"Octaves {s.low_octave}..{s.high_octave} • "
            f"Sharps: {'On' if s.include_accidentals else 'Off'} • "
            f"Mode: {s.mode_kind} • SoundFont: {s.selected_soundfont} • "
            f"Pool: {len(s.notes)} notes"
        )

    def _show_help(self, args: List[str]) -> None:
        self.say(HELP_TEXT)

    def _on_game_change(self, field: str, value: object) -> None:
        if field == "guess_result" and value is not None:
            note = self.game.current_note
            if value:
                self.say(f"Correct! It was {note.description}")
            else:
                self.say("Not quite, try again (r to replay)")

    def _on_player_change(self, field: str, value: object) -> None:
        if field == "degraded":
            self.say(f"! {value.reason}; playing a sine tone instead")

    def _on_settings_change(self, field: str, value: object) -> None:
        if field == "notes":
            logger.debug("Pool now has %d notes", len(value))
        elif field in ("include_accidentals", "mode_kind", "selected_soundfont"):
            self.say(f"{field.replace('_', ' ')}: {value}")

    def _cleanup(self) -> None:
        self.player.close()
        shutdown_mixer()


def _init_logging(verbose: bool) -> None:
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=config.LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ear-trainer", description="Identify the pitch class of random notes.")
    ap.add_argument("--low", type=int, default=config.DEFAULT_LOW_OCTAVE, help="lowest octave")
    ap.add_argument("--high", type=int, default=config.DEFAULT_HIGH_OCTAVE, help="highest octave")
    ap.add_argument("--accidentals", action="store_true", help="include sharps")
    ap.add_argument("--mode", choices=MODE_KINDS, default="sine")
    ap.add_argument("--soundfont", default=config.DEFAULT_SOUNDFONT)
    ap.add_argument("--soundfont-dir", default=config.SOUNDFONT_DIR)
    ap.add_argument("--duration", type=float, default=config.TONE_DURATION_SEC, help="seconds each note sounds")
    ap.add_argument("--midi-out", action="store_true", default=config.MIDI_MIRROR, help="mirror notes to a MIDI output")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    """Console entrypoint for the trainer."""
    args = build_parser().parse_args(argv)
    _init_logging(args.verbose)

    settings = TrainerSettings(
        soundfont_dir=args.soundfont_dir,
        low_octave=args.low,
        high_octave=args.high,
        include_accidentals=args.accidentals,
        mode_kind=args.mode,
        selected_soundfont=args.soundfont,
    )
    mirror = open_midi_mirror() if args.midi_out else None
    player = PlaybackSession(engine_factory=engine_factory_for(args.soundfont_dir), midi_mirror=mirror)
    rng = random.Random(args.seed)
    TrainerApp(settings, player, rng=rng, duration=args.duration).run()


if __name__ == "__main__":
    main()
