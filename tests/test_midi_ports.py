from __future__ import annotations

import mido

from ear_trainer import config
from ear_trainer.midi import ports
from ear_trainer.midi.ports import MidiMirror, open_midi_mirror, pick_midi_output
from ear_trainer.theory.tuning import note_from_name_and_octave


class FakePort:
    def __init__(self):
        self.sent = []
        self.closed = False

    def send(self, msg):
        self.sent.append(msg)

    def close(self):
        self.closed = True


def test_mirror_sends_note_on_and_off():
    port = FakePort()
    mirror = MidiMirror(port, channel=2, velocity=90)

    mirror.note_on(note_from_name_and_octave("C", 4))
    mirror.note_off()
    mirror.note_off()

    assert [(m.type, m.channel, m.note, m.velocity) for m in port.sent] == [
        ("note_on", 2, 60, 90),
        ("note_off", 2, 60, 0),
    ]


def test_mirror_releases_previous_note():
    port = FakePort()
    mirror = MidiMirror(port)

    mirror.note_on(note_from_name_and_octave("C", 4))
    mirror.note_on(note_from_name_and_octave("E", 4))

    assert [(m.type, m.note) for m in port.sent] == [("note_on", 60), ("note_off", 60), ("note_on", 64)]
    assert mirror.sounding == 64


def test_mirror_close_silences_and_closes():
    port = FakePort()
    mirror = MidiMirror(port)
    mirror.note_on(note_from_name_and_octave("A", 4))

    mirror.close()

    assert port.sent[-1].type == "note_off"
    assert port.closed


def test_pick_output_by_name(monkeypatch):
    monkeypatch.setattr(mido, "get_output_names", lambda: ["Midi Through", "loopMIDI Port 1"])
    monkeypatch.setattr(config, "MIDI_OUTPUT_NAME_CONTAINS", "loopmidi")

    assert pick_midi_output() == "loopMIDI Port 1"


def test_pick_output_defaults_to_first(monkeypatch):
    monkeypatch.setattr(mido, "get_output_names", lambda: ["Midi Through", "Synth"])
    monkeypatch.setattr(config, "MIDI_OUTPUT_NAME_CONTAINS", "")

    assert pick_midi_output() == "Midi Through"


def test_open_mirror_without_outputs(monkeypatch):
    monkeypatch.setattr(mido, "get_output_names", lambda: [])

    assert open_midi_mirror() is None


def test_open_mirror_opens_port(monkeypatch):
    port = FakePort()
    opened = []
    monkeypatch.setattr(mido, "get_output_names", lambda: ["Synth"])
    monkeypatch.setattr(config, "MIDI_OUTPUT_NAME_CONTAINS", "")

    def open_output(name):
        opened.append(name)
        return port

    monkeypatch.setattr(ports.mido, "open_output", open_output)

    mirror = open_midi_mirror()

    assert opened == ["Synth"]
    assert mirror.port is port
