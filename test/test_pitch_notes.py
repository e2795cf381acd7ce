import pytest

from scritto.duration import Duration
from scritto.notes import Chord, Note, Rest, SingleNote
from scritto.pitch import ETPitch, LilyPitch, asPitch, lilyOctave, pitchName


@pytest.mark.parametrize("midi, name", [
    (60, "c"), (61, "csharp"), (63, "eflat"), (66, "fsharp"), (70, "bflat"), (71, "b"),
    (72, "c"), (48, "c"),
])
def test_etpitch(midi, name):
    assert ETPitch(midi).pitch() == name


def test_etpitch_invalid():
    with pytest.raises(ValueError):
        ETPitch(-1)
    with pytest.raises(ValueError):
        ETPitch(60.5)


def test_lilyOctave():
    assert lilyOctave(3) == ""
    assert lilyOctave(4) == "'"
    assert lilyOctave(2) == ","
    with pytest.raises(ValueError):
        lilyOctave(12)


def test_pitchName():
    assert pitchName("c", 0) == "c"
    assert pitchName("C", 100) == "cis"
    assert pitchName("e", -100) == "ees"
    assert pitchName("c", 50) == "cih"
    with pytest.raises(ValueError):
        pitchName("h", 0)
    with pytest.raises(ValueError):
        pitchName("c", 33)


@pytest.mark.parametrize("notename, lily", [
    ("4C", "c'"),
    ("4C#", "cis'"),
    ("3Bb", "bes"),
    ("5E", "e''"),
])
def test_lilypitch(notename, lily):
    assert LilyPitch(notename).pitch() == lily


def test_lilypitch_from_midi():
    assert LilyPitch(60).pitch() == "c'"
    assert asPitch(60.0).pitch() == "c'"


def test_asPitch():
    assert isinstance(asPitch(60), ETPitch)
    assert isinstance(asPitch("4C"), LilyPitch)
    p = ETPitch(62)
    assert asPitch(p) is p
    with pytest.raises(TypeError):
        asPitch(None)


def test_single_note():
    note = SingleNote(60)
    assert note.duration() == Duration(1)
    assert note.text() == "c"
    assert note.annotation() == ""
    assert isinstance(note, Note)
    assert SingleNote(60, (2, 8)) == SingleNote(ETPitch(60), Duration(1, 4))
    assert SingleNote("4C#", "1/4").text() == "cis'"


def test_zero_duration_note():
    with pytest.raises(ValueError):
        SingleNote(60, 0)


def test_chord():
    chord = Chord([60, 64, 67], (1, 2))
    assert chord.text() == "<c e g>"
    assert isinstance(chord, Note)
    with pytest.raises(ValueError):
        Chord([]).text()


def test_rest():
    rest = Rest((1, 4))
    assert rest.text() == "r"
    assert rest.duration() == Duration(1, 4)


def test_note_equality_and_hash():
    assert Chord([]) == Chord([])
    assert len({Chord([]), Chord([], (1, 4)), Chord([])}) == 2
    assert Chord([60, 64]) == Chord([ETPitch(60), ETPitch(64)])
    assert hash(Chord([60, 64])) == hash(Chord([60, 64]))
    assert Chord([60, 64]) != Chord([64, 60])
    assert SingleNote(60, annotation="-.") != SingleNote(60)
    assert SingleNote(60) != Chord([60])
    assert Rest((1, 4)) == Rest(Duration(1, 4))
