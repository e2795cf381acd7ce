"""
Pitch names

A :class:`Pitch` translates the onset of a note into text. Two kinds are
provided:

* :class:`ETPitch`: a 12-tone equal tempered pitch class, given as a midinote.
  The octave is ignored and the name is one of ``c, csharp, d, eflat, ...``
* :class:`LilyPitch`: an absolute lilypond pitch with octave marks and
  microtonal alterations, given as a notename ("4C#", "Eb5+25") or as a
  (fractional) midinote

    >>> ETPitch(61).pitch()
    'csharp'
    >>> LilyPitch("4C#").pitch()
    "cis'"

"""
from __future__ import annotations

import pitchtools as pt

from scritto.common import pitch_t


__all__ = (
    'Pitch',
    'ETPitch',
    'LilyPitch',
    'asPitch',
    'lilyOctave',
    'pitchName',
    'notenameToLily',
)


_octaveMapping = {
    -3: ",,,,,,",
    -2: ",,,,,",
    -1: ",,,,",
    0: ",,,",
    1: ",,",
    2: ",",
    3: "",
    4: "'",
    5: "''",
    6: "'''",
    7: "''''",
    8: "'''''",
    9: "''''''",
}

_centsToSuffix = {
    0: '',
    25: 'iq',
    50: 'ih',
    75: 'iseq',
    100: 'is',
    125: 'isiq',
    150: 'isih',
    200: 'isis',

    -25: 'eq',
    -50: 'eh',
    -75: 'esiq',
    -100: 'es',
    -125: 'eseq',
    -150: 'eseh',
    -200: 'eses'
}


def lilyOctave(octave: int) -> str:
    """
    The octave marks for an absolute lilypond pitch (octave 3 has no marks)

        >>> lilyOctave(2), lilyOctave(3), lilyOctave(5)
        (',', '', "''")
    """
    if (marks := _octaveMapping.get(octave)) is None:
        raise ValueError(f"Invalid octave {octave}, expected a value between "
                         f"{min(_octaveMapping)} and {max(_octaveMapping)}")
    return marks


def pitchName(pitchclass: str, cents: int) -> str:
    """
    Lilypond name of a diatonic pitch class altered by the given cents

    Args:
        pitchclass: the diatonic name (c, d, ..., b), case is ignored
        cents: the alteration in cents, quantized to an eighth tone (-200 to 200).
            100=sharp, -100=flat, 50=quarter-tone sharp, etc.

    Returns:
        the pitch name, without octave (for example, 'cis', 'eeh')
    """
    pitchclass = pitchclass.lower()
    if len(pitchclass) != 1 or pitchclass not in 'abcdefg':
        raise ValueError(f"Invalid pitch class: {pitchclass}")
    if (suffix := _centsToSuffix.get(cents)) is None:
        raise ValueError(f"Cannot represent an alteration of {cents} cents, possible values: "
                         f"{sorted(_centsToSuffix)}")
    return pitchclass + suffix


def notenameToLily(notename: str, divsPerSemitone=4) -> str:
    """
    Absolute lilypond pitch of a notename

    Args:
        notename: any notename understood by pitchtools ("4C#", "Db4-25", "5E+")
        divsPerSemitone: microtonal resolution used to quantize the notename
            (2: quarter tones, 4: eighth tones)

    Returns:
        the lilypond pitch, including alterations and octave marks

    Example
    ~~~~~~~

        >>> notenameToLily("4C#")
        "cis'"
        >>> notenameToLily("3Bb-50")
        'beseh'
    """
    parts = pt.split_notename(pt.quantize_notename(notename, divisions_per_semitone=divsPerSemitone))
    return (pitchName(parts.diatonic_name, parts.alteration_cents + parts.cents_deviation)
            + lilyOctave(parts.octave))


class Pitch:
    """
    Base class for anything which can be translated to a pitch name
    """
    pitchType = ''
    "Name of the pitch type, used for serialization"

    def pitch(self) -> str:
        """The pitch name, needed at the start of each note"""
        raise NotImplementedError

    def asdict(self) -> dict:
        raise NotImplementedError

    def __str__(self):
        return self.pitch()


ET_SCALE = ("c", "csharp", "d", "eflat", "e", "f", "fsharp", "g", "gsharp", "a", "bflat", "b")


class ETPitch(Pitch):
    """
    A 12-tone equal tempered pitch class, as a midinote

    The octave is not part of the name
    """
    pitchType = 'et'
    __slots__ = ('midi',)

    def __init__(self, midi: int):
        if not isinstance(midi, int) or midi < 0:
            raise ValueError(f"Expected a midinote as a non-negative int, got {midi}")
        self.midi = midi

    def __repr__(self):
        return f"ETPitch({self.midi})"

    def __eq__(self, other):
        return isinstance(other, ETPitch) and other.midi == self.midi

    def __hash__(self):
        return hash(('ETPitch', self.midi))

    def pitch(self) -> str:
        return ET_SCALE[self.midi % 12]

    def asdict(self) -> dict:
        return {'type': self.pitchType, 'midi': self.midi}


class LilyPitch(Pitch):
    """
    An absolute lilypond pitch, including octave and microtonal alterations

    Args:
        pitch: a notename ("4C#", "Bb3+25"). The given spelling is kept. A
            midinote can also be given, in which case the spelling is
            determined by pitchtools
        divsPerSemitone: the microtonal resolution
    """
    pitchType = 'lily'
    __slots__ = ('notename', 'divsPerSemitone')

    def __init__(self, pitch: pitch_t, divsPerSemitone=4):
        if isinstance(pitch, (int, float)):
            if pitch < 12:
                raise ValueError(f"Pitch too low: {pitch}")
            notename = pt.m2n(pitch)
        elif isinstance(pitch, str):
            if not pt.is_valid_notename(pitch, minpitch=1):
                raise ValueError(f"Invalid notename: {pitch}")
            notename = pitch
        else:
            raise TypeError(f"Expected a midinote or a notename, got {pitch} (type: {type(pitch)})")
        self.notename = notename
        self.divsPerSemitone = divsPerSemitone

    def __repr__(self):
        return f"LilyPitch({self.notename!r})"

    def __eq__(self, other):
        return (isinstance(other, LilyPitch) and other.notename == self.notename
                and other.divsPerSemitone == self.divsPerSemitone)

    def __hash__(self):
        return hash(('LilyPitch', self.notename, self.divsPerSemitone))

    def pitch(self) -> str:
        return notenameToLily(self.notename, divsPerSemitone=self.divsPerSemitone)

    def asdict(self) -> dict:
        out = {'type': self.pitchType, 'notename': self.notename}
        if self.divsPerSemitone != 4:
            out['divsPerSemitone'] = self.divsPerSemitone
        return out


def asPitch(x: Pitch | pitch_t) -> Pitch:
    """
    Convert x to a Pitch

    An int is interpreted as an equal tempered midinote, a str as a
    notename and a float as a microtonal midinote
    """
    if isinstance(x, Pitch):
        return x
    elif isinstance(x, int):
        return ETPitch(x)
    elif isinstance(x, (str, float)):
        return LilyPitch(x)
    raise TypeError(f"Cannot convert {x} (type: {type(x)}) to a Pitch")
