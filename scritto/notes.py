"""
Notes, chords and rests

Anything passed to a :class:`~scritto.formatter.NoteFormatter` needs to
implement the :class:`Note` protocol:

* ``duration()``: the duration of the note, a :class:`~scritto.duration.Duration`
* ``text()``: the text at the beginning of the note, excluding the duration. It is
  repeated for each tied fragment of the note
* ``annotation()``: text printed after the initial onset of the note, but not
  at any later fragment

"""
from __future__ import annotations

import typing as _t

from scritto.duration import Duration, asDuration
from scritto.pitch import Pitch, asPitch

if _t.TYPE_CHECKING:
    from typing import Sequence
    from scritto.common import pitch_t, time_t


__all__ = (
    'Note',
    'NoteBase',
    'SingleNote',
    'Chord',
    'Rest',
)


@_t.runtime_checkable
class Note(_t.Protocol):

    def duration(self) -> Duration: ...

    def text(self) -> str: ...

    def annotation(self) -> str: ...


class NoteBase:
    """
    Base class for notes, chords and rests

    Args:
        duration: the duration of the event, in whole notes. Defaults to 1
        annotation: text attached to the onset
    """
    __slots__ = ('_duration', '_annotation')

    noteType = ''
    "Name used for serialization"

    def __init__(self, duration: time_t | None = None, annotation=''):
        dur = asDuration(duration) if duration is not None else Duration(1)
        if dur == 0:
            raise ValueError("The duration of a note must be positive")
        self._duration = dur
        self._annotation = annotation

    def duration(self) -> Duration:
        return self._duration

    def annotation(self) -> str:
        return self._annotation

    def text(self) -> str:
        raise NotImplementedError

    def _identity(self) -> tuple:
        return (self._duration, self._annotation)

    def __eq__(self, other):
        return type(self) is type(other) and self._identity() == other._identity()

    def __hash__(self):
        return hash((type(self).__name__, *self._identity()))


class SingleNote(NoteBase):
    """
    A note with one pitch

    Args:
        pitch: a Pitch, a midinote (int, see ETPitch) or a notename
            (see LilyPitch)
        duration: the duration, in whole notes (default: 1)
        annotation: text attached to the onset (for example, an articulation: '-.')
    """
    __slots__ = ('pitch',)
    noteType = 'note'

    def __init__(self, pitch: Pitch | pitch_t, duration: time_t | None = None, annotation=''):
        super().__init__(duration=duration, annotation=annotation)
        self.pitch = asPitch(pitch)

    def __repr__(self):
        return f"SingleNote({self.pitch!r}, {self._duration})"

    def _identity(self) -> tuple:
        return (self._duration, self._annotation, self.pitch)

    def text(self) -> str:
        return self.pitch.pitch()


class Chord(NoteBase):
    """
    Multiple pitches sharing one duration

    Args:
        pitches: the pitches of the chord
        duration: the duration, in whole notes (default: 1)
        annotation: text attached to the onset
    """
    __slots__ = ('pitches',)
    noteType = 'chord'

    def __init__(self, pitches: Sequence[Pitch | pitch_t], duration: time_t | None = None,
                 annotation=''):
        super().__init__(duration=duration, annotation=annotation)
        self.pitches = [asPitch(p) for p in pitches]

    def __repr__(self):
        return f"Chord({self.pitches!r}, {self._duration})"

    def _identity(self) -> tuple:
        return (self._duration, self._annotation, tuple(self.pitches))

    def text(self) -> str:
        if not self.pitches:
            raise ValueError("A chord needs at least one pitch")
        return "<" + " ".join(p.pitch() for p in self.pitches) + ">"


class Rest(NoteBase):
    """A rest"""
    __slots__ = ()
    noteType = 'rest'

    def __repr__(self):
        return f"Rest({self._duration})"

    def text(self) -> str:
        return "r"
