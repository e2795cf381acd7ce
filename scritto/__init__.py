"""
scritto
=======

scritto formats a stream of notes into lilypond text within a hierarchical
rhythmic structure.

The structure is built out of :class:`~scritto.grouping.Grouping` objects:
beats, measures (sequences of beats) and regions (sequences of measures). A
:class:`~scritto.controller.GroupingController` keeps track of the position
within this structure and a :class:`~scritto.formatter.NoteFormatter` splits
any note crossing the boundary of a grouping into tied fragments, adding the
start and end annotations (bar comments, barlines, ...) of the groupings
along the way.

All durations are exact rationals (:class:`~scritto.duration.Duration`)
measured in whole notes.

    >>> from scritto import *
    >>> notes = [SingleNote(60, (1, 2)), SingleNote(62, (1, 4)), SingleNote(64, (1, 4))]
    >>> formatNotes(notes, measuresFromTimesig("4/4"))
    ' %m. \\n c4 ~ c4 d4 e4 |\\n'

"""
from .config import config
from .duration import Duration, asDuration
from .grouping import Grouping, GroupingKind, beat, measure, region, measuresFromTimesig
from .controller import GroupingController, ControlledGrouping
from .formatter import NoteFormatter, formatNotes
from .pitch import ETPitch, LilyPitch
from .notes import SingleNote, Chord, Rest
from .errors import *
from .common import logger


__all__ = [
    'config',
    'Duration',
    'asDuration',
    'Grouping',
    'GroupingKind',
    'beat',
    'measure',
    'region',
    'measuresFromTimesig',
    'GroupingController',
    'ControlledGrouping',
    'NoteFormatter',
    'formatNotes',
    'ETPitch',
    'LilyPitch',
    'SingleNote',
    'Chord',
    'Rest',
    'ScrittoError',
    'EmptyGroupingsError',
    'StructureExhaustedError',
    'UnsupportedDurationError',
    'InvariantViolation',
    'StackExhaustedError',
    'SerializationError',
    'logger',
]
