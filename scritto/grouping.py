"""
Hierarchical rhythmic groupings

A :class:`Grouping` is a span of rhythmic time: a **beat** (a leaf), a
**measure** (a sequence of beats) or a **region** (a sequence of measures,
a section of a piece). Groupings are consumed from left to right by a
:class:`~scritto.controller.GroupingController`, which descends into the
subdivisions of a composite grouping by popping them one at a time.

Each kind of grouping defines the text emitted when a grouping is entered
(its start annotation) and when it has been completely consumed (its end
annotation). The defaults are taken from the configuration:

=========  ===========================  ============================
kind       start                        end
=========  ===========================  ============================
beat       ``beat.startAnnotation``     ``beat.endAnnotation``
measure    ``measure.startAnnotation``  ``measure.endAnnotation``
region     ``region.startAnnotation``   ``region.endAnnotation``
=========  ===========================  ============================

Example
~~~~~~~

    >>> from scritto.grouping import *
    >>> m = measure([beat((1, 4)), beat((1, 4)), beat((1, 2))])
    >>> m.duration()
    Duration(1, 1)
    >>> m.nextSubdivision()
    Grouping(beat, 1/4)

"""
from __future__ import annotations

import copy as _copy
import enum
import re

from scritto.config import config
from scritto.duration import Duration, asDuration

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from typing import Iterable, Sequence
    from scritto.common import time_t, timesig_t


__all__ = (
    'GroupingKind',
    'Grouping',
    'beat',
    'measure',
    'region',
    'parseTimesig',
    'measuresFromTimesig',
    'totalDuration',
    'lilypondTimeSignature',
)


class GroupingKind(enum.Enum):
    BEAT = 'beat'
    MEASURE = 'measure'
    REGION = 'region'


_annotationKeys: dict[GroupingKind, tuple[str, str]] = {
    GroupingKind.BEAT: ('beat.startAnnotation', 'beat.endAnnotation'),
    GroupingKind.MEASURE: ('measure.startAnnotation', 'measure.endAnnotation'),
    GroupingKind.REGION: ('region.startAnnotation', 'region.endAnnotation'),
}


class Grouping:
    """
    A span of rhythmic time, possibly subdivided

    Use the constructors :meth:`Grouping.beat`, :meth:`Grouping.measure` and
    :meth:`Grouping.region` (or their module level counterparts) instead of
    calling this directly.

    Args:
        kind: the kind of grouping
        duration: the duration of a leaf grouping. Must be None for a composite
            grouping, whose duration is the sum of its contents
        contents: the subdivisions of a composite grouping, **in playback order**
        startAnnotation: text emitted when this grouping is entered. If None,
            use the default for the given kind
        endAnnotation: text emitted when this grouping has been consumed. If None,
            use the default for the given kind
        label: a label (used by regions to add a rehearsal mark)
    """
    __slots__ = ('kind', 'label', '_duration', '_contents', '_startAnnotation', '_endAnnotation')

    def __init__(self,
                 kind: GroupingKind,
                 duration: time_t | None = None,
                 contents: Iterable[Grouping] = (),
                 startAnnotation: str | None = None,
                 endAnnotation: str | None = None,
                 label: str = ''):
        self.kind = kind
        self.label = label
        # Stored reversed, so that popping from the back yields the
        # subdivisions in playback order
        self._contents: list[Grouping] = list(contents)[::-1]
        if kind is GroupingKind.BEAT:
            if self._contents:
                raise ValueError("A beat cannot have subdivisions")
            if duration is None:
                raise ValueError("A beat needs a duration")
            self._duration = asDuration(duration)
            if self._duration == 0:
                raise ValueError("A beat must have a positive duration")
        else:
            if duration is not None:
                raise ValueError(f"The duration of a {kind.value} is determined by its contents")
            if not self._contents:
                raise ValueError(f"A {kind.value} needs at least one subdivision")
            self._duration = sum((g.duration() for g in self._contents), Duration(0))

        startkey, endkey = _annotationKeys[kind]
        if startAnnotation is None:
            startAnnotation = config[startkey]
            if label and kind is GroupingKind.REGION:
                startAnnotation += f'\\mark "{label}" '
        self._startAnnotation: str = startAnnotation
        self._endAnnotation: str = endAnnotation if endAnnotation is not None else config[endkey]

    @classmethod
    def beat(cls, duration: time_t, startAnnotation: str | None = None,
             endAnnotation: str | None = None) -> Grouping:
        """
        Create a beat, the simplest form of grouping

        Args:
            duration: the duration of the beat, a Duration, a tuple (num, den), etc.
            startAnnotation: text emitted when entering the beat
            endAnnotation: text emitted when the beat is consumed

        Returns:
            the beat
        """
        return cls(GroupingKind.BEAT, duration=duration, startAnnotation=startAnnotation,
                   endAnnotation=endAnnotation)

    @classmethod
    def measure(cls, contents: Iterable[Grouping], startAnnotation: str | None = None,
                endAnnotation: str | None = None) -> Grouping:
        """
        Create a measure

        Args:
            contents: the subdivisions of this measure (normally beats), in playback order
            startAnnotation: text emitted at the beginning of the measure
            endAnnotation: text emitted when the measure is consumed (the barline)

        Returns:
            the measure
        """
        return cls(GroupingKind.MEASURE, contents=contents, startAnnotation=startAnnotation,
                   endAnnotation=endAnnotation)

    @classmethod
    def region(cls, contents: Iterable[Grouping], label='', startAnnotation: str | None = None,
               endAnnotation: str | None = None) -> Grouping:
        """
        Create a region, a section grouping measures together

        Args:
            contents: the subdivisions of this region (normally measures), in playback order
            label: if given, a rehearsal mark with this text is added at the start
                (only if no explicit startAnnotation is given)
            startAnnotation: text emitted at the beginning of the region
            endAnnotation: text emitted at the end of the region

        Returns:
            the region
        """
        return cls(GroupingKind.REGION, contents=contents, label=label,
                   startAnnotation=startAnnotation, endAnnotation=endAnnotation)

    def __repr__(self):
        if self.isLeaf():
            return f"Grouping({self.kind.value}, {self._duration})"
        return f"Grouping({self.kind.value}, {self._duration}, left={len(self._contents)})"

    def duration(self) -> Duration:
        """The total duration of this grouping"""
        return self._duration

    def isLeaf(self) -> bool:
        return self.kind is GroupingKind.BEAT

    def nextSubdivision(self) -> Grouping | None:
        """
        Remove and return the next subdivision

        Returns:
            the next subdivision in playback order, or None if this grouping
            is a leaf or all its subdivisions have been consumed
        """
        return self._contents.pop() if self._contents else None

    def isEmpty(self) -> bool:
        """True if there are no subdivisions left to consume"""
        return not self._contents

    def subdivisions(self) -> list[Grouping]:
        """The subdivisions not yet consumed, in playback order"""
        return self._contents[::-1]

    def startAnnotation(self) -> str:
        return self._startAnnotation

    def endAnnotation(self) -> str:
        return self._endAnnotation

    def copy(self) -> Grouping:
        """
        A copy of this grouping, including any subdivision not yet consumed

        Use this to reuse a rhythmic structure, since a controller consumes
        the groupings it is given
        """
        return _copy.deepcopy(self)

    def __deepcopy__(self, memo) -> Grouping:
        out = object.__new__(Grouping)
        out.kind = self.kind
        out.label = self.label
        out._duration = self._duration
        out._contents = [g.__deepcopy__(memo) for g in self._contents]
        out._startAnnotation = self._startAnnotation
        out._endAnnotation = self._endAnnotation
        return out


beat = Grouping.beat
measure = Grouping.measure
region = Grouping.region


def _parseTimesigPart(s: str) -> tuple[tuple[int, int], tuple[int, ...]]:
    """
    Given a string in the form 5/8(3-2), returns ((5, 8), (3, 2))

    Possible parts: 5/8, 5/8(3-2), 5/8(3+2),

    For 5/8, returns ((5, 8), ())
    """
    s = s.strip()
    if "(" in s:
        if s.count("(") != 1 or s[-1] != ")":
            raise ValueError(f"Invalid time signature part: {s}")
        p1, p2 = s[:-1].split("(")
        num, den = _parseTimesigPart(p1)[0]
        subdivs = tuple(int(subdiv) for subdiv in re.split(r"[+\-]", p2))
        if sum(subdivs) != num:
            raise ValueError(f"Invalid subdivision structure {subdivs} for {num}/{den}")
        return ((num, den), subdivs)
    fracparts = s.split("/")
    if len(fracparts) != 2:
        raise ValueError(f"Invalid time signature: {s}")
    nums, dens = fracparts
    num, den = int(nums), int(dens)
    if num <= 0 or den <= 0:
        raise ValueError(f"Invalid time signature: {s}")
    return ((num, den), ())


def parseTimesig(timesig: str | timesig_t
                 ) -> list[tuple[tuple[int, int], tuple[int, ...]]]:
    """
    Parse a time signature definition

    Args:
        timesig: a time signature as a tuple (num, den) or as a string. For
            compound signatures, use a + sign between parts. A subdivision
            structure can be given within parenthesis, as multiples of
            the denominator

    Returns:
        a list of parts, where each part is a tuple ((num, den), subdivisions)

    Example
    ~~~~~~~

        >>> parseTimesig("4/4")
        [((4, 4), ())]
        >>> parseTimesig("5/8(3-2)")
        [((5, 8), (3, 2))]
        >>> parseTimesig("3/4+3/8")
        [((3, 4), ()), ((3, 8), ())]
    """
    if isinstance(timesig, tuple):
        if len(timesig) != 2 or not all(isinstance(x, int) for x in timesig):
            raise ValueError(f"Cannot parse time signature: {timesig}")
        return [_parseTimesigPart(f"{timesig[0]}/{timesig[1]}")]
    elif isinstance(timesig, str):
        # Possible signatures: 3/4, 3/8+3/8+2/8, 5/8(3-2), 5/8(3+2)+3/16
        parts = re.split(r"\+(?![^(]*\))", timesig)
        return [_parseTimesigPart(part) for part in parts]
    raise TypeError(f"Expected a str or a tuple, got {timesig}")


def _beatDurations(timesig: str | timesig_t) -> list[Duration]:
    out = []
    for (num, den), subdivs in parseTimesig(timesig):
        if subdivs:
            out.extend(Duration(subdiv, den) for subdiv in subdivs)
        else:
            out.extend([Duration(1, den)] * num)
    return out


def measuresFromTimesig(timesig: str | timesig_t, numMeasures=1) -> list[Grouping]:
    """
    Create measures subdivided in beats according to a time signature

    Args:
        timesig: the time signature, as a tuple (num, den) or a string like
            "4/4", "5/8(3-2)" or "3/4+3/8" (see :func:`parseTimesig`)
        numMeasures: the number of measures to create

    Returns:
        a list of measures. Each measure contains one beat per pulse
        in the time signature or one beat per subdivision if a
        subdivision structure was given

    Example
    ~~~~~~~

        >>> [m.duration() for m in measuresFromTimesig("3/4", 2)]
        [Duration(3, 4), Duration(3, 4)]
        >>> [b.duration() for b in measuresFromTimesig("5/8(3-2)")[0].subdivisions()]
        [Duration(3, 8), Duration(1, 4)]
    """
    if numMeasures < 1:
        raise ValueError(f"At least one measure is needed, got {numMeasures}")
    beatdurs = _beatDurations(timesig)
    return [measure([beat(dur) for dur in beatdurs]) for _ in range(numMeasures)]


def totalDuration(groupings: Sequence[Grouping]) -> Duration:
    """The sum of the durations of the given groupings"""
    return sum((g.duration() for g in groupings), Duration(0))


def lilypondTimeSignature(timesig: str | timesig_t) -> str:
    """
    The lilypond command setting the given time signature

    Args:
        timesig: the time signature, as accepted by :func:`parseTimesig`

    Returns:
        a ``\\time`` command for a simple signature, with its subdivision
        structure if given, or a ``\\compoundMeter`` command for a compound
        signature

    Example
    ~~~~~~~

        >>> print(lilypondTimeSignature("4/4"))
        \\time 4/4
        >>> print(lilypondTimeSignature("5/8(3-2)"))
        \\time 3,2 5/8
        >>> print(lilypondTimeSignature("3/4+3/8"))
        \\compoundMeter #'((3 4) (3 8))
    """
    parts = parseTimesig(timesig)
    if len(parts) == 1:
        (num, den), subdivs = parts[0]
        if subdivs:
            # \time 2,2,3 7/8
            return fr"\time {','.join(map(str, subdivs))} {num}/{den}"
        return fr"\time {num}/{den}"
    # 3/8 -> (3 8), 5/8(3-2) -> (3 2 8)
    pairs = ' '.join("(" + " ".join(map(str, subdivs or (num,))) + f" {den})"
                     for (num, den), subdivs in parts)
    return fr"\compoundMeter #'({pairs})"
