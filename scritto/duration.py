"""
Exact rational durations

A :class:`Duration` is a non-negative rational number measured in whole
notes (1/4 is a quarter note, 3/8 a dotted quarter). It is a drop-in
replacement for a Fraction: it is always reduced, comparisons are exact
and arithmetic between durations results in a Duration. Floats are
never used to decide anything, :meth:`Duration.asFloat` exists only
for display purposes.

    >>> from scritto.duration import Duration
    >>> Duration(2, 8)
    Duration(1, 4)
    >>> Duration(1, 6) - Duration(1, 8)
    Duration(1, 24)
    >>> Duration(1, 4).lilypond()
    '4'

"""
from __future__ import annotations
from numbers import Rational
from typing import Any

from emlib.mathlib import ispowerof2

from scritto.common import F
from scritto.config import config
from scritto.errors import UnsupportedDurationError


__all__ = (
    'Duration',
    'asDuration',
    'isLilypondDuration',
)


class Duration(F):
    """
    A non-negative, always reduced, rational duration

    Args:
        numerator: the numerator, or anything a Fraction can be constructed from
        denominator: the denominator, if numerator is an int

    Raises ZeroDivisionError if the denominator is 0 and ValueError if
    the resulting duration would be negative
    """

    def __new__(cls, numerator: Any = 0, denominator: int | None = None):
        self = super().__new__(cls, numerator, denominator)
        if self.numerator < 0:
            raise ValueError(f"A duration cannot be negative, got {numerator}/{denominator}")
        return self

    def __repr__(self):
        return f"Duration({self.numerator}, {self.denominator})"

    def __str__(self):
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __add__(self, other) -> Duration:
        r = F.__add__(self, other)
        return Duration(r.numerator, r.denominator) if isinstance(r, F) else r

    def __radd__(self, other) -> Duration:
        r = F.__radd__(self, other)
        return Duration(r.numerator, r.denominator) if isinstance(r, F) else r

    def __sub__(self, other) -> Duration:
        r = F.__sub__(self, other)
        if not isinstance(r, F):
            return r
        if r < 0:
            raise ValueError(f"Cannot subtract {other} from {self}, the result would be negative")
        return Duration(r.numerator, r.denominator)

    def __rsub__(self, other) -> Duration:
        r = F.__rsub__(self, other)
        if not isinstance(r, F):
            return r
        if r < 0:
            raise ValueError(f"Cannot subtract {self} from {other}, the result would be negative")
        return Duration(r.numerator, r.denominator)

    def __mul__(self, other) -> Duration:
        r = F.__mul__(self, other)
        return Duration(r.numerator, r.denominator) if isinstance(r, F) else r

    def __rmul__(self, other) -> Duration:
        r = F.__rmul__(self, other)
        return Duration(r.numerator, r.denominator) if isinstance(r, F) else r

    def __reduce__(self):
        return (self.__class__, (self.numerator, self.denominator))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def asFloat(self) -> float:
        """
        This duration as float

        Only for display / debugging. Use the duration itself for any comparison
        """
        return self.numerator / self.denominator

    def asRatio(self) -> tuple[int, int]:
        """The reduced ratio (numerator, denominator)"""
        return self.numerator, self.denominator

    def lilypond(self, dottedAsFigure: bool | None = None, wholeMultiples: bool | None = None
                 ) -> str:
        """
        The lilypond duration token for this duration

        ========  =======
        Duration  Token
        ========  =======
        1/1       1
        1/4       4
        1/16      16
        3/4       4.
        3/8       8.
        ========  =======

        Args:
            dottedAsFigure: if True, a duration 3/x is rendered as the dotted figure
                with that length (3/8 -> "4."). If None, use the value in the config
                ('notation.dottedAsFigure')
            wholeMultiples: if True, an integer duration n > 1 is rendered as
                "1*n". If None, use the config ('notation.wholeMultiples')

        Returns:
            the duration token

        Raises:
            UnsupportedDurationError: if this duration cannot be represented by
                a single, maybe dotted, figure (a tuplet, for example)
        """
        num, den = self.numerator, self.denominator
        if num == 1 and ispowerof2(den):
            return str(den)
        elif num == 3 and ispowerof2(den):
            if dottedAsFigure is None:
                dottedAsFigure = config['notation.dottedAsFigure']
            if not dottedAsFigure:
                return f"{den}."
            elif den >= 2:
                return f"{den // 2}."
        elif den == 1 and num > 1:
            if wholeMultiples is None:
                wholeMultiples = config['notation.wholeMultiples']
            if wholeMultiples:
                return f"1*{num}"
        raise UnsupportedDurationError(f"Could not print {num}/{den}")


def asDuration(x: Any) -> Duration:
    """
    Convert x to a Duration

    Args:
        x: a Duration, an int, a rational, a string ("3/8") or a
            tuple (numerator, denominator)

    Returns:
        the corresponding Duration

    Example
    ~~~~~~~

        >>> asDuration((2, 8))
        Duration(1, 4)
        >>> asDuration("3/8")
        Duration(3, 8)
    """
    if isinstance(x, Duration):
        return x
    elif isinstance(x, tuple):
        if len(x) != 2:
            raise ValueError(f"Expected a tuple (numerator, denominator), got {x}")
        return Duration(*x)
    elif isinstance(x, Rational):
        return Duration(x.numerator, x.denominator)
    elif isinstance(x, str):
        return Duration(x)
    raise TypeError(f"Cannot convert {x} (type: {type(x)}) to a Duration")


def isLilypondDuration(d: Duration) -> bool:
    """
    True if d can be rendered as a lilypond duration token
    """
    try:
        d.lilypond()
    except UnsupportedDurationError:
        return False
    return True
