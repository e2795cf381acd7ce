from fractions import Fraction

import pytest

from scritto.duration import Duration, asDuration, isLilypondDuration
from scritto.errors import UnsupportedDurationError


def test_reduced():
    d = Duration(2, 8)
    assert d == Duration(1, 4)
    assert d.asRatio() == (1, 4)
    assert repr(d) == "Duration(1, 4)"
    assert str(d) == "1/4"
    assert str(Duration(2, 1)) == "2"


def test_zero_normalizes():
    assert Duration(0, 5).asRatio() == (0, 1)


def test_invalid():
    with pytest.raises(ZeroDivisionError):
        Duration(1, 0)
    with pytest.raises(ValueError):
        Duration(-1, 4)


def test_arithmetic_keeps_type():
    a, b = Duration(1, 6), Duration(1, 8)
    assert isinstance(a + b, Duration)
    assert a + b == Duration(7, 24)
    assert isinstance(a - b, Duration)
    assert a - b == Duration(1, 24)
    assert (a + b) - b == a
    assert isinstance(sum([a, b], Duration(0)), Duration)


def test_negative_subtraction():
    with pytest.raises(ValueError):
        Duration(1, 8) - Duration(1, 4)


def test_exact_comparison():
    assert Duration(1, 3) + Duration(1, 3) + Duration(1, 3) == Duration(1)
    assert Duration(1, 3) < Duration(1, 2)
    assert Duration(3, 8).asFloat() == 0.375


@pytest.mark.parametrize("ratio, token", [
    ((1, 1), "1"),
    ((1, 2), "2"),
    ((1, 4), "4"),
    ((1, 16), "16"),
    ((3, 4), "4."),
    ((3, 8), "8."),
])
def test_lilypond(ratio, token):
    assert Duration(*ratio).lilypond() == token


def test_lilypond_dotted_as_figure(restoreConfig):
    assert Duration(3, 8).lilypond(dottedAsFigure=True) == "4."
    restoreConfig['notation.dottedAsFigure'] = True
    assert Duration(3, 4).lilypond() == "2."
    assert Duration(1, 4).lilypond() == "4"


def test_lilypond_whole_multiples(restoreConfig):
    with pytest.raises(UnsupportedDurationError):
        Duration(2).lilypond()
    assert Duration(2).lilypond(wholeMultiples=True) == "1*2"
    restoreConfig['notation.wholeMultiples'] = True
    assert Duration(4).lilypond() == "1*4"


@pytest.mark.parametrize("ratio", [(5, 7), (1, 3), (5, 8), (1, 6)])
def test_lilypond_unsupported(ratio):
    with pytest.raises(UnsupportedDurationError):
        Duration(*ratio).lilypond()
    assert not isLilypondDuration(Duration(*ratio))


def test_asDuration():
    assert asDuration((2, 8)) == Duration(1, 4)
    assert asDuration("3/8") == Duration(3, 8)
    assert asDuration(2) == Duration(2)
    assert asDuration(Fraction(1, 4)) == Duration(1, 4)
    assert isinstance(asDuration(Fraction(1, 4)), Duration)
    d = Duration(1, 4)
    assert asDuration(d) is d
    with pytest.raises(TypeError):
        asDuration(0.25)
    with pytest.raises(ValueError):
        asDuration((1, 2, 3))
