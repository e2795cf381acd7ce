"""
Exceptions raised by scritto
"""
from __future__ import annotations


__all__ = (
    'ScrittoError',
    'EmptyGroupingsError',
    'StructureExhaustedError',
    'UnsupportedDurationError',
    'InvariantViolation',
    'StackExhaustedError',
    'SerializationError',
)


class ScrittoError(Exception):
    """Base class for all errors raised by scritto"""


class EmptyGroupingsError(ScrittoError, ValueError):
    """A GroupingController was constructed without any grouping"""


class StructureExhaustedError(ScrittoError):
    """
    More time was requested than the rhythmic structure can supply

    The controller is left untouched when this is raised, so it is
    possible to extend the structure and issue the same request again
    """


class UnsupportedDurationError(ScrittoError, ValueError):
    """A duration cannot be expressed as a single (maybe dotted) figure"""


class InvariantViolation(ScrittoError, RuntimeError):
    """Internal logic error. Should never happen"""


class StackExhaustedError(InvariantViolation):
    """The grouping stack of a controller is empty"""


class SerializationError(ScrittoError, ValueError):
    """Data could not be converted from / to its interchange format"""
