"""
Configuration for scritto

There is one active configuration, ``scritto.config.config``, a ``dict``
like object with a fixed set of valid keys. Values are validated regarding
their type and accepted values::

    >>> from scritto.config import config
    >>> config['measure.endAnnotation'] = ' \\bar "|"\\n'
    >>> config['foo'] = 'bar'
    KeyError: 'Unknown key foo'

The configuration provides the defaults used when creating groupings,
controllers and formatters. Any explicit argument passed to these
overrides the value in the configuration.
"""
from __future__ import annotations

from configdict import ConfigDict


__all__ = (
    'config',
    'defaultdict',
)


defaultdict = {
    'beat.startAnnotation': '',
    'beat.endAnnotation': '',
    'measure.startAnnotation': ' %m. \n ',
    'measure.endAnnotation': ' |\n',
    'region.startAnnotation': '',
    'region.endAnnotation': ' \\bar "||"\n',
    'controller.descendToLeaf': False,
    'format.tieSeparator': ' ~ ',
    'format.noteSeparator': ' ',
    'notation.dottedAsFigure': False,
    'notation.wholeMultiples': False,
}


validator = {
    'beat.startAnnotation::type': str,
    'beat.endAnnotation::type': str,
    'measure.startAnnotation::type': str,
    'measure.endAnnotation::type': str,
    'region.startAnnotation::type': str,
    'region.endAnnotation::type': str,
    'controller.descendToLeaf::type': bool,
    'format.tieSeparator::type': str,
    'format.noteSeparator::type': str,
    'notation.dottedAsFigure::type': bool,
    'notation.wholeMultiples::type': bool,
}


docs = {
    'beat.startAnnotation':
        "Text emitted when a beat is entered",
    'beat.endAnnotation':
        "Text emitted when a beat has been completely consumed",
    'measure.startAnnotation':
        "Text emitted at the beginning of a measure (a lilypond comment by default)",
    'measure.endAnnotation':
        "Text emitted when a measure has been completely consumed (a barline)",
    'region.startAnnotation':
        "Text emitted at the start of a region. A region with a label adds "
        "a rehearsal mark after this text",
    'region.endAnnotation':
        "Text emitted when a region has been completely consumed",
    'controller.descendToLeaf':
        "When entering a grouping, descend through its subdivisions until a "
        "leaf is reached. If False, descend only one level",
    'format.tieSeparator':
        "Text placed between the tied fragments of a note split across "
        "groupings",
    'format.noteSeparator':
        "Text placed between formatted notes",
    'notation.dottedAsFigure':
        "Render a duration 3/x as the dotted figure with that duration "
        "(3/8 -> 4.). If False, 3/x is rendered as x. (3/8 -> 8.)",
    'notation.wholeMultiples':
        "Render integer durations longer than a whole note as 1*n. If "
        "False, such durations cannot be rendered",
}


config = ConfigDict('scritto', default=defaultdict, validator=validator, docs=docs,
                    persistent=False, load=False)
