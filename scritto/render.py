"""
Template based views

A view renders one kind of input through a jinja2 template. By convention
the input is placed in the template context under a fixed name:

==============  ===========  ==================
view            input name   default template
==============  ===========  ==================
NoteView        ``note``     note.ly.j2
ChordView       ``chord``    chord.ly.j2
NotesView       ``notes``    notes.ly.j2
ScoreView       ``music``    score.ly.j2
==============  ===========  ==================

Notes and chords are placed in the context as dicts (see
:func:`scritto.serialize.noteToDict`), with the additional keys ``text``
(the text of the note, without duration) and ``lilypond`` (the duration
token). Within a NotesView template each note can be rendered with its
default view via ``view_note(note)``

Example
~~~~~~~

    >>> from scritto.notes import SingleNote
    >>> view = NoteView("{{ note.text }}")
    >>> view.render(SingleNote(60, (1, 2)))
    'c'
    >>> renderDefault(SingleNote(60, (1, 2)))
    'c2\\n'

"""
from __future__ import annotations

from functools import cache
from typing import Any

import jinja2

from scritto.common import logger
from scritto.grouping import lilypondTimeSignature
from scritto.notes import Chord, NoteBase, Rest, SingleNote
from scritto import serialize


__all__ = (
    'View',
    'NoteView',
    'ChordView',
    'NotesView',
    'ScoreView',
    'renderDefault',
)


@cache
def _environment() -> jinja2.Environment:
    # lilypond text must not be escaped
    return jinja2.Environment(loader=jinja2.PackageLoader('scritto', 'templates'),
                              autoescape=False,
                              keep_trailing_newline=True,
                              undefined=jinja2.StrictUndefined)


def _noteContext(note: NoteBase) -> dict:
    d = serialize.noteToDict(note)
    d.setdefault('annotation', '')
    d['text'] = note.text()
    d['lilypond'] = note.duration().lilypond()
    return d


class View:
    """
    Base class for all views

    Args:
        source: the source of the template. If None, the default template
            for this view is used
        context: any values to make available to the template, in addition
            to the input itself

    """
    defaultTemplate = ''
    "The name of the packaged template used when no source is given"

    inputName = ''
    "The name under which the input is placed in the context"

    def __init__(self, source: str | None = None, context: dict[str, Any] | None = None):
        env = _environment()
        self.template: jinja2.Template = (env.from_string(source) if source is not None
                                          else env.get_template(self.defaultTemplate))
        self.context: dict[str, Any] = context if context is not None else {}

    def __repr__(self):
        return f"{type(self).__name__}(template={self.template.name}, context={self.context})"

    def loadContext(self, input) -> dict[str, Any]:
        """
        Returns the context for rendering the given input

        Subclasses should override this to convert the input to a value
        which can be used from within a template
        """
        return {**self.context, self.inputName: input}

    def render(self, input) -> str:
        """
        Render the given input

        Args:
            input: the object to render

        Returns:
            the rendered text
        """
        return self.template.render(self.loadContext(input))


class NoteView(View):
    """
    Renders a single note (or rest)
    """
    defaultTemplate = 'note.ly.j2'
    inputName = 'note'

    def loadContext(self, input: SingleNote | Rest) -> dict[str, Any]:
        return {**self.context, 'note': _noteContext(input)}


class ChordView(View):
    """
    Renders a chord. The pitches are available as ``chord.pitchnames``
    """
    defaultTemplate = 'chord.ly.j2'
    inputName = 'chord'

    def loadContext(self, input: Chord) -> dict[str, Any]:
        d = _noteContext(input)
        d['pitchnames'] = [p.pitch() for p in input.pitches]
        return {**self.context, 'chord': d}


def _viewNote(d: dict) -> str:
    note = serialize.noteFromDict(d)
    return renderDefault(note).strip()


class NotesView(View):
    """
    Renders a sequence of notes, chords or rests
    """
    defaultTemplate = 'notes.ly.j2'
    inputName = 'notes'

    def loadContext(self, input: list[NoteBase]) -> dict[str, Any]:
        notes = [_noteContext(note) for note in input]
        return {**self.context, 'notes': notes, 'view_note': _viewNote}


class ScoreView(View):
    """
    Wraps already formatted lilypond text in a complete lilypond file

    The default template understands the context values ``title``,
    ``version`` and ``timesig``. ``timesig`` is given in any form accepted by
    :func:`~scritto.grouping.parseTimesig` and placed in the context as
    the lilypond command setting it
    """
    defaultTemplate = 'score.ly.j2'
    inputName = 'music'

    def loadContext(self, input: str) -> dict[str, Any]:
        context = {'title': '', 'version': '2.24.0', 'timesig': ''}
        context.update(self.context)
        if context['timesig']:
            context['timesig'] = lilypondTimeSignature(context['timesig'])
        context['music'] = input
        return context


def renderDefault(obj) -> str:
    """
    Render obj with the default view for its type

    Args:
        obj: a note, rest, chord, a list of these or a str (already
            formatted music, rendered as a score)

    Returns:
        the rendered text
    """
    if isinstance(obj, Chord):
        view = ChordView()
    elif isinstance(obj, (SingleNote, Rest)):
        view = NoteView()
    elif isinstance(obj, (list, tuple)):
        view = NotesView()
    elif isinstance(obj, str):
        view = ScoreView()
    else:
        raise TypeError(f"Don't know how to render {obj} (type: {type(obj)})")
    logger.debug("Rendering %s with %s", type(obj).__name__, view)
    return view.render(obj)
