"""
Formatting notes within a rhythmic structure

A :class:`NoteFormatter` turns a stream of notes into lilypond text. It asks
its :class:`~scritto.controller.GroupingController` how much time is left in
the current innermost grouping and splits any note crossing a boundary into
tied fragments, interleaving the annotations of the groupings entered and
exhausted along the way.

    >>> from scritto.grouping import measuresFromTimesig
    >>> from scritto.notes import SingleNote
    >>> notes = [SingleNote(60, (1, 2)), SingleNote(62, (1, 4)), SingleNote(64, (1, 4))]
    >>> formatNotes(notes, measuresFromTimesig("4/4"))
    ' %m. \\n c4 ~ c4 d4 e4 |\\n'

"""
from __future__ import annotations

from scritto.common import logger
from scritto.config import config
from scritto.controller import GroupingController
from scritto.duration import asDuration
from scritto.errors import StructureExhaustedError

import typing as _t
if _t.TYPE_CHECKING:
    from typing import Iterable
    from scritto.grouping import Grouping
    from scritto.notes import Note


__all__ = (
    'NoteFormatter',
    'formatNotes',
)


class NoteFormatter:
    """
    Formats notes, splitting them at the boundaries of a rhythmic structure

    The formatter uses its controller exclusively: while formatting, nothing
    else should consume time from it.

    Args:
        controller: the controller holding the rhythmic structure
        tieSeparator: text placed between the tied fragments of a note. If None,
            use the config ('format.tieSeparator')
        noteSeparator: text placed between formatted notes. If None, use the
            config ('format.noteSeparator')
    """
    def __init__(self,
                 controller: GroupingController,
                 tieSeparator: str | None = None,
                 noteSeparator: str | None = None):
        self.controller = controller
        self.tieSeparator = tieSeparator if tieSeparator is not None else config['format.tieSeparator']
        self.noteSeparator = noteSeparator if noteSeparator is not None else config['format.noteSeparator']

    def _startAnnotations(self) -> str:
        return "".join(cg.grouping.startAnnotation() for cg in self.controller.stack
                       if cg.isStartOfGrouping())

    def formatNote(self, note: Note) -> str:
        """
        Format one note

        Args:
            note: the note to format

        Returns:
            the text for this note. If the note crosses the boundary of a grouping
            it is split into fragments joined by the tie separator

        Raises:
            StructureExhaustedError: if there is not enough time left in the
                rhythmic structure. Nothing is consumed in this case
            UnsupportedDurationError: if a fragment has a duration which cannot
                be rendered. Nothing is consumed in this case either
        """
        dur = asDuration(note.duration())
        if dur == 0:
            raise ValueError(f"Cannot format a note without duration: {note}")
        controller = self.controller
        if controller.exhausted:
            raise StructureExhaustedError(f"No groupings left to format {note}")
        # Everything which can fail is done before consuming any time
        fragments = controller.fragments(dur)
        tokens = [fragdur.lilypond() for fragdur in fragments]
        text = note.text()

        parts: list[str] = []
        pending = ''
        for fragdur, token in zip(fragments, tokens):
            fragment = self._startAnnotations() + text + token
            if parts:
                parts.append(self.tieSeparator)
                parts.append(pending)
            else:
                fragment += note.annotation()
            parts.append(fragment)
            exhausted = controller.consumeTime(fragdur)
            pending = "".join(grouping.endAnnotation() for grouping in exhausted)
        parts.append(pending)
        if len(parts) > 2:
            logger.debug("Split %s (%s) at %s", note, dur, controller.elapsed)
        return "".join(parts)

    def formatNotes(self, notes: Iterable[Note]) -> str:
        """
        Format a sequence of notes

        Args:
            notes: the notes to format

        Returns:
            the formatted notes, joined with the note separator
        """
        return self.noteSeparator.join(self.formatNote(note) for note in notes)


def formatNotes(notes: Iterable[Note],
                groupings: Iterable[Grouping],
                descendToLeaf: bool | None = None,
                **kws
                ) -> str:
    """
    Format notes within the given groupings

    Args:
        notes: the notes to format
        groupings: the top-level groupings (measures, regions, ...). They are consumed
            in the process, use :meth:`Grouping.copy` to reuse a structure
        descendToLeaf: passed to the GroupingController
        kws: any keyword argument is passed to the NoteFormatter

    Returns:
        the formatted notes

    """
    controller = GroupingController(groupings, descendToLeaf=descendToLeaf)
    return NoteFormatter(controller, **kws).formatNotes(notes)
