"""
JSON interchange format for durations, pitches, notes and groupings

=========  ==============================================================
object     representation
=========  ==============================================================
Duration   ``[3, 8]``
ETPitch    ``{"type": "et", "midi": 60}``
LilyPitch  ``{"type": "lily", "notename": "4C#"}``
SingleNote ``{"type": "note", "pitch": ..., "duration": [1, 4]}``
Chord      ``{"type": "chord", "pitches": [...], "duration": [1, 2]}``
Rest       ``{"type": "rest", "duration": [1, 4]}``
Beat       ``{"type": "beat", "duration": [1, 4]}``
Measure    ``{"type": "measure", "contents": [...]}``
Region     ``{"type": "region", "label": "A", "contents": [...]}``
=========  ==============================================================

Notes can also have an ``"annotation"`` and groupings ``"startAnnotation"`` /
``"endAnnotation"``. A pitch can also be given as a plain midinote (int) or a
notename (str), a duration as a string ``"3/8"``
"""
from __future__ import annotations

import json
from typing import Any

from scritto.duration import Duration, asDuration
from scritto.errors import SerializationError
from scritto.grouping import Grouping, GroupingKind
from scritto.notes import Chord, NoteBase, Rest, SingleNote
from scritto.pitch import ETPitch, LilyPitch, Pitch, asPitch


__all__ = (
    'durationToJson',
    'durationFromJson',
    'pitchToDict',
    'pitchFromDict',
    'noteToDict',
    'noteFromDict',
    'groupingToDict',
    'groupingFromDict',
    'dumpNotes',
    'loadNotes',
    'dumps',
    'loads',
)


def durationToJson(d: Duration) -> list[int]:
    return [d.numerator, d.denominator]


def durationFromJson(x: Any) -> Duration:
    try:
        if isinstance(x, list):
            x = tuple(x)
        return asDuration(x)
    except (TypeError, ValueError, ZeroDivisionError) as e:
        raise SerializationError(f"Invalid duration: {x!r} ({e})") from e


def pitchToDict(p: Pitch) -> dict:
    return p.asdict()


def pitchFromDict(d: dict | int | str) -> Pitch:
    if not isinstance(d, dict):
        try:
            return asPitch(d)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Invalid pitch: {d!r} ({e})") from e
    pitchtype = d.get('type')
    try:
        if pitchtype == ETPitch.pitchType:
            return ETPitch(d['midi'])
        elif pitchtype == LilyPitch.pitchType:
            return LilyPitch(d['notename'], divsPerSemitone=d.get('divsPerSemitone', 4))
    except KeyError as e:
        raise SerializationError(f"Missing key {e} in pitch {d}") from e
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Invalid pitch: {d!r} ({e})") from e
    raise SerializationError(f"Unknown pitch type {pitchtype!r} in {d}")


def noteToDict(note: NoteBase) -> dict:
    out: dict[str, Any] = {'type': note.noteType}
    if isinstance(note, SingleNote):
        out['pitch'] = pitchToDict(note.pitch)
    elif isinstance(note, Chord):
        out['pitches'] = [pitchToDict(p) for p in note.pitches]
    elif not isinstance(note, Rest):
        raise SerializationError(f"Cannot serialize {note} (type: {type(note)})")
    out['duration'] = durationToJson(note.duration())
    if note.annotation():
        out['annotation'] = note.annotation()
    return out


def noteFromDict(d: dict) -> NoteBase:
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a dict, got {d!r}")
    notetype = d.get('type', 'note')
    duration = durationFromJson(d['duration']) if 'duration' in d else None
    annotation = d.get('annotation', '')
    try:
        if notetype == 'note':
            return SingleNote(pitchFromDict(d['pitch']), duration=duration, annotation=annotation)
        elif notetype == 'chord':
            return Chord([pitchFromDict(p) for p in d['pitches']], duration=duration,
                         annotation=annotation)
        elif notetype == 'rest':
            return Rest(duration=duration, annotation=annotation)
    except KeyError as e:
        raise SerializationError(f"Missing key {e} in {d}") from e
    except ValueError as e:
        raise SerializationError(f"Invalid note {d}: {e}") from e
    raise SerializationError(f"Unknown note type {notetype!r} in {d}")


def groupingToDict(g: Grouping) -> dict:
    """
    Serialize a grouping

    Only subdivisions not yet consumed are included
    """
    out: dict[str, Any] = {'type': g.kind.value}
    if g.isLeaf():
        out['duration'] = durationToJson(g.duration())
    else:
        out['contents'] = [groupingToDict(sub) for sub in g.subdivisions()]
    if g.label:
        out['label'] = g.label
    out['startAnnotation'] = g.startAnnotation()
    out['endAnnotation'] = g.endAnnotation()
    return out


def groupingFromDict(d: dict) -> Grouping:
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a dict, got {d!r}")
    try:
        kind = GroupingKind(d.get('type'))
    except ValueError as e:
        raise SerializationError(f"Unknown grouping type in {d}") from e
    start = d.get('startAnnotation')
    end = d.get('endAnnotation')
    try:
        if kind is GroupingKind.BEAT:
            return Grouping.beat(durationFromJson(d['duration']), startAnnotation=start,
                                 endAnnotation=end)
        contents = [groupingFromDict(sub) for sub in d['contents']]
        if kind is GroupingKind.MEASURE:
            return Grouping.measure(contents, startAnnotation=start, endAnnotation=end)
        return Grouping.region(contents, label=d.get('label', ''), startAnnotation=start,
                               endAnnotation=end)
    except KeyError as e:
        raise SerializationError(f"Missing key {e} in {d}") from e
    except ValueError as e:
        if isinstance(e, SerializationError):
            raise
        raise SerializationError(f"Invalid grouping {d}: {e}") from e


def dumpNotes(notes: list[NoteBase]) -> list[dict]:
    return [noteToDict(note) for note in notes]


def loadNotes(data: list[dict]) -> list[NoteBase]:
    if not isinstance(data, list):
        raise SerializationError(f"Expected a list of notes, got {data!r}")
    return [noteFromDict(d) for d in data]


def dumps(notes: list[NoteBase], groupings: list[Grouping] | None = None, **kws) -> str:
    """
    Serialize notes (and optionally groupings) as json

    Args:
        notes: the notes to serialize
        groupings: the groupings, if any
        kws: passed to json.dumps

    Returns:
        a json string of the form ``{"notes": [...], "groupings": [...]}``
    """
    data: dict[str, Any] = {'notes': dumpNotes(notes)}
    if groupings is not None:
        data['groupings'] = [groupingToDict(g) for g in groupings]
    return json.dumps(data, **kws)


def loads(s: str) -> tuple[list[NoteBase], list[Grouping] | None]:
    """
    Parse a json string as generated by :func:`dumps`

    Returns:
        a tuple (notes, groupings), where groupings is None if the
        data does not include any
    """
    try:
        data = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid json: {e}") from e
    if not isinstance(data, dict) or 'notes' not in data:
        raise SerializationError("Expected an object with a 'notes' key")
    notes = loadNotes(data['notes'])
    groupings = data.get('groupings')
    if groupings is not None:
        groupings = [groupingFromDict(g) for g in groupings]
    return notes, groupings
