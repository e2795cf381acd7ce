"""
Command line interface

Formats the notes in a json file (see :mod:`scritto.serialize`) and writes
the result as lilypond text::

    scritto notes.json -t 3/4 -o out.ly --standalone --title "Etude"

The input is an object with a ``"notes"`` key. The rhythmic structure is
either given explicitly as ``"groupings"`` or generated from a time signature
(``"timesig"`` within the file or ``--timesig``). If the number of measures is
not given, as many measures as needed to hold all notes are generated
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import sys

from scritto.common import logger
from scritto.errors import ScrittoError, SerializationError
from scritto.formatter import formatNotes
from scritto.grouping import measuresFromTimesig, totalDuration
from scritto.duration import Duration
from scritto import serialize
from scritto import render


def _parseArgs(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='scritto',
                                     description="Format notes as lilypond text")
    parser.add_argument('input', help="A json file with the notes to format")
    parser.add_argument('-t', '--timesig', default=None,
                        help='Time signature used to generate measures (default: 4/4, '
                             'or the "timesig" key in the input)')
    parser.add_argument('-n', '--measures', type=int, default=0,
                        help="Number of measures to generate (default: as many as needed)")
    parser.add_argument('-o', '--output', default='-',
                        help="Output file (default: stdout)")
    parser.add_argument('--standalone', action='store_true',
                        help="Output a complete lilypond file")
    parser.add_argument('--title', default='', help="Title, used with --standalone")
    parser.add_argument('--descend-to-leaf', action='store_true',
                        help="Descend to the innermost subdivision when entering a grouping")
    parser.add_argument('--debug', action='store_true', help="Log debugging information")
    return parser.parse_args(argv)


def _loadInput(path: str) -> dict:
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict) or 'notes' not in data:
        raise SerializationError(f"Expected an object with a 'notes' key in {path}")
    return data


def process(data: dict,
            timesig: str | None = None,
            numMeasures=0,
            descendToLeaf: bool | None = None
            ) -> str:
    """
    Format the notes in data, as loaded from a json input file

    Args:
        data: a dict with the keys 'notes' and, optionally, 'groupings' or 'timesig'
        timesig: the time signature used if data has no groupings. Overrides any
            time signature in data
        numMeasures: the number of measures to generate. If 0, generate enough
            measures to hold all notes
        descendToLeaf: passed to the GroupingController. If None, use the config
            ('controller.descendToLeaf')

    Returns:
        the formatted notes
    """
    notes = serialize.loadNotes(data['notes'])
    if data.get('groupings'):
        groupings = [serialize.groupingFromDict(g) for g in data['groupings']]
    else:
        timesig = timesig or data.get('timesig') or '4/4'
        if not numMeasures:
            measuredur = totalDuration(measuresFromTimesig(timesig))
            notesdur = sum((note.duration() for note in notes), Duration(0))
            numMeasures = max(1, math.ceil(notesdur / measuredur))
        groupings = measuresFromTimesig(timesig, numMeasures=numMeasures)
    logger.info("Formatting %d notes within %d groupings", len(notes), len(groupings))
    return formatNotes(notes, groupings, descendToLeaf=descendToLeaf)


def main(argv: list[str] | None = None) -> int:
    args = _parseArgs(argv)
    logger.setLevel(logging.DEBUG if args.debug else logging.WARNING)
    try:
        data = _loadInput(args.input)
        out = process(data, timesig=args.timesig, numMeasures=args.measures,
                      descendToLeaf=args.descend_to_leaf or None)
        if args.standalone:
            timesig = '' if data.get('groupings') else (args.timesig or data.get('timesig') or '4/4')
            view = render.ScoreView(context={'title': args.title, 'timesig': timesig})
            out = view.render(out)
    except (ScrittoError, ValueError, OSError) as e:
        print(f"scritto: error: {e}", file=sys.stderr)
        return 1
    if args.output == '-':
        sys.stdout.write(out)
    else:
        with open(args.output, 'w') as f:
            f.write(out)
        logger.info("Written to %s", args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
