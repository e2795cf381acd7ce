import pytest

from scritto.controller import GroupingController
from scritto.duration import Duration
from scritto.errors import StructureExhaustedError, UnsupportedDurationError
from scritto.formatter import NoteFormatter, formatNotes
from scritto.grouping import beat, measure, region, measuresFromTimesig
from scritto.notes import Chord, Rest, SingleNote


class PlainNote:
    """Anything with duration, text and annotation can be formatted"""
    def __init__(self, text, duration):
        self._text = text
        self._duration = duration

    def duration(self):
        return self._duration

    def text(self):
        return self._text

    def annotation(self):
        return ''


def test_tie_within_measure(fourFour, scale):
    assert formatNotes(scale, fourFour) == " %m. \n c4 ~ c4 d4 e4 |\n"


def test_formatter_instance(fourFour, scale):
    controller = GroupingController(fourFour)
    formatter = NoteFormatter(controller)
    assert formatter.formatNote(scale[0]) == " %m. \n c4 ~ c4"
    assert formatter.formatNote(scale[1]) == "d4"
    assert formatter.formatNote(scale[2]) == "e4 |\n"
    assert controller.exhausted
    assert controller.elapsed == Duration(1)


def test_tie_across_barline():
    notes = [SingleNote(60, (1, 4)), SingleNote(62, (1, 2)), SingleNote(64, (1, 4))]
    out = formatNotes(notes, measuresFromTimesig("2/4", 2))
    assert out == " %m. \n c4 d4 ~  |\n %m. \n d4 e4 |\n"


def test_annotation_only_on_first_fragment(fourFour):
    notes = [SingleNote(60, (1, 2), annotation="-."), SingleNote(62, (1, 2))]
    assert formatNotes(notes, fourFour) == " %m. \n c4-. ~ c4 d4 ~ d4 |\n"


def test_dotted_fragments():
    notes = [SingleNote(60, (3, 8)), SingleNote(62, (3, 8))]
    assert formatNotes(notes, measuresFromTimesig("6/8(3-3)")) == " %m. \n c8. d8. |\n"
    notes = [SingleNote(60, (3, 8)), SingleNote(62, (1, 8)), SingleNote(64, (1, 2))]
    out = formatNotes(notes, measuresFromTimesig("4/4"))
    assert out == " %m. \n c4 ~ c8 d8 e4 ~ e4 |\n"


def test_beat_annotations():
    m = measure([beat((1, 4), startAnnotation="{", endAnnotation="}"),
                 beat((1, 4), startAnnotation="{", endAnnotation="}")],
                startAnnotation="", endAnnotation="|")
    assert formatNotes([SingleNote(60, (1, 2))], [m]) == "{c4 ~ }{c4}|"


def test_custom_separators(fourFour, scale):
    out = formatNotes(scale, fourFour, tieSeparator="~", noteSeparator="\n")
    assert out == " %m. \n c4~c4\nd4\ne4 |\n"


def test_separators_from_config(restoreConfig, fourFour, scale):
    restoreConfig['format.tieSeparator'] = '~'
    assert formatNotes(scale, fourFour) == " %m. \n c4~c4 d4 e4 |\n"


def test_chords_and_rests(fourFour):
    notes = [Chord([60, 64, 67], (1, 4)), Rest((1, 4)), Chord([62, 65], (1, 2))]
    assert formatNotes(notes, fourFour) == " %m. \n <c e g>4 r4 <d f>4 ~ <d f>4 |\n"


def test_region_one_level():
    out = formatNotes([SingleNote(60, (1, 2)), SingleNote(62, (1, 2))],
                      [region(measuresFromTimesig("4/4"))])
    # Beats are not entered, the measure is the innermost grouping
    assert out == ' %m. \n c2 d2 |\n \\bar "||"\n'


def test_region_descend_to_leaf():
    groupings = [region(measuresFromTimesig("2/4", 2), label="A")]
    out = formatNotes([SingleNote(60, (1, 2)), SingleNote(62, (1, 2))], groupings,
                      descendToLeaf=True)
    assert out == '\\mark "A"  %m. \n c4 ~ c4 |\n  %m. \n d4 ~ d4 |\n \\bar "||"\n'


def test_insufficient_structure():
    controller = GroupingController([beat((1, 4))])
    formatter = NoteFormatter(controller)
    with pytest.raises(StructureExhaustedError):
        formatter.formatNote(SingleNote(60, (1, 2)))
    assert controller.elapsed == 0
    assert formatter.formatNote(SingleNote(60, (1, 4))) == "c4"
    assert controller.exhausted
    with pytest.raises(StructureExhaustedError):
        formatter.formatNote(SingleNote(60, (1, 4)))


def test_zero_duration(fourFour):
    formatter = NoteFormatter(GroupingController(fourFour))
    with pytest.raises(ValueError):
        formatter.formatNote(PlainNote("c", Duration(0)))


def test_note_protocol(fourFour):
    notes = [PlainNote("c", Duration(1, 2)), PlainNote("d", (1, 2))]
    assert formatNotes(notes, fourFour) == " %m. \n c4 ~ c4 d4 ~ d4 |\n"


def test_unsupported_fragment():
    with pytest.raises(UnsupportedDurationError):
        formatNotes([SingleNote(60, (1, 3))], measuresFromTimesig("4/4"))


def test_unsupported_later_fragment_consumes_nothing():
    controller = GroupingController([measure([beat((1, 2)), beat((1, 2))])])
    formatter = NoteFormatter(controller)
    formatter.formatNote(SingleNote(60, (3, 8)))
    assert controller.elapsed == Duration(3, 8)
    # Split as 1/8 + 5/16, the second fragment cannot be rendered
    with pytest.raises(UnsupportedDurationError):
        formatter.formatNote(SingleNote(62, (7, 16)))
    assert controller.elapsed == Duration(3, 8)
    assert controller.current().left == Duration(1, 8)
    assert formatter.formatNote(SingleNote(62, (1, 8))) == "d8"
