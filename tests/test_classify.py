import pytest

from lyricsdsl.classify import LineKind, classify_line
from lyricsdsl.parser import parse


@pytest.mark.parametrize(
    "line, kind",
    [
        ("VERSE[1]", LineKind.VERSE),
        ("VERSE[12]", LineKind.VERSE),
        ("CHORUS", LineKind.CHORUS),
        ("BRIDGE", LineKind.BRIDGE),
        ("[Intro]", LineKind.CUSTOM),
        ("[Verse 1]", LineKind.CUSTOM),
        ('title:"My Song"', LineKind.METADATA),
        ("artist:Author", LineKind.METADATA),
        ("Hello world", LineKind.LYRIC),
        ("", LineKind.BLANK),
        ("   ", LineKind.BLANK),
    ],
)
def test_classify_line(line, kind):
    assert classify_line(line) == kind


def test_surrounding_whitespace_ignored():
    assert classify_line("  CHORUS  ") == LineKind.CHORUS


def test_partial_header_shapes_are_lyrics():
    assert classify_line("[laughs] yeah") == LineKind.LYRIC
    assert classify_line("VERSE[1] again") == LineKind.LYRIC
    assert classify_line("CHORUS!") == LineKind.LYRIC
    assert classify_line("VERSE[x]") == LineKind.LYRIC


@pytest.mark.parametrize("header", ["VERSE[3]", "CHORUS", "BRIDGE", "[Tag]"])
def test_classifier_agrees_with_parser(header):
    # A line the classifier calls a header starts a new section mid-body.
    assert classify_line(header) not in (LineKind.LYRIC, LineKind.BLANK)
    doc = parse(f"VERSE[1]\nbody\n{header}\n")
    assert len(doc.sections) == 2
