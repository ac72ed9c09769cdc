from lyricsdsl.exceptions import (
    GrammarMismatchError,
    LyricsDslError,
    NumericOverflowError,
    ParseError,
    Position,
    SerializationError,
)


def test_hierarchy():
    assert issubclass(GrammarMismatchError, ParseError)
    assert issubclass(NumericOverflowError, ParseError)
    assert issubclass(ParseError, LyricsDslError)
    assert issubclass(SerializationError, LyricsDslError)


def test_position_from_offset():
    text = "ab\ncde\nf"
    assert Position.from_offset(text, 0) == Position(line=1, column=1, offset=0, byte_offset=0)
    assert Position.from_offset(text, 4) == Position(line=2, column=2, offset=4, byte_offset=4)
    assert Position.from_offset(text, len(text)) == Position(line=3, column=2, offset=8, byte_offset=8)


def test_position_byte_offset_counts_utf8_bytes():
    text = "Café\nß"
    position = Position.from_offset(text, len(text))
    assert position == Position(line=2, column=2, offset=6, byte_offset=8)


def test_position_without_source_has_no_byte_offset():
    assert Position(1, 1, 0).byte_offset is None


def test_message_lists_expected_sorted():
    err = GrammarMismatchError(Position(2, 5, 9), {"newline", "end of input"}, context="metadata")
    assert str(err) == "metadata: expected end of input, newline at line 2, column 5"


def test_message_without_expected_or_context():
    err = GrammarMismatchError(Position(1, 1, 0))
    assert str(err) == "unexpected input at line 1, column 1"
    assert err.expected == frozenset()
    assert err.context is None


def test_overflow_message():
    err = NumericOverflowError(Position(1, 7, 6), "99999999999")
    assert err.context == "verse index overflow"
    assert "99999999999" in str(err)


def test_excerpt_points_at_column():
    err = GrammarMismatchError(Position(2, 3, 5))
    assert err.excerpt("one\ntwo!\nthree") == "two!\n  ^"


def test_excerpt_past_last_line():
    err = GrammarMismatchError(Position(2, 1, 7))
    assert err.excerpt("CHORUS\n") == "CHORUS\n^"


def test_expected_accepts_any_iterable_of_names():
    err = GrammarMismatchError(Position(1, 1, 0), (name for name in ["newline", "newline"]))
    assert err.expected == frozenset({"newline"})
