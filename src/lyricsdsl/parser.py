"""Parse lyrics DSL text into a :class:`~lyricsdsl.models.LyricsDocument`.

Usage::

    from lyricsdsl.parser import parse
    doc = parse(Path("song.txt").read_text(encoding="utf-8"))

Parsing is all-or-nothing: either a complete document is returned or a
:class:`~lyricsdsl.exceptions.ParseError` subclass is raised.  Repeated
``title``/``artist`` statements are first-write-wins.
"""

import logging

from lark import Transformer
from lark.exceptions import UnexpectedEOF, UnexpectedInput, UnexpectedToken, VisitError

from .exceptions import GrammarMismatchError, NumericOverflowError, ParseError, Position
from .grammar import HEADER_RE, METADATA_RE, VERSE_PREFIX, describe_terminal, get_parser
from .models import MAX_VERSE_INDEX, LyricsDocument, Section, SectionKind

logger = logging.getLogger(__name__)

_HEADER_KINDS = {
    "CHORUS_HEADER": SectionKind.CHORUS,
    "BRIDGE_HEADER": SectionKind.BRIDGE,
}

# Digits in MAX_VERSE_INDEX; longer numbers overflow without converting.
_MAX_INDEX_DIGITS = len(str(MAX_VERSE_INDEX))


def parse(text: str) -> LyricsDocument:
    """Parse *text* and return the document it describes.

    Raises:
        GrammarMismatchError: the text does not conform to the grammar.  The
            position is where the parser stopped, which is the furthest point
            any valid reading of the input reaches.
        NumericOverflowError: a ``VERSE[n]`` index exceeds 2**32 - 1.
    """
    try:
        tree = get_parser().parse(text)
    except UnexpectedInput as exc:
        raise _grammar_error(text, exc) from None

    try:
        doc = _DocumentBuilder(text).transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, ParseError):
            raise exc.orig_exc from None
        raise

    logger.debug(
        "Parsed %d section(s), title=%r, artist=%r", len(doc.sections), doc.title, doc.artist
    )
    return doc


# ---------------------------------------------------------------------------
# Tree -> document
# ---------------------------------------------------------------------------


class _DocumentBuilder(Transformer):
    """Convert lark's concrete tree into model objects, bottom-up."""

    def __init__(self, text: str):
        super().__init__()
        self._text = text

    def start(self, children):
        metadata: dict[str, str] = {}
        sections: list[Section] = []
        for child in children:
            if isinstance(child, Section):
                sections.append(child)
                continue
            key, value = child
            if key in metadata:
                logger.debug("Ignoring repeated %s %r (keeping %r)", key, value, metadata[key])
                continue
            metadata[key] = value
        return LyricsDocument(
            title=metadata.get("title"),
            artist=metadata.get("artist"),
            sections=tuple(sections),
        )

    def metadata(self, children):
        key, value = children
        return str(key), value

    def quoted(self, children):
        return str(children[0])[1:-1]

    def bare(self, children):
        return str(children[0]).rstrip()

    def section(self, children):
        (kind, index, label), *lines = children
        return Section(kind=kind, lines=tuple(lines), index=index, label=label)

    def header(self, children):
        token = children[0]
        if token.type == "VERSE_HEADER":
            return SectionKind.VERSE, _verse_index(self._text, token), None
        if token.type == "CUSTOM_HEADER":
            return SectionKind.CUSTOM, None, str(token)[1:-1]
        return _HEADER_KINDS[token.type], None, None

    def line(self, children):
        return str(children[0]) if children else ""

    last_line = line


def _verse_index(text: str, token) -> int:
    """Return the index of a ``VERSE[n]`` token, rejecting values above u32."""
    digits = str(token)[len(VERSE_PREFIX):-1]
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_INDEX_DIGITS or int(significant) > MAX_VERSE_INDEX:
        position = Position.from_offset(text, token.start_pos + len(VERSE_PREFIX))
        raise NumericOverflowError(position, digits)
    return int(significant)


# ---------------------------------------------------------------------------
# Error conversion
# ---------------------------------------------------------------------------


def _grammar_error(text: str, exc: UnexpectedInput) -> GrammarMismatchError:
    """Build a :class:`GrammarMismatchError` from a lark failure."""
    if isinstance(exc, UnexpectedEOF) or (
        isinstance(exc, UnexpectedToken) and exc.token.type == "$END"
    ):
        # lark borrows the last token's position for $END; report the real end.
        position = Position.from_offset(text, len(text))
    else:
        position = Position.from_offset(text, exc.pos_in_stream)

    if isinstance(exc, (UnexpectedToken, UnexpectedEOF)):
        names = exc.expected
    else:
        names = exc.allowed or ()
    expected = {describe_terminal(name) for name in names}

    return GrammarMismatchError(position, expected, context=_error_context(text, position))


def _error_context(text: str, position: Position) -> str | None:
    """Name the construct being parsed on the failing line, if recognisable."""
    line_start = position.offset - (position.column - 1)
    prefix = text[line_start:position.offset]
    if METADATA_RE.match(prefix):
        return "metadata"
    if HEADER_RE.fullmatch(prefix.rstrip(" \t")):
        return "section header"
    return None
