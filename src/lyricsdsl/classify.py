"""Single-line classification for interactive feedback.

This is a cheap per-line check, not a parse: it answers "what would this line
be if it appeared in a song?" using the same patterns as the grammar.
"""

from enum import Enum, auto

from .grammar import BRIDGE_RE, CHORUS_RE, CUSTOM_RE, METADATA_RE, VERSE_RE


class LineKind(Enum):
    BLANK = auto()  # empty or whitespace only
    METADATA = auto()  # title:... / artist:...
    VERSE = auto()  # VERSE[n]
    CHORUS = auto()  # CHORUS
    BRIDGE = auto()  # BRIDGE
    CUSTOM = auto()  # [label]
    LYRIC = auto()  # everything else


# Checked in order; the first full match wins.
_HEADER_KINDS = (
    (VERSE_RE, LineKind.VERSE),
    (CHORUS_RE, LineKind.CHORUS),
    (BRIDGE_RE, LineKind.BRIDGE),
    (CUSTOM_RE, LineKind.CUSTOM),
)


def classify_line(line: str) -> LineKind:
    """Classify a single line of DSL text.

    Surrounding whitespace is ignored.  Header kinds require the whole line to
    be the header, matching how the grammar recognises section starts.
    """
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    for pattern, kind in _HEADER_KINDS:
        if pattern.fullmatch(stripped):
            return kind
    if METADATA_RE.match(stripped):
        return LineKind.METADATA
    return LineKind.LYRIC
