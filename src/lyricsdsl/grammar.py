"""Declarative grammar for the lyrics DSL.

The language is line oriented::

    title:"My Song"
    artist:Author
    VERSE[1]
    Hello
    CHORUS
    World

Metadata statements (``title:``/``artist:``) and blank lines may appear
before the first section.  Each section starts with a header on a line of
its own, followed by zero or more body lines.

Header tokens only match a *whole* line, so ``[laughs] yeah`` or
``  CHORUS`` inside a section are ordinary body text, while a line that is
exactly ``[Note]`` always starts a new section, even mid-body.

The grammar is compiled with lark's LALR parser and contextual lexer.  The
lexer only considers terminals the parser can accept in its current state,
which is what lets a body line such as ``title: not metadata`` lex as text
rather than as a metadata key.  The header patterns are module constants so
that :mod:`lyricsdsl.classify` matches exactly what the grammar matches.
"""

import re
from functools import lru_cache

from lark import Lark

# ---------------------------------------------------------------------------
# Shared patterns
# ---------------------------------------------------------------------------

VERSE_PATTERN = r"VERSE\[\d+\]"
CHORUS_PATTERN = r"CHORUS"
BRIDGE_PATTERN = r"BRIDGE"
CUSTOM_PATTERN = r"\[[^\]\r\n]+\]"
METADATA_PATTERN = r"(?:title|artist):"

# Prefix of a verse header token before the index digits.
VERSE_PREFIX = "VERSE["

# Headers must be followed by optional inline whitespace and a line break.
_LINE_END = r"(?=[ \t]*(?:\r?\n|$))"

VERSE_RE = re.compile(VERSE_PATTERN)
CHORUS_RE = re.compile(CHORUS_PATTERN)
BRIDGE_RE = re.compile(BRIDGE_PATTERN)
CUSTOM_RE = re.compile(CUSTOM_PATTERN)
METADATA_RE = re.compile(METADATA_PATTERN)
HEADER_RE = re.compile(
    "|".join((VERSE_PATTERN, CHORUS_PATTERN, BRIDGE_PATTERN, CUSTOM_PATTERN))
)

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

GRAMMAR = rf"""
start: (metadata | _NL)* section*

metadata: META_KEY ":" _WS? value _WS? _NL
value: QUOTED_STRING -> quoted
     | BARE_VALUE -> bare

section: header _WS? _NL line* last_line?
header: VERSE_HEADER | CHORUS_HEADER | BRIDGE_HEADER | CUSTOM_HEADER
line: TEXT? _NL
last_line: TEXT

META_KEY: "title" | "artist"
QUOTED_STRING: /"[^"\r\n]*"/
BARE_VALUE: /[^\s":][^\r\n":]*/

VERSE_HEADER.2: /{VERSE_PATTERN}{_LINE_END}/
CHORUS_HEADER.2: /{CHORUS_PATTERN}{_LINE_END}/
BRIDGE_HEADER.2: /{BRIDGE_PATTERN}{_LINE_END}/
CUSTOM_HEADER.2: /{CUSTOM_PATTERN}{_LINE_END}/

TEXT: /(?:[^\r\n]|\r(?!\n))+/
_WS: /[ \t]+/
_NL: /\r?\n/
"""

# Human-readable names for terminals, used in error messages.
TERMINAL_DESCRIPTIONS = {
    "META_KEY": "metadata key ('title' or 'artist')",
    "COLON": "':'",
    "QUOTED_STRING": "quoted string",
    "BARE_VALUE": "metadata value",
    "VERSE_HEADER": "verse header (VERSE[n])",
    "CHORUS_HEADER": "'CHORUS'",
    "BRIDGE_HEADER": "'BRIDGE'",
    "CUSTOM_HEADER": "section marker ([label])",
    "TEXT": "lyric line",
    "_WS": "whitespace",
    "_NL": "newline",
    "$END": "end of input",
}


def describe_terminal(name: str) -> str:
    """Return a human-readable description for the terminal *name*."""
    return TERMINAL_DESCRIPTIONS.get(name, name)


@lru_cache(maxsize=None)
def get_parser() -> Lark:
    """Return the compiled lyrics parser.

    The instance is shared; lark keeps per-parse state off the instance, so it
    is safe to use from several threads at once.
    """
    return Lark(GRAMMAR, parser="lalr", lexer="contextual")
