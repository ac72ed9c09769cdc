from collections.abc import Iterable
from dataclasses import dataclass


class LyricsDslError(Exception):
    """Base exception for lyricsdsl."""


@dataclass(frozen=True)
class Position:
    """A location in the source text.

    ``line`` and ``column`` are 1-based.  ``offset`` is the 0-based character
    offset into the text and ``byte_offset`` the 0-based offset into its UTF-8
    encoding; ``byte_offset`` is None only when built without the source text.
    """

    line: int
    column: int
    offset: int
    byte_offset: int | None = None

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "Position":
        """Compute line, column and byte offset for character *offset* in *text*."""
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(
            line=line,
            column=offset - line_start + 1,
            offset=offset,
            byte_offset=len(text[:offset].encode("utf-8", "surrogatepass")),
        )


class ParseError(LyricsDslError):
    """Raised when text cannot be parsed into a document."""

    def __init__(self, position: Position, expected: Iterable[str] = (), context: str | None = None):
        self.position = position
        self.expected = frozenset(expected)
        self.context = context
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"line {self.position.line}, column {self.position.column}"
        prefix = f"{self.context}: " if self.context else ""
        if self.expected:
            return f"{prefix}expected {', '.join(sorted(self.expected))} at {where}"
        return f"{prefix}unexpected input at {where}"

    def excerpt(self, text: str) -> str:
        """Return the failing source line with a caret under the error column."""
        lines = text.splitlines() or [""]
        index = min(self.position.line, len(lines)) - 1
        source_line = lines[index]
        caret = " " * (self.position.column - 1) + "^"
        return f"{source_line}\n{caret}"


class GrammarMismatchError(ParseError):
    """Raised when the input does not conform to the lyrics grammar."""


class NumericOverflowError(ParseError):
    """Raised when a verse index does not fit an unsigned 32-bit integer."""

    def __init__(self, position: Position, value: str, context: str = "verse index overflow"):
        self.value = value
        super().__init__(position, expected=(), context=context)

    def _message(self) -> str:
        return (
            f"{self.context}: {self.value} exceeds the maximum verse index "
            f"at line {self.position.line}, column {self.position.column}"
        )


class SerializationError(LyricsDslError):
    """Raised when interchange data cannot be converted to a document."""
