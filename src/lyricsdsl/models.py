from dataclasses import dataclass, field
from enum import Enum

# Largest verse index the DSL accepts (unsigned 32-bit).
MAX_VERSE_INDEX = 2**32 - 1


class SectionKind(Enum):
    VERSE = "verse"
    CHORUS = "chorus"
    BRIDGE = "bridge"
    CUSTOM = "custom"  # bracketed marker, e.g. [Intro]


@dataclass(frozen=True)
class Section:
    """One lyrical block: a header followed by its body lines.

    Lines are kept exactly as written, minus the line terminator.  A header
    followed directly by another header (or end of input) has no lines.
    """

    kind: SectionKind
    lines: tuple[str, ...] = ()
    index: int | None = None  # VERSE only
    label: str | None = None  # CUSTOM only

    def __post_init__(self):
        if self.kind is SectionKind.VERSE:
            if self.index is None or not 0 <= self.index <= MAX_VERSE_INDEX:
                raise ValueError(f"verse index out of range: {self.index!r}")
        elif self.index is not None:
            raise ValueError(f"{self.kind.value} section cannot carry an index")

        if self.kind is SectionKind.CUSTOM:
            if not self.label:
                raise ValueError("custom section requires a non-empty label")
        elif self.label is not None:
            raise ValueError(f"{self.kind.value} section cannot carry a label")

    @property
    def display_label(self) -> str:
        """Human-readable label, e.g. "Verse 2", "Chorus", "Intro"."""
        if self.kind is SectionKind.VERSE:
            return f"Verse {self.index}"
        if self.kind is SectionKind.CUSTOM:
            return self.label
        return self.kind.value.title()


@dataclass(frozen=True)
class LyricsDocument:
    """A parsed song: optional metadata plus sections in source order."""

    title: str | None = None
    artist: str | None = None
    sections: tuple[Section, ...] = field(default_factory=tuple)
