"""JSON interchange format for :class:`~lyricsdsl.models.LyricsDocument`.

Shape::

    {
      "title": "My Song",
      "artist": "Author",
      "sections": [
        {"kind": "verse", "index": 1, "lines": ["Hello"]},
        {"kind": "chorus", "lines": ["World"]},
        {"kind": "custom", "label": "Outro", "lines": []}
      ]
    }

``index`` is only present for verses and ``label`` only for custom sections.
"""

import json

from .exceptions import SerializationError
from .models import LyricsDocument, Section, SectionKind


def to_dict(doc: LyricsDocument) -> dict:
    """Return a JSON-compatible dict for *doc*."""
    return {
        "title": doc.title,
        "artist": doc.artist,
        "sections": [_section_to_dict(section) for section in doc.sections],
    }


def from_dict(data) -> LyricsDocument:
    """Build a document from the output of :func:`to_dict`.

    Raises SerializationError if *data* does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise SerializationError(f"document must be an object, got {type(data).__name__}")

    sections = _require(data, "sections", "document")
    if not isinstance(sections, list):
        raise SerializationError("'sections' must be a list")

    return LyricsDocument(
        title=_optional_str(data, "title"),
        artist=_optional_str(data, "artist"),
        sections=tuple(_section_from_dict(item, i) for i, item in enumerate(sections)),
    )


def dumps(doc: LyricsDocument, indent: int | None = 2) -> str:
    return json.dumps(to_dict(doc), indent=indent, ensure_ascii=False)


def loads(text: str) -> LyricsDocument:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON: {exc}") from exc
    return from_dict(data)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _section_to_dict(section: Section) -> dict:
    out: dict = {"kind": section.kind.value}
    if section.kind is SectionKind.VERSE:
        out["index"] = section.index
    elif section.kind is SectionKind.CUSTOM:
        out["label"] = section.label
    out["lines"] = list(section.lines)
    return out


def _section_from_dict(item, position: int) -> Section:
    where = f"sections[{position}]"
    if not isinstance(item, dict):
        raise SerializationError(f"{where} must be an object")

    try:
        kind = SectionKind(_require(item, "kind", where))
    except ValueError:
        raise SerializationError(f"{where}: unknown kind {item['kind']!r}") from None

    lines = _require(item, "lines", where)
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise SerializationError(f"{where}: 'lines' must be a list of strings")

    index = item.get("index")
    # bool is an int subclass; reject it explicitly
    if index is not None and (not isinstance(index, int) or isinstance(index, bool)):
        raise SerializationError(f"{where}: 'index' must be an integer")

    label = item.get("label")
    if label is not None and not isinstance(label, str):
        raise SerializationError(f"{where}: 'label' must be a string")

    try:
        return Section(kind=kind, lines=tuple(lines), index=index, label=label)
    except ValueError as exc:
        raise SerializationError(f"{where}: {exc}") from exc


def _require(data: dict, key: str, where: str):
    if key not in data:
        raise SerializationError(f"{where}: missing '{key}'")
    return data[key]


def _optional_str(data: dict, key: str) -> str | None:
    value = _require(data, key, "document")
    if value is not None and not isinstance(value, str):
        raise SerializationError(f"'{key}' must be a string or null")
    return value
