"""Block and span types produced by the Markdown converter.

Serialization targets the Sanity Portable Text schema:

    {"_type": "block", "_key": "...", "style": "h2", "children": [
        {"_type": "span", "text": "Benefits", "marks": ["strong"]},
    ]}

List items additionally carry ``listItem`` ("bullet" / "number") and ``level``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from autoblog.portable_text.keys import generate_key


class Mark(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"


# Sanity's default decorator names
MARK_DECORATORS = {
    Mark.BOLD: "strong",
    Mark.ITALIC: "em",
}


class BlockKind(str, Enum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    BLOCKQUOTE = "blockquote"
    LIST_ITEM_BULLET = "listItemBullet"
    LIST_ITEM_NUMBER = "listItemNumber"
    NORMAL = "normalParagraph"

    @property
    def style(self) -> str:
        return _STYLES.get(self, "normal")

    @property
    def list_item(self) -> str | None:
        return _LIST_ITEMS.get(self)


_STYLES = {
    BlockKind.HEADING1: "h1",
    BlockKind.HEADING2: "h2",
    BlockKind.HEADING3: "h3",
    BlockKind.HEADING4: "h4",
    BlockKind.BLOCKQUOTE: "blockquote",
}

_LIST_ITEMS = {
    BlockKind.LIST_ITEM_BULLET: "bullet",
    BlockKind.LIST_ITEM_NUMBER: "number",
}


@dataclass(frozen=True)
class Span:
    """A run of text sharing one set of marks."""

    text: str
    marks: frozenset[Mark] = frozenset()
    # Only the "no content" placeholder omits the marks field entirely
    placeholder: bool = False

    def to_dict(self) -> dict:
        data = {"_type": "span", "text": self.text}
        if not self.placeholder:
            data["marks"] = [
                MARK_DECORATORS[m] for m in (Mark.BOLD, Mark.ITALIC) if m in self.marks
            ]
        return data


@dataclass(frozen=True)
class Block:
    """One structural unit: a heading, paragraph, quote or list item."""

    kind: BlockKind
    spans: tuple[Span, ...]
    nesting_level: int = 1
    identifier: str = field(default_factory=generate_key)

    def __post_init__(self):
        if not self.spans:
            raise ValueError("a block needs at least one span")

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    def to_dict(self) -> dict:
        data = {
            "_type": "block",
            "_key": self.identifier,
            "style": self.kind.style,
        }
        if self.kind.list_item:
            data["listItem"] = self.kind.list_item
            data["level"] = self.nesting_level
        data["children"] = [span.to_dict() for span in self.spans]
        return data
