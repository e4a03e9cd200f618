"""Markdown -> Portable Text block conversion.

Handles the subset of Markdown the content model is asked to produce:
``#`` to ``####`` headings (plus the ``H2:`` pseudo-heading the model
sometimes emits instead), ``>`` quotes, ``-`` / ``*`` bullet lists, ``1.``
numbered lists and plain paragraphs. Anything else is a normal paragraph.
Tables, links, inline code and nested lists are passed through as text.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from autoblog.portable_text.inline import tokenize_inline
from autoblog.portable_text.models import Block, BlockKind

PSEUDO_HEADING_IN_BOLD = re.compile(r"\*\*H([1-6]):(.*?)\*\*")
EXCESS_NEWLINES = re.compile(r"\n{3,}")
PARAGRAPH_DELIMITER = "\n\n"

BULLET_ITEM = re.compile(r"^\s*[-*]\s")
BULLET_MARKER = re.compile(r"^\s*[-*]\s+")
NUMBER_ITEM = re.compile(r"^\s*[0-9]+\.\s")
NUMBER_MARKER = re.compile(r"^\s*[0-9]+\.\s+")
QUOTE_MARKER = re.compile(r"^(?:>|&gt;)")


def preprocess(markdown: str) -> str:
    """Repair ``**H2:Title**`` headings and collapse runs of blank lines."""
    cleaned = PSEUDO_HEADING_IN_BOLD.sub(r"\n\nH\1:\2\n\n", markdown)
    return EXCESS_NEWLINES.sub(PARAGRAPH_DELIMITER, cleaned)


# ── Classification rules ──────────────────────────────────────────────────
#
# Each rule returns the marker-stripped text when the paragraph matches,
# otherwise None. Rules are tried in order and the first match wins.


def _hash_or_pseudo(level: int) -> Callable[[str], Optional[str]]:
    hashes = "#" * level + " "
    pseudo = re.compile(rf"^H{level}:", re.IGNORECASE)

    def match(paragraph: str) -> Optional[str]:
        if paragraph.startswith(hashes):
            return paragraph[len(hashes):].strip()
        if pseudo.match(paragraph):
            return pseudo.sub("", paragraph, count=1).strip()
        return None

    return match


def _heading1(paragraph: str) -> Optional[str]:
    if paragraph.startswith("# "):
        return paragraph[2:]
    return None


def _blockquote(paragraph: str) -> Optional[str]:
    if paragraph.startswith("> ") or paragraph.startswith("&gt; "):
        return QUOTE_MARKER.sub("", paragraph, count=1).strip()
    return None


SINGLE_BLOCK_RULES: list[tuple[Callable[[str], Optional[str]], BlockKind]] = [
    (_heading1, BlockKind.HEADING1),
    (_hash_or_pseudo(2), BlockKind.HEADING2),
    (_hash_or_pseudo(3), BlockKind.HEADING3),
    (_hash_or_pseudo(4), BlockKind.HEADING4),
    (_blockquote, BlockKind.BLOCKQUOTE),
]

LIST_RULES: list[tuple[re.Pattern, re.Pattern, BlockKind]] = [
    (BULLET_ITEM, BULLET_MARKER, BlockKind.LIST_ITEM_BULLET),
    (NUMBER_ITEM, NUMBER_MARKER, BlockKind.LIST_ITEM_NUMBER),
]


def _list_blocks(
    paragraph: str, item: re.Pattern, marker: re.Pattern, kind: BlockKind
) -> list[Block]:
    # Lines in the paragraph that are not list items are dropped.
    lines = [line for line in paragraph.split("\n") if item.match(line)]
    return [
        Block(kind, tuple(tokenize_inline(marker.sub("", line, count=1))), nesting_level=1)
        for line in lines
    ]


def segment_paragraph(paragraph: str) -> list[Block]:
    """Classify one paragraph and build its block(s)."""
    for rule, kind in SINGLE_BLOCK_RULES:
        text = rule(paragraph)
        if text is not None:
            return [Block(kind, tuple(tokenize_inline(text)))]

    first_line = next((line for line in paragraph.split("\n") if line.strip()), "")
    for item, marker, kind in LIST_RULES:
        if item.match(first_line):
            return _list_blocks(paragraph, item, marker, kind)

    return [Block(BlockKind.NORMAL, tuple(tokenize_inline(paragraph)))]


def convert(markdown: str) -> list[Block]:
    """Convert a Markdown article into an ordered list of blocks.

    Never raises; empty or whitespace-only input gives an empty list.
    """
    blocks: list[Block] = []
    for paragraph in preprocess(markdown).split(PARAGRAPH_DELIMITER):
        if not paragraph.strip():
            continue
        blocks.extend(segment_paragraph(paragraph))
    return blocks


def markdown_to_portable_text(markdown: str) -> list[dict]:
    """Convert Markdown to Portable Text dicts ready for a Sanity mutation."""
    return [block.to_dict() for block in convert(markdown)]
