"""Split block text into bold / italic spans.

A two-flag state machine: ``**`` toggles bold, a lone ``*`` toggles italic.
Markers are never balanced or repaired; an unclosed ``**`` keeps bold on
until the end of the block.
"""

from __future__ import annotations

from autoblog.portable_text.models import Mark, Span


def _active_marks(bold: bool, italic: bool) -> frozenset[Mark]:
    marks = set()
    if bold:
        marks.add(Mark.BOLD)
    if italic:
        marks.add(Mark.ITALIC)
    return frozenset(marks)


def tokenize_inline(text: str) -> list[Span]:
    """Return the styled spans for one block's text.

    Always returns at least one span; empty input yields a single empty
    placeholder span with no marks.
    """
    spans: list[Span] = []
    buffer: list[str] = []
    bold = False
    italic = False

    def flush():
        if buffer:
            spans.append(Span("".join(buffer), _active_marks(bold, italic)))
            buffer.clear()

    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if char == "*" and i + 1 < n and text[i + 1] == "*":
            flush()
            bold = not bold
            i += 2
            continue

        prev_is_star = i > 0 and text[i - 1] == "*"
        next_is_star = i + 1 < n and text[i + 1] == "*"
        if char == "*" and not prev_is_star and not next_is_star:
            flush()
            italic = not italic
            i += 1
            continue

        buffer.append(char)
        i += 1

    flush()

    if not spans:
        return [Span("", placeholder=True)]
    return spans
