"""Markdown -> Sanity Portable Text conversion."""

from autoblog.portable_text.blocks import convert, markdown_to_portable_text, preprocess
from autoblog.portable_text.inline import tokenize_inline
from autoblog.portable_text.keys import create_slug, generate_key
from autoblog.portable_text.models import Block, BlockKind, Mark, Span

__all__ = [
    "convert",
    "markdown_to_portable_text",
    "preprocess",
    "tokenize_inline",
    "create_slug",
    "generate_key",
    "Block",
    "BlockKind",
    "Mark",
    "Span",
]
