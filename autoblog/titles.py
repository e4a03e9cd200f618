"""Load the queue of post titles from titles.json.

Expected format:

    [{"title": "How to Brew Cold Coffee", "categoryId": "<sanity category _id>"}, ...]
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from autoblog.exceptions import ConfigError


@dataclass(frozen=True)
class TitleItem:
    title: str
    category_id: str


def load_titles(path: Path) -> list[TitleItem]:
    """Read and validate titles; invalid items are skipped with a warning."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Titles file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Titles file is not valid JSON: {path} ({e.msg})")

    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"No titles found in {path}")

    items = [
        TitleItem(title=entry["title"].strip(), category_id=entry["categoryId"])
        for entry in raw
        if isinstance(entry, dict)
        and isinstance(entry.get("title"), str)
        and entry["title"].strip()
        and isinstance(entry.get("categoryId"), str)
    ]

    if not items:
        raise ConfigError("No valid titles found. Each item must have 'title' and 'categoryId'")
    if len(items) != len(raw):
        print(f"  Warning: {len(raw) - len(items)} invalid items skipped in {path}")
    return items
