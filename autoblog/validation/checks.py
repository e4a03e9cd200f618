"""Individual SEO checks and the main validate_content orchestrator."""

import re

from autoblog.config import (
    H2_COUNT,
    KEYWORD_COUNT,
    META_DESCRIPTION_LENGTH,
    SEO_TITLE_LENGTH,
    TARGET_WORD_COUNT,
)
from autoblog.pipeline.content import BlogContent
from autoblog.portable_text import BlockKind, convert
from autoblog.validation.report import compute_grade

# Word count outside this band is an issue, not just a warning
WORD_COUNT_HARD_LIMITS = (700, 1200)


# ── Main validation entry point ──────────────────────────────────────────


def validate_content(content: BlogContent, title: str) -> dict:
    """Run all checks on generated content.

    Returns a dict with per-check results, issues, warnings, grade, and
    overall pass/fail.
    """
    results = {
        "seo_title": check_length(content.seo_title, SEO_TITLE_LENGTH),
        "meta_description": check_length(content.meta_description, META_DESCRIPTION_LENGTH),
        "keywords": check_keywords(content.keywords),
        "word_count": check_word_count(content.body),
        "h1_count": check_heading_count(content.body, level=1),
        "h2_count": check_heading_count(content.body, level=2),
        "title_in_body": check_title_in_body(content.body, title),
        "leftover_markup": check_leftover_markup(content.body),
    }

    issues, warnings = _collect_issues(results)
    results["issues"] = issues
    results["warnings"] = warnings
    results["pass"] = len(issues) == 0
    results["grade"] = compute_grade(issues, warnings)

    return results


# ── Issue aggregation ─────────────────────────────────────────────────────


def _collect_issues(results: dict) -> tuple[list[str], list[str]]:
    """Walk through all check results and collect issues/warnings."""
    issues = []
    warnings = []

    title = results["seo_title"]
    if not title["pass"]:
        warnings.append(
            f"SEO title is {title['length']} chars (target {SEO_TITLE_LENGTH[0]}-{SEO_TITLE_LENGTH[1]})"
        )

    meta = results["meta_description"]
    if meta["length"] == 0:
        issues.append("Meta description is empty")
    elif not meta["pass"]:
        warnings.append(
            f"Meta description is {meta['length']} chars "
            f"(target {META_DESCRIPTION_LENGTH[0]}-{META_DESCRIPTION_LENGTH[1]})"
        )

    kw = results["keywords"]
    if kw["count"] == 0:
        issues.append("No keywords returned")
    elif not KEYWORD_COUNT[0] <= kw["count"] <= KEYWORD_COUNT[1]:
        warnings.append(f"{kw['count']} keywords (target {KEYWORD_COUNT[0]}-{KEYWORD_COUNT[1]})")
    if kw["duplicates"]:
        warnings.append(f"Duplicate keywords: {', '.join(kw['duplicates'])}")

    wc = results["word_count"]
    low, high = WORD_COUNT_HARD_LIMITS
    if wc["count"] < low:
        issues.append(f"Too short: {wc['count']} words (need {TARGET_WORD_COUNT[0]}+)")
    elif wc["count"] > high:
        issues.append(f"Too long: {wc['count']} words (target {TARGET_WORD_COUNT[1]} max)")
    elif not wc["pass"]:
        warnings.append(
            f"Word count {wc['count']} outside target {TARGET_WORD_COUNT[0]}-{TARGET_WORD_COUNT[1]}"
        )

    h1 = results["h1_count"]
    if h1["count"] == 0:
        warnings.append("Body has no # H1 title")
    elif h1["count"] > 1:
        issues.append(f"Body has {h1['count']} H1 headings (need exactly 1)")

    h2 = results["h2_count"]
    if h2["count"] < H2_COUNT[0]:
        issues.append(f"Too few H2s: {h2['count']} (need {H2_COUNT[0]}-{H2_COUNT[1]})")
    elif h2["count"] > H2_COUNT[1]:
        warnings.append(f"Many H2s: {h2['count']} (target {H2_COUNT[0]}-{H2_COUNT[1]})")

    if not results["title_in_body"]["pass"]:
        warnings.append("Primary keyword (post title) does not appear in the body")

    leftover = results["leftover_markup"]
    if leftover["pseudo_headings"]:
        warnings.append(f"{leftover['pseudo_headings']} 'H2:'-style pseudo-headings (auto-repaired)")
    if leftover["unsupported"]:
        warnings.append(f"Unsupported Markdown passed through as text: {', '.join(leftover['unsupported'])}")

    return issues, warnings


# ── Individual check functions ────────────────────────────────────────────


def count_prose_words(body: str) -> int:
    """Count visible prose words, ignoring Markdown markers."""
    text = body
    text = re.sub(r"^#{1,6}\s+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^H[1-6]:", "", text, flags=re.MULTILINE | re.IGNORECASE)
    text = re.sub(r"\*{1,3}", "", text)
    text = re.sub(r"^\s*[-+]\s+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^\s*\d+\.\s+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^\s*(?:>|&gt;)\s*", "", text, flags=re.MULTILINE)
    return len(text.split())


def check_length(text: str, bounds: tuple[int, int]) -> dict:
    length = len(text.strip())
    return {"length": length, "pass": bounds[0] <= length <= bounds[1]}


def check_keywords(keywords: list[str]) -> dict:
    seen = set()
    duplicates = []
    for kw in keywords:
        key = kw.lower()
        if key in seen and kw not in duplicates:
            duplicates.append(kw)
        seen.add(key)
    count = len(keywords)
    return {
        "count": count,
        "duplicates": duplicates,
        "pass": KEYWORD_COUNT[0] <= count <= KEYWORD_COUNT[1] and not duplicates,
    }


def check_word_count(body: str) -> dict:
    count = count_prose_words(body)
    return {"count": count, "pass": TARGET_WORD_COUNT[0] <= count <= TARGET_WORD_COUNT[1]}


def check_heading_count(body: str, level: int) -> dict:
    """Count headings of one level as the converter will see them."""
    kind = {
        1: BlockKind.HEADING1,
        2: BlockKind.HEADING2,
        3: BlockKind.HEADING3,
        4: BlockKind.HEADING4,
    }[level]
    headings = [block.text for block in convert(body) if block.kind == kind]
    return {"count": len(headings), "headings": headings}


def check_title_in_body(body: str, title: str) -> dict:
    count = len(re.findall(re.escape(title.strip()), body, re.IGNORECASE))
    return {"count": count, "pass": count >= 1}


def check_leftover_markup(body: str) -> dict:
    """Spot Markdown the converter does not support, so it ends up as plain text."""
    unsupported = []
    if re.search(r"\[[^\]]+\]\([^)]+\)", body):
        unsupported.append("links")
    if re.search(r"^\s*\|.*\|\s*$", body, re.MULTILINE):
        unsupported.append("tables")
    if "`" in body:
        unsupported.append("inline code")
    if re.search(r"!\[[^\]]*\]\([^)]+\)", body):
        unsupported.append("images")

    pseudo = len(re.findall(r"^(?:\*\*)?H[1-6]:", body, re.MULTILINE | re.IGNORECASE))
    return {"pseudo_headings": pseudo, "unsupported": unsupported}
