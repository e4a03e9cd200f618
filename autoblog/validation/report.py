"""Grading and human-readable report formatting for validation results."""

from autoblog.config import (
    H2_COUNT,
    KEYWORD_COUNT,
    META_DESCRIPTION_LENGTH,
    SEO_TITLE_LENGTH,
    TARGET_WORD_COUNT,
)


def compute_grade(issues: list, warnings: list) -> str:
    """Compute content grade from issues and warnings.

    A+ = no issues, no warnings
    A  = no issues, some warnings
    A- = 1 issue
    B+ = 2 issues
    B  = 3 issues
    C  = 4-5 issues
    D  = 6+ issues
    """
    if len(issues) == 0 and len(warnings) == 0:
        return "A+"
    if len(issues) == 0:
        return "A"
    if len(issues) <= 1:
        return "A-"
    if len(issues) <= 2:
        return "B+"
    if len(issues) <= 3:
        return "B"
    if len(issues) <= 5:
        return "C"
    return "D"


def format_validation_report(results: dict, title: str) -> str:
    """Format validation results as a readable CLI report."""

    def _status(ok: bool) -> str:
        return "PASS" if ok else "FAIL"

    st = results["seo_title"]
    md = results["meta_description"]
    kw = results["keywords"]
    wc = results["word_count"]
    h1 = results["h1_count"]
    h2 = results["h2_count"]

    lines = [
        f"{'='*60}",
        f"VALIDATION REPORT: {title}",
        f"{'='*60}",
        f"Grade: {results['grade']}",
        "",
        f"  [{_status(st['pass'])}] SEO title:        {st['length']} chars  (target: {SEO_TITLE_LENGTH[0]}-{SEO_TITLE_LENGTH[1]})",
        f"  [{_status(md['pass'])}] Meta description: {md['length']} chars  (target: {META_DESCRIPTION_LENGTH[0]}-{META_DESCRIPTION_LENGTH[1]})",
        f"  [{_status(kw['pass'])}] Keywords:         {kw['count']}  (target: {KEYWORD_COUNT[0]}-{KEYWORD_COUNT[1]})",
        f"  [{_status(wc['pass'])}] Word count:       {wc['count']}  (target: {TARGET_WORD_COUNT[0]}-{TARGET_WORD_COUNT[1]})",
        f"  [{_status(h1['count'] == 1)}] H1 headings:      {h1['count']}  (need: 1)",
        f"  [{_status(H2_COUNT[0] <= h2['count'] <= H2_COUNT[1])}] H2 headings:      {h2['count']}  (target: {H2_COUNT[0]}-{H2_COUNT[1]})",
    ]

    tib = results.get("title_in_body", {})
    if tib:
        lines.append(f"  [{_status(tib.get('pass', False))}] Title mentions:   {tib.get('count', 0)}")

    # Issues
    if results["issues"]:
        lines.append(f"\nISSUES ({len(results['issues'])}):")
        for issue in results["issues"]:
            lines.append(f"  - {issue}")

    # Warnings
    if results.get("warnings"):
        lines.append(f"\nWARNINGS ({len(results['warnings'])}):")
        for warning in results["warnings"]:
            lines.append(f"  ~ {warning}")

    if not results["issues"] and not results.get("warnings"):
        lines.append("\nAll checks passed!")

    lines.append(f"{'='*60}")
    return "\n".join(lines)
