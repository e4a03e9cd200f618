#!/usr/bin/env python3
"""Main pipeline: generate blog posts for titles.json and publish them to Sanity.

Usage:
    python main.py                       # Process every title in titles.json
    python main.py --limit 3             # Process first 3 titles (test run)
    python main.py --only "cold brew"    # Process only titles containing this text
    python main.py --dry-run             # Generate + convert, save locally, don't publish
    python main.py --no-image            # Publish without hero images
    python main.py --titles other.json   # Use a different titles file
"""

import argparse
import json
import os
import sys
import time

import markdown as md_lib

from autoblog import config
from autoblog.exceptions import AutoblogError
from autoblog.pipeline import generate_and_upload_image, generate_blog_content
from autoblog.portable_text import create_slug, markdown_to_portable_text
from autoblog.sanity import SanityClient, publish_post
from autoblog.titles import load_titles
from autoblog.validation import format_validation_report, validate_content


def save_outputs(slug: str, body: str) -> str:
    """Save Markdown, an HTML preview and the Portable Text body locally."""
    os.makedirs(config.ARTICLE_OUTPUT_DIR, exist_ok=True)
    base = os.path.join(config.ARTICLE_OUTPUT_DIR, slug)

    with open(f"{base}.md", "w", encoding="utf-8") as f:
        f.write(body)
    with open(f"{base}.html", "w", encoding="utf-8") as f:
        f.write(md_lib.markdown(body, extensions=["extra", "sane_lists", "smarty"]))
    with open(f"{base}.portable.json", "w", encoding="utf-8") as f:
        json.dump(markdown_to_portable_text(body), f, indent=2)

    return f"{base}.md"


def process_title(item, sanity, dry_run: bool = False, with_image: bool = True) -> dict:
    """Process a single title: generate, validate, save, image, publish."""
    title = item.title
    slug = create_slug(title)

    print(f"\n{'='*60}")
    print(f"Processing: {title}")
    print(f"{'='*60}")

    # ── 1. Generate content ────────────────────────────────────────────
    content = generate_blog_content(title)
    print(f"  SEO title ({len(content.seo_title)} chars): {content.seo_title}")
    print(f"  Meta description ({len(content.meta_description)} chars): {content.meta_description[:40]}...")
    print(f"  Keywords: {', '.join(content.keywords)}")

    # ── 2. Validate (informational only) ───────────────────────────────
    validation = validate_content(content, title)
    print(f"\n{format_validation_report(validation, title)}")

    # ── 3. Save locally ────────────────────────────────────────────────
    article_path = save_outputs(slug, content.body)
    print(f"  ✓ Saved to {article_path}")

    result = {
        "title": title,
        "slug": slug,
        "article_path": article_path,
        "grade": validation["grade"],
        "issues": validation["issues"],
    }

    if dry_run:
        print("  [DRY RUN] Skipping image and publish")
        result["dry_run"] = True
        return result

    time.sleep(config.STEP_DELAY)

    # ── 4. Hero image (never fatal) ────────────────────────────────────
    main_image = None
    if with_image:
        main_image = generate_and_upload_image(title, sanity)
        time.sleep(config.STEP_DELAY)

    # ── 5. Publish ─────────────────────────────────────────────────────
    result["document_id"] = publish_post(
        sanity, title, content, item.category_id, main_image=main_image
    )
    result["has_image"] = main_image is not None
    return result


def main():
    parser = argparse.ArgumentParser(description="Generate SEO blog posts and publish them to Sanity")
    parser.add_argument("--titles", type=str, default=str(config.TITLES_JSON), help="Path to titles JSON file")
    parser.add_argument("--limit", type=int, default=0, help="Limit number of titles to process")
    parser.add_argument("--only", type=str, default="", help="Process only titles containing this string")
    parser.add_argument("--dry-run", action="store_true", help="Generate and convert, but don't publish")
    parser.add_argument("--no-image", action="store_true", help="Skip hero image generation")
    args = parser.parse_args()

    try:
        items = load_titles(args.titles)
    except AutoblogError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Loaded {len(items)} titles from {args.titles}")

    if args.only:
        items = [i for i in items if args.only.lower() in i.title.lower()]
        print(f"Filtered to {len(items)} titles matching '{args.only}'")

    if args.limit > 0:
        items = items[:args.limit]
        print(f"Limited to {len(items)} titles")

    if not items:
        print("No titles to process!")
        sys.exit(1)

    sanity = None
    if not args.dry_run:
        try:
            sanity = SanityClient.from_config()
        except AutoblogError as e:
            print(f"Error: {e}")
            sys.exit(1)

    # Process
    results = []
    for i, item in enumerate(items, 1):
        print(f"\n[{i}/{len(items)}]", end="")
        try:
            result = process_title(
                item, sanity, dry_run=args.dry_run, with_image=not args.no_image
            )
        except Exception as e:
            # One bad title must not stop the batch
            print(f"  ERROR: failed to process '{item.title}': {type(e).__name__}: {e}")
            results.append({"title": item.title, "error": str(e)})
            time.sleep(config.FAILURE_DELAY)
            continue
        results.append(result)
        if i < len(items):
            time.sleep(config.ARTICLE_DELAY)

    # Summary
    succeeded = [r for r in results if "error" not in r]
    print(f"\n\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    for r in results:
        if "error" in r:
            print(f"  {r['title']}: ✗ {r['error']}")
        elif r.get("dry_run"):
            print(f"  {r['title']}: [dry run] grade {r['grade']}")
        else:
            image = "" if r.get("has_image") else " (no image)"
            print(f"  {r['title']}: {r['document_id']}, grade {r['grade']}{image}")
    print(f"\n{len(succeeded)} succeeded, {len(results) - len(succeeded)} failed")

    summary_path = os.path.join(config.ARTICLE_OUTPUT_DIR, "_summary.json")
    os.makedirs(config.ARTICLE_OUTPUT_DIR, exist_ok=True)
    with open(summary_path, "w") as f:
        json.dump(results, f, indent=2, default=str)
    print(f"Summary saved to {summary_path}")


if __name__ == "__main__":
    main()
