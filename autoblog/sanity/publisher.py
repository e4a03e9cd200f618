"""Build post documents and publish them to Sanity."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from autoblog import config
from autoblog.exceptions import SanityError
from autoblog.pipeline.content import BlogContent
from autoblog.portable_text import create_slug, generate_key, markdown_to_portable_text
from autoblog.sanity.client import SanityClient


def build_post_document(
    title: str,
    content: BlogContent,
    category_id: str,
    author_id: str = config.AUTHOR_ID,
    main_image: Optional[dict] = None,
    now: Optional[datetime] = None,
) -> dict:
    """Return a ``post`` document matching the blog's Sanity schema."""
    published_at = (now or datetime.now(timezone.utc)).isoformat()

    doc = {
        "_type": "post",
        "title": title,
        "slug": {"_type": "slug", "current": create_slug(title)},
        "publishedAt": published_at,
        "excerpt": content.meta_description,
        "seoTitle": content.seo_title,
        "metaDescription": content.meta_description,
        "keywords": content.keywords,
        "author": {"_type": "reference", "_ref": author_id},
        "categories": [
            {"_type": "reference", "_ref": category_id, "_key": generate_key()}
        ],
        "body": markdown_to_portable_text(content.body),
    }
    if main_image:
        doc["mainImage"] = main_image
    return doc


def resolve_document_id(result: dict, slug: str) -> str:
    """Work out the created document's ID from a mutation response.

    The mutate endpoint does not always echo the ID back; fall back to a
    generated placeholder so the caller still has something to log.
    """
    results = result.get("results") or []
    if results:
        first = results[0]
        if first.get("id"):
            return first["id"]
        document = first.get("document") or {}
        if document.get("_id"):
            return document["_id"]
        if first.get("operation") == "create":
            doc_id = f"post.{slug}-{generate_key(8)}"
            print(f"  .. document created but no ID returned, using {doc_id}")
            return doc_id
        print(f"  Warning: unexpected Sanity response format: {result}")
        return f"post.unknown-{generate_key(8)}"

    print(f"  Warning: no results in Sanity response: {result}")
    if result.get("transactionId"):
        return f"post.transaction-{result['transactionId']}"
    raise SanityError("Could not determine document ID from Sanity response")


def publish_post(
    client: SanityClient,
    title: str,
    content: BlogContent,
    category_id: str,
    main_image: Optional[dict] = None,
) -> str:
    """Create the post in Sanity and return its document ID."""
    doc = build_post_document(title, content, category_id, main_image=main_image)
    slug = doc["slug"]["current"]

    print(f"  -> Publishing to Sanity (slug: {slug}, {len(doc['body'])} blocks)...")
    result = client.mutate([{"create": doc}])
    doc_id = resolve_document_id(result, slug)
    print(f"  OK Published (ID: {doc_id})")
    return doc_id
