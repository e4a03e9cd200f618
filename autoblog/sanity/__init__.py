"""Sanity content store: HTTP client and post publishing."""

from autoblog.sanity.client import SanityClient
from autoblog.sanity.publisher import build_post_document, publish_post, resolve_document_id

__all__ = ["SanityClient", "build_post_document", "publish_post", "resolve_document_id"]
