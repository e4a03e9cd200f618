"""Blog content generation step.

Asks Claude for an SEO title, meta description, keywords and a Markdown
body in one JSON reply. The model occasionally returns JSON with raw
newlines or unescaped quotes inside ``body``; parse_content_response falls
back to pulling the fields out by pattern when json.loads fails.
"""

from __future__ import annotations

import json
import re
import time
from dataclasses import dataclass, field
from typing import Optional

import anthropic

from autoblog import config
from autoblog.exceptions import ConfigError, ContentGenerationError
from autoblog.pipeline.prompts import build_content_prompt
from autoblog.pipeline.retry import call_with_retry


@dataclass
class BlogContent:
    seo_title: str
    meta_description: str
    body: str
    keywords: list[str] = field(default_factory=list)


def split_keywords(raw) -> list[str]:
    """Accept "a, b, c" or ["a", "b"] and return trimmed, non-empty keywords."""
    if not raw:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    return [str(k).strip() for k in raw if str(k).strip()]


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def _extract_body(text: str) -> Optional[str]:
    """Pull the body value out of almost-JSON text.

    Takes everything after ``"body"`` up to the last unescaped quote before
    the final closing brace, then unescapes quotes and newlines.
    """
    key_pos = text.find('"body"')
    if key_pos == -1:
        return None
    start = key_pos + len('"body"')
    end = text.rfind("}") - 1
    if end < start:
        end = len(text) - 1

    quote_pos = -1
    for i in range(end, start - 1, -1):
        if text[i] == '"' and text[i - 1] != "\\":
            quote_pos = i
            break
    if quote_pos == -1:
        return None

    body = text[start:quote_pos].strip()
    body = re.sub(r'^:\s*"', "", body)
    body = re.sub(r'^"', "", body)
    return body.replace('\\"', '"').replace("\\n", "\n")


def _extract_fields(text: str) -> BlogContent:
    title = re.search(r'"seoTitle"\s*:\s*"([^"]*)"', text)
    meta = re.search(r'"metaDescription"\s*:\s*"([^"]*)"', text)
    keywords = re.search(r'"keywords"\s*:\s*"([^"]*)"', text)
    body = _extract_body(text)

    if not title:
        raise ContentGenerationError("Could not extract SEO title from model response")
    if not meta:
        raise ContentGenerationError("Could not extract meta description from model response")
    if not body:
        raise ContentGenerationError("Could not find body content in model response")

    return BlogContent(
        seo_title=title.group(1),
        meta_description=meta.group(1),
        body=body,
        keywords=split_keywords(keywords.group(1) if keywords else ""),
    )


def parse_content_response(text: str) -> BlogContent:
    """Turn the model's reply into BlogContent, tolerating malformed JSON."""
    text = _strip_code_fence(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        print(f"  Warning: reply is not valid JSON ({e.msg}), extracting fields by pattern")
        return _extract_fields(text)

    if not isinstance(data, dict):
        raise ContentGenerationError("Model response JSON is not an object")

    missing = [k for k in ("seoTitle", "metaDescription", "body") if not data.get(k)]
    if missing:
        raise ContentGenerationError(f"Model response is missing: {', '.join(missing)}")

    return BlogContent(
        seo_title=str(data["seoTitle"]).strip(),
        meta_description=str(data["metaDescription"]).strip(),
        body=str(data["body"]),
        keywords=split_keywords(data.get("keywords")),
    )


def generate_blog_content(
    title: str,
    client: Optional[anthropic.Anthropic] = None,
) -> BlogContent:
    """Generate SEO copy and a Markdown body for one post title.

    Args:
        title: Post title, also used as the primary keyword.
        client: Optional Anthropic client (one is created from config if omitted).

    Returns:
        Parsed BlogContent.
    """
    if client is None:
        if not config.ANTHROPIC_API_KEY:
            raise ConfigError("ANTHROPIC_API_KEY not set. Add it to your .env file.")
        client = anthropic.Anthropic(api_key=config.ANTHROPIC_API_KEY)

    prompt = build_content_prompt(title)

    print(f"  -> Generating content ({config.CLAUDE_MODEL})...")
    start = time.time()

    message = call_with_retry(
        client.messages.create,
        model=config.CLAUDE_MODEL,
        max_tokens=config.CLAUDE_MAX_TOKENS,
        temperature=config.CLAUDE_TEMPERATURE,
        messages=[{"role": "user", "content": prompt}],
    )

    text = "".join(block.text for block in message.content if block.type == "text")
    if not text.strip():
        raise ContentGenerationError("Missing message content from Claude")

    content = parse_content_response(text)

    elapsed = time.time() - start
    usage = message.usage
    print(
        f"  OK Generated {len(content.body.split())} words in {elapsed:.1f}s "
        f"({usage.input_tokens} in / {usage.output_tokens} out)"
    )
    return content
