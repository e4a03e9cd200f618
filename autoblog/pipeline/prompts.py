"""Prompt templates for blog content and hero image generation."""

from autoblog.config import (
    H2_COUNT,
    KEYWORD_COUNT,
    META_DESCRIPTION_LENGTH,
    SEO_TITLE_LENGTH,
    TARGET_WORD_COUNT,
)


# ── Content prompt ────────────────────────────────────────────────────────


def build_content_prompt(title: str) -> str:
    """Return the single-turn prompt asking Claude for SEO copy as JSON."""
    title_min, title_max = SEO_TITLE_LENGTH
    meta_min, meta_max = META_DESCRIPTION_LENGTH
    kw_min, kw_max = KEYWORD_COUNT
    words_min, words_max = TARGET_WORD_COUNT
    h2_min, h2_max = H2_COUNT

    return f"""You're writing an SEO-optimized blog post titled "{title}".

Follow these SEO best practices:
1. Use the primary keyword "{title}" naturally in the introduction, at least one heading, and conclusion
2. Include 3-5 related semantic keywords throughout the content
3. Create a compelling SEO title ({title_min}-{title_max} characters) with the main keyword near the beginning
4. Write a click-worthy meta description ({meta_min}-{meta_max} characters) containing the main keyword
5. Structure content with proper Markdown headings (# for title, ## for H2, ### for H3)
6. Include numbered or bulleted lists where appropriate
7. Use short paragraphs (2-3 sentences each) for better readability
8. Use proper Markdown formatting for emphasis: **bold** for important terms, *italic* for emphasis
9. Add a clear call-to-action in the conclusion

## MARKDOWN RULES (STRICT)

- Use proper Markdown heading syntax: # for H1, ## for H2, ### for H3 (include the space after the # symbols)
- Use **double asterisks** for bold text
- Use *single asterisks* for italic text
- For bullet lists, use - or * with a space after
- For numbered lists, use 1., 2., etc. with a space after
- Separate paragraphs with a blank line between them
- DO NOT use "H2:" or "H3:" as text, use proper Markdown heading syntax instead
- No tables, no links, no images, no nested lists

## WHAT TO GENERATE

- An SEO title ({title_min}-{title_max} characters) optimized for CTR and keyword inclusion
- A meta description ({meta_min}-{meta_max} characters) with a value proposition and the main keyword
- A list of {kw_min}-{kw_max} relevant keywords separated by commas
- A full blog post (~{words_min}-{words_max} words) in properly formatted Markdown structured with:
  * A # Heading title
  * {h2_min}-{h2_max} ## H2 sections with relevant ### H3 subsections
  * Strategic use of **bold text** for important phrases
  * *Italic text* for emphasis
  * Conclusion with a call-to-action
  * Naturally placed semantic keywords

Return ONLY the following JSON format:
{{
  "seoTitle": "...",
  "metaDescription": "...",
  "keywords": "keyword1, keyword2, keyword3, keyword4, keyword5",
  "body": "# Title\\n\\nFirst paragraph...\\n\\n## Section Heading...\\n\\nMore content..."
}}"""


# ── Image prompt ──────────────────────────────────────────────────────────


def build_image_prompt(title: str) -> str:
    return (
        f'High-quality blog featured image for article about "{title}". '
        "Professional, modern, detailed illustration suitable for a blog post."
    )
