"""Generate SEO blog posts with AI and publish them to Sanity.

Package structure:
    autoblog/config.py          – paths, API keys, model settings, delays
    autoblog/titles.py          – titles.json queue loading
    autoblog/portable_text/     – Markdown -> Portable Text converter
    autoblog/pipeline/          – content + hero image generation (Claude, DALL-E)
    autoblog/sanity/            – Sanity mutation / asset upload client and post publishing
    autoblog/validation/        – SEO checks, grading, and report formatting
"""
