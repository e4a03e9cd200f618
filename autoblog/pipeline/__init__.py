"""Generation steps: blog content (Claude) and hero image (DALL-E)."""

from autoblog.pipeline.content import BlogContent, generate_blog_content
from autoblog.pipeline.image import generate_and_upload_image

__all__ = ["BlogContent", "generate_blog_content", "generate_and_upload_image"]
