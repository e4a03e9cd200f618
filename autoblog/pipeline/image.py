"""Hero image step: generate with DALL-E, validate, upload to Sanity.

Image problems never stop a post from being published; the post simply
goes out without a main image.
"""

from __future__ import annotations

from typing import Optional

import openai
import requests

from autoblog import config
from autoblog.exceptions import AutoblogError, ConfigError, ImageGenerationError
from autoblog.pipeline.prompts import build_image_prompt
from autoblog.pipeline.retry import call_with_retry


def generate_image(title: str, client: Optional[openai.OpenAI] = None) -> str:
    """Generate a featured image for the title and return its temporary URL."""
    if client is None:
        if not config.OPENAI_API_KEY:
            raise ConfigError("OPENAI_API_KEY not set. Add it to your .env file.")
        client = openai.OpenAI(api_key=config.OPENAI_API_KEY)

    print(f"  -> Generating image ({config.IMAGE_MODEL})...")
    response = call_with_retry(
        client.images.generate,
        model=config.IMAGE_MODEL,
        prompt=build_image_prompt(title),
        n=1,
        size=config.IMAGE_SIZE,
        response_format="url",
    )

    if not response.data or not response.data[0].url:
        raise ImageGenerationError("Image API did not return an image URL")
    print("  OK Image generated")
    return response.data[0].url


def validate_image_url(image_url: str, session: Optional[requests.Session] = None) -> bool:
    """Check the image's content type and size before uploading it."""
    http = session or requests
    try:
        response = http.get(image_url, stream=True, timeout=config.HTTP_TIMEOUT)
    except requests.RequestException as e:
        print(f"  Warning: image validation failed: {e}")
        return False

    with response:
        content_type = response.headers.get("content-type", "").split(";")[0].strip()
        if content_type not in config.IMAGE_ALLOWED_TYPES:
            print(f"  Warning: invalid image type: {content_type or 'unknown'}")
            return False

        content_length = response.headers.get("content-length")
        if content_length and content_length.isdigit():
            size_mb = int(content_length) / (1024 * 1024)
            if size_mb > config.IMAGE_MAX_MB:
                print(f"  Warning: image too large: {size_mb:.2f}MB")
                return False

    return True


def download_image(image_url: str, session: Optional[requests.Session] = None) -> bytes:
    http = session or requests
    response = http.get(image_url, timeout=config.HTTP_TIMEOUT)
    response.raise_for_status()
    return response.content


def image_field(asset_id: str, title: str) -> dict:
    """Build the post's mainImage value referencing an uploaded asset."""
    return {
        "_type": "image",
        "asset": {"_type": "reference", "_ref": asset_id},
        "alt": title,
        "caption": f"Image for {title}",
    }


def generate_and_upload_image(
    title: str,
    sanity,
    client: Optional[openai.OpenAI] = None,
    session: Optional[requests.Session] = None,
) -> Optional[dict]:
    """Generate, check and upload a hero image. Returns None on any failure."""
    try:
        image_url = generate_image(title, client=client)
        if not validate_image_url(image_url, session=session):
            return None
        data = call_with_retry(download_image, image_url, session=session)
        asset_id = sanity.upload_image(data, filename=f"{title}.jpg")
    except (AutoblogError, openai.OpenAIError, requests.RequestException) as e:
        print(f"  Warning: image step failed, publishing without image: {e}")
        return None

    print(f"  OK Image uploaded (asset {asset_id})")
    return image_field(asset_id, title)
