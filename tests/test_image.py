import pytest

from autoblog import config
from autoblog.exceptions import ConfigError, ImageGenerationError, SanityError
from autoblog.pipeline.image import (
    generate_and_upload_image,
    generate_image,
    image_field,
    validate_image_url,
)
from conftest import FakeOpenAI, FakeResponse, FakeSession

IMAGE_URL = "https://images.example.com/hero.png"


def png_response(length="2048"):
    headers = {"content-type": "image/png"}
    if length is not None:
        headers["content-length"] = length
    return FakeResponse(200, headers=headers, content=b"\x89PNG...")


class FakeSanity:
    def __init__(self, error=None):
        self.error = error
        self.uploads = []

    def upload_image(self, data, filename):
        self.uploads.append((data, filename))
        if self.error:
            raise self.error
        return "image-abc123-1024x1024-png"


def test_generate_image_returns_url() -> None:
    client = FakeOpenAI([IMAGE_URL])
    assert generate_image("Cold Brew", client=client) == IMAGE_URL
    [call] = client.calls
    assert call["model"] == config.IMAGE_MODEL
    assert call["size"] == config.IMAGE_SIZE
    assert "Cold Brew" in call["prompt"]


def test_generate_image_without_url_raises() -> None:
    with pytest.raises(ImageGenerationError):
        generate_image("Cold Brew", client=FakeOpenAI([None]))


def test_generate_image_requires_api_key(monkeypatch) -> None:
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")
    with pytest.raises(ConfigError):
        generate_image("Cold Brew")


def test_validate_accepts_png_with_content_type_params() -> None:
    response = png_response()
    response.headers["content-type"] = "image/png; charset=binary"
    assert validate_image_url(IMAGE_URL, session=FakeSession([response])) is True


def test_validate_accepts_missing_content_length() -> None:
    assert validate_image_url(IMAGE_URL, session=FakeSession([png_response(None)])) is True


def test_validate_rejects_wrong_type() -> None:
    html = FakeResponse(200, headers={"content-type": "text/html"})
    assert validate_image_url(IMAGE_URL, session=FakeSession([html])) is False


def test_validate_rejects_large_image() -> None:
    too_big = str(6 * 1024 * 1024)
    assert validate_image_url(IMAGE_URL, session=FakeSession([png_response(too_big)])) is False


def test_validate_handles_request_errors() -> None:
    import requests

    session = FakeSession([requests.ConnectionError("down")])
    assert validate_image_url(IMAGE_URL, session=session) is False


def test_generate_and_upload_image_builds_field() -> None:
    sanity = FakeSanity()
    session = FakeSession([png_response(), png_response()])

    field = generate_and_upload_image(
        "Cold Brew", sanity, client=FakeOpenAI([IMAGE_URL]), session=session
    )

    assert field == image_field("image-abc123-1024x1024-png", "Cold Brew")
    assert field["asset"] == {"_type": "reference", "_ref": "image-abc123-1024x1024-png"}
    assert field["caption"] == "Image for Cold Brew"
    assert sanity.uploads == [(b"\x89PNG...", "Cold Brew.jpg")]
    assert [c["url"] for c in session.calls] == [IMAGE_URL, IMAGE_URL]


def test_image_failure_is_not_fatal() -> None:
    sanity = FakeSanity()
    assert generate_and_upload_image("Cold Brew", sanity, client=FakeOpenAI([None])) is None
    assert sanity.uploads == []


def test_invalid_image_skips_upload() -> None:
    sanity = FakeSanity()
    session = FakeSession([FakeResponse(200, headers={"content-type": "text/html"})])
    result = generate_and_upload_image(
        "Cold Brew", sanity, client=FakeOpenAI([IMAGE_URL]), session=session
    )
    assert result is None
    assert sanity.uploads == []


def test_upload_failure_returns_none() -> None:
    sanity = FakeSanity(error=SanityError("forbidden", status_code=403))
    session = FakeSession([png_response(), png_response()])
    result = generate_and_upload_image(
        "Cold Brew", sanity, client=FakeOpenAI([IMAGE_URL]), session=session
    )
    assert result is None
