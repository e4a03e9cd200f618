"""Exception hierarchy for the generate-and-publish pipeline."""

from __future__ import annotations


class AutoblogError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(AutoblogError):
    """Raised when credentials, settings or the titles file are missing or invalid."""


class ContentGenerationError(AutoblogError):
    """Raised when the model reply cannot be turned into blog content."""


class ImageGenerationError(AutoblogError):
    """Raised when the image API does not return a usable image."""


class SanityError(AutoblogError):
    """Raised for failed Sanity API calls."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def is_transient(self) -> bool:
        return self.status_code is not None and (
            self.status_code >= 500 or self.status_code == 429
        )
