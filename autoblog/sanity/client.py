"""Sanity HTTP API client for document mutations and image assets."""

from __future__ import annotations

import re

import requests

from autoblog import config
from autoblog.exceptions import ConfigError, SanityError
from autoblog.pipeline.retry import call_with_retry


class SanityClient:
    """Create documents and upload image assets in one Sanity dataset."""

    def __init__(
        self,
        project_id: str,
        dataset: str,
        token: str,
        api_version: str = config.SANITY_API_VERSION,
        session: requests.Session | None = None,
    ):
        if not (project_id and dataset and token):
            raise ConfigError(
                "Sanity credentials are not set. Check SANITY_PROJECT_ID, "
                "SANITY_DATASET and SANITY_API_TOKEN in your .env file."
            )
        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {token}"})

    @classmethod
    def from_config(cls) -> "SanityClient":
        return cls(
            project_id=config.SANITY_PROJECT_ID,
            dataset=config.SANITY_DATASET,
            token=config.SANITY_API_TOKEN,
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.project_id}.api.sanity.io/v{self.api_version}"

    # ── Request helpers ───────────────────────────────────────────────────

    def _post(self, url: str, **kwargs) -> dict:
        response = self.session.post(url, timeout=config.HTTP_TIMEOUT, **kwargs)
        if not response.ok:
            raise SanityError(
                f"Sanity API responded with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError:
            raise SanityError(
                "Invalid JSON response from Sanity",
                status_code=response.status_code,
                body=response.text,
            )

    # ── Public API ────────────────────────────────────────────────────────

    def mutate(self, mutations: list[dict]) -> dict:
        """POST a list of mutations and return the transaction result."""
        url = f"{self.base_url}/data/mutate/{self.dataset}"
        return call_with_retry(self._post, url, json={"mutations": mutations})

    def upload_image(self, data: bytes, filename: str) -> str:
        """Upload raw image bytes and return the new asset document ID."""
        stem, dot, ext = filename.rpartition(".")
        if not dot:
            stem, ext = filename, "jpg"
        safe_name = f"{re.sub(r'[^a-z0-9]', '_', stem, flags=re.IGNORECASE)}.{ext}"

        url = f"{self.base_url}/assets/images/{self.dataset}"
        result = call_with_retry(
            self._post,
            url,
            data=data,
            headers={
                "Content-Type": "application/octet-stream",
                "X-Sanity-Image-Filename": safe_name,
            },
        )

        document = result.get("document") or {}
        asset_id = document.get("_id")
        if not isinstance(asset_id, str) or not asset_id:
            raise SanityError("Invalid Sanity upload response: no document._id")
        return asset_id
