"""Retry upstream API calls on transient failures.

Claude overloads (529), rate limits (429), dropped connections and Sanity
5xx responses are retried with exponential backoff so a single hiccup does
not cost a whole article.
"""

from __future__ import annotations

import time

import anthropic
import openai
import requests
from anthropic._exceptions import OverloadedError

from autoblog import config
from autoblog.exceptions import SanityError

# OverloadedError is not re-exported from anthropic in some SDK versions
RETRYABLE = (
    OverloadedError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
    anthropic.APIConnectionError,
    openai.RateLimitError,
    openai.InternalServerError,
    openai.APIConnectionError,
    requests.ConnectionError,
    requests.Timeout,
)


def is_retryable(error: Exception) -> bool:
    if isinstance(error, SanityError):
        return error.is_transient
    return isinstance(error, RETRYABLE)


def backoff_delay(attempt: int) -> float:
    """Delay before retry number ``attempt + 1`` (0-based attempt)."""
    delay = config.RETRY_BASE_DELAY * (config.RETRY_BACKOFF**attempt)
    return min(delay, config.RETRY_MAX_DELAY)


def call_with_retry(fn, *args, max_retries: int | None = None, sleep=None, **kwargs):
    """Call fn(*args, **kwargs), retrying transient errors.

    Non-transient errors propagate immediately. After the last attempt the
    final error is re-raised.
    """
    attempts = max_retries or config.MAX_RETRIES
    for attempt in range(attempts):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if not is_retryable(e) or attempt == attempts - 1:
                raise
            delay = backoff_delay(attempt)
            kind = type(e).__name__
            print(f"  .. {kind}, retrying in {delay:.1f}s (attempt {attempt + 1}/{attempts})...")
            (sleep or time.sleep)(delay)
    raise RuntimeError("retry loop exited without return or raise")
