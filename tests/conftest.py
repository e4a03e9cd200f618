from types import SimpleNamespace

import pytest

from autoblog import config


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, json_data=None, text="", headers=None, content=b""):
        self.status_code = status_code
        self._json = json_data
        self.text = text
        self.headers = headers or {}
        self.content = content

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def raise_for_status(self) -> None:
        if not self.ok:
            import requests

            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSession:
    """Records requests and replays queued responses."""

    def __init__(self, responses=None):
        self.headers = {}
        self.responses = list(responses or [])
        self.calls = []

    def _next(self, method, url, kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, **kwargs):
        return self._next("POST", url, kwargs)

    def get(self, url, **kwargs):
        return self._next("GET", url, kwargs)


@pytest.fixture
def no_sleep(monkeypatch):
    """Make retries and pipeline pacing instant."""
    monkeypatch.setattr("autoblog.pipeline.retry.time.sleep", lambda s: None)
    monkeypatch.setattr(config, "STEP_DELAY", 0)
    monkeypatch.setattr(config, "ARTICLE_DELAY", 0)
    monkeypatch.setattr(config, "FAILURE_DELAY", 0)


def make_message(text: str):
    """Build an object shaped like anthropic.types.Message."""
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=10, output_tokens=20),
        stop_reason="end_turn",
    )


class FakeAnthropic:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []
        self.messages = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return make_message(reply)


class FakeOpenAI:
    def __init__(self, urls):
        self.urls = list(urls)
        self.calls = []
        self.images = SimpleNamespace(generate=self._generate)

    def _generate(self, **kwargs):
        self.calls.append(kwargs)
        url = self.urls.pop(0)
        data = [SimpleNamespace(url=url)] if url else []
        return SimpleNamespace(data=data)
