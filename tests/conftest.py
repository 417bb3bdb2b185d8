import json
import os

import pytest
import requests

from newsanalyzer.config import Settings


@pytest.fixture(autouse=True)
def env_only_secrets(monkeypatch):
    """Resolve settings from the environment only; tests never read secrets.toml."""
    monkeypatch.setattr("newsanalyzer.config._get_secret", os.getenv)
    for name in ("ANALYZER_BACKEND", "ANALYZER_ENDPOINT", "ANALYZER_TIMEOUT",
                 "OPENAI_API_KEY", "OPENAI_MODEL", "ANALYZER_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(endpoint="https://llm.example.test/ai/llm", timeout=5.0)


@pytest.fixture
def good_completion():
    return json.dumps({
        "credibilityScore": 85,
        "analysis": "Looks factual",
        "redFlags": [],
        "recommendations": ["Verify source"],
    })


def make_response(payload=None, status=200, raw=None):
    r = requests.Response()
    r.status_code = status
    r.url = "https://llm.example.test/ai/llm"
    r._content = raw if raw is not None else json.dumps(payload).encode("utf-8")
    return r
