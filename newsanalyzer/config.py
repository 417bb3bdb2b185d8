# newsanalyzer/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

# -------------------------
# Defaults
# -------------------------
DEFAULT_ENDPOINT = "https://api.a0.dev/ai/llm"
DEFAULT_BACKEND = "a0"
DEFAULT_TIMEOUT = 30.0
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

BACKENDS = ("a0", "openai")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


# -------------------------
# Secrets
# -------------------------
def _get_secret(name: str) -> Optional[str]:
    try:
        import streamlit as st  # type: ignore
        v = st.secrets.get(name)
        if v:
            return str(v)
    except Exception:
        # no secrets.toml, or not running under streamlit
        pass
    return os.getenv(name)


@dataclass(frozen=True)
class Settings:
    backend: str = DEFAULT_BACKEND
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    debug: bool = False


def load_settings() -> Settings:
    """Resolve settings from Streamlit secrets, then the environment."""
    backend = (_get_secret("ANALYZER_BACKEND") or DEFAULT_BACKEND).strip().lower()
    if backend not in BACKENDS:
        logging.getLogger(__name__).warning(
            "Unknown ANALYZER_BACKEND %r, falling back to %r", backend, DEFAULT_BACKEND
        )
        backend = DEFAULT_BACKEND

    raw_timeout = _get_secret("ANALYZER_TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    if timeout <= 0:
        timeout = DEFAULT_TIMEOUT

    return Settings(
        backend=backend,
        endpoint=_get_secret("ANALYZER_ENDPOINT") or DEFAULT_ENDPOINT,
        timeout=timeout,
        openai_api_key=_get_secret("OPENAI_API_KEY"),
        openai_model=_get_secret("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
        debug=_get_secret("ANALYZER_DEBUG") == "1",
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("newsanalyzer").setLevel(level)
