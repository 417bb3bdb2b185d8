# newsanalyzer/client.py
# One request per analysis:
#   build_messages(text) -> [system turn, user turn]
#   transport (a0 HTTP endpoint, or OpenAI chat completions) -> completion string
#   parse_completion(completion) -> AnalysisResult
#
# Public API:
#   analyze_text(text, settings=None) -> AnalysisResult   (raises AnalysisFailure)

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

import requests
from openai import OpenAI
from pydantic import ValidationError as SchemaError

from newsanalyzer.config import Settings, load_settings
from newsanalyzer.errors import AnalysisFailure
from newsanalyzer.models import AnalysisResult

logger = logging.getLogger(__name__)

# -------------------------
# Prompt
# -------------------------
SYSTEM_PROMPT = (
    "You are a fake news detection expert. Analyze the given text and return a JSON response "
    "with the following structure: { credibilityScore: number (0-100), analysis: string (main findings), "
    "redFlags: string[] (list of concerning elements), recommendations: string[] (fact-checking steps) }"
)

USER_PREFIX = "Analyze this news text for potential misinformation: "

_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def build_messages(text: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": f"{USER_PREFIX}{text}"},
    ]


# -------------------------
# Transports
# -------------------------
def _complete_a0(messages: List[Dict[str, str]], settings: Settings) -> str:
    try:
        r = requests.post(
            settings.endpoint,
            json={"messages": messages},
            headers={"Content-Type": "application/json"},
            timeout=settings.timeout,
        )
    except requests.RequestException as e:
        raise AnalysisFailure(f"request to {settings.endpoint} failed: {e}") from e

    if not r.ok:
        raise AnalysisFailure(f"HTTP {r.status_code} from {settings.endpoint}: {r.text[:300]}")

    try:
        data = r.json()
    except ValueError as e:
        raise AnalysisFailure("completion endpoint returned a non-JSON body") from e

    completion = data.get("completion") if isinstance(data, dict) else None
    if not isinstance(completion, str):
        raise AnalysisFailure("response has no 'completion' string")
    return completion


def _openai(settings: Settings) -> OpenAI:
    if not settings.openai_api_key:
        raise AnalysisFailure("Missing OPENAI_API_KEY for the openai backend")
    return OpenAI(api_key=settings.openai_api_key, timeout=settings.timeout)


def _complete_openai(messages: List[Dict[str, str]], settings: Settings) -> str:
    client = _openai(settings)
    try:
        resp = client.chat.completions.create(
            model=settings.openai_model,
            response_format={"type": "json_object"},
            temperature=0.2,
            messages=messages,
        )
    except Exception as e:
        raise AnalysisFailure(f"OpenAI request failed: {e}") from e

    content = resp.choices[0].message.content if resp.choices else None
    if not content:
        raise AnalysisFailure("OpenAI returned an empty completion")
    return content


TRANSPORTS = {
    "a0": _complete_a0,
    "openai": _complete_openai,
}


# -------------------------
# Parsing
# -------------------------
def _strip_fence(completion: str) -> str:
    text = completion.strip()
    m = _FENCE_RE.match(text)
    return m.group(1).strip() if m else text


def parse_completion(completion: str) -> AnalysisResult:
    """Parse the model's completion text into an AnalysisResult, or raise AnalysisFailure."""
    try:
        payload: Any = json.loads(_strip_fence(completion))
    except ValueError as e:
        raise AnalysisFailure("completion is not valid JSON") from e
    if not isinstance(payload, dict):
        raise AnalysisFailure(f"completion is a JSON {type(payload).__name__}, expected an object")
    try:
        return AnalysisResult.model_validate(payload)
    except SchemaError as e:
        raise AnalysisFailure(f"completion does not match the result shape: {e.error_count()} error(s)") from e


def analyze_text(text: str, settings: Optional[Settings] = None) -> AnalysisResult:
    settings = settings or load_settings()
    transport = TRANSPORTS[settings.backend]
    logger.info("Analyzing %d characters via %s backend", len(text), settings.backend)
    completion = transport(build_messages(text), settings)
    result = parse_completion(completion)
    logger.debug("Credibility score %s, %d red flag(s)", result.credibility_score, len(result.red_flags))
    return result
