"""Helpers for turning provider text into JSON."""

import json
import re
from typing import Any

from .errors import ParseError

_FENCE_RE = re.compile(r"```(?:json)?\n?")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences (```json / ```) wrapped around a response."""
    return _FENCE_RE.sub("", text.strip()).strip()


def load_json_response(text: str) -> Any:
    """
    Parse a provider response as JSON after stripping code fences.

    Raises:
        ParseError: the cleaned text is not valid JSON
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in LLM response ({e.msg})", cleaned) from e
