from __future__ import annotations

import json
from typing import Any


def parse_value(raw: str) -> Any:
    """Values that parse as JSON keep their type; everything else is a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_params(pairs: list[str] | None, json_body: str | None = None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if json_body:
        try:
            loaded = json.loads(json_body)
        except json.JSONDecodeError as e:
            raise ValueError(f"--json is not valid JSON: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError("--json must be a JSON object")
        params.update(loaded)
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid parameter {pair!r}, expected key=value")
        params[key] = parse_value(value)
    return params
