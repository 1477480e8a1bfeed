from __future__ import annotations

import copy
import json
from typing import Any, Iterator

import httpx

from .errors import ResponseDecodeError


class ResponseData:
    """Read-only view over a decoded Shopee JSON response."""

    def __init__(self, response: httpx.Response):
        self._response = response
        self._data = _decode(response)

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def data(self) -> Any:
        return self._data

    @property
    def request_id(self) -> str | None:
        return self._field("request_id")

    @property
    def error(self) -> str | None:
        return self._field("error")

    @property
    def message(self) -> str | None:
        return self._field("msg") or self._field("message")

    def get(self, key: str, default: Any = None) -> Any:
        if isinstance(self._data, dict):
            return self._data.get(key, default)
        return default

    def __getitem__(self, key: str) -> Any:
        if not isinstance(self._data, dict):
            raise KeyError(key)
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return isinstance(self._data, dict) and key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data if isinstance(self._data, dict) else ())

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self._data, dict):
            return copy.deepcopy(self._data)
        return {"raw": copy.deepcopy(self._data)}

    def _field(self, key: str) -> str | None:
        value = self.get(key)
        return str(value) if value else None

    def __repr__(self) -> str:
        return f"ResponseData(status_code={self.status_code}, request_id={self.request_id!r})"


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponseDecodeError(
            f"Response from {response.request.url.path} is not valid JSON: {e}",
            status_code=response.status_code,
            body=response.text[:1000],
        ) from e
