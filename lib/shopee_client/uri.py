from __future__ import annotations

import httpx

from .errors import ConfigurationError


def parse_base_url(raw: str | httpx.URL) -> httpx.URL:
    """Parse and validate the configured base URL (absolute http(s) only)."""
    url = _to_url(raw)
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Base URL must be an absolute http(s) URL, got {str(raw)!r}")
    return url


def compose_uri(base: str | httpx.URL, relative: str | httpx.URL) -> httpx.URL:
    """Mount ``relative`` under ``base``.

    Scheme, userinfo, host and port come from ``base``; the path is the base
    path prefix followed by the relative path. Query and fragment come from
    ``relative``. Paths are joined in their encoded form so existing escapes
    such as ``%25`` keep their meaning.
    """
    base_url = _to_url(base)
    rel = _to_url(relative)

    rel_path = _encoded_path(rel)
    if not rel_path.startswith("/"):
        rel_path = "/" + rel_path
    raw_path = _encoded_path(base_url).rstrip("/") + rel_path
    if rel.query:
        raw_path += "?" + rel.query.decode("ascii")
    try:
        return base_url.copy_with(
            raw_path=raw_path.encode("ascii"),
            fragment=rel.fragment or None,
        )
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Cannot compose URI from {str(relative)!r}: {e}") from e


def _encoded_path(url: httpx.URL) -> str:
    return url.raw_path.decode("ascii").split("?", 1)[0]


def canonical_url(uri: str | httpx.URL) -> str:
    """``scheme://authority/path`` with query and fragment stripped."""
    url = _to_url(uri)
    host = url.raw_host.decode("ascii")
    if ":" in host:
        host = f"[{host}]"
    authority = host if url.port is None else f"{host}:{url.port}"
    if url.userinfo:
        authority = f"{url.userinfo.decode('ascii')}@{authority}"
    path = _encoded_path(url)
    return f"{url.scheme}://{authority}{path}"


def _to_url(value: str | httpx.URL) -> httpx.URL:
    if isinstance(value, httpx.URL):
        return value
    try:
        return httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"Malformed URI {value!r}: {e}") from e
