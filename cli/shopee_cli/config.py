from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

import tomli_w
from platformdirs import user_config_dir

from shopee_client import ClientConfig
from shopee_client.config_types import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ENV_BASE_URL_NAME,
    ENV_PARTNER_ID_NAME,
    ENV_SECRET_NAME,
    ENV_SHOP_ID_NAME,
    ENV_USER_AGENT_NAME,
)

from . import console

APP_NAME = "shopee"
CONFIG_FILENAME = "config.toml"

# Config field -> environment variable that overrides it.
ENV_OVERRIDES = {
    "base_url": ENV_BASE_URL_NAME,
    "user_agent": ENV_USER_AGENT_NAME,
    "secret": ENV_SECRET_NAME,
    "partner_id": ENV_PARTNER_ID_NAME,
    "shop_id": ENV_SHOP_ID_NAME,
}

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    partner_id: int = 0
    shop_id: int = 0
    secret: str = field(default="", repr=False)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not (sys.stderr.isatty() or sys.stdout.isatty()):
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _as_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "base_url": cfg.base_url,
        "user_agent": cfg.user_agent,
        "partner_id": cfg.partner_id,
        "shop_id": cfg.shop_id,
    }
    if cfg.secret:
        data["secret"] = cfg.secret
    return data


def _section_values(section: Mapping[str, Any]) -> dict[str, Any]:
    """Fields actually set in a TOML section, parsed to ``AppConfig`` types."""
    values: dict[str, Any] = {}
    base_url = normalize_base_url(str(section.get("base_url") or ""), warn=True)
    if base_url:
        values["base_url"] = base_url
    user_agent = str(section.get("user_agent") or "").strip()
    if user_agent:
        values["user_agent"] = user_agent
    for key in ("partner_id", "shop_id"):
        number = _as_int(section.get(key))
        if number is not None:
            values[key] = number
    secret = str(section.get("secret") or "")
    if secret:
        values["secret"] = secret
    return values


def from_toml(data: dict[str, Any]) -> AppConfig:
    return replace(default_config(), **_section_values(data))


def _read_toml() -> dict[str, Any] | None:
    try:
        with open(config_path(), "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None


def load_config() -> AppConfig:
    data = _read_toml()
    if data is None:
        return default_config()
    return from_toml(data)


def profile_values(profile: str | None) -> dict[str, Any]:
    """Values set in ``[profiles.<name>]`` of the config file."""
    if not profile:
        return {}
    data = _read_toml() or {}
    profiles_raw = data.get("profiles") or {}
    prof = profiles_raw.get(profile) if isinstance(profiles_raw, dict) else None
    if not isinstance(prof, dict):
        console.warn(f"Profile {profile!r} not found in {config_path()}, using defaults.")
        return {}
    return _section_values(prof)


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    """Overlay ``[profiles.<name>]`` from the config file, if present."""
    return replace(cfg, **profile_values(profile))


def to_client_config(
        cfg: AppConfig,
        environ: Mapping[str, str] | None = None,
        explicit: Mapping[str, Any] | None = None,
) -> ClientConfig:
    """Resolve the library config.

    Precedence, lowest first: config file, ``SHOPEE_*`` environment
    variables, ``explicit`` values (selected profile and command line flags).
    """
    env = os.environ if environ is None else environ
    file_values = {
        "base_url": cfg.base_url or DEFAULT_BASE_URL,
        "user_agent": cfg.user_agent or DEFAULT_USER_AGENT,
        "secret": cfg.secret,
        "partner_id": cfg.partner_id,
        "shop_id": cfg.shop_id,
    }
    overrides = {
        key: value
        for key, value in file_values.items()
        if not (env.get(ENV_OVERRIDES[key]) or "").strip()
    }
    overrides.update(explicit or {})
    return ClientConfig.from_env(env, **overrides)


def with_base_url(cfg: AppConfig, base_url: str | None) -> AppConfig:
    if not base_url:
        return cfg
    return replace(cfg, base_url=normalize_base_url(base_url, warn=True))


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    data = _read_toml() or {}
    data.update(to_toml(cfg))
    if not cfg.secret:
        data.pop("secret", None)
    # The file may hold the partner secret; create it private.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as f:
        os.fchmod(f.fileno(), 0o600)
        f.write(tomli_w.dumps(data).encode("utf-8"))
    return path
