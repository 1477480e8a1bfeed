from __future__ import annotations

from typing import Callable, TypeVar

import typer

from shopee_client import ShopeeClient, ShopeeClientError

from . import console
from .config import AppConfig, load_config, normalize_base_url, profile_values, to_client_config

T = TypeVar("T")


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    base_url_override: str | None,
) -> ShopeeClient:
    # The selected profile and --base-url beat SHOPEE_* environment variables.
    explicit = profile_values(profile)
    if base_url_override:
        explicit["base_url"] = normalize_base_url(base_url_override, warn=True)
    return ShopeeClient(to_client_config(cfg, explicit=explicit))


def run_with_client(
    call: Callable[[ShopeeClient], T],
    *,
    profile: str | None,
    base_url_override: str | None,
) -> T:
    """Run ``call`` against a fresh client; library errors exit with code 2."""
    client = None
    try:
        client = make_client(load_config(), profile=profile, base_url_override=base_url_override)
        return call(client)
    except ShopeeClientError as e:
        console.err(f"Request failed: {e}")
        raise typer.Exit(code=2)
    finally:
        if client is not None:
            client.close()
