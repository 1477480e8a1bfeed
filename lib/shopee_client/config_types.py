from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .errors import ConfigurationError

VERSION = "0.1.0"

DEFAULT_BASE_URL = "https://partner.shopeemobile.com"
DEFAULT_USER_AGENT = f"shopee-python/{VERSION}"

ENV_SECRET_NAME = "SHOPEE_API_SECRET"
ENV_PARTNER_ID_NAME = "SHOPEE_PARTNER_ID"
ENV_SHOP_ID_NAME = "SHOPEE_SHOP_ID"
ENV_BASE_URL_NAME = "SHOPEE_BASE_URL"
ENV_USER_AGENT_NAME = "SHOPEE_USER_AGENT"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    secret: str = field(default="", repr=False)
    partner_id: int = 0
    shop_id: int = 0
    timeout_s: float = 15.0

    def with_base_url(self, base_url: str) -> ClientConfig:
        return replace(self, base_url=base_url)

    def with_user_agent(self, user_agent: str) -> ClientConfig:
        return replace(self, user_agent=user_agent)

    def with_secret(self, secret: str) -> ClientConfig:
        return replace(self, secret=secret)

    def with_partner_id(self, partner_id: int) -> ClientConfig:
        return replace(self, partner_id=int(partner_id))

    def with_shop_id(self, shop_id: int) -> ClientConfig:
        return replace(self, shop_id=int(shop_id))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> ClientConfig:
        """Build a config from ``SHOPEE_*`` environment variables.

        Explicit keyword overrides win over the environment. The environment is
        read once here; the client itself never looks at it.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "secret": env.get(ENV_SECRET_NAME, ""),
            "partner_id": _int_from_env(env, ENV_PARTNER_ID_NAME),
            "shop_id": _int_from_env(env, ENV_SHOP_ID_NAME),
        }
        base_url = env.get(ENV_BASE_URL_NAME, "").strip()
        if base_url:
            values["base_url"] = base_url
        user_agent = env.get(ENV_USER_AGENT_NAME, "").strip()
        if user_agent:
            values["user_agent"] = user_agent
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _int_from_env(env: Mapping[str, str], name: str) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
