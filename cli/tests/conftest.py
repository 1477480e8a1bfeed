from __future__ import annotations

import pytest

from shopee_cli import config

_ENV_NAMES = (
    "SHOPEE_API_SECRET",
    "SHOPEE_PARTNER_ID",
    "SHOPEE_SHOP_ID",
    "SHOPEE_BASE_URL",
    "SHOPEE_USER_AGENT",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return tmp_path
