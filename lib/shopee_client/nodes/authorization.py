from __future__ import annotations

from ..response import ResponseData
from .base import Node

AUTH_PARTNER_PATH = "/api/v2/shop/auth_partner"
TOKEN_GET_PATH = "/api/v2/auth/token/get"
ACCESS_TOKEN_GET_PATH = "/api/v2/auth/access_token/get"


class Authorization(Node):
    """OpenAPI 2.0 shop authorization and token exchange."""

    def get_authorization_url(self, redirect: str) -> str:
        return self.client.generate_authorization_url(AUTH_PARTNER_PATH, redirect)

    def get_access_token(self, code: str) -> ResponseData:
        return self.client.get_access_token(TOKEN_GET_PATH, code)

    def refresh_token(self, refresh_token: str) -> ResponseData:
        return self.client.refresh_token(ACCESS_TOKEN_GET_PATH, refresh_token)
