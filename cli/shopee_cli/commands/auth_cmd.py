from __future__ import annotations

import typer

from .. import console
from ..http import run_with_client

app = typer.Typer(help="Shop authorization flow (OpenAPI v2).")


@app.command("url")
def authorization_url(
    redirect: str = typer.Option(..., "--redirect", help="URL Shopee redirects to after authorization."),
    profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Print the shop authorization link."""
    url = run_with_client(
        lambda client: client.authorization.get_authorization_url(redirect),
        profile=profile,
        base_url_override=base_url,
    )
    console.console.print(url, markup=False, soft_wrap=True)


@app.command("token")
def get_access_token(
    code: str = typer.Option(..., "--code", help="Authorization code from the redirect."),
    profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Exchange an authorization code for access and refresh tokens."""
    resp = run_with_client(
        lambda client: client.authorization.get_access_token(code),
        profile=profile,
        base_url_override=base_url,
    )
    console.print_json(resp.to_dict())


@app.command("refresh")
def refresh_token(
    token: str = typer.Option(..., "--refresh-token", help="Refresh token."),
    profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Get a new access token with a refresh token."""
    resp = run_with_client(
        lambda client: client.authorization.refresh_token(token),
        profile=profile,
        base_url_override=base_url,
    )
    console.print_json(resp.to_dict())
