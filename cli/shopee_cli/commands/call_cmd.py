from __future__ import annotations

import typer

from .. import console
from ..http import run_with_client
from ..params import parse_params


def call(
    path: str = typer.Argument(..., help="Endpoint path, e.g. /api/v1/items/get"),
    param: list[str] | None = typer.Option(None, "--param", "-p", help="Body parameter key=value (repeatable)."),
    json_body: str | None = typer.Option(None, "--json", help="Body parameters as a JSON object."),
    profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Send a signed POST to any partner API endpoint and print the JSON response."""
    try:
        parameters = parse_params(param, json_body)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    resp = run_with_client(
        lambda client: client.post(path, parameters),
        profile=profile,
        base_url_override=base_url,
    )
    console.print_json(resp.to_dict())
