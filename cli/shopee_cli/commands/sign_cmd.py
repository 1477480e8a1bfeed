from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from shopee_client.uri import canonical_url

from .. import console
from ..http import run_with_client
from ..params import parse_params


def sign(
    path: str = typer.Argument(..., help="Endpoint path, e.g. /api/v1/items/get"),
    param: list[str] | None = typer.Option(None, "--param", "-p", help="Body parameter key=value (repeatable)."),
    json_body: str | None = typer.Option(None, "--json", help="Body parameters as a JSON object."),
    profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Show what would be signed and sent for PATH, without sending it."""
    try:
        parameters = parse_params(param, json_body)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    request = run_with_client(
        lambda client: client.new_request(path, parameters=parameters),
        profile=profile,
        base_url_override=base_url,
    )

    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column(overflow="fold")
    table.add_row("url", Text(str(request.url)))
    table.add_row("canonical", Text(canonical_url(request.url)))
    table.add_row("body", Text(request.content.decode("utf-8")))
    table.add_row("signature", Text(request.headers["Authorization"]))
    console.console.print(table)
