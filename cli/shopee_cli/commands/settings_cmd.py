from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/shopee/config.toml).")

_KEYS = ("base_url", "user_agent", "partner_id", "shop_id", "secret")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            default_config().base_url,
            "--base-url",
            prompt="API base URL",
            help="Partner API base URL like https://partner.shopeemobile.com",
        ),
        partner_id: int = typer.Option(..., "--partner-id", prompt=True, help="Partner id."),
        shop_id: int = typer.Option(0, "--shop-id", prompt=True, help="Shop id."),
        secret: str = typer.Option(..., "--secret", prompt=True, hide_input=True, help="Partner secret key."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    cfg.partner_id = partner_id
    cfg.shop_id = shop_id
    cfg.secret = secret
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    secret_state = "(set)" if cfg.secret else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url} user_agent={cfg.user_agent} partner_id={cfg.partner_id} "
        f"shop_id={cfg.shop_id} secret={secret_state}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, user_agent, partner_id, shop_id)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "secret":
        console.err("The secret is never printed.")
        raise typer.Exit(code=2)
    if k not in _KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    console.console.print(str(getattr(cfg, k)), markup=False)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        user_agent: str | None = typer.Option(None, "--user-agent", help="Set User-Agent header."),
        partner_id: int | None = typer.Option(None, "--partner-id", help="Set partner id."),
        shop_id: int | None = typer.Option(None, "--shop-id", help="Set shop id."),
        secret: bool = typer.Option(False, "--secret", help="Prompt for a new partner secret key."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if user_agent is not None:
        cfg.user_agent = user_agent.strip()
    if partner_id is not None:
        cfg.partner_id = partner_id
    if shop_id is not None:
        cfg.shop_id = shop_id
    if secret:
        cfg.secret = typer.prompt("Partner secret", hide_input=True)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
