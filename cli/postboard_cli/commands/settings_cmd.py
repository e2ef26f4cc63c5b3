from __future__ import annotations

import os

import typer

from .. import console
from ..config import (
    ENV_API_URL,
    AppConfig,
    config_path,
    default_config,
    load_config,
    normalize_base_url,
    resolve_base_url,
    save_config,
)

app = typer.Typer(
    help=f"Manage local CLI settings (~/.config/postboard/config.toml). {ENV_API_URL} overrides base_url."
)

SETTING_KEYS = ("base_url", "effective_base_url", "base_url_source", "token")


def _base_url_source() -> str:
    return "env" if os.getenv(ENV_API_URL) else "config"


def _token_state(cfg: AppConfig) -> str:
    return "(set)" if cfg.auth.token.strip() else "(empty)"


def _setting_value(cfg: AppConfig, key: str) -> str | None:
    if key == "base_url":
        return cfg.base_url
    if key == "effective_base_url":
        return resolve_base_url(cfg)
    if key == "base_url_source":
        return _base_url_source()
    if key == "token":
        return _token_state(cfg)
    return None


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config (drops the saved session)."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="API base URL",
            help="API base URL like http://127.0.0.1:3000",
        ),
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
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show", help=f"Print every setting; effective_base_url reflects {ENV_API_URL} when set.")
def show_settings():
    cfg = load_config()
    for key in SETTING_KEYS:
        console.console.print(f"{key}={_setting_value(cfg, key)}", markup=False, highlight=False)


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(SETTING_KEYS)})."),
):
    cfg = load_config()
    value = _setting_value(cfg, key.strip().lower())
    if value is None:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    console.console.print(value, markup=False, highlight=False)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        clear_token: bool = typer.Option(False, "--clear-token", help="Forget the saved session token."),
):
    if base_url is None and not clear_token:
        console.err("Nothing to set. Use --base-url or --clear-token.")
        raise typer.Exit(code=2)
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if clear_token:
        cfg.auth.token = ""
    saved = save_config(cfg)
    if base_url is not None and os.getenv(ENV_API_URL):
        console.warn(f"{ENV_API_URL} is set and takes precedence over base_url.")
    console.ok(f"Settings updated: {saved}")
