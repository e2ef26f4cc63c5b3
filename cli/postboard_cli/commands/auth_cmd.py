from __future__ import annotations

import typer
from postboard_client import ApiError, AuthError, NetworkError

from .. import console
from ..config import load_config, save_config
from ..formatting import field
from ..http import make_client

app = typer.Typer(help="Auth commands.")


@app.command("login")
def login(
    username: str = typer.Option(..., "--username", prompt=True, help="Username for login."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Password for login."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Open a session. Unknown usernames are registered on first login."""
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        client.session(username=username, password=password)
        token = client.session_token()
    except (ApiError, NetworkError) as e:
        console.err(f"Login failed: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    cfg.auth.token = token or ""
    save_path = save_config(cfg)
    console.ok(f"Login successful. Token saved to {save_path}.")


@app.command("logout", help="Clear the saved session token.")
def logout():
    cfg = load_config()
    cfg.auth.token = ""
    save_path = save_config(cfg)
    console.ok(f"Token cleared from {save_path}.")


def whoami_impl(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Show the user behind the saved session."""
    cfg = load_config()
    if not cfg.auth.token:
        console.err("Not logged in. Run: postboard auth login")
        raise typer.Exit(code=2)
    client = make_client(cfg, base_url_override=base_url)
    try:
        user = client.auth_me()
    except AuthError as e:
        console.err(f"Session rejected: {e}")
        raise typer.Exit(code=2)
    except (ApiError, NetworkError) as e:
        console.err(f"Failed to resolve user: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(user)
        return
    console.console.print(f"id: {field(user, 'id')}")
    console.console.print(f"username: {field(user, 'username')}", markup=False)
