from __future__ import annotations

import typer
from postboard_client import ApiError, PostboardClientError

from .. import console
from ..config import load_config
from ..http import make_client


def _parse_pairs(values: list[str] | None, option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            console.err(f"{option} expects KEY=VALUE, got: {raw}")
            raise typer.Exit(code=2)
        pairs[key.strip()] = value
    return pairs


def get(
        path: str = typer.Argument(..., help="Path relative to the base URL, or an absolute URL."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Query parameter KEY=VALUE."),
        header: list[str] | None = typer.Option(None, "--header", "-H", help="Request header KEY=VALUE."),
        timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL (default: POSTBOARD_API_URL, then config)."),
):
    """GET a path and print the response body."""
    options = {}
    params = _parse_pairs(param, "--param")
    headers = _parse_pairs(header, "--header")
    if params:
        options["params"] = params
    if headers:
        options["headers"] = headers

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url, timeout_s=timeout)
    try:
        data = client.fetch(path, **options)
    except ApiError as e:
        console.err(f"Request failed ({e.status_code}): {e}")
        if e.data not in (None, ""):
            console.print_body(e.data)
        raise typer.Exit(code=2)
    except PostboardClientError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()

    console.print_body(data)
