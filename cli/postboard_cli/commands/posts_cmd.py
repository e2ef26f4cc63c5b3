from __future__ import annotations

from typing import Any

import typer
from postboard_client import ApiError, NetworkError
from rich.table import Table

from .. import console
from ..config import load_config
from ..formatting import field, format_list_timestamp
from ..http import make_client

POSTS_USAGE = """\
Usage:
  postboard posts list
  postboard posts show <id>
  postboard posts create --title TITLE --content TEXT
  postboard posts update <id> --title TITLE --content TEXT
  postboard posts delete <id> [--yes]
"""

app = typer.Typer(help="Posts commands.\n\n" + POSTS_USAGE)


def _fail(action: str, e: Exception) -> None:
    if isinstance(e, ApiError) and e.status_code in (401, 403):
        console.err(f"Unauthorized: {e}. Run: postboard auth login")
        raise typer.Exit(code=2)
    console.err(f"Failed to {action}: {e}")
    raise typer.Exit(code=2)


def _print_post(post: dict[str, Any]) -> None:
    console.console.print(f"id: {field(post, 'id')}")
    console.console.print(f"user_id: {field(post, 'user_id')}")
    console.console.print(f"title: {field(post, 'title')}", markup=False)
    console.console.print(f"created_at: {format_list_timestamp(field(post, 'created_at', None))}")
    console.console.print("")
    console.console.print(str(field(post, "content", "")), markup=False)


@app.command("list")
def list_posts(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        posts = client.posts_list()
    except (ApiError, NetworkError) as e:
        _fail("list posts", e)
    finally:
        client.close()

    if json_out:
        console.print_json(posts)
        return
    if not posts:
        console.info("No posts.")
        return

    table = Table(title="posts")
    table.add_column("id", justify="right")
    table.add_column("user", justify="right")
    table.add_column("title")
    table.add_column("created")
    for post in posts:
        table.add_row(
            str(field(post, "id")),
            str(field(post, "user_id")),
            str(field(post, "title")),
            format_list_timestamp(field(post, "created_at", None)),
        )
    console.print(table)


@app.command("show")
def show_post(
        post_id: int = typer.Argument(..., help="Post ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        post = client.post_get(post_id)
    except (ApiError, NetworkError) as e:
        _fail(f"get post {post_id}", e)
    finally:
        client.close()

    if json_out:
        console.print_json(post)
        return
    _print_post(post)


@app.command("create")
def create_post(
        title: str = typer.Option(..., "--title", prompt=True, help="Post title."),
        content: str = typer.Option(..., "--content", prompt=True, help="Post body."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        post = client.post_create(title=title, content=content)
    except (ApiError, NetworkError) as e:
        _fail("create post", e)
    finally:
        client.close()

    if json_out:
        console.print_json(post)
        return
    console.ok(f"Post created: id={field(post, 'id')}")


@app.command("update")
def update_post(
        post_id: int = typer.Argument(..., help="Post ID."),
        title: str = typer.Option(..., "--title", help="New title."),
        content: str = typer.Option(..., "--content", help="New body."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        post = client.post_update(post_id, title=title, content=content)
    except (ApiError, NetworkError) as e:
        _fail(f"update post {post_id}", e)
    finally:
        client.close()

    if json_out:
        console.print_json(post)
        return
    console.ok(f"Post {post_id} updated.")


@app.command("delete")
def delete_post(
        post_id: int = typer.Argument(..., help="Post ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete post {post_id}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=1)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        client.post_delete(post_id)
    except (ApiError, NetworkError) as e:
        _fail(f"delete post {post_id}", e)
    finally:
        client.close()

    console.ok(f"Post {post_id} deleted.")
