from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()


def print_json(data) -> None:
    console.print_json(data=data)


def print_body(data: Any) -> None:
    """Print a decoded response body: JSON documents pretty-printed, text verbatim."""
    if isinstance(data, str):
        console.print(data, markup=False, highlight=False)
        return
    print_json(data)


def info(msg: str) -> None:
    console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {escape(msg)}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")


def print(*args, **kwargs):
    console.print(*args, **kwargs)
