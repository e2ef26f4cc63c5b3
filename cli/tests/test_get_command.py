from __future__ import annotations

from typer.testing import CliRunner

from postboard_cli import main
from postboard_cli.commands import get_cmd
from postboard_cli.config import default_config
from postboard_client import ApiError, InvalidRequestError, NetworkError


class _FakeClient:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    def fetch(self, url: str, **options):
        self.calls.append((url, options))
        if self.error is not None:
            raise self.error
        return self.result

    def close(self) -> None:
        self.closed = True


def _invoke(monkeypatch, client: _FakeClient, args: list[str]):
    monkeypatch.setattr(get_cmd, "load_config", default_config)
    monkeypatch.setattr(get_cmd, "make_client", lambda *_args, **_kwargs: client)
    return CliRunner().invoke(main._build_app(), ["get", *args])


def test_get_prints_body(monkeypatch) -> None:
    client = _FakeClient(result={"items": [1, 2, 3]})
    result = _invoke(monkeypatch, client, ["/items"])

    assert result.exit_code == 0
    assert '"items"' in result.output
    assert client.calls == [("/items", {})]
    assert client.closed


def test_get_forwards_params_and_headers(monkeypatch) -> None:
    client = _FakeClient(result="ok")
    result = _invoke(monkeypatch, client, ["/posts", "-p", "page=2", "-H", "X-Trace=abc"])

    assert result.exit_code == 0
    assert client.calls == [("/posts", {"params": {"page": "2"}, "headers": {"X-Trace": "abc"}})]


def test_get_rejects_malformed_pair(monkeypatch) -> None:
    client = _FakeClient(result="ok")
    result = _invoke(monkeypatch, client, ["/posts", "--param", "novalue"])

    assert result.exit_code == 2
    assert client.calls == []


def test_get_api_error_prints_server_body(monkeypatch) -> None:
    client = _FakeClient(error=ApiError(404, "not found", {"error": "not found"}))
    result = _invoke(monkeypatch, client, ["/items"])

    assert result.exit_code == 2
    assert "404" in result.output
    assert '"error": "not found"' in result.output
    assert client.closed


def test_get_network_error(monkeypatch) -> None:
    client = _FakeClient(error=NetworkError("GET http://x/items failed: refused"))
    result = _invoke(monkeypatch, client, ["/items"])

    assert result.exit_code == 2
    assert "refused" in result.output


def test_get_malformed_url(monkeypatch) -> None:
    client = _FakeClient(error=InvalidRequestError("GET http://[::1: Invalid port: ':1'"))
    result = _invoke(monkeypatch, client, ["http://[::1"])

    assert result.exit_code == 2
    assert "Invalid port" in result.output
    assert client.closed
