from __future__ import annotations

from typer.testing import CliRunner

from postboard_cli import config, main


def test_settings_init_and_get(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    app = main._build_app()
    runner = CliRunner()

    result = runner.invoke(app, ["settings", "init", "--base-url", "localhost:3000/"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["settings", "get", "base_url"])
    assert result.exit_code == 0
    assert "http://localhost:3000" in result.output

    result = runner.invoke(app, ["settings", "init", "--base-url", "other.test"])
    assert "Config already exists" in result.output
    assert config.load_config().base_url == "http://localhost:3000"


def test_settings_set_and_show(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    monkeypatch.delenv(config.ENV_API_URL, raising=False)
    app = main._build_app()
    runner = CliRunner()

    result = runner.invoke(app, ["settings", "set", "--base-url", "https://api.example.test/"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["settings", "show"])
    assert result.exit_code == 0
    assert "base_url=https://api.example.test" in result.output
    assert "token=(empty)" in result.output


def test_settings_get_unknown_key(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    result = CliRunner().invoke(main._build_app(), ["settings", "get", "nope"])
    assert result.exit_code == 2


def test_settings_get_reports_env_override_and_token(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    config.save_config(config.AppConfig(base_url="http://configured.test", auth=config.AuthConfig(token="tok")))
    monkeypatch.setenv(config.ENV_API_URL, "http://env.test")
    app = main._build_app()
    runner = CliRunner()

    assert runner.invoke(app, ["settings", "get", "effective_base_url"]).output.strip() == "http://env.test"
    assert runner.invoke(app, ["settings", "get", "base_url_source"]).output.strip() == "env"
    assert runner.invoke(app, ["settings", "get", "token"]).output.strip() == "(set)"


def test_settings_set_clear_token(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    config.save_config(config.AppConfig(base_url="http://configured.test", auth=config.AuthConfig(token="tok")))
    runner = CliRunner()

    result = runner.invoke(main._build_app(), ["settings", "set", "--clear-token"])

    assert result.exit_code == 0
    assert config.load_config().auth.token == ""
    assert config.load_config().base_url == "http://configured.test"


def test_settings_set_without_options(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    result = CliRunner().invoke(main._build_app(), ["settings", "set"])
    assert result.exit_code == 2
