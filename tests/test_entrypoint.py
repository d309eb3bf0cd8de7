import uvicorn
from fastapi import FastAPI

import ytproxy.__main__ as entrypoint
import ytproxy.main as main_module


def test_no_app_is_built_at_import():
    assert not hasattr(main_module, "app")


def test_build_app_uses_loaded_config(tmp_path, monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("YTPROXY_UPSTREAM__TOKEN", "env-token")

    app = main_module.build_app()

    assert isinstance(app, FastAPI)
    assert app.state.config.upstream.token == "env-token"


def test_main_runs_uvicorn_with_configured_address(tmp_path, monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("YTPROXY_API__PORT", "8123")
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entrypoint.main()

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs == {"host": "0.0.0.0", "port": 8123, "log_level": "info"}
