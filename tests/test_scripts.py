from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def run_server():
    return _load("run_server")


def test_run_server_configures_logging_and_passes_uvicorn_level(run_server, monkeypatch, db_file):
    calls = {}
    monkeypatch.delenv("PEOPLE_DB_FILE", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARN")
    monkeypatch.setattr(run_server, "setup_logging", lambda level, fmt: calls.setdefault("logging", (level, fmt)))
    monkeypatch.setattr(run_server.uvicorn, "run", lambda app, **kw: calls.setdefault("uvicorn", (app, kw)))

    run_server.main(["--port", "9001", "--db-file", str(db_file)])

    assert calls["logging"] == ("WARNING", "text")
    app, kw = calls["uvicorn"]
    assert app == "people_api.app:create_app"
    assert kw["factory"] is True
    assert kw["port"] == 9001
    assert kw["log_level"] == "warning"
    assert run_server.os.environ["PEOPLE_DB_FILE"] == str(db_file)


def test_run_server_rejects_bad_port(run_server, monkeypatch):
    monkeypatch.setattr(run_server.uvicorn, "run", lambda *a, **kw: pytest.fail("server started"))
    with pytest.raises(SystemExit):
        run_server.main(["--port", "0"])
