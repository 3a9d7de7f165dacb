from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote people_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from people_api.app import create_app  # noqa: E402
from people_api.core import config as core_config  # noqa: E402
from people_api.core.config import Settings  # noqa: E402
from people_api.repositories.json_storage import PeopleStore  # noqa: E402


def make_settings(db_file: Path, *, strict_status: bool = False) -> Settings:
    return Settings(
        db_file=str(db_file),
        host="127.0.0.1",
        port=8080,
        strict_status=strict_status,
        log_level="INFO",
        log_format="text",
    )


@pytest.fixture()
def db_file(tmp_path):
    """Caminho de um arquivo JSON que ainda não existe."""
    return tmp_path / "db.json"


@pytest.fixture()
def settings(db_file):
    return make_settings(db_file)


@pytest.fixture()
def store(db_file):
    return PeopleStore(db_file)


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def strict_client(db_file):
    app = create_app(make_settings(db_file, strict_status=True))
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()
