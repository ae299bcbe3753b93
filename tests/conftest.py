import pytest
from fastapi.testclient import TestClient

from alunos_api.core.config import Settings
from alunos_api.main import create_app


def make_settings(url: str, **overrides) -> Settings:
    """Settings for tests, independent of any .env file."""
    values = {
        "POSTGRES_URL": url,
        "DB_CREATE_TABLES": True,
        "LOG_LEVEL": "DEBUG",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'alunos.db'}"


@pytest.fixture
def settings(sqlite_url) -> Settings:
    return make_settings(sqlite_url)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def joao() -> dict:
    return {
        "nome": "João",
        "nota_primeiro_semestre": 8.5,
        "nota_segundo_semestre": 9.0,
        "nome_professor": "Maria",
        "numero_sala": 101,
    }
