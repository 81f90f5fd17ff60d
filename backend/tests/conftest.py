import pytest
from fastapi.testclient import TestClient

from notes_api.main import create_app


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("APP_ENV", "test")
    return TestClient(create_app())


@pytest.fixture()
def notes_file(tmp_path):
    return tmp_path / "notes.json"
