import pytest
from pathlib import Path

from fastapi.testclient import TestClient

from main import create_app
from storage import TaskStore


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    """Per-test tasks file. It does not exist until the first save."""
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    store = TaskStore(tasks_file)
    store.load()
    return store


@pytest.fixture()
def client(tasks_file: Path):
    """
    A TestClient around a fresh app. Entering the client runs the lifespan,
    which loads the store from tasks_file.
    """
    app = create_app(tasks_file=tasks_file)
    with TestClient(app) as c:
        yield c
