# tests/conftest.py

from __future__ import annotations

import os
import tempfile

import pytest

# main.py builds a module-level app on import; keep its logs out of the repo.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="kanban-logs-"))
os.environ.setdefault("LOG_TO_FILE", "0")

from fastapi.testclient import TestClient  # noqa: E402

from kanban_board.app.main import create_app  # noqa: E402
from kanban_board.infra.memory.task_store import InMemoryTaskStore  # noqa: E402


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def app(store: InMemoryTaskStore):
    """App wired to an empty store; seeding is covered separately."""
    return create_app(store=store, seed=False)


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c
