import importlib.util
import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Keep test runs away from a developer's .env and ./logs
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="tasks-api-logs-"))
os.environ["STORAGE_BACKEND"] = "memory"

from core.config import Settings  # noqa: E402
from core.database import DatabaseManager  # noqa: E402
from repositories import (  # noqa: E402
    InMemoryTaskRepository,
    InMemoryUserRepository,
    SqlTaskRepository,
    SqlUserRepository,
)

# Import cmd.api.main by path to avoid conflict with stdlib cmd
file_path = Path(__file__).resolve().parent.parent / "cmd" / "api" / "main.py"
spec = importlib.util.spec_from_file_location("cmd.api.main", file_path)
main_module = importlib.util.module_from_spec(spec)
sys.modules["cmd.api.main"] = main_module
spec.loader.exec_module(main_module)
create_app = main_module.create_app

SQLITE_MEMORY_URL = "sqlite+aiosqlite://"


def sqlite_settings(**overrides) -> Settings:
    values = {
        "storage_backend": "database",
        "database_url": SQLITE_MEMORY_URL,
        "database_create_tables": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def task_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
async def database():
    manager = DatabaseManager(sqlite_settings())
    await manager.reset_tables()
    yield manager
    await manager.disconnect()


@pytest.fixture(params=["memory", "sql"])
async def task_store(request, database):
    if request.param == "memory":
        return InMemoryTaskRepository()
    return SqlTaskRepository(database.session_factory)


@pytest.fixture(params=["memory", "sql"])
async def user_store(request, database):
    if request.param == "memory":
        return InMemoryUserRepository()
    return SqlUserRepository(database.session_factory)


@pytest.fixture
def app(task_repository, user_repository):
    return create_app(task_repository, user_repository)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sql_client():
    """Client over the SQL backend, with tables created by the app lifespan."""
    app = create_app(settings=sqlite_settings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_factory():
    return create_app
