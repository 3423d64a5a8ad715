import pytest

from core.config import Settings
from core.container import Container, bootstrap_container
from core.database import DatabaseManager
from repositories import (
    InMemoryTaskRepository,
    InMemoryUserRepository,
    SqlTaskRepository,
    SqlUserRepository,
)
from repositories.interfaces import ITaskRepository, IUserRepository


def test_register_and_resolve():
    container = Container()
    repository = InMemoryTaskRepository()

    container.register(ITaskRepository, repository)

    assert container.resolve(ITaskRepository) is repository


def test_register_factory():
    container = Container()
    container.register_factory(IUserRepository, InMemoryUserRepository)

    first = container.resolve(IUserRepository)
    second = container.resolve(IUserRepository)

    assert isinstance(first, InMemoryUserRepository)
    assert first is not second


def test_resolve_unknown_raises():
    with pytest.raises(KeyError):
        Container().resolve(ITaskRepository)


def test_clear():
    container = Container()
    container.register(ITaskRepository, InMemoryTaskRepository())

    container.clear()

    with pytest.raises(KeyError):
        container.resolve(ITaskRepository)


def test_bootstrap_memory_backend():
    container = bootstrap_container(Settings(_env_file=None, storage_backend="memory"))

    assert isinstance(container.resolve(ITaskRepository), InMemoryTaskRepository)
    assert isinstance(container.resolve(IUserRepository), InMemoryUserRepository)
    with pytest.raises(KeyError):
        container.resolve(DatabaseManager)


async def test_bootstrap_database_backend():
    settings = Settings(
        _env_file=None, storage_backend="database", database_url="sqlite+aiosqlite://"
    )

    container = bootstrap_container(settings)

    database = container.resolve(DatabaseManager)
    assert isinstance(container.resolve(ITaskRepository), SqlTaskRepository)
    assert isinstance(container.resolve(IUserRepository), SqlUserRepository)
    assert await database.health_check() is True
    await database.disconnect()


def test_containers_do_not_share_stores():
    settings = Settings(_env_file=None)

    first = bootstrap_container(settings)
    second = bootstrap_container(settings)

    assert first.resolve(ITaskRepository) is not second.resolve(ITaskRepository)
