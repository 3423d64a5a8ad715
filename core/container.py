"""
Dependency Injection Container.
"""

from typing import Any, Callable, Dict, Optional, Type, TypeVar

from core.config import Settings, get_settings
from core.logger import logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    One container is built per application and kept on ``app.state``, so
    stores are owned by the app that created them.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._providers: Dict[Type, Callable[[], Any]] = {}

    def register(self, interface: Type[T], instance: Any) -> None:
        """Register a singleton instance for an interface."""
        self._instances[interface] = instance

    def register_factory(self, interface: Type[T], factory: Callable[[], T]) -> None:
        """Register a factory for an interface."""
        self._providers[interface] = factory

    def resolve(self, interface: Type[T]) -> T:
        """Resolve an interface to its implementation."""
        if interface in self._instances:
            return self._instances[interface]
        if interface in self._providers:
            return self._providers[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    def clear(self) -> None:
        """Clear all registrations (useful for testing)."""
        self._instances.clear()
        self._providers.clear()


def bootstrap_container(settings: Optional[Settings] = None) -> Container:
    """
    Initialize the dependency injection container.

    Registers the task and user repositories for the configured storage
    backend and, for the SQL backend, the DatabaseManager that owns the
    engine.
    """
    from core.database import DatabaseManager
    from repositories.interfaces import ITaskRepository, IUserRepository
    from repositories.task_repository import InMemoryTaskRepository, SqlTaskRepository
    from repositories.user_repository import InMemoryUserRepository, SqlUserRepository

    settings = settings or get_settings()
    container = Container()

    if settings.uses_database:
        database = DatabaseManager(settings)
        container.register(DatabaseManager, database)
        container.register(ITaskRepository, SqlTaskRepository(database.session_factory))
        container.register(IUserRepository, SqlUserRepository(database.session_factory))
    else:
        container.register(ITaskRepository, InMemoryTaskRepository())
        container.register(IUserRepository, InMemoryUserRepository())

    logger.info(f"Container bootstrapped: storage_backend={settings.storage_backend}")
    return container
