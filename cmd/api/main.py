"""
FastAPI Service - Main entry point for the Tasks & Users API.
Implements clean separation of concerns with comprehensive logging and error handling:
- Routes are separated into modules
- Repositories selected at startup (in-memory or SQL)
- Uniform {"message": ...} error payloads
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status as http_status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import Settings, get_settings
from core.container import Container, bootstrap_container
from core.database import DatabaseManager
from core.logger import logger
from internal.api.routes import (
    create_health_routes,
    create_task_routes,
    create_user_routes,
)
from internal.api.utils import error_response
from repositories.interfaces import ITaskRepository, IUserRepository
from services import TaskService, UserService


def _database_of(app: FastAPI) -> Optional[DatabaseManager]:
    container: Container = app.state.container
    try:
        return container.resolve(DatabaseManager)
    except KeyError:
        return None


# Lifespan context manager
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    Connects to the database on startup when the SQL backend is active.
    """
    settings: Settings = app.state.settings
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Storage backend: {settings.storage_backend}")
    logger.info(f"API: {settings.api_host}:{settings.api_port}")

    database = _database_of(app)
    if database is not None:
        try:
            await database.connect()

            logger.info("Performing database health check...")
            if await database.health_check():
                logger.info("Database health check passed")
            else:
                logger.warning("Database health check failed")

        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            logger.exception("Database initialization error details:")
            raise

    logger.info(f"========== {settings.app_name} API service started successfully ==========")

    yield

    logger.info("========== Shutting down API service ==========")
    if database is not None:
        await database.disconnect()
    logger.info("========== API service stopped successfully ==========")


def register_exception_handlers(app: FastAPI) -> None:
    """Map uncaught failures to the uniform error payload."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Undecodable bodies are reported as server errors, like other malformed input
        errors = exc.errors()
        error_msg = "; ".join(
            f"{(e.get('loc') or ('body',))[-1]}: {e.get('msg')}" for e in errors
        )
        logger.error(f"Request could not be decoded: {error_msg}")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(f"Failed to parse request body: {error_msg}"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}")
        logger.exception("Exception details:")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(str(exc)),
        )


def create_app(
    task_repository: Optional[ITaskRepository] = None,
    user_repository: Optional[IUserRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        task_repository: Explicit task store (defaults to the configured backend)
        user_repository: Explicit user store (defaults to the configured backend)
        settings: Application settings (defaults to the cached settings)

    Returns:
        FastAPI: Configured application instance
    """
    try:
        logger.info("Creating FastAPI application...")
        settings = settings or get_settings()

        description = """
## Tasks & Users API

CRUD endpoints for two resources backed by an in-memory store or a SQL database.

* **Tasks** - `/tasks`: title, description, completed
* **Users** - `/users`: name, email
* **Partial updates** - `PUT` changes only the fields present in the body
* **Errors** - every failure returns `{"message": "..."}`
        """

        tags_metadata = [
            {"name": "Tasks", "description": "Create, read, update and delete tasks."},
            {"name": "Users", "description": "Create, read, update and delete users."},
            {"name": "Health", "description": "Service and database health checks."},
        ]

        app = FastAPI(
            title=settings.app_name,
            version=settings.app_version,
            description=description,
            lifespan=lifespan,
            openapi_tags=tags_metadata,
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],  # Configure appropriately for production
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        if task_repository is not None and user_repository is not None:
            container = Container()
            container.register(ITaskRepository, task_repository)
            container.register(IUserRepository, user_repository)
            logger.info("Using explicitly provided repositories")
        else:
            container = bootstrap_container(settings)
            if task_repository is not None:
                container.register(ITaskRepository, task_repository)
            if user_repository is not None:
                container.register(IUserRepository, user_repository)
        app.state.settings = settings
        app.state.container = container

        task_service = TaskService(container.resolve(ITaskRepository))
        user_service = UserService(container.resolve(IUserRepository))

        app.include_router(create_task_routes(task_service))
        logger.info("Task routes registered")

        app.include_router(create_user_routes(user_service))
        logger.info("User routes registered")

        app.include_router(create_health_routes(_database_of(app), settings))
        logger.info("Health routes registered")

        register_exception_handlers(app)

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI application: {e}")
        logger.exception("Application creation error details:")
        raise


# Run with: python cmd/api/main.py
app = create_app()


if __name__ == "__main__":
    import os
    import sys

    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Reload: {settings.api_reload}")

    # The reloader subprocess re-imports by path and needs the project root
    project_root = os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    )
    if project_root not in sys.path:
        sys.path.insert(0, project_root)
    current_pythonpath = os.environ.get("PYTHONPATH", "")
    if project_root not in current_pythonpath:
        os.environ["PYTHONPATH"] = (
            f"{project_root}:{current_pythonpath}" if current_pythonpath else project_root
        )

    if settings.api_reload or settings.api_workers > 1:
        # Reload and multiple workers need an import string; the stdlib "cmd"
        # module shadows this directory, so import the file as "main"
        uvicorn.run(
            "main:app",
            app_dir=os.path.dirname(os.path.abspath(__file__)),
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.api_reload,
            workers=None if settings.api_reload else settings.api_workers,
            log_level="info" if settings.debug else "warning",
        )
    else:
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level="info" if settings.debug else "warning",
        )
