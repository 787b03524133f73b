"""
Main entrypoint for the Pan Eventz API.

This module assembles the FastAPI application: it sets up logging,
builds the two content stores, installs CORS and the error handlers,
serves uploaded files at ``/uploads`` and includes the API router under
``/api``.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn pan_eventz_api.app.main:app --reload

The stores live on ``app.state`` (``db``, ``file_storage``) together
with the ``settings`` the app was built with; tests pass their own.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import MockDB, init_db
from .core.errors import register_exception_handlers
from .core.file_storage import FileStorage
from .core.logging_config import setup_logging


def create_app(
    settings: Optional[Settings] = None,
    file_storage: Optional[FileStorage] = None,
    mock_db: Optional[MockDB] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    file_storage : Optional[FileStorage]
        JSON file store.  Defaults to one rooted at ``settings.data_dir``.
    mock_db : Optional[MockDB]
        In-memory database.  Defaults to a fresh one, seeded according
        to ``settings.seed_mock_db``, with the admin user inserted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that store set-up can
    # log its messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.file_storage = file_storage or FileStorage(settings.data_dir)
    app.state.db = mock_db or init_db(
        settings.seed_mock_db,
        settings.admin_username,
        settings.admin_password,
        settings.admin_name,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    uploads = Path(settings.uploads_dir)
    uploads.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(uploads)), name="uploads")

    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
