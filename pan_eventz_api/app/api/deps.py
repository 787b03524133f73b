"""
Shared dependencies and helpers for the endpoint modules.

The ``get_*_service`` functions are FastAPI dependencies that build a
service around the store held on ``app.state``, so handlers receive a
ready service and tests can swap the stores by building the app with
their own instances.

``with_fallback`` implements the public read pattern: run the query,
and if it raises (or, for collections that ship sample content, comes
back empty) log and return the fallback payload instead.
``write_errors`` turns unexpected failures of admin writes into
``{"message", "error"}`` responses.
"""

import logging
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Iterator, Optional

from fastapi import Depends, HTTPException

from pan_eventz_api.app.core.config import Settings
from pan_eventz_api.app.core.db import MockDB, get_mock_db
from pan_eventz_api.app.core.errors import ApiError
from pan_eventz_api.app.core.fallbacks import fallback
from pan_eventz_api.app.core.file_storage import FileStorage, get_file_storage
from pan_eventz_api.app.core.security import get_settings
from pan_eventz_api.app.services.about_service import AboutService, ValueService
from pan_eventz_api.app.services.auth_service import AuthService
from pan_eventz_api.app.services.blog_service import BlogService
from pan_eventz_api.app.services.catalog_service import CatalogService
from pan_eventz_api.app.services.cloudinary_service import CloudinaryService
from pan_eventz_api.app.services.contact_service import ContactService
from pan_eventz_api.app.services.dashboard_service import DashboardService
from pan_eventz_api.app.services.event_service import EventService
from pan_eventz_api.app.services.gallery_service import GalleryService
from pan_eventz_api.app.services.settings_service import SettingsService
from pan_eventz_api.app.services.slide_service import SlideService
from pan_eventz_api.app.services.stat_service import StatService
from pan_eventz_api.app.services.team_service import TeamService
from pan_eventz_api.app.services.technology_service import TechnologyService
from pan_eventz_api.app.services.testimonial_service import TestimonialService
from pan_eventz_api.app.services.upload_service import UploadService


logger = logging.getLogger(__name__)


# -- file store services ----------------------------------------------------

def get_gallery_service(storage: FileStorage = Depends(get_file_storage)) -> GalleryService:
    return GalleryService(storage)


def get_blog_service(storage: FileStorage = Depends(get_file_storage)) -> BlogService:
    return BlogService(storage)


def get_event_service(storage: FileStorage = Depends(get_file_storage)) -> EventService:
    return EventService(storage)


def get_testimonial_service(storage: FileStorage = Depends(get_file_storage)) -> TestimonialService:
    return TestimonialService(storage)


def get_team_service(storage: FileStorage = Depends(get_file_storage)) -> TeamService:
    return TeamService(storage)


def get_contact_service(storage: FileStorage = Depends(get_file_storage)) -> ContactService:
    return ContactService(storage)


def get_settings_service(storage: FileStorage = Depends(get_file_storage)) -> SettingsService:
    return SettingsService(storage)


def get_dashboard_service(storage: FileStorage = Depends(get_file_storage)) -> DashboardService:
    return DashboardService(storage)


# -- in-memory database services --------------------------------------------

def get_catalog_service(db: MockDB = Depends(get_mock_db)) -> CatalogService:
    return CatalogService(db)


def get_slide_service(db: MockDB = Depends(get_mock_db)) -> SlideService:
    return SlideService(db)


def get_technology_service(db: MockDB = Depends(get_mock_db)) -> TechnologyService:
    return TechnologyService(db)


def get_stat_service(db: MockDB = Depends(get_mock_db)) -> StatService:
    return StatService(db)


def get_about_service(db: MockDB = Depends(get_mock_db)) -> AboutService:
    return AboutService(db)


def get_value_service(db: MockDB = Depends(get_mock_db)) -> ValueService:
    return ValueService(db)


def get_auth_service(
    db: MockDB = Depends(get_mock_db),
    app_settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, app_settings)


# -- external ---------------------------------------------------------------

def get_upload_service(app_settings: Settings = Depends(get_settings)) -> UploadService:
    return UploadService(app_settings.uploads_dir, app_settings.max_upload_size)


def get_cloudinary_service(app_settings: Settings = Depends(get_settings)) -> CloudinaryService:
    return CloudinaryService(app_settings)


# -- helpers ----------------------------------------------------------------

async def with_fallback(
    load: Callable[[], Awaitable[Any]],
    payload: Any,
    what: str,
    on_empty: bool = True,
    narrow: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """Return ``await load()`` or a copy of ``payload``.

    The fallback is used when ``load`` raises and, with ``on_empty``,
    when it returns nothing.  ``narrow`` applies the request's filters
    to the fallback so a filtered view stays consistent.
    """
    try:
        result = await load()
    except Exception:
        logger.exception("Error fetching %s, serving fallback content", what)
        result = None
    else:
        if result or not on_empty:
            return result
    data = fallback(payload)
    return narrow(data) if narrow is not None else data


@contextmanager
def write_errors(message: str, status_code: int = 400) -> Iterator[None]:
    """Map unexpected exceptions inside the block to an ``ApiError``."""
    try:
        yield
    except (HTTPException, ApiError):
        raise
    except Exception as exc:
        logger.exception(message)
        raise ApiError(status_code, message, str(exc)) from exc
