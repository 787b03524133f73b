"""
Top-level router for the API.

Public routes are mounted under their resource prefix (``/gallery``,
``/blog`` ...).  The admin panel calls the same resources under
``/admin/<resource>``: ``admin`` includes each domain's ``admin_router``
(reads only the admin may see) ahead of its regular ``router``, and the
whole ``/admin`` tree requires an admin token.  When new domains are
added, update both ``PUBLIC`` and ``ADMIN`` below.
"""

from fastapi import APIRouter, Depends

from pan_eventz_api.app.core.security import require_admin

from .endpoints import (
    about,
    auth,
    blog,
    cloudinary,
    contact,
    dashboard,
    events,
    gallery,
    health,
    services,
    settings,
    slides,
    stats,
    team,
    technologies,
    testimonials,
    upload,
    values,
)


# (module, prefix) pairs served at /api/<prefix>.
PUBLIC = [
    (health, "/health"),
    (auth, "/auth"),
    (services, "/services"),
    (gallery, "/gallery"),
    (testimonials, "/testimonials"),
    (events, "/events"),
    (blog, "/blog"),
    (contact, "/contact"),
    (team, "/team"),
    (values, "/values"),
    (stats, "/stats"),
    (slides, "/slides"),
    (technologies, "/technologies"),
    (about, "/about"),
    (settings, "/settings"),
    (upload, "/upload"),
    (cloudinary, "/cloudinary"),
]

# Resources mirrored at /api/admin/<prefix>.
ADMIN = [
    (services, "/services"),
    (gallery, "/gallery"),
    (testimonials, "/testimonials"),
    (events, "/events"),
    (blog, "/blog"),
    (contact, "/contact"),
    (team, "/team"),
    (values, "/values"),
    (stats, "/stats"),
    (slides, "/slides"),
    (technologies, "/technologies"),
    (about, "/about"),
    (settings, "/settings"),
    (upload, "/upload"),
]


admin = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])
admin.include_router(dashboard.admin_router, prefix="/dashboard", tags=["admin"])
for module, prefix in ADMIN:
    tag = prefix.strip("/")
    # admin_router first so its listing wins over the public one.
    if hasattr(module, "admin_router"):
        admin.include_router(module.admin_router, prefix=prefix, tags=["admin", tag])
    admin.include_router(module.router, prefix=prefix, tags=["admin", tag])

router = APIRouter()
for module, prefix in PUBLIC:
    router.include_router(module.router, prefix=prefix, tags=[prefix.strip("/")])
router.include_router(admin)
