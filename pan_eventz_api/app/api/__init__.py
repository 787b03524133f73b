"""
API package.

``router`` aggregates the domain routers under ``/api`` and mirrors
every admin route under ``/api/admin``; ``deps`` provides the FastAPI
dependencies that build services around the application's stores.
"""
