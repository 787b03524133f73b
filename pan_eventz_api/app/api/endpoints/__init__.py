"""
Endpoint subpackage.

Each module defines an ``APIRouter`` named ``router`` for one content
domain: public reads plus admin-only writes.  Modules with reads that
only the admin panel may see also define ``admin_router``.  Both are
aggregated in ``api/router.py``.
"""
