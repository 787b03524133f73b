"""Print a long-lived admin token for scripts and API clients.

The token carries the same claims as one issued by ``/api/auth/login``
and is signed with the configured ``JWT_SECRET``.
"""
from pan_eventz_api.app.core.config import settings
from pan_eventz_api.app.core.security import ADMIN_ROLE, create_access_token

# lifetime: 365 days, in seconds
token = create_access_token(
    {"userId": 1, "username": settings.admin_username, "role": ADMIN_ROLE},
    expires_delta=365 * 24 * 60 * 60,
    secret=settings.jwt_secret,
)
print(token)
