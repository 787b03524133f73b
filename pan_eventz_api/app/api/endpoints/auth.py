"""
Authentication endpoints.

``POST /api/auth/login`` exchanges the admin credentials for a bearer
token; ``GET /api/auth/me`` returns the claims of the presented token.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_auth_service
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.auth import LoginRequest, LoginResponse
from pan_eventz_api.app.services.auth_service import AuthService


router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, service: AuthService = Depends(get_auth_service)) -> Dict[str, Any]:
    """Authenticate the administrator and issue an access token.

    Returns 400 when a field is missing and 401 for a wrong pair.
    """
    if not credentials.username or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required",
        )
    result = await service.login(credentials.username, credentials.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return result


@router.get("/me")
async def read_me(current_user: Dict[str, Any] = Depends(require_admin)) -> Dict[str, Any]:
    return {
        "id": current_user.get("userId"),
        "username": current_user.get("username"),
        "role": current_user.get("role"),
    }
