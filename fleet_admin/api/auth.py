from fastapi import APIRouter, Depends, Request, status

from fleet_admin.dependencies import get_auth_service
from fleet_admin.schemas.auth import LoginRequest
from fleet_admin.schemas.common import AuthStatusResponse, OkResponse
from fleet_admin.services.auth_service import AuthService

router = APIRouter(prefix="/auth")


# ─── POST /auth/login ─────────────────────────────────────────────────────────
@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    summary="Log in as administrator",
    response_model=OkResponse,
)
def login(data: LoginRequest, request: Request, auth: AuthService = Depends(get_auth_service)):
    """
    Check the admin password and mark the session as authenticated.
    400 when the password is missing, 401 when it is wrong.
    """
    auth.login(request, data)
    return {"ok": True}


# ─── GET /auth/me ─────────────────────────────────────────────────────────────
@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    summary="Report whether the current session is authenticated",
    response_model=AuthStatusResponse,
)
def me(request: Request, auth: AuthService = Depends(get_auth_service)):
    return {"authed": auth.is_authed(request)}


# ─── POST /auth/logout ────────────────────────────────────────────────────────
@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    summary="End the session (safe to call repeatedly)",
    response_model=OkResponse,
)
def logout(request: Request, auth: AuthService = Depends(get_auth_service)):
    auth.logout(request)
    return {"ok": True}
