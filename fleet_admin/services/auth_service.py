import logging

from fastapi import Request

from fleet_admin.schemas.auth import LoginRequest
from fleet_admin.utils.exceptions import UnauthorizedException, ValidationException
from fleet_admin.utils.security import PasswordVerifier
from fleet_admin.utils.session import SessionGuard

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, verifier: PasswordVerifier, guard: SessionGuard):
        self.verifier = verifier
        self.guard = guard

    # ─── Login ────────────────────────────────────────────────────────────────
    def login(self, request: Request, data: LoginRequest) -> None:
        if not data.password:
            raise ValidationException("Missing password")

        if not self.verifier.verify(data.password):
            client = request.client.host if request.client else "unknown"
            logger.warning(f"Failed admin login from {client}")
            raise UnauthorizedException("Invalid password")

        self.guard.start_admin_session(request)
        logger.info("Admin logged in")

    # ─── Logout ───────────────────────────────────────────────────────────────
    def logout(self, request: Request) -> None:
        self.guard.end_session(request)

    # ─── Session State ────────────────────────────────────────────────────────
    def is_authed(self, request: Request) -> bool:
        return self.guard.is_admin(request)
