from typing import Optional

from fastapi import Depends, Query, Request
from starlette.datastructures import UploadFile

from fleet_admin.config import Settings
from fleet_admin.services.auth_service import AuthService
from fleet_admin.services.content_store import ContentStore
from fleet_admin.services.upload_service import UploadService
from fleet_admin.utils.exceptions import UnauthorizedException, ValidationException


# ─── App-scoped Objects ───────────────────────────────────────────────────────
# Built once in create_app() and kept on app.state so tests can swap them.

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_fleet_store(request: Request) -> ContentStore:
    return request.app.state.fleet_store


def get_gallery_store(request: Request) -> ContentStore:
    return request.app.state.gallery_store


def get_upload_service(request: Request) -> UploadService:
    return request.app.state.upload_service


# ─── Language ─────────────────────────────────────────────────────────────────
def get_lang(
    lang: Optional[str] = Query(None, description="Language key, e.g. 'me' or 'en'"),
    settings: Settings = Depends(get_settings),
) -> str:
    """Trimmed ?lang=, falling back to the default language when absent or blank."""
    return (lang or "").strip() or settings.DEFAULT_LANG


# ─── Admin Guard ──────────────────────────────────────────────────────────────
def require_admin(request: Request, auth: AuthService = Depends(get_auth_service)) -> None:
    """
    Allow the request only when the session carries the admin flag.
    Raises 401 otherwise. Guarded routes read their body through the
    dependencies below, so an anonymous body is never parsed.
    """
    if not auth.is_authed(request):
        raise UnauthorizedException()


# ─── Guarded Bodies ───────────────────────────────────────────────────────────
async def read_records(request: Request, _: None = Depends(require_admin)) -> list:
    """JSON array body of a replace call."""
    try:
        body = await request.json()
    except ValueError:
        raise ValidationException("Invalid JSON body")
    if not isinstance(body, list):
        raise ValidationException("Expected a JSON array of records")
    return body


async def read_upload(request: Request, _: None = Depends(require_admin)):
    """The multipart `image` file, or None when the field is missing or not a file."""
    form = await request.form(max_files=1, max_fields=20)
    try:
        image = form.get("image")
        yield image if isinstance(image, UploadFile) else None
    finally:
        await form.close()
