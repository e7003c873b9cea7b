import logging
import secrets
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from fleet_admin import __version__
from fleet_admin.config import Settings
from fleet_admin.utils.exceptions import AppException
from fleet_admin.utils.security import PasswordVerifier
from fleet_admin.utils.session import CookieSessionGuard, SessionGuard
from fleet_admin.schemas.vehicle import normalize_vehicle
from fleet_admin.schemas.gallery import normalize_gallery_item
from fleet_admin.services.auth_service import AuthService
from fleet_admin.services.content_store import ContentStore
from fleet_admin.services.upload_service import UploadService
from fleet_admin.middleware.body_limit import BodySizeLimitMiddleware
from fleet_admin.middleware.security_headers import security_headers_middleware
from fleet_admin.middleware.error_handler import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)

from fleet_admin.api import auth
from fleet_admin.api import fleet
from fleet_admin.api import gallery
from fleet_admin.api import uploads
from fleet_admin.api import site

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Room for multipart boundaries and part headers around the image itself
MULTIPART_OVERHEAD = 64 * 1024


def create_app(settings: Settings | None = None, session_guard: SessionGuard | None = None) -> FastAPI:
    settings = settings or Settings()

    # ─── Startup ──────────────────────────────────────────────────────────────
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.fleet_store.ensure()
        app.state.gallery_store.ensure()
        app.state.upload_service.ensure()
        logger.info(f"Data in {settings.DATA_DIR.resolve()}, uploads in {settings.UPLOAD_DIR.resolve()}")
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Fleet & gallery content admin API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ─── Services ─────────────────────────────────────────────────────────────
    verifier = PasswordVerifier(settings.ADMIN_PASSWORD, settings.ADMIN_PASSWORD_HASH)
    if not verifier.configured:
        logger.warning("Neither ADMIN_PASSWORD nor ADMIN_PASSWORD_HASH is set. Admin login is disabled.")

    app.state.settings = settings
    app.state.auth_service = AuthService(
        verifier,
        session_guard or CookieSessionGuard(),
    )
    app.state.fleet_store = ContentStore(
        "fleet", settings.fleet_file, settings.fleet_defaults_file,
        normalize_vehicle, settings.DEFAULT_LANG,
    )
    app.state.gallery_store = ContentStore(
        "gallery", settings.gallery_file, settings.gallery_defaults_file,
        normalize_gallery_item, settings.DEFAULT_LANG,
    )
    app.state.upload_service = UploadService(settings.UPLOAD_DIR, settings.UPLOAD_MAX_BYTES)

    # ─── Middleware ───────────────────────────────────────────────────────────
    session_secret = settings.SESSION_SECRET
    if not session_secret:
        logger.warning("SESSION_SECRET is not set. Sessions will reset on restart.")
        session_secret = secrets.token_hex(32)

    # Innermost: limits apply when a handler reads the body, after the admin check
    app.add_middleware(
        BodySizeLimitMiddleware,
        max_bytes=settings.JSON_BODY_MAX_BYTES,
        path_limits={"/api/upload": (settings.UPLOAD_MAX_BYTES + MULTIPART_OVERHEAD, "File too large")},
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
        https_only=settings.is_production,
    )
    if settings.get_cors_origins():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.get_cors_origins(),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.middleware("http")(security_headers_middleware)

    # ─── Exception Handlers ───────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ─── Routers ──────────────────────────────────────────────────────────────
    PREFIX = "/api"
    app.include_router(auth.router,    prefix=PREFIX, tags=["Auth"])
    app.include_router(fleet.router,   prefix=PREFIX, tags=["Fleet"])
    app.include_router(gallery.router, prefix=PREFIX, tags=["Gallery"])
    app.include_router(uploads.router, prefix=PREFIX, tags=["Uploads"])
    app.include_router(site.router)

    # ─── Health ───────────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "app": settings.APP_NAME, "version": __version__}

    # ─── Static Files ─────────────────────────────────────────────────────────
    # Mounted last: "/" catches every path the routes above did not.
    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")
    if settings.SITE_DIR.is_dir():
        app.mount("/", StaticFiles(directory=settings.SITE_DIR), name="site")
    else:
        logger.warning(f"Site directory {settings.SITE_DIR} not found. Static assets are not served.")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = app.state.settings
    uvicorn.run("fleet_admin.main:app", host=settings.APP_HOST, port=settings.APP_PORT,
                reload=settings.is_development)
