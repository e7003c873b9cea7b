from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── Application ───────────────────────────────────────────────────────────
    APP_NAME: str = "Fleet Admin"
    APP_ENV:  str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000

    # ─── Session ───────────────────────────────────────────────────────────────
    SESSION_SECRET:  str = ""
    SESSION_COOKIE:  str = "fleet_admin_session"
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60

    # ─── Admin credential ──────────────────────────────────────────────────────
    ADMIN_PASSWORD:      str = ""
    ADMIN_PASSWORD_HASH: str = ""   # bcrypt, takes precedence over ADMIN_PASSWORD

    # ─── Storage ───────────────────────────────────────────────────────────────
    DATA_DIR:         Path = Path("data")
    UPLOAD_DIR:       Path = Path("uploads")
    SITE_DIR:         Path = Path("site")
    INDEX_FILE:       str  = "index.html"
    DEFAULT_LANG:     str  = "me"
    UPLOAD_MAX_BYTES: int  = 5 * 1024 * 1024
    JSON_BODY_MAX_BYTES: int = 2 * 1024 * 1024

    # ─── CORS ──────────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = ""

    def get_cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def fleet_file(self) -> Path:
        return self.DATA_DIR / "fleet.json"

    @property
    def fleet_defaults_file(self) -> Path:
        return self.DATA_DIR / "fleet.defaults.json"

    @property
    def gallery_file(self) -> Path:
        return self.DATA_DIR / "gallery.json"

    @property
    def gallery_defaults_file(self) -> Path:
        return self.DATA_DIR / "gallery.defaults.json"

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}
