import hmac
import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# ─── Password Hashing ─────────────────────────────────────────────────────────
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password using bcrypt."""
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain-text password against a bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


# ─── Admin Credential ─────────────────────────────────────────────────────────
class PasswordVerifier:
    """
    Checks the admin password against the configured credential.

    A bcrypt hash wins over a plaintext password. With neither configured
    every password is rejected.
    """

    def __init__(self, plain: str | None = None, hashed: str | None = None):
        self.plain = plain or ""
        self.hashed = hashed or ""

    @property
    def configured(self) -> bool:
        return bool(self.hashed or self.plain)

    def verify(self, password: str) -> bool:
        if self.hashed:
            try:
                return verify_password(password, self.hashed)
            except (ValueError, TypeError) as e:
                logger.warning(f"Configured admin password hash is unusable: {e}")
                return False
        if self.plain:
            return hmac.compare_digest(password.encode("utf-8"), self.plain.encode("utf-8"))
        return False
