import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


# ─── Coercion Helpers ─────────────────────────────────────────────────────────
def _to_text(value: Any) -> str:
    # Same text a browser's String() gives for the value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else _to_text(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def safe_string(value: Any) -> str:
    """Coerce any JSON value to a trimmed string; null/missing become ''."""
    if value is None:
        return ""
    return _to_text(value).strip()


def as_mapping(raw: Any) -> Mapping:
    """Loose input that is not an object is treated as an empty one."""
    return raw if isinstance(raw, Mapping) else {}


def generate_id(prefix: str, index: int) -> str:
    """Time-based id; the list position keeps ids unique within one batch."""
    return f"{prefix}-{int(time.time() * 1000)}-{index}"


# ─── Response Bodies ──────────────────────────────────────────────────────────
class OkResponse(BaseModel):
    ok: bool = True


class AuthStatusResponse(BaseModel):
    authed: bool


class UploadResponse(BaseModel):
    url: str

