from pydantic import BaseModel


# ─── Request Schemas ──────────────────────────────────────────────────────────
class LoginRequest(BaseModel):
    # blank is rejected by the service with a 400, not by pydantic
    password: str = ""
