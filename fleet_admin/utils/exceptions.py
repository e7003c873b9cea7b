from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES — Machine-readable constants, logged alongside the message
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR      = "VALIDATION_ERROR"
    BODY_TOO_LARGE        = "BODY_TOO_LARGE"
    UNAUTHORIZED          = "UNAUTHORIZED"
    NOT_FOUND             = "NOT_FOUND"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base exception for all application-level errors.
    Clients only ever see the message; the code is for logs.
    """
    def __init__(self, status_code: int, message: str, error_code: str):
        super().__init__(status_code=status_code, detail={
            "message": message,
            "code": error_code,
        })

    @property
    def message(self) -> str:
        return self.detail["message"]

    @property
    def error_code(self) -> str:
        return self.detail["code"]


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class ValidationException(AppException):
    def __init__(self, message: str = "Bad request"):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, ErrorCode.VALIDATION_ERROR)


class UnauthorizedException(AppException):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message, ErrorCode.UNAUTHORIZED)


class NotFoundException(AppException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found", ErrorCode.NOT_FOUND)


class BodyTooLargeException(AppException):
    """Oversized bodies are a validation error (400), like other bad input."""
    def __init__(self, message: str = "Request body too large"):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, ErrorCode.BODY_TOO_LARGE)
