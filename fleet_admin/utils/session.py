from typing import Protocol

from fastapi import Request


class SessionGuard(Protocol):
    """What the auth routes and guards need from the session backend."""

    def is_admin(self, request: Request) -> bool: ...

    def start_admin_session(self, request: Request) -> None: ...

    def end_session(self, request: Request) -> None: ...


class CookieSessionGuard:
    """
    Keeps the admin flag in Starlette's signed cookie session.
    Requires SessionMiddleware to be installed on the app.
    """

    ADMIN_KEY = "admin"

    def is_admin(self, request: Request) -> bool:
        return request.session.get(self.ADMIN_KEY) is True

    def start_admin_session(self, request: Request) -> None:
        request.session[self.ADMIN_KEY] = True

    def end_session(self, request: Request) -> None:
        # Clearing an empty session makes SessionMiddleware drop the cookie
        request.session.clear()
