from starlette.types import ASGIApp, Message, Receive, Scope, Send

from fleet_admin.utils.exceptions import BodyTooLargeException


class BodySizeLimitMiddleware:
    """
    Caps request bodies while they stream in.

    The limit is only checked when a handler actually reads the body, so a
    guarded route rejects an anonymous caller with 401 before any of it is
    consumed. `path_limits` overrides the default for exact paths and may
    carry its own error message.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_bytes: int,
        path_limits: dict[str, tuple[int, str]] | None = None,
    ):
        self.app = app
        self.max_bytes = max_bytes
        self.path_limits = path_limits or {}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit, message = self.path_limits.get(scope["path"], (self.max_bytes, "Request body too large"))
        received = 0
        declared_checked = False

        async def limited_receive() -> Message:
            nonlocal received, declared_checked
            if not declared_checked:
                declared_checked = True
                if _content_length(scope) > limit:
                    raise BodyTooLargeException(message)

            msg = await receive()
            if msg["type"] == "http.request":
                received += len(msg.get("body", b""))
                if received > limit:
                    raise BodyTooLargeException(message)
            return msg

        await self.app(scope, limited_receive, send)


def _content_length(scope: Scope) -> int:
    for name, value in scope.get("headers", []):
        if name == b"content-length":
            try:
                return int(value)
            except ValueError:
                return 0
    return 0
