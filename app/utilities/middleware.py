from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers

import config
from app.utilities.errors import BodyTooLarge


class BodySizeLimitMiddleware:
    """Reject request bodies over ``config.MAX_BODY_SIZE`` bytes.

    A declared ``Content-Length`` is checked up front. Bodies without one
    (chunked uploads) are counted while they are read, and ``BodyTooLarge``
    is raised from ``receive`` as soon as the running total passes the limit.
    """

    def __init__(self, app, max_body_size: int = None):
        self.app = app
        self.max_body_size = max_body_size

    @property
    def limit(self) -> int:
        return self.max_body_size if self.max_body_size is not None else config.MAX_BODY_SIZE

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = self.limit
        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            try:
                too_large = int(content_length) > limit
            except ValueError:
                response = JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": "Invalid Content-Length header"},
                )
                await response(scope, receive, send)
                return
            if too_large:
                response = JSONResponse(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    content={"error": "Request body too large"},
                )
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    raise BodyTooLarge()
            return message

        await self.app(scope, limited_receive, send)
