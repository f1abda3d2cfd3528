from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import Message, Receive, Scope, Send


class BoardCORSMiddleware(CORSMiddleware):
    """
    Starlette's CORS handling, relaxed for the board client:
    every response carries the allow headers, Origin or not, and a
    preflight is always an empty 200.
    """

    def __init__(self, app, **kwargs) -> None:
        super().__init__(app, **kwargs)
        for key in ("Access-Control-Allow-Methods", "Access-Control-Allow-Headers"):
            if key in self.preflight_headers:
                self.simple_headers[key] = self.preflight_headers[key]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if scope["method"] == "OPTIONS" and "access-control-request-method" in headers:
            response = self.preflight_response(request_headers=headers)
            await response(scope, receive, send)
            return

        if "origin" not in headers:
            await self.app(scope, receive, self._with_simple_headers(send))
            return

        await super().__call__(scope, receive, send)

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        origin = request_headers.get("origin")
        if not self.allow_all_origins and origin and self.is_allowed_origin(origin):
            headers["Access-Control-Allow-Origin"] = origin
        return Response(status_code=200, headers=headers)

    def _with_simple_headers(self, send: Send) -> Send:
        async def wrapped(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message).update(self.simple_headers)
            await send(message)

        return wrapped
