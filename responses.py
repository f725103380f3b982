from typing import Any, Protocol

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class ResponseSink(Protocol):
    def status(self, code: int) -> "ResponseSink": ...

    def send(self, body: Any) -> None: ...


class ResponseWriter:
    """Collects a page's status and body, then renders a FastAPI response."""

    def __init__(self):
        self.status_code = 200
        self.body: Any = None
        self.sent = False

    def status(self, code: int) -> "ResponseWriter":
        self.status_code = code
        return self

    def send(self, body: Any) -> None:
        if self.sent:
            raise RuntimeError("Response already sent")
        self.body = body
        self.sent = True

    def to_response(self) -> Response:
        if not self.sent:
            raise RuntimeError("Response was never sent")
        if isinstance(self.body, str):
            return PlainTextResponse(self.body, status_code=self.status_code)
        return JSONResponse(jsonable_encoder(self.body), status_code=self.status_code)
