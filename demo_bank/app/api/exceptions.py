from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from ..core.errors import ServiceError
from ..models import ERROR_KIND_HEADER


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(
        request: Request, exc: ServiceError
    ) -> PlainTextResponse:
        return PlainTextResponse(
            exc.body,
            status_code=status.HTTP_400_BAD_REQUEST,
            headers={ERROR_KIND_HEADER: exc.kind.value},
        )
