from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


async def _invalid_input(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": "Invalid input."}, status_code=400)


def install_error_handlers(app: FastAPI) -> FastAPI:
    """Answer FastAPI 422 validation failures with a short 400 error body."""
    app.add_exception_handler(RequestValidationError, _invalid_input)
    return app
