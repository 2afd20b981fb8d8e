from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError


class LedgerError(Exception):
    status_code = 500
    error = "INTERNAL"

    def __init__(self, error: Optional[str] = None, details: Any = None):
        if error:
            self.error = error
        self.details = details
        super().__init__(self.error)

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidInput(LedgerError):
    status_code = 400
    error = "INVALID_INPUT"


class Unauthorized(LedgerError):
    status_code = 401
    error = "UNAUTHORIZED"


class NotFound(LedgerError):
    status_code = 404
    error = "NOT_FOUND"


class Conflict(LedgerError):
    status_code = 409
    error = "CONFLICT"


class Internal(LedgerError):
    status_code = 500
    error = "INTERNAL"


# =========================
# Handlers
# =========================
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=InvalidInput.status_code,
        content=jsonable_encoder(InvalidInput(details=details).to_dict()),
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=Internal.status_code,
        content=Internal(details=type(exc).__name__).to_dict(),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=Internal.status_code, content=Internal().to_dict())


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
