# shared/errors.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shared.logger import get_logger

log = get_logger("errors")


def _envelope(status_code: int, status_text: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"Status": status_text, "Message": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid request: {location}: {first.get('msg')}" if location else f"Invalid request: {first.get('msg')}"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _envelope(status.HTTP_400_BAD_REQUEST, "Failed", _describe_validation_error(exc))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    log.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error", "API is not working as expected")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
