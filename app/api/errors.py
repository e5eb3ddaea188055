from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import RecordsError, StorageError
from app.core.logger import logger


def _field_name(loc) -> str:
    return ".".join(str(part) for part in loc if part != "body") or "body"


def describe_validation_errors(errors) -> str:
    """Single message for a request body that failed schema validation."""
    if any(error["type"] == "json_invalid" for error in errors):
        return "Invalid JSON body"

    missing = [_field_name(error["loc"]) for error in errors if error["type"] == "missing"]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    error = errors[0]
    return f"Invalid {_field_name(error['loc'])}: {error['msg']}"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecordsError)
    async def records_error_handler(request: Request, exc: RecordsError):
        message = exc.message
        if isinstance(exc, StorageError):
            logger.error(f"[STORAGE] {request.method} {request.url.path} failed: {exc.message}")
            message = "Internal storage error"
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning(f"[VALIDATION] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": describe_validation_errors(errors)},
        )
