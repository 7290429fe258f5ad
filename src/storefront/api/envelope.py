"""Turning service envelopes and errors into JSON responses."""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.shared.errors import StorefrontError
from storefront.shared.response import ServiceResponse, invalid_input
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def respond(result: ServiceResponse) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.to_json())


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as a ``{success, message, responseObject, statusCode}`` envelope."""

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        return respond(ServiceResponse.failure(exc.message, status_code=exc.status_code))

    @app.exception_handler(ValidationError)
    async def domain_validation_error_handler(request: Request, exc: ValidationError):
        return respond(invalid_input(exc))

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_error_handler(request: Request, exc: ObjectNotFoundError):
        return respond(ServiceResponse.failure(str(exc), status_code=HTTPStatus.NOT_FOUND))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = f"Invalid Input: {', '.join(_validation_messages(exc))}"
        return respond(ServiceResponse.failure(message, status_code=HTTPStatus.BAD_REQUEST))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return respond(ServiceResponse.failure(str(exc.detail), status_code=exc.status_code))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", path=request.url.path, method=request.method, exc_info=exc)
        return respond(
            ServiceResponse.failure("An unexpected error occurred", status_code=HTTPStatus.INTERNAL_SERVER_ERROR)
        )
