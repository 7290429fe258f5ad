"""The response envelope returned by every service operation."""

import functools
from collections.abc import Callable
from http import HTTPStatus
from typing import Any

from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.shared.errors import StorefrontError, flatten_messages
from storefront.shared.model import CamelModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ServiceResponse(CamelModel):
    """``{success, message, responseObject, statusCode}``"""

    success: bool
    message: str
    response_object: Any = None
    status_code: int = HTTPStatus.OK

    @classmethod
    def ok(cls, message: str, payload: Any = None, status_code: int = HTTPStatus.OK) -> "ServiceResponse":
        return cls(success=True, message=message, response_object=payload, status_code=status_code)

    @classmethod
    def failure(
        cls,
        message: str,
        payload: Any = None,
        status_code: int = HTTPStatus.BAD_REQUEST,
    ) -> "ServiceResponse":
        return cls(success=False, message=message, response_object=payload, status_code=status_code)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def invalid_input(exc: ValidationError) -> ServiceResponse:
    message = f"Invalid Input: {', '.join(flatten_messages(exc.messages))}"
    return ServiceResponse.failure(message, status_code=HTTPStatus.BAD_REQUEST)


def service_operation(failure_message: str) -> Callable:
    """Convert whatever the wrapped service method raises into a failure envelope.

    Known errors keep their own message and status; protean validation
    errors become 400s and missing aggregates 404s. Anything else is logged
    and reported as a 500 with ``failure_message``.
    """

    def decorator(func: Callable[..., ServiceResponse]) -> Callable[..., ServiceResponse]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> ServiceResponse:
            try:
                return func(*args, **kwargs)
            except StorefrontError as exc:
                return ServiceResponse.failure(exc.message, status_code=exc.status_code)
            except ValidationError as exc:
                return invalid_input(exc)
            except ObjectNotFoundError as exc:
                return ServiceResponse.failure(str(exc), status_code=HTTPStatus.NOT_FOUND)
            except Exception as exc:
                logger.error("Service operation failed", operation=func.__qualname__, exc_info=exc)
                return ServiceResponse.failure(failure_message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)

        return wrapper

    return decorator
