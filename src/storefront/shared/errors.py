"""Error taxonomy shared by every service.

Each error carries the HTTP status it maps to. Command handlers and services
raise them; the service wrapper in :mod:`storefront.shared.response` turns
them into failure envelopes. Field-level input problems use protean's
``ValidationError`` instead, which the same wrapper reports as a 400.
"""

from http import HTTPStatus


class StorefrontError(Exception):
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(StorefrontError):
    status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(StorefrontError):
    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(StorefrontError):
    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(StorefrontError):
    status_code = HTTPStatus.NOT_FOUND


class ConflictError(StorefrontError):
    status_code = HTTPStatus.CONFLICT


class GoneError(StorefrontError):
    status_code = HTTPStatus.GONE


def flatten_messages(messages) -> list[str]:
    """Messages of a protean ``ValidationError`` as a flat list, in field order."""
    if isinstance(messages, dict):
        flattened = []
        for field_messages in messages.values():
            if isinstance(field_messages, (list, tuple)):
                flattened.extend(str(message) for message in field_messages)
            else:
                flattened.append(str(field_messages))
        return flattened
    return [str(messages)]
