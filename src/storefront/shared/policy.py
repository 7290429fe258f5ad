"""Authorization policy: one place that decides identity + action -> allow/deny."""

from enum import Enum
from typing import Protocol

from storefront.shared.errors import ForbiddenError
from storefront.user.user import Role


class Action(Enum):
    VIEW_ORDER = "order:view"
    VIEW_ALL_ORDERS = "order:view-all"
    UPDATE_ORDER_STATUS = "order:update-status"
    MANAGE_CATALOGUE = "catalogue:manage"
    VIEW_USER = "user:view"
    LIST_USERS = "user:list"


class Principal(Protocol):
    user_id: str
    role: str


# Actions any identity may take on resources it owns
_OWNER_ACTIONS = frozenset({Action.VIEW_ORDER, Action.VIEW_USER})

_ROLE_GRANTS = {
    Role.ADMIN: frozenset(Action),
    Role.CUSTOMER: frozenset(),
}


def is_allowed(principal: Principal, action: Action, owner_id: str | None = None) -> bool:
    try:
        granted = _ROLE_GRANTS[Role(principal.role)]
    except ValueError:
        granted = frozenset()
    if action in granted:
        return True
    return action in _OWNER_ACTIONS and owner_id is not None and str(owner_id) == str(principal.user_id)


def authorize(principal: Principal, action: Action, owner_id: str | None = None, message: str = "Forbidden") -> None:
    if not is_allowed(principal, action, owner_id):
        raise ForbiddenError(message)
