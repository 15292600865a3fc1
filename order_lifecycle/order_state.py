"""
Order lifecycle state machine. Valid transitions enforce business rules.
"""
from enum import Enum

from order_lifecycle.error_codes import ErrorCodes
from order_lifecycle.result import Result, err, ok


class OrderStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    PREPARING = "preparing"
    READY = "ready"
    CANCELLED = "cancelled"
    DELIVERED = "delivered"


# Legacy producers still send "received"; accepted on parse, never written back.
_PARSE_ALIASES: dict[str, OrderStatus] = {
    "received": OrderStatus.PENDING,
}

# Current status -> allowed next status
VALID_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.ACCEPTED, OrderStatus.CANCELLED}),
    OrderStatus.ACCEPTED: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.READY, OrderStatus.CANCELLED}),
    OrderStatus.READY: frozenset({OrderStatus.DELIVERED}),  # no cancelling once the food is ready
    OrderStatus.CANCELLED: frozenset(),  # terminal
    OrderStatus.DELIVERED: frozenset(),  # terminal
}

_DESCRIPTIONS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.ACCEPTED: "Accepted",
    OrderStatus.PREPARING: "In preparation",
    OrderStatus.READY: "Ready",
    OrderStatus.CANCELLED: "Cancelled",
    OrderStatus.DELIVERED: "Delivered",
}


def parse_status(text: object) -> OrderStatus | None:
    """Case-insensitive parse of a status string. None when the text is not a known status."""
    if not isinstance(text, str):
        return None
    key = text.lower()
    if key in _PARSE_ALIASES:
        return _PARSE_ALIASES[key]
    try:
        return OrderStatus(key)
    except ValueError:
        return None


def to_canonical_string(status: OrderStatus) -> str:
    return status.value


def is_valid_status(text: object) -> bool:
    return parse_status(text) is not None


def all_valid_statuses() -> list[str]:
    """Canonical strings of every status, in declaration order."""
    return [to_canonical_string(s) for s in OrderStatus]


def allowed_transitions(status: OrderStatus) -> list[OrderStatus]:
    return [s for s in OrderStatus if s in VALID_TRANSITIONS[status]]


def is_terminal(status: OrderStatus) -> bool:
    return not VALID_TRANSITIONS[status]


def is_valid_transition(current: OrderStatus, new: OrderStatus) -> bool:
    """True if an order in `current` may move to `new`."""
    return new in VALID_TRANSITIONS[current]


def describe(status: OrderStatus) -> str:
    """Human-readable label, for diagnostics only."""
    return _DESCRIPTIONS[status]


def parse_status_result(text: object) -> Result[OrderStatus]:
    status = parse_status(text)
    if status is None:
        return err(f"Status '{text}' is not a valid order status", ErrorCodes.ORDER_INVALID_STATUS)
    return ok(status)


def check_transition(current: OrderStatus, new: OrderStatus) -> Result[OrderStatus]:
    """Success carrying `new` when the transition is allowed."""
    if not is_valid_transition(current, new):
        return err(
            f"Cannot change order status from '{current.value}' to '{new.value}'",
            ErrorCodes.ORDER_STATUS_TRANSITION_INVALID,
        )
    return ok(new)
