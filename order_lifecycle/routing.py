"""
Wire-level names for the order message bus: exchanges, routing keys, queues,
and the lookup from a lifecycle status (or event key) to its routing key and queue.
"""
from dataclasses import dataclass
from types import MappingProxyType

from order_lifecycle.error_codes import ErrorCodes
from order_lifecycle.order_state import OrderStatus
from order_lifecycle.result import Result, err, ok


class ExchangeNames:
    ORDER_EVENTS = "order.events.exchange"
    ORDER_STATUS = "order.status.exchange"  # status-only notifications
    DEAD_LETTER = "order.deadletter.exchange"


class RoutingKeys:
    ORDER_CREATED = "order.created"
    ORDER_PENDING = "order.pending"
    ORDER_ACCEPTED = "order.accepted"
    ORDER_PREPARING = "order.preparing"
    ORDER_READY = "order.ready"
    ORDER_DELIVERED = "order.delivered"
    ORDER_COMPLETED = "order.completed"
    ORDER_CANCELLED = "order.cancelled"


class QueueNames:
    ORDER_CREATED = "order.created.queue"
    ORDER_PENDING = "order.pending.queue"
    ORDER_ACCEPTED = "order.accepted.queue"
    ORDER_PREPARING = "order.preparing.queue"
    ORDER_READY = "order.ready.queue"
    ORDER_DELIVERED = "order.delivered.queue"
    ORDER_COMPLETED = "order.completed.queue"
    ORDER_CANCELLED = "order.cancelled.queue"
    ORDER_USER_CANCELLED = "order.user.cancelled.queue"
    ORDER_DLQ = "order.dlq.queue"


@dataclass(frozen=True)
class Route:
    routing_key: str | None
    queue: str


CREATED_EVENT = "created"
COMPLETED_EVENT = "completed"

ROUTES: MappingProxyType[str, Route] = MappingProxyType({
    CREATED_EVENT: Route(RoutingKeys.ORDER_CREATED, QueueNames.ORDER_CREATED),
    OrderStatus.PENDING.value: Route(RoutingKeys.ORDER_PENDING, QueueNames.ORDER_PENDING),
    OrderStatus.ACCEPTED.value: Route(RoutingKeys.ORDER_ACCEPTED, QueueNames.ORDER_ACCEPTED),
    OrderStatus.PREPARING.value: Route(RoutingKeys.ORDER_PREPARING, QueueNames.ORDER_PREPARING),
    OrderStatus.READY.value: Route(RoutingKeys.ORDER_READY, QueueNames.ORDER_READY),
    OrderStatus.DELIVERED.value: Route(RoutingKeys.ORDER_DELIVERED, QueueNames.ORDER_DELIVERED),
    COMPLETED_EVENT: Route(RoutingKeys.ORDER_COMPLETED, QueueNames.ORDER_COMPLETED),
    OrderStatus.CANCELLED.value: Route(RoutingKeys.ORDER_CANCELLED, QueueNames.ORDER_CANCELLED),
})

# Queue-only destinations: bound by consumers directly, never returned by resolve().
USER_CANCELLED_ROUTE = Route(None, QueueNames.ORDER_USER_CANCELLED)
DEAD_LETTER_ROUTE = Route(None, QueueNames.ORDER_DLQ)


def resolve(status: OrderStatus | str | None) -> Result[Route]:
    """Routing key and queue for a lifecycle status or event key (case-insensitive)."""
    if isinstance(status, OrderStatus):
        key = status.value
    elif isinstance(status, str):
        key = status.lower()
    else:
        key = None
    route = ROUTES.get(key) if key is not None else None
    if route is None:
        return err(
            f"Status '{status}' has no mapped routing destination",
            ErrorCodes.UNMAPPED_ROUTING_DESTINATION,
        )
    return ok(route)


def routing_key_for(status: OrderStatus | str | None) -> Result[str]:
    return resolve(status).map(lambda route: route.routing_key)


def queue_for(status: OrderStatus | str | None) -> Result[str]:
    return resolve(status).map(lambda route: route.queue)


def all_queues() -> list[str]:
    """Every queue name consumers may bind, lifecycle queues first."""
    return [route.queue for route in ROUTES.values()] + [
        USER_CANCELLED_ROUTE.queue,
        DEAD_LETTER_ROUTE.queue,
    ]
