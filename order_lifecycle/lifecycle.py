"""
Prepare an order lifecycle event for publishing: validate the status change, build the message,
resolve where it goes. Every step reports through Result; nothing here raises on bad input.
"""
import logging
from dataclasses import dataclass
from typing import Any

from order_lifecycle.error_codes import ErrorCodes
from order_lifecycle.messages import OrderEventMessage, build_message
from order_lifecycle.order_state import OrderStatus, check_transition, parse_status_result
from order_lifecycle.result import Result, err
from order_lifecycle.routing import ExchangeNames, Route, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundEvent:
    exchange: str
    routing_key: str
    queue: str
    message: OrderEventMessage

    def body(self) -> dict[str, Any]:
        """JSON-ready message payload."""
        return self.message.model_dump(mode="json")


def _outbound(message: OrderEventMessage, route: Route) -> OutboundEvent:
    return OutboundEvent(
        exchange=ExchangeNames.ORDER_EVENTS,
        routing_key=route.routing_key,
        queue=route.queue,
        message=message,
    )


def prepare_event(message: OrderEventMessage) -> Result[OutboundEvent]:
    """Resolve the destination of an already built message (e.g. created / completed events)."""
    return message.route().map(lambda route: _outbound(message, route))


def prepare_status_change(current_status: OrderStatus | str, data: dict[str, Any]) -> Result[OutboundEvent]:
    """
    Validate moving an order from `current_status` to data["status"], then build the message and
    route it by the validated status. `data` holds the OrderEventMessage fields, including the
    status-specific `details`; its kind must be that status (created / completed go through prepare_event).
    """
    order_id = data.get("order_id")
    if isinstance(current_status, OrderStatus):
        current_status = current_status.value

    def _check(current: OrderStatus) -> Result[OrderStatus]:
        return parse_status_result(data.get("status")).bind(lambda new: check_transition(current, new))

    def _build(new: OrderStatus) -> Result[OutboundEvent]:
        def _route(message: OrderEventMessage) -> Result[OutboundEvent]:
            if message.kind != new.value:
                return err(
                    f"A '{message.kind}' event is not a status change; publish it with prepare_event",
                    ErrorCodes.VALIDATION_ERROR,
                )
            return resolve(new).map(lambda route: _outbound(message, route))

        return build_message(data).bind(_route)

    result = parse_status_result(current_status).bind(_check).bind(_build)
    return result.on_success(
        lambda event: logger.info(
            "Prepared %s event for order_id=%s -> %s", event.message.kind, order_id, event.routing_key
        )
    ).on_failure(
        lambda message: logger.warning(
            "Rejected status change for order_id=%s [%s]: %s", order_id, result.error_code, message
        )
    )
