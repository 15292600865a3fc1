import pytest

from order_lifecycle.error_codes import ErrorCodes
from order_lifecycle.order_state import OrderStatus
from order_lifecycle.routing import (
    DEAD_LETTER_ROUTE,
    USER_CANCELLED_ROUTE,
    ExchangeNames,
    Route,
    all_queues,
    queue_for,
    resolve,
    routing_key_for,
)

WIRE_TABLE = {
    "created": ("order.created", "order.created.queue"),
    "pending": ("order.pending", "order.pending.queue"),
    "accepted": ("order.accepted", "order.accepted.queue"),
    "preparing": ("order.preparing", "order.preparing.queue"),
    "ready": ("order.ready", "order.ready.queue"),
    "delivered": ("order.delivered", "order.delivered.queue"),
    "completed": ("order.completed", "order.completed.queue"),
    "cancelled": ("order.cancelled", "order.cancelled.queue"),
}


@pytest.mark.parametrize("key", sorted(WIRE_TABLE))
def test_resolve_matches_wire_table(key):
    r = resolve(key)
    assert r.is_success
    assert r.value == Route(*WIRE_TABLE[key])


@pytest.mark.parametrize("status", list(OrderStatus))
def test_resolve_accepts_every_order_status(status):
    assert resolve(status).value.routing_key == f"order.{status.value}"


def test_resolve_is_case_insensitive():
    assert resolve("ACCEPTED").value == resolve("accepted").value


@pytest.mark.parametrize("status", ["shipped", "received", "", "dlq", None, 42])
def test_unmapped_status_is_a_failure(status):
    r = resolve(status)
    assert r.is_failure
    assert r.error_code == ErrorCodes.UNMAPPED_ROUTING_DESTINATION


def test_unmapped_failure_names_the_status():
    assert "shipped" in resolve("shipped").error_message


def test_routing_key_and_queue_helpers():
    assert routing_key_for("ready").value == "order.ready"
    assert queue_for(OrderStatus.CANCELLED).value == "order.cancelled.queue"
    assert queue_for("shipped").error_code == ErrorCodes.UNMAPPED_ROUTING_DESTINATION


def test_queue_only_destinations():
    assert USER_CANCELLED_ROUTE == Route(None, "order.user.cancelled.queue")
    assert DEAD_LETTER_ROUTE == Route(None, "order.dlq.queue")


def test_all_queues_lists_every_destination_once():
    queues = all_queues()
    assert len(queues) == len(set(queues)) == 10
    assert queues[-2:] == ["order.user.cancelled.queue", "order.dlq.queue"]


def test_exchange_names():
    assert ExchangeNames.ORDER_EVENTS == "order.events.exchange"
    assert ExchangeNames.ORDER_STATUS == "order.status.exchange"
    assert ExchangeNames.DEAD_LETTER == "order.deadletter.exchange"
