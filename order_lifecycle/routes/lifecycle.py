from datetime import datetime, timezone
from typing import Any, Callable

from fastapi import APIRouter, Header
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from order_lifecycle.error_codes import ErrorCodes, http_status_for
from order_lifecycle.lifecycle import OutboundEvent, prepare_status_change
from order_lifecycle.metrics import (
    events_prepared_total,
    requests_failed_total,
    routing_unmapped_total,
    transitions_rejected_total,
)
from order_lifecycle.order_state import (
    OrderStatus,
    allowed_transitions,
    describe,
    is_terminal,
    parse_status,
)
from order_lifecycle.result import Result
from order_lifecycle.routing import ExchangeNames, all_queues, resolve

router = APIRouter(prefix="/lifecycle", tags=["lifecycle"])


class ErrorResponse(BaseModel):
    message: str
    code: str | None = None
    timestamp: datetime
    correlation_id: str | None = None


class StatusChangeBody(BaseModel):
    current_status: str = Field(..., description="Status the order is in now")
    message: dict[str, Any] = Field(..., description="Lifecycle message fields; order_id is taken from the path")


def to_response(
    result: Result,
    correlation_id: str | None = None,
    success_status: int = 200,
    render: Callable[[Any], Any] = lambda value: value,
) -> JSONResponse:
    """Turn a Result into a JSON response; failures get the status of their error code."""
    if result.is_success:
        return JSONResponse(status_code=success_status, content=jsonable_encoder(render(result.value)))
    requests_failed_total.labels(error_code=result.error_code or "UNCLASSIFIED").inc()
    body = ErrorResponse(
        message=result.error_message,
        code=result.error_code,
        timestamp=datetime.now(timezone.utc),
        correlation_id=correlation_id,
    )
    return JSONResponse(status_code=http_status_for(result.error_code), content=body.model_dump(mode="json"))


def _event_view(event: OutboundEvent) -> dict:
    return {
        "exchange": event.exchange,
        "routing_key": event.routing_key,
        "queue": event.queue,
        "message": event.body(),
    }


@router.get("/statuses")
async def list_statuses() -> list[dict]:
    """Every order status with its label and the statuses it may move to."""
    return [
        {
            "status": s.value,
            "description": describe(s),
            "allowed_transitions": [t.value for t in allowed_transitions(s)],
            "terminal": is_terminal(s),
        }
        for s in OrderStatus
    ]


@router.get("/queues")
async def list_queues() -> dict:
    return {
        "exchanges": [ExchangeNames.ORDER_EVENTS, ExchangeNames.ORDER_STATUS, ExchangeNames.DEAD_LETTER],
        "queues": all_queues(),
    }


@router.get("/routes/{status}")
async def get_route(status: str, x_correlation_id: str | None = Header(default=None)) -> JSONResponse:
    result = resolve(status).on_failure(lambda _message: routing_unmapped_total.inc())
    return to_response(
        result,
        x_correlation_id,
        render=lambda route: {"status": status.lower(), "routing_key": route.routing_key, "queue": route.queue},
    )


@router.post("/orders/{order_id}/status")
async def change_status(
    order_id: str,
    body: StatusChangeBody,
    x_correlation_id: str | None = Header(default=None),
) -> JSONResponse:
    """
    Validate a status change and return the event to publish (exchange, routing key, queue, payload).
    Nothing is published here; the calling service owns the bus client.
    """
    data = {**body.message, "order_id": order_id}
    result = prepare_status_change(body.current_status, data)

    def _count_rejection(_message: str) -> None:
        if result.error_code == ErrorCodes.ORDER_STATUS_TRANSITION_INVALID:
            transitions_rejected_total.labels(
                current_status=parse_status(body.current_status).value,
                attempted_status=parse_status(data.get("status")).value,
            ).inc()

    result.on_success(
        lambda event: events_prepared_total.labels(event_kind=event.message.kind).inc()
    ).on_failure(_count_rejection)
    return to_response(result, x_correlation_id, render=_event_view)
