"""
Order lifecycle event messages published on the bus.

One envelope (OrderEventMessage) holds the fields every event shares; `details` is a tagged
union selected by `kind`, each variant adding only its own fields. Required fields are enforced
at construction: building a message with one missing raises pydantic.ValidationError.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from order_lifecycle.error_codes import ErrorCodes
from order_lifecycle.order_state import parse_status, to_canonical_string
from order_lifecycle.result import Result, err, ok
from order_lifecycle.routing import Route, resolve

RequiredText = Annotated[str, Field(min_length=1)]


def _canonical_status(value: str) -> str:
    status = parse_status(value)
    if status is None:
        raise ValueError(f"'{value}' is not a valid order status")
    return to_canonical_string(status)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class OrderItemMessage(_Frozen):
    product_id: RequiredText
    name: RequiredText
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(ge=0)


class CreatedDetails(_Frozen):
    kind: Literal["created"] = "created"
    items: list[OrderItemMessage] = Field(min_length=1)
    delivery_method: RequiredText
    total: Decimal = Field(ge=0)


class PendingDetails(_Frozen):
    kind: Literal["pending"] = "pending"
    updated_by: RequiredText
    notes: str | None = None


class AcceptedDetails(_Frozen):
    kind: Literal["accepted"] = "accepted"
    updated_by: RequiredText
    estimated_preparation_time: datetime


class PreparingDetails(_Frozen):
    kind: Literal["preparing"] = "preparing"
    updated_by: RequiredText
    started_preparation_at: datetime
    estimated_minutes: int = Field(ge=0)


class ReadyDetails(_Frozen):
    kind: Literal["ready"] = "ready"
    updated_by: RequiredText
    ready_at: datetime


class DeliveredDetails(_Frozen):
    kind: Literal["delivered"] = "delivered"
    updated_by: RequiredText
    delivered_at: datetime
    delivered_by: str | None = None
    delivery_notes: str | None = None
    customer_signature: str | None = None


class CompletedDetails(_Frozen):
    kind: Literal["completed"] = "completed"
    previous_status: str
    updated_by: RequiredText
    completed_at: datetime
    final_amount: Decimal = Field(ge=0)
    delivered_by: str | None = None
    completion_notes: str | None = None

    @field_validator("previous_status")
    @classmethod
    def canonical_previous_status(cls, v: str) -> str:
        return _canonical_status(v)


class CancelledDetails(_Frozen):
    kind: Literal["cancelled"] = "cancelled"
    cancel_reason: RequiredText
    cancelled_by: RequiredText
    cancelled_at: datetime


LifecycleDetails = Annotated[
    Union[
        CreatedDetails,
        PendingDetails,
        AcceptedDetails,
        PreparingDetails,
        ReadyDetails,
        DeliveredDetails,
        CompletedDetails,
        CancelledDetails,
    ],
    Field(discriminator="kind"),
]

# Event kinds that are not statuses; every other kind must equal the message status.
_STATUS_FOR_KIND: dict[str, str] = {
    "created": "pending",
    "completed": "delivered",
}


class OrderEventMessage(_Frozen):
    order_id: RequiredText
    status: str
    details: LifecycleDetails
    event_type: str | None = None
    event_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    customer_id: str | None = None

    @field_validator("status")
    @classmethod
    def canonical_status(cls, v: str) -> str:
        return _canonical_status(v)

    @model_validator(mode="after")
    def kind_matches_status(self) -> "OrderEventMessage":
        expected = _STATUS_FOR_KIND.get(self.kind, self.kind)
        if self.status != expected:
            raise ValueError(f"A '{self.kind}' event must carry status '{expected}', got '{self.status}'")
        return self

    @property
    def kind(self) -> str:
        return self.details.kind

    def route(self) -> Result[Route]:
        return resolve(self.kind)


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e["loc"])
        parts.append(f"{loc}: {e['msg']}" if loc else e["msg"])
    return "; ".join(parts)


def _only_items_missing(exc: ValidationError) -> bool:
    errors = exc.errors()
    return bool(errors) and all(e["loc"][-1:] == ("items",) for e in errors)


def build_message(data: dict[str, Any]) -> Result[OrderEventMessage]:
    """Validate `data` into a message, reporting missing or invalid fields as a failure."""
    try:
        return ok(OrderEventMessage.model_validate(data))
    except ValidationError as e:
        code = ErrorCodes.ORDER_ITEMS_REQUIRED if _only_items_missing(e) else ErrorCodes.VALIDATION_ERROR
        return err(f"Invalid order event: {_describe_errors(e)}", code)
