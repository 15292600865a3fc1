"""
Shared builders for lifecycle tests: message payloads for every event kind.
"""
import uuid
from datetime import datetime, timezone

NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def new_order_id() -> str:
    return f"ord-test-{uuid.uuid4().hex[:12]}"


def details_for(kind: str) -> dict:
    """Minimal valid `details` payload for a lifecycle event kind."""
    return {
        "created": {
            "kind": "created",
            "items": [{"product_id": "burger-01", "name": "Cheeseburger", "quantity": 2, "unit_price": "8.50"}],
            "delivery_method": "delivery",
            "total": "17.00",
        },
        "pending": {"kind": "pending", "updated_by": "system", "notes": "waiting for the kitchen"},
        "accepted": {"kind": "accepted", "updated_by": "kitchen-1", "estimated_preparation_time": NOW.isoformat()},
        "preparing": {
            "kind": "preparing",
            "updated_by": "kitchen-1",
            "started_preparation_at": NOW.isoformat(),
            "estimated_minutes": 15,
        },
        "ready": {"kind": "ready", "updated_by": "kitchen-1", "ready_at": NOW.isoformat()},
        "delivered": {
            "kind": "delivered",
            "updated_by": "courier-7",
            "delivered_at": NOW.isoformat(),
            "delivered_by": "courier-7",
        },
        "completed": {
            "kind": "completed",
            "previous_status": "delivered",
            "updated_by": "system",
            "completed_at": NOW.isoformat(),
            "final_amount": "17.00",
        },
        "cancelled": {
            "kind": "cancelled",
            "cancel_reason": "customer changed their mind",
            "cancelled_by": "customer-42",
            "cancelled_at": NOW.isoformat(),
        },
    }[kind]


def message_data(kind: str, status: str | None = None, order_id: str | None = None) -> dict:
    """Full OrderEventMessage payload; status defaults to the kind (pending for created/completed -> delivered)."""
    default_status = {"created": "pending", "completed": "delivered"}.get(kind, kind)
    return {
        "order_id": order_id if order_id is not None else new_order_id(),
        "event_type": f"order.{kind}",
        "event_date": NOW.isoformat(),
        "customer_id": "customer-42",
        "status": status or default_status,
        "details": details_for(kind),
    }
