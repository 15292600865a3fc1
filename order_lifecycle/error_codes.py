"""
Error codes shared by every order service, and the HTTP status each family maps to.
"""


class ErrorCodes:
    # General
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Orders
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    ORDER_INVALID_STATUS = "ORDER_INVALID_STATUS"
    ORDER_STATUS_TRANSITION_INVALID = "ORDER_STATUS_TRANSITION_INVALID"
    ORDER_ALREADY_CANCELLED = "ORDER_ALREADY_CANCELLED"
    ORDER_ALREADY_COMPLETED = "ORDER_ALREADY_COMPLETED"
    ORDER_ITEMS_REQUIRED = "ORDER_ITEMS_REQUIRED"
    ORDER_INVALID_CUSTOMER = "ORDER_INVALID_CUSTOMER"

    # Products
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    PRODUCT_OUT_OF_STOCK = "PRODUCT_OUT_OF_STOCK"
    PRODUCT_INACTIVE = "PRODUCT_INACTIVE"

    # Customers
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    CUSTOMER_INACTIVE = "CUSTOMER_INACTIVE"

    # Payments
    PAYMENT_FAILED = "PAYMENT_FAILED"
    PAYMENT_METHOD_INVALID = "PAYMENT_METHOD_INVALID"
    PAYMENT_ALREADY_PROCESSED = "PAYMENT_ALREADY_PROCESSED"

    # Messaging
    UNMAPPED_ROUTING_DESTINATION = "UNMAPPED_ROUTING_DESTINATION"


NOT_FOUND_CODES = frozenset({
    ErrorCodes.NOT_FOUND,
    ErrorCodes.ORDER_NOT_FOUND,
    ErrorCodes.PRODUCT_NOT_FOUND,
    ErrorCodes.CUSTOMER_NOT_FOUND,
})

BAD_REQUEST_CODES = frozenset({
    ErrorCodes.VALIDATION_ERROR,
    ErrorCodes.ORDER_INVALID_STATUS,
    ErrorCodes.ORDER_STATUS_TRANSITION_INVALID,
    ErrorCodes.ORDER_ITEMS_REQUIRED,
    ErrorCodes.PAYMENT_METHOD_INVALID,
    ErrorCodes.UNMAPPED_ROUTING_DESTINATION,
})

CONFLICT_CODES = frozenset({
    ErrorCodes.PRODUCT_OUT_OF_STOCK,
    ErrorCodes.ORDER_ALREADY_CANCELLED,
    ErrorCodes.ORDER_ALREADY_COMPLETED,
    ErrorCodes.PAYMENT_ALREADY_PROCESSED,
})


def http_status_for(code: str | None) -> int:
    """HTTP status for a failure's error code. Unclassified (or missing) codes are 500."""
    if code in NOT_FOUND_CODES:
        return 404
    if code in BAD_REQUEST_CODES:
        return 400
    if code == ErrorCodes.UNAUTHORIZED:
        return 401
    if code == ErrorCodes.FORBIDDEN:
        return 403
    if code in CONFLICT_CODES:
        return 409
    return 500
