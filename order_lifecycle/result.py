"""
Success/failure container used to report outcomes without raising.

Build results with ok() / err(); chain them with map / bind; merge several with combine().
A Result never changes after construction: every combinator returns a new value (or the same one).
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from order_lifecycle.error_codes import ErrorCodes

T = TypeVar("T")
U = TypeVar("U")

COMBINE_SEPARATOR = "; "


@dataclass(frozen=True)
class Result(Generic[T]):
    is_success: bool
    value: T | None = None
    error_message: str | None = None
    error_code: str | None = None

    def __post_init__(self) -> None:
        if self.is_success and (self.error_message is not None or self.error_code is not None):
            raise ValueError("A successful Result cannot carry an error")
        if not self.is_success:
            if self.error_message is None:
                raise ValueError("A failed Result requires an error message")
            if self.value is not None:
                raise ValueError("A failed Result cannot carry a value")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def map(self, f: Callable[[T], U]) -> "Result[U]":
        """Apply f to the value of a success. Failures pass through; exceptions from f become INTERNAL_ERROR."""
        if self.is_failure:
            return err(self.error_message, self.error_code)
        try:
            return ok(f(self.value))
        except Exception as e:
            return err(f"Mapping failed: {e}", ErrorCodes.INTERNAL_ERROR)

    def bind(self, f: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain a Result-returning step. f is not called on failure."""
        if self.is_failure:
            return err(self.error_message, self.error_code)
        try:
            nxt = f(self.value)
        except Exception as e:
            return err(f"Bind failed: {e}", ErrorCodes.INTERNAL_ERROR)
        if not isinstance(nxt, Result):
            return err(
                f"Bind failed: expected a Result, got {type(nxt).__name__}",
                ErrorCodes.INTERNAL_ERROR,
            )
        return nxt

    def on_success(self, action: Callable[[T], Any]) -> "Result[T]":
        if self.is_success:
            action(self.value)
        return self

    def on_failure(self, action: Callable[[str], Any]) -> "Result[T]":
        if self.is_failure:
            action(self.error_message)
        return self

    def get_value_or_default(self, default: T | None = None) -> T | None:
        return self.value if self.is_success else default


def ok(value: T | None = None) -> Result[T]:
    return Result(is_success=True, value=value)


def err(message: str, code: str | None = None) -> Result[Any]:
    return Result(is_success=False, error_message=message, error_code=code)


def combine(*results: Result[Any]) -> Result[list[Any]]:
    """
    Success with the ordered list of values if every input succeeded.
    Otherwise one failure: all failure messages joined in order, code of the first failure.
    """
    failures = [r for r in results if r.is_failure]
    if not failures:
        return ok([r.value for r in results])
    message = COMBINE_SEPARATOR.join(f.error_message for f in failures)
    return err(message, failures[0].error_code)
