"""Success/failure outcome returned by authoring operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import AuthoringError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an authoring operation.

    Exactly one of `value` / `error` is meaningful: check `ok` first, or
    call `unwrap()` to get the value and raise the error otherwise.
    """
    value: Optional[T] = None
    error: Optional[AuthoringError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthoringError) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
