from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from app.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a registry operation: either a value or a domain error.

    Registry operations never raise for expected failures. Callers inspect
    ``is_ok`` (or ``error.code``) and read ``value``; transport layers that
    prefer exceptions call ``unwrap()``.
    """

    value: T | None = None
    error: DomainError | None = None

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: DomainError) -> Result[T]:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried domain error."""
        if self.error is not None:
            raise self.error
        return self.value
