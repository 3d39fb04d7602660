from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of a best-effort lookup.

    Callers decide how to degrade when `error` is set instead of relying on
    exceptions being swallowed further down.
    """

    value: T | None = None
    error: Exception | None = None

    @classmethod
    def ok(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, error: Exception) -> Outcome[T]:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value
