"""Discriminated success/failure container returned by form-facing flows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a value or an error, never both.

    Build instances with :meth:`success` and :meth:`failure`.
    """

    value: T | None = None
    error: E | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T, E]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: E) -> "Result[T, E]":
        return cls(value=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok


__all__ = ["Result"]
