"""Tagged success/failure wrapper returned across the codec boundary.

Mirrors the success/error envelope idea: a result either carries a value
or the AppError that explains why there is none.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.p2p_common.errors import AppError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: AppError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T | None = None) -> T | None:
        return self.value if self.error is None else default


def success(value: T) -> Result[T]:
    return Result(value=value)


def failure(error: AppError) -> Result[Any]:
    return Result(error=error)
