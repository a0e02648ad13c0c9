"""Resource records and the priority groups built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from priority_balancer.errors import InvalidResourceError

T = TypeVar("T")

UINT64_MAX = 2**64 - 1


def _check_uint64(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful priority or weight
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidResourceError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if not 0 <= value <= UINT64_MAX:
        raise InvalidResourceError(f"{name} must be in [0, 2**64), got {value}")


@dataclass(frozen=True)
class Resource(Generic[T]):
    """A single balance-able resource.

    ``target`` is caller data the balancer hands back untouched.
    """

    priority: int
    weight: int
    target: T

    def __post_init__(self) -> None:
        _check_uint64("priority", self.priority)
        _check_uint64("weight", self.weight)


@dataclass(frozen=True)
class Group(Generic[T]):
    """Resources sharing one priority, with their prefix-sum weight table."""

    priority: int
    items: tuple[Resource[T], ...]
    cumulative_weights: tuple[int, ...]
    total_weight: int

    def __len__(self) -> int:
        return len(self.items)

    @property
    def weights(self) -> tuple[int, ...]:
        return tuple(item.weight for item in self.items)
