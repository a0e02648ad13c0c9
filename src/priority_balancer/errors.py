"""Exception hierarchy for balancer construction and selection."""

from __future__ import annotations


class BalancerError(Exception):
    """Base class for every error raised by priority-balancer."""


class ConstructionError(BalancerError):
    """A balancer could not be built; no instance was produced."""


class EmptyInputError(ConstructionError, ValueError):
    def __init__(self) -> None:
        super().__init__("balance: empty resources")


class SeedingError(ConstructionError):
    """The secure entropy source could not seed the generator."""


class InvalidResourceError(BalancerError, ValueError):
    """A resource's priority or weight is not an unsigned 64-bit integer."""


class NoMatchingPriorityError(BalancerError, LookupError):
    def __init__(self, floor: int) -> None:
        self.floor = floor
        super().__init__(f"balance: no resources with priority >= {floor}")


class SelectionNotFoundError(BalancerError, RuntimeError):
    """A weighted draw fell outside every interval of its group.

    Only raised when a group's cumulative-weight table is corrupt.
    """

    def __init__(self, draw: int, total_weight: int) -> None:
        self.draw = draw
        self.total_weight = total_weight
        super().__init__(
            f"balance: unable to find resource (draw {draw} of {total_weight})"
        )


class AlreadySynchronizedError(BalancerError, TypeError):
    def __init__(self) -> None:
        super().__init__("rr: wrapped an already-synchronized round-robin")
