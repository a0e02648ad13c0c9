"""Priority- and weight-aware load balancer.

There are four ways to select a resource depending on whether the resource
priority or weight should be respected::

    ┌───────────────────────┬─────────────────────────┬───────────────────────┐
    │                       │   Weighted resources    │      Any weight       │
    ├───────────────────────┼─────────────────────────┼───────────────────────┤
    │ Prioritized resources │ priority_weighted(n)    │ priority_random(n)    │
    ├───────────────────────┼─────────────────────────┼───────────────────────┤
    │ Any priority          │ random_weighted()       │ random()              │
    └───────────────────────┴─────────────────────────┴───────────────────────┘
"""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from typing import Generic, Iterable, TypeVar

from priority_balancer.core.grouping import build_groups
from priority_balancer.core.random_source import RandomSource, fast_random_source
from priority_balancer.core.resource import Group, Resource
from priority_balancer.errors import NoMatchingPriorityError, SelectionNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadBalancer(Generic[T]):
    """A fixed set of resources grouped by priority.

    Groups and their weight tables never change after construction and may be
    read from any thread. ``rand`` is advanced by every draw and is not
    locked: calls on one instance from several threads must be serialized by
    the caller, or each thread must use its own instance (see
    :meth:`with_random`).

    ``rand`` defaults to a ``random.Random`` seeded from the OS entropy pool
    and may be replaced, e.g. with ``random.SystemRandom()`` where
    cryptographically strong draws are needed.
    """

    def __init__(
        self,
        resources: Iterable[Resource[T]],
        rand: RandomSource | None = None,
    ) -> None:
        groups = build_groups(resources)
        self._init(groups, rand if rand is not None else fast_random_source())
        logger.debug(
            "Built load balancer: %d resources, %d priority groups",
            len(self),
            len(groups),
        )

    def _init(self, groups: tuple[Group[T], ...], rand: RandomSource) -> None:
        self._groups = groups
        self._priorities = [g.priority for g in groups]
        self.rand = rand

    def with_random(self, rand: RandomSource) -> LoadBalancer[T]:
        """Return a balancer sharing these groups but drawing from ``rand``."""
        clone = object.__new__(type(self))
        clone._init(self._groups, rand)
        return clone

    @property
    def groups(self) -> tuple[Group[T], ...]:
        return self._groups

    @property
    def priorities(self) -> tuple[int, ...]:
        return tuple(self._priorities)

    def __len__(self) -> int:
        return sum(len(g) for g in self._groups)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resources={len(self)}, "
            f"priorities={self._priorities})"
        )

    # -- selection ---------------------------------------------------------

    def priority_weighted(self, floor: int) -> tuple[T, int]:
        """Pick by weight from the first group with priority >= ``floor``.

        Returns the resource's target and priority.
        """
        resource = self.sample_weighted(self.group_for_priority(floor))
        return resource.target, resource.priority

    def priority_random(self, floor: int) -> tuple[T, int]:
        """Pick uniformly from the first group with priority >= ``floor``.

        Returns the resource's target and priority.
        """
        group = self.group_for_priority(floor)
        resource = group.items[self.rand.randrange(len(group.items))]
        return resource.target, resource.priority

    def random_weighted(self) -> T:
        """Pick a group uniformly, then a resource in it by weight.

        Every group is equally likely regardless of its size or total weight.
        """
        return self.sample_weighted(self._random_group()).target

    def random(self) -> T:
        """Pick a group uniformly, then a resource in it uniformly.

        Every group is equally likely regardless of its size, so a resource's
        overall chance depends on how many resources share its priority.
        """
        group = self._random_group()
        return group.items[self.rand.randrange(len(group.items))].target

    # -- building blocks ---------------------------------------------------

    def group_for_priority(self, floor: int) -> Group[T]:
        """Return the first group whose priority is >= ``floor``."""
        i = bisect_left(self._priorities, floor)
        if i == len(self._groups):
            raise NoMatchingPriorityError(floor)
        return self._groups[i]

    def sample_weighted(self, group: Group[T]) -> Resource[T]:
        """Draw a resource from ``group`` with probability weight / total."""
        if len(group.items) == 1:
            return group.items[0]

        n = self.rand.randrange(group.total_weight)
        # first i with n < cumulative_weights[i]; zero-weight items have
        # empty intervals and are skipped
        i = bisect_right(group.cumulative_weights, n)
        if i >= len(group.items):
            raise SelectionNotFoundError(n, group.total_weight)
        return group.items[i]

    def _random_group(self) -> Group[T]:
        return self._groups[self.rand.randrange(len(self._groups))]


def build(
    resources: Iterable[Resource[T]],
    rand: RandomSource | None = None,
) -> LoadBalancer[T]:
    """Construct a :class:`LoadBalancer` from ``resources``.

    Raises ``EmptyInputError`` for an empty input and ``SeedingError`` when no
    generator is supplied and the entropy source fails.
    """
    return LoadBalancer(resources, rand)
