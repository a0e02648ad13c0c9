"""Partition resources into priority groups with cumulative-weight tables."""

from __future__ import annotations

import dataclasses
import logging
from itertools import accumulate, groupby
from operator import attrgetter
from typing import Iterable, TypeVar

from priority_balancer.core.resource import Group, Resource
from priority_balancer.errors import EmptyInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_by_priority = attrgetter("priority")


def build_groups(resources: Iterable[Resource[T]]) -> tuple[Group[T], ...]:
    """Group resources by priority, ascending.

    The sort is stable, so resources sharing a priority keep the order they
    were supplied in. If every weight within a group is zero the group is
    rewritten with uniform weight 1; a group mixing zero and nonzero weights
    keeps its zero-weight items, which weighted sampling then never picks.
    """
    ordered = sorted(resources, key=_by_priority)
    if not ordered:
        raise EmptyInputError()

    groups = tuple(
        _make_group(priority, list(items))
        for priority, items in groupby(ordered, key=_by_priority)
    )

    logger.debug(
        "Grouped %d resources into %d priority groups: %s",
        len(ordered),
        len(groups),
        [g.priority for g in groups],
    )
    return groups


def _make_group(priority: int, items: list[Resource[T]]) -> Group[T]:
    sums = list(accumulate(item.weight for item in items))
    total = sums[-1]

    # All weights zero: fall back to uniform so the group is still reachable
    if total == 0:
        items = [dataclasses.replace(item, weight=1) for item in items]
        sums = list(range(1, len(items) + 1))
        total = len(items)
        logger.debug(
            "Priority %d has only zero weights; using uniform weight for %d items",
            priority,
            len(items),
        )

    return Group(
        priority=priority,
        items=tuple(items),
        cumulative_weights=tuple(sums),
        total_weight=total,
    )
