"""Expected and observed selection distributions for a balancer."""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Hashable, Literal

from priority_balancer.core.balancer import LoadBalancer
from priority_balancer.core.resource import Group, Resource

Mode = Literal["priority_weighted", "priority_random", "random_weighted", "random"]


def _within_group(group: Group[Any], weighted: bool) -> list[tuple[Resource[Any], float]]:
    if weighted:
        return [(r, r.weight / group.total_weight) for r in group.items]
    return [(r, 1 / len(group.items)) for r in group.items]


def expected_probabilities(
    balancer: LoadBalancer[Any],
    mode: Mode,
    floor: int = 0,
) -> list[tuple[Resource[Any], float]]:
    """Return each reachable resource with its probability under ``mode``.

    Priority modes only cover the group chosen for ``floor``. The other modes
    give every group an equal share, split within the group.
    """
    weighted = mode in ("priority_weighted", "random_weighted")

    if mode in ("priority_weighted", "priority_random"):
        return _within_group(balancer.group_for_priority(floor), weighted)
    if mode not in ("random_weighted", "random"):
        raise ValueError(f"Unknown selection mode: {mode!r}")

    share = 1 / len(balancer.groups)
    return [
        (r, p * share)
        for group in balancer.groups
        for r, p in _within_group(group, weighted)
    ]


def empirical_frequencies(draw: Callable[[], Hashable], n: int) -> dict[Any, float]:
    """Call ``draw`` ``n`` times; return each outcome's relative frequency."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    counts = Counter(draw() for _ in range(n))
    return {outcome: count / n for outcome, count in counts.items()}


def max_deviation(observed: dict[Any, float], expected: dict[Any, float]) -> float:
    """Largest absolute difference over the union of outcomes."""
    keys = set(observed) | set(expected)
    if not keys:
        return 0.0
    return max(abs(observed.get(k, 0.0) - expected.get(k, 0.0)) for k in keys)
