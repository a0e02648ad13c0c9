"""priority-balancer: priority tiers and weighted random selection."""

from priority_balancer.core.balancer import LoadBalancer, build
from priority_balancer.core.random_source import (
    RandomSource,
    deterministic_random_source,
    fast_random_source,
    system_random_source,
)
from priority_balancer.core.resource import Group, Resource
from priority_balancer.core.round_robin import (
    CyclicRoundRobin,
    LockedRoundRobin,
    locked,
    new_locked_round_robin,
    new_round_robin,
)
from priority_balancer.errors import (
    AlreadySynchronizedError,
    BalancerError,
    ConstructionError,
    EmptyInputError,
    InvalidResourceError,
    NoMatchingPriorityError,
    SeedingError,
    SelectionNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadySynchronizedError",
    "BalancerError",
    "ConstructionError",
    "CyclicRoundRobin",
    "EmptyInputError",
    "Group",
    "InvalidResourceError",
    "LoadBalancer",
    "LockedRoundRobin",
    "NoMatchingPriorityError",
    "RandomSource",
    "Resource",
    "SeedingError",
    "SelectionNotFoundError",
    "build",
    "deterministic_random_source",
    "fast_random_source",
    "locked",
    "new_locked_round_robin",
    "new_round_robin",
    "system_random_source",
]
