"""Random generators used for selection draws.

The default generator is a ``random.Random`` seeded once from the operating
system's entropy pool. ``random.SystemRandom`` can be swapped in where draws
must be cryptographically strong, at a considerable cost per draw.
"""

from __future__ import annotations

import logging
import os
import random
from typing import Callable, Protocol, runtime_checkable

from priority_balancer.errors import SeedingError

logger = logging.getLogger(__name__)

SEED_BYTES = 8


@runtime_checkable
class RandomSource(Protocol):
    """The two operations the balancer needs from a generator."""

    def randrange(self, stop: int) -> int:
        """Return a uniformly random integer in ``[0, stop)``."""
        ...

    def seed(self, a: int | None = None) -> None:
        ...


def secure_seed(entropy: Callable[[int], bytes] = os.urandom) -> int:
    """Read one non-negative 63-bit seed from ``entropy``.

    ``entropy`` is called exactly once; it may block while the platform's
    entropy pool initializes.
    """
    try:
        raw = entropy(SEED_BYTES)
    except (OSError, NotImplementedError) as e:
        raise SeedingError(f"entropy source unavailable: {e}") from e

    if len(raw) < SEED_BYTES:
        raise SeedingError(
            f"entropy source returned {len(raw)} bytes, expected {SEED_BYTES}"
        )

    return int.from_bytes(raw[:SEED_BYTES], "little") >> 1


def fast_random_source(entropy: Callable[[int], bytes] = os.urandom) -> random.Random:
    """Default generator: Mersenne Twister with a secure seed."""
    return random.Random(secure_seed(entropy))


def system_random_source() -> random.SystemRandom:
    """Cryptographically strong generator backed by ``os.urandom``."""
    return random.SystemRandom()


def deterministic_random_source(seed: int) -> random.Random:
    logger.debug("Using deterministic random source with seed=%d", seed)
    return random.Random(seed)
