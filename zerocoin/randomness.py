"""
Randomness Sources

Secret randomness (commitment blinding factors, serial numbers, proof
nonces) is drawn through a small capability object so callers can inject
their own stream. Production code uses the OS CSPRNG via ``secrets``.
"""

import secrets
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in ``[0, upper)``."""

    def randbelow(self, upper: int) -> int:
        ...


class SystemRandomSource:
    """Cryptographically secure source backed by :mod:`secrets`.

    Safe to share between threads: every draw goes to the OS generator.
    """

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper bound must be positive")
        return secrets.randbelow(upper)


_system_random = SystemRandomSource()


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    """Return ``rng`` or the shared system source when it is None."""
    return _system_random if rng is None else rng
