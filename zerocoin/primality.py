"""
Probabilistic Primality Testing

Miller-Rabin with a caller-chosen number of rounds. The round count is the
confidence level carried by the accumulator parameters: a composite passes
with probability at most 4^-rounds.
"""

import hashlib

_SMALL_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149,
    151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229,
    233, 239, 241, 251,
)


def is_probable_prime(n: int, rounds: int = 64) -> bool:
    """
    Miller-Rabin probable-prime test.

    Witness bases are derived from SHA-256 of the candidate, so the result
    for a given ``(n, rounds)`` is reproducible.

    Args:
        n: Candidate integer
        rounds: Number of Miller-Rabin rounds (confidence level)

    Returns:
        bool: False if n is certainly composite, True if n is probably prime

    Raises:
        ValueError: If rounds is not positive

    Example:
        >>> is_probable_prime(1019, rounds=20)
        True
        >>> is_probable_prime(1021 * 1019, rounds=20)
        False
    """
    if rounds <= 0:
        raise ValueError("rounds must be positive")
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    seed = n.to_bytes((n.bit_length() + 7) // 8, "big")
    for i in range(rounds):
        h = hashlib.sha256(seed + i.to_bytes(4, "big")).digest()
        a = 2 + (int.from_bytes(h, "big") % (n - 3))
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True
