"""
Parameter Derivation

Derives commitment groups and complete parameter bundles deterministically
from a seed, so that every party holding the same RSA modulus arrives at the
same coin commitment group without a trusted dealer for that group.
"""

import hashlib
import logging
from typing import Optional, Tuple

from .errors import ConfigurationError, ExhaustionError
from .hashing import int_to_bytes
from .params import AccumulatorParams, GroupParams, ZerocoinParams
from .primality import is_probable_prime

logger = logging.getLogger(__name__)

# Initial accumulator value (31^2), a quadratic residue for any RSA modulus
# not divisible by 31.
ACCUMULATOR_BASE = 961

DEFAULT_SECURITY_LEVEL = 80

# Demo 2048-bit RSA modulus (product of two 1024-bit primes). The factors are
# public, so this is for testing only.
DEMO_RSA_MODULUS_HEX = (
    "0xc09f09d858a2037ca76e7b1c52543a002213c8f1086a587f41f9616ac4fd8d6ecbec8852fd95adaec50c34cde7f0e676"
    "059896c2be9f2e479297a7507f1d1e58afe26be99489b798a704f1627b8e6b09b9a88b01ce697c4197bbeec134bb41aac0"
    "579c8026deec542c6965b0b8d39e77405a65110af3774f88cd463c6c304483c6f0a802f288c8ba4f071b6afcefa2b9395e"
    "2fe71aaea8e277c06b5d2724153c4a20209c06f2e0f523fb96b576a37937fb340478e86bbbfa8914c50f0f33a8948836ca"
    "f99ca5f7f6983787a25e091d9591204dbb8c14e473d172f4e7a0b5164cf9ee97f838ded82fd2357a51a6f495850ef26800"
    "9e7ecc19047f8e99a91a4d9b"
)

_PARAM_LENGTHS = {
    80: (1024, 256),
    112: (2048, 256),
    128: (3072, 320),
}


def expand_seed(seed: bytes, label: str, bits: int) -> int:
    """
    Expand ``seed`` into a ``bits``-bit integer with SHA-256 in counter mode.

    Example:
        >>> expand_seed(b"seed", "q", 64).bit_length() <= 64
        True
    """
    if bits <= 0:
        raise ValueError("bits must be positive")
    out = b""
    counter = 0
    prefix = seed + b"|" + label.encode("utf-8") + b"|"
    while len(out) * 8 < bits:
        out += hashlib.sha256(prefix + counter.to_bytes(4, "big")).digest()
        counter += 1
    return int.from_bytes(out, "big") >> (len(out) * 8 - bits)


def derive_prime(seed: bytes, label: str, bits: int, *, rounds: int = 40, max_attempts: int = 100_000) -> int:
    """
    Deterministically derive a prime of exactly ``bits`` bits.

    Args:
        seed: Seed bytes
        label: Domain label separating independent derivations
        bits: Exact bit length of the result (>= 3)
        rounds: Miller-Rabin rounds
        max_attempts: Number of odd candidates to try

    Raises:
        ExhaustionError: If no prime is found within max_attempts
    """
    if bits < 3:
        raise ValueError("bits must be at least 3")
    cand = expand_seed(seed, label, bits) | (1 << (bits - 1)) | 1
    for _ in range(max_attempts):
        if cand.bit_length() != bits:
            break
        if is_probable_prime(cand, rounds):
            return cand
        cand += 2
    raise ExhaustionError(f"Could not derive a {bits}-bit prime within max_attempts")


def _derive_generator(seed: bytes, label: str, p: int, q: int, exclude: int = 1, max_attempts: int = 1000) -> int:
    cofactor = (p - 1) // q
    for counter in range(max_attempts):
        x = expand_seed(seed, f"{label}|{counter}", p.bit_length() + 64) % p
        if x < 2:
            continue
        gen = pow(x, cofactor, p)
        if gen not in (1, exclude):
            return gen
    raise ExhaustionError(f"Could not derive generator {label}")


def derive_group_params(
    seed: bytes,
    p_bits: int,
    q_bits: int,
    *,
    rounds: int = 40,
    max_attempts: int = 100_000,
) -> GroupParams:
    """
    Derive a validated prime-order group from a seed.

    Finds a prime q of ``q_bits`` bits, then a prime p = j*q + 1 of
    ``p_bits`` bits, then two distinct generators of the order-q subgroup.

    Args:
        seed: Seed bytes shared by every party deriving the group
        p_bits: Bit length of the modulus p
        q_bits: Bit length of the subgroup order q (< p_bits)
        rounds: Miller-Rabin rounds for p and q
        max_attempts: Bound on candidate searches

    Returns:
        GroupParams: Validated group parameters

    Raises:
        ValueError: If the bit lengths are inconsistent
        ExhaustionError: If a search runs out of attempts
    """
    if q_bits < 3 or p_bits <= q_bits + 1:
        raise ValueError("Require 3 <= q_bits and q_bits + 1 < p_bits")

    q = derive_prime(seed, "order", q_bits, rounds=rounds, max_attempts=max_attempts)

    start = expand_seed(seed, "modulus", p_bits) | (1 << (p_bits - 1))
    j = start // q
    if j % 2:
        j += 1
    p = None
    for _ in range(max_attempts):
        cand = j * q + 1
        if cand.bit_length() > p_bits:
            break
        if cand.bit_length() == p_bits and is_probable_prime(cand, rounds):
            p = cand
            break
        j += 2
    if p is None:
        raise ExhaustionError(f"Could not derive a {p_bits}-bit group modulus")

    g = _derive_generator(seed, "g", p, q)
    h = _derive_generator(seed, "h", p, q, exclude=g)

    logger.debug(f"Derived commitment group: p={p.bit_length()} bits, q={q.bit_length()} bits")
    return GroupParams(modulus=p, g=g, h=h, order=q).validated(rounds)


def group_param_lengths(security_level: int) -> Tuple[int, int]:
    """
    Modulus and order bit lengths for a supported security level.

    Raises:
        ConfigurationError: If the level is not supported
    """
    try:
        return _PARAM_LENGTHS[security_level]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported security level {security_level}; "
            f"expected one of {sorted(_PARAM_LENGTHS)}"
        )


def derive_zerocoin_params(
    accumulator_modulus: int,
    security_level: int = DEFAULT_SECURITY_LEVEL,
    *,
    p_bits: Optional[int] = None,
    q_bits: Optional[int] = None,
) -> ZerocoinParams:
    """
    Derive a complete validated parameter bundle from an RSA modulus.

    The coin commitment group is seeded from N, so the bundle is a pure
    function of ``(N, security_level)``. Explicit ``p_bits``/``q_bits``
    override the lengths implied by the security level.

    Coin values live in (2^(p_bits/2), p): commitments are group elements,
    hence below p, and the lower bound keeps them far from trivially small.
    """
    if accumulator_modulus <= ACCUMULATOR_BASE:
        raise ConfigurationError("Accumulator modulus N is too small")
    if p_bits is None or q_bits is None:
        default_p, default_q = group_param_lengths(security_level)
        p_bits = p_bits or default_p
        q_bits = q_bits or default_q

    seed = b"ZEROCOIN_COIN_COMMITMENT_GROUP|" + int_to_bytes(accumulator_modulus)
    group = derive_group_params(seed, p_bits, q_bits, rounds=security_level)

    accumulator = AccumulatorParams(
        modulus=accumulator_modulus,
        base=ACCUMULATOR_BASE,
        min_coin_value=1 << (p_bits // 2),
        max_coin_value=group.modulus,
        confidence=security_level,
    )
    logger.info(
        f"Derived zerocoin parameters: N={accumulator_modulus.bit_length()} bits, "
        f"p={p_bits} bits, q={q_bits} bits, security level {security_level}"
    )
    return ZerocoinParams(group, accumulator, security_level).validated()


def generate_demo_params(security_level: int = DEFAULT_SECURITY_LEVEL) -> ZerocoinParams:
    """
    Demo parameters over the built-in 2048-bit modulus.

    Not for production: the factorization of the demo modulus is public.
    """
    return derive_zerocoin_params(int(DEMO_RSA_MODULUS_HEX, 16), security_level)
