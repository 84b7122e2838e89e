"""
Pedersen Commitments and Commitment Equality Proofs

A Pedersen commitment to m under group (p, g, h, q) is g^m * h^r mod p with
r uniform in [0, q). CommitmentEqualityProof is a non-interactive Sigma
protocol (Fiat-Shamir) showing that two commitments, possibly under
different groups, open to the same m without revealing it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ValidationError
from .hashing import COMMITMENT_EQUALITY_PROOF, HASH_OUTPUT_BITS, ChallengeHasher
from .params import GroupParams, require_initialized
from .randomness import RandomSource, resolve_rng

logger = logging.getLogger(__name__)


def commit(params: GroupParams, value: int, randomness: int) -> int:
    """
    Pedersen commitment value g^value * h^randomness mod p.

    Example:
        >>> group = GroupParams(modulus=23, g=2, h=3, order=11)
        >>> commit(group, 5, 3)
        13
    """
    p = params.modulus
    return (pow(params.g, value, p) * pow(params.h, randomness, p)) % p


class Commitment:
    """
    A Pedersen commitment with its opening.

    ``content`` and ``randomness`` are secret; only ``commitment_value`` is
    meant to leave the owner.
    """

    def __init__(self, params: GroupParams, value: int, rng: Optional[RandomSource] = None):
        require_initialized(params, "commitment group parameters")
        self.params = params
        self._content = value
        self._randomness = resolve_rng(rng).randbelow(params.order)
        self._commitment_value = commit(params, value, self._randomness)

    @classmethod
    def from_opening(cls, params: GroupParams, value: int, randomness: int) -> "Commitment":
        """Rebuild a commitment from a known opening, e.g. a minted coin's serial and randomness."""
        require_initialized(params, "commitment group parameters")
        if not 0 <= randomness < params.order:
            raise ValidationError("Commitment randomness must lie in [0, q)")
        commitment = cls.__new__(cls)
        commitment.params = params
        commitment._content = value
        commitment._randomness = randomness
        commitment._commitment_value = commit(params, value, randomness)
        return commitment

    @property
    def commitment_value(self) -> int:
        return self._commitment_value

    @property
    def randomness(self) -> int:
        return self._randomness

    @property
    def content(self) -> int:
        return self._content

    def __repr__(self) -> str:
        return f"Commitment(value={self._commitment_value:#x})"


def _calculate_challenge(ap: GroupParams, bp: GroupParams, a: int, b: int, t1: int, t2: int) -> int:
    hasher = ChallengeHasher(COMMITMENT_EQUALITY_PROOF)
    hasher.update(t1).update(t2)
    hasher.update(a).update(b)
    hasher.update(ap).update(bp)
    return hasher.challenge()


def _reconstruct_t(params: GroupParams, public: int, challenge: int, s_content: int, s_random: int) -> Optional[int]:
    """g^s_content * h^s_random * public^(-challenge) mod p, or None if public is not invertible."""
    p = params.modulus
    if not 0 < public < p:
        return None
    try:
        inverse = pow(public, -challenge, p)
    except ValueError:
        return None
    return (inverse * pow(params.g, s_content, p) * pow(params.h, s_random, p)) % p


@dataclass(frozen=True)
class CommitmentEqualityProof:
    """
    Proof that commitments A (under ``ap``) and B (under ``bp``) hide the
    same value.

    With A = g1^m h1^x, B = g2^m h2^y, T1 = g1^r1 h1^r2, T2 = g2^r1 h2^r3 and
    c = H(T1, T2, A, B, ap, bp), the responses are

        s1 = r1 + m*c,  s2 = r2 + x*c,  s3 = r3 + y*c

    computed over the integers. The verifier rebuilds T1, T2 from the
    responses and checks that they hash back to c.
    """

    challenge: int
    s1: int
    s2: int
    s3: int
    ap: GroupParams
    bp: GroupParams

    @classmethod
    def create(cls, a: Commitment, b: Commitment, rng: Optional[RandomSource] = None) -> "CommitmentEqualityProof":
        """
        Build a proof from two openings of the same value.

        Args:
            a: Commitment under the first group
            b: Commitment under the second group
            rng: Randomness source for the ephemeral commitments

        Returns:
            CommitmentEqualityProof: Non-interactive proof

        Raises:
            ValidationError: If the commitments hide different values
            ConfigurationError: If either group was not validated
        """
        ap, bp = a.params, b.params
        require_initialized(ap, "commitment group parameters")
        require_initialized(bp, "commitment group parameters")
        if a.content != b.content:
            raise ValidationError("Both commitments must contain the same value")

        rng = resolve_rng(rng)
        # r1 is drawn below the smaller order to bound statistical leakage
        r1 = rng.randbelow(min(ap.order, bp.order))
        t1 = Commitment(ap, r1, rng)
        t2 = Commitment(bp, r1, rng)

        challenge = _calculate_challenge(
            ap, bp, a.commitment_value, b.commitment_value,
            t1.commitment_value, t2.commitment_value,
        )

        s1 = t1.content + a.content * challenge
        s2 = t1.randomness + a.randomness * challenge
        s3 = t2.randomness + b.randomness * challenge

        logger.debug(
            f"Built commitment equality proof over groups of "
            f"{ap.modulus.bit_length()} and {bp.modulus.bit_length()} bits"
        )
        return cls(challenge=challenge, s1=s1, s2=s2, s3=s3, ap=ap, bp=bp)

    def verify(self, a: int, b: int) -> bool:
        """
        Check the proof against public commitment values ``a`` and ``b``.

        Returns False for a false statement or a malformed proof; never
        raises for either.
        """
        if not 0 <= self.challenge < (1 << HASH_OUTPUT_BITS):
            return False
        if not (self.ap.initialized and self.bp.initialized):
            return False

        t1 = _reconstruct_t(self.ap, a, self.challenge, self.s1, self.s2)
        t2 = _reconstruct_t(self.bp, b, self.challenge, self.s1, self.s3)
        if t1 is None or t2 is None:
            return False

        computed = _calculate_challenge(self.ap, self.bp, a, b, t1, t2)
        return computed == self.challenge
