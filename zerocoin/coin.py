"""
Public and Private Coins

A coin is a Pedersen commitment to a random serial number that happens to be
prime and to fall inside the accumulator's coin range. The commitment value
is published as the PublicCoin; the serial number and blinding factor stay
with the PrivateCoin.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .commitment import Commitment
from .config import get_settings
from .params import CoinDenomination, ZerocoinParams, require_initialized
from .primality import is_probable_prime
from .randomness import RandomSource, resolve_rng
from .retry import first_accepted

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicCoin:
    """The published half of a coin: its commitment value and denomination."""

    params: ZerocoinParams = field(repr=False, compare=False)
    value: int
    denomination: CoinDenomination

    def __post_init__(self):
        require_initialized(self.params, "zerocoin parameters")
        object.__setattr__(self, "denomination", CoinDenomination(self.denomination))

    def validate(self) -> bool:
        """True iff the value is a probable prime strictly inside the coin range."""
        acc = self.params.accumulator_params
        return (
            acc.min_coin_value < self.value < acc.max_coin_value
            and is_probable_prime(self.value, acc.confidence)
        )


@dataclass(frozen=True)
class PrivateCoin:
    """A minted coin together with its secret opening."""

    params: ZerocoinParams = field(repr=False, compare=False)
    serial_number: int = field(repr=False)
    randomness: int = field(repr=False)
    public_coin: PublicCoin

    def __post_init__(self):
        require_initialized(self.params, "zerocoin parameters")

    @classmethod
    def mint(
        cls,
        params: ZerocoinParams,
        denomination: CoinDenomination,
        rng: Optional[RandomSource] = None,
        max_attempts: Optional[int] = None,
    ) -> "PrivateCoin":
        return mint_coin(params, denomination, rng=rng, max_attempts=max_attempts)


def mint_coin(
    params: ZerocoinParams,
    denomination: CoinDenomination,
    rng: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
) -> PrivateCoin:
    """
    Mint a new coin with a random serial number.

    Each attempt draws a serial number s in [0, q), commits to it in the coin
    commitment group and keeps the commitment only if it is a valid public
    coin (prime, strictly inside the coin range).

    Args:
        params: Validated zerocoin parameters
        denomination: Denomination of the new coin
        rng: Randomness source for s and the commitment randomness
        max_attempts: Attempt bound; defaults to the configured
            ``max_coinmint_attempts``

    Returns:
        PrivateCoin: The minted coin with its opening

    Raises:
        ConfigurationError: If params were not validated
        ExhaustionError: If no valid coin was found within max_attempts
    """
    require_initialized(params, "zerocoin parameters")
    denomination = CoinDenomination(denomination)
    if max_attempts is None:
        max_attempts = get_settings().max_coinmint_attempts
    rng = resolve_rng(rng)
    group = params.coin_commitment_group

    def candidate(attempt: int) -> Commitment:
        serial_number = rng.randbelow(group.order)
        return Commitment(group, serial_number, rng)

    def accept(commitment: Commitment) -> bool:
        return PublicCoin(params, commitment.commitment_value, denomination).validate()

    commitment = first_accepted(candidate, accept, max_attempts, what="zerocoin")

    coin = PrivateCoin(
        params=params,
        serial_number=commitment.content,
        randomness=commitment.randomness,
        public_coin=PublicCoin(params, commitment.commitment_value, denomination),
    )
    logger.info(
        f"Minted coin of denomination {denomination.name} "
        f"({coin.public_coin.value.bit_length()}-bit value)"
    )
    return coin
