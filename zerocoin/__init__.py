"""
Zerocoin Accumulator and Commitment Engine

Pedersen commitments, commitment equality proofs, an RSA accumulator with
membership witnesses, and coin minting for zerocoin-style anonymous coins.
"""

from .accumulator import Accumulator, AccumulatorWitness, add_member
from .coin import PrivateCoin, PublicCoin, mint_coin
from .commitment import Commitment, CommitmentEqualityProof, commit
from .config import MAX_COINMINT_ATTEMPTS, Settings, get_settings, load_default_params
from .errors import ConfigurationError, ExhaustionError, ValidationError, ZerocoinError
from .hashing import HASH_OUTPUT_BITS, ChallengeHasher, hash_challenge
from .metadata import SpendMetaData
from .paramgen import derive_group_params, derive_zerocoin_params, generate_demo_params
from .params import (
    AccumulatorParams,
    CoinDenomination,
    GroupParams,
    ZerocoinParams,
    dump_params,
    generate_toy_params,
    load_params,
)
from .primality import is_probable_prime
from .randomness import RandomSource, SystemRandomSource

__version__ = "0.1.0"
__all__ = [
    "Accumulator",
    "AccumulatorWitness",
    "add_member",
    "PrivateCoin",
    "PublicCoin",
    "mint_coin",
    "Commitment",
    "CommitmentEqualityProof",
    "commit",
    "MAX_COINMINT_ATTEMPTS",
    "Settings",
    "get_settings",
    "load_default_params",
    "ConfigurationError",
    "ExhaustionError",
    "ValidationError",
    "ZerocoinError",
    "HASH_OUTPUT_BITS",
    "ChallengeHasher",
    "hash_challenge",
    "SpendMetaData",
    "derive_group_params",
    "derive_zerocoin_params",
    "generate_demo_params",
    "AccumulatorParams",
    "CoinDenomination",
    "GroupParams",
    "ZerocoinParams",
    "dump_params",
    "generate_toy_params",
    "load_params",
    "is_probable_prime",
    "RandomSource",
    "SystemRandomSource",
]
