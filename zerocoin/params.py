"""
Zerocoin Parameters

Immutable parameter sets for the Pedersen commitment groups and the RSA
accumulator. Each set is validated exactly once through ``validated()``,
which returns a frozen copy carrying ``initialized=True``. Every operation in
the package refuses parameters that lack that flag.
"""

import json
import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .errors import ConfigurationError
from .primality import is_probable_prime

# Rounds used when checking the primality of group moduli during validation.
PARAM_PRIMALITY_ROUNDS = 40


def _mark_initialized(params):
    # the flag is not a constructor argument; only validated() may set it
    object.__setattr__(params, "initialized", True)
    return params


class CoinDenomination(IntEnum):
    """Fixed coin values; coins of different denominations never mix."""

    ZQ_LOVELACE = 1
    ZQ_GOLDWASSER = 10
    ZQ_RACKOFF = 25
    ZQ_PEDERSEN = 50
    ZQ_WILLIAMSON = 100


@dataclass(frozen=True)
class GroupParams:
    """
    A prime-order subgroup of Z*_p used for Pedersen commitments.

    Attributes:
        modulus: Prime modulus p
        g: First generator of the order-q subgroup
        h: Second generator of the order-q subgroup
        order: Prime subgroup order q, dividing p - 1
        initialized: Set only by ``validated()``
    """

    modulus: int
    g: int
    h: int
    order: int
    initialized: bool = field(default=False, init=False)

    def validated(self, rounds: int = PARAM_PRIMALITY_ROUNDS) -> "GroupParams":
        """
        Check the group description and return an initialized copy.

        Raises:
            ConfigurationError: If any structural check fails
        """
        p, q = self.modulus, self.order
        if p <= 3 or q <= 1:
            raise ConfigurationError("Group modulus and order must be positive primes")
        if not is_probable_prime(p, rounds):
            raise ConfigurationError("Group modulus p must be prime")
        if not is_probable_prime(q, rounds):
            raise ConfigurationError("Group order q must be prime")
        if (p - 1) % q != 0:
            raise ConfigurationError("Group order q must divide p - 1")
        for name, gen in (("g", self.g), ("h", self.h)):
            if not 1 < gen < p:
                raise ConfigurationError(f"Generator {name} must lie in (1, p)")
            if pow(gen, q, p) != 1:
                raise ConfigurationError(f"Generator {name} must have order q")
        if self.g == self.h:
            raise ConfigurationError("Generators g and h must differ")
        return _mark_initialized(replace(self))

    def transcript_fields(self) -> Tuple[int, ...]:
        return (self.modulus, self.g, self.h, self.order)


@dataclass(frozen=True)
class AccumulatorParams:
    """
    RSA accumulator description.

    Attributes:
        modulus: RSA modulus N of unknown factorization
        base: Initial accumulator value a0
        min_coin_value: Exclusive lower bound on accumulated coin values
        max_coin_value: Exclusive upper bound on accumulated coin values
        confidence: Miller-Rabin rounds used when checking coin primality
        initialized: Set only by ``validated()``
    """

    modulus: int
    base: int
    min_coin_value: int
    max_coin_value: int
    confidence: int
    initialized: bool = field(default=False, init=False)

    def validated(self) -> "AccumulatorParams":
        if self.modulus <= 0:
            raise ConfigurationError("Accumulator modulus N must be positive")
        if not 1 < self.base < self.modulus:
            raise ConfigurationError("Accumulator base must lie in (1, N)")
        if math.gcd(self.base, self.modulus) != 1:
            raise ConfigurationError("Accumulator base and modulus N must be coprime")
        if self.min_coin_value < 0 or self.min_coin_value >= self.max_coin_value:
            raise ConfigurationError("Coin value range must satisfy 0 <= min < max")
        if self.confidence < 1:
            raise ConfigurationError("Primality confidence must be at least 1")
        return _mark_initialized(replace(self))

    def transcript_fields(self) -> Tuple[int, ...]:
        return (
            self.modulus,
            self.base,
            self.min_coin_value,
            self.max_coin_value,
            self.confidence,
        )


@dataclass(frozen=True)
class ZerocoinParams:
    """The full parameter bundle a coin refers to."""

    coin_commitment_group: GroupParams
    accumulator_params: AccumulatorParams
    security_level: int
    initialized: bool = field(default=False, init=False)

    def validated(self) -> "ZerocoinParams":
        if self.security_level < 1:
            raise ConfigurationError("Security level must be positive")
        group = self.coin_commitment_group
        if not group.initialized:
            group = group.validated()
        accumulator = self.accumulator_params
        if not accumulator.initialized:
            accumulator = accumulator.validated()
        return _mark_initialized(
            replace(self, coin_commitment_group=group, accumulator_params=accumulator)
        )


Params = Union[GroupParams, AccumulatorParams, ZerocoinParams]


def require_initialized(params: Params, what: str = "parameters") -> None:
    """Fail fast with ConfigurationError unless ``params`` were validated."""
    if params is None or not getattr(params, "initialized", False):
        raise ConfigurationError(f"Invalid {what}: parameters have not been validated")


def generate_toy_params() -> ZerocoinParams:
    """
    Small validated parameters for unit tests and demos.

    The coin group is the quadratic-residue subgroup of the safe prime
    2039 = 2 * 1019 + 1. The accumulator modulus is 209 = 11 * 19.
    Not secure; only fast.
    """
    group = GroupParams(modulus=2039, g=4, h=9, order=1019)
    accumulator = AccumulatorParams(
        modulus=209,
        base=4,
        min_coin_value=100,
        max_coin_value=2039,
        confidence=20,
    )
    return ZerocoinParams(group, accumulator, security_level=20).validated()


def _parse_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Field {name} must be an integer or hex string")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 16) if value.lower().startswith("0x") else int(value)
        except ValueError:
            raise ConfigurationError(f"Field {name} is not a valid integer: {value!r}")
    raise ConfigurationError(f"Field {name} must be an integer or hex string")


def params_to_dict(params: ZerocoinParams) -> Dict[str, Any]:
    """Hex-encoded JSON-ready representation of a parameter bundle."""
    group = params.coin_commitment_group
    accumulator = params.accumulator_params
    return {
        "coin_commitment_group": {
            "modulus": hex(group.modulus),
            "g": hex(group.g),
            "h": hex(group.h),
            "order": hex(group.order),
        },
        "accumulator": {
            "modulus": hex(accumulator.modulus),
            "base": hex(accumulator.base),
            "min_coin_value": hex(accumulator.min_coin_value),
            "max_coin_value": hex(accumulator.max_coin_value),
            "confidence": accumulator.confidence,
        },
        "security_level": params.security_level,
    }


def params_from_dict(data: Dict[str, Any]) -> ZerocoinParams:
    """
    Build and validate a parameter bundle from its dict representation.

    Raises:
        ConfigurationError: If fields are missing, malformed or invalid
    """
    try:
        group_data = data["coin_commitment_group"]
        acc_data = data["accumulator"]
        group = GroupParams(
            modulus=_parse_int(group_data["modulus"], "coin_commitment_group.modulus"),
            g=_parse_int(group_data["g"], "coin_commitment_group.g"),
            h=_parse_int(group_data["h"], "coin_commitment_group.h"),
            order=_parse_int(group_data["order"], "coin_commitment_group.order"),
        )
        accumulator = AccumulatorParams(
            modulus=_parse_int(acc_data["modulus"], "accumulator.modulus"),
            base=_parse_int(acc_data["base"], "accumulator.base"),
            min_coin_value=_parse_int(acc_data["min_coin_value"], "accumulator.min_coin_value"),
            max_coin_value=_parse_int(acc_data["max_coin_value"], "accumulator.max_coin_value"),
            confidence=_parse_int(acc_data["confidence"], "accumulator.confidence"),
        )
        security_level = _parse_int(data["security_level"], "security_level")
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Invalid parameters format: missing {e}")

    return ZerocoinParams(group, accumulator, security_level).validated()


def load_params(path: Union[str, Path]) -> ZerocoinParams:
    """
    Load validated parameters from a JSON file.

    Args:
        path: Path to a file written by ``dump_params``

    Returns:
        ZerocoinParams: Validated parameter bundle

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    params_file = Path(path)
    try:
        with open(params_file, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Parameters file not found: {params_file}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid parameters file format: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError("Parameters file must contain a JSON object")
    return params_from_dict(data)


def dump_params(params: ZerocoinParams, path: Union[str, Path]) -> None:
    """Write ``params`` to ``path`` in the format read by ``load_params``."""
    require_initialized(params, "zerocoin parameters")
    with open(Path(path), "w") as f:
        json.dump(params_to_dict(params), f, indent=2)
