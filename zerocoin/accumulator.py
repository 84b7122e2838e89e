"""
RSA Accumulator and Membership Witnesses

An Accumulator folds coin values into a single element of Z*_N by repeated
modular exponentiation. Because exponents commute, the result does not depend
on the order coins are added. An AccumulatorWitness tracks the same value
with one coin left out, which is exactly what is needed to show that coin is
a member.
"""

import logging
from typing import TYPE_CHECKING, Iterable

from .errors import ValidationError
from .params import AccumulatorParams, CoinDenomination, require_initialized

if TYPE_CHECKING:
    from .coin import PublicCoin

logger = logging.getLogger(__name__)


def add_member(A: int, p: int, N: int) -> int:
    """
    Add a member p to the accumulator value A.

    The RSA accumulator operation: A^p mod N

    Args:
        A: Current accumulator value
        p: Element to add (a prime coin value in normal use)
        N: RSA modulus

    Returns:
        int: New accumulator value after adding p

    Raises:
        ValueError: If any input is non-positive

    Example:
        >>> N = 35  # Small example (7 * 5)
        >>> add_member(add_member(2, 3, N), 4, N) == add_member(add_member(2, 4, N), 3, N)
        True
    """
    if A <= 0 or p <= 0 or N <= 0:
        raise ValueError("All parameters must be positive")

    return pow(A, p, N)


class Accumulator:
    """
    Append-only accumulator for one denomination.

    Instances are mutable and single-owner: callers that share one across
    threads must serialize ``accumulate`` themselves.
    """

    def __init__(self, params: AccumulatorParams, denomination: CoinDenomination):
        require_initialized(params, "accumulator parameters")
        self.params = params
        self.denomination = CoinDenomination(denomination)
        self._value = params.base

    @property
    def value(self) -> int:
        return self._value

    def accumulate(self, coin: "PublicCoin") -> None:
        """
        Add a public coin.

        Raises:
            ValidationError: If the coin has another denomination, was minted
                under different accumulator parameters, or fails ``validate()``
        """
        if coin.denomination != self.denomination:
            raise ValidationError(
                f"Wrong denomination for coin. Expected coins of denomination: "
                f"{self.denomination.name}. Instead, got a coin of denomination: "
                f"{CoinDenomination(coin.denomination).name}"
            )
        if coin.params.accumulator_params != self.params:
            raise ValidationError("Coin was minted under different accumulator parameters")
        if not coin.validate():
            raise ValidationError("Coin is not valid")

        self._value = add_member(self._value, coin.value, self.params.modulus)

    def accumulate_all(self, coins: Iterable["PublicCoin"]) -> None:
        """Accumulate coins in iteration order, stopping at the first invalid one."""
        count = 0
        for coin in coins:
            self.accumulate(coin)
            count += 1
        logger.debug(f"Accumulated {count} coins of denomination {self.denomination.name}")

    def equals(self, other: "Accumulator") -> bool:
        return self._value == other.value

    def copy(self) -> "Accumulator":
        """Independent snapshot sharing the same (immutable) params."""
        clone = Accumulator(self.params, self.denomination)
        clone._value = self._value
        return clone

    def __repr__(self) -> str:
        return f"Accumulator(denomination={self.denomination.name}, value={self._value:#x})"


class AccumulatorWitness:
    """
    Membership witness for one coin.

    Starts from a checkpoint accumulator that does not yet contain
    ``element``; every coin added afterwards except ``element`` itself is
    folded in. Exclusion compares coin values, so two distinct coins with an
    identical value would be treated as the same coin.
    """

    def __init__(self, params: AccumulatorParams, checkpoint: Accumulator, element: "PublicCoin"):
        require_initialized(params, "accumulator parameters")
        if checkpoint.params != params:
            raise ValidationError("Checkpoint uses different accumulator parameters")
        if element.denomination != checkpoint.denomination:
            raise ValidationError(
                f"Witnessed coin has denomination {CoinDenomination(element.denomination).name}, "
                f"checkpoint holds {checkpoint.denomination.name}"
            )
        self.params = params
        self.witness = checkpoint.copy()
        self.element = element

    @property
    def value(self) -> int:
        return self.witness.value

    def add_element(self, coin: "PublicCoin") -> None:
        if coin.value != self.element.value:
            self.witness.accumulate(coin)

    def verify(self, target: Accumulator) -> bool:
        """
        True iff adding the element to the witness reproduces ``target``.

        Raises:
            ValidationError: If the element itself could never be accumulated
        """
        temp = self.witness.copy()
        temp.accumulate(self.element)
        return temp.equals(target)


def _test_accumulator_operations() -> None:
    """Demo accumulator operations with small numbers."""
    N = 35  # 5 * 7
    g = 2

    print("Testing RSA Accumulator Operations:")
    print(f"N = {N}, g = {g}")

    forward = add_member(add_member(g, 3, N), 4, N)
    backward = add_member(add_member(g, 4, N), 3, N)
    print(f"   3 then 4: {forward}")
    print(f"   4 then 3: {backward}")
    print(f"   Order independent: {forward == backward == pow(g, 12, N)}")


if __name__ == "__main__":
    _test_accumulator_operations()
