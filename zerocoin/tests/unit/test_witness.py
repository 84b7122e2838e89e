"""
Unit Tests for Accumulator Witnesses

Tests that witnesses track every coin but their own and verify membership
against the full accumulator.
"""

import itertools

import pytest

from zerocoin.accumulator import Accumulator, AccumulatorWitness
from zerocoin.coin import PublicCoin
from zerocoin.errors import ConfigurationError, ValidationError
from zerocoin.params import AccumulatorParams, CoinDenomination

LOVELACE = CoinDenomination.ZQ_LOVELACE

COIN_VALUES = [101, 103, 107, 109, 113]


class TestAccumulatorWitness:
    """Test witness maintenance and verification."""

    @pytest.fixture
    def coins(self, toy_params):
        return [PublicCoin(toy_params, v, LOVELACE) for v in COIN_VALUES]

    @pytest.fixture
    def acc_params(self, toy_params):
        return toy_params.accumulator_params

    def full_accumulator(self, acc_params, coins):
        acc = Accumulator(acc_params, LOVELACE)
        acc.accumulate_all(coins)
        return acc

    @pytest.mark.parametrize("index", range(len(COIN_VALUES)))
    def test_witness_for_each_member(self, acc_params, coins, index):
        """Test that a witness over S minus e, plus add_element(e), verifies against S."""
        element = coins[index]
        witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), element)

        for coin in coins:
            witness.add_element(coin)

        assert witness.verify(self.full_accumulator(acc_params, coins))

    def test_add_element_skips_own_coin(self, acc_params, coins):
        element = coins[0]
        witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), element)

        witness.add_element(element)
        assert witness.value == acc_params.base

    def test_witness_value_excludes_element(self, acc_params, coins):
        element = coins[2]
        others = [c for c in coins if c is not element]
        witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), element)
        for coin in coins:
            witness.add_element(coin)

        assert witness.value == self.full_accumulator(acc_params, others).value

    def test_checkpoint_replay(self, acc_params, coins):
        """Test a witness started from a mid-stream checkpoint."""
        acc = Accumulator(acc_params, LOVELACE)
        acc.accumulate_all(coins[:2])

        element = coins[2]
        witness = AccumulatorWitness(acc_params, acc, element)

        for coin in coins[2:]:
            acc.accumulate(coin)
            witness.add_element(coin)

        assert witness.verify(acc)

    def test_checkpoint_not_aliased(self, acc_params, coins):
        checkpoint = Accumulator(acc_params, LOVELACE)
        witness = AccumulatorWitness(acc_params, checkpoint, coins[0])

        witness.add_element(coins[1])
        assert checkpoint.value == acc_params.base

    def test_order_of_other_coins_irrelevant(self, acc_params, coins):
        element = coins[0]
        target = self.full_accumulator(acc_params, coins)

        for ordering in itertools.permutations(coins[1:]):
            witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), element)
            for coin in ordering:
                witness.add_element(coin)
            assert witness.verify(target)

    def test_verify_does_not_mutate(self, acc_params, coins):
        witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), coins[0])
        before = witness.value
        witness.verify(self.full_accumulator(acc_params, coins))
        assert witness.value == before

    def test_non_member_fails(self, acc_params, coins):
        """Test that a coin that was never accumulated does not verify."""
        target = self.full_accumulator(acc_params, coins[:2])
        witness = AccumulatorWitness(acc_params, target, coins[2])

        assert witness.verify(target) is False

    def test_stale_witness_fails(self, acc_params, coins):
        """Test that a witness missing later coins does not verify."""
        witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), coins[0])
        for coin in coins[:3]:
            witness.add_element(coin)

        assert witness.verify(self.full_accumulator(acc_params, coins)) is False

    def test_wrong_denomination_rejected(self, toy_params, acc_params, coins):
        witness = AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), coins[0])
        other = PublicCoin(toy_params, 127, CoinDenomination.ZQ_PEDERSEN)

        with pytest.raises(ValidationError):
            witness.add_element(other)

    def test_uninitialized_params(self, acc_params, coins):
        with pytest.raises(ConfigurationError):
            AccumulatorWitness(
                AccumulatorParams(209, 4, 100, 2039, 20),
                Accumulator(acc_params, LOVELACE),
                coins[0],
            )

    def test_checkpoint_params_must_match(self, acc_params, coins, tiny_accumulator_params):
        """Test that the witness refuses a checkpoint over another accumulator."""
        other = Accumulator(tiny_accumulator_params.accumulator_params, LOVELACE)

        with pytest.raises(ValidationError, match="different accumulator parameters"):
            AccumulatorWitness(acc_params, other, coins[0])

    def test_element_denomination_must_match_checkpoint(self, toy_params, acc_params):
        element = PublicCoin(toy_params, 127, CoinDenomination.ZQ_PEDERSEN)

        with pytest.raises(ValidationError, match="denomination ZQ_PEDERSEN"):
            AccumulatorWitness(acc_params, Accumulator(acc_params, LOVELACE), element)
