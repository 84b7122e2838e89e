"""
Unit Tests for Challenge Hashing

Tests domain separation and item encoding of the Fiat-Shamir transcript hash.
"""

import doctest

import pytest

import zerocoin.hashing
from zerocoin.hashing import (
    HASH_OUTPUT_BITS,
    ChallengeHasher,
    hash_challenge,
    int_to_bytes,
)
from zerocoin.params import GroupParams


class TestIntToBytes:
    """Test the signed integer encoding."""

    def test_zero_and_small(self):
        assert int_to_bytes(0) == b"\x00"
        assert int_to_bytes(127) == b"\x7f"
        assert int_to_bytes(128) == b"\x00\x80"

    def test_negative(self):
        assert int_to_bytes(-1) == b"\xff"
        assert int_to_bytes(-129) != int_to_bytes(129)


class TestChallengeHasher:
    """Test transcript hashing."""

    def test_deterministic(self):
        """Test that identical transcripts give identical challenges."""
        assert hash_challenge("D", 1, "x", b"y") == hash_challenge("D", 1, "x", b"y")

    def test_challenge_range(self):
        """Test that challenges fit in HASH_OUTPUT_BITS bits."""
        challenge = hash_challenge("D", 2**4000)
        assert 0 <= challenge < 2**HASH_OUTPUT_BITS

    def test_domain_separation(self):
        """Test that the domain tag changes the challenge."""
        assert hash_challenge("A", 1, 2) != hash_challenge("B", 1, 2)

    def test_order_matters(self):
        """Test that item order is part of the transcript."""
        assert hash_challenge("D", 1, 2) != hash_challenge("D", 2, 1)

    def test_type_tags(self):
        """Test that equal-looking items of different types hash differently."""
        assert hash_challenge("D", 1) != hash_challenge("D", "1")
        assert hash_challenge("D", "a") != hash_challenge("D", b"a")

    def test_no_concatenation_ambiguity(self):
        """Test that length prefixes prevent splitting collisions."""
        assert hash_challenge("D", "ab", "c") != hash_challenge("D", "a", "bc")

    def test_params_absorbed(self):
        """Test that parameter structures contribute their fields."""
        a = GroupParams(modulus=23, g=2, h=3, order=11)
        b = GroupParams(modulus=23, g=3, h=2, order=11)
        assert hash_challenge("D", a) != hash_challenge("D", b)
        assert hash_challenge("D", a) == hash_challenge("D", a.validated())

    def test_update_chains(self):
        """Test that update returns the hasher and digest is repeatable."""
        hasher = ChallengeHasher("D")
        assert hasher.update(5).update("x") is hasher
        assert hasher.digest() == hasher.digest()
        assert len(hasher.digest()) == 32

    def test_rejects_bool(self):
        with pytest.raises(TypeError, match="booleans"):
            ChallengeHasher("D").update(True)

    def test_rejects_unknown_type(self):
        with pytest.raises(TypeError, match="Cannot hash item"):
            ChallengeHasher("D").update(1.5)


class TestDocExamples:
    """Test that the usage examples in the module docstrings run."""

    def test_hasher_example(self):
        results = doctest.testmod(zerocoin.hashing)
        assert results.attempted > 0
        assert results.failed == 0
