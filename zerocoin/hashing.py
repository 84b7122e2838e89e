"""
Domain-Separated Challenge Hashing

Fiat-Shamir challenges are SHA-256 digests over a tagged transcript. Every
item is written with a type tag and a length prefix so that two different
transcripts can never serialize to the same byte string.
"""

import hashlib
from typing import Tuple, Union

HASH_OUTPUT_BITS = 256

COMMITMENT_EQUALITY_PROOF = "COMMITMENT_EQUALITY_PROOF"

_TAG_STR = b"s"
_TAG_INT = b"i"
_TAG_BYTES = b"b"
_TAG_STRUCT = b"t"


def int_to_bytes(value: int) -> bytes:
    """Minimal signed big-endian encoding of an integer."""
    length = (value.bit_length() + 8) // 8
    return value.to_bytes(length, "big", signed=True)


class ChallengeHasher:
    """
    Incremental transcript hash.

    The domain tag is absorbed first, then items in call order. Parameter
    objects are absorbed through their ``transcript_fields()`` tuple.

    Example:
        >>> hasher = ChallengeHasher("EXAMPLE")
        >>> _ = hasher.update(42).update("||")
        >>> challenge = hasher.challenge()
        >>> 0 <= challenge < 2 ** HASH_OUTPUT_BITS
        True
    """

    def __init__(self, domain: str):
        self._sha = hashlib.sha256()
        self._write(_TAG_STR, domain.encode("utf-8"))

    def _write(self, tag: bytes, payload: bytes) -> None:
        self._sha.update(tag)
        self._sha.update(len(payload).to_bytes(4, "big"))
        self._sha.update(payload)

    def update(self, item: Union[str, bytes, int, object]) -> "ChallengeHasher":
        # bool is an int subclass; reject it so True never hashes like 1
        if isinstance(item, bool):
            raise TypeError("booleans are not transcript items")
        if isinstance(item, str):
            self._write(_TAG_STR, item.encode("utf-8"))
        elif isinstance(item, bytes):
            self._write(_TAG_BYTES, item)
        elif isinstance(item, int):
            self._write(_TAG_INT, int_to_bytes(item))
        elif hasattr(item, "transcript_fields"):
            fields: Tuple[int, ...] = item.transcript_fields()
            self._write(_TAG_STRUCT, len(fields).to_bytes(4, "big"))
            for field in fields:
                self._write(_TAG_INT, int_to_bytes(field))
        else:
            raise TypeError(f"Cannot hash item of type {type(item).__name__}")
        return self

    def digest(self) -> bytes:
        return self._sha.copy().digest()

    def challenge(self) -> int:
        """The digest read as a big-endian integer in ``[0, 2^256)``."""
        return int.from_bytes(self.digest(), "big")


def hash_challenge(domain: str, *items) -> int:
    """One-shot helper: hash ``items`` under ``domain`` and return the integer."""
    hasher = ChallengeHasher(domain)
    for item in items:
        hasher.update(item)
    return hasher.challenge()
