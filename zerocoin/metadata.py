"""
Spend Metadata

Binds an externally built proof to an accumulator checkpoint and a
transaction. The core only carries it; it never looks inside.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SpendMetaData:
    accumulator_id: int
    tx_hash: int
