"""
Unit tests for zerocoin components

- test_primality.py: Miller-Rabin primality test
- test_hashing.py: domain-separated challenge hashing
- test_params.py: parameter validation, loading and dumping
- test_paramgen.py: deterministic parameter derivation
- test_commitment.py: Pedersen commitments
- test_equality_proof.py: commitment equality proofs
- test_accumulator.py: accumulator operations
- test_witness.py: membership witnesses
- test_coin.py: public/private coins and minting
- test_retry.py: bounded retry combinator
- test_config.py: settings and logging setup
"""
