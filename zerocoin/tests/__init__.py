"""
Tests package for the zerocoin core

- Unit tests: individual modules in isolation
- Integration tests: minting, accumulation, witnesses and proofs together
"""
