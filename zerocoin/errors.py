"""
Error Types for the Zerocoin Core

Structural failures raise one of the exceptions below. A proof or witness
that simply does not check out is not an error: ``verify`` methods return
``False`` for it.
"""


class ZerocoinError(Exception):
    """Base class for all errors raised by the zerocoin core."""


class ConfigurationError(ZerocoinError):
    """Parameters are missing, malformed or were never validated."""


class ValidationError(ZerocoinError, ValueError):
    """An input violates a contract of the operation it was passed to."""


class ExhaustionError(ZerocoinError, RuntimeError):
    """A bounded search ran out of attempts without finding a candidate."""
