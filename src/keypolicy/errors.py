"""Exception types raised by the key-type policy engine."""
from __future__ import annotations


class KeyPolicyError(Exception):
    """Base class for all keypolicy errors."""


class UnknownKeyType(KeyPolicyError):
    """Raised when a public key does not match any catalogued key type.

    Callers persist the identified key type as ground truth, so identification
    never falls back to a best guess.
    """


class NoSuchElement(KeyPolicyError, LookupError):
    """Raised when a catalog lookup key is not recognised."""


class MissingInput(KeyPolicyError, ValueError):
    """Raised when a lookup key or handle is None or blank."""


class KeyLayoutError(KeyPolicyError, RuntimeError):
    """Raised when a provider-private key parameter layout no longer decodes."""


__all__ = ["KeyPolicyError", "UnknownKeyType", "NoSuchElement", "MissingInput", "KeyLayoutError"]
