"""Decode public-key handles into a uniform SubjectPublicKeyInfo view.

asn1crypto's own ``keys.PublicKeyInfo`` resolves parameters through a fixed
algorithm map and rejects OIDs it does not know (GOST, DSTU, the post-quantum
schemes). The loose structures below accept any algorithm and leave the
parameters as raw DER for the identifier to interpret.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Type, TypeVar

from asn1crypto import core, pem
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa

from ..catalog import oids
from ..errors import MissingInput, UnknownKeyType

A = TypeVar("A", bound=core.Asn1Value)

_NULL_DER = b"\x05\x00"

_CRYPTOGRAPHY_KEYS = (
    rsa.RSAPublicKey,
    dsa.DSAPublicKey,
    ec.EllipticCurvePublicKey,
    ed25519.Ed25519PublicKey,
    ed448.Ed448PublicKey,
)


class AlgorithmIdentifier(core.Sequence):
    _fields = [
        ("algorithm", core.ObjectIdentifier),
        ("parameters", core.Any, {"optional": True}),
    ]


class SubjectPublicKeyInfo(core.Sequence):
    _fields = [
        ("algorithm", AlgorithmIdentifier),
        ("public_key", core.OctetBitString),
    ]


class GostPublicKeyParameters(core.Sequence):
    """GOST R 34.10 (94, 2001 and 2012) public key algorithm parameters."""

    _fields = [
        ("public_key_param_set", core.ObjectIdentifier),
        ("digest_param_set", core.ObjectIdentifier, {"optional": True}),
        ("encryption_param_set", core.ObjectIdentifier, {"optional": True}),
    ]


class DstuParameters(core.Sequence):
    """DSTU 4145 parameters: a named curve OID or an explicit ECBinary curve."""

    _fields = [
        ("curve", core.Any),
        ("dke", core.OctetString, {"optional": True}),
    ]


@dataclass(frozen=True)
class PublicKeyInfo:
    """Decoded SubjectPublicKeyInfo.

    ``parameters`` is the DER of the AlgorithmIdentifier parameters, or None
    when they are absent or an explicit NULL.
    """

    der: bytes
    algorithm_oid: str
    parameters: bytes | None
    public_key: bytes

    @property
    def family_tag(self) -> str | None:
        return oids.PUBLIC_KEY_ALGORITHMS.get(self.algorithm_oid)

    @property
    def has_parameters(self) -> bool:
        return self.parameters is not None

    def params_as(self, spec: Type[A]) -> A | None:
        """Parse the parameters with ``spec``; None when there are none."""
        if self.parameters is None:
            return None
        value = spec.load(self.parameters, strict=True)
        # force a full parse so malformed contents fail here
        value.native
        return value

    def to_pem(self) -> str:
        return pem.armor("PUBLIC KEY", self.der).decode("ascii")


def _decode(der: bytes) -> PublicKeyInfo:
    try:
        spki = SubjectPublicKeyInfo.load(der, strict=True)
        algorithm = spki["algorithm"]["algorithm"].dotted
        params = spki["algorithm"]["parameters"]
        public_key = spki["public_key"].native
    except (ValueError, TypeError) as e:
        raise UnknownKeyType("public key is not a valid SubjectPublicKeyInfo") from e
    raw: bytes | None = None
    if not isinstance(params, core.Void):
        raw = params.dump()
        if raw == _NULL_DER:
            raw = None
    return PublicKeyInfo(der=der, algorithm_oid=algorithm, parameters=raw, public_key=public_key)


def load_public_key(handle: Any) -> PublicKeyInfo:
    """Accept a PublicKeyInfo, a cryptography public key, DER/PEM bytes or PEM text."""
    if handle is None:
        raise MissingInput("public key handle was None")
    if isinstance(handle, PublicKeyInfo):
        return handle
    if isinstance(handle, _CRYPTOGRAPHY_KEYS):
        der = handle.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        return _decode(der)
    if isinstance(handle, core.Asn1Value):
        return _decode(handle.dump())
    if isinstance(handle, str):
        if not handle.strip():
            raise MissingInput("public key handle was blank")
        handle = handle.encode("ascii", errors="replace")
    if isinstance(handle, (bytes, bytearray, memoryview)):
        data = bytes(handle)
        if not data:
            raise MissingInput("public key handle was empty")
        if pem.detect(data):
            try:
                _, _, data = pem.unarmor(data)
            except ValueError as e:
                raise UnknownKeyType("public key PEM could not be decoded") from e
        return _decode(data)
    raise UnknownKeyType(f"unsupported public key handle {type(handle).__name__}")


__all__ = [
    "AlgorithmIdentifier",
    "SubjectPublicKeyInfo",
    "GostPublicKeyParameters",
    "DstuParameters",
    "PublicKeyInfo",
    "load_public_key",
]
