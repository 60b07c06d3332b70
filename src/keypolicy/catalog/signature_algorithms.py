"""Catalog of signature algorithms and the key family each one signs for."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .key_types import Family, provider_for
from .table import Catalog, require_text


@dataclass(frozen=True)
class SignatureAlgorithmDescriptor:
    id: str
    name: str
    target_family: Family
    digest: str
    oid: str
    recognized_by_default_directory: bool = True

    @property
    def provider(self) -> str:
        return provider_for(self.target_family)

    def __str__(self) -> str:
        return self.name


def _alg(ident, family, digest, oid, name=None, known=True) -> SignatureAlgorithmDescriptor:
    return SignatureAlgorithmDescriptor(ident, name or ident, family, digest, oid, known)


_NIST_SIG = "2.16.840.1.101.3.4.3."
_PKCS1 = "1.2.840.113549.1.1."
_TELETRUST_RSA = "1.3.36.3.3.1."
_RAINBOW = "1.3.6.1.4.1.8301.3.1.3.5.3.2."
_SPHINCS = "1.3.6.1.4.1.22554.2.1."
_XMSS = "1.3.6.1.4.1.22554.2.2."
_XMSSMT = "1.3.6.1.4.1.22554.2.3."

_EC, _DSA, _RSA = Family.EC, Family.DSA, Family.RSA

_ENTRIES = [
    _alg("SHA1withECDSA", _EC, "SHA1", "1.2.840.10045.4.1"),
    _alg("SHA224withECDSA", _EC, "SHA224", "1.2.840.10045.4.3.1"),
    _alg("SHA256withECDSA", _EC, "SHA256", "1.2.840.10045.4.3.2"),
    _alg("SHA384withECDSA", _EC, "SHA384", "1.2.840.10045.4.3.3"),
    _alg("SHA512withECDSA", _EC, "SHA512", "1.2.840.10045.4.3.4"),
    _alg("SHA3_224withECDSA", _EC, "SHA3-224", _NIST_SIG + "9", "SHA3-224withECDSA"),
    _alg("SHA3_256withECDSA", _EC, "SHA3-256", _NIST_SIG + "10", "SHA3-256withECDSA"),
    _alg("SHA3_384withECDSA", _EC, "SHA3-384", _NIST_SIG + "11", "SHA3-384withECDSA"),
    _alg("SHA3_512withECDSA", _EC, "SHA3-512", _NIST_SIG + "12", "SHA3-512withECDSA"),
    _alg("SHA1withDSA", _DSA, "SHA1", "1.2.840.10040.4.3"),
    _alg("SHA224withDSA", _DSA, "SHA224", _NIST_SIG + "1"),
    _alg("SHA256withDSA", _DSA, "SHA256", _NIST_SIG + "2"),
    _alg("SHA384withDSA", _DSA, "SHA384", _NIST_SIG + "3"),
    _alg("SHA512withDSA", _DSA, "SHA512", _NIST_SIG + "4"),
    _alg("SHA3_224withDSA", _DSA, "SHA3-224", _NIST_SIG + "5", "SHA3-224withDSA"),
    _alg("SHA3_256withDSA", _DSA, "SHA3-256", _NIST_SIG + "6", "SHA3-256withDSA"),
    _alg("SHA3_384withDSA", _DSA, "SHA3-384", _NIST_SIG + "7", "SHA3-384withDSA"),
    _alg("SHA3_512withDSA", _DSA, "SHA3-512", _NIST_SIG + "8", "SHA3-512withDSA"),
    _alg("MD2withRSA", _RSA, "MD2", _PKCS1 + "2"),
    _alg("MD5withRSA", _RSA, "MD5", _PKCS1 + "4"),
    _alg("SHA1withRSA", _RSA, "SHA1", _PKCS1 + "5"),
    _alg("SHA224withRSA", _RSA, "SHA224", _PKCS1 + "14"),
    _alg("SHA256withRSA", _RSA, "SHA256", _PKCS1 + "11"),
    _alg("SHA384withRSA", _RSA, "SHA384", _PKCS1 + "12"),
    _alg("SHA512withRSA", _RSA, "SHA512", _PKCS1 + "13"),
    _alg("SHA3_224withRSA", _RSA, "SHA3-224", _NIST_SIG + "13", "SHA3-224withRSA"),
    _alg("SHA3_256withRSA", _RSA, "SHA3-256", _NIST_SIG + "14", "SHA3-256withRSA"),
    _alg("SHA3_384withRSA", _RSA, "SHA3-384", _NIST_SIG + "15", "SHA3-384withRSA"),
    _alg("SHA3_512withRSA", _RSA, "SHA3-512", _NIST_SIG + "16", "SHA3-512withRSA"),
    _alg("RIPEMD128withRSA", _RSA, "RIPEMD128", _TELETRUST_RSA + "3"),
    _alg("RIPEMD160withRSA", _RSA, "RIPEMD160", _TELETRUST_RSA + "2"),
    _alg("RIPEMD256withRSA", _RSA, "RIPEMD256", _TELETRUST_RSA + "4"),
    _alg("GOST3411withGOST3410", Family.GOST3410, "GOST3411", "1.2.643.2.2.4"),
    _alg("GOST3411withECGOST3410", Family.ECGOST3410, "GOST3411", "1.2.643.2.2.3"),
    _alg(
        "GOST3411withECGOST3410_2012_256",
        Family.ECGOST3410_2012,
        "GOST3411-2012-256",
        "1.2.643.7.1.1.3.2",
        "GOST3411-2012-256WITHECGOST3410-2012-256",
    ),
    _alg(
        "GOST3411withECGOST3410_2012_512",
        Family.ECGOST3410_2012,
        "GOST3411-2012-512",
        "1.2.643.7.1.1.3.3",
        "GOST3411-2012-512WITHECGOST3410-2012-512",
    ),
    _alg("GOST3411withDSTU4145", Family.DSTU4145, "GOST3411", "1.2.804.2.1.1.1.1.3.1.1.1.1", known=False),
    _alg("SM3withSM2", _EC, "SM3", "1.2.156.10197.1.501"),
    _alg("Ed25519", Family.EDDSA25519, "SHA512", "1.3.101.112", known=False),
    _alg("Ed448", Family.EDDSA448, "SHAKE256", "1.3.101.113", known=False),
    _alg("RAINBOWwithSHA224", Family.RAINBOW, "SHA224", _RAINBOW + "2", known=False),
    _alg("RAINBOWwithSHA256", Family.RAINBOW, "SHA256", _RAINBOW + "3", known=False),
    _alg("RAINBOWwithSHA384", Family.RAINBOW, "SHA384", _RAINBOW + "4", known=False),
    _alg("RAINBOWwithSHA512", Family.RAINBOW, "SHA512", _RAINBOW + "5", known=False),
    _alg("SPHINCS256withSHA512", Family.SPHINCS256, "SHA512", _SPHINCS + "2"),
    _alg("SPHINCS256withSHA3_512", Family.SPHINCS256, "SHA3-512", _SPHINCS + "3"),
    _alg("XMSSwithSHA256", Family.XMSS, "SHA256", _XMSS + "1"),
    _alg("XMSSwithSHA512", Family.XMSS, "SHA512", _XMSS + "2"),
    _alg("XMSSwithSHAKE128", Family.XMSS, "SHAKE128", _XMSS + "3"),
    _alg("XMSSwithSHAKE256", Family.XMSS, "SHAKE256", _XMSS + "4"),
    _alg("XMSSMTwithSHA256", Family.XMSSMT, "SHA256", _XMSSMT + "1"),
    _alg("XMSSMTwithSHA512", Family.XMSSMT, "SHA512", _XMSSMT + "2"),
    _alg("XMSSMTwithSHAKE128", Family.XMSSMT, "SHAKE128", _XMSSMT + "3"),
    _alg("XMSSMTwithSHAKE256", Family.XMSSMT, "SHAKE256", _XMSSMT + "4"),
    _alg("qTESLA_P_I", Family.QTESLA, "qTESLA-p-I", "1.3.6.1.4.1.22554.2.4.4", "qTESLA-p-I"),
    _alg("qTESLA_P_III", Family.QTESLA, "qTESLA-p-III", "1.3.6.1.4.1.22554.2.4.5", "qTESLA-p-III"),
]

SIGNATURE_ALGORITHMS: Catalog[SignatureAlgorithmDescriptor] = Catalog(
    "signature algorithm", _ENTRIES, unique=lambda a: (a.oid,)
)


def all_signature_algorithms() -> Tuple[SignatureAlgorithmDescriptor, ...]:
    return SIGNATURE_ALGORITHMS.all()


def find_by_id(ident: str | None) -> SignatureAlgorithmDescriptor:
    return SIGNATURE_ALGORITHMS.find_by_id(ident)


def find_by_name(name: str | None) -> SignatureAlgorithmDescriptor:
    return SIGNATURE_ALGORITHMS.find_by("name", name)


def find_by_description(text: str | None) -> SignatureAlgorithmDescriptor:
    """Signature algorithms are described by their display name."""
    return find_by_name(text)


def find_by_oid(oid: str | None) -> SignatureAlgorithmDescriptor:
    require_text(oid, "signature algorithm oid")
    return SIGNATURE_ALGORITHMS.find_by("oid", oid.strip())  # type: ignore[union-attr]


__all__ = [
    "SignatureAlgorithmDescriptor",
    "SIGNATURE_ALGORITHMS",
    "all_signature_algorithms",
    "find_by_id",
    "find_by_name",
    "find_by_description",
    "find_by_oid",
]
