"""Catalog of every supported asymmetric key type.

Each ``KeyTypeDescriptor.id`` is persisted verbatim in stored certificate and
template metadata, so ids must never be renamed or reused. The table is built
once at import and is read-only afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from . import oids
from .table import Catalog


class Family(str, Enum):
    RSA = "RSA"
    DSA = "DSA"
    EC = "EC"
    GOST3410 = "GOST3410"
    ECGOST3410 = "ECGOST3410"
    ECGOST3410_2012 = "ECGOST3410-2012"
    DSTU4145 = "DSTU4145"
    EDDSA25519 = "EdDSA25519"
    EDDSA448 = "EdDSA448"
    RAINBOW = "Rainbow"
    SPHINCS256 = "SPHINCS256"
    XMSS = "XMSS"
    XMSSMT = "XMSSMT"
    QTESLA = "qTESLA"

    def __str__(self) -> str:
        return self.value


PQC_FAMILIES = frozenset({Family.RAINBOW, Family.SPHINCS256, Family.XMSS, Family.XMSSMT, Family.QTESLA})


def provider_for(family: Family) -> str:
    """Name of the JCA provider that can generate or sign with ``family``."""
    return "BCPQC" if family in PQC_FAMILIES else "BC"


@dataclass(frozen=True)
class KeyTypeDescriptor:
    id: str
    family: Family
    security_bits: int
    parameter: str | None
    description: str
    tree_height: int = 0
    tree_layers: int = 0

    @property
    def provider(self) -> str:
        return provider_for(self.family)

    @property
    def sort_key(self) -> Tuple[str, int, int, int]:
        return (self.family.value, self.security_bits, self.tree_height, self.tree_layers)

    def __str__(self) -> str:
        return self.id


def _rsa() -> List[KeyTypeDescriptor]:
    return [
        KeyTypeDescriptor(f"RSA_{bits}", Family.RSA, bits, None, f"RSA {bits}")
        for bits in (512, 1024, 2048, 4096, 8192, 16384)
    ]


def _dsa() -> List[KeyTypeDescriptor]:
    return [
        KeyTypeDescriptor(f"DSA_{bits}", Family.DSA, bits, None, f"DSA {bits}")
        for bits in (512, 1024, 2048, 3072)
    ]


# (curve name, field size, description prefix)
_EC_CURVES: List[Tuple[str, int, str]] = [
    ("secp112r1", 112, "SEC"), ("secp112r2", 112, "SEC"),
    ("secp128r1", 128, "SEC"), ("secp128r2", 128, "SEC"),
    ("secp160k1", 160, "SEC"), ("secp160r1", 160, "SEC"), ("secp160r2", 160, "SEC"),
    ("secp192k1", 192, "SEC"), ("secp192r1", 192, "SEC"),
    ("secp224k1", 224, "SEC"), ("secp224r1", 224, "SEC"),
    ("secp256k1", 256, "SEC"), ("secp256r1", 256, "SEC"),
    ("secp384r1", 384, "SEC"), ("secp521r1", 521, "SEC"),
    ("sect113r1", 113, "SEC"), ("sect113r2", 113, "SEC"),
    ("sect131r1", 131, "SEC"), ("sect131r2", 131, "SEC"),
    ("sect163k1", 163, "SEC"), ("sect163r1", 163, "SEC"), ("sect163r2", 163, "SEC"),
    ("sect193r1", 193, "SEC"), ("sect193r2", 193, "SEC"),
    ("sect233k1", 233, "SEC"), ("sect233r1", 233, "SEC"),
    ("sect239k1", 239, "SEC"),
    ("sect283k1", 283, "SEC"), ("sect283r1", 283, "SEC"),
    ("sect409k1", 409, "SEC"), ("sect409r1", 409, "SEC"),
    ("sect571k1", 571, "SEC"), ("sect571r1", 571, "SEC"),
    ("B-163", 163, "NIST"), ("B-233", 233, "NIST"), ("B-283", 283, "NIST"),
    ("B-409", 409, "NIST"), ("B-571", 571, "NIST"),
    ("K-163", 163, "NIST"), ("K-233", 233, "NIST"), ("K-283", 283, "NIST"),
    ("K-409", 409, "NIST"), ("K-571", 571, "NIST"),
    ("P-192", 192, "NIST"), ("P-224", 224, "NIST"), ("P-256", 256, "NIST"),
    ("P-384", 384, "NIST"), ("P-521", 521, "NIST"),
    ("c2pnb163v1", 163, "ANSI X9.62"), ("c2pnb163v2", 163, "ANSI X9.62"),
    ("c2pnb163v3", 163, "ANSI X9.62"), ("c2pnb176w1", 176, "ANSI X9.62"),
    ("c2pnb208w1", 208, "ANSI X9.62"), ("c2pnb272w1", 272, "ANSI X9.62"),
    ("c2pnb304w1", 304, "ANSI X9.62"), ("c2pnb368w1", 368, "ANSI X9.62"),
    ("c2tnb191v1", 191, "ANSI X9.62"), ("c2tnb191v2", 191, "ANSI X9.62"),
    ("c2tnb191v3", 191, "ANSI X9.62"), ("c2tnb239v1", 239, "ANSI X9.62"),
    ("c2tnb239v2", 239, "ANSI X9.62"), ("c2tnb239v3", 239, "ANSI X9.62"),
    ("c2tnb359v1", 359, "ANSI X9.62"), ("c2tnb431r1", 431, "ANSI X9.62"),
    ("prime192v1", 192, "ANSI X9.62"), ("prime192v2", 192, "ANSI X9.62"),
    ("prime192v3", 192, "ANSI X9.62"), ("prime239v1", 239, "ANSI X9.62"),
    ("prime239v2", 239, "ANSI X9.62"), ("prime239v3", 239, "ANSI X9.62"),
    ("prime256v1", 256, "ANSI X9.62"),
    ("brainpoolP160r1", 160, "TeleTrusT"), ("brainpoolP160t1", 160, "TeleTrusT"),
    ("brainpoolP192r1", 192, "TeleTrusT"), ("brainpoolP192t1", 192, "TeleTrusT"),
    ("brainpoolP224r1", 224, "TeleTrusT"), ("brainpoolP224t1", 224, "TeleTrusT"),
    ("brainpoolP256r1", 256, "TeleTrusT"), ("brainpoolP256t1", 256, "TeleTrusT"),
    ("brainpoolP320r1", 320, "TeleTrusT"), ("brainpoolP320t1", 320, "TeleTrusT"),
    ("brainpoolP384r1", 384, "TeleTrusT"), ("brainpoolP384t1", 384, "TeleTrusT"),
    ("brainpoolP512r1", 512, "TeleTrusT"), ("brainpoolP512t1", 512, "TeleTrusT"),
    ("FRP256v1", 256, "ANSI"),
    ("sm2p256v1", 256, "GM"),
    ("wapip192v1", 192, "GM"),
]


def _ec() -> List[KeyTypeDescriptor]:
    return [
        KeyTypeDescriptor("EC_" + name.replace("-", ""), Family.EC, bits, name, f"EC {label} {name}")
        for name, bits, label in _EC_CURVES
    ]


def _gost() -> List[KeyTypeDescriptor]:
    g94, g01, g12 = Family.GOST3410, Family.ECGOST3410, Family.ECGOST3410_2012
    return [
        KeyTypeDescriptor("GOST_3410_94_A", g94, 1024, oids.GOST94_CRYPTOPRO_A, "GostR34.10-94 CryptoPro-A"),
        KeyTypeDescriptor("GOST_3410_94_B", g94, 1024, oids.GOST94_CRYPTOPRO_B, "GostR34.10-94 CryptoPro-B"),
        KeyTypeDescriptor("GOST_3410_94_XA", g94, 1024, oids.GOST94_CRYPTOPRO_XCHA, "GostR34.10-94 CryptoPro-XchA"),
        KeyTypeDescriptor("GOST_3410_2001_A", g01, 239, "GostR3410-2001-CryptoPro-A", "GostR34.10-2001 CryptoPro-A"),
        KeyTypeDescriptor("GOST_3410_2001_B", g01, 239, "GostR3410-2001-CryptoPro-B", "GostR34.10-2001 CryptoPro-B"),
        KeyTypeDescriptor("GOST_3410_2001_C", g01, 239, "GostR3410-2001-CryptoPro-C", "GostR34.10-2001 CryptoPro-C"),
        KeyTypeDescriptor("GOST_3410_2001_XA", g01, 239, "GostR3410-2001-CryptoPro-XchA", "GostR34.10-2001 CryptoPro-XchA"),
        KeyTypeDescriptor("GOST_3410_2001_XB", g01, 239, "GostR3410-2001-CryptoPro-XchB", "GostR34.10-2001 CryptoPro-XchB"),
        KeyTypeDescriptor("GOST_3410_2012_256_A", g12, 256, "Tc26-Gost-3410-12-256-paramSetA", "GostR34.10-2012-256 SetA"),
        KeyTypeDescriptor("GOST_3410_2012_512_A", g12, 512, "Tc26-Gost-3410-12-512-paramSetA", "GostR34.10-2012-512 SetA"),
        KeyTypeDescriptor("GOST_3410_2012_512_B", g12, 512, "Tc26-Gost-3410-12-512-paramSetB", "GostR34.10-2012-512 SetB"),
        KeyTypeDescriptor("GOST_3410_2012_512_C", g12, 512, "Tc26-Gost-3410-12-512-paramSetC", "GostR34.10-2012-512 SetC"),
    ]


def _dstu() -> List[KeyTypeDescriptor]:
    sizes = (163, 167, 173, 179, 191, 233, 257, 307, 367, 431)
    return [
        KeyTypeDescriptor(
            f"DSTU4145_{i}", Family.DSTU4145, bits, f"{oids.DSTU4145_CURVE_PREFIX}{i}", f"DSTU 4145-2002-{i}"
        )
        for i, bits in enumerate(sizes)
    ]


def _post_quantum() -> List[KeyTypeDescriptor]:
    out = [
        KeyTypeDescriptor("ED25519", Family.EDDSA25519, 256, None, "EdDSA Ed25519"),
        KeyTypeDescriptor("ED448", Family.EDDSA448, 448, None, "EdDSA Ed448"),
        KeyTypeDescriptor("Rainbow", Family.RAINBOW, 1024, None, "Rainbow"),
        KeyTypeDescriptor("SPHINCS_SHA512_256", Family.SPHINCS256, 256, "SHA512-256", "SPHINCS256 SHA512-256"),
        KeyTypeDescriptor("SPHINCS_SHA3_256", Family.SPHINCS256, 256, "SHA3-256", "SPHINCS256 SHA3-256"),
    ]
    # XMSS / XMSSMT heights and layers from RFC 8391
    digests = [("SHA2", 256, "SHA256"), ("SHA2", 512, "SHA512"), ("SHAKE", 256, "SHAKE128"), ("SHAKE", 512, "SHAKE256")]
    for kind, bits, digest in digests:
        for height in (10, 16, 20):
            out.append(
                KeyTypeDescriptor(
                    f"XMSS_{kind}_{height}_{bits}", Family.XMSS, bits, digest, f"XMSS {height} {digest}", height, 0
                )
            )
    for kind, bits, digest in digests:
        for height, layers in ((20, 2), (20, 4), (40, 2), (40, 4), (40, 8), (60, 3), (60, 6), (60, 12)):
            out.append(
                KeyTypeDescriptor(
                    f"XMSSMT_{kind}_{height}_{layers}_{bits}",
                    Family.XMSSMT,
                    bits,
                    digest,
                    f"XMSSMT {height}/{layers} {digest}",
                    height,
                    layers,
                )
            )
    out.append(KeyTypeDescriptor("qTESLA_P_I", Family.QTESLA, 5184 * 8, "qTESLA-p-I", "qTESLA-p-I"))
    # stored labels carry this spelling
    out.append(KeyTypeDescriptor("qTESLA_P_III", Family.QTESLA, 12352 * 8, "qTESLA-p-III", "qTELSA-p-III"))
    return out


KEY_TYPES: Catalog[KeyTypeDescriptor] = Catalog(
    "key type",
    _rsa() + _dsa() + _ec() + _gost() + _dstu() + _post_quantum(),
    unique=lambda k: (k.family, k.security_bits, k.parameter, k.tree_height, k.tree_layers),
)


def all_key_types() -> Tuple[KeyTypeDescriptor, ...]:
    return KEY_TYPES.all()


def find_by_id(ident: str | None) -> KeyTypeDescriptor:
    return KEY_TYPES.find_by_id(ident)


def find_by_description(text: str | None) -> KeyTypeDescriptor:
    return KEY_TYPES.find_by("description", text)


def describe(ident: str | None) -> str:
    """Human label for a persisted key type id."""
    return KEY_TYPES.find_by_id(ident).description


def of_family(family: Family) -> List[KeyTypeDescriptor]:
    return [k for k in KEY_TYPES if k.family is family]


__all__ = [
    "Family",
    "KeyTypeDescriptor",
    "KEY_TYPES",
    "PQC_FAMILIES",
    "provider_for",
    "all_key_types",
    "find_by_id",
    "find_by_description",
    "describe",
    "of_family",
]
