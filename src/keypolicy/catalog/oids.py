"""Object identifiers used to recognise public keys and their parameters.

Several EC curves are known under more than one name (NIST P-256, X9.62
prime256v1 and SEC secp256r1 share one OID). ``EC_CURVES`` lists every name;
``curve_name_for_oid`` returns the canonical one, which is the first name
registered for the OID. Groups are registered in BouncyCastle's named-curve
lookup order (X9.62, SEC, NIST, TeleTrusT, ANSSI, GM/T), so stored keys
resolve to the same name the provider reports: prime256v1 rather than
secp256r1, sect163k1 rather than K-163.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

_SEC = "1.3.132.0."
_X962_PRIME = "1.2.840.10045.3.1."
_X962_C2 = "1.2.840.10045.3.0."
_BRAINPOOL = "1.3.36.3.3.2.8.1.1."

EC_CURVES: List[Tuple[str, str]] = [
    # ANSI X9.62
    ("c2pnb163v1", _X962_C2 + "1"),
    ("c2pnb163v2", _X962_C2 + "2"),
    ("c2pnb163v3", _X962_C2 + "3"),
    ("c2pnb176w1", _X962_C2 + "4"),
    ("c2tnb191v1", _X962_C2 + "5"),
    ("c2tnb191v2", _X962_C2 + "6"),
    ("c2tnb191v3", _X962_C2 + "7"),
    ("c2pnb208w1", _X962_C2 + "10"),
    ("c2tnb239v1", _X962_C2 + "11"),
    ("c2tnb239v2", _X962_C2 + "12"),
    ("c2tnb239v3", _X962_C2 + "13"),
    ("c2pnb272w1", _X962_C2 + "16"),
    ("c2pnb304w1", _X962_C2 + "17"),
    ("c2tnb359v1", _X962_C2 + "18"),
    ("c2pnb368w1", _X962_C2 + "19"),
    ("c2tnb431r1", _X962_C2 + "20"),
    ("prime192v1", _X962_PRIME + "1"),
    ("prime192v2", _X962_PRIME + "2"),
    ("prime192v3", _X962_PRIME + "3"),
    ("prime239v1", _X962_PRIME + "4"),
    ("prime239v2", _X962_PRIME + "5"),
    ("prime239v3", _X962_PRIME + "6"),
    ("prime256v1", _X962_PRIME + "7"),
    # SEC 2 prime curves
    ("secp112r1", _SEC + "6"),
    ("secp112r2", _SEC + "7"),
    ("secp128r1", _SEC + "28"),
    ("secp128r2", _SEC + "29"),
    ("secp160k1", _SEC + "9"),
    ("secp160r1", _SEC + "8"),
    ("secp160r2", _SEC + "30"),
    ("secp192k1", _SEC + "31"),
    ("secp192r1", _X962_PRIME + "1"),
    ("secp224k1", _SEC + "32"),
    ("secp224r1", _SEC + "33"),
    ("secp256k1", _SEC + "10"),
    ("secp256r1", _X962_PRIME + "7"),
    ("secp384r1", _SEC + "34"),
    ("secp521r1", _SEC + "35"),
    # SEC 2 binary curves
    ("sect113r1", _SEC + "4"),
    ("sect113r2", _SEC + "5"),
    ("sect131r1", _SEC + "22"),
    ("sect131r2", _SEC + "23"),
    ("sect163k1", _SEC + "1"),
    ("sect163r1", _SEC + "2"),
    ("sect163r2", _SEC + "15"),
    ("sect193r1", _SEC + "24"),
    ("sect193r2", _SEC + "25"),
    ("sect233k1", _SEC + "26"),
    ("sect233r1", _SEC + "27"),
    ("sect239k1", _SEC + "3"),
    ("sect283k1", _SEC + "16"),
    ("sect283r1", _SEC + "17"),
    ("sect409k1", _SEC + "36"),
    ("sect409r1", _SEC + "37"),
    ("sect571k1", _SEC + "38"),
    ("sect571r1", _SEC + "39"),
    # NIST aliases of SEC curves
    ("B-163", _SEC + "15"),
    ("B-233", _SEC + "27"),
    ("B-283", _SEC + "17"),
    ("B-409", _SEC + "37"),
    ("B-571", _SEC + "39"),
    ("K-163", _SEC + "1"),
    ("K-233", _SEC + "26"),
    ("K-283", _SEC + "16"),
    ("K-409", _SEC + "36"),
    ("K-571", _SEC + "38"),
    ("P-192", _X962_PRIME + "1"),
    ("P-224", _SEC + "33"),
    ("P-256", _X962_PRIME + "7"),
    ("P-384", _SEC + "34"),
    ("P-521", _SEC + "35"),
    # TeleTrusT
    ("brainpoolP160r1", _BRAINPOOL + "1"),
    ("brainpoolP160t1", _BRAINPOOL + "2"),
    ("brainpoolP192r1", _BRAINPOOL + "3"),
    ("brainpoolP192t1", _BRAINPOOL + "4"),
    ("brainpoolP224r1", _BRAINPOOL + "5"),
    ("brainpoolP224t1", _BRAINPOOL + "6"),
    ("brainpoolP256r1", _BRAINPOOL + "7"),
    ("brainpoolP256t1", _BRAINPOOL + "8"),
    ("brainpoolP320r1", _BRAINPOOL + "9"),
    ("brainpoolP320t1", _BRAINPOOL + "10"),
    ("brainpoolP384r1", _BRAINPOOL + "11"),
    ("brainpoolP384t1", _BRAINPOOL + "12"),
    ("brainpoolP512r1", _BRAINPOOL + "13"),
    ("brainpoolP512t1", _BRAINPOOL + "14"),
    # ANSSI and GM/T
    ("FRP256v1", "1.2.250.1.223.101.256.1"),
    ("sm2p256v1", "1.2.156.10197.1.301"),
    ("wapip192v1", "1.2.156.11235.1.1.2.1"),
]

SM2_CURVE = "sm2p256v1"

# GOST R 34.10-2001 and 34.10-2012 parameter sets
ECGOST_PARAM_SETS: List[Tuple[str, str]] = [
    ("GostR3410-2001-CryptoPro-A", "1.2.643.2.2.35.1"),
    ("GostR3410-2001-CryptoPro-B", "1.2.643.2.2.35.2"),
    ("GostR3410-2001-CryptoPro-C", "1.2.643.2.2.35.3"),
    ("GostR3410-2001-CryptoPro-XchA", "1.2.643.2.2.36.0"),
    ("GostR3410-2001-CryptoPro-XchB", "1.2.643.2.2.36.1"),
    ("Tc26-Gost-3410-12-256-paramSetA", "1.2.643.7.1.2.1.1.1"),
    ("Tc26-Gost-3410-12-512-paramSetA", "1.2.643.7.1.2.1.2.1"),
    ("Tc26-Gost-3410-12-512-paramSetB", "1.2.643.7.1.2.1.2.2"),
    ("Tc26-Gost-3410-12-512-paramSetC", "1.2.643.7.1.2.1.2.3"),
]

# GOST R 34.10-94 parameter sets are catalogued by OID
GOST94_CRYPTOPRO_A = "1.2.643.2.2.32.2"
GOST94_CRYPTOPRO_B = "1.2.643.2.2.32.3"
GOST94_CRYPTOPRO_XCHA = "1.2.643.2.2.33.1"

DSTU4145_CURVE_PREFIX = "1.2.804.2.1.1.1.1.3.1.1.2."

# SubjectPublicKeyInfo algorithm OID -> provider family tag
PUBLIC_KEY_ALGORITHMS: Dict[str, str] = {
    "1.2.840.113549.1.1.1": "RSA",
    "1.2.840.10040.4.1": "DSA",
    "1.2.840.10045.2.1": "EC",
    "1.2.643.2.2.20": "GOST3410",
    "1.2.643.2.2.19": "ECGOST3410",
    "1.2.643.7.1.1.1.1": "ECGOST3410-2012",
    "1.2.643.7.1.1.1.2": "ECGOST3410-2012",
    "1.2.804.2.1.1.1.1.3.1.1": "DSTU4145",
    "1.2.804.2.1.1.1.1.3.1.1.1.1": "DSTU4145",
    "1.3.101.112": "Ed25519",
    "1.3.101.113": "Ed448",
    "1.3.6.1.4.1.8301.3.1.3.5.3.2": "Rainbow",
    "1.3.6.1.4.1.22554.2.1": "SPHINCS-256",
    "1.3.6.1.4.1.22554.2.2": "XMSS",
    "0.4.0.127.0.15.1.1.13.0": "XMSS",
    "1.3.6.1.4.1.22554.2.3": "XMSSMT",
    "0.4.0.127.0.15.1.1.14.0": "XMSSMT",
    "1.3.6.1.4.1.22554.2.4.1": "qTESLA-I",
    "1.3.6.1.4.1.22554.2.4.2": "qTESLA-III-size",
    "1.3.6.1.4.1.22554.2.4.3": "qTESLA-III-speed",
    "1.3.6.1.4.1.22554.2.4.4": "qTESLA-p-I",
    "1.3.6.1.4.1.22554.2.4.5": "qTESLA-p-III",
}

GOST2012_512_KEY = "1.2.643.7.1.1.1.2"

# Tree digests used by SPHINCS-256 and XMSS/XMSSMT key parameters
TREE_DIGESTS: Dict[str, str] = {
    "2.16.840.1.101.3.4.2.1": "SHA256",
    "2.16.840.1.101.3.4.2.3": "SHA512",
    "2.16.840.1.101.3.4.2.6": "SHA512-256",
    "2.16.840.1.101.3.4.2.8": "SHA3-256",
    "2.16.840.1.101.3.4.2.11": "SHAKE128",
    "2.16.840.1.101.3.4.2.12": "SHAKE256",
}

_CURVE_BY_NAME: Dict[str, str] = dict(EC_CURVES)
_CURVE_BY_OID: Dict[str, str] = {}
for _name, _oid in EC_CURVES:
    _CURVE_BY_OID.setdefault(_oid, _name)

_ECGOST_BY_OID: Dict[str, str] = {oid: name for name, oid in ECGOST_PARAM_SETS}
_DIGEST_BY_NAME: Dict[str, str] = {name: oid for oid, name in TREE_DIGESTS.items()}


def curve_oid(name: str) -> str:
    return _CURVE_BY_NAME[name]


def curve_name_for_oid(oid: str) -> str | None:
    """Canonical curve name for a named-curve OID, or None if not catalogued."""
    return _CURVE_BY_OID.get(oid)


def curve_aliases(name: str) -> List[str]:
    """Every registered name sharing ``name``'s OID, canonical name first."""
    oid = _CURVE_BY_NAME[name]
    return [n for n, o in EC_CURVES if o == oid]


def ecgost_param_set_for_oid(oid: str) -> str | None:
    return _ECGOST_BY_OID.get(oid)


def ecgost_param_set_oid(name: str) -> str:
    return dict(ECGOST_PARAM_SETS)[name]


def tree_digest_oid(name: str) -> str:
    return _DIGEST_BY_NAME[name]


def public_key_algorithm_oid(tag: str) -> str:
    """First SPKI algorithm OID registered for a family tag."""
    for oid, t in PUBLIC_KEY_ALGORITHMS.items():
        if t == tag:
            return oid
    raise KeyError(tag)
