"""Signature algorithms compatible with a key type, and the default choice.

``for_key_type`` gives the ordered ladder offered for a key type;
``for_algorithm`` gives the sibling ladder of an already chosen algorithm and
is a closure: feeding any member back in returns the same list.
"""
from __future__ import annotations

from typing import Any, Dict, List

from ..catalog import oids
from ..catalog.key_types import Family, KeyTypeDescriptor
from ..catalog.signature_algorithms import SIGNATURE_ALGORITHMS, SignatureAlgorithmDescriptor, find_by_id
from ..errors import KeyLayoutError, UnknownKeyType
from ..utils.logging import get_logger
from .identify import family_for_tag, identify
from .keyinfo import load_public_key

log = get_logger()


def _ladder(*ids: str) -> List[SignatureAlgorithmDescriptor]:
    return [find_by_id(i) for i in ids]


_EC_LADDER = (
    "SHA1withECDSA", "SHA224withECDSA", "SHA256withECDSA", "SHA384withECDSA", "SHA512withECDSA",
    "SHA3_224withECDSA", "SHA3_256withECDSA", "SHA3_384withECDSA", "SHA3_512withECDSA",
)
_DSA_LADDER = (
    "SHA1withDSA", "SHA224withDSA", "SHA256withDSA", "SHA384withDSA", "SHA512withDSA",
    "SHA3_224withDSA", "SHA3_256withDSA", "SHA3_384withDSA", "SHA3_512withDSA",
)
_RSA_LADDER = (
    "MD2withRSA", "MD5withRSA", "SHA1withRSA", "SHA224withRSA", "SHA256withRSA", "SHA384withRSA",
    "SHA512withRSA", "SHA3_224withRSA", "SHA3_256withRSA", "SHA3_384withRSA", "SHA3_512withRSA",
    "RIPEMD128withRSA", "RIPEMD160withRSA", "RIPEMD256withRSA",
)
# digests too large for a sub-1024-bit modulus are withheld
_RSA_SHORT_LADDER = (
    "MD2withRSA", "MD5withRSA", "SHA1withRSA", "SHA224withRSA", "SHA256withRSA",
    "RIPEMD128withRSA", "RIPEMD160withRSA",
)
_RAINBOW_LADDER = ("RAINBOWwithSHA224", "RAINBOWwithSHA256", "RAINBOWwithSHA384", "RAINBOWwithSHA512")
_XMSS_LADDER = ("XMSSwithSHA256", "XMSSwithSHA512", "XMSSwithSHAKE128", "XMSSwithSHAKE256")
_XMSSMT_LADDER = ("XMSSMTwithSHA256", "XMSSMTwithSHA512", "XMSSMTwithSHAKE128", "XMSSMTwithSHAKE256")

_SM2 = "SM3withSM2"

# families whose ladder does not depend on the individual key type
_FAMILY_LADDERS: Dict[Family, tuple] = {
    Family.EC: _EC_LADDER,
    Family.DSA: _DSA_LADDER,
    Family.RSA: _RSA_LADDER,
    Family.GOST3410: ("GOST3411withGOST3410",),
    Family.ECGOST3410: ("GOST3411withECGOST3410",),
    Family.DSTU4145: ("GOST3411withDSTU4145",),
    Family.EDDSA25519: ("Ed25519",),
    Family.EDDSA448: ("Ed448",),
    Family.RAINBOW: _RAINBOW_LADDER,
    Family.XMSS: _XMSS_LADDER,
    Family.XMSSMT: _XMSSMT_LADDER,
}

_SPHINCS_BY_DIGEST = {
    "SHA512-256": "SPHINCS256withSHA512",
    "SHA3-256": "SPHINCS256withSHA3_512",
}

_FAMILY_DEFAULTS: Dict[Family, str] = {
    Family.EC: "SHA512withECDSA",
    Family.RSA: "SHA256withRSA",
    Family.DSA: "SHA1withDSA",
    Family.GOST3410: "GOST3411withGOST3410",
    Family.ECGOST3410: "GOST3411withECGOST3410",
    Family.DSTU4145: "GOST3411withDSTU4145",
    Family.EDDSA25519: "Ed25519",
    Family.EDDSA448: "Ed448",
    Family.RAINBOW: "RAINBOWwithSHA512",
    Family.XMSS: "XMSSwithSHA512",
    Family.XMSSMT: "XMSSMTwithSHA512",
}


def _gost2012(bits: int) -> str:
    return "GOST3411withECGOST3410_2012_512" if bits > 256 else "GOST3411withECGOST3410_2012_256"


def for_key_type(key_type: KeyTypeDescriptor) -> List[SignatureAlgorithmDescriptor]:
    family = key_type.family
    if family is Family.EC and key_type.parameter == oids.SM2_CURVE:
        return _ladder(_SM2)
    if family is Family.RSA and key_type.security_bits <= 512:
        return _ladder(*_RSA_SHORT_LADDER)
    if family is Family.ECGOST3410_2012:
        return _ladder(_gost2012(key_type.security_bits))
    if family is Family.SPHINCS256:
        ident = _SPHINCS_BY_DIGEST.get(key_type.parameter or "")
        return _ladder(ident) if ident else []
    if family is Family.QTESLA:
        return [a for a in _family_algorithms(Family.QTESLA) if a.name == key_type.parameter]
    return _ladder(*_FAMILY_LADDERS.get(family, ()))


def _family_algorithms(family: Family) -> List[SignatureAlgorithmDescriptor]:
    return [a for a in SIGNATURE_ALGORITHMS if a.target_family is family]


def for_algorithm(algorithm: SignatureAlgorithmDescriptor) -> List[SignatureAlgorithmDescriptor]:
    """Sibling ladder of ``algorithm``; RSA always yields the full ladder."""
    if algorithm.id == _SM2:
        return [algorithm]
    ladder = _FAMILY_LADDERS.get(algorithm.target_family)
    if ladder is None or len(ladder) == 1:
        return [algorithm]
    return _ladder(*ladder)


def for_type(value: KeyTypeDescriptor | SignatureAlgorithmDescriptor) -> List[SignatureAlgorithmDescriptor]:
    if isinstance(value, SignatureAlgorithmDescriptor):
        return for_algorithm(value)
    if isinstance(value, KeyTypeDescriptor):
        return for_key_type(value)
    raise TypeError(f"expected a key type or signature algorithm, got {type(value).__name__}")


def default_for_key_type(key_type: KeyTypeDescriptor) -> SignatureAlgorithmDescriptor | None:
    family = key_type.family
    if family is Family.EC and key_type.parameter == oids.SM2_CURVE:
        return find_by_id(_SM2)
    if family in (Family.ECGOST3410_2012, Family.SPHINCS256, Family.QTESLA):
        ladder = for_key_type(key_type)
        return ladder[0] if ladder else None
    ident = _FAMILY_DEFAULTS.get(family)
    return find_by_id(ident) if ident else None


def default_for(handle: Any) -> SignatureAlgorithmDescriptor | None:
    """Default signature algorithm for a public key, or None when there is none.

    None means the caller must ask for an explicit choice.
    """
    try:
        info = load_public_key(handle)
    except UnknownKeyType as e:
        log.debug("default_for: %s", e)
        return None
    family = family_for_tag(info.family_tag)
    if family is None:
        return None
    try:
        return default_for_key_type(identify(info))
    except (UnknownKeyType, KeyLayoutError) as e:
        log.debug("default_for: %s key not identified: %s", family, e)
    if family is Family.ECGOST3410_2012:
        return find_by_id(_gost2012(512 if info.algorithm_oid == oids.GOST2012_512_KEY else 256))
    ident = _FAMILY_DEFAULTS.get(family)
    return find_by_id(ident) if ident else None


__all__ = ["for_key_type", "for_algorithm", "for_type", "default_for", "default_for_key_type"]
