"""Map an arbitrary public key back to exactly one catalogued key type.

The result is persisted as ground truth, so every branch either finds a
single exact match or raises ``UnknownKeyType``. Explicit (unnamed) curve
parameters are never matched by value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

from asn1crypto import core, keys

from ..catalog import oids
from ..catalog.key_types import KEY_TYPES, Family, KeyTypeDescriptor
from ..errors import KeyLayoutError, UnknownKeyType
from ..utils.logging import get_logger
from .keyinfo import AlgorithmIdentifier, DstuParameters, GostPublicKeyParameters, PublicKeyInfo, load_public_key

log = get_logger()

_TAG_FAMILIES: Dict[str, Family] = {
    "RSA": Family.RSA,
    "DSA": Family.DSA,
    "EC": Family.EC,
    "GOST3410": Family.GOST3410,
    "ECGOST3410": Family.ECGOST3410,
    "ECGOST3410-2012": Family.ECGOST3410_2012,
    "DSTU4145": Family.DSTU4145,
    "Ed25519": Family.EDDSA25519,
    "Ed448": Family.EDDSA448,
    "Rainbow": Family.RAINBOW,
    "SPHINCS-256": Family.SPHINCS256,
    "XMSS": Family.XMSS,
    "XMSSMT": Family.XMSSMT,
}


def family_for_tag(tag: str | None) -> Family | None:
    if tag is None:
        return None
    if tag.startswith("qTESLA"):
        return Family.QTESLA
    return _TAG_FAMILIES.get(tag)


def round_key_size(bits: int) -> int:
    """Round a modulus size up to the next multiple of 128."""
    return ((bits + 127) // 128) * 128


# BouncyCastle's PQC provider writes these parameter layouts into the
# AlgorithmIdentifier. They are not standardised and have changed between
# provider releases, so they are decoded in one place only.


class SPHINCS256KeyParams(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("tree_digest", AlgorithmIdentifier),
    ]


class XMSSKeyParams(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("height", core.Integer),
        ("tree_digest", AlgorithmIdentifier),
    ]


class XMSSMTKeyParams(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("height", core.Integer),
        ("layers", core.Integer),
        ("tree_digest", AlgorithmIdentifier),
    ]


@dataclass(frozen=True)
class TreeParameters:
    digest: str
    height: int = 0
    layers: int = 0


_TREE_LAYOUTS = {
    Family.SPHINCS256: SPHINCS256KeyParams,
    Family.XMSS: XMSSKeyParams,
    Family.XMSSMT: XMSSMTKeyParams,
}


def read_tree_parameters(info: PublicKeyInfo) -> TreeParameters:
    """Tree digest, height and layers of a SPHINCS-256, XMSS or XMSS^MT key.

    Raises KeyLayoutError only when parameters are present but do not decode
    with the expected layout. A key without parameters (the IETF XMSS
    encodings carry none) or with an uncatalogued tree digest is a well
    formed key of an unknown type and raises UnknownKeyType.
    """
    family = family_for_tag(info.family_tag)
    layout = _TREE_LAYOUTS.get(family)  # type: ignore[arg-type]
    if layout is None:
        raise KeyLayoutError(f"{info.family_tag} keys carry no tree parameters")
    try:
        params = info.params_as(layout)
    except (ValueError, TypeError) as e:
        raise KeyLayoutError(f"{family} key parameters do not match {layout.__name__}") from e
    if params is None:
        raise UnknownKeyType(f"{family} key has no tree parameters")
    digest_oid = params["tree_digest"]["algorithm"].dotted
    digest = oids.TREE_DIGESTS.get(digest_oid)
    if digest is None:
        raise UnknownKeyType(f"unrecognised tree digest {digest_oid}")
    if family is Family.SPHINCS256:
        return TreeParameters(digest)
    height = params["height"].native
    layers = params["layers"].native if family is Family.XMSSMT else 0
    return TreeParameters(digest, height, layers)


def _single(family: Family, what: str, pred: Callable[[KeyTypeDescriptor], bool]) -> KeyTypeDescriptor:
    for kt in KEY_TYPES:
        if kt.family is family and pred(kt):
            return kt
    raise UnknownKeyType(f"no {family} key type for {what}")


def _by_parameter(family: Family, parameter: str | None) -> KeyTypeDescriptor:
    if parameter is None:
        raise UnknownKeyType(f"{family} key does not name its parameters")
    return _single(family, parameter, lambda kt: kt.parameter == parameter)


def _rsa_modulus_bits(info: PublicKeyInfo) -> int:
    try:
        return keys.RSAPublicKey.load(info.public_key)["modulus"].native.bit_length()
    except (ValueError, TypeError) as e:
        raise UnknownKeyType("RSA public key does not decode") from e


def _dsa_bits(info: PublicKeyInfo) -> int:
    try:
        params = info.params_as(keys.DSAParams)
        if params is not None:
            return params["p"].native.bit_length()
        return round_key_size(core.Integer.load(info.public_key).native.bit_length())
    except (ValueError, TypeError) as e:
        raise UnknownKeyType("DSA public key does not decode") from e


def _ec_curve(info: PublicKeyInfo) -> str:
    try:
        params = info.params_as(keys.ECDomainParameters)
    except (ValueError, TypeError) as e:
        raise UnknownKeyType("EC parameters do not decode") from e
    if params is None or params.name != "named":
        raise UnknownKeyType("EC key uses explicit curve parameters")
    oid = params.chosen.dotted
    name = oids.curve_name_for_oid(oid)
    if name is None:
        raise UnknownKeyType(f"EC curve {oid} is not catalogued")
    return name


def _gost_param_set(info: PublicKeyInfo) -> str:
    try:
        params = info.params_as(GostPublicKeyParameters)
    except (ValueError, TypeError) as e:
        raise UnknownKeyType("GOST parameters do not decode") from e
    if params is None:
        raise UnknownKeyType("GOST key has no parameter set")
    return params["public_key_param_set"].dotted


def _dstu_curve(info: PublicKeyInfo) -> str:
    try:
        params = info.params_as(DstuParameters)
        curve = params["curve"].dump() if params is not None else None
        if curve is None or curve[:1] != b"\x06":
            raise UnknownKeyType("DSTU 4145 key uses an explicit curve")
        return core.ObjectIdentifier.load(curve).dotted
    except (ValueError, TypeError) as e:
        raise UnknownKeyType("DSTU 4145 parameters do not decode") from e


def _identify_rsa(info):
    bits = round_key_size(_rsa_modulus_bits(info))
    return _single(Family.RSA, f"{bits} bits", lambda kt: kt.security_bits == bits)


def _identify_dsa(info):
    bits = _dsa_bits(info)
    return _single(Family.DSA, f"{bits} bits", lambda kt: kt.security_bits == bits)


def _identify_ec(info):
    return _by_parameter(Family.EC, _ec_curve(info))


def _identify_gost94(info):
    return _by_parameter(Family.GOST3410, _gost_param_set(info))


def _identify_ecgost(family):
    def _match(info):
        oid = _gost_param_set(info)
        return _by_parameter(family, oids.ecgost_param_set_for_oid(oid) or oid)

    return _match


def _identify_dstu(info):
    return _by_parameter(Family.DSTU4145, _dstu_curve(info))


def _singleton(family):
    return lambda info: _single(family, "singleton", lambda kt: True)


def _identify_sphincs(info):
    tree = read_tree_parameters(info)
    return _by_parameter(Family.SPHINCS256, tree.digest)


def _identify_xmss(family):
    def _match(info):
        tree = read_tree_parameters(info)
        return _single(
            family,
            f"height {tree.height} layers {tree.layers} {tree.digest}",
            lambda kt: (kt.tree_height, kt.tree_layers, kt.parameter) == (tree.height, tree.layers, tree.digest),
        )

    return _match


def _identify_qtesla(info):
    return _by_parameter(Family.QTESLA, info.family_tag)


_IDENTIFIERS: Dict[Family, Callable[[PublicKeyInfo], KeyTypeDescriptor]] = {
    Family.RSA: _identify_rsa,
    Family.DSA: _identify_dsa,
    Family.EC: _identify_ec,
    Family.GOST3410: _identify_gost94,
    Family.ECGOST3410: _identify_ecgost(Family.ECGOST3410),
    Family.ECGOST3410_2012: _identify_ecgost(Family.ECGOST3410_2012),
    Family.DSTU4145: _identify_dstu,
    Family.EDDSA25519: _singleton(Family.EDDSA25519),
    Family.EDDSA448: _singleton(Family.EDDSA448),
    Family.RAINBOW: _singleton(Family.RAINBOW),
    Family.SPHINCS256: _identify_sphincs,
    Family.XMSS: _identify_xmss(Family.XMSS),
    Family.XMSSMT: _identify_xmss(Family.XMSSMT),
    Family.QTESLA: _identify_qtesla,
}


def family_of(handle: Any) -> str | None:
    """Provider family tag of a public key, or None for an unknown algorithm."""
    return load_public_key(handle).family_tag


def identify(handle: Any) -> KeyTypeDescriptor:
    info = load_public_key(handle)
    family = family_for_tag(info.family_tag)
    if family is None:
        log.debug("identify: unknown public key algorithm %s", info.algorithm_oid)
        raise UnknownKeyType(f"unrecognised public key algorithm {info.algorithm_oid}")
    try:
        return _IDENTIFIERS[family](info)
    except UnknownKeyType as e:
        log.debug("identify: %s key not matched: %s", family, e)
        raise


def key_length(handle: Any) -> int:
    """Nominal key size in bits, or 0 when it cannot be determined."""
    info = load_public_key(handle)
    family = family_for_tag(info.family_tag)
    if family is Family.RSA:
        return round_key_size(_rsa_modulus_bits(info))
    if family is Family.DSA:
        return _dsa_bits(info)
    if family is None:
        return 0
    try:
        return identify(info).security_bits
    except (UnknownKeyType, KeyLayoutError):
        if family is Family.ECGOST3410:
            return 239
        return 0


__all__ = [
    "SPHINCS256KeyParams",
    "XMSSKeyParams",
    "XMSSMTKeyParams",
    "TreeParameters",
    "family_for_tag",
    "family_of",
    "identify",
    "key_length",
    "read_tree_parameters",
    "round_key_size",
]
