"""ASN.1 SubjectPublicKeyInfo builders for key shapes cryptography cannot generate."""
from __future__ import annotations

from asn1crypto import core, keys

from keypolicy.catalog import oids
from keypolicy.crypto.identify import SPHINCS256KeyParams, XMSSKeyParams, XMSSMTKeyParams
from keypolicy.crypto.keyinfo import DstuParameters, GostPublicKeyParameters, SubjectPublicKeyInfo

GOST_DIGEST_PARAM_SET = "1.2.643.2.2.30.1"


def spki(oid: str, params: core.Asn1Value | bytes | None = None, key: bytes = b"\x04" + b"\x01" * 32) -> bytes:
    """DER SubjectPublicKeyInfo for an arbitrary algorithm OID."""
    algorithm = {"algorithm": oid}
    if params is not None:
        raw = params if isinstance(params, bytes) else params.dump()
        algorithm["parameters"] = core.Any.load(raw)
    return SubjectPublicKeyInfo({"algorithm": algorithm, "public_key": key}).dump()


def tag_oid(tag: str) -> str:
    return oids.public_key_algorithm_oid(tag)


def named_curve(oid: str) -> keys.ECDomainParameters:
    return keys.ECDomainParameters(name="named", value=oid)


def ec_spki(curve_name: str) -> bytes:
    return spki(tag_oid("EC"), named_curve(oids.curve_oid(curve_name)))


def rsa_spki(modulus_bits: int) -> bytes:
    modulus = (1 << (modulus_bits - 1)) | 1
    key = keys.RSAPublicKey({"modulus": modulus, "public_exponent": 65537}).dump()
    return spki(tag_oid("RSA"), core.Null(), key)


def dsa_spki_without_params(y_bits: int) -> bytes:
    return spki(tag_oid("DSA"), None, core.Integer((1 << (y_bits - 1)) | 1).dump())


def gost_spki(algorithm_oid: str, param_set_oid: str) -> bytes:
    params = GostPublicKeyParameters(
        {"public_key_param_set": param_set_oid, "digest_param_set": GOST_DIGEST_PARAM_SET}
    )
    return spki(algorithm_oid, params, core.OctetString(b"\x01" * 64).dump())


def dstu_spki(curve_oid: str) -> bytes:
    params = DstuParameters({"curve": core.Any.load(core.ObjectIdentifier(curve_oid).dump())})
    return spki(tag_oid("DSTU4145"), params)


def sphincs_spki(digest: str) -> bytes:
    params = SPHINCS256KeyParams({"version": 0, "tree_digest": {"algorithm": oids.tree_digest_oid(digest)}})
    return spki(tag_oid("SPHINCS-256"), params)


def xmss_spki(height: int, digest: str) -> bytes:
    params = XMSSKeyParams(
        {"version": 0, "height": height, "tree_digest": {"algorithm": oids.tree_digest_oid(digest)}}
    )
    return spki(tag_oid("XMSS"), params)


def xmssmt_spki(height: int, layers: int, digest: str) -> bytes:
    params = XMSSMTKeyParams(
        {
            "version": 0,
            "height": height,
            "layers": layers,
            "tree_digest": {"algorithm": oids.tree_digest_oid(digest)},
        }
    )
    return spki(tag_oid("XMSSMT"), params)


