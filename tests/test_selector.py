import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from asn1_builders import ec_spki, gost_spki, rsa_spki, sphincs_spki, spki, tag_oid, xmss_spki
from keypolicy.catalog import key_types, oids
from keypolicy.catalog.key_types import KEY_TYPES, Family
from keypolicy.catalog.signature_algorithms import SIGNATURE_ALGORITHMS
from keypolicy.crypto import selector


def names(ladder):
    return [a.name for a in ladder]


def ladder_for(ident):
    return names(selector.for_key_type(key_types.find_by_id(ident)))


def test_ec_ladder():
    assert ladder_for("EC_secp256r1") == [
        "SHA1withECDSA",
        "SHA224withECDSA",
        "SHA256withECDSA",
        "SHA384withECDSA",
        "SHA512withECDSA",
        "SHA3-224withECDSA",
        "SHA3-256withECDSA",
        "SHA3-384withECDSA",
        "SHA3-512withECDSA",
    ]


def test_sm2_curve_has_single_algorithm():
    assert ladder_for("EC_sm2p256v1") == ["SM3withSM2"]


def test_dsa_ladder():
    assert ladder_for("DSA_2048") == [
        "SHA1withDSA",
        "SHA224withDSA",
        "SHA256withDSA",
        "SHA384withDSA",
        "SHA512withDSA",
        "SHA3-224withDSA",
        "SHA3-256withDSA",
        "SHA3-384withDSA",
        "SHA3-512withDSA",
    ]


def test_rsa_ladders():
    full = ladder_for("RSA_2048")
    assert len(full) == 14
    assert full[:2] == ["MD2withRSA", "MD5withRSA"]
    assert full[-3:] == ["RIPEMD128withRSA", "RIPEMD160withRSA", "RIPEMD256withRSA"]
    assert ladder_for("RSA_512") == [
        "MD2withRSA",
        "MD5withRSA",
        "SHA1withRSA",
        "SHA224withRSA",
        "SHA256withRSA",
        "RIPEMD128withRSA",
        "RIPEMD160withRSA",
    ]


def test_single_algorithm_families():
    assert ladder_for("GOST_3410_94_A") == ["GOST3411withGOST3410"]
    assert ladder_for("GOST_3410_2001_XB") == ["GOST3411withECGOST3410"]
    assert ladder_for("DSTU4145_3") == ["GOST3411withDSTU4145"]
    assert ladder_for("GOST_3410_2012_256_A") == ["GOST3411-2012-256WITHECGOST3410-2012-256"]
    assert ladder_for("GOST_3410_2012_512_C") == ["GOST3411-2012-512WITHECGOST3410-2012-512"]
    assert ladder_for("ED25519") == ["Ed25519"]
    assert ladder_for("ED448") == ["Ed448"]
    assert ladder_for("qTESLA_P_I") == ["qTESLA-p-I"]
    assert ladder_for("qTESLA_P_III") == ["qTESLA-p-III"]


def test_sphincs_by_variant():
    assert ladder_for("SPHINCS_SHA512_256") == ["SPHINCS256withSHA512"]
    assert ladder_for("SPHINCS_SHA3_256") == ["SPHINCS256withSHA3_512"]


def test_hash_based_ladders():
    assert ladder_for("Rainbow") == ["RAINBOWwithSHA224", "RAINBOWwithSHA256", "RAINBOWwithSHA384", "RAINBOWwithSHA512"]
    assert ladder_for("XMSS_SHAKE_20_512") == ["XMSSwithSHA256", "XMSSwithSHA512", "XMSSwithSHAKE128", "XMSSwithSHAKE256"]
    assert ladder_for("XMSSMT_SHA2_40_8_256") == [
        "XMSSMTwithSHA256",
        "XMSSMTwithSHA512",
        "XMSSMTwithSHAKE128",
        "XMSSMTwithSHAKE256",
    ]


@pytest.mark.parametrize("kt", KEY_TYPES.all(), ids=lambda kt: kt.id)
def test_every_key_type_can_sign(kt):
    ladder = selector.for_key_type(kt)
    assert ladder
    assert all(a.target_family is kt.family for a in ladder)
    default = selector.default_for_key_type(kt)
    assert default in ladder


@pytest.mark.parametrize("alg", SIGNATURE_ALGORITHMS.all(), ids=lambda a: a.id)
def test_algorithm_ladder_is_a_closure(alg):
    ladder = selector.for_algorithm(alg)
    assert alg in ladder
    for sibling in ladder:
        assert selector.for_algorithm(sibling) == ladder


@pytest.mark.parametrize(
    "kt",
    [kt for kt in KEY_TYPES if not (kt.family is Family.RSA and kt.security_bits <= 512)],
    ids=lambda kt: kt.id,
)
def test_key_type_ladder_matches_algorithm_ladder(kt):
    ladder = selector.for_key_type(kt)
    for alg in ladder:
        assert selector.for_algorithm(alg) == ladder


def test_short_rsa_algorithms_map_to_full_ladder():
    short = selector.for_key_type(key_types.find_by_id("RSA_512"))
    full = selector.for_key_type(key_types.find_by_id("RSA_4096"))
    for alg in short:
        assert selector.for_algorithm(alg) == full


def test_for_type_dispatch():
    kt = key_types.find_by_id("EC_secp384r1")
    assert selector.for_type(kt) == selector.for_key_type(kt)
    alg = selector.for_key_type(kt)[0]
    assert selector.for_type(alg) == selector.for_algorithm(alg)
    with pytest.raises(TypeError):
        selector.for_type("EC_secp384r1")


def test_default_for_generated_keys(rsa_2048_key, dsa_1024_key):
    assert selector.default_for(rsa_2048_key).id == "SHA256withRSA"
    assert selector.default_for(dsa_1024_key).id == "SHA1withDSA"
    assert selector.default_for(ec.generate_private_key(ec.SECP256R1()).public_key()).id == "SHA512withECDSA"
    assert selector.default_for(ed25519.Ed25519PrivateKey.generate().public_key()).id == "Ed25519"


def test_default_for_encoded_keys():
    assert selector.default_for(ec_spki("sm2p256v1")).id == "SM3withSM2"
    assert selector.default_for(ec_spki("brainpoolP384r1")).id == "SHA512withECDSA"
    assert selector.default_for(rsa_spki(1500)).id == "SHA256withRSA"
    assert selector.default_for(gost_spki(tag_oid("GOST3410"), oids.GOST94_CRYPTOPRO_B)).id == "GOST3411withGOST3410"
    assert selector.default_for(gost_spki(tag_oid("ECGOST3410"), "1.2.643.2.2.35.1")).id == "GOST3411withECGOST3410"
    assert selector.default_for(spki(tag_oid("Rainbow"))).id == "RAINBOWwithSHA512"
    assert selector.default_for(sphincs_spki("SHA3-256")).id == "SPHINCS256withSHA3_512"
    assert selector.default_for(sphincs_spki("SHA512-256")).id == "SPHINCS256withSHA512"
    assert selector.default_for(xmss_spki(10, "SHAKE128")).id == "XMSSwithSHA512"
    assert selector.default_for(spki(tag_oid("qTESLA-p-III"))).id == "qTESLA_P_III"


def test_default_for_gost2012_by_key_size():
    unknown_set = "1.2.643.7.1.2.1.2.9"
    assert selector.default_for(gost_spki(oids.GOST2012_512_KEY, unknown_set)).id == "GOST3411withECGOST3410_2012_512"
    assert selector.default_for(gost_spki(tag_oid("ECGOST3410-2012"), unknown_set)).id == "GOST3411withECGOST3410_2012_256"
    known = gost_spki(oids.GOST2012_512_KEY, oids.ecgost_param_set_oid("Tc26-Gost-3410-12-512-paramSetA"))
    assert selector.default_for(known).id == "GOST3411withECGOST3410_2012_512"


def test_default_for_unidentified_family_members():
    # family known, sub-variant unknown: only families that need the sub-variant give None
    assert selector.default_for(spki(tag_oid("EC"))).id == "SHA512withECDSA"
    assert selector.default_for(spki(tag_oid("XMSS"))).id == "XMSSwithSHA512"
    assert selector.default_for(spki(tag_oid("SPHINCS-256"))) is None
    assert selector.default_for(spki(tag_oid("qTESLA-I"))) is None


def test_default_for_unknown_keys():
    assert selector.default_for(spki("1.2.3.4")) is None
    assert selector.default_for(b"garbage") is None
