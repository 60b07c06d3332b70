import logging

import pytest

from keypolicy.catalog import key_types
from keypolicy.catalog.key_types import KEY_TYPES, Family
from keypolicy.policy import resolver
from keypolicy.policy.resolver import PolicyToken, SAFE_DEFAULT_ID


def ids(result):
    return [kt.id for kt in result]


def test_tokenize():
    assert resolver.tokenize("  RSA   -EC_secp*  *  -*  - ") == [
        PolicyToken(False, False, "RSA"),
        PolicyToken(True, True, "EC_secp"),
        PolicyToken(False, True, ""),
        PolicyToken(True, True, ""),
    ]
    assert resolver.tokenize(None) == []


@pytest.mark.parametrize("policy", [None, "", "   \t\n"])
def test_blank_policy_allows_everything(policy):
    assert resolver.parse(policy) == list(KEY_TYPES)


def test_family_token():
    assert ids(resolver.parse("RSA")) == ["RSA_512", "RSA_1024", "RSA_2048", "RSA_4096", "RSA_8192", "RSA_16384"]


def test_family_token_is_exact():
    result = resolver.parse("XMSS")
    assert {kt.family for kt in result} == {Family.XMSS}
    assert len(result) == 12
    assert {kt.family for kt in resolver.parse("XMSS*")} == {Family.XMSS, Family.XMSSMT}


def test_removal():
    assert "RSA_512" not in ids(resolver.parse("RSA -RSA_512"))
    assert len(resolver.parse("RSA -RSA_512")) == 5


def test_later_tokens_override_earlier():
    assert "RSA_512" in ids(resolver.parse("-RSA_512 RSA"))
    assert ids(resolver.parse("RSA -RSA RSA_2048")) == ["RSA_2048"]


def test_prefix_match():
    result = resolver.parse("EC_secp*")
    assert result
    assert all(kt.id.startswith("EC_secp") for kt in result)
    assert "EC_secp256k1" in ids(result)
    assert "EC_sect163k1" not in ids(result)


def test_catalog_order_and_no_duplicates():
    assert ids(resolver.parse("RSA_4096 RSA_1024 RSA RSA_4096")) == ids(resolver.parse("RSA"))
    assert ids(resolver.parse("EC_secp521r1 RSA_1024")) == ["RSA_1024", "EC_secp521r1"]


def test_star_and_minus_star():
    assert resolver.parse("*") == list(KEY_TYPES)
    everything_but_rsa = resolver.parse("* -RSA")
    assert len(everything_but_rsa) == len(KEY_TYPES) - 6
    assert ids(resolver.parse("* -* DSA_2048")) == ["DSA_2048"]


@pytest.mark.parametrize("policy", ["nonsense", "-*", "RSA -RSA", "- -", "qTESLA_P_II"])
def test_empty_result_collapses_to_safe_default(policy, caplog):
    with caplog.at_level(logging.WARNING, logger="keypolicy"):
        assert ids(resolver.parse(policy)) == [SAFE_DEFAULT_ID]
    assert any("allows nothing" in r.getMessage() for r in caplog.records)


def test_get_allowed_reparses_every_call():
    assert len(resolver.get_allowed("RSA")) == 6
    assert len(resolver.get_allowed("DSA")) == 4
    assert resolver.get_allowed("RSA") == resolver.parse("RSA")


def test_custom_catalog():
    catalog = [key_types.find_by_id("RSA_2048"), key_types.find_by_id("EC_secp521r1")]
    assert ids(resolver.parse("RSA", catalog)) == ["RSA_2048"]
    assert ids(resolver.parse(None, catalog)) == ["RSA_2048", "EC_secp521r1"]
    assert ids(resolver.parse("DSA", catalog)) == [SAFE_DEFAULT_ID]


def test_empty_catalog_still_allows_safe_default():
    assert ids(resolver.parse(None, [])) == [SAFE_DEFAULT_ID]
    assert ids(resolver.parse("RSA", [])) == [SAFE_DEFAULT_ID]
    assert resolver.get_default(None, None, []).id == SAFE_DEFAULT_ID
    assert resolver.get_default("RSA", "RSA_2048", []).id == SAFE_DEFAULT_ID


def test_default_when_allowed():
    assert resolver.get_default("RSA", "RSA_2048").id == "RSA_2048"
    assert resolver.get_default(None, "ED25519").id == "ED25519"


@pytest.mark.parametrize("token", [None, "", "  ", "bogus"])
def test_default_token_missing_uses_safe_default(token):
    assert resolver.get_default(None, token).id == SAFE_DEFAULT_ID


def test_default_outside_policy_uses_first_allowed(caplog):
    with caplog.at_level(logging.WARNING, logger="keypolicy"):
        assert resolver.get_default("RSA", "EC_secp256r1").id == "RSA_512"
    assert any("not allowed" in r.getMessage() for r in caplog.records)
    assert resolver.get_default("DSA_2048 DSA_3072", "bogus").id == "DSA_2048"


def test_default_always_allowed():
    for policy in ["RSA", "EC_brainpool*", "XMSSMT -XMSSMT_SHA2*", "nonsense", None]:
        for token in ["RSA_4096", "EC_secp521r1", None, "Rainbow"]:
            assert resolver.get_default(policy, token) in resolver.get_allowed(policy)


def test_get_index():
    rsa_2048 = key_types.find_by_id("RSA_2048")
    assert resolver.get_index(rsa_2048, "RSA") == 2
    assert resolver.get_index(rsa_2048, "RSA_2048") == 0
    assert resolver.get_index(rsa_2048, "DSA") == 0
    assert resolver.get_index(None, "RSA") == 0
    assert resolver.get_index(key_types.find_by_id("RSA_1024"), None) == 1


def test_ec_prefix_covers_every_ec_family():
    result = resolver.parse("EC*")
    expected = [kt for kt in KEY_TYPES if kt.id.startswith("EC") or kt.family.value.startswith("EC")]
    assert result == expected
    assert {kt.family for kt in result} == {Family.EC, Family.ECGOST3410, Family.ECGOST3410_2012}


def test_default_stays_inside_dsa_only_policy():
    assert resolver.get_default("DSA* -DSA_512", None).id == "DSA_1024"
