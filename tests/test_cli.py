from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from asn1_builders import spki
from keypolicy.cli import main


def lines(capsys):
    return [l for l in capsys.readouterr().out.splitlines() if not l.startswith("[")]


def test_allowed(clean_env, capsys):
    assert main(["--allow", "RSA -RSA_512", "allowed"]) == 0
    out = lines(capsys)
    assert [l.split("\t")[0] for l in out] == ["RSA_1024", "RSA_2048", "RSA_4096", "RSA_8192", "RSA_16384"]


def test_allowed_from_environment(clean_env, monkeypatch, capsys):
    monkeypatch.setenv("KEYPOLICY_KEYTYPE_ALLOW", "DSA")
    assert main(["allowed"]) == 0
    assert len(lines(capsys)) == 4


def test_default(clean_env, capsys):
    assert main(["default"]) == 0
    assert lines(capsys)[-1].startswith("EC_secp521r1\t")
    assert main(["--allow", "RSA", "--default", "RSA_2048", "default"]) == 0
    assert lines(capsys)[-1] == "RSA_2048\tRSA 2048"


def test_identify(clean_env, tmp_path, capsys):
    key = ec.generate_private_key(ec.SECP384R1()).public_key()
    path = tmp_path / "key.pem"
    path.write_bytes(key.public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo))
    assert main(["identify", str(path)]) == 0
    assert lines(capsys)[-1] == "EC_secp384r1\tEC SEC secp384r1"


def test_identify_unknown_key(clean_env, tmp_path, capsys):
    path = tmp_path / "key.der"
    path.write_bytes(spki("1.2.3.4"))
    assert main(["identify", str(path)]) == 1
    assert "error" in capsys.readouterr().err


def test_signatures_for_key_type(clean_env, capsys):
    assert main(["signatures", "EC_secp521r1"]) == 0
    out = lines(capsys)
    assert len(out) == 9
    assert [l for l in out if l.startswith("*")] == ["* SHA512withECDSA\t1.2.840.10045.4.3.4"]


def test_signatures_for_algorithm(clean_env, capsys):
    assert main(["signatures", "SHA256withRSA"]) == 0
    out = lines(capsys)
    assert len(out) == 14
    assert [l for l in out if l.startswith("*")] == ["* SHA256withRSA\t1.2.840.113549.1.1.11"]


def test_signatures_unknown_id(clean_env, capsys):
    assert main(["signatures", "NOPE"]) == 2
