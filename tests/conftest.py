import pytest


@pytest.fixture(scope="session")
def rsa_2048_key():
    from cryptography.hazmat.primitives.asymmetric import rsa

    return rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()


@pytest.fixture(scope="session")
def dsa_1024_key():
    from cryptography.hazmat.primitives.asymmetric import dsa

    return dsa.generate_private_key(key_size=1024).public_key()


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    """No policy configuration from the environment or the working directory."""
    monkeypatch.delenv("KEYPOLICY_KEYTYPE_ALLOW", raising=False)
    monkeypatch.delenv("KEYPOLICY_KEYTYPE_DEFAULT", raising=False)
    monkeypatch.setenv("KEYPOLICY_CONFIG", str(tmp_path / "missing.yml"))
    return tmp_path
