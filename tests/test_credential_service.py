"""Credential derivation and the credential table."""
import pytest

from settings import Settings
from core.exceptions import CredentialConfigError
from services.credential_service import CredentialTable, build_credentials, derive_key


def test_derive_key_is_hmac_sha256_prefix():
    # HMAC-SHA256("TWINLOCK_DEFAULT_SALT", "TEAM01_SYS-01"), upper-cased, 8 chars
    assert derive_key("TEAM01", "SYS-01", "TWINLOCK_DEFAULT_SALT") == "06327951"
    assert derive_key("TEAM01", "SYS-02", "TWINLOCK_DEFAULT_SALT") == "789B10B1"


def test_derive_key_depends_on_salt():
    assert derive_key("TEAM01", "SYS-01", "other-salt") != "06327951"


def test_derive_key_falls_back_when_hmac_fails():
    # a lone surrogate cannot be UTF-8 encoded
    assert derive_key("TEAM01", "SYS-01", "\ud800") == "TEAM01SY"


def test_build_generated_credentials():
    settings = Settings(_env_file=None, team_count=2, team_prefix="team")
    table = build_credentials(settings)

    assert len(table) == 4
    assert table.get("TEAM01", "SYS-01") == "06327951"
    assert table.get("TEAM02", "SYS-02") is not None
    assert table.get("TEAM03", "SYS-01") is None


def test_build_configured_credentials_are_normalized():
    settings = Settings(
        _env_file=None,
        credentials=[{"team_id": " alpha ", "node_id": "sys-01", "access_key": " K1 "}],
    )
    table = build_credentials(settings)

    assert table.get("ALPHA", "SYS-01") == "K1"
    assert ("ALPHA", "SYS-01") in table


def test_empty_credential_entry_rejected():
    with pytest.raises(ValueError):
        Settings(_env_file=None, credentials=[{"team_id": " ", "node_id": "SYS-01", "access_key": "K"}])


def test_duplicate_credentials_rejected():
    with pytest.raises(CredentialConfigError):
        CredentialTable([("ALPHA", "SYS-01", "A"), ("alpha", "sys-01", "B")])


def test_verify_requires_exact_key():
    table = CredentialTable([("ALPHA", "SYS-01", "AbC123")])
    assert table.verify("ALPHA", "SYS-01", "AbC123")
    assert not table.verify("ALPHA", "SYS-01", "abc123")
    assert not table.verify("ALPHA", "SYS-01", "")
    assert not table.verify("ALPHA", "SYS-02", "AbC123")
