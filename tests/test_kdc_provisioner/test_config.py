"""Test settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from config import Settings


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("true", True),
        ("False", False),
        ("1", True),
        ("0", False),
        ("yes", True),
        ("no", False),
        ("on", True),
        (" OFF ", False),
        (False, False),
        ("/etc/ssl/kdc-ca.pem", "/etc/ssl/kdc-ca.pem"),
    ],
)
def test_verify_cert(value: bool | str, expected: bool | str) -> None:
    """Test TLS verification accepts booleans and CA bundle paths."""
    settings = Settings(
        POSTGRES_USER="user",
        POSTGRES_PASSWORD="password",
        KDC_VERIFY_CERT=value,
    )

    assert settings.KDC_VERIFY_CERT == expected


def test_from_os(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings are read from the environment."""
    monkeypatch.setenv("POSTGRES_USER", "kdc")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("KDC_TIMEOUT_SECONDS", "12")

    settings = Settings.from_os()

    assert settings.KDC_TIMEOUT_SECONDS == 12
    assert str(settings.POSTGRES_URI).startswith("postgresql+psycopg://kdc:")
