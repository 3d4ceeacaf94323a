"""Test principal name resolution.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from kdc_provisioner import IdentifierDTO, resolve_principal_name


def test_first_identifier_of_type_wins() -> None:
    """Test resolution stops at the first match."""
    identifiers = [
        IdentifierDTO(type="uid", identifier="a"),
        IdentifierDTO(type="mail", identifier="a@x.edu"),
        IdentifierDTO(type="mail", identifier="alias@x.edu"),
    ]

    assert resolve_principal_name("mail", identifiers) == "a@x.edu"
    assert resolve_principal_name("uid", identifiers) == "a"


def test_type_not_found() -> None:
    """Test missing type is a normal None result."""
    identifiers = [IdentifierDTO(type="uid", identifier="a")]

    assert resolve_principal_name("eppn", identifiers) is None
    assert resolve_principal_name("mail", []) is None


def test_type_is_case_sensitive() -> None:
    """Test identifier types are compared exactly."""
    identifiers = [IdentifierDTO(type="Mail", identifier="a@x.edu")]

    assert resolve_principal_name("mail", identifiers) is None


def test_empty_first_match() -> None:
    """Test an empty first match does not fall through to later ones."""
    identifiers = [
        IdentifierDTO(type="mail", identifier=""),
        IdentifierDTO(type="mail", identifier="a@x.edu"),
    ]

    assert resolve_principal_name("mail", identifiers) is None
