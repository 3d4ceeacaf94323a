"""Principal name resolution.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable

from .dataclasses import IdentifierDTO


def resolve_principal_name(
    principal_type: str,
    identifiers: Iterable[IdentifierDTO],
) -> str | None:
    """Get the principal name for a person.

    First identifier of the configured type wins. An empty value does
    not name a principal.

    :param str principal_type: configured identifier type
    :param Iterable[IdentifierDTO] identifiers: person identifiers, in order
    :return str | None: principal name or None if there is none
    """
    for identifier in identifiers:
        if identifier.type == principal_type:
            return identifier.identifier or None
    return None
