"""Abstract KDC session for principal administration.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime

from enums import PrincipalAttributes, PrincipalState


class KdcPrincipal:
    """Principal read from a KDC session.

    Attribute changes stay local until `save` is awaited.
    """

    def __init__(
        self,
        session: "AbstractKdcSession",
        name: str,
        attributes: PrincipalAttributes | int = 0,
        mod_date: datetime | None = None,
    ) -> None:
        """Bind principal data to the session it was read from.

        :param AbstractKdcSession session: owning session
        :param str name: principal name
        :param PrincipalAttributes | int attributes: attribute bitmask
        :param datetime | None mod_date: last modification date
        """
        self._session = session
        self.name = name
        self.attributes = PrincipalAttributes(attributes)
        self.mod_date = mod_date

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"KdcPrincipal(name={self.name!r}, "
            f"attributes={int(self.attributes)})"
        )

    @property
    def is_disabled(self) -> bool:
        """All ticket issuance is disallowed."""
        return PrincipalAttributes.DISALLOW_ALL_TIX in self.attributes

    @property
    def state(self) -> PrincipalState:
        if self.is_disabled:
            return PrincipalState.DISABLED
        return PrincipalState.ENABLED

    def disable(self) -> None:
        """Set DISALLOW_ALL_TIX, other bits are left as is."""
        self.attributes |= PrincipalAttributes.DISALLOW_ALL_TIX

    def enable(self) -> None:
        """Clear DISALLOW_ALL_TIX, other bits are left as is."""
        if self.is_disabled:
            self.attributes ^= PrincipalAttributes.DISALLOW_ALL_TIX

    async def save(self) -> None:
        """Write attributes back to the KDC."""
        await self._session.save_principal(self)


class AbstractKdcSession(ABC):
    """Connection scoped handle to one KDC server."""

    @abstractmethod
    async def get_principal(self, name: str) -> KdcPrincipal | None:
        """Get principal.

        :param str name: principal name
        :return KdcPrincipal | None: principal or None if it does not exist
        """

    @abstractmethod
    async def add_principal(self, name: str) -> KdcPrincipal:
        """Create principal with a random key.

        :param str name: principal name
        :return KdcPrincipal: created principal
        """

    @abstractmethod
    async def save_principal(self, principal: KdcPrincipal) -> None:
        """Write principal attributes.

        :param KdcPrincipal principal: principal
        """


class AbstractKdcSessionFactory(ABC):
    """Opens KDC sessions by configured server id."""

    @abstractmethod
    def open(
        self,
        server_id: int,
    ) -> AbstractAsyncContextManager[AbstractKdcSession]:
        """Open a session released when the context exits.

        :param int server_id: KDC server id
        :raises KdcConnectionError: server is unreachable or rejects us
        """
