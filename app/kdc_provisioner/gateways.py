"""KDC provisioner configuration gateways.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from entities import Identifier, KdcProvisionerTarget, KdcServer
from enums import IdentifierType
from repo.pg.tables import queryable_attr as qa

from .dataclasses import IdentifierDTO, TargetConfig
from .exceptions import ConfigurationError


class KdcServerGateway:
    """KDC servers gateway."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize KDC servers gateway."""
        self._session = session

    async def get(self, server_id: int) -> KdcServer | None:
        """Get KDC server by id."""
        return await self._session.get(KdcServer, server_id)

    async def create(self, server: KdcServer) -> KdcServer:
        """Create KDC server."""
        self._session.add(server)
        await self._session.flush()
        return server


class IdentifierGateway:
    """Registry person identifiers gateway."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize identifiers gateway."""
        self._session = session

    async def get_person_identifiers(
        self,
        co_person_id: int,
    ) -> list[IdentifierDTO]:
        """Get identifiers of a person in stored order."""
        identifiers = await self._session.scalars(
            select(Identifier)
            .filter_by(co_person_id=co_person_id)
            .order_by(qa(Identifier.id)),
        )
        return [
            IdentifierDTO(type=item.type, identifier=item.identifier)
            for item in identifiers
        ]

    async def get_types(self) -> set[str]:
        """Get identifier types in use."""
        return set(
            await self._session.scalars(
                select(qa(Identifier.type)).distinct(),
            ),
        )


class KdcProvisionerTargetGateway:
    """KDC provisioner targets gateway."""

    def __init__(
        self,
        session: AsyncSession,
        server_gateway: KdcServerGateway,
        identifier_gateway: IdentifierGateway,
    ) -> None:
        """Initialize targets gateway."""
        self._session = session
        self._servers = server_gateway
        self._identifiers = identifier_gateway

    async def get(
        self,
        co_provisioning_target_id: int,
    ) -> KdcProvisionerTarget | None:
        """Get target by provisioning target id."""
        return await self._session.scalar(
            select(KdcProvisionerTarget)
            .filter_by(co_provisioning_target_id=co_provisioning_target_id),
        )  # fmt: skip

    async def get_config(
        self,
        co_provisioning_target_id: int,
    ) -> TargetConfig | None:
        """Get target configuration by provisioning target id."""
        target = await self.get(co_provisioning_target_id)
        if target is None:
            return None
        return TargetConfig(
            server_id=target.server_id,
            principal_type=target.principal_type,
        )

    async def create(
        self,
        co_provisioning_target_id: int,
        server_id: int,
        principal_type: str,
    ) -> KdcProvisionerTarget:
        """Validate and create target.

        :raises ConfigurationError: invalid server or principal type
        """
        await self._validate(server_id, principal_type)

        target = KdcProvisionerTarget(
            co_provisioning_target_id=co_provisioning_target_id,
            server_id=server_id,
            principal_type=principal_type,
        )
        self._session.add(target)
        await self._session.flush()
        return target

    async def update(
        self,
        co_provisioning_target_id: int,
        server_id: int | None = None,
        principal_type: str | None = None,
    ) -> KdcProvisionerTarget:
        """Validate and update target.

        :raises ConfigurationError: unknown target, invalid server or
            principal type
        """
        target = await self.get(co_provisioning_target_id)
        if target is None:
            raise ConfigurationError(
                f"Provisioning target {co_provisioning_target_id} "
                "has no KDC configuration",
            )

        server_id = target.server_id if server_id is None else server_id
        if principal_type is None:
            principal_type = target.principal_type

        await self._validate(server_id, principal_type)

        target.server_id = server_id
        target.principal_type = principal_type
        await self._session.flush()
        return target

    async def delete(self, co_provisioning_target_id: int) -> None:
        """Delete target."""
        await self._session.execute(
            delete(KdcProvisionerTarget)
            .filter_by(co_provisioning_target_id=co_provisioning_target_id),
        )  # fmt: skip

    async def get_principal_types(self) -> set[str]:
        """Get identifier types a principal can be named after."""
        return {*IdentifierType, *await self._identifiers.get_types()}

    async def _validate(self, server_id: int, principal_type: str) -> None:
        if not principal_type:
            raise ConfigurationError("principal_type is required")

        if principal_type not in await self.get_principal_types():
            raise ConfigurationError(
                f"Unrecognized principal type {principal_type}",
            )

        if await self._servers.get(server_id) is None:
            raise ConfigurationError(f"KDC server {server_id} does not exist")
