"""Provisioning status inspection.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enums import ProvisioningStatus, RecordKind

from .dataclasses import ProvisioningStatusDTO
from .exceptions import KdcConnectionError, KdcOperationError
from .gateways import IdentifierGateway, KdcProvisionerTargetGateway
from .kadmin import AbstractKdcSessionFactory, log
from .principal_resolver import resolve_principal_name

PRINCIPAL_DISABLED_COMMENT = "principal disabled"


def principal_type_not_found_comment(principal_type: str) -> str:
    """Comment for a person without the configured identifier."""
    return f"Cannot find identifier of type {principal_type}"


class StatusInspector:
    """Read back principal state of a registry record, no writes."""

    def __init__(
        self,
        target_gateway: KdcProvisionerTargetGateway,
        identifier_gateway: IdentifierGateway,
        kdc_sessions: AbstractKdcSessionFactory,
    ) -> None:
        """Set dependencies."""
        self._targets = target_gateway
        self._identifiers = identifier_gateway
        self._kdc_sessions = kdc_sessions

    async def inspect(
        self,
        co_provisioning_target_id: int,
        record_kind: RecordKind | str,
        record_id: int,
    ) -> ProvisioningStatusDTO:
        """Get provisioning status of a record.

        Only person records get principals, anything else is reported
        as not provisioned without asking the KDC.

        :param int co_provisioning_target_id: provisioning target id
        :param RecordKind | str record_kind: kind of the queried record
        :param int record_id: record id
        :return ProvisioningStatusDTO: status, timestamp and comment
        """
        result = ProvisioningStatusDTO()

        if record_kind != RecordKind.CO_PERSON:
            return result

        target = await self._targets.get_config(co_provisioning_target_id)
        if target is None:
            log.error(
                f"status: No KDC configuration for provisioning target "
                f"{co_provisioning_target_id}",
            )
            result.status = ProvisioningStatus.UNKNOWN
            result.comment = "Provisioning target is not configured"
            return result

        identifiers = await self._identifiers.get_person_identifiers(
            record_id,
        )
        principal_name = resolve_principal_name(
            target.principal_type,
            identifiers,
        )
        if principal_name is None:
            log.warning(
                f"status: Cannot find identifier of type "
                f"{target.principal_type} for person {record_id}",
            )
            result.status = ProvisioningStatus.UNKNOWN
            result.comment = principal_type_not_found_comment(
                target.principal_type,
            )
            return result

        try:
            async with self._kdc_sessions.open(target.server_id) as kdc:
                principal = await kdc.get_principal(principal_name)
        except (KdcConnectionError, KdcOperationError) as err:
            log.error(f"status: Unable to query for {principal_name}: {err}")
            result.status = ProvisioningStatus.UNKNOWN
            return result

        if principal is None:
            return result

        result.status = ProvisioningStatus.PROVISIONED
        result.timestamp = principal.mod_date
        if principal.is_disabled:
            result.comment = PRINCIPAL_DISABLED_COMMENT

        return result
