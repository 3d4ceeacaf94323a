"""KDC provisioner use cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enums import ProvisioningIntent, ProvisioningStatus, RecordKind

from .classifier import classify_action
from .dataclasses import LifecycleEvent, ProvisioningStatusDTO, TargetConfig
from .exceptions import KdcConnectionError
from .kadmin import AbstractKdcSessionFactory, log
from .principal_resolver import resolve_principal_name
from .reconciler import PrincipalReconciler
from .status_inspector import StatusInspector


class KdcProvisionerUseCase:
    """Entry point of the provisioning pipeline into this target.

    Neither operation raises, failures are logged and reported in the
    result.
    """

    def __init__(
        self,
        kdc_sessions: AbstractKdcSessionFactory,
        reconciler: PrincipalReconciler,
        status_inspector: StatusInspector,
    ) -> None:
        """Initialize KDC provisioner use case."""
        self._kdc_sessions = kdc_sessions
        self._reconciler = reconciler
        self._status_inspector = status_inspector

    async def provision(
        self,
        target: TargetConfig,
        event: LifecycleEvent,
    ) -> bool:
        """Provision and manage the principal of a registry person.

        :param TargetConfig target: provisioning target configuration
        :param LifecycleEvent event: registry lifecycle event
        :return bool: True on success
        """
        intent = classify_action(event.action)
        if intent == ProvisioningIntent.IGNORE:
            log.debug(f"provision: Ignoring action {event.action}")
            return True

        try:
            async with self._kdc_sessions.open(target.server_id) as kdc:
                principal_name = resolve_principal_name(
                    target.principal_type,
                    event.identifiers,
                )
                if principal_name is None:
                    log.warning(
                        f"provision: Unable to find principal of type "
                        f"{target.principal_type} for person "
                        f"{event.person_id}",
                    )
                    # Nothing to disable is not an error for a removal.
                    return intent == ProvisioningIntent.REMOVE

                if intent == ProvisioningIntent.SYNCHRONIZE:
                    return await self._reconciler.synchronize(
                        kdc,
                        principal_name,
                        event.person_status,
                    )
                return await self._reconciler.remove(kdc, principal_name)

        except KdcConnectionError as err:
            log.error(
                f"provision: Unable to connect to KDC server "
                f"{target.server_id}: {err}",
            )
        except Exception:  # noqa: BLE001
            log.exception(
                f"provision: {intent} failed for person {event.person_id}",
            )
        return False

    async def status(
        self,
        co_provisioning_target_id: int,
        record_kind: RecordKind | str,
        record_id: int,
    ) -> ProvisioningStatusDTO:
        """Determine the provisioning status of a record.

        :param int co_provisioning_target_id: provisioning target id
        :param RecordKind | str record_kind: kind of the queried record
        :param int record_id: record id
        :return ProvisioningStatusDTO: status, timestamp and comment
        """
        try:
            return await self._status_inspector.inspect(
                co_provisioning_target_id,
                record_kind,
                record_id,
            )
        except Exception:  # noqa: BLE001
            log.exception(f"status: Failed for {record_kind} {record_id}")
            return ProvisioningStatusDTO(status=ProvisioningStatus.UNKNOWN)
