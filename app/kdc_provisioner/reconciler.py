"""Principal reconciliation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum

from enums import PersonStatus, PrincipalState, ProvisioningIntent

from .exceptions import KdcOperationError
from .kadmin import AbstractKdcSession, KdcPrincipal, log
from .locks import PrincipalLockRegistry

ENABLED_STATUSES = frozenset({
    PersonStatus.ACTIVE,
    PersonStatus.GRACE_PERIOD,
})

DISABLED_STATUSES = frozenset({
    PersonStatus.DELETED,
    PersonStatus.EXPIRED,
    PersonStatus.LOCKED,
    PersonStatus.SUSPENDED,
})


class PrincipalTransition(StrEnum):
    """Change applied to a principal."""

    NONE = "none"
    CREATE = "create"
    ENABLE = "enable"
    DISABLE = "disable"


def plan_transition(
    intent: ProvisioningIntent,
    person_status: PersonStatus | str | None,
    state: PrincipalState,
) -> PrincipalTransition:
    """Get the minimal change bringing a principal to the target state.

    Remove ignores the person status, the action code already says the
    person is expired or deleted.

    :param ProvisioningIntent intent: classified intent
    :param PersonStatus | str | None person_status: registry status
    :param PrincipalState state: current principal state
    :return PrincipalTransition: change, NONE if already in place
    """
    if intent == ProvisioningIntent.REMOVE:
        if state == PrincipalState.ENABLED:
            return PrincipalTransition.DISABLE
        return PrincipalTransition.NONE

    if intent != ProvisioningIntent.SYNCHRONIZE:
        return PrincipalTransition.NONE

    if person_status in ENABLED_STATUSES:
        if state == PrincipalState.ABSENT:
            return PrincipalTransition.CREATE
        if state == PrincipalState.DISABLED:
            return PrincipalTransition.ENABLE

    elif person_status in DISABLED_STATUSES:
        if state == PrincipalState.ENABLED:
            return PrincipalTransition.DISABLE

    return PrincipalTransition.NONE


class PrincipalReconciler:
    """Apply lifecycle intents to KDC principals."""

    def __init__(self, locks: PrincipalLockRegistry) -> None:
        """Set principal locks.

        :param PrincipalLockRegistry locks: app wide principal locks
        """
        self._locks = locks

    async def synchronize(
        self,
        kdc: AbstractKdcSession,
        name: str,
        person_status: PersonStatus | str | None,
    ) -> bool:
        """Bring principal in line with the person status.

        :return bool: True on success
        """
        return await self._reconcile(
            kdc,
            name,
            ProvisioningIntent.SYNCHRONIZE,
            person_status,
        )

    async def remove(self, kdc: AbstractKdcSession, name: str) -> bool:
        """Disable principal of an expired or deleted person.

        :return bool: True on success, also when there is no principal
        """
        return await self._reconcile(
            kdc,
            name,
            ProvisioningIntent.REMOVE,
            None,
        )

    async def _reconcile(
        self,
        kdc: AbstractKdcSession,
        name: str,
        intent: ProvisioningIntent,
        person_status: PersonStatus | str | None,
    ) -> bool:
        async with self._locks.hold(name):
            try:
                principal = await kdc.get_principal(name)
            except KdcOperationError as err:
                log.error(
                    f"{intent}: Unable to query for principal {name}: {err}",
                )
                return False

            if principal is None:
                log.info(f"{intent}: Principal {name} does not exist")
                state = PrincipalState.ABSENT
            else:
                state = principal.state

            transition = plan_transition(intent, person_status, state)
            try:
                await self._apply(kdc, name, principal, transition)
            except KdcOperationError as err:
                log.error(
                    f"{intent}: Unable to {transition} principal {name}: "
                    f"{err}",
                )
                return False

        log.info(
            f"{intent}: Principal {name} was {state}, "
            f"person status {person_status}, applied {transition}",
        )
        return True

    @staticmethod
    async def _apply(
        kdc: AbstractKdcSession,
        name: str,
        principal: KdcPrincipal | None,
        transition: PrincipalTransition,
    ) -> None:
        match transition:
            case PrincipalTransition.CREATE:
                await kdc.add_principal(name)
            case PrincipalTransition.ENABLE if principal is not None:
                principal.enable()
                await principal.save()
            case PrincipalTransition.DISABLE if principal is not None:
                principal.disable()
                await principal.save()
