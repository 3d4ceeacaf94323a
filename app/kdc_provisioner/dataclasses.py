"""KDC provisioner dataclasses.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from datetime import datetime

from enums import PersonStatus, ProvisioningAction, ProvisioningStatus


@dataclass(frozen=True)
class TargetConfig:
    """KDC server and identifier type used by one provisioning target."""

    server_id: int
    principal_type: str


@dataclass(frozen=True)
class IdentifierDTO:
    """Person identifier of some type."""

    type: str
    identifier: str


@dataclass
class LifecycleEvent:
    """Registry lifecycle event for one person."""

    action: ProvisioningAction | str
    person_id: int
    person_status: PersonStatus | str
    identifiers: list[IdentifierDTO] = field(default_factory=list)


@dataclass
class ProvisioningStatusDTO:
    """Provisioning status of a record in this target."""

    status: ProvisioningStatus = ProvisioningStatus.NOT_PROVISIONED
    timestamp: datetime | None = None
    comment: str = ""
