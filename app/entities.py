"""KDC provisioner entities.

(imperative mapping + dataclasses, SQLAlchemy 2.0).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class KdcServer:
    """KDC administration endpoint used by provisioning targets."""

    id: int | None = field(init=False, default=None)
    description: str = ""
    url: str = ""
    admin_principal: str | None = None
    password: str | None = None


@dataclass
class KdcProvisionerTarget:
    """KDC provisioner configuration of one provisioning target."""

    id: int | None = field(init=False, default=None)
    co_provisioning_target_id: int = 0
    server_id: int = 0
    principal_type: str = ""


@dataclass
class Identifier:
    """Identifier attached to a registry person."""

    id: int | None = field(init=False, default=None)
    co_person_id: int = 0
    type: str = ""
    identifier: str = ""
