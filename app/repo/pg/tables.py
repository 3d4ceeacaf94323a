"""KDC provisioner tables.

(imperative mapping + dataclasses, SQLAlchemy 2.0).
"""

from __future__ import annotations

from typing import TypeVar, cast

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.orm import QueryableAttribute, registry

from entities import Identifier, KdcProvisionerTarget, KdcServer

_T = TypeVar("_T")


def queryable_attr(value: _T) -> QueryableAttribute[_T]:
    """Cast a value to a QueryableAttribute.

    :param T value: The value to cast.
    :return QueryableAttribute[T]: The casted value.
    """
    return cast("QueryableAttribute[_T]", value)


mapper_registry = registry()
metadata: MetaData = mapper_registry.metadata


kdc_servers_table = Table(
    "KdcServers",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("description", String(255), nullable=False, server_default=""),
    Column("url", String, nullable=False),
    Column("admin_principal", String, nullable=True),
    Column("password", String, nullable=True),
)

kdc_provisioner_targets_table = Table(
    "KdcProvisionerTargets",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("co_provisioning_target_id", Integer, nullable=False),
    Column(
        "server_id",
        Integer,
        ForeignKey("KdcServers.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    ),
    Column("principal_type", String(64), nullable=False),
    Index(
        "ix_KdcProvisionerTargets_co_provisioning_target_id",
        "co_provisioning_target_id",
        unique=True,
    ),
)

identifiers_table = Table(
    "Identifiers",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("co_person_id", Integer, nullable=False),
    Column("type", String(64), nullable=False),
    Column("identifier", String, nullable=False),
    Index("ix_Identifiers_co_person_id", "co_person_id"),
)


mapper_registry.map_imperatively(
    KdcServer,
    kdc_servers_table,
)

mapper_registry.map_imperatively(
    KdcProvisionerTarget,
    kdc_provisioner_targets_table,
)

mapper_registry.map_imperatively(
    Identifier,
    identifiers_table,
)
