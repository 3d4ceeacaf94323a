"""Initial KDC provisioner tables.

Revision ID: 9c1f2e7a4b10
Revises:
Create Date: 2025-10-06 11:42:17.102934

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "9c1f2e7a4b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Upgrade."""
    op.create_table(
        "KdcServers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "description",
            sa.String(length=255),
            server_default="",
            nullable=False,
        ),
        sa.Column("url", sa.String(), nullable=False),
        sa.Column("admin_principal", sa.String(), nullable=True),
        sa.Column("password", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "KdcProvisionerTargets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("co_provisioning_target_id", sa.Integer(), nullable=False),
        sa.Column("server_id", sa.Integer(), nullable=False),
        sa.Column("principal_type", sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(
            ["server_id"],
            ["KdcServers.id"],
            ondelete="RESTRICT",
            onupdate="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_KdcProvisionerTargets_co_provisioning_target_id",
        "KdcProvisionerTargets",
        ["co_provisioning_target_id"],
        unique=True,
    )
    op.create_table(
        "Identifiers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("co_person_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(length=64), nullable=False),
        sa.Column("identifier", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_Identifiers_co_person_id",
        "Identifiers",
        ["co_person_id"],
    )


def downgrade() -> None:
    """Downgrade."""
    op.drop_index("ix_Identifiers_co_person_id", table_name="Identifiers")
    op.drop_table("Identifiers")
    op.drop_index(
        "ix_KdcProvisionerTargets_co_provisioning_target_id",
        table_name="KdcProvisionerTargets",
    )
    op.drop_table("KdcProvisionerTargets")
    op.drop_table("KdcServers")
