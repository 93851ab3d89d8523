"""Init schema: devices + readings

Revision ID: 20251019_init_schema
Revises: 
Create Date: 2025-10-19 10:00:00

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20251019_init_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # devices
    op.create_table(
        "devices",
        sa.Column("id", sa.String(length=64), primary_key=True, nullable=False),
        sa.Column("location", sa.String(length=255), nullable=False),
    )

    # readings
    op.create_table(
        "readings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("device_id", sa.String(length=64), nullable=False),
        sa.Column("param_id", sa.Integer(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("device_timestamp", sa.DateTime(), nullable=False),
        sa.Column("received_at", sa.DateTime(), nullable=False),
        sa.Column("entry_hash", sa.LargeBinary(length=32), nullable=False),
        sa.ForeignKeyConstraint(["device_id"], ["devices.id"], name="readings_device_id_fkey"),
    )
    op.create_index("ix_readings_device_id", "readings", ["device_id"], unique=False)
    op.create_index(
        "ix_readings_device_param_ts",
        "readings",
        ["device_id", "param_id", "device_timestamp"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_readings_device_param_ts", table_name="readings")
    op.drop_index("ix_readings_device_id", table_name="readings")
    op.drop_table("readings")

    op.drop_table("devices")
