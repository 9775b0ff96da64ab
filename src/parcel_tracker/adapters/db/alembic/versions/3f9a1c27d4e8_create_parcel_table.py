"""Create parcel table

Revision ID: 3f9a1c27d4e8
Revises:
Create Date: 2026-10-19

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from parcel_tracker.adapters.db.sa_types import BIGINT_PK

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9a1c27d4e8"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "parcel",
        sa.Column(
            "number",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Parcel number, assigned on insert and never reused.",
        ),
        sa.Column(
            "client",
            sa.BigInteger(),
            nullable=False,
            comment="Opaque client identifier.",
        ),
        sa.Column(
            "status",
            sa.Text(),
            nullable=False,
            comment="Delivery status (e.g. registered, sent, delivered).",
        ),
        sa.Column(
            "address",
            sa.Text(),
            nullable=False,
            comment="Delivery address.",
        ),
        sa.Column(
            "created_at",
            sa.String(length=32),
            nullable=False,
            comment="RFC 3339 UTC creation timestamp, stored as given.",
        ),
        sa.PrimaryKeyConstraint("number", name=op.f("pk_parcel")),
        sqlite_autoincrement=True,
        comment="Tracked parcels. One row per parcel.",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("parcel")
