"""event_attendance: one row per (event, profile)

Revision ID: 004
Revises: 003
Create Date: 2017-11-20 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_unique_constraint(
        "uq_event_attendance_event_profile",
        "event_attendance",
        ["event_id", "profile_id"],
    )


def downgrade() -> None:
    op.drop_constraint("uq_event_attendance_event_profile", "event_attendance", type_="unique")
