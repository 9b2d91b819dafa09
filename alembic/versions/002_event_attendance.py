"""event_attendance table

Revision ID: 002
Revises: 001
Create Date: 2017-11-01 00:00:01.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "event_attendance",
        sa.Column("id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("event_id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("profile_id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("check_in", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("number_attending", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.ForeignKeyConstraint(["event_id"], ["event.id"]),
        sa.ForeignKeyConstraint(["profile_id"], ["profile.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_event_attendance_event_id"), "event_attendance", ["event_id"], unique=False)
    op.create_index(op.f("ix_event_attendance_profile_id"), "event_attendance", ["profile_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_event_attendance_profile_id"), table_name="event_attendance")
    op.drop_index(op.f("ix_event_attendance_event_id"), table_name="event_attendance")
    op.drop_table("event_attendance")
