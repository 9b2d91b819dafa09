"""rating table (one rating per rater per attendance record)

Revision ID: 003
Revises: 002
Create Date: 2017-11-01 00:00:02.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "rating",
        sa.Column("id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("event_attendance_id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("ratee_profile_id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("rater_profile_id", sa.LargeBinary(length=16), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["event_attendance_id"], ["event_attendance.id"]),
        sa.ForeignKeyConstraint(["ratee_profile_id"], ["profile.id"]),
        sa.ForeignKeyConstraint(["rater_profile_id"], ["profile.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_attendance_id", "rater_profile_id", name="uq_rating_attendance_rater"),
    )
    op.create_index(op.f("ix_rating_event_attendance_id"), "rating", ["event_attendance_id"], unique=False)
    op.create_index(op.f("ix_rating_ratee_profile_id"), "rating", ["ratee_profile_id"], unique=False)
    op.create_index(op.f("ix_rating_rater_profile_id"), "rating", ["rater_profile_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_rating_rater_profile_id"), table_name="rating")
    op.drop_index(op.f("ix_rating_ratee_profile_id"), table_name="rating")
    op.drop_index(op.f("ix_rating_event_attendance_id"), table_name="rating")
    op.drop_table("rating")
