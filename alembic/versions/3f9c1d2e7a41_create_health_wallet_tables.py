"""Create health wallet tables

Revision ID: 3f9c1d2e7a41
Revises:
Create Date: 2026-10-16 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c1d2e7a41"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

VITAL_TYPES = ("BP", "Sugar", "Heart Rate", "Oxygen", "Temperature", "Weight")


def vital_type_enum() -> sa.Enum:
    return sa.Enum(
        *VITAL_TYPES,
        name="vital_type",
        native_enum=False,
        create_constraint=True,
        length=32,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("file_path", sa.String(), nullable=False),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("report_type", sa.String(), nullable=False),
        sa.Column("report_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_reports_user_id", "reports", ["user_id"])
    op.create_index("idx_reports_date", "reports", ["report_date"])

    op.create_table(
        "report_vitals",
        sa.Column("report_id", sa.Integer(), nullable=False),
        sa.Column("vital_type", vital_type_enum(), nullable=False),
        sa.ForeignKeyConstraint(["report_id"], ["reports.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("report_id", "vital_type"),
    )

    op.create_table(
        "vitals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("vital_type", vital_type_enum(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("recorded_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_vitals_user_id", "vitals", ["user_id"])
    op.create_index("idx_vitals_recorded_at", "vitals", ["recorded_at"])

    op.create_table(
        "shared_access",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("report_id", sa.Integer(), nullable=False),
        sa.Column("shared_with_email", sa.String(), nullable=False),
        sa.Column("access_type", sa.String(), nullable=False),
        sa.Column("shared_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["report_id"], ["reports.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "report_id", "shared_with_email", name="uq_shared_access_report_email"
        ),
    )
    op.create_index("idx_shared_access_email", "shared_access", ["shared_with_email"])


def downgrade() -> None:
    op.drop_index("idx_shared_access_email", table_name="shared_access")
    op.drop_table("shared_access")
    op.drop_index("idx_vitals_recorded_at", table_name="vitals")
    op.drop_index("idx_vitals_user_id", table_name="vitals")
    op.drop_table("vitals")
    op.drop_table("report_vitals")
    op.drop_index("idx_reports_date", table_name="reports")
    op.drop_index("idx_reports_user_id", table_name="reports")
    op.drop_table("reports")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
