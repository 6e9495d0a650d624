"""create_calendar_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2025-11-03 09:12:41.518204

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def upgrade() -> None:
    # Enum columns are stored as VARCHAR holding the member name,
    # matching SQLAlchemy's Enum type on SQLite
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=True),
        sa.Column("region", sa.String(20), nullable=False),
        sa.Column(
            "half_day_holidays_enabled",
            sa.Boolean(),
            nullable=False,
            server_default="0",
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "working_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("weekday", sa.Integer(), nullable=False),
        sa.Column("is_working_day", sa.Boolean(), nullable=False),
        sa.Column("hours", sa.Numeric(4, 2), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=True),
        sa.Column("end_time", sa.Time(), nullable=True),
        sa.Column("break_minutes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_id", "weekday", name="uq_working_hours_user_weekday"
        ),
    )
    op.create_index("ix_working_hours_user_id", "working_hours", ["user_id"])

    op.create_table(
        "recurring_off_days",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("recurrence_pattern", sa.String(30), nullable=False),
        sa.Column("weekday", sa.Integer(), nullable=False),
        sa.Column("week_interval", sa.Integer(), nullable=True),
        sa.Column("reference_date", sa.Date(), nullable=True),
        sa.Column("week_of_month", sa.Integer(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        sa.Column("description", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_recurring_off_days_user_id", "recurring_off_days", ["user_id"]
    )

    op.create_table(
        "recurring_off_day_exemptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("recurring_off_day_id", sa.Uuid(), nullable=False),
        sa.Column("exemption_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["recurring_off_day_id"],
            ["recurring_off_days.id"],
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint(
            "recurring_off_day_id", "exemption_date", name="uq_exemption_rule_date"
        ),
    )
    op.create_index(
        "ix_recurring_off_day_exemptions_recurring_off_day_id",
        "recurring_off_day_exemptions",
        ["recurring_off_day_id"],
    )

    # Ids are kept by value; warnings outlive the rule that raised them
    op.create_table(
        "recurring_off_day_conflict_warnings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("conflict_date", sa.Date(), nullable=False),
        sa.Column("time_entry_id", sa.Uuid(), nullable=False),
        sa.Column("recurring_off_day_id", sa.Uuid(), nullable=False),
        sa.Column("acknowledged", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("acknowledged_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "conflict_date", name="uq_conflict_user_date"
        ),
    )
    op.create_index(
        "ix_recurring_off_day_conflict_warnings_user_id",
        "recurring_off_day_conflict_warnings",
        ["user_id"],
    )
    op.create_index(
        "ix_recurring_off_day_conflict_warnings_time_entry_id",
        "recurring_off_day_conflict_warnings",
        ["time_entry_id"],
    )

    op.create_table(
        "time_off",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("time_off_type", sa.String(20), nullable=False),
        sa.Column("hours_per_day", sa.Numeric(4, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_time_off_user_id", "time_off", ["user_id"])
    op.create_index("ix_time_off_start_date", "time_off", ["start_date"])

    op.create_table(
        "time_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("clock_in", sa.Time(), nullable=False),
        sa.Column("clock_out", sa.Time(), nullable=True),
        sa.Column("break_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_time_entries_user_id", "time_entries", ["user_id"])
    op.create_index("ix_time_entries_entry_date", "time_entries", ["entry_date"])

    op.create_table(
        "vacation_balances",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("annual_allowance_days", sa.Numeric(5, 1), nullable=False),
        sa.Column(
            "carried_over_days", sa.Numeric(5, 1), nullable=False, server_default="0"
        ),
        sa.Column(
            "adjustment_days", sa.Numeric(5, 1), nullable=False, server_default="0"
        ),
        sa.Column("used_days", sa.Numeric(5, 1), nullable=False, server_default="0"),
        sa.Column(
            "planned_days", sa.Numeric(5, 1), nullable=False, server_default="0"
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "year", name="uq_vacation_balance_user_year"),
    )
    op.create_index("ix_vacation_balances_user_id", "vacation_balances", ["user_id"])


def downgrade() -> None:
    op.drop_table("vacation_balances")
    op.drop_table("time_entries")
    op.drop_table("time_off")
    op.drop_table("recurring_off_day_conflict_warnings")
    op.drop_table("recurring_off_day_exemptions")
    op.drop_table("recurring_off_days")
    op.drop_table("working_hours")
    op.drop_table("users")
