"""Initial schema — users and the six owned resource tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_RESOURCE_TABLES = (
    "courses", "events", "journals", "conferences", "books", "patents",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _owner() -> sa.Column:
    return sa.Column(
        "user_id", sa.Integer,
        sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("designation", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email_address", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("affiliation", sa.String(100), nullable=True),
        sa.Column("areas_of_interest", sa.String(255), nullable=True),
        sa.Column("homepage", sa.String(255), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("estimated_time", sa.String(255), nullable=True),
        sa.Column("materials_needed", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("event_type", sa.String(255), nullable=False),
        sa.Column("participation_type", sa.String(255), nullable=False),
        sa.Column("event_date", sa.Date, nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "journals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("authors", sa.String(255), nullable=False),
        sa.Column("publication_date", sa.DateTime, nullable=False),
        sa.Column("journal", sa.String(255), nullable=False),
        sa.Column("volume", sa.String(255), nullable=True),
        sa.Column("issue", sa.String(255), nullable=True),
        sa.Column("pages", sa.String(255), nullable=True),
        sa.Column("publisher", sa.String(255), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "conferences",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("authors", sa.String(255), nullable=False),
        sa.Column("publication_date", sa.Date, nullable=False),
        sa.Column("conference", sa.String(255), nullable=False),
        sa.Column("volume", sa.String(255), nullable=True),
        sa.Column("issue", sa.String(255), nullable=True),
        sa.Column("pages", sa.String(255), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "books",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("authors", sa.String(255), nullable=False),
        sa.Column("publication_date", sa.DateTime, nullable=False),
        sa.Column("volume", sa.String(255), nullable=True),
        sa.Column("pages", sa.String(255), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "patents",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("inventors", sa.String(255), nullable=False),
        sa.Column("publication_date", sa.DateTime, nullable=False),
        sa.Column("patent_office", sa.String(255), nullable=False),
        sa.Column("patent_number", sa.String(255), nullable=False, unique=True),
        sa.Column("application_number", sa.String(255), nullable=False, unique=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in reversed(_RESOURCE_TABLES):
        op.drop_table(table)
    op.drop_table("users")
