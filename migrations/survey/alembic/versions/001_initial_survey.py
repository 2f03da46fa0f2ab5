"""Survey schema: surveys, responses

Revision ID: 001
Revises:
Create Date: 2026-10-19

Tables created:
  - surveys     Survey definitions, public short codes, creator aliases
  - responses   One row per respondent session, keyed by surveys.id

PostgreSQL-native ENUM types created:
  - survey_status     draft / active / closed
  - response_status   in_progress / partial / completed

Downgrade: drops all tables and ENUM types in reverse dependency order.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# ─────────────────────────────────────────────────────────────────────────────
#  UPGRADE
# ─────────────────────────────────────────────────────────────────────────────

def upgrade() -> None:
    # ── 1. PostgreSQL ENUM types ──────────────────────────────────────────────
    op.execute(
        """
        DO $$ BEGIN
            CREATE TYPE survey_status AS ENUM ('draft', 'active', 'closed');
        EXCEPTION WHEN duplicate_object THEN NULL;
        END $$;
        """
    )
    op.execute(
        """
        DO $$ BEGIN
            CREATE TYPE response_status AS ENUM ('in_progress', 'partial', 'completed');
        EXCEPTION WHEN duplicate_object THEN NULL;
        END $$;
        """
    )

    # ── 2. surveys ────────────────────────────────────────────────────────────
    op.create_table(
        "surveys",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("short_code", sa.String(8), nullable=False),
        sa.Column("creator_name", sa.String(100), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "questions",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "settings",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "status",
            postgresql.ENUM(name="survey_status", create_type=False),
            nullable=False,
            server_default=sa.text("'draft'"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_surveys"),
    )
    # Short codes collide case-insensitively.
    op.create_index(
        "uq_surveys_short_code_lower",
        "surveys",
        [sa.text("lower(short_code)")],
        unique=True,
    )
    op.create_index("ix_surveys_creator_name", "surveys", ["creator_name"])

    # ── 3. responses ──────────────────────────────────────────────────────────
    op.create_table(
        "responses",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("survey_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("respondent_id", sa.String(64), nullable=True),
        sa.Column(
            "answers",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "status",
            postgresql.ENUM(name="response_status", create_type=False),
            nullable=False,
            server_default=sa.text("'in_progress'"),
        ),
        sa.Column(
            "current_question_index",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
        ),
        sa.Column(
            "started_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_responses"),
        sa.ForeignKeyConstraint(
            ["survey_id"],
            ["surveys.id"],
            name="fk_responses_survey_id",
            ondelete="CASCADE",
        ),
    )
    op.create_index(
        "ix_responses_survey_id_started_at", "responses", ["survey_id", "started_at"],
    )
    op.create_index("ix_responses_respondent_id", "responses", ["respondent_id"])


# ─────────────────────────────────────────────────────────────────────────────
#  DOWNGRADE
# ─────────────────────────────────────────────────────────────────────────────

def downgrade() -> None:
    op.drop_index("ix_responses_respondent_id", table_name="responses")
    op.drop_index("ix_responses_survey_id_started_at", table_name="responses")
    op.drop_table("responses")

    op.drop_index("ix_surveys_creator_name", table_name="surveys")
    op.drop_index("uq_surveys_short_code_lower", table_name="surveys")
    op.drop_table("surveys")

    op.execute("DROP TYPE IF EXISTS response_status")
    op.execute("DROP TYPE IF EXISTS survey_status")
