"""Create personality quiz tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "personality_quizzes",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("language", sa.String(), nullable=True),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_personality_quizzes_id", "personality_quizzes", ["id"])
    op.create_index("ix_personality_quizzes_user_id", "personality_quizzes", ["user_id"])

    op.create_table(
        "personality_types",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("quiz_id", sa.String(length=36), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["quiz_id"], ["personality_quizzes.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_personality_types_id", "personality_types", ["id"])
    op.create_index("ix_personality_types_quiz_id", "personality_types", ["quiz_id"])

    op.create_table(
        "personality_questions",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("quiz_id", sa.String(length=36), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("help_text", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["quiz_id"], ["personality_quizzes.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_personality_questions_id", "personality_questions", ["id"])
    op.create_index("ix_personality_questions_quiz_id", "personality_questions", ["quiz_id"])

    op.create_table(
        "personality_options",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("question_id", sa.String(length=36), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("option_text", sa.Text(), nullable=False),
        sa.Column("type_scores_json", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["question_id"], ["personality_questions.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_personality_options_id", "personality_options", ["id"])
    op.create_index("ix_personality_options_question_id", "personality_options", ["question_id"])

    op.create_table(
        "personality_quiz_results",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("quiz_id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("dominant_type_id", sa.String(length=36), nullable=True),
        sa.Column("result_summary", sa.Text(), nullable=True),
        sa.Column("scores_json", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["quiz_id"], ["personality_quizzes.id"]),
        sa.ForeignKeyConstraint(["dominant_type_id"], ["personality_types.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_personality_quiz_results_id", "personality_quiz_results", ["id"])
    op.create_index("ix_personality_quiz_results_quiz_id", "personality_quiz_results", ["quiz_id"])
    op.create_index("ix_personality_quiz_results_user_id", "personality_quiz_results", ["user_id"])
    op.create_index(
        "ix_personality_quiz_results_dominant_type_id", "personality_quiz_results", ["dominant_type_id"]
    )


def downgrade() -> None:
    op.drop_table("personality_quiz_results")
    op.drop_table("personality_options")
    op.drop_table("personality_questions")
    op.drop_table("personality_types")
    op.drop_table("personality_quizzes")
