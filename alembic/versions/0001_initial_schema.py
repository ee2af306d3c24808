"""initial schema: questions, quizzes, quiz_questions

Revision ID: 0001
Revises:
Create Date: 2026-02-12 21:34:01

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("text", sa.String(length=1000), nullable=False),
        sa.Column("correct_answer", sa.String(length=1000), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_questions_id", "questions", ["id"])
    op.create_index("ix_questions_text", "questions", ["text"])
    op.create_index("ix_questions_created_at", "questions", ["created_at"])

    op.create_table(
        "quizzes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_quizzes_id", "quizzes", ["id"], unique=True)
    op.create_index("ix_quizzes_name", "quizzes", ["name"])
    op.create_index("ix_quizzes_is_deleted_created_at", "quizzes", ["is_deleted", "created_at"])

    op.create_table(
        "quiz_questions",
        sa.Column("quiz_id", sa.Uuid(), sa.ForeignKey("quizzes.id"), primary_key=True),
        sa.Column("question_id", sa.Uuid(), sa.ForeignKey("questions.id"), primary_key=True),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_quiz_questions_question_id", "quiz_questions", ["question_id"])
    op.create_index(
        "ux_quiz_questions_quiz_id_display_order",
        "quiz_questions",
        ["quiz_id", "display_order"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("ux_quiz_questions_quiz_id_display_order", table_name="quiz_questions")
    op.drop_index("ix_quiz_questions_question_id", table_name="quiz_questions")
    op.drop_table("quiz_questions")

    op.drop_index("ix_quizzes_is_deleted_created_at", table_name="quizzes")
    op.drop_index("ix_quizzes_name", table_name="quizzes")
    op.drop_index("ix_quizzes_id", table_name="quizzes")
    op.drop_table("quizzes")

    op.drop_index("ix_questions_created_at", table_name="questions")
    op.drop_index("ix_questions_text", table_name="questions")
    op.drop_index("ix_questions_id", table_name="questions")
    op.drop_table("questions")
