from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, Uuid
from quizmaker.core.database import Base
from quizmaker.models.question_db.question_db import Question  # noqa: F401  (questions table for the FK)


class QuizQuestionLink(Base):
    """Join row placing one question at one position inside one quiz.

    Only ids are stored; the question itself is looked up by id when the quiz
    is read.
    """

    __tablename__ = "quiz_questions"
    __table_args__ = (
        Index("ux_quiz_questions_quiz_id_display_order", "quiz_id", "display_order", unique=True),
    )

    quiz_id = Column(Uuid, ForeignKey("quizzes.id"), primary_key=True)
    question_id = Column(Uuid, ForeignKey("questions.id"), primary_key=True, index=True)
    display_order = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
