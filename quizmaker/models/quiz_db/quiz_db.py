import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Index, Uuid
from sqlalchemy.orm import composite, relationship
from quizmaker.core.constants import QUIZ_NAME_MAX_LENGTH
from quizmaker.core.database import Base
from quizmaker.models.common.audit import AuditInfo
from quizmaker.models.quiz_db.quiz_question_db import QuizQuestionLink


class Quiz(Base):
    __tablename__ = "quizzes"
    __table_args__ = (
        Index("ix_quizzes_is_deleted_created_at", "is_deleted", "created_at"),
    )

    id = Column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    name = Column(String(QUIZ_NAME_MAX_LENGTH), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    audit = composite(AuditInfo, created_at, updated_at, is_deleted, deleted_at)

    # one-way: links never point back at the quiz object
    links = relationship(
        QuizQuestionLink,
        order_by=QuizQuestionLink.display_order,
        cascade="all, delete-orphan",
    )
