import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.orm import composite
from quizmaker.core.constants import QUESTION_TEXT_MAX_LENGTH, CORRECT_ANSWER_MAX_LENGTH
from quizmaker.core.database import Base
from quizmaker.models.common.audit import AuditInfo


class Question(Base):
    __tablename__ = "questions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    text = Column(String(QUESTION_TEXT_MAX_LENGTH), nullable=False, index=True)
    correct_answer = Column(String(CORRECT_ANSWER_MAX_LENGTH), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    audit = composite(AuditInfo, created_at, updated_at, is_deleted, deleted_at)
