import logging

from sqlalchemy.orm import Session
from quizmaker.core.database import SessionLocal
from quizmaker.models.common.audit import AuditInfo
from quizmaker.models.question_db.question_crud import add_question
from quizmaker.models.question_db.question_db import Question
from quizmaker.models.quiz_db.quiz_crud import save_all
import uuid

logger = logging.getLogger(__name__)


question_data = [
    {"text": "What is the capital of France?", "correct_answer": "Paris"},
    {"text": "What is the largest planet in our solar system?", "correct_answer": "Jupiter"},
    {"text": "How many continents are there on Earth?", "correct_answer": "Seven"},
    {"text": "What is the chemical symbol for gold?", "correct_answer": "Au"},
    {"text": "Who wrote 'Romeo and Juliet'?", "correct_answer": "William Shakespeare"},
    {"text": "What is the boiling point of water at sea level in Celsius?", "correct_answer": "100"},
    {"text": "Which ocean is the largest?", "correct_answer": "The Pacific Ocean"},
    {"text": "What is the square root of 144?", "correct_answer": "12"},
]


def seed_questions(db: Session) -> int:
    """Insert the starter question bank, skipping texts that already exist."""
    created = 0
    for data in question_data:
        exists = db.query(Question).filter(Question.text == data["text"]).first()
        if not exists:
            add_question(db, Question(
                id=uuid.uuid4(),
                text=data["text"],
                correct_answer=data["correct_answer"],
                audit=AuditInfo.new(),
            ))
            created += 1

    save_all(db)
    logger.info("Seeded %d questions", created)
    return created


if __name__ == "__main__":
    from quizmaker.core.config import settings
    from quizmaker.core.logging import configure_logging

    configure_logging(settings.LOG_LEVEL)
    session = SessionLocal()
    try:
        seed_questions(session)
    finally:
        session.close()
