import logging
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, selectinload

from quizmaker.core.config import settings
from quizmaker.models.common.paging import PagedResult, clamp_paging
from quizmaker.models.question_db.question_crud import get_questions_by_ids
from quizmaker.models.question_db.question_db import Question
from quizmaker.models.quiz_db.quiz_db import Quiz
from quizmaker.models.quiz_db.quiz_question_db import QuizQuestionLink
from quizmaker.services.sort_order import SortOrder

logger = logging.getLogger(__name__)


@dataclass
class QuizWithQuestions:
    quiz: Quiz
    # ordered by link display_order
    questions: List[Question] = field(default_factory=list)


def get_quizzes_paged(
    db: Session,
    search: Optional[str],
    page: int,
    page_size: int,
    sort_order: SortOrder = SortOrder.desc,
) -> PagedResult[Quiz]:
    page, page_size = clamp_paging(page, page_size, settings.MAX_PAGE_SIZE)

    query = db.query(Quiz).filter(Quiz.is_deleted.is_(False))
    if search and search.strip():
        query = query.filter(Quiz.name.icontains(search.strip(), autoescape=True))

    total = query.count()

    if sort_order == SortOrder.asc:
        query = query.order_by(Quiz.created_at.asc(), Quiz.id)
    else:
        query = query.order_by(Quiz.created_at.desc(), Quiz.id)

    items = (
        query.options(selectinload(Quiz.links))
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return PagedResult(items=items, total_count=total, page=page, page_size=page_size)


def get_quiz_by_id(db: Session, quiz_id: UUID) -> Optional[Quiz]:
    return (
        db.query(Quiz)
        .options(selectinload(Quiz.links))
        .filter(Quiz.id == quiz_id, Quiz.is_deleted.is_(False))
        .first()
    )


def get_quiz_with_questions(db: Session, quiz_id: UUID) -> Optional[QuizWithQuestions]:
    quiz = get_quiz_by_id(db, quiz_id)
    if not quiz:
        return None

    by_id = {q.id: q for q in get_questions_by_ids(db, [link.question_id for link in quiz.links])}
    questions = [by_id[link.question_id] for link in quiz.links if link.question_id in by_id]
    return QuizWithQuestions(quiz=quiz, questions=questions)


def add_quiz(db: Session, quiz: Quiz):
    db.add(quiz)


def replace_quiz_links(db: Session, quiz: Quiz, links: List[QuizQuestionLink]):
    quiz.links.clear()
    # old rows go first so (quiz_id, display_order) and the pk stay unique
    db.flush()
    quiz.links.extend(links)


def soft_delete_quiz(db: Session, quiz_id: UUID) -> bool:
    quiz = db.query(Quiz).filter(Quiz.id == quiz_id, Quiz.is_deleted.is_(False)).first()
    if not quiz:
        return False
    quiz.audit = quiz.audit.soft_deleted()
    return True


def save_all(db: Session) -> bool:
    try:
        db.commit()
    except Exception:
        logger.error("Commit failed, rolling back")
        db.rollback()
        raise
    return True
