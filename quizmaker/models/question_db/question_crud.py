from typing import Iterable, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from quizmaker.core.config import settings
from quizmaker.models.common.paging import PagedResult, clamp_paging
from quizmaker.models.question_db.question_db import Question


def search_questions_paged(
    db: Session, search: Optional[str], page: int, page_size: int
) -> PagedResult[Question]:
    page, page_size = clamp_paging(page, page_size, settings.MAX_PAGE_SIZE)

    query = db.query(Question).filter(Question.is_deleted.is_(False))
    if search and search.strip():
        query = query.filter(Question.text.icontains(search.strip(), autoescape=True))

    total = query.count()
    items = (
        query.order_by(Question.created_at.desc(), Question.id)
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return PagedResult(items=items, total_count=total, page=page, page_size=page_size)


def get_questions_by_ids(db: Session, ids: Iterable[UUID]) -> List[Question]:
    # returns whatever subset exists; callers detect the gaps
    ids = list(ids or [])
    if not ids:
        return []
    return db.query(Question).filter(Question.id.in_(ids)).all()


def add_questions(db: Session, questions: List[Question]):
    if not questions:
        return
    db.add_all(questions)
    # rows must exist before links referencing them are inserted
    db.flush()


def add_question(db: Session, question: Question):
    db.add(question)
    db.flush()
