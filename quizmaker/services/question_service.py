from typing import Optional

from sqlalchemy.orm import Session

from quizmaker.core.config import settings
from quizmaker.core.constants import DEFAULT_PAGE
from quizmaker.models.question_db.question_crud import search_questions_paged
from quizmaker.schemas.common.page_response import PageResponse
from quizmaker.schemas.question.question_base import QuestionListItemOut


def search_questions(
    db: Session,
    search: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> PageResponse[QuestionListItemOut]:
    """Page through reusable questions, newest first, optionally filtered by text."""
    page = page or DEFAULT_PAGE
    page_size = page_size or settings.DEFAULT_PAGE_SIZE

    result = search_questions_paged(db, search, page, page_size)
    items = [QuestionListItemOut.model_validate(q) for q in result.items]
    return PageResponse[QuestionListItemOut].from_result(result, items)
