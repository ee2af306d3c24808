from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from quizmaker.core.database import get_db
from quizmaker.schemas.common.page_response import PageResponse
from quizmaker.schemas.question.question_base import QuestionListItemOut
from quizmaker.services import question_service

question_router = APIRouter(prefix="/questions", tags=["Questions"])


@question_router.get("/", response_model=PageResponse[QuestionListItemOut])
def list_questions(
    search: Optional[str] = None,
    page: Optional[int] = Query(None, ge=1),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
    db: Session = Depends(get_db),
):
    return question_service.search_questions(db, search, page, page_size)
