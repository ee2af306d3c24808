from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
from quizmaker.core.database import get_db
from quizmaker.exporters.registry import ExporterRegistry, get_exporter_registry
from quizmaker.schemas.common.page_response import PageResponse
from quizmaker.schemas.quiz.quiz_base import (
    QuizCreate,
    QuizCreatedOut,
    QuizDetailsOut,
    QuizListItemOut,
    QuizUpdate,
)
from quizmaker.services import export_service, quiz_service
from quizmaker.services.sort_order import SortOrder

quiz_router = APIRouter(prefix="/quizzes", tags=["Quizzes"])


@quiz_router.get("/", response_model=PageResponse[QuizListItemOut])
def list_quizzes(
    search: Optional[str] = None,
    page: Optional[int] = Query(None, ge=1),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
    sort_order: Optional[SortOrder] = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
):
    return quiz_service.list_quizzes(db, search, page, page_size, sort_order)


@quiz_router.get("/{quiz_id}", response_model=QuizDetailsOut)
def get_quiz(quiz_id: UUID, db: Session = Depends(get_db)):
    return quiz_service.get_quiz_details(db, quiz_id)


@quiz_router.post("/", response_model=QuizCreatedOut, status_code=status.HTTP_201_CREATED)
def create_quiz(quiz_in: QuizCreate, response: Response, db: Session = Depends(get_db)):
    quiz_id = quiz_service.create_quiz(db, quiz_in)
    response.headers["Location"] = f"{quiz_router.prefix}/{quiz_id}"
    return QuizCreatedOut(id=quiz_id)


@quiz_router.put("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_quiz(quiz_id: UUID, quiz_in: QuizUpdate, db: Session = Depends(get_db)):
    quiz_service.update_quiz(db, quiz_id, quiz_in)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@quiz_router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quiz(quiz_id: UUID, db: Session = Depends(get_db)):
    quiz_service.delete_quiz(db, quiz_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@quiz_router.get("/{quiz_id}/export", response_class=Response)
def export_quiz(
    quiz_id: UUID,
    exporter: Optional[str] = None,
    db: Session = Depends(get_db),
    registry: ExporterRegistry = Depends(get_exporter_registry),
):
    result = export_service.export_quiz(db, registry, quiz_id, exporter)
    disposition = f"attachment; filename=\"{_ascii_file_name(result.file_name)}\"; filename*=UTF-8''{quote(result.file_name)}"
    return Response(
        content=result.content,
        media_type=result.mime_type,
        headers={"Content-Disposition": disposition},
    )


def _ascii_file_name(file_name: str) -> str:
    return file_name.encode("ascii", "replace").decode("ascii").replace("?", "_")
