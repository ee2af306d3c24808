from datetime import datetime
from uuid import UUID

from typing import List, Optional

from quizmaker.schemas.common.camel import CamelModel


class NewQuestionIn(CamelModel):
    text: Optional[str] = None
    correct_answer: Optional[str] = None


class QuizBase(CamelModel):
    # lengths and emptiness are checked by the quiz service so that every
    # input problem surfaces as the same MissingArgument error
    name: Optional[str] = None
    existing_question_ids: Optional[List[Optional[UUID]]] = None
    new_questions: Optional[List[Optional[NewQuestionIn]]] = None


class QuizCreate(QuizBase):
    pass


class QuizUpdate(QuizBase):
    pass


class QuizCreatedOut(CamelModel):
    id: UUID


class QuizListItemOut(CamelModel):
    id: UUID
    name: str
    question_count: int
    created_at: datetime


class QuizQuestionOut(CamelModel):
    id: UUID
    text: str
    correct_answer: str


class QuizDetailsOut(CamelModel):
    id: UUID
    name: str
    questions: List[QuizQuestionOut] = []
