"""Quiz aggregate: listing, reading, creating, updating and deleting quizzes.

Create and update share one pipeline:

1. normalize and validate the name, the recycled question ids and the new
   questions, raising ``MissingArgument`` on the first problem;
2. load the recycled questions and fail if any id is unknown;
3. add the new questions, build the links (recycled questions first, then new
   ones, each group in request order, display order counting up from 0);
4. commit everything with a single ``save_all``.

Nothing is written before step 3, so a rejected request leaves the store
untouched.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from quizmaker.core.config import settings
from quizmaker.core.constants import (
    CORRECT_ANSWER_MAX_LENGTH,
    DEFAULT_PAGE,
    QUESTION_TEXT_MAX_LENGTH,
    QUIZ_NAME_MAX_LENGTH,
    QUIZ_NAME_MIN_LENGTH,
    QUIZ_QUESTIONS_MAX_LENGTH,
)
from quizmaker.core.errors import EntityNotFound, MissingArgument
from quizmaker.models.common.audit import AuditInfo, utcnow
from quizmaker.models.question_db.question_crud import add_questions, get_questions_by_ids
from quizmaker.models.question_db.question_db import Question
from quizmaker.models.quiz_db.quiz_crud import (
    add_quiz,
    get_quiz_by_id,
    get_quiz_with_questions,
    get_quizzes_paged,
    replace_quiz_links,
    save_all,
    soft_delete_quiz,
)
from quizmaker.models.quiz_db.quiz_db import Quiz
from quizmaker.models.quiz_db.quiz_question_db import QuizQuestionLink
from quizmaker.schemas.common.page_response import PageResponse
from quizmaker.schemas.quiz.quiz_base import (
    NewQuestionIn,
    QuizBase,
    QuizDetailsOut,
    QuizListItemOut,
    QuizQuestionOut,
)
from quizmaker.services.sort_order import SortOrder

logger = logging.getLogger(__name__)

NIL_UUID = UUID(int=0)


@dataclass
class NormalizedQuiz:
    name: str
    existing_ids: List[UUID]
    new_questions: List[Question]


def list_quizzes(
    db: Session,
    search: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    sort_order: Optional[SortOrder] = None,
) -> PageResponse[QuizListItemOut]:
    page = page or DEFAULT_PAGE
    page_size = page_size or settings.DEFAULT_PAGE_SIZE
    sort_order = sort_order or SortOrder.desc

    result = get_quizzes_paged(db, search, page, page_size, sort_order)
    items = [
        QuizListItemOut(
            id=quiz.id,
            name=quiz.name,
            question_count=len(quiz.links),
            created_at=quiz.created_at,
        )
        for quiz in result.items
    ]
    return PageResponse[QuizListItemOut].from_result(result, items)


def get_quiz_details(db: Session, quiz_id: UUID) -> QuizDetailsOut:
    loaded = get_quiz_with_questions(db, quiz_id)
    if not loaded:
        raise EntityNotFound("Quiz", quiz_id)

    return QuizDetailsOut(
        id=loaded.quiz.id,
        name=loaded.quiz.name,
        questions=[
            QuizQuestionOut(id=q.id, text=q.text, correct_answer=q.correct_answer)
            for q in loaded.questions
        ],
    )


def create_quiz(db: Session, payload: QuizBase) -> UUID:
    if payload is None:
        raise MissingArgument("Request body is required.", "request")

    now = utcnow()
    normalized = _normalize(payload, now)
    existing_by_id = _load_existing_questions(db, normalized.existing_ids)

    quiz = Quiz(id=uuid.uuid4(), name=normalized.name, audit=AuditInfo.new(now))

    add_questions(db, normalized.new_questions)
    quiz.links = build_links(quiz.id, normalized.existing_ids, existing_by_id, normalized.new_questions, now)

    add_quiz(db, quiz)
    save_all(db)

    logger.info("Quiz %s created with %d questions", quiz.id, len(quiz.links))
    return quiz.id


def update_quiz(db: Session, quiz_id: UUID, payload: QuizBase) -> bool:
    if quiz_id is None or quiz_id == NIL_UUID:
        raise MissingArgument("Quiz id is required.", "id")
    if payload is None:
        raise MissingArgument("Request body is required.", "request")

    quiz = get_quiz_by_id(db, quiz_id)
    if not quiz:
        raise EntityNotFound("Quiz", quiz_id)

    now = utcnow()
    normalized = _normalize(payload, now)
    existing_by_id = _load_existing_questions(db, normalized.existing_ids)

    quiz.name = normalized.name
    quiz.audit = quiz.audit.touched(now)

    add_questions(db, normalized.new_questions)
    # full rebuild: links to questions missing from the request are dropped
    links = build_links(quiz.id, normalized.existing_ids, existing_by_id, normalized.new_questions, now)
    replace_quiz_links(db, quiz, links)

    save_all(db)

    logger.info("Quiz %s updated with %d questions", quiz.id, len(links))
    return True


def delete_quiz(db: Session, quiz_id: UUID) -> bool:
    if quiz_id is None or quiz_id == NIL_UUID:
        raise MissingArgument("Quiz id is required.", "id")

    if not soft_delete_quiz(db, quiz_id):
        raise EntityNotFound("Quiz", quiz_id)

    save_all(db)

    logger.info("Quiz %s deleted", quiz_id)
    return True


def build_links(
    quiz_id: UUID,
    existing_ids: List[UUID],
    existing_by_id: Dict[UUID, Question],
    new_questions: List[Question],
    now,
) -> List[QuizQuestionLink]:
    question_ids = [qid for qid in existing_ids if qid in existing_by_id]
    question_ids += [q.id for q in new_questions]

    return [
        QuizQuestionLink(quiz_id=quiz_id, question_id=qid, display_order=order, created_at=now)
        for order, qid in enumerate(question_ids)
    ]


def _normalize(payload: QuizBase, now) -> NormalizedQuiz:
    name = normalize_name(payload.name)
    existing_ids = normalize_ids(payload.existing_question_ids)
    new_questions = normalize_new_questions(payload.new_questions, now)

    if not existing_ids and not new_questions:
        raise MissingArgument("Quiz must contain at least one question.", "questions")

    return NormalizedQuiz(name=name, existing_ids=existing_ids, new_questions=new_questions)


def normalize_name(value: Optional[str]) -> str:
    name = (value or "").strip()
    if not name:
        raise MissingArgument("Quiz name is required.", "name")
    if len(name) < QUIZ_NAME_MIN_LENGTH:
        raise MissingArgument(f"'name' must be at least {QUIZ_NAME_MIN_LENGTH} characters long.", "name")
    if len(name) > QUIZ_NAME_MAX_LENGTH:
        raise MissingArgument(f"'name' exceeds maximum length of {QUIZ_NAME_MAX_LENGTH}.", "name")
    return name


def normalize_ids(ids: Optional[List[Optional[UUID]]]) -> List[UUID]:
    # dict keeps first-occurrence order
    return list(dict.fromkeys(i for i in ids or [] if i is not None and i != NIL_UUID))


def normalize_new_questions(items: Optional[List[Optional[NewQuestionIn]]], now) -> List[Question]:
    pairs = []
    for item in items or []:
        if item is None:
            continue
        text = (item.text or "").strip()
        answer = (item.correct_answer or "").strip()
        if text and answer:
            pairs.append((text, answer))

    if len(pairs) > QUIZ_QUESTIONS_MAX_LENGTH:
        raise MissingArgument(
            f"A quiz accepts at most {QUIZ_QUESTIONS_MAX_LENGTH} new questions per request.", "newQuestions"
        )
    if any(len(text) > QUESTION_TEXT_MAX_LENGTH for text, _ in pairs):
        raise MissingArgument(f"Question text exceeds maximum length of {QUESTION_TEXT_MAX_LENGTH}.", "text")
    if any(len(answer) > CORRECT_ANSWER_MAX_LENGTH for _, answer in pairs):
        raise MissingArgument(
            f"Correct answer exceeds maximum length of {CORRECT_ANSWER_MAX_LENGTH}.", "correctAnswer"
        )

    seen = set()
    for text, _ in pairs:
        folded = text.casefold()
        if folded in seen:
            logger.debug("Duplicate new question rejected: %r", text)
            raise MissingArgument("Duplicate new questions are not allowed within the same request.", "newQuestions")
        seen.add(folded)

    return [
        Question(id=uuid.uuid4(), text=text, correct_answer=answer, audit=AuditInfo.new(now))
        for text, answer in pairs
    ]


def _load_existing_questions(db: Session, existing_ids: List[UUID]) -> Dict[UUID, Question]:
    if not existing_ids:
        return {}

    by_id = {q.id: q for q in get_questions_by_ids(db, existing_ids)}
    missing = [qid for qid in existing_ids if qid not in by_id]
    if missing:
        logger.warning("Unknown question ids requested: %s", ", ".join(str(m) for m in missing))
        raise MissingArgument("One or more existingQuestionIds do not exist.", "existingQuestionIds")
    return by_id
