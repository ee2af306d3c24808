from datetime import datetime
from uuid import UUID

from quizmaker.schemas.common.camel import CamelModel


class QuestionListItemOut(CamelModel):
    id: UUID
    text: str
    created_at: datetime
