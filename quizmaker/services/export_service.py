import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from quizmaker.core.errors import ExporterNotFound, MissingArgument
from quizmaker.exporters.base import ExportResult
from quizmaker.exporters.registry import ExporterRegistry
from quizmaker.schemas.exporter.exporter_base import ExporterOut
from quizmaker.services.quiz_service import NIL_UUID, get_quiz_details

logger = logging.getLogger(__name__)


def list_exporters(registry: ExporterRegistry) -> List[ExporterOut]:
    return [
        ExporterOut(
            key=info.key,
            display_name=info.display_name,
            file_extension=info.file_extension,
            mime_type=info.mime_type,
        )
        for info in registry.list_all()
    ]


def export_quiz(db: Session, registry: ExporterRegistry, quiz_id: UUID, exporter_key: str) -> ExportResult:
    if quiz_id is None or quiz_id == NIL_UUID:
        raise MissingArgument("Quiz id is required.", "id")
    if not exporter_key or not exporter_key.strip():
        raise MissingArgument("Exporter key is required.", "exporter")

    exporter = registry.resolve(exporter_key)
    if exporter is None:
        raise ExporterNotFound(exporter_key)

    quiz = get_quiz_details(db, quiz_id)
    result = exporter.render(quiz)

    logger.info("Quiz %s exported as %s (%d bytes)", quiz_id, exporter.key, len(result.content))
    return result
