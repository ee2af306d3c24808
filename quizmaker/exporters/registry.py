"""Exporter registry: the single place where output formats are plugged in."""

import logging
from functools import lru_cache
from typing import Dict, List, Optional

from quizmaker.exporters.base import ExporterInfo, QuizExporter
from quizmaker.exporters.csv_exporter import CsvQuizExporter
from quizmaker.exporters.json_exporter import JsonQuizExporter
from quizmaker.exporters.pdf_exporter import PdfQuizExporter
from quizmaker.exporters.txt_exporter import TxtQuizExporter
from quizmaker.exporters.xml_exporter import XmlQuizExporter

logger = logging.getLogger(__name__)


class ExporterRegistry:
    """Resolves exporters by key, case-insensitively.

    Filled once at startup and only read afterwards, so lookups need no locking.
    """

    def __init__(self, exporters=None):
        self._exporters: Dict[str, QuizExporter] = {}
        for exporter in exporters or []:
            self.register(exporter)

    def register(self, exporter: QuizExporter) -> None:
        key = exporter.key.lower()
        if key in self._exporters:
            raise ValueError(f"Exporter key '{exporter.key}' is already registered")
        self._exporters[key] = exporter

    def list_all(self) -> List[ExporterInfo]:
        return sorted((e.info for e in self._exporters.values()), key=lambda info: info.display_name)

    def resolve(self, key: Optional[str]) -> Optional[QuizExporter]:
        if not key or not key.strip():
            return None
        return self._exporters.get(key.strip().lower())


def build_default_registry() -> ExporterRegistry:
    return ExporterRegistry([
        CsvQuizExporter(),
        TxtQuizExporter(),
        JsonQuizExporter(),
        XmlQuizExporter(),
        PdfQuizExporter(),
    ])


@lru_cache
def get_exporter_registry() -> ExporterRegistry:
    registry = build_default_registry()
    logger.info("Registered exporters: %s", ", ".join(info.key for info in registry.list_all()))
    return registry
