"""Renderer contract shared by every export format.

A renderer turns a loaded quiz (anything exposing ``name`` and ``questions``,
each question exposing ``text``) into a downloadable file. Questions arrive
already ordered by display order and are emitted as-is. Correct answers are
never written: exports are meant for participants.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from quizmaker.schemas.quiz.quiz_base import QuizDetailsOut

UTF8_BOM = b"\xef\xbb\xbf"
FALLBACK_FILE_NAME = "quiz"

_WHITESPACE = re.compile(r"\s")
_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


@dataclass(frozen=True)
class ExportResult:
    content: bytes
    file_name: str
    mime_type: str


@dataclass(frozen=True)
class ExporterInfo:
    key: str
    display_name: str
    file_extension: str
    mime_type: str


def sanitize_file_name(name) -> str:
    """Turn a quiz name into a safe file base name.

    >>> sanitize_file_name("  Geo Quiz  ")
    'Geo_Quiz'
    >>> sanitize_file_name("a/b: c?")
    'a_b_c'
    >>> sanitize_file_name(" ... ")
    'quiz'
    """
    name = (name or "").strip()
    name = _WHITESPACE.sub("_", name)
    name = _INVALID_CHARS.sub("_", name)
    name = _REPEATED_UNDERSCORES.sub("_", name)
    name = name.strip("_. ")
    return name or FALLBACK_FILE_NAME


def question_texts(quiz):
    """Texts in the order received; a missing collection counts as empty."""
    return [question.text or "" for question in (quiz.questions or [])]


class QuizExporter(ABC):
    key: str
    display_name: str
    file_extension: str
    mime_type: str

    @property
    def info(self) -> ExporterInfo:
        return ExporterInfo(
            key=self.key,
            display_name=self.display_name,
            file_extension=self.file_extension,
            mime_type=self.mime_type,
        )

    def file_name_for(self, quiz) -> str:
        return f"{sanitize_file_name(quiz.name)}.{self.file_extension}"

    def result(self, quiz, content: bytes) -> ExportResult:
        return ExportResult(content=content, file_name=self.file_name_for(quiz), mime_type=self.mime_type)

    @abstractmethod
    def render(self, quiz: QuizDetailsOut) -> ExportResult:
        ...
