import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    missing_argument = "missing_argument"
    entity_not_found = "entity_not_found"
    exporter_not_found = "exporter_not_found"
    unexpected = "unexpected"


class QuizMakerError(Exception):
    """Base class for expected failures raised by the services.

    Every subclass carries an ``ErrorKind`` so the HTTP boundary can map it
    to a stable status code without inspecting messages.
    """

    kind = ErrorKind.unexpected

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingArgument(QuizMakerError):
    kind = ErrorKind.missing_argument

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class EntityNotFound(QuizMakerError):
    kind = ErrorKind.entity_not_found

    def __init__(self, entity: str, key):
        super().__init__(f"Entity {entity} with ID {key} not found.")
        self.entity = entity
        self.key = str(key)


class ExporterNotFound(QuizMakerError):
    kind = ErrorKind.exporter_not_found

    def __init__(self, key: str):
        super().__init__(f"Exporter '{key}' not found.")
        self.key = key


STATUS_BY_KIND = {
    ErrorKind.missing_argument: 400,
    ErrorKind.entity_not_found: 404,
    ErrorKind.exporter_not_found: 404,
    ErrorKind.unexpected: 500,
}

UNEXPECTED_MESSAGE = "An unexpected error occurred."


def _error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind],
        content={"detail": message, "kind": kind.value},
    )


async def quizmaker_error_handler(request: Request, exc: QuizMakerError):
    logger.debug("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.kind, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed input is reported like any other missing argument
    message = "; ".join(_describe(error) for error in exc.errors()) or "Invalid request."
    logger.debug("%s %s rejected: %s", request.method, request.url.path, message)
    return _error_response(ErrorKind.missing_argument, message)


def _describe(error) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    if not loc:
        return error.get("msg", "Invalid value")
    return "'%s': %s" % (".".join(loc), error.get("msg", "Invalid value"))


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(ErrorKind.unexpected, UNEXPECTED_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuizMakerError, quizmaker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
