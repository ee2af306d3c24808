import logging

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from quizmaker.core.config import settings
from quizmaker.core.errors import register_error_handlers
from quizmaker.core.logging import configure_logging
from quizmaker.exporters.registry import get_exporter_registry
from quizmaker.routes.exporter.exporter_routers import exporter_router
from quizmaker.routes.question.question_routers import question_router
from quizmaker.routes.quiz.quiz_routers import quiz_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("quizmaker")

app = FastAPI(title="QuizMaker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(quiz_router)
app.include_router(question_router)
app.include_router(exporter_router)

# exporters are registered once, before the first request
get_exporter_registry()
logger.info("QuizMaker API ready")


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>QuizMaker</title>
        </head>
        <body>
            <h1>QuizMaker API</h1>
            <p>See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
