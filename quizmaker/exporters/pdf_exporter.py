import io
import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from quizmaker.exporters.base import QuizExporter, question_texts

logger = logging.getLogger(__name__)

TITLE_FONT = ("Helvetica-Bold", 16)
TEXT_FONT = ("Helvetica", 11)

MARGIN_X = 40
TITLE_TOP = 50
TITLE_GAP = 30
LINE_HEIGHT = 18
BOTTOM_MARGIN = 40


class PdfQuizExporter(QuizExporter):
    """Single A4 page: the quiz name, then a numbered list of questions.

    Everything that does not fit on the page is dropped silently.
    """

    key = "pdf"
    display_name = "PDF"
    file_extension = "pdf"
    mime_type = "application/pdf"

    def render(self, quiz):
        width, height = A4
        title = quiz.name or "Quiz"

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle(title)

        # cursor grows downwards from the top edge; reportlab's origin is bottom-left
        cursor = TITLE_TOP
        pdf.setFont(*TITLE_FONT)
        pdf.drawString(MARGIN_X, height - cursor, title)
        cursor += TITLE_GAP

        pdf.setFont(*TEXT_FONT)
        limit = height - BOTTOM_MARGIN
        texts = question_texts(quiz)
        drawn = 0
        for number, text in enumerate(texts, start=1):
            lines = simpleSplit(f"{number}. {text}", TEXT_FONT[0], TEXT_FONT[1], width - 2 * MARGIN_X) or [""]
            if cursor + LINE_HEIGHT * (len(lines) - 1) > limit:
                break
            for line in lines:
                pdf.drawString(MARGIN_X, height - cursor, line)
                cursor += LINE_HEIGHT
            drawn += 1

        if drawn < len(texts):
            logger.debug("PDF export of %r truncated after %d of %d questions", title, drawn, len(texts))

        pdf.showPage()
        pdf.save()
        return self.result(quiz, buffer.getvalue())
