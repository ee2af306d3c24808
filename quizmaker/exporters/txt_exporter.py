from quizmaker.exporters.base import QuizExporter, UTF8_BOM


class TxtQuizExporter(QuizExporter):
    key = "txt"
    display_name = "Plain Text"
    file_extension = "txt"
    mime_type = "text/plain"

    def render(self, quiz):
        # no fallback for a missing collection: iterating None raises TypeError
        content = "\n".join(question.text or "" for question in quiz.questions)
        return self.result(quiz, UTF8_BOM + content.encode("utf-8"))
