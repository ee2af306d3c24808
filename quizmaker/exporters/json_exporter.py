import json

from quizmaker.exporters.base import QuizExporter, question_texts


class JsonQuizExporter(QuizExporter):
    key = "json"
    display_name = "JSON"
    file_extension = "json"
    mime_type = "application/json"

    def render(self, quiz):
        data = {
            "name": quiz.name,
            "questions": [{"text": text} for text in question_texts(quiz)],
        }
        content = json.dumps(data, indent=2, ensure_ascii=False)
        return self.result(quiz, content.encode("utf-8"))
