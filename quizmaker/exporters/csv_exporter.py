import csv
import io

from quizmaker.exporters.base import QuizExporter, UTF8_BOM, question_texts


class CsvQuizExporter(QuizExporter):
    key = "csv"
    display_name = "CSV"
    file_extension = "csv"
    mime_type = "text/csv"

    def render(self, quiz):
        buffer = io.StringIO()
        # QUOTE_MINIMAL quotes fields holding a comma, a quote or a line break
        # and doubles embedded quotes
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
        writer.writerow(["Question"])
        for text in question_texts(quiz):
            writer.writerow([text])

        return self.result(quiz, UTF8_BOM + buffer.getvalue().encode("utf-8"))
