import xml.etree.ElementTree as ET

from quizmaker.exporters.base import QuizExporter, question_texts


class XmlQuizExporter(QuizExporter):
    key = "xml"
    display_name = "XML"
    file_extension = "xml"
    mime_type = "application/xml"

    def render(self, quiz):
        root = ET.Element("Quiz", Name=quiz.name or "")
        for text in question_texts(quiz):
            question = ET.SubElement(root, "Question")
            ET.SubElement(question, "Text").text = text

        ET.indent(root, space="  ")
        content = ET.tostring(root, encoding="utf-8", xml_declaration=True)
        return self.result(quiz, content)
