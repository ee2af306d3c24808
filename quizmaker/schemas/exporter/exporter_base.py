from quizmaker.schemas.common.camel import CamelModel


class ExporterOut(CamelModel):
    key: str
    display_name: str
    file_extension: str
    mime_type: str
