from fastapi import APIRouter, Depends
from typing import List
from quizmaker.exporters.registry import ExporterRegistry, get_exporter_registry
from quizmaker.schemas.exporter.exporter_base import ExporterOut
from quizmaker.services import export_service

exporter_router = APIRouter(prefix="/exporters", tags=["Exporters"])


@exporter_router.get("/", response_model=List[ExporterOut])
def list_exporters(registry: ExporterRegistry = Depends(get_exporter_registry)):
    return export_service.list_exporters(registry)
