from datetime import datetime, timezone
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from qsar_assistant.api.v1.dependencies import get_catalog, get_simulator
from qsar_assistant.api.v1.response_formatter import content_preview, format_report_content
from qsar_assistant.models.qsar.catalog import QSARCatalog
from qsar_assistant.models.qsar.predictor import QSARToolboxSimulator
from qsar_assistant.schemas.qsar import ReportRequest, ReportResponse

DEFAULT_USER_QUERY = "Consulta QSAR"

router = APIRouter()


def _iso(dt: datetime) -> str:
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.post("/generate-report", response_model=ReportResponse)
def generate_report(req: ReportRequest):
    """
    Render the text report for results the client already holds.
    Only a preview is returned; the full document comes from /download-report.
    """
    if not req.substance or req.results is None:
        return JSONResponse(status_code=400, content={"error": "Datos de reporte incompletos"})

    generated_at = datetime.now(timezone.utc)
    content = format_report_content(
        substance=req.substance,
        user_query=req.user_query or DEFAULT_USER_QUERY,
        results=req.results,
        generated_at=generated_at,
    )
    logger.info(f"Report generated for {req.substance!r} ({len(req.results)} results)")

    return ReportResponse(
        success=True,
        pdf_url=f"/api/v1/download-report/{quote(req.substance)}",
        content_preview=content_preview(content),
        generated_at=_iso(generated_at),
    )


@router.get("/download-report/{substance}", response_class=PlainTextResponse)
def download_report(
    substance: str,
    catalog: QSARCatalog = Depends(get_catalog),
    simulator: QSARToolboxSimulator = Depends(get_simulator),
):
    # Full profile: every endpoint in the catalog
    results = simulator.predict_toxicity(substance, catalog.endpoint_codes)
    content = format_report_content(
        substance=substance,
        user_query=DEFAULT_USER_QUERY,
        results=results,
        generated_at=datetime.now(timezone.utc),
    )
    filename = quote(f"reporte_qsar_{substance}.txt")
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{filename}"},
    )
