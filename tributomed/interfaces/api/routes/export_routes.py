# tributomed/interfaces/api/routes/export_routes.py
import uuid
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from tributomed.application.services.analise_service import AnaliseService
from tributomed.application.services.export_service import ExportService
from tributomed.interfaces.api.dependencies import get_analise_service, get_export_service

router = APIRouter()


@router.get("/analises/{analise_id}/export")
def export_analise(
    analise_id: uuid.UUID,
    formato: Literal["csv", "json", "pdf"] = Query(...),
    analise_service: AnaliseService = Depends(get_analise_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    analise = analise_service.obter(analise_id)
    if analise is None:
        raise HTTPException(status_code=404, detail="Analise nao encontrada")

    if formato == "json":
        return Response(
            content=export_service.exportar_json(analise),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_csv(analise),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename=analise-{analise_id}.csv"},
        )
    # pdf
    try:
        from tributomed.infrastructure.pdf_generator import gerar_pdf_analise

        pdf_bytes = gerar_pdf_analise(analise)
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=analise-{analise_id}.pdf"},
    )
