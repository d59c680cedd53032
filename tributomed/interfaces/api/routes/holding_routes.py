# tributomed/interfaces/api/routes/holding_routes.py
from fastapi import APIRouter, Depends, HTTPException

from tributomed.application.dtos.holding_dto import (
    DiagnosticoHoldingRequestDTO,
    DocumentosHoldingDTO,
    ResultadoDiagnosticoDTO,
)
from tributomed.application.services.holding_service import HoldingService
from tributomed.interfaces.api.dependencies import get_holding_service

router = APIRouter()


@router.post("/holding/diagnostico", response_model=ResultadoDiagnosticoDTO)
def diagnostico_holding(
    body: DiagnosticoHoldingRequestDTO,
    service: HoldingService = Depends(get_holding_service),  # noqa: B008
) -> ResultadoDiagnosticoDTO:
    try:
        return service.diagnosticar(body.to_domain())
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.post("/holding/protocolo", response_model=DocumentosHoldingDTO)
def protocolo_holding(
    body: DiagnosticoHoldingRequestDTO,
    service: HoldingService = Depends(get_holding_service),  # noqa: B008
) -> DocumentosHoldingDTO:
    try:
        return service.documentos(body.to_domain())
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
