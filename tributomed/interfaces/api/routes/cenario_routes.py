# tributomed/interfaces/api/routes/cenario_routes.py
from fastapi import APIRouter, Depends, HTTPException

from tributomed.application.dtos.cenario_dto import ISSDTO, PerfilDTO, SimulacaoDTO
from tributomed.application.services.cenario_service import CenarioService
from tributomed.interfaces.api.dependencies import get_cenario_service

router = APIRouter()


@router.post("/cenarios/simular", response_model=SimulacaoDTO)
def simular(
    perfil: PerfilDTO,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> SimulacaoDTO:
    try:
        return service.simular(perfil.to_domain())
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.get("/iss/{municipio}", response_model=ISSDTO)
def get_iss(
    municipio: str,
    service: CenarioService = Depends(get_cenario_service),  # noqa: B008
) -> ISSDTO:
    return service.consultar_iss(municipio)
