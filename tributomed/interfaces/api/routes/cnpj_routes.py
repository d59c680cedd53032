# tributomed/interfaces/api/routes/cnpj_routes.py
import httpx
from fastapi import APIRouter, Depends, HTTPException

from tributomed.application.dtos.cnpj_dto import EmpresaDTO
from tributomed.application.services.cnpj_service import CNPJService
from tributomed.infrastructure.brasilapi_client import LimiteBrasilAPIExcedido
from tributomed.interfaces.api.dependencies import get_cnpj_service

router = APIRouter()


@router.get("/cnpj/{cnpj_raw}", response_model=EmpresaDTO)
def get_empresa(
    cnpj_raw: str,
    service: CNPJService = Depends(get_cnpj_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = service.consultar(cnpj_raw)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    except LimiteBrasilAPIExcedido as err:
        raise HTTPException(status_code=429, detail=str(err)) from err
    except httpx.HTTPError as err:
        raise HTTPException(status_code=502, detail="Falha ao consultar a BrasilAPI") from err

    if empresa is None:
        raise HTTPException(status_code=404, detail="CNPJ nao encontrado")
    return empresa
