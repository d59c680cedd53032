# tributomed/interfaces/api/routes/noticia_routes.py
import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from tributomed.application.dtos.noticia_dto import AtualizacaoNoticiasDTO, NoticiaDTO
from tributomed.application.services.noticia_service import NoticiaService
from tributomed.domain.reforma.noticias import LIMITE_MAXIMO, LIMITE_PADRAO
from tributomed.interfaces.api.dependencies import get_noticia_service

router = APIRouter()


@router.get("/reforma/noticias", response_model=list[NoticiaDTO])
def listar_noticias(
    limit: int = Query(default=LIMITE_PADRAO, ge=1, le=LIMITE_MAXIMO),
    service: NoticiaService = Depends(get_noticia_service),  # noqa: B008
) -> list[NoticiaDTO]:
    return service.listar(limit)


@router.post("/reforma/noticias/atualizar", response_model=AtualizacaoNoticiasDTO)
def atualizar_noticias(
    service: NoticiaService = Depends(get_noticia_service),  # noqa: B008
) -> AtualizacaoNoticiasDTO:
    try:
        return service.atualizar()
    except httpx.HTTPError as err:
        raise HTTPException(status_code=502, detail="Falha ao buscar noticias do Ministerio da Fazenda") from err


@router.post("/reforma/noticias/seed", response_model=AtualizacaoNoticiasDTO)
def seed_noticias(
    service: NoticiaService = Depends(get_noticia_service),  # noqa: B008
) -> AtualizacaoNoticiasDTO:
    return service.seed()
