# tributomed/interfaces/api/routes/reforma_routes.py
from fastapi import APIRouter, Depends, HTTPException

from tributomed.application.dtos.conhecimento_dto import ConhecimentoReformaDTO
from tributomed.application.dtos.reforma_dto import (
    ImpactoReformaDTO,
    ImpactoReformaRequestDTO,
    PerguntaAssistenteDTO,
    RelatorioImpactoDTO,
    RelatorioReformaRequestDTO,
    RespostaAssistenteDTO,
)
from tributomed.application.services.reforma_service import ReformaService
from tributomed.domain.reforma.comparativo import DadosClienteReforma
from tributomed.interfaces.api.dependencies import get_reforma_service

router = APIRouter()


@router.post("/reforma/impacto", response_model=ImpactoReformaDTO)
def impacto_reforma(
    body: ImpactoReformaRequestDTO,
    service: ReformaService = Depends(get_reforma_service),  # noqa: B008
) -> ImpactoReformaDTO:
    try:
        perfil = body.perfil.to_domain() if body.perfil else None
        return service.impacto(body.faturamento_mensal, body.regime_atual, perfil)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.post("/reforma/relatorio", response_model=RelatorioImpactoDTO)
def relatorio_reforma(
    body: RelatorioReformaRequestDTO,
    service: ReformaService = Depends(get_reforma_service),  # noqa: B008
) -> RelatorioImpactoDTO:
    try:
        perfil = body.perfil.to_domain()
        dados = DadosClienteReforma(
            faturamento_mensal=perfil.faturamento_mensal,
            empresa=body.empresa,
            regime=body.regime,
            setor=body.setor,
            cnaes=tuple(body.cnaes),
        )
        return service.relatorio(perfil, dados)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.get("/reforma/conhecimento", response_model=ConhecimentoReformaDTO)
def conhecimento_reforma() -> ConhecimentoReformaDTO:
    return ConhecimentoReformaDTO.carregar()


@router.post("/reforma/assistente", response_model=RespostaAssistenteDTO)
def assistente_reforma(
    body: PerguntaAssistenteDTO,
    service: ReformaService = Depends(get_reforma_service),  # noqa: B008
) -> RespostaAssistenteDTO:
    try:
        pergunta = body.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return service.perguntar(pergunta)
