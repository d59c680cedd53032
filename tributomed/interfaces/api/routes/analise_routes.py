# tributomed/interfaces/api/routes/analise_routes.py
import uuid
from decimal import Decimal

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from pydantic import TypeAdapter

from tributomed.application.dtos.analise_dto import AnaliseDTO, AnaliseResumoDTO
from tributomed.application.dtos.cenario_dto import AtividadeDTO
from tributomed.application.services.analise_service import AnaliseService
from tributomed.domain.analise.entities import ArquivoAnexo, EntradaAnalise
from tributomed.domain.cliente.value_objects import CNPJ, TipoCliente, parse_decimal_br
from tributomed.interfaces.api.dependencies import get_analise_service

router = APIRouter()

_ATIVIDADES = TypeAdapter(list[AtividadeDTO])


@router.post("/analises", response_model=AnaliseDTO, status_code=201)
def criar_analise(
    tipo_cliente: TipoCliente = Form(...),  # noqa: B008
    faturamento_mensal: str = Form(""),  # noqa: B008
    empresa: str = Form(""),  # noqa: B008
    cnpj: str = Form(""),  # noqa: B008
    dados_cliente: str = Form(""),  # noqa: B008
    transcricao: str = Form(""),  # noqa: B008
    cnaes: str = Form(""),  # noqa: B008
    rbt12: str = Form(""),  # noqa: B008
    fs12: str = Form(""),  # noqa: B008
    folha_mensal: str = Form(""),  # noqa: B008
    aliquota_iss: str = Form(""),  # noqa: B008
    municipio: str = Form(""),  # noqa: B008
    numero_socios: int = Form(1, ge=1),  # noqa: B008
    margem_lucro_real: str = Form("30"),  # noqa: B008
    equiparacao_hospitalar: bool = Form(False),  # noqa: B008
    sociedade_uniprofissional: bool = Form(False),  # noqa: B008
    atividades: str = Form("[]"),  # noqa: B008
    anexos: list[UploadFile] = File(default=[]),  # noqa: B008
    service: AnaliseService = Depends(get_analise_service),  # noqa: B008
) -> AnaliseDTO:
    """Analise completa a partir do formulario (multipart). Valores aceitam formato brasileiro."""
    try:
        margem = parse_decimal_br(margem_lucro_real) or Decimal("30")
        entrada = EntradaAnalise(
            tipo_cliente=tipo_cliente,
            faturamento_mensal=parse_decimal_br(faturamento_mensal),
            empresa=empresa.strip(),
            cnpj=CNPJ(cnpj).formatado if cnpj.strip() else "",
            dados_cliente=dados_cliente,
            transcricao=transcricao,
            cnaes=tuple(c.strip() for c in cnaes.split(",") if c.strip()),
            rbt12=parse_decimal_br(rbt12),
            fs12=parse_decimal_br(fs12),
            folha_mensal=parse_decimal_br(folha_mensal),
            aliquota_iss=parse_decimal_br(aliquota_iss),
            municipio=municipio.strip(),
            numero_socios=numero_socios,
            margem_lucro_real=margem / 100,
            equiparacao_hospitalar=equiparacao_hospitalar,
            sociedade_uniprofissional=sociedade_uniprofissional,
            atividades=tuple(a.to_domain() for a in _ATIVIDADES.validate_json(atividades or "[]")),
        )
        arquivos = [
            ArquivoAnexo(nome=a.filename or "anexo", tipo=a.content_type or "", conteudo=a.file.read())
            for a in anexos
        ]
        return service.analisar(entrada, arquivos)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.get("/analises", response_model=list[AnaliseResumoDTO])
def listar_analises(
    limit: int = Query(default=20, ge=1, le=100),
    service: AnaliseService = Depends(get_analise_service),  # noqa: B008
) -> list[AnaliseResumoDTO]:
    return service.listar(limit)


@router.get("/analises/{analise_id}", response_model=AnaliseDTO)
def get_analise(
    analise_id: uuid.UUID,
    service: AnaliseService = Depends(get_analise_service),  # noqa: B008
) -> AnaliseDTO:
    analise = service.obter(analise_id)
    if analise is None:
        raise HTTPException(status_code=404, detail="Analise nao encontrada")
    return analise
