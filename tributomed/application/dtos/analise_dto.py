# tributomed/application/dtos/analise_dto.py
from __future__ import annotations

from pydantic import BaseModel

from tributomed.domain.analise.entities import AnexoProcessado, RegistroAnalise
from tributomed.domain.compliance.regras import AlertaCompliance

from .cenario_dto import CenarioDTO, ImpactoIRPFDTO, PontoEquilibrioDTO, ProjecaoDTO
from .reforma_dto import ImpactoReformaDTO, RelatorioImpactoDTO


class AlertaComplianceDTO(BaseModel):
    tipo: str
    titulo: str
    descricao: str
    sugestao: str | None

    @classmethod
    def from_domain(cls, alerta: AlertaCompliance) -> AlertaComplianceDTO:
        return cls(tipo=alerta.tipo.value, titulo=alerta.titulo, descricao=alerta.descricao, sugestao=alerta.sugestao)


class AnexoDTO(BaseModel):
    nome: str
    tipo: str
    tamanho: int

    @classmethod
    def from_domain(cls, anexo: AnexoProcessado) -> AnexoDTO:
        return cls(nome=anexo.nome, tipo=anexo.tipo, tamanho=anexo.tamanho)


class AnaliseDTO(BaseModel):
    """Analise completa. E tambem o conteudo persistido em analises.payload."""

    id: str
    criada_em: str
    tipo_cliente: str
    empresa: str | None
    cnpj: str | None
    faturamento_mensal: str
    cnaes: list[str]
    natureza_juridica: str
    cenarios: list[CenarioDTO]
    melhor_cenario: CenarioDTO | None
    alertas_compliance: list[AlertaComplianceDTO]
    impactos_irpf: dict[str, ImpactoIRPFDTO]
    projecoes: list[ProjecaoDTO]
    ponto_equilibrio: PontoEquilibrioDTO
    resumo_executivo: str
    resumo_gerado_por_ia: bool
    impacto_reforma: ImpactoReformaDTO | None
    relatorio_reforma: RelatorioImpactoDTO | None
    anexos: list[AnexoDTO]
    texto_documentos: str
    webhook_resposta: str | None = None


class AnaliseResumoDTO(BaseModel):
    id: str
    criada_em: str
    tipo_cliente: str
    empresa: str | None
    cnpj: str | None
    faturamento_mensal: str
    melhor_cenario: str | None

    @classmethod
    def from_registro(cls, registro: RegistroAnalise) -> AnaliseResumoDTO:
        return cls(
            id=str(registro.id),
            criada_em=registro.criada_em.isoformat(),
            tipo_cliente=registro.tipo_cliente,
            empresa=registro.empresa,
            cnpj=registro.cnpj,
            faturamento_mensal=f"{registro.faturamento_mensal:.2f}",
            melhor_cenario=registro.melhor_cenario,
        )
