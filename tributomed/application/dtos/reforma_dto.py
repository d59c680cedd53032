# tributomed/application/dtos/reforma_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from tributomed.domain.reforma.assistente import (
    ContextoCliente,
    MensagemChat,
    PapelMensagem,
    PerguntaAssistente,
    RespostaAssistente,
)
from tributomed.domain.reforma.comparativo import CenarioReforma, Comparacao, RelatorioImpacto
from tributomed.domain.reforma.impacto import ImpactoReforma

from .cenario_dto import CenarioDTO, ItemTributoDTO, PerfilDTO


def _moeda(valor: Decimal | None) -> str | None:
    return f"{valor:.2f}" if valor is not None else None


class ImpactoReformaRequestDTO(BaseModel):
    faturamento_mensal: Decimal = Field(ge=0)
    regime_atual: str = Field(min_length=1)
    perfil: PerfilDTO | None = None


class RelatorioReformaRequestDTO(BaseModel):
    perfil: PerfilDTO
    empresa: str | None = None
    regime: str | None = None
    setor: str | None = "Saude"
    cnaes: list[str] = []


class AlertaReformaDTO(BaseModel):
    tipo: str
    titulo: str
    descricao: str


class AnoTransicaoDTO(BaseModel):
    ano: int
    icms_percentual: int
    iss_percentual: int
    ibs_percentual: int
    carga_total_estimada: str


class ImpactoReformaDTO(BaseModel):
    regime_atual: str
    faturamento_mensal: str
    carga_atual: dict[str, str | None]
    projecao_2026: dict[str, str]
    projecao_2027: dict[str, str]
    transicao_ibs: list[AnoTransicaoDTO]
    projecao_2033: dict[str, str]
    recomendacoes: list[str]
    alertas: list[AlertaReformaDTO]

    @classmethod
    def from_domain(cls, impacto: ImpactoReforma) -> ImpactoReformaDTO:
        carga = impacto.carga_atual
        p26, p27, p33 = impacto.projecao_2026, impacto.projecao_2027, impacto.projecao_2033
        return cls(
            regime_atual=impacto.regime_atual,
            faturamento_mensal=f"{impacto.faturamento_mensal:.2f}",
            carga_atual={
                "pis_cofins": _moeda(carga.pis_cofins),
                "icms": _moeda(carga.icms),
                "iss": _moeda(carga.iss),
                "total": _moeda(carga.total),
            },
            projecao_2026={
                "cbs_teste": f"{p26.cbs_teste:.2f}",
                "ibs_teste": f"{p26.ibs_teste:.2f}",
                "compensacao_pis_cofins": f"{p26.compensacao_pis_cofins:.2f}",
                "impacto_liquido": f"{p26.impacto_liquido:.2f}",
            },
            projecao_2027={
                "cbs": f"{p27.cbs:.2f}",
                "imposto_seletivo": f"{p27.imposto_seletivo:.2f}",
                "total": f"{p27.total:.2f}",
            },
            transicao_ibs=[
                AnoTransicaoDTO(
                    ano=a.ano,
                    icms_percentual=a.icms_percentual,
                    iss_percentual=a.iss_percentual,
                    ibs_percentual=a.ibs_percentual,
                    carga_total_estimada=f"{a.carga_total_estimada:.2f}",
                )
                for a in impacto.transicao_ibs
            ],
            projecao_2033={
                "cbs": f"{p33.cbs:.2f}",
                "ibs": f"{p33.ibs:.2f}",
                "total": f"{p33.total:.2f}",
                "diferenca_vs_atual": f"{p33.diferenca_vs_atual:.2f}",
                "percentual_mudanca": f"{p33.percentual_mudanca:.2f}",
            },
            recomendacoes=list(impacto.recomendacoes),
            alertas=[AlertaReformaDTO(tipo=a.tipo.value, titulo=a.titulo, descricao=a.descricao) for a in impacto.alertas],
        )


class CenarioReformaDTO(BaseModel):
    nome: str
    regime: str
    cbs: str
    ibs: str
    imposto_total: str
    aliquota_efetiva: str
    aliquota_padrao: str
    reducao_aplicada: str | None
    composicao: list[ItemTributoDTO]
    notas: list[str]

    @classmethod
    def from_domain(cls, cenario: CenarioReforma) -> CenarioReformaDTO:
        return cls(
            nome=cenario.nome,
            regime=cenario.regime,
            cbs=f"{cenario.cbs:.2f}",
            ibs=f"{cenario.ibs:.2f}",
            imposto_total=f"{cenario.imposto_total:.2f}",
            aliquota_efetiva=f"{cenario.aliquota_efetiva:.2f}",
            aliquota_padrao=f"{cenario.aliquota_padrao:.2f}",
            reducao_aplicada=f"{cenario.reducao_aplicada:.0f}" if cenario.reducao_aplicada is not None else None,
            composicao=[ItemTributoDTO(nome=i.nome, valor=f"{i.valor:.2f}", aliquota="0.00") for i in cenario.composicao],
            notas=list(cenario.notas),
        )


class ComparacaoDTO(BaseModel):
    atual: CenarioDTO
    reforma: CenarioReformaDTO
    diferenca_mensal: str
    diferenca_anual: str
    diferenca_percentual: str
    aumento: bool
    mudancas_operacionais: list[dict[str, str]]
    oportunidades: list[dict[str, str]]
    avisos: list[dict[str, str]]

    @classmethod
    def from_domain(cls, comparacao: Comparacao) -> ComparacaoDTO:
        dif = comparacao.diferenca
        return cls(
            atual=CenarioDTO.from_domain(comparacao.atual),
            reforma=CenarioReformaDTO.from_domain(comparacao.reforma),
            diferenca_mensal=f"{dif.mensal:.2f}",
            diferenca_anual=f"{dif.anual:.2f}",
            diferenca_percentual=f"{dif.percentual:.2f}",
            aumento=dif.aumento,
            mudancas_operacionais=[{"titulo": d.titulo, "descricao": d.descricao} for d in comparacao.mudancas_operacionais],
            oportunidades=[{"titulo": d.titulo, "descricao": d.descricao} for d in comparacao.oportunidades],
            avisos=[
                {"titulo": a.titulo, "descricao": a.descricao, "severidade": a.severidade.value}
                for a in comparacao.avisos
            ],
        )


class EtapaTransicaoDTO(BaseModel):
    ano: int
    fase: str
    descricao: str
    impacto_esperado: str
    acoes: list[str]


class RelatorioImpactoDTO(BaseModel):
    cliente: str
    data_analise: str
    faturamento_mensal: str
    regime_atual: str
    setor: str
    cnaes: list[str]
    comparacao: ComparacaoDTO
    todas_comparacoes: list[ComparacaoDTO]
    cronograma: list[EtapaTransicaoDTO]
    impacto_geral: str
    principais_conclusoes: list[str]
    recomendacoes: list[str]

    @classmethod
    def from_domain(cls, relatorio: RelatorioImpacto) -> RelatorioImpactoDTO:
        return cls(
            cliente=relatorio.cliente,
            data_analise=relatorio.data_analise.isoformat(),
            faturamento_mensal=f"{relatorio.faturamento_mensal:.2f}",
            regime_atual=relatorio.regime_atual,
            setor=relatorio.setor,
            cnaes=list(relatorio.cnaes),
            comparacao=ComparacaoDTO.from_domain(relatorio.comparacao),
            todas_comparacoes=[ComparacaoDTO.from_domain(c) for c in relatorio.todas_comparacoes],
            cronograma=[
                EtapaTransicaoDTO(
                    ano=e.ano,
                    fase=e.fase,
                    descricao=e.descricao,
                    impacto_esperado=e.impacto_esperado,
                    acoes=list(e.acoes),
                )
                for e in relatorio.cronograma
            ],
            impacto_geral=relatorio.resumo.impacto_geral,
            principais_conclusoes=list(relatorio.resumo.principais_conclusoes),
            recomendacoes=list(relatorio.resumo.recomendacoes),
        )


class MensagemChatDTO(BaseModel):
    papel: PapelMensagem
    conteudo: str


class ContextoClienteDTO(BaseModel):
    regime_atual: str | None = None
    faturamento_anual: Decimal | None = None
    setor: str | None = None


class PerguntaAssistenteDTO(BaseModel):
    pergunta: str
    historico: list[MensagemChatDTO] = []
    contexto: ContextoClienteDTO | None = None

    def to_domain(self) -> PerguntaAssistente:
        contexto = self.contexto
        return PerguntaAssistente(
            pergunta=self.pergunta,
            historico=tuple(MensagemChat(m.papel, m.conteudo) for m in self.historico),
            contexto=ContextoCliente(contexto.regime_atual, contexto.faturamento_anual, contexto.setor)
            if contexto
            else None,
        )


class RespostaAssistenteDTO(BaseModel):
    sucesso: bool
    mensagem: str
    referencias_legais: list[str]
    topicos_relacionados: list[str]
    nivel_complexidade: str
    erro: str | None = None

    @classmethod
    def from_domain(cls, resposta: RespostaAssistente) -> RespostaAssistenteDTO:
        return cls(
            sucesso=resposta.sucesso,
            mensagem=resposta.mensagem,
            referencias_legais=list(resposta.referencias_legais),
            topicos_relacionados=list(resposta.topicos_relacionados),
            nivel_complexidade=resposta.nivel_complexidade.value,
            erro=resposta.erro,
        )
