# tributomed/domain/holding/diagnostico.py
#
# Resultado do assistente de holding: consolida inventario, pendencias de due
# diligence, riscos familiares e de passivos, viabilidade e projecao.
#
# Design decisions:
#   - Riscos sao regras simples sobre o estado informado, sem pontuacao:
#     membro em conflito, herdeiro casado em comunhao de bens, passivo fiscal
#     ou trabalhista (contamina a integralizacao), passivos acima de 30% do
#     patrimonio.
#   - Herdeiros contados pelo papel HERDEIRO; sem nenhum, considera-se 1.
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .calculadora import AnaliseHolding, EntradaHolding, ProjecaoAnual, analisar_holding, projetar_holding
from .entities import DiagnosticoHolding, PapelFamiliar, RegimeBens, TipoPassivo

_LIMITE_ENDIVIDAMENTO = Decimal("0.30")

ROTULOS_PENDENCIAS = {
    "certidoes_federais": "Certidoes Federais Negativas (CND) pendentes",
    "sem_dividas_trabalhistas": "Dividas trabalhistas em aberto",
    "matriculas_atualizadas": "Matriculas dos imoveis desatualizadas (RGI)",
    "sem_passivo_ambiental": "Passivo ambiental nao descartado",
    "contratos_locacao": "Contratos de locacao irregulares",
}

_REGIMES_COMUNICAVEIS = (RegimeBens.COMUNHAO_TOTAL, RegimeBens.COMUNHAO_PARCIAL, RegimeBens.UNIAO_ESTAVEL)


@dataclass(frozen=True)
class ResultadoDiagnostico:
    valor_mercado: Decimal
    valor_contabil: Decimal
    gap_sucessorio: Decimal
    renda_aluguel: Decimal
    total_passivos: Decimal
    herdeiros: int
    pendencias: tuple[str, ...]
    riscos: tuple[str, ...]
    analise: AnaliseHolding
    projecoes: tuple[ProjecaoAnual, ...]
    lucro_projetado: Decimal

    @property
    def apto_para_integralizacao(self) -> bool:
        return not self.pendencias


def _riscos(diagnostico: DiagnosticoHolding) -> list[str]:
    riscos = [f"{m.nome}: risco de litigio familiar" for m in diagnostico.familia if m.em_conflito]
    for herdeiro in diagnostico.membros(PapelFamiliar.HERDEIRO):
        if herdeiro.regime_bens in _REGIMES_COMUNICAVEIS and not diagnostico.governanca.permitir_agregados:
            riscos.append(
                f"{herdeiro.nome}: casado(a) em regime comunicavel; prever clausula de incomunicabilidade nas doacoes"
            )

    tipos = {p.tipo for p in diagnostico.passivos}
    if TipoPassivo.FISCAL in tipos:
        riscos.append("Passivo fiscal anterior a constituicao pode caracterizar fraude a execucao")
    if TipoPassivo.TRABALHISTA in tipos:
        riscos.append("Passivo trabalhista pode alcancar os bens integralizados")

    patrimonio = diagnostico.valor_mercado
    if patrimonio > 0 and diagnostico.total_passivos > patrimonio * _LIMITE_ENDIVIDAMENTO:
        riscos.append("Passivos superam 30% do patrimonio: sanear dividas antes da integralizacao")
    return riscos


def diagnosticar(diagnostico: DiagnosticoHolding) -> ResultadoDiagnostico:
    herdeiros = len(diagnostico.membros(PapelFamiliar.HERDEIRO)) or 1
    analise = analisar_holding(
        EntradaHolding(
            valor_mercado=diagnostico.valor_mercado,
            valor_contabil=diagnostico.valor_contabil,
            aluguel_mensal=diagnostico.renda_aluguel,
            uf=diagnostico.uf,
            herdeiros=herdeiros,
        )
    )
    projecoes = projetar_holding(diagnostico.valor_mercado, diagnostico.renda_aluguel, diagnostico.premissas)
    return ResultadoDiagnostico(
        valor_mercado=diagnostico.valor_mercado,
        valor_contabil=diagnostico.valor_contabil,
        gap_sucessorio=diagnostico.valor_mercado - diagnostico.valor_contabil,
        renda_aluguel=diagnostico.renda_aluguel,
        total_passivos=diagnostico.total_passivos,
        herdeiros=herdeiros,
        pendencias=tuple(ROTULOS_PENDENCIAS[p] for p in diagnostico.compliance.pendencias()),
        riscos=tuple(_riscos(diagnostico)),
        analise=analise,
        projecoes=tuple(projecoes),
        lucro_projetado=sum((p.lucro_liquido for p in projecoes), Decimal("0")),
    )
