# tributomed/domain/tributos/projecoes.py
#
# Projecoes de crescimento e ponto de equilibrio Simples x Presumido.
#
# Design decisions:
#   - As projecoes reaplicam o motor completo com a receita (e o RBT12 e as
#     atividades) escalados. Folha e pro-labore nao escalam: o cliente decide
#     se contrata.
#   - O ponto de equilibrio varre a receita mensal em passos de R$ 500 ate o
#     teto do Simples (R$ 4,8 mi / 12) e devolve o primeiro faturamento em
#     que o Lucro Presumido fica mais barato que o Simples aplicavel.
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from .constantes import LIMITE_SIMPLES_ANUAL
from .entities import Cenario, PerfilTributario
from .enums import TipoCenario
from .motor import gerar_cenarios, melhor_cenario

CRESCIMENTOS: tuple[Decimal, ...] = (Decimal("0"), Decimal("0.20"), Decimal("0.50"))
_PASSO = Decimal("500")


@dataclass(frozen=True)
class ProjecaoFaturamento:
    crescimento: Decimal  # percentual
    faturamento_mensal: Decimal
    melhor: Cenario | None
    cenarios: tuple[Cenario, ...]


@dataclass(frozen=True)
class PontoEquilibrio:
    faturamento_mensal: Decimal | None
    descricao: str


def _escalar(perfil: PerfilTributario, fator: Decimal) -> PerfilTributario:
    return replace(
        perfil,
        faturamento_mensal=perfil.faturamento_mensal * fator,
        rbt12=perfil.rbt12 * fator if perfil.rbt12 else None,
        atividades=tuple(replace(a, receita_mensal=a.receita_mensal * fator) for a in perfil.atividades),
    )


def projetar_faturamento(perfil: PerfilTributario) -> list[ProjecaoFaturamento]:
    """Melhor cenario no faturamento atual, +20% e +50%."""
    projecoes = []
    for crescimento in CRESCIMENTOS:
        escalado = _escalar(perfil, 1 + crescimento)
        cenarios = gerar_cenarios(escalado)
        projecoes.append(
            ProjecaoFaturamento(
                crescimento=crescimento * 100,
                faturamento_mensal=escalado.faturamento_mensal,
                melhor=melhor_cenario(cenarios),
                cenarios=tuple(cenarios),
            )
        )
    return projecoes


def _custos_simples_presumido(perfil: PerfilTributario) -> tuple[Decimal, Decimal]:
    por_tipo = {c.tipo: c for c in gerar_cenarios(perfil)}
    anexo_iii = por_tipo[TipoCenario.SIMPLES_ANEXO_III]
    simples = anexo_iii if anexo_iii.elegivel else por_tipo[TipoCenario.SIMPLES_ANEXO_V]
    return simples.imposto_total, por_tipo[TipoCenario.PRESUMIDO].imposto_total


def ponto_de_equilibrio(perfil: PerfilTributario) -> PontoEquilibrio:
    """Faturamento mensal a partir do qual o Lucro Presumido supera o Simples."""
    base = replace(perfil, rbt12=None, atividades=())
    teto = LIMITE_SIMPLES_ANUAL / 12
    faturamento = _PASSO
    while faturamento <= teto:
        simples, presumido = _custos_simples_presumido(replace(base, faturamento_mensal=faturamento))
        if presumido < simples:
            atual = perfil.faturamento_mensal
            if atual >= faturamento:
                situacao = "O faturamento atual ja esta acima desse ponto: o Lucro Presumido tende a ser mais vantajoso."
            else:
                situacao = (
                    f"Abaixo desse ponto o Simples Nacional permanece mais vantajoso "
                    f"(faltam R$ {faturamento - atual:.2f}/mes)."
                )
            return PontoEquilibrio(
                faturamento_mensal=faturamento,
                descricao=(
                    f"O Lucro Presumido passa a ser mais barato que o Simples Nacional a partir de "
                    f"R$ {faturamento:.2f}/mes. {situacao}"
                ),
            )
        faturamento += _PASSO
    return PontoEquilibrio(
        faturamento_mensal=None,
        descricao="O Simples Nacional permanece mais vantajoso em toda a faixa de faturamento do regime.",
    )
