# tributomed/domain/holding/calculadora.py
#
# Viabilidade da holding patrimonial: aluguel tributado na pessoa fisica
# versus na holding (Lucro Presumido), custo de sucessao e projecao de 10
# anos.
#
# Design decisions:
#   - ITCMD progressivo (RJ) aplica a aliquota da faixa sobre o montante
#     inteiro, nao por fatias como o IRPF.
#   - Aluguel na PF usa a tabela mensal do IRRF vigente (mesma de folha.py).
#   - Holding: PIS/COFINS 3,65% + IRPJ 15% (adicional de 10% sobre a base
#     que exceder R$ 20 mil) e CSLL 9%, ambos sobre base presumida de 32%.
#   - Sucessao na PF = ITCMD sobre valor de mercado + 6% de inventario.
#     Na holding = ITCMD sobre valor contabil das quotas + R$ 15 mil de
#     constituicao.
#   - Com economia mensal positiva, o breakeven e custo anual / economia
#     anual. Sem ela, so ha breakeven se a sucessao compensar.
#
# Invariants:
#   - breakeven_anos e None quando a holding nunca se paga.
#   - Percentuais de economia sao zero quando o custo na PF e zero.
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from tributomed.domain.tributos.constantes import (
    ALIQUOTA_COFINS_CUMULATIVO,
    ALIQUOTA_CSLL,
    ALIQUOTA_IRPJ,
    ALIQUOTA_IRPJ_ADICIONAL,
    ALIQUOTA_PIS_CUMULATIVO,
    INFINITO,
    LIMITE_ADICIONAL_IRPJ_MENSAL,
    Faixa,
    faixa_para,
)
from tributomed.domain.tributos.folha import calcular_irrf

from .entities import PremissasFinanceiras

_ZERO = Decimal("0")
_CEM = Decimal("100")

ITCMD_POR_UF: dict[str, tuple[Faixa, ...]] = {
    "SP": (Faixa(INFINITO, Decimal("0.04"), _ZERO),),
    "RJ": (
        Faixa(Decimal("100000"), Decimal("0.04"), _ZERO),
        Faixa(Decimal("400000"), Decimal("0.05"), _ZERO),
        Faixa(INFINITO, Decimal("0.08"), _ZERO),
    ),
    "MG": (Faixa(INFINITO, Decimal("0.05"), _ZERO),),
}
ITCMD_PADRAO: tuple[Faixa, ...] = (Faixa(INFINITO, Decimal("0.04"), _ZERO),)

BASE_PRESUMIDA_ALUGUEL = Decimal("0.32")
HONORARIOS_INVENTARIO = Decimal("0.06")
CUSTO_CONSTITUICAO = Decimal("15000")
CUSTO_ANUAL_HOLDING = Decimal("15000")
CARGA_HOLDING_PROJECAO = Decimal("0.1133")
ANOS_PROJECAO = 10
_BREAKEVEN_MAXIMO = Decimal("10")
_ECONOMIA_SUCESSAO_RELEVANTE = Decimal("100000")


@dataclass(frozen=True)
class EntradaHolding:
    valor_mercado: Decimal
    valor_contabil: Decimal
    aluguel_mensal: Decimal
    uf: str = "SP"
    herdeiros: int = 1


@dataclass(frozen=True)
class CustosEstrutura:
    imposto_mensal: Decimal
    liquido_mensal: Decimal
    custo_sucessao: Decimal


@dataclass(frozen=True)
class Economia:
    mensal: Decimal
    mensal_percentual: Decimal
    sucessao: Decimal
    sucessao_percentual: Decimal


@dataclass(frozen=True)
class AnaliseHolding:
    pessoa_fisica: CustosEstrutura
    holding: CustosEstrutura
    economia: Economia
    vale_a_pena: bool
    breakeven_anos: Decimal | None
    custo_anual_holding: Decimal


@dataclass(frozen=True)
class ProjecaoAnual:
    ano: int
    valor_patrimonio: Decimal
    receita_aluguel: Decimal
    custo_manutencao: Decimal
    impostos: Decimal
    lucro_liquido: Decimal
    patrimonio_acumulado: Decimal  # patrimonio valorizado + lucros liquidos ate o ano


def calcular_itcmd(valor: Decimal, uf: str) -> Decimal:
    """ITCMD da UF; aliquota da faixa aplicada ao valor inteiro."""
    if valor <= 0:
        return _ZERO
    tabela = ITCMD_POR_UF.get(uf.strip().upper(), ITCMD_PADRAO)
    return valor * faixa_para(tabela, valor).aliquota


def imposto_aluguel_holding(aluguel_mensal: Decimal) -> Decimal:
    pis_cofins = aluguel_mensal * (ALIQUOTA_PIS_CUMULATIVO + ALIQUOTA_COFINS_CUMULATIVO)
    base = aluguel_mensal * BASE_PRESUMIDA_ALUGUEL
    irpj = base * ALIQUOTA_IRPJ
    if base > LIMITE_ADICIONAL_IRPJ_MENSAL:
        irpj += (base - LIMITE_ADICIONAL_IRPJ_MENSAL) * ALIQUOTA_IRPJ_ADICIONAL
    csll = base * ALIQUOTA_CSLL
    return pis_cofins + irpj + csll


def _percentual(parte: Decimal, todo: Decimal) -> Decimal:
    return parte / todo * _CEM if todo > 0 else _ZERO


def _breakeven(economia_anual: Decimal, economia_sucessao: Decimal) -> Decimal | None:
    if economia_anual > 0:
        anos = CUSTO_ANUAL_HOLDING / economia_anual
    elif economia_sucessao > 0:
        anos = economia_sucessao / abs(economia_anual - CUSTO_ANUAL_HOLDING)
    else:
        return None
    return anos.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def analisar_holding(entrada: EntradaHolding) -> AnaliseHolding:
    """Compara manter os bens na pessoa fisica com integraliza-los na holding."""
    aluguel = entrada.aluguel_mensal

    imposto_pf = calcular_irrf(aluguel)
    sucessao_pf = calcular_itcmd(entrada.valor_mercado, entrada.uf) + entrada.valor_mercado * HONORARIOS_INVENTARIO

    imposto_holding = imposto_aluguel_holding(aluguel)
    sucessao_holding = calcular_itcmd(entrada.valor_contabil, entrada.uf) + CUSTO_CONSTITUICAO

    economia_mensal = imposto_pf - imposto_holding
    economia_sucessao = sucessao_pf - sucessao_holding
    breakeven = _breakeven(economia_mensal * 12, economia_sucessao)

    return AnaliseHolding(
        pessoa_fisica=CustosEstrutura(imposto_pf, aluguel - imposto_pf, sucessao_pf),
        holding=CustosEstrutura(imposto_holding, aluguel - imposto_holding, sucessao_holding),
        economia=Economia(
            mensal=economia_mensal,
            mensal_percentual=_percentual(economia_mensal, imposto_pf),
            sucessao=economia_sucessao,
            sucessao_percentual=_percentual(economia_sucessao, sucessao_pf),
        ),
        vale_a_pena=(breakeven is not None and breakeven < _BREAKEVEN_MAXIMO)
        or economia_sucessao > _ECONOMIA_SUCESSAO_RELEVANTE,
        breakeven_anos=breakeven,
        custo_anual_holding=CUSTO_ANUAL_HOLDING,
    )


def projetar_holding(
    valor: Decimal,
    aluguel_mensal: Decimal,
    premissas: PremissasFinanceiras,
) -> list[ProjecaoAnual]:
    """Fluxo de caixa de 10 anos da holding.

    Aluguel e patrimonio sao reajustados pela valorizacao ao fim de cada ano;
    o ano registra o patrimonio ja valorizado. patrimonio_acumulado soma a ele
    os lucros liquidos retidos desde o primeiro ano.
    """
    fator = 1 + premissas.valorizacao / _CEM
    patrimonio = valor
    aluguel_anual = aluguel_mensal * 12
    lucros = Decimal("0")
    anos = []
    for ano in range(1, ANOS_PROJECAO + 1):
        receita = aluguel_anual * (1 - premissas.vacancia / _CEM)
        impostos = receita * CARGA_HOLDING_PROJECAO
        custos = patrimonio * premissas.manutencao / _CEM + premissas.custo_administrativo * 12
        lucro = receita - impostos - custos
        lucros += lucro
        patrimonio *= fator
        aluguel_anual *= fator
        anos.append(
            ProjecaoAnual(
                ano=ano,
                valor_patrimonio=patrimonio,
                receita_aluguel=receita,
                custo_manutencao=custos,
                impostos=impostos,
                lucro_liquido=lucro,
                patrimonio_acumulado=patrimonio + lucros,
            )
        )
    return anos
