# tributomed/domain/tributos/simples.py
#
# DAS do Simples Nacional.
#
# Design decisions:
#   - A aliquota efetiva segue a LC 123/2006 art. 18 §1-A:
#       (RBT12 x aliquota nominal - parcela a deduzir) / RBT12
#   - RBT12 zerado (empresa nova) usa faturamento mensal x 12. Se ainda assim
#     for zero, aplica-se a aliquota nominal da primeira faixa.
#   - No calculo misto a faixa e determinada pelo RBT12 GLOBAL da empresa e
#     cada atividade e tributada pelo seu proprio Anexo.
from __future__ import annotations

from collections import defaultdict
from decimal import Decimal

from .constantes import TABELAS_SIMPLES, faixa_para
from .entities import Atividade, ItemTributo, ResultadoSimples
from .enums import Anexo

_CEM = Decimal("100")


def aliquota_efetiva_simples(rbt12: Decimal, anexo: Anexo) -> tuple[Decimal, Decimal]:
    """Retorna (aliquota efetiva, aliquota nominal) como fracoes."""
    tabela = TABELAS_SIMPLES[anexo]
    if rbt12 <= 0:
        return tabela[0].aliquota, tabela[0].aliquota
    faixa = faixa_para(tabela, rbt12)
    efetiva = (rbt12 * faixa.aliquota - faixa.deducao) / rbt12
    return efetiva, faixa.aliquota


def calcular_simples(rbt12: Decimal, faturamento_mensal: Decimal, anexo: Anexo) -> ResultadoSimples:
    """DAS mensal de uma empresa com receita em um unico Anexo.

    Args:
        rbt12: Receita bruta dos ultimos 12 meses. Zero para empresa nova.
        faturamento_mensal: Receita do mes de apuracao.
        anexo: Anexo do Simples da atividade.

    Returns:
        ResultadoSimples com imposto e aliquotas em percentual.
    """
    base_rbt12 = rbt12 if rbt12 > 0 else faturamento_mensal * 12
    efetiva, nominal = aliquota_efetiva_simples(base_rbt12, anexo)
    imposto = faturamento_mensal * efetiva
    return ResultadoSimples(
        imposto=imposto,
        aliquota_efetiva=efetiva * _CEM,
        aliquota_nominal=nominal * _CEM,
        composicao=(ItemTributo(f"DAS (Anexo {anexo})", imposto, efetiva * _CEM),),
    )


def calcular_simples_misto(rbt12: Decimal, atividades: tuple[Atividade, ...]) -> ResultadoSimples:
    """DAS de empresa com atividades em Anexos diferentes."""
    receita_mes = sum((a.receita_mensal for a in atividades), Decimal("0"))
    base_rbt12 = rbt12 if rbt12 > 0 else receita_mes * 12

    receita_por_anexo: dict[Anexo, Decimal] = defaultdict(Decimal)
    for atividade in atividades:
        receita_por_anexo[atividade.anexo] += atividade.receita_mensal

    itens: list[ItemTributo] = []
    total = Decimal("0")
    for anexo in Anexo:
        if anexo not in receita_por_anexo:
            continue
        efetiva, _ = aliquota_efetiva_simples(base_rbt12, anexo)
        imposto = receita_por_anexo[anexo] * efetiva
        total += imposto
        itens.append(ItemTributo(f"DAS (Anexo {anexo})", imposto, efetiva * _CEM))

    efetiva_media = total / receita_mes * _CEM if receita_mes > 0 else Decimal("0")
    return ResultadoSimples(
        imposto=total,
        aliquota_efetiva=efetiva_media,
        aliquota_nominal=efetiva_media,
        composicao=tuple(itens),
    )
