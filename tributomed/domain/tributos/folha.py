# tributomed/domain/tributos/folha.py
#
# Encargos sobre remuneracao: INSS, IRRF e CPP.
#
# Invariants:
#   - Nenhuma funcao retorna valor negativo.
#   - calcular_irrf recebe a base JA liquida de INSS.
from __future__ import annotations

from decimal import Decimal

from .constantes import (
    ALIQUOTA_CPP,
    ALIQUOTA_INSS_PRO_LABORE,
    DEDUCAO_POR_DEPENDENTE,
    TABELA_INSS,
    TABELA_IRRF,
    TETO_INSS,
    faixa_para,
)

_ZERO = Decimal("0")


def calcular_inss(salario: Decimal) -> Decimal:
    """INSS do empregado pela tabela progressiva, limitado ao teto."""
    base = min(salario, TETO_INSS)
    if base <= 0:
        return _ZERO
    faixa = faixa_para(TABELA_INSS, base)
    return base * faixa.aliquota - faixa.deducao


def calcular_inss_prolabore(pro_labore: Decimal) -> Decimal:
    """Contribuinte individual: 11% do pro-labore, limitado ao teto."""
    if pro_labore <= 0:
        return _ZERO
    return min(pro_labore, TETO_INSS) * ALIQUOTA_INSS_PRO_LABORE


def calcular_irrf(base: Decimal, dependentes: int = 0) -> Decimal:
    """IRRF mensal. Dependentes reduzem a base antes da tabela."""
    base_liquida = base - DEDUCAO_POR_DEPENDENTE * dependentes
    if base_liquida <= TABELA_IRRF[0].limite:
        return _ZERO
    faixa = faixa_para(TABELA_IRRF, base_liquida)
    return max(_ZERO, base_liquida * faixa.aliquota - faixa.deducao)


def calcular_cpp(folha: Decimal) -> Decimal:
    """Contribuicao patronal basica (fora do Simples Anexos I-III e V)."""
    return max(_ZERO, folha) * ALIQUOTA_CPP
