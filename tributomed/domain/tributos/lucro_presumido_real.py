# tributomed/domain/tributos/lucro_presumido_real.py
#
# Lucro Presumido (cumulativo) e Lucro Real (nao cumulativo, simplificado).
#
# Design decisions:
#   - Apuracao mensal. O adicional de IRPJ (10%) incide sobre a parcela da
#     base mensal que excede R$ 20.000 (R$ 60.000 no trimestre / 3).
#   - No Presumido de comercio nao ha ISS; ha ICMS sobre a receita.
#   - O Lucro Real usa uma margem de lucro estimada. Creditos de PIS/COFINS
#     sao ignorados (servicos de saude geram poucos creditos).
from __future__ import annotations

from decimal import Decimal

from .constantes import (
    ALIQUOTA_COFINS_CUMULATIVO,
    ALIQUOTA_COFINS_NAO_CUMULATIVO,
    ALIQUOTA_CSLL,
    ALIQUOTA_ICMS_PADRAO,
    ALIQUOTA_IRPJ,
    ALIQUOTA_IRPJ_ADICIONAL,
    ALIQUOTA_PIS_CUMULATIVO,
    ALIQUOTA_PIS_NAO_CUMULATIVO,
    LIMITE_ADICIONAL_IRPJ_MENSAL,
    MARGEM_LUCRO_REAL_PADRAO,
    PRESUNCAO,
)
from .entities import Atividade, ResultadoLucro
from .enums import TipoAtividade, TipoPresumido

_CEM = Decimal("100")


def calcular_irpj(base: Decimal) -> Decimal:
    """IRPJ mensal com adicional sobre o excedente de R$ 20.000."""
    if base <= 0:
        return Decimal("0")
    irpj = base * ALIQUOTA_IRPJ
    if base > LIMITE_ADICIONAL_IRPJ_MENSAL:
        irpj += (base - LIMITE_ADICIONAL_IRPJ_MENSAL) * ALIQUOTA_IRPJ_ADICIONAL
    return irpj


def calcular_lucro_presumido(
    faturamento: Decimal,
    tipo: TipoPresumido = TipoPresumido.GERAL,
    aliquota_iss: Decimal = Decimal("5"),
    aliquota_icms: Decimal = Decimal("0"),
) -> ResultadoLucro:
    """Tributos mensais no Lucro Presumido.

    Args:
        faturamento: Receita bruta do mes.
        tipo: Define as bases de presuncao de IRPJ e CSLL.
        aliquota_iss: Percentual de ISS do municipio (ignorado no comercio).
        aliquota_icms: Percentual de ICMS (apenas comercio).
    """
    base_irpj, base_csll = PRESUNCAO[tipo]
    comercio = tipo is TipoPresumido.COMERCIO
    return ResultadoLucro(
        pis=faturamento * ALIQUOTA_PIS_CUMULATIVO,
        cofins=faturamento * ALIQUOTA_COFINS_CUMULATIVO,
        irpj=calcular_irpj(faturamento * base_irpj),
        csll=faturamento * base_csll * ALIQUOTA_CSLL,
        iss=Decimal("0") if comercio else faturamento * aliquota_iss / _CEM,
        icms=faturamento * aliquota_icms / _CEM if comercio else Decimal("0"),
    )


def calcular_presumido_misto(
    atividades: tuple[Atividade, ...],
    aliquota_iss: Decimal = Decimal("5"),
    aliquota_icms: Decimal = ALIQUOTA_ICMS_PADRAO,
) -> ResultadoLucro:
    """Presumido com bases de presuncao por atividade.

    Comercio e industria presumem 8% (IRPJ) e 12% (CSLL) e recolhem ICMS;
    servicos presumem 32% e recolhem ISS. O adicional de IRPJ e apurado
    sobre a base consolidada.
    """
    base_irpj = Decimal("0")
    base_csll = Decimal("0")
    receita_total = Decimal("0")
    iss = Decimal("0")
    icms = Decimal("0")
    for atividade in atividades:
        receita = atividade.receita_mensal
        receita_total += receita
        if atividade.tipo is TipoAtividade.SERVICO:
            pres_irpj, pres_csll = PRESUNCAO[TipoPresumido.GERAL]
            iss += receita * aliquota_iss / _CEM
        else:
            pres_irpj, pres_csll = PRESUNCAO[TipoPresumido.COMERCIO]
            icms += receita * aliquota_icms / _CEM
        base_irpj += receita * pres_irpj
        base_csll += receita * pres_csll

    return ResultadoLucro(
        pis=receita_total * ALIQUOTA_PIS_CUMULATIVO,
        cofins=receita_total * ALIQUOTA_COFINS_CUMULATIVO,
        irpj=calcular_irpj(base_irpj),
        csll=base_csll * ALIQUOTA_CSLL,
        iss=iss,
        icms=icms,
    )


def calcular_lucro_real(
    faturamento: Decimal,
    margem_lucro: Decimal = MARGEM_LUCRO_REAL_PADRAO,
    aliquota_iss: Decimal = Decimal("5"),
) -> ResultadoLucro:
    """Estimativa mensal de Lucro Real sobre uma margem de lucro presumida."""
    lucro = faturamento * margem_lucro
    return ResultadoLucro(
        pis=faturamento * ALIQUOTA_PIS_NAO_CUMULATIVO,
        cofins=faturamento * ALIQUOTA_COFINS_NAO_CUMULATIVO,
        irpj=calcular_irpj(lucro),
        csll=max(Decimal("0"), lucro) * ALIQUOTA_CSLL,
        iss=faturamento * aliquota_iss / _CEM,
    )
