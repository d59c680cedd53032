# tributomed/domain/tributos/pessoa_fisica.py
#
# Cenarios de pessoa fisica: autonomo (Carne-Leao) e simulacao CLT.
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .constantes import (
    ALIQUOTA_FGTS,
    ALIQUOTA_INSS_AUTONOMO,
    ALIQUOTA_RAT,
    ALIQUOTA_TERCEIROS,
    TETO_INSS,
)
from .folha import calcular_cpp, calcular_inss, calcular_irrf


@dataclass(frozen=True)
class ResultadoCarneLeao:
    inss: Decimal
    irpf: Decimal

    @property
    def total(self) -> Decimal:
        return self.inss + self.irpf


@dataclass(frozen=True)
class ResultadoCLT:
    salario_bruto: Decimal
    inss_empregado: Decimal
    irrf_empregado: Decimal
    inss_patronal: Decimal
    fgts: Decimal
    rat: Decimal
    terceiros: Decimal

    @property
    def salario_liquido(self) -> Decimal:
        return self.salario_bruto - self.inss_empregado - self.irrf_empregado

    @property
    def encargos_empregador(self) -> Decimal:
        return self.inss_patronal + self.fgts + self.rat + self.terceiros

    @property
    def custo_total_empresa(self) -> Decimal:
        return self.salario_bruto + self.encargos_empregador

    @property
    def total(self) -> Decimal:
        """Tudo que nao fica com o trabalhador."""
        return self.inss_empregado + self.irrf_empregado + self.encargos_empregador


def calcular_carne_leao(faturamento: Decimal, despesas_dedutiveis: Decimal = Decimal("0")) -> ResultadoCarneLeao:
    """Autonomo: INSS 20% (limitado ao teto) e IRPF sobre o livro-caixa.

    O INSS recolhido e dedutivel da base do IRPF.
    """
    rendimento_tributavel = max(Decimal("0"), faturamento - despesas_dedutiveis)
    inss = min(faturamento, TETO_INSS) * ALIQUOTA_INSS_AUTONOMO
    irpf = calcular_irrf(rendimento_tributavel - inss)
    return ResultadoCarneLeao(inss=inss, irpf=irpf)


def calcular_clt(salario_bruto: Decimal) -> ResultadoCLT:
    """Simula a contratacao como empregado com salario igual a receita atual."""
    inss = calcular_inss(salario_bruto)
    return ResultadoCLT(
        salario_bruto=salario_bruto,
        inss_empregado=inss,
        irrf_empregado=calcular_irrf(salario_bruto - inss),
        inss_patronal=calcular_cpp(salario_bruto),
        fgts=salario_bruto * ALIQUOTA_FGTS,
        rat=salario_bruto * ALIQUOTA_RAT,
        terceiros=salario_bruto * ALIQUOTA_TERCEIROS,
    )
