# tributomed/domain/tributos/constantes.py
#
# Tabelas e valores legais vigentes em 2025.
#
# Design decisions:
#   - Todas as aliquotas sao fracoes Decimal (0.075 = 7,5%). Percentuais so
#     aparecem na saida (aliquota efetiva, ItemTributo.aliquota).
#   - A ultima faixa de cada tabela usa limite infinito, entao a busca
#     "primeira faixa com base <= limite" sempre encontra uma faixa.
#   - Atualizacao anual = editar este modulo. Nenhuma regra de calculo
#     conhece valores literais de lei.
#
# Fontes: LC 123/2006 (Anexos I-V), Portaria Interministerial MPS/MF 6/2025
# (INSS), Lei 15.191/2025 (tabela mensal IRRF a partir de maio/2025),
# Decreto 12.342/2024 (salario minimo).
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .enums import Anexo, TipoPresumido

INFINITO = Decimal("Infinity")


@dataclass(frozen=True)
class Faixa:
    limite: Decimal
    aliquota: Decimal
    deducao: Decimal


def faixa_para(tabela: tuple[Faixa, ...], base: Decimal) -> Faixa:
    """Primeira faixa cujo limite comporta a base (a ultima, se nenhuma)."""
    return next((f for f in tabela if base <= f.limite), tabela[-1])


SALARIO_MINIMO = Decimal("1518.00")
TETO_INSS = Decimal("8157.41")

# ---------- Folha ----------

TABELA_INSS: tuple[Faixa, ...] = (
    Faixa(Decimal("1518.00"), Decimal("0.075"), Decimal("0")),
    Faixa(Decimal("2793.88"), Decimal("0.09"), Decimal("22.77")),
    Faixa(Decimal("4190.83"), Decimal("0.12"), Decimal("106.59")),
    Faixa(INFINITO, Decimal("0.14"), Decimal("190.40")),
)

TABELA_IRRF: tuple[Faixa, ...] = (
    Faixa(Decimal("2428.80"), Decimal("0"), Decimal("0")),
    Faixa(Decimal("2826.65"), Decimal("0.075"), Decimal("182.16")),
    Faixa(Decimal("3751.05"), Decimal("0.15"), Decimal("394.16")),
    Faixa(Decimal("4664.68"), Decimal("0.225"), Decimal("675.49")),
    Faixa(INFINITO, Decimal("0.275"), Decimal("896.00")),
)

DEDUCAO_POR_DEPENDENTE = Decimal("189.59")

ALIQUOTA_INSS_PRO_LABORE = Decimal("0.11")
ALIQUOTA_INSS_AUTONOMO = Decimal("0.20")
ALIQUOTA_CPP = Decimal("0.20")
ALIQUOTA_FGTS = Decimal("0.08")
ALIQUOTA_RAT = Decimal("0.01")
ALIQUOTA_TERCEIROS = Decimal("0.058")

# ---------- Simples Nacional ----------

FATOR_R_MINIMO = Decimal("0.28")

_LIMITES_SIMPLES = (
    Decimal("180000"),
    Decimal("360000"),
    Decimal("720000"),
    Decimal("1800000"),
    Decimal("3600000"),
    INFINITO,
)


def _tabela_simples(*faixas: tuple[str, str]) -> tuple[Faixa, ...]:
    return tuple(
        Faixa(limite, Decimal(aliquota), Decimal(deducao))
        for limite, (aliquota, deducao) in zip(_LIMITES_SIMPLES, faixas, strict=True)
    )


TABELAS_SIMPLES: dict[Anexo, tuple[Faixa, ...]] = {
    Anexo.I: _tabela_simples(
        ("0.04", "0"), ("0.073", "5940"), ("0.095", "13860"),
        ("0.107", "22500"), ("0.143", "87300"), ("0.19", "378000"),
    ),
    Anexo.II: _tabela_simples(
        ("0.045", "0"), ("0.078", "5940"), ("0.10", "13860"),
        ("0.112", "22500"), ("0.147", "85500"), ("0.30", "720000"),
    ),
    Anexo.III: _tabela_simples(
        ("0.06", "0"), ("0.112", "9360"), ("0.135", "17640"),
        ("0.16", "35640"), ("0.21", "125640"), ("0.33", "648000"),
    ),
    Anexo.IV: _tabela_simples(
        ("0.045", "0"), ("0.09", "8100"), ("0.102", "12420"),
        ("0.14", "39780"), ("0.22", "183780"), ("0.33", "828000"),
    ),
    Anexo.V: _tabela_simples(
        ("0.155", "0"), ("0.18", "4500"), ("0.195", "9900"),
        ("0.205", "17100"), ("0.23", "62100"), ("0.305", "540000"),
    ),
}

LIMITE_SIMPLES_ANUAL = Decimal("4800000")

# ---------- Lucro Presumido / Real ----------

ALIQUOTA_PIS_CUMULATIVO = Decimal("0.0065")
ALIQUOTA_COFINS_CUMULATIVO = Decimal("0.03")
ALIQUOTA_PIS_NAO_CUMULATIVO = Decimal("0.0165")
ALIQUOTA_COFINS_NAO_CUMULATIVO = Decimal("0.076")
ALIQUOTA_IRPJ = Decimal("0.15")
ALIQUOTA_IRPJ_ADICIONAL = Decimal("0.10")
LIMITE_ADICIONAL_IRPJ_MENSAL = Decimal("20000")
ALIQUOTA_CSLL = Decimal("0.09")

# (base IRPJ, base CSLL)
PRESUNCAO: dict[TipoPresumido, tuple[Decimal, Decimal]] = {
    TipoPresumido.GERAL: (Decimal("0.32"), Decimal("0.32")),
    TipoPresumido.HOSPITALAR: (Decimal("0.08"), Decimal("0.12")),
    TipoPresumido.COMERCIO: (Decimal("0.08"), Decimal("0.12")),
}

LIMITE_LUCRO_PRESUMIDO_ANUAL = Decimal("78000000")
MARGEM_LUCRO_REAL_PADRAO = Decimal("0.30")
ALIQUOTA_ICMS_PADRAO = Decimal("18")

# ---------- MEI ----------

LIMITE_MEI_ANUAL = Decimal("81000")
DAS_MEI_INSS = SALARIO_MINIMO * Decimal("0.05")
DAS_MEI_ICMS = Decimal("1.00")
DAS_MEI_ISS = Decimal("5.00")
