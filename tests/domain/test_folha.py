# tests/domain/test_folha.py
from decimal import Decimal

from tributomed.domain.tributos.folha import (
    calcular_cpp,
    calcular_inss,
    calcular_inss_prolabore,
    calcular_irrf,
)


def test_inss_primeira_faixa():
    assert calcular_inss(Decimal("1518.00")) == Decimal("113.85")


def test_inss_faixa_intermediaria():
    """3.000 cai na terceira faixa: 12% menos parcela de 106,59."""
    assert calcular_inss(Decimal("3000")) == Decimal("253.41")


def test_inss_limitado_ao_teto():
    assert calcular_inss(Decimal("10000")) == calcular_inss(Decimal("8157.41"))
    assert calcular_inss(Decimal("10000")) == Decimal("951.6374")


def test_inss_zero_para_salario_nulo():
    assert calcular_inss(Decimal("0")) == 0


def test_inss_prolabore_onze_por_cento():
    assert calcular_inss_prolabore(Decimal("1518")) == Decimal("166.98")


def test_inss_prolabore_limitado_ao_teto():
    assert calcular_inss_prolabore(Decimal("20000")) == Decimal("8157.41") * Decimal("0.11")


def test_irrf_isento_ate_limite():
    assert calcular_irrf(Decimal("2428.80")) == 0
    assert calcular_irrf(Decimal("1000")) == 0


def test_irrf_ultima_faixa():
    assert calcular_irrf(Decimal("5000")) == Decimal("479")


def test_irrf_dependente_reduz_base():
    sem = calcular_irrf(Decimal("5000"))
    com = calcular_irrf(Decimal("5000"), dependentes=1)
    assert com == Decimal("426.86275")
    assert com < sem


def test_irrf_nunca_negativo():
    assert calcular_irrf(Decimal("2500")) >= 0


def test_cpp_vinte_por_cento():
    assert calcular_cpp(Decimal("1000")) == Decimal("200")
    assert calcular_cpp(Decimal("-5")) == 0
