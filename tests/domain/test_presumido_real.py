# tests/domain/test_presumido_real.py
from decimal import Decimal

from tributomed.domain.tributos.entities import Atividade
from tributomed.domain.tributos.enums import Anexo, TipoAtividade, TipoPresumido
from tributomed.domain.tributos.lucro_presumido_real import (
    calcular_irpj,
    calcular_lucro_presumido,
    calcular_lucro_real,
    calcular_presumido_misto,
)


def test_irpj_sem_adicional():
    assert calcular_irpj(Decimal("20000")) == Decimal("3000")


def test_irpj_com_adicional_sobre_excedente():
    assert calcular_irpj(Decimal("30000")) == Decimal("5500")


def test_irpj_base_nula():
    assert calcular_irpj(Decimal("0")) == 0
    assert calcular_irpj(Decimal("-100")) == 0


def test_presumido_servicos():
    r = calcular_lucro_presumido(Decimal("10000"), TipoPresumido.GERAL, Decimal("5"))
    assert r.pis == Decimal("65")
    assert r.cofins == Decimal("300")
    assert r.irpj == Decimal("480")
    assert r.csll == Decimal("288")
    assert r.iss == Decimal("500")
    assert r.icms == 0
    assert r.total == Decimal("1633")


def test_presumido_hospitalar_reduz_bases():
    r = calcular_lucro_presumido(Decimal("10000"), TipoPresumido.HOSPITALAR, Decimal("5"))
    assert r.irpj == Decimal("120")
    assert r.csll == Decimal("108")
    assert r.total == Decimal("1093")


def test_presumido_comercio_recolhe_icms_e_nao_iss():
    r = calcular_lucro_presumido(Decimal("10000"), TipoPresumido.COMERCIO, Decimal("5"), Decimal("18"))
    assert r.iss == 0
    assert r.icms == Decimal("1800")


def test_presumido_misto_separa_bases_por_atividade():
    atividades = (
        Atividade("Consultas", Decimal("8000"), TipoAtividade.SERVICO, Anexo.III),
        Atividade("Produtos", Decimal("2000"), TipoAtividade.COMERCIO, Anexo.I),
    )
    r = calcular_presumido_misto(atividades, Decimal("5"), Decimal("18"))
    # IRPJ: (8000 x 32% + 2000 x 8%) x 15%
    assert r.irpj == Decimal("408")
    # CSLL: (8000 x 32% + 2000 x 12%) x 9%
    assert r.csll == Decimal("252")
    assert r.iss == Decimal("400")
    assert r.icms == Decimal("360")


def test_lucro_real_margem_padrao():
    r = calcular_lucro_real(Decimal("10000"))
    assert r.pis_cofins == Decimal("925")
    assert r.irpj == Decimal("450")
    assert r.csll == Decimal("270")
    assert r.total == Decimal("2145")


def test_lucro_real_margem_configuravel():
    baixa = calcular_lucro_real(Decimal("10000"), Decimal("0.10"))
    alta = calcular_lucro_real(Decimal("10000"), Decimal("0.50"))
    assert baixa.irpj_csll < alta.irpj_csll
