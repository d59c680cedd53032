# tests/domain/test_pessoa_fisica_mei.py
from decimal import Decimal

from tributomed.domain.tributos.entities import Atividade
from tributomed.domain.tributos.enums import Anexo, TipoAtividade
from tributomed.domain.tributos.mei import verificar_mei
from tributomed.domain.tributos.pessoa_fisica import calcular_carne_leao, calcular_clt


def _venda(elegivel_mei: bool = True) -> Atividade:
    return Atividade("Venda de produtos", Decimal("5000"), TipoAtividade.COMERCIO, Anexo.I, elegivel_mei)


def test_carne_leao_inss_limitado_ao_teto():
    r = calcular_carne_leao(Decimal("10000"))
    assert r.inss == Decimal("8157.41") * Decimal("0.20")
    assert r.irpf > 0
    assert r.total == r.inss + r.irpf


def test_carne_leao_despesas_reduzem_irpf():
    sem = calcular_carne_leao(Decimal("10000"))
    com = calcular_carne_leao(Decimal("10000"), Decimal("4000"))
    assert com.irpf < sem.irpf


def test_clt_custo_total_empresa():
    r = calcular_clt(Decimal("10000"))
    assert r.encargos_empregador == Decimal("3480")
    assert r.custo_total_empresa == Decimal("13480")
    assert r.salario_liquido == Decimal("10000") - r.inss_empregado - r.irrf_empregado


def test_mei_elegivel():
    r = verificar_mei(Decimal("60000"), (_venda(),))
    assert r.elegivel
    assert r.nota == "Elegivel ao MEI."
    assert r.total == Decimal("76.90")


def test_mei_acima_do_limite():
    r = verificar_mei(Decimal("100000"), (_venda(),))
    assert not r.elegivel
    assert "excede" in r.nota


def test_mei_atividade_nao_permitida():
    r = verificar_mei(Decimal("60000"), (_venda(elegivel_mei=False),))
    assert not r.elegivel
    assert "nao permitidas" in r.nota


def test_mei_servico_recolhe_iss():
    servico = Atividade("Manicure", Decimal("3000"), TipoAtividade.SERVICO, Anexo.III, True)
    r = verificar_mei(Decimal("36000"), (servico,))
    assert r.iss == Decimal("5.00")
    assert r.icms == 0
