# tests/domain/test_reforma_impacto.py
from datetime import date
from decimal import Decimal

import pytest

from tributomed.domain.reforma.comparativo import (
    CRONOGRAMA_TRANSICAO,
    DadosClienteReforma,
    calcular_cenario_reforma,
    gerar_relatorio_impacto,
)
from tributomed.domain.reforma.impacto import TipoAlertaReforma, calcular_impacto_reforma
from tributomed.domain.tributos.entities import PerfilTributario
from tributomed.domain.tributos.enums import TipoCenario
from tributomed.domain.tributos.motor import gerar_cenarios


def _cenarios(faturamento: str = "10000"):
    return gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal(faturamento)))


def test_simples_sem_cenarios_usa_estimativa():
    impacto = calcular_impacto_reforma(Decimal("10000"), "Simples Nacional")
    assert impacto.carga_atual.total == Decimal("600")
    assert impacto.projecao_2033.total == Decimal("2650")
    assert impacto.projecao_2033.diferenca_vs_atual == Decimal("2050")


def test_2026_e_neutro():
    impacto = calcular_impacto_reforma(Decimal("10000"), "Lucro Presumido")
    p = impacto.projecao_2026
    assert p.cbs_teste == Decimal("90")
    assert p.ibs_teste == Decimal("10")
    assert p.compensacao_pis_cofins == Decimal("100")
    assert p.impacto_liquido == 0


def test_transicao_substitui_dez_por_cento_ao_ano():
    impacto = calcular_impacto_reforma(Decimal("10000"), "Lucro Presumido")
    anos = impacto.transicao_ibs
    assert [a.ano for a in anos] == [2029, 2030, 2031, 2032]
    assert [a.iss_percentual for a in anos] == [90, 80, 70, 60]
    assert [a.ibs_percentual for a in anos] == [10, 20, 30, 40]
    # CBS 1.200 + ISS 450 + 10% do IBS pleno (145)
    assert anos[0].carga_total_estimada == Decimal("1795")


def test_carga_atual_do_cenario_elegivel_correspondente():
    cenarios = _cenarios()
    impacto = calcular_impacto_reforma(Decimal("10000"), "Lucro Presumido", cenarios)
    presumido = next(c for c in cenarios if c.tipo is TipoCenario.PRESUMIDO)
    assert impacto.carga_atual.total == presumido.imposto_total
    assert impacto.carga_atual.pis_cofins == Decimal("365")
    assert impacto.carga_atual.iss == Decimal("500")


def test_aumento_significativo_gera_risco_e_recomendacoes():
    impacto = calcular_impacto_reforma(Decimal("10000"), "Simples Nacional")
    tipos = [a.tipo for a in impacto.alertas]
    assert TipoAlertaReforma.RISCO in tipos
    assert any(a.titulo == "Regime Hibrido Disponivel" for a in impacto.alertas)
    assert impacto.recomendacoes[0].startswith("Prepare-se para aumento")


def test_faturamento_zero_percentual_zero():
    impacto = calcular_impacto_reforma(Decimal("0"), "Simples Nacional")
    assert impacto.projecao_2033.percentual_mudanca == 0


def test_faturamento_negativo_rejeitado():
    with pytest.raises(ValueError):
        calcular_impacto_reforma(Decimal("-1"), "Simples Nacional")


def test_reducao_saude_sessenta_por_cento():
    cenario = _cenarios()[0]
    saude = calcular_cenario_reforma(cenario, Decimal("10000"), "Saude")
    padrao = calcular_cenario_reforma(cenario, Decimal("10000"), "Comercio")
    assert saude.imposto_total == Decimal("680")
    assert saude.reducao_aplicada == Decimal("60")
    assert padrao.imposto_total == Decimal("1700")
    assert padrao.reducao_aplicada is None
    assert saude.aliquota_padrao == Decimal("17")


def test_relatorio_compara_melhor_cenario_elegivel():
    cenarios = _cenarios()
    relatorio = gerar_relatorio_impacto(
        cenarios,
        DadosClienteReforma(faturamento_mensal=Decimal("10000"), empresa="Clinica X", setor="Saude"),
        date(2026, 3, 1),
    )
    assert relatorio.melhor_atual.elegivel
    assert relatorio.cliente == "Clinica X"
    assert relatorio.data_analise == date(2026, 3, 1)
    assert len(relatorio.todas_comparacoes) == len(cenarios)
    assert relatorio.cronograma == CRONOGRAMA_TRANSICAO
    assert relatorio.resumo.impacto_geral in ("positivo", "negativo")
    assert relatorio.comparacao.diferenca.anual == relatorio.comparacao.diferenca.absoluta * 12


def test_relatorio_sem_cenarios():
    with pytest.raises(ValueError):
        gerar_relatorio_impacto([], DadosClienteReforma(faturamento_mensal=Decimal("1")), date(2026, 1, 1))


def test_relatorio_defaults_de_cliente():
    relatorio = gerar_relatorio_impacto(
        _cenarios(), DadosClienteReforma(faturamento_mensal=Decimal("10000")), date(2026, 1, 1)
    )
    assert relatorio.cliente == "Cliente"
    assert relatorio.setor == "Nao especificado"
    assert relatorio.regime_atual == relatorio.melhor_atual.nome
