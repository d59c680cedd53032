# tests/domain/test_motor.py
from decimal import Decimal

import pytest

from tributomed.domain.tributos.entities import Atividade, PerfilTributario
from tributomed.domain.tributos.enums import Anexo, CategoriaCenario, TipoAtividade, TipoCenario
from tributomed.domain.tributos.motor import gerar_cenarios, melhor_cenario

CENARIOS_BASE = {
    TipoCenario.CARNE_LEAO,
    TipoCenario.CLT,
    TipoCenario.SIMPLES_ANEXO_III,
    TipoCenario.SIMPLES_ANEXO_V,
    TipoCenario.PRESUMIDO,
    TipoCenario.PRESUMIDO_UNIPROFISSIONAL,
    TipoCenario.PRESUMIDO_HOSPITALAR,
    TipoCenario.LUCRO_REAL,
}


def _por_tipo(perfil: PerfilTributario) -> dict[TipoCenario, object]:
    return {c.tipo: c for c in gerar_cenarios(perfil)}


def test_gera_oito_cenarios_base():
    cenarios = gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("10000")))
    assert {c.tipo for c in cenarios} == CENARIOS_BASE


def test_ordenado_por_imposto_total():
    cenarios = gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("25000")))
    totais = [c.imposto_total for c in cenarios]
    assert totais == sorted(totais)


def test_categorias_pf_e_pj():
    cenarios = gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("10000")))
    pf = {c.tipo for c in cenarios if c.categoria is CategoriaCenario.PF}
    assert pf == {TipoCenario.CARNE_LEAO, TipoCenario.CLT}


def test_presumido_inclui_cpp_e_pro_labore():
    presumido = _por_tipo(PerfilTributario(faturamento_mensal=Decimal("10000")))[TipoCenario.PRESUMIDO]
    # 1.633 de tributos + CPP 303,60 + INSS pro-labore 166,98 (IRRF isento)
    assert presumido.imposto_total == Decimal("2103.58")
    assert presumido.item("CPP").valor == Decimal("303.60")


def test_anexo_iii_inelegivel_sem_fator_r():
    anexo_iii = _por_tipo(PerfilTributario(faturamento_mensal=Decimal("10000")))[TipoCenario.SIMPLES_ANEXO_III]
    assert not anexo_iii.elegivel
    assert "Requer pro-labore" in anexo_iii.nota_elegibilidade


def test_anexo_iii_elegivel_com_folha_suficiente():
    perfil = PerfilTributario(faturamento_mensal=Decimal("10000"), folha_mensal=Decimal("3000"))
    anexo_iii = _por_tipo(perfil)[TipoCenario.SIMPLES_ANEXO_III]
    assert anexo_iii.elegivel
    assert anexo_iii.pro_labore.base == Decimal("2800")


def test_beneficios_dependem_do_perfil():
    padrao = _por_tipo(PerfilTributario(faturamento_mensal=Decimal("10000")))
    assert not padrao[TipoCenario.PRESUMIDO_HOSPITALAR].elegivel
    assert not padrao[TipoCenario.PRESUMIDO_UNIPROFISSIONAL].elegivel

    beneficiado = _por_tipo(
        PerfilTributario(
            faturamento_mensal=Decimal("10000"),
            equiparacao_hospitalar=True,
            sociedade_uniprofissional=True,
        )
    )
    assert beneficiado[TipoCenario.PRESUMIDO_HOSPITALAR].elegivel
    assert beneficiado[TipoCenario.PRESUMIDO_UNIPROFISSIONAL].elegivel


def test_iss_fixo_por_socio_e_municipio():
    perfil = PerfilTributario(faturamento_mensal=Decimal("10000"), municipio="Montes Claros", numero_socios=2)
    sup = _por_tipo(perfil)[TipoCenario.PRESUMIDO_UNIPROFISSIONAL]
    assert sup.item("ISS Fixo").valor == Decimal("239.42")


def test_melhor_cenario_nunca_inelegivel():
    perfil = PerfilTributario(faturamento_mensal=Decimal("10000"))
    cenarios = gerar_cenarios(perfil)
    melhor = melhor_cenario(cenarios)
    assert melhor is not None
    assert melhor.elegivel
    assert all(melhor.imposto_total <= c.imposto_total for c in cenarios if c.elegivel)


def test_melhor_cenario_sem_elegiveis():
    cenarios = [c for c in gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("10000"))) if not c.elegivel]
    assert melhor_cenario(cenarios) is None


def test_receita_zero_sem_divisao_por_zero():
    cenarios = gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("0")))
    assert all(c.aliquota_efetiva == 0 for c in cenarios)


def test_atividades_acrescentam_mei_e_mistos():
    atividades = (
        Atividade("Consultas", Decimal("8000"), TipoAtividade.SERVICO, Anexo.III),
        Atividade("Produtos", Decimal("2000"), TipoAtividade.COMERCIO, Anexo.I),
    )
    cenarios = gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("10000"), atividades=atividades))
    tipos = {c.tipo for c in cenarios}
    assert {TipoCenario.MEI, TipoCenario.SIMPLES_MISTO, TipoCenario.PRESUMIDO_MISTO} <= tipos
    mei = next(c for c in cenarios if c.tipo is TipoCenario.MEI)
    assert not mei.elegivel


def test_uma_atividade_nao_gera_mistos():
    atividades = (Atividade("Consultas", Decimal("10000"), TipoAtividade.SERVICO, Anexo.III),)
    tipos = {c.tipo for c in gerar_cenarios(PerfilTributario(Decimal("10000"), atividades=atividades))}
    assert TipoCenario.MEI in tipos
    assert TipoCenario.SIMPLES_MISTO not in tipos


def test_faturamento_zero_usa_soma_das_atividades():
    atividades = (
        Atividade("Consultas", Decimal("6000"), TipoAtividade.SERVICO, Anexo.III),
        Atividade("Produtos", Decimal("4000"), TipoAtividade.COMERCIO, Anexo.I),
    )
    cenarios = gerar_cenarios(PerfilTributario(faturamento_mensal=Decimal("0"), atividades=atividades))
    assert any(c.aliquota_efetiva > 0 for c in cenarios)


def test_perfil_rejeita_valores_invalidos():
    with pytest.raises(ValueError):
        PerfilTributario(faturamento_mensal=Decimal("-1"))
    with pytest.raises(ValueError):
        PerfilTributario(faturamento_mensal=Decimal("1000"), numero_socios=0)
    with pytest.raises(ValueError):
        PerfilTributario(faturamento_mensal=Decimal("1000"), margem_lucro_real=Decimal("1.5"))
