# tests/domain/test_holding.py
from decimal import Decimal

import pytest

from tributomed.domain.holding.calculadora import (
    EntradaHolding,
    analisar_holding,
    calcular_itcmd,
    imposto_aluguel_holding,
    projetar_holding,
)
from tributomed.domain.holding.diagnostico import diagnosticar
from tributomed.domain.holding.documentos import gerar_lista_integralizacao, gerar_protocolo_familiar
from tributomed.domain.holding.entities import (
    Ativo,
    ChecklistCompliance,
    DiagnosticoHolding,
    Governanca,
    MembroFamilia,
    PapelFamiliar,
    Passivo,
    PremissasFinanceiras,
    RegimeBens,
    SucessaoGestao,
    TipoAtivo,
    TipoPassivo,
)


def _diagnostico(**kwargs) -> DiagnosticoHolding:
    base = {
        "familia": (
            MembroFamilia("Jose Silva", PapelFamiliar.PATRIARCA),
            MembroFamilia("Maria Silva", PapelFamiliar.MATRIARCA),
            MembroFamilia("Ana Silva", PapelFamiliar.HERDEIRO, RegimeBens.COMUNHAO_PARCIAL, "Carlos"),
            MembroFamilia("Pedro Silva", PapelFamiliar.HERDEIRO, em_conflito=True),
        ),
        "ativos": (
            Ativo("Apartamento Centro", TipoAtivo.IMOVEL, Decimal("1500000"), Decimal("600000"), Decimal("8000")),
            Ativo("CDB", TipoAtivo.FINANCEIRO, Decimal("500000"), Decimal("200000")),
        ),
    }
    base.update(kwargs)
    return DiagnosticoHolding(**base)


def test_itcmd_por_uf():
    assert calcular_itcmd(Decimal("500000"), "SP") == Decimal("20000")
    assert calcular_itcmd(Decimal("500000"), "mg") == Decimal("25000")
    assert calcular_itcmd(Decimal("500000"), "AM") == Decimal("20000")
    assert calcular_itcmd(Decimal("0"), "SP") == 0


def test_itcmd_rj_faixa_aplicada_ao_total():
    assert calcular_itcmd(Decimal("50000"), "RJ") == Decimal("2000")
    assert calcular_itcmd(Decimal("500000"), "RJ") == Decimal("40000")


def test_imposto_aluguel_na_holding():
    assert imposto_aluguel_holding(Decimal("10000")) == Decimal("1133")


def test_holding_vale_a_pena_com_aluguel_relevante():
    analise = analisar_holding(
        EntradaHolding(Decimal("2000000"), Decimal("800000"), Decimal("10000"), "SP")
    )
    assert analise.pessoa_fisica.imposto_mensal == Decimal("1854")
    assert analise.holding.imposto_mensal == Decimal("1133")
    assert analise.economia.mensal == Decimal("721")
    assert analise.pessoa_fisica.custo_sucessao == Decimal("200000")
    assert analise.holding.custo_sucessao == Decimal("47000")
    assert analise.breakeven_anos == Decimal("1.7")
    assert analise.vale_a_pena


def test_holding_sem_economia_nao_tem_breakeven():
    analise = analisar_holding(EntradaHolding(Decimal("100000"), Decimal("100000"), Decimal("0")))
    assert analise.economia.mensal == 0
    assert analise.economia.mensal_percentual == 0
    assert analise.breakeven_anos is None
    assert not analise.vale_a_pena


def test_projecao_dez_anos():
    anos = projetar_holding(Decimal("1000000"), Decimal("5000"), PremissasFinanceiras())
    assert len(anos) == 10
    primeiro = anos[0]
    assert primeiro.receita_aluguel == Decimal("54000")
    assert primeiro.custo_manutencao == Decimal("24400")
    assert primeiro.valor_patrimonio == Decimal("1050000")
    assert anos[1].receita_aluguel > primeiro.receita_aluguel


def test_projecao_acumula_lucros_ao_patrimonio():
    anos = projetar_holding(Decimal("1000000"), Decimal("5000"), PremissasFinanceiras())
    primeiro = anos[0]
    assert primeiro.lucro_liquido == Decimal("23481.8")
    assert primeiro.patrimonio_acumulado == Decimal("1073481.8")
    lucros = sum((p.lucro_liquido for p in anos), Decimal("0"))
    assert anos[-1].patrimonio_acumulado == anos[-1].valor_patrimonio + lucros


def test_ativo_negativo_rejeitado():
    with pytest.raises(ValueError):
        Ativo("Casa", TipoAtivo.IMOVEL, Decimal("-1"), Decimal("0"))


def test_governanca_percentual_invalido():
    with pytest.raises(ValueError):
        Governanca(quorum_venda=120)


def test_diagnostico_consolida_inventario():
    resultado = diagnosticar(_diagnostico())
    assert resultado.valor_mercado == Decimal("2000000")
    assert resultado.valor_contabil == Decimal("800000")
    assert resultado.gap_sucessorio == Decimal("1200000")
    assert resultado.renda_aluguel == Decimal("8000")
    assert resultado.herdeiros == 2
    assert len(resultado.projecoes) == 10
    assert resultado.apto_para_integralizacao


def test_diagnostico_riscos_familiares_e_passivos():
    resultado = diagnosticar(
        _diagnostico(passivos=(Passivo("Execucao fiscal", Decimal("700000"), TipoPassivo.FISCAL),))
    )
    riscos = " | ".join(resultado.riscos)
    assert "Pedro Silva: risco de litigio familiar" in riscos
    assert "Ana Silva: casado(a) em regime comunicavel" in riscos
    assert "Passivo fiscal" in riscos
    assert "Passivos superam 30%" in riscos


def test_diagnostico_pendencias_de_compliance():
    resultado = diagnosticar(_diagnostico(compliance=ChecklistCompliance(certidoes_federais=False)))
    assert resultado.pendencias == ("Certidoes Federais Negativas (CND) pendentes",)
    assert not resultado.apto_para_integralizacao


def test_diagnostico_sem_herdeiros_considera_um():
    assert diagnosticar(DiagnosticoHolding()).herdeiros == 1


def test_protocolo_familiar():
    protocolo = gerar_protocolo_familiar(_diagnostico())
    assert protocolo.startswith("# PROTOCOLO FAMILIAR DA FAMILIA JOSE")
    assert "**Jose Silva e Maria Silva**" in protocolo
    assert "(Ana Silva, Pedro Silva)" in protocolo
    assert "VEDADA" in protocolo
    assert "**75% do Capital Social Votante**" in protocolo
    assert "Camara de Mediacao" in protocolo


def test_protocolo_reflete_governanca():
    governanca = Governanca(
        permitir_agregados=True,
        mediacao_obrigatoria=False,
        quorum_venda=60,
        sucessao_gestao=SucessaoGestao.PROFISSIONAL,
    )
    protocolo = gerar_protocolo_familiar(_diagnostico(governanca=governanca))
    assert "PERMITIDA" in protocolo
    assert "foro da Comarca" in protocolo
    assert "**60% do Capital Social Votante**" in protocolo
    assert "Gestor Profissional" in protocolo


def test_lista_integralizacao_usa_valor_contabil():
    lista = gerar_lista_integralizacao(_diagnostico())
    assert "**BEM:** Apartamento Centro" in lista
    assert "**TIPO:** Imovel" in lista
    assert "R$ 600.000,00" in lista
    assert "R$ 200.000,00" in lista
