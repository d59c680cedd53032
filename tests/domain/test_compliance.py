# tests/domain/test_compliance.py
from decimal import Decimal

import pytest

from tributomed.domain.compliance.natureza_juridica import (
    NaturezaJuridica,
    analisar_natureza_juridica,
    detectar_natureza_juridica,
)
from tributomed.domain.compliance.regras import DadosCompliance, avaliar_compliance
from tributomed.domain.tributos.entities import PerfilTributario
from tributomed.domain.tributos.motor import gerar_cenarios


def _titulos(dados: DadosCompliance, faturamento: str | None = None) -> list[str]:
    cenarios = gerar_cenarios(PerfilTributario(Decimal(faturamento))) if faturamento else None
    return [a.titulo for a in avaliar_compliance(dados, cenarios)]


@pytest.mark.parametrize(
    ("texto", "esperado"),
    [
        ("Natureza juridica: 206-2 - Sociedade Empresaria Limitada", NaturezaJuridica.LTDA),
        ("206-2 Sociedade Limitada Unipessoal", NaturezaJuridica.SLU),
        ("Codigo 213-5 Empresario (Individual)", NaturezaJuridica.EI),
        ("CLINICA XYZ EIRELI", NaturezaJuridica.EIRELI),
        ("Servicos Médicos S.A.", NaturezaJuridica.SA),
        ("Cooperativa de trabalho medico", NaturezaJuridica.COOPERATIVA),
        ("Joao Silva MEI", NaturezaJuridica.MEI),
        ("CLINICA SAUDE LTDA", NaturezaJuridica.LTDA),
        ("", NaturezaJuridica.DESCONHECIDA),
    ],
)
def test_detectar_natureza_juridica(texto, esperado):
    assert detectar_natureza_juridica(texto) is esperado


def test_analise_natureza_desconhecida_pede_documentos():
    assert "Cartao CNPJ" in analisar_natureza_juridica("sem informacao")


def test_ei_com_atividade_medica_e_perigo():
    dados = DadosCompliance(texto_documentos="Empresario Individual - atendimento medico", cnaes=("8630-5/03",))
    alertas = avaliar_compliance(dados)
    assert alertas[0].titulo == "Incompatibilidade: EI para Atividade Medica"
    assert alertas[0].tipo == "perigo"


def test_eireli_e_mei_disparam_alertas():
    assert "Natureza Juridica Obsoleta: EIRELI" in _titulos(DadosCompliance(razao_social="CLINICA EIRELI"))
    assert "MEI Incompativel com Atividade Medica" in _titulos(DadosCompliance(razao_social="FULANO MEI"))


def test_cnae_cirurgico_indica_equiparacao():
    assert "Potencial Equiparacao Hospitalar" in _titulos(DadosCompliance(cnaes=("8630-5/04",)))


def test_atividades_mistas():
    dados = DadosCompliance(atividades=("Consultas medicas", "Curso de especializacao"))
    assert "Atividades Mistas Detectadas" in _titulos(dados)
    mesma_categoria = DadosCompliance(atividades=("Atendimento medico", "Cirurgia odontologica"))
    assert "Atividades Mistas Detectadas" not in _titulos(mesma_categoria)


def test_anexo_v_mais_caro_que_presumido():
    titulos = _titulos(DadosCompliance(faturamento_mensal=Decimal("50000")), "50000")
    assert "Simples Nacional (Anexo V) Mais Caro que Lucro Presumido" in titulos


def test_fator_r_proximo():
    dados = DadosCompliance(faturamento_mensal=Decimal("10000"), folha_mensal=Decimal("2500"))
    assert "Fator R Proximo do Limiar de Otimizacao" in _titulos(dados)
    acima = DadosCompliance(faturamento_mensal=Decimal("10000"), folha_mensal=Decimal("3000"))
    assert "Fator R Proximo do Limiar de Otimizacao" not in _titulos(acima)


def test_holding_recomendada():
    assert "Planejamento Patrimonial Recomendado" in _titulos(DadosCompliance(faturamento_mensal=Decimal("80000")))
    assert "Planejamento Patrimonial Recomendado" in _titulos(DadosCompliance(numero_socios=2))
    assert "Planejamento Patrimonial Recomendado" in _titulos(DadosCompliance(texto_documentos="aluguel de imovel"))


def test_dados_vazios_nao_disparam_nada():
    assert avaliar_compliance(DadosCompliance()) == []
