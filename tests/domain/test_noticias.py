# tests/domain/test_noticias.py
from datetime import datetime
from pathlib import Path

import pytest

from tributomed.domain.reforma.noticias import (
    NOTICIAS_EXEMPLO,
    extrair_noticias,
    relevante,
    url_absoluta,
    validar_limite,
)

FIXTURE = Path(__file__).parent.parent / "fixtures" / "noticias_fazenda.html"


def test_extrai_apenas_noticias_relevantes():
    noticias = extrair_noticias(FIXTURE.read_text(encoding="utf-8"))
    titulos = [n.titulo for n in noticias]
    assert "Comitê Gestor do IBS aprova regimento interno" in titulos
    assert "Split payment: bancos iniciam piloto" in titulos
    assert not any("feira agricola" in t for t in titulos)


def test_extracao_normaliza_url_data_e_descricao():
    primeira = extrair_noticias(FIXTURE.read_text(encoding="utf-8"))[0]
    assert primeira.url == (
        "https://www.gov.br/fazenda/pt-br/assuntos/noticias/2026/fevereiro/comite-gestor-do-ibs-aprova-regimento"
    )
    assert primeira.publicada_em == datetime(2026, 2, 12, 12)
    assert primeira.descricao.startswith("Regimento define")
    assert primeira.fonte == "Ministerio da Fazenda"


def test_extracao_remove_tags_da_descricao():
    noticias = extrair_noticias(FIXTURE.read_text(encoding="utf-8"))
    split = next(n for n in noticias if n.titulo.startswith("Split"))
    assert "<strong>" not in split.descricao
    assert "retencao automatica" in split.descricao


def test_pagina_sem_layout_esperado():
    assert extrair_noticias("<html><body><p>Reforma tributaria</p></body></html>") == []


def test_relevancia_ignora_acentos():
    assert relevante("Reforma Tributária avança no Senado")
    assert not relevante("Resultado do campeonato")


def test_url_absoluta():
    assert url_absoluta("/fazenda/x") == "https://www.gov.br/fazenda/x"
    assert url_absoluta("https://outro.gov.br/y") == "https://outro.gov.br/y"


@pytest.mark.parametrize("limite", [0, 101, -5])
def test_limite_fora_da_faixa(limite):
    with pytest.raises(ValueError):
        validar_limite(limite)


def test_noticias_exemplo_tem_urls_distintas():
    urls = [n.url for n in NOTICIAS_EXEMPLO]
    assert len(urls) == len(set(urls))


def test_data_impossivel_descarta_apenas_o_item():
    pagina = FIXTURE.read_text(encoding="utf-8").replace("12/02/2026", "31/02/2026")
    noticias = extrair_noticias(pagina)
    titulos = [n.titulo for n in noticias]
    assert "Comitê Gestor do IBS aprova regimento interno" not in titulos
    assert "Split payment: bancos iniciam piloto" in titulos
    assert len(noticias) == 2
