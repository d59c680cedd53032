# tests/pipeline/test_ingestao_noticias.py
#
# Tests for the gov.br news source: parse and validate.
#
# The fixture noticias_fazenda.html follows the listing layout of the
# Ministerio da Fazenda page: one <li> per item, relative and absolute
# links, the date inside span.data and HTML inside the description. It
# holds 3 relevant items (one of them a republished duplicate url) and
# 1 irrelevant item.
from __future__ import annotations

import datetime
from pathlib import Path

import polars as pl

from pipeline.sources.base import SourcePipeline
from pipeline.sources.noticias.parse import SCHEMA_NOTICIAS, parse_noticias
from pipeline.sources.noticias.source import NoticiasFazendaSource
from pipeline.sources.noticias.validate import validate_noticias

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
SAMPLE_NOTICIAS = FIXTURES_DIR / "noticias_fazenda.html"


def test_parse_extrai_apenas_relevantes() -> None:
    """Irrelevant items are dropped by parse; the duplicate url is still there."""
    df = parse_noticias(SAMPLE_NOTICIAS)

    assert len(df) == 3
    assert dict(df.schema) == SCHEMA_NOTICIAS
    assert not df.filter(pl.col("title").str.contains("feira")).height


def test_parse_url_absoluta_e_data() -> None:
    df = parse_noticias(SAMPLE_NOTICIAS)
    primeira = df.row(0, named=True)

    assert primeira["url"].startswith("https://www.gov.br/fazenda/")
    assert primeira["published_at"] == datetime.datetime(2026, 2, 12, 12)
    assert primeira["source"] == "Ministerio da Fazenda"


def test_validate_remove_url_duplicada_mantendo_primeira() -> None:
    df = validate_noticias(parse_noticias(SAMPLE_NOTICIAS))

    assert len(df) == 2
    assert df["url"].n_unique() == 2
    assert "(republicado)" not in " ".join(df["title"].to_list())


def test_validate_descarta_invalidas_e_trunca_descricao() -> None:
    data = datetime.datetime(2026, 1, 1)
    df = pl.DataFrame(
        {
            "title": ["  Reforma tributaria  ", "", "IBS", "CBS"],
            "description": [None, "x", "x" * 1500, "y"],
            "url": ["https://a.gov.br/1", "https://a.gov.br/2", "https://a.gov.br/3", "/relativa"],
            "published_at": [data, data, data, data],
            "source": ["Fazenda"] * 4,
        },
        schema=SCHEMA_NOTICIAS,
    )

    result = validate_noticias(df)

    assert result["url"].to_list() == ["https://a.gov.br/1", "https://a.gov.br/3"]
    assert result["title"][0] == "Reforma tributaria"
    assert result["description"][0] == ""
    assert len(result["description"][1]) == 1000


def test_validate_descarta_sem_data() -> None:
    df = pl.DataFrame(
        {
            "title": ["Reforma"],
            "description": ["x"],
            "url": ["https://a.gov.br/1"],
            "published_at": [None],
            "source": ["Fazenda"],
        },
        schema=SCHEMA_NOTICIAS,
    )
    assert validate_noticias(df).is_empty()


def test_source_satisfaz_protocolo() -> None:
    source = NoticiasFazendaSource(url="https://www.gov.br/fazenda/pt-br/assuntos/noticias")
    assert isinstance(source, SourcePipeline)
    assert source.name == "noticias_fazenda"
    assert len(source.validate(source.parse(SAMPLE_NOTICIAS))) == 2
