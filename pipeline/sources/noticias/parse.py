# pipeline/sources/noticias/parse.py
#
# HTML da listagem do gov.br -> DataFrame com as colunas de reform_news.
#
# Design decisions:
#   - A extracao reaproveita extrair_noticias do dominio (regex do layout do
#     gov.br + filtro de relevancia), a mesma usada pela rota de atualizacao
#     da API. Pipeline e API nunca divergem sobre o que e noticia relevante.
#   - Colunas com os nomes da tabela (title, description, url, published_at,
#     source) para o loader copiar direto.
from __future__ import annotations

from pathlib import Path

import polars as pl

from tributomed.domain.reforma.noticias import FONTE_PADRAO, extrair_noticias

SCHEMA_NOTICIAS: dict[str, pl.DataType] = {
    "title": pl.Utf8(),
    "description": pl.Utf8(),
    "url": pl.Utf8(),
    "published_at": pl.Datetime("us"),
    "source": pl.Utf8(),
}


def parse_noticias(raw_path: Path, fonte: str = FONTE_PADRAO) -> pl.DataFrame:
    pagina = raw_path.read_text(encoding="utf-8")
    noticias = extrair_noticias(pagina, fonte)
    return pl.DataFrame(
        {
            "title": [n.titulo for n in noticias],
            "description": [n.descricao for n in noticias],
            "url": [n.url for n in noticias],
            "published_at": [n.publicada_em for n in noticias],
            "source": [n.fonte for n in noticias],
        },
        schema=SCHEMA_NOTICIAS,
    )
