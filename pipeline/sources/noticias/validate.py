# pipeline/sources/noticias/validate.py
#
# Limpeza do DataFrame de noticias antes da carga.
#
# Design decisions:
#   - Titulo e url sao obrigatorios; url precisa ser absoluta (http/https).
#   - description vazia vira string vazia (coluna NOT NULL no banco) e e
#     truncada em 1000 caracteres.
#   - Deduplicacao por url mantendo a primeira ocorrencia (ordem da pagina).
#
# Invariants:
#   - url unica e nao nula em todas as linhas.
#   - published_at nao nulo.
from __future__ import annotations

import polars as pl

_DESCRICAO_MAX_LEN = 1000


def validate_noticias(df: pl.DataFrame) -> pl.DataFrame:
    df = df.filter(
        pl.col("title").is_not_null()
        & (pl.col("title").str.strip_chars() != "")
        & pl.col("url").is_not_null()
        & pl.col("url").str.starts_with("http")
        & pl.col("published_at").is_not_null()
    )
    df = df.with_columns(
        pl.col("title").str.strip_chars(),
        pl.col("description").fill_null("").str.strip_chars().str.slice(0, _DESCRICAO_MAX_LEN),
        pl.col("url").str.strip_chars(),
    )
    return df.unique(subset=["url"], keep="first", maintain_order=True)
