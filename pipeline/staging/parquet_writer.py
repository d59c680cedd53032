# pipeline/staging/parquet_writer.py
#
# Leitura e escrita do staging em Parquet.
#
# Design decisions:
#   - Unico ponto do pipeline que faz IO de arquivo com polars; trocar o
#     formato do staging mexe so aqui.
#   - Sem validacao de schema: isso e responsabilidade do validate() da fonte.
from __future__ import annotations

from pathlib import Path

import polars as pl


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Grava df em path, criando os diretorios pais. Devolve path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path


def read_parquet(path: Path) -> pl.DataFrame:
    """Raises FileNotFoundError (via polars) quando path nao existe."""
    return pl.read_parquet(path)
