# pipeline/sources/noticias/source.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import polars as pl

from .download import download_noticias
from .parse import parse_noticias
from .validate import validate_noticias


@dataclass(frozen=True)
class NoticiasFazendaSource:
    """Noticias da Reforma Tributaria publicadas pelo Ministerio da Fazenda."""

    url: str
    timeout: int = 60
    retries: int = 3
    name: str = "noticias_fazenda"

    def download(self, raw_dir: Path) -> Path:
        return download_noticias(self.url, raw_dir, self.timeout, self.retries)

    def parse(self, raw_path: Path) -> pl.DataFrame:
        return parse_noticias(raw_path)

    def validate(self, df: pl.DataFrame) -> pl.DataFrame:
        return validate_noticias(df)
