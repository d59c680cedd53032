# pipeline/sources/base.py
#
# Contrato das fontes do pipeline.
#
# Design decisions:
#   - typing.Protocol (estrutural): a fonte nao herda de nada, so expoe a
#     interface. runtime_checkable permite o isinstance() do orquestrador.
#   - download tem efeito colateral (rede + disco); parse e validate sao
#     transformacoes puras testaveis isoladamente.
from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import polars as pl


@runtime_checkable
class SourcePipeline(Protocol):
    """Fonte do pipeline: name + download -> parse -> validate.

    Invariant: parse(raw_path) aceita exatamente o caminho devolvido por
    download(raw_dir), e validate(df) aceita o DataFrame devolvido por parse.
    """

    name: str

    def download(self, raw_dir: Path) -> Path:
        """Baixa o dado bruto para raw_dir (criado se necessario) e devolve o caminho do arquivo."""
        ...

    def parse(self, raw_path: Path) -> pl.DataFrame:
        """Arquivo bruto -> DataFrame tipado com as colunas da tabela de destino."""
        ...

    def validate(self, df: pl.DataFrame) -> pl.DataFrame:
        """Remove linhas invalidas e duplicadas."""
        ...
