# pipeline/config.py
#
# Configuracao do pipeline de noticias, lida de variaveis de ambiente.
#
# Design decisions:
#   - Dataclass congelada (nao pydantic): o pipeline e um processo batch
#     separado da API.
#   - DUCKDB_PATH nao tem default: o pipeline grava no mesmo banco servido
#     pela API e se recusa a rodar sem saber qual e.
#   - Diretorios de trabalho ficam em pipeline/data por padrao.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from tributomed.domain.reforma.noticias import URL_NOTICIAS_FAZENDA

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class PipelineConfig:
    """Configuracao imutavel do pipeline.

    Invariants:
      - duckdb_path sempre informado (garantido por load_config).
      - download_timeout e download_retries sao positivos.
    """

    data_dir: Path
    duckdb_path: Path
    noticias_url: str = URL_NOTICIAS_FAZENDA
    download_timeout: int = 60
    download_retries: int = 3

    @property
    def raw_dir(self) -> Path:
        return self.data_dir / "raw"

    @property
    def staging_dir(self) -> Path:
        return self.data_dir / "staging"


def load_config() -> PipelineConfig:
    """PipelineConfig a partir do ambiente.

    Raises:
        ValueError: DUCKDB_PATH ausente.
    """
    duckdb_path = os.environ.get("DUCKDB_PATH")
    if not duckdb_path:
        raise ValueError(
            "DUCKDB_PATH environment variable is required. "
            "Point it to the database file served by the API."
        )

    return PipelineConfig(
        data_dir=Path(os.environ.get("PIPELINE_DATA_DIR", str(_PIPELINE_DIR / "data"))),
        duckdb_path=Path(duckdb_path),
        noticias_url=os.environ.get("NOTICIAS_URL", URL_NOTICIAS_FAZENDA),
        download_timeout=int(os.environ.get("PIPELINE_DOWNLOAD_TIMEOUT", "60")),
        download_retries=int(os.environ.get("PIPELINE_DOWNLOAD_RETRIES", "3")),
    )
