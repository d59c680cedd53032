# pipeline/main.py
#
# Orquestrador do pipeline de noticias da Reforma Tributaria.
#
# Design decisions:
#   - run_pipeline e o unico ponto de entrada; main() so le o ambiente e
#     chama run_pipeline (script `tributomed-pipeline`).
#   - Ordem fixa: download -> parse -> validate -> staging parquet -> carga.
#   - skip_download=True le o HTML ja presente em raw_dir, usado nos testes
#     e para reprocessar sem bater no gov.br.
#   - Log em stdout via pipeline.log: e um job batch, nao um servico.
#
# Invariant: reform_news so e tocado depois que o staging foi gravado com
# sucesso; lote vazio nao abre o banco.
from __future__ import annotations

from pipeline.config import PipelineConfig, load_config
from pipeline.log import iniciar_execucao, log
from pipeline.output.load_duckdb import carregar_noticias
from pipeline.sources.base import SourcePipeline
from pipeline.sources.noticias.download import ARQUIVO_RAW
from pipeline.sources.noticias.source import NoticiasFazendaSource
from pipeline.staging.parquet_writer import write_parquet


def run_pipeline(config: PipelineConfig, *, skip_download: bool = False) -> int:
    """Executa o pipeline e devolve quantas noticias novas foram gravadas.

    Raises:
        FileNotFoundError: skip_download=True sem HTML em raw_dir.
        httpx.HTTPError: falha no download.
    """
    iniciar_execucao()
    source: SourcePipeline = NoticiasFazendaSource(
        url=config.noticias_url,
        timeout=config.download_timeout,
        retries=config.download_retries,
    )

    if skip_download:
        raw_path = config.raw_dir / ARQUIVO_RAW
        if not raw_path.exists():
            raise FileNotFoundError(f"HTML de noticias nao encontrado: {raw_path}")
        log(f"Usando HTML existente: {raw_path}", etapa="download")
    else:
        log(f"Baixando {source.name}...", etapa="download")
        raw_path = source.download(config.raw_dir)

    df = source.validate(source.parse(raw_path))
    log(f"{source.name}: {len(df):,} noticias relevantes", etapa="parse")
    if df.is_empty():
        log("Nenhuma noticia relevante. Banco nao alterado.", etapa="carga")
        return 0

    staging_path = write_parquet(df, config.staging_dir / f"{source.name}.parquet")
    inseridas = carregar_noticias(staging_path, config.duckdb_path)
    log(f"Concluido. {inseridas} noticias novas em {config.duckdb_path}", etapa="carga")
    return inseridas


def main() -> None:
    run_pipeline(load_config())


if __name__ == "__main__":
    main()
