# pipeline/output/load_duckdb.py
#
# Carga incremental: staging Parquet de noticias -> tabela reform_news.
#
# Design decisions:
#   - Incremental, nao rebuild: reform_news tambem recebe noticias gravadas
#     pela API (seed e atualizacao manual), entao o banco nunca e recriado.
#   - O schema vem de tributomed.infrastructure (mesmo schema.sql da API);
#     aplicar_schema e idempotente e permite rodar contra um banco novo.
#   - INSERT ... SELECT direto do read_parquet(), sem materializar o
#     DataFrame no Python.
#   - Tudo dentro de uma transacao: ou entram todas as noticias novas do
#     lote, ou nenhuma.
#
# Invariants:
#   - url e unica em reform_news; urls ja gravadas sao ignoradas.
#   - Devolve o numero de linhas efetivamente inseridas.
from __future__ import annotations

from pathlib import Path

import duckdb

from pipeline.log import log
from tributomed.infrastructure.duckdb_connection import aplicar_schema


def _contar(conn: duckdb.DuckDBPyConnection) -> int:
    row = conn.execute("SELECT COUNT(*) FROM reform_news").fetchone()
    return int(row[0]) if row else 0


def carregar_noticias(staging_path: Path, duckdb_path: Path) -> int:
    """Insere em reform_news as noticias do staging que ainda nao existem.

    Raises:
        Qualquer erro do duckdb propaga depois do ROLLBACK.
    """
    duckdb_path.parent.mkdir(parents=True, exist_ok=True)
    posix_path = staging_path.as_posix()

    conn = duckdb.connect(str(duckdb_path))
    try:
        aplicar_schema(conn)
        antes = _contar(conn)
        conn.execute("BEGIN TRANSACTION")
        try:
            # S608 noqa: posix_path e um caminho local gerado pelo proprio pipeline.
            conn.execute(
                "INSERT INTO reform_news "  # noqa: S608
                "(id, title, description, url, published_at, source, status, created_at) "
                "SELECT uuid(), title, description, url, published_at, source, 'published', now() "
                f"FROM read_parquet('{posix_path}') "
                "WHERE url NOT IN (SELECT url FROM reform_news)"
            )
            conn.execute("COMMIT")
        except Exception:
            conn.execute("ROLLBACK")
            raise
        inseridas = _contar(conn) - antes
    finally:
        conn.close()

    log(f"reform_news: {inseridas} novas noticias", etapa="carga")
    return inseridas
