# tributomed/infrastructure/repositories/duckdb_noticia_repo.py
from __future__ import annotations

import uuid
from datetime import datetime

import duckdb

from tributomed.domain.reforma.noticias import Noticia, NovaNoticia, StatusNoticia


class DuckDBNoticiaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar_publicadas(self, limit: int) -> list[Noticia]:
        """ORDER BY published_at DESC."""
        rows = self._conn.execute(
            """
            SELECT id, title, description, url, published_at, source, status, created_at
            FROM reform_news
            WHERE status = ?
            ORDER BY published_at DESC
            LIMIT ?
        """,
            [StatusNoticia.PUBLICADA.value, limit],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def existe_url(self, url: str) -> bool:
        row = self._conn.execute("SELECT 1 FROM reform_news WHERE url = ? LIMIT 1", [url]).fetchone()
        return row is not None

    def salvar(self, noticia: NovaNoticia) -> Noticia:
        salva = Noticia(
            id=uuid.uuid4(),
            titulo=noticia.titulo,
            descricao=noticia.descricao,
            url=noticia.url,
            publicada_em=noticia.publicada_em,
            fonte=noticia.fonte,
            status=StatusNoticia.PUBLICADA,
            criada_em=datetime.now(),
        )
        self._conn.execute(
            """
            INSERT INTO reform_news (id, title, description, url, published_at, source, status, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
            [
                str(salva.id),
                salva.titulo,
                salva.descricao,
                salva.url,
                salva.publicada_em,
                salva.fonte,
                salva.status.value,
                salva.criada_em,
            ],
        )
        return salva

    def _hidratar(self, row: tuple) -> Noticia:  # type: ignore[type-arg]
        return Noticia(
            id=row[0] if isinstance(row[0], uuid.UUID) else uuid.UUID(str(row[0])),
            titulo=str(row[1]),
            descricao=str(row[2]),
            url=str(row[3]),
            publicada_em=row[4],
            fonte=str(row[5]),
            status=StatusNoticia(str(row[6])),
            criada_em=row[7],
        )
