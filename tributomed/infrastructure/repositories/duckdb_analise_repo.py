# tributomed/infrastructure/repositories/duckdb_analise_repo.py
from __future__ import annotations

import json
import uuid
from decimal import Decimal

import duckdb

from tributomed.domain.analise.entities import RegistroAnalise


class DuckDBAnaliseRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def salvar(self, registro: RegistroAnalise) -> None:
        self._conn.execute(
            """
            INSERT INTO analises
                (id, created_at, client_type, company_name, cnpj, monthly_revenue, best_scenario, payload)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
            [
                str(registro.id),
                registro.criada_em,
                registro.tipo_cliente,
                registro.empresa,
                registro.cnpj,
                registro.faturamento_mensal,
                registro.melhor_cenario,
                json.dumps(registro.conteudo, ensure_ascii=False),
            ],
        )

    def buscar(self, id: uuid.UUID) -> RegistroAnalise | None:
        row = self._conn.execute(
            """
            SELECT id, created_at, client_type, company_name, cnpj,
                   monthly_revenue, best_scenario, payload
            FROM analises
            WHERE id = ?
        """,
            [str(id)],
        ).fetchone()
        return self._hidratar(row) if row else None

    def listar_recentes(self, limit: int) -> list[RegistroAnalise]:
        """ORDER BY created_at DESC."""
        rows = self._conn.execute(
            """
            SELECT id, created_at, client_type, company_name, cnpj,
                   monthly_revenue, best_scenario, payload
            FROM analises
            ORDER BY created_at DESC
            LIMIT ?
        """,
            [limit],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> RegistroAnalise:  # type: ignore[type-arg]
        payload = row[7]
        return RegistroAnalise(
            id=row[0] if isinstance(row[0], uuid.UUID) else uuid.UUID(str(row[0])),
            criada_em=row[1],
            tipo_cliente=str(row[2]),
            empresa=str(row[3]) if row[3] else None,
            cnpj=str(row[4]) if row[4] else None,
            faturamento_mensal=Decimal(str(row[5])),
            melhor_cenario=str(row[6]) if row[6] else None,
            conteudo=json.loads(payload) if isinstance(payload, str) else dict(payload),
        )
