# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator
from typing import Any

import duckdb
import httpx
import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit, LLM e webhook em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["OPENAI_API_KEY"] = ""
os.environ["ANALYSIS_WEBHOOK_URL"] = ""

CNPJ_EXISTENTE = "11222333000181"
CNPJ_INEXISTENTE = "00000000000000"
CNPJ_LIMITE = "99999999999999"
CNPJ_FALHA = "88888888888888"


class FakeBrasilAPI:
    """Respostas fixas no formato da BrasilAPI, sem rede."""

    def consultar_cnpj(self, cnpj: str) -> dict[str, Any] | None:
        from tributomed.infrastructure.brasilapi_client import LimiteBrasilAPIExcedido

        if cnpj == CNPJ_LIMITE:
            raise LimiteBrasilAPIExcedido("Muitas requisicoes. Tente novamente em instantes.")
        if cnpj == CNPJ_FALHA:
            raise httpx.ConnectError("conexao recusada")
        if cnpj != CNPJ_EXISTENTE:
            return None
        return {
            "cnpj": CNPJ_EXISTENTE,
            "razao_social": "CLINICA EXEMPLO LTDA",
            "nome_fantasia": "Clinica Exemplo",
            "cnae_fiscal": 8630503,
            "cnaes_secundarios": [{"codigo": 8640202, "descricao": "Laboratorios clinicos"}, {"codigo": 0}],
            "logradouro": "Rua Dom Pedro II",
            "numero": "100",
            "municipio": "MONTES CLAROS",
            "uf": "MG",
        }


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com o schema da aplicacao."""
    from tributomed.infrastructure.duckdb_connection import aplicar_schema

    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory e BrasilAPI falsa."""
    from tributomed.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar as variaveis acima
    from tributomed.infrastructure.config import get_settings
    get_settings.cache_clear()

    from tributomed.interfaces.api.dependencies import get_brasilapi_client
    from tributomed.interfaces.api.main import app
    app.dependency_overrides[get_brasilapi_client] = FakeBrasilAPI
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def analise_id(client: TestClient) -> str:
    """Uma analise persistida para os testes de leitura e export."""
    response = client.post(
        "/api/analises",
        data={
            "tipo_cliente": "Novo aberturas de empresa",
            "faturamento_mensal": "10.000,00",
            "empresa": "Clinica Exemplo",
            "cnpj": "11.222.333/0001-81",
            "dados_cliente": "Medico com consultorio proprio em Montes Claros.",
            "municipio": "Montes Claros",
            "cnaes": "8630503",
        },
    )
    assert response.status_code == 201, response.text
    return str(response.json()["id"])
