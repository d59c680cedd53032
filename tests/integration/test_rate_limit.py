from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def rate_limited_client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """Client com rate limit ativo (3 req/min para teste rapido)."""
    from tributomed.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from tributomed.infrastructure.config import get_settings

    old_val = os.environ.get("API_RATE_LIMIT_PER_MINUTE", "0")
    os.environ["API_RATE_LIMIT_PER_MINUTE"] = "3"
    get_settings.cache_clear()

    from tributomed.interfaces.api.main import app
    with TestClient(app) as c:
        yield c

    os.environ["API_RATE_LIMIT_PER_MINUTE"] = old_val
    get_settings.cache_clear()


def test_rate_limit_permite_dentro_do_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        response = rate_limited_client.get("/api/iss/Recife")
        assert response.status_code == 200


def test_rate_limit_bloqueia_apos_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/iss/Recife")
    response = rate_limited_client.get("/api/iss/Recife")
    assert response.status_code == 429
    assert "Muitas requisicoes" in response.json()["detail"]
    assert response.headers["retry-after"] == "60"


def test_rate_limit_bypass_com_api_key(rate_limited_client: TestClient) -> None:
    # Esgotar o limite
    for _ in range(3):
        rate_limited_client.get("/api/iss/Recife")
    # Com API key, deve passar
    response = rate_limited_client.get("/api/iss/Recife", headers={"X-API-Key": "test-key"})
    assert response.status_code == 200


def test_rate_limit_descarta_ips_ociosos() -> None:
    from tributomed.interfaces.api.middleware.rate_limit import JANELA_SEGUNDOS, RateLimitMiddleware

    middleware = RateLimitMiddleware(app=None)
    for i in range(100):
        assert middleware.registrar(f"10.0.0.{i}", 3, agora=1000.0)
    assert len(middleware._requisicoes) == 100

    assert middleware.registrar("10.0.1.1", 3, agora=1000.0 + JANELA_SEGUNDOS)
    assert list(middleware._requisicoes) == ["10.0.1.1"]


def test_rate_limit_libera_apos_a_janela() -> None:
    from tributomed.interfaces.api.middleware.rate_limit import JANELA_SEGUNDOS, RateLimitMiddleware

    middleware = RateLimitMiddleware(app=None)
    for _ in range(3):
        assert middleware.registrar("10.0.0.1", 3, agora=0.0)
    assert not middleware.registrar("10.0.0.1", 3, agora=1.0)
    assert middleware.registrar("10.0.0.1", 3, agora=JANELA_SEGUNDOS + 0.5)
