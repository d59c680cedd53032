from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from openai import OpenAIError

from tributomed.interfaces.api.dependencies import get_llm
from tributomed.interfaces.api.main import app


class FakeLLM:
    def __init__(self, resposta: str | None = None) -> None:
        self._resposta = resposta

    def completar(self, sistema: str, usuario: str, temperatura: float = 0.4, max_tokens: int = 2000) -> str:
        if self._resposta is None:
            raise OpenAIError("modelo indisponivel")
        return self._resposta

    def transcrever(self, nome: str, tipo: str, conteudo: bytes) -> str:
        return ""


@pytest.fixture()
def usar_llm() -> Generator[Callable[[FakeLLM], None], None, None]:
    """Injeta um modelo falso no lugar do cliente OpenAI."""

    def _usar(llm: FakeLLM) -> None:
        app.dependency_overrides[get_llm] = lambda: llm

    yield _usar
    app.dependency_overrides.pop(get_llm, None)


def test_impacto_simples_sem_perfil(client: TestClient) -> None:
    response = client.post("/api/reforma/impacto", json={"faturamento_mensal": "10000", "regime_atual": "Simples Nacional"})
    assert response.status_code == 200
    data = response.json()
    assert data["carga_atual"]["total"] == "600.00"
    assert data["projecao_2033"]["total"] == "2650.00"
    assert [a["ano"] for a in data["transicao_ibs"]] == [2029, 2030, 2031, 2032]


def test_impacto_com_perfil_usa_cenario_calculado(client: TestClient) -> None:
    response = client.post(
        "/api/reforma/impacto",
        json={"faturamento_mensal": "10000", "regime_atual": "Lucro Presumido", "perfil": {"faturamento_mensal": "10000"}},
    )
    assert response.status_code == 200
    assert response.json()["carga_atual"]["iss"] == "500.00"


def test_impacto_regime_vazio_retorna_422(client: TestClient) -> None:
    response = client.post("/api/reforma/impacto", json={"faturamento_mensal": "10000", "regime_atual": ""})
    assert response.status_code == 422


def test_relatorio_reforma(client: TestClient) -> None:
    response = client.post(
        "/api/reforma/relatorio",
        json={"perfil": {"faturamento_mensal": "10000"}, "empresa": "Clinica X", "cnaes": ["8630-5/03"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["cliente"] == "Clinica X"
    assert data["setor"] == "Saude"
    assert data["comparacao"]["atual"]["elegivel"] is True
    assert len(data["cronograma"]) > 0


def test_conhecimento_reforma(client: TestClient) -> None:
    response = client.get("/api/reforma/conhecimento")
    assert response.status_code == 200
    data = response.json()
    assert data["cronograma"][0]["ano"] == 2026
    assert any(r["percentual_reducao"] == 60 for r in data["regimes_diferenciados"])


def test_assistente_sem_modelo_responde_erro(client: TestClient) -> None:
    response = client.post("/api/reforma/assistente", json={"pergunta": "O que e a CBS?"})
    assert response.status_code == 200
    data = response.json()
    assert data["sucesso"] is False
    assert "OPENAI_API_KEY" in data["erro"]


def test_assistente_pergunta_vazia_retorna_422(client: TestClient) -> None:
    assert client.post("/api/reforma/assistente", json={"pergunta": "  "}).status_code == 422


def test_assistente_com_modelo(client: TestClient, usar_llm: Callable[[FakeLLM], None]) -> None:
    usar_llm(FakeLLM("A CBS substitui PIS e COFINS (LC 214/2025), com creditamento amplo."))
    response = client.post(
        "/api/reforma/assistente",
        json={
            "pergunta": "O que e a CBS?",
            "historico": [{"papel": "user", "conteudo": "Ola"}],
            "contexto": {"regime_atual": "Simples Nacional", "faturamento_anual": "1200000"},
        },
    )
    data = response.json()
    assert data["sucesso"] is True
    assert data["referencias_legais"] == ["LC 214/2025"]
    assert data["nivel_complexidade"] in ("basico", "intermediario", "avancado")


def test_assistente_falha_do_modelo(client: TestClient, usar_llm: Callable[[FakeLLM], None]) -> None:
    usar_llm(FakeLLM(None))
    data = client.post("/api/reforma/assistente", json={"pergunta": "O que e a CBS?"}).json()
    assert data["sucesso"] is False
    assert data["erro"] == "modelo indisponivel"
