import json
import uuid

from fastapi.testclient import TestClient

FORM_BASE = {
    "tipo_cliente": "Transferencias de contabilidade",
    "faturamento_mensal": "25.000,00",
    "empresa": "Odonto Sorriso",
    "municipio": "Belo Horizonte",
}


def test_criar_analise_retorna_201(client: TestClient, analise_id: str) -> None:
    data = client.get(f"/api/analises/{analise_id}").json()
    assert data["faturamento_mensal"] == "10000.00"
    assert data["cnpj"] == "11.222.333/0001-81"
    assert data["cnaes"] == ["8630-5/03"]
    assert data["resumo_gerado_por_ia"] is False
    assert data["melhor_cenario"]["nome"] == data["impacto_reforma"]["regime_atual"]
    assert data["relatorio_reforma"]["setor"] == "Saude"


def test_criar_analise_com_anexo_e_atividades(client: TestClient) -> None:
    atividades = [
        {"nome": "Consultas", "receita_mensal": "20000", "tipo": "servico", "anexo": "III"},
        {"nome": "Venda de cosmeticos", "receita_mensal": "5000", "tipo": "comercio", "anexo": "I"},
    ]
    response = client.post(
        "/api/analises",
        data={**FORM_BASE, "atividades": json.dumps(atividades)},
        files=[("anexos", ("receitas.csv", b"mes;receita\njaneiro;25000\n", "text/csv"))],
    )
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["anexos"] == [{"nome": "receitas.csv", "tipo": "text/csv", "tamanho": 26}]
    assert "janeiro,25000" in data["texto_documentos"]
    assert any(c["tipo"] == "simples_misto" for c in data["cenarios"])


def test_analise_sem_faturamento_retorna_422(client: TestClient) -> None:
    response = client.post("/api/analises", data={**FORM_BASE, "faturamento_mensal": ""})
    assert response.status_code == 422
    assert "faturamento mensal" in response.json()["detail"]


def test_analise_sem_dados_retorna_422(client: TestClient) -> None:
    response = client.post(
        "/api/analises",
        data={"tipo_cliente": "Novo aberturas de empresa", "faturamento_mensal": "8000"},
    )
    assert response.status_code == 422
    assert "forneca as informacoes" in response.json()["detail"]


def test_analise_cnpj_invalido_retorna_422(client: TestClient) -> None:
    response = client.post("/api/analises", data={**FORM_BASE, "dados_cliente": "x", "cnpj": "11.222.333/0001-82"})
    assert response.status_code == 422


def test_analise_aliquota_iss_acima_do_teto_retorna_422(client: TestClient) -> None:
    response = client.post("/api/analises", data={**FORM_BASE, "dados_cliente": "x", "aliquota_iss": "7,5"})
    assert response.status_code == 422
    assert "Aliquota de ISS" in response.json()["detail"]


def test_analise_tipo_cliente_invalido_retorna_422(client: TestClient) -> None:
    response = client.post("/api/analises", data={**FORM_BASE, "tipo_cliente": "Outro", "dados_cliente": "x"})
    assert response.status_code == 422


def test_listar_analises_inclui_a_criada(client: TestClient, analise_id: str) -> None:
    response = client.get("/api/analises?limit=100")
    assert response.status_code == 200
    resumo = next(a for a in response.json() if a["id"] == analise_id)
    assert resumo["empresa"] == "Clinica Exemplo"
    assert resumo["melhor_cenario"] is not None


def test_listar_analises_limite_invalido(client: TestClient) -> None:
    assert client.get("/api/analises?limit=0").status_code == 422
    assert client.get("/api/analises?limit=101").status_code == 422


def test_analise_inexistente_retorna_404(client: TestClient) -> None:
    response = client.get(f"/api/analises/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Analise nao encontrada"


def test_analise_id_invalido_retorna_422(client: TestClient) -> None:
    assert client.get("/api/analises/nao-e-uuid").status_code == 422
