from fastapi.testclient import TestClient

DIAGNOSTICO = {
    "familia": [
        {"nome": "Jose Silva", "papel": "PATRIARCH"},
        {"nome": "Maria Silva", "papel": "MATRIARCH"},
        {"nome": "Ana Silva", "papel": "HEIR"},
        {"nome": "Pedro Silva", "papel": "HEIR"},
    ],
    "ativos": [
        {
            "nome": "Apartamento Centro",
            "tipo": "REAL_ESTATE",
            "valor_mercado": "2000000",
            "valor_contabil": "800000",
            "renda_aluguel": "10000",
        }
    ],
    "uf": "sp",
}


def test_diagnostico_holding(client: TestClient) -> None:
    response = client.post("/api/holding/diagnostico", json=DIAGNOSTICO)
    assert response.status_code == 200
    data = response.json()
    assert data["valor_mercado"] == "2000000.00"
    assert data["gap_sucessorio"] == "1200000.00"
    assert data["herdeiros"] == 2
    assert data["apto_para_integralizacao"] is True
    assert data["analise"]["holding"]["imposto_mensal"] == "1133.00"
    assert data["analise"]["vale_a_pena"] is True
    assert len(data["projecoes"]) == 10
    primeiro = data["projecoes"][0]
    assert float(primeiro["patrimonio_acumulado"]) > float(primeiro["valor_patrimonio"])


def test_diagnostico_valor_negativo_retorna_422(client: TestClient) -> None:
    corpo = {**DIAGNOSTICO, "ativos": [{"nome": "Casa", "valor_mercado": "-1", "valor_contabil": "0"}]}
    assert client.post("/api/holding/diagnostico", json=corpo).status_code == 422


def test_diagnostico_papel_invalido_retorna_422(client: TestClient) -> None:
    corpo = {**DIAGNOSTICO, "familia": [{"nome": "Jose", "papel": "TIO"}]}
    assert client.post("/api/holding/diagnostico", json=corpo).status_code == 422


def test_protocolo_e_lista_de_integralizacao(client: TestClient) -> None:
    response = client.post("/api/holding/protocolo", json=DIAGNOSTICO)
    assert response.status_code == 200
    data = response.json()
    assert data["protocolo_familiar"].startswith("# PROTOCOLO FAMILIAR DA FAMILIA JOSE")
    assert "**BEM:** Apartamento Centro" in data["lista_integralizacao"]
    assert "R$ 800.000,00" in data["lista_integralizacao"]
