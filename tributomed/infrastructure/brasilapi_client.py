# tributomed/infrastructure/brasilapi_client.py
from __future__ import annotations

from typing import Any

import httpx


class LimiteBrasilAPIExcedido(Exception):
    """BrasilAPI respondeu 429."""


class BrasilAPIClient:
    def __init__(self, base_url: str, timeout: float = 15.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def consultar_cnpj(self, cnpj: str) -> dict[str, Any] | None:
        """Dados cadastrais brutos do CNPJ (14 digitos); None quando nao existe.

        Raises:
            LimiteBrasilAPIExcedido: HTTP 429.
            httpx.HTTPError: falha de rede ou qualquer outro status de erro.
        """
        response = httpx.get(f"{self._base_url}/{cnpj}", timeout=self._timeout, follow_redirects=True)
        if response.status_code == 404:
            return None
        if response.status_code == 429:
            raise LimiteBrasilAPIExcedido("Muitas requisicoes. Tente novamente em instantes.")
        response.raise_for_status()
        dados: dict[str, Any] = response.json()
        return dados
