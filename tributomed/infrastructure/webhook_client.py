# tributomed/infrastructure/webhook_client.py
from __future__ import annotations

import json
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class WebhookClient:
    """Envia o payload da analise ao webhook configurado (ANALYSIS_WEBHOOK_URL)."""

    def __init__(self, url: str, timeout: float = 15.0) -> None:
        self._url = url
        self._timeout = timeout

    def enviar(self, payload: dict[str, Any]) -> str:
        """Resposta do webhook como texto. Falhas viram mensagem, nunca excecao."""
        try:
            response = httpx.post(self._url, json=payload, timeout=self._timeout)
        except httpx.HTTPError as err:
            logger.warning("Webhook indisponivel: %s", err)
            return f"Erro ao conectar ao webhook: {err}"

        if response.is_error:
            logger.warning("Webhook respondeu %s", response.status_code)
            return f"Falha ao enviar dados ao webhook ({response.status_code} {response.reason_phrase})."
        if "application/json" in response.headers.get("content-type", ""):
            return json.dumps(response.json(), indent=2, ensure_ascii=False)
        return response.text
