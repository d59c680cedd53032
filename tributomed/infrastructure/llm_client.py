# tributomed/infrastructure/llm_client.py
#
# Cliente OpenAI (chat completions) para narrativas, assistente da Reforma e
# transcricao de PDFs e imagens anexados.
#
# Design decisions:
#   - O cliente openai.OpenAI e criado sob demanda; sem OPENAI_API_KEY a
#     camada de dependencias nem instancia esta classe.
#   - Erros da API (openai.OpenAIError) propagam: cada servico decide se
#     degrada (analise, assistente) ou falha.
#   - PDFs vao como parte "file" e imagens como "image_url", ambos em data URI.
from __future__ import annotations

import base64
import logging
from typing import Any, Protocol

from openai import OpenAI

logger = logging.getLogger(__name__)

PROMPT_TRANSCRICAO = (
    "Voce e um especialista em OCR contabil. O documento contem informacoes fiscais (DAS, extratos do "
    "Simples, declaracoes de IR ou planilhas financeiras).\n"
    "1. Transcreva com precisao maxima CNPJ, razao social, periodo de apuracao e receita bruta.\n"
    "2. Tabelas (ex: PGDAS) devem manter a estrutura linha a linha.\n"
    "3. Diferencie '0' de 'O' e '1' de 'I'. Mantenha o formato decimal do original.\n"
    "4. Ignore rodapes e marcas d'agua sem dados financeiros.\n"
    "Transcreva todo o texto legivel."
)


class ModeloLinguagem(Protocol):
    def completar(self, sistema: str, usuario: str, temperatura: float = ..., max_tokens: int = ...) -> str: ...
    def transcrever(self, nome: str, tipo: str, conteudo: bytes) -> str: ...


class OpenAILLMClient:
    def __init__(self, api_key: str, model: str, timeout: float = 60.0) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client: OpenAI | None = None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key, timeout=self._timeout)
        return self._client

    def completar(self, sistema: str, usuario: str, temperatura: float = 0.4, max_tokens: int = 2000) -> str:
        return self._chat(
            [
                {"role": "system", "content": sistema},
                {"role": "user", "content": usuario},
            ],
            temperatura,
            max_tokens,
        )

    def transcrever(self, nome: str, tipo: str, conteudo: bytes) -> str:
        data_uri = f"data:{tipo};base64,{base64.b64encode(conteudo).decode('ascii')}"
        if tipo == "application/pdf":
            anexo: dict[str, Any] = {"type": "file", "file": {"filename": nome, "file_data": data_uri}}
        else:
            anexo = {"type": "image_url", "image_url": {"url": data_uri}}
        logger.info("Transcrevendo anexo %s (%s, %d bytes)", nome, tipo, len(conteudo))
        return self._chat(
            [{"role": "user", "content": [{"type": "text", "text": PROMPT_TRANSCRICAO}, anexo]}],
            0.0,
            4000,
        )

    def _chat(self, messages: list[dict[str, Any]], temperatura: float, max_tokens: int) -> str:
        response = self.client.chat.completions.create(
            model=self._model,
            messages=messages,  # type: ignore[arg-type]
            temperature=temperatura,
            max_tokens=max_tokens,
        )
        return (response.choices[0].message.content or "").strip()
