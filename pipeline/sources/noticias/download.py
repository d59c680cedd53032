# pipeline/sources/noticias/download.py
#
# IO-only: baixa a listagem de noticias do Ministerio da Fazenda (gov.br).
#
# Design decisions:
#   - Sem cache: a listagem muda a cada publicacao, toda execucao baixa de novo.
#   - Erros transitorios (rede, 5xx) sao tentados de novo ate `retries` vezes
#     com espera crescente; 4xx falha na primeira tentativa.
#   - O HTML e gravado cru; a extracao fica em parse.py.
#   - Nao testado unitariamente: depende de rede.
#
# Invariants:
#   - raw_dir e criado se nao existir.
#   - Devolve o caminho de um arquivo HTML nao vazio.
from __future__ import annotations

import time
from pathlib import Path

import httpx

from pipeline.log import log

USER_AGENT = "Mozilla/5.0 (compatible; TributoMedBot/1.0)"
ARQUIVO_RAW = "noticias_fazenda.html"


def download_noticias(url: str, raw_dir: Path, timeout: int = 60, retries: int = 3) -> Path:
    """Baixa a pagina de noticias para raw_dir/noticias_fazenda.html.

    Raises:
        httpx.HTTPError: falha apos todas as tentativas, ou status 4xx.
        ValueError: pagina vazia.
    """
    raw_dir.mkdir(parents=True, exist_ok=True)
    destino = raw_dir / ARQUIVO_RAW

    for tentativa in range(1, retries + 1):
        try:
            resp = httpx.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout, follow_redirects=True)
            resp.raise_for_status()
            break
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code < 500 or tentativa == retries:
                raise
            log(f"HTTP {exc.response.status_code}, tentativa {tentativa}/{retries}", etapa="download")
        except httpx.TransportError as exc:
            if tentativa == retries:
                raise
            log(f"{exc.__class__.__name__}, tentativa {tentativa}/{retries}", etapa="download")
        time.sleep(2**tentativa)

    if not resp.text.strip():
        raise ValueError(f"Pagina de noticias vazia: {url}")
    destino.write_text(resp.text, encoding="utf-8")
    log(f"{len(resp.text):,} bytes de {url}", etapa="download")
    return destino
