# tributomed/domain/reforma/noticias.py
#
# Noticias sobre a Reforma Tributaria: entidade, filtro de relevancia e
# extracao a partir da listagem de noticias do Ministerio da Fazenda.
#
# Design decisions:
#   - A extracao e uma funcao pura sobre o HTML ja baixado; download e
#     persistencia ficam na aplicacao e no pipeline.
#   - Layout esperado do gov.br: <h2 class="titulo"><a href=...>titulo</a></h2>
#     ... <span class="data">DD/MM/AAAA</span> descricao <div. Itens que nao
#     casam com o layout sao ignorados.
#   - Publicacao fixada ao meio-dia da data listada (a listagem nao traz hora).
#   - URL e a chave natural: salvar uma noticia cuja URL ja existe e no-op.
#
# Invariants:
#   - Toda NovaNoticia extraida tem URL absoluta e titulo nao vazio.
from __future__ import annotations

import html
import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Protocol

from tributomed.domain.texto import normalizar

FONTE_PADRAO = "Ministerio da Fazenda"
URL_BASE_GOV = "https://www.gov.br"
URL_NOTICIAS_FAZENDA = "https://www.gov.br/fazenda/pt-br/assuntos/noticias"
LIMITE_PADRAO = 20
LIMITE_MAXIMO = 100


class StatusNoticia(StrEnum):
    PUBLICADA = "published"
    ARQUIVADA = "archived"


@dataclass(frozen=True)
class NovaNoticia:
    titulo: str
    descricao: str
    url: str
    publicada_em: datetime
    fonte: str = FONTE_PADRAO


@dataclass(frozen=True)
class Noticia:
    id: uuid.UUID
    titulo: str
    descricao: str
    url: str
    publicada_em: datetime
    fonte: str
    status: StatusNoticia
    criada_em: datetime


class NoticiaRepository(Protocol):
    def listar_publicadas(self, limit: int) -> list[Noticia]: ...
    def existe_url(self, url: str) -> bool: ...
    def salvar(self, noticia: NovaNoticia) -> Noticia: ...


PALAVRAS_CHAVE: tuple[str, ...] = tuple(
    normalizar(p)
    for p in (
        "reforma tributaria",
        "LC 214",
        "LC 227",
        "PLP 108",
        "CBS",
        "IBS",
        "imposto sobre bens e servicos",
        "contribuicao sobre bens e servicos",
        "split payment",
        "comite gestor",
        "cesta basica nacional",
        "cashback tributario",
        "receita federal",
        "arrecadacao",
        "tributacao",
        "imposto",
        "nova lei",
        "regulamentacao",
        "iva dual",
    )
)

_ITEM_NOTICIA = re.compile(
    r'<h2\s+class="titulo">\s*<a\s+href="([^"]+)"[^>]*>([\s\S]*?)</a>\s*</h2>'
    r'[\s\S]*?<span\s+class="data">(\d{2}/\d{2}/\d{4})</span>([\s\S]*?)<div',
    re.IGNORECASE,
)
_TAG = re.compile(r"<[^>]+>")
_ESPACOS = re.compile(r"\s+")


def relevante(texto: str) -> bool:
    normalizado = normalizar(texto)
    return any(p in normalizado for p in PALAVRAS_CHAVE)


def _limpar(fragmento: str) -> str:
    texto = html.unescape(_TAG.sub("", fragmento))
    return _ESPACOS.sub(" ", texto).strip().lstrip("- ").strip()


def url_absoluta(url: str) -> str:
    return url if url.startswith("http") else f"{URL_BASE_GOV}{url}"


def extrair_noticias(pagina: str, fonte: str = FONTE_PADRAO) -> list[NovaNoticia]:
    """Noticias relevantes da listagem HTML do gov.br, na ordem da pagina.

    Itens com data impossivel (ex: 31/02) sao ignorados sem interromper o lote.
    """
    noticias = []
    for url, titulo_raw, data_raw, descricao_raw in _ITEM_NOTICIA.findall(pagina):
        titulo = _limpar(titulo_raw)
        descricao = _limpar(descricao_raw)
        if not titulo or not relevante(f"{titulo} {descricao}"):
            continue
        try:
            publicada_em = datetime.strptime(data_raw, "%d/%m/%Y").replace(hour=12)
        except ValueError:
            continue
        noticias.append(
            NovaNoticia(
                titulo=titulo,
                descricao=descricao,
                url=url_absoluta(url.strip()),
                publicada_em=publicada_em,
                fonte=fonte,
            )
        )
    return noticias


def validar_limite(limit: int) -> int:
    if not 1 <= limit <= LIMITE_MAXIMO:
        raise ValueError(f"Limite deve estar entre 1 e {LIMITE_MAXIMO}")
    return limit


_REFORMA = "https://www.gov.br/fazenda/pt-br/acesso-a-informacao/acoes-e-programas/reforma-tributaria"
_NOTICIAS_2026 = "https://www.gov.br/fazenda/pt-br/assuntos/noticias/2026/janeiro"

NOTICIAS_EXEMPLO: tuple[NovaNoticia, ...] = (
    NovaNoticia(
        "Nova lei de regulamentacao da Reforma Tributaria aprofunda o federalismo fiscal cooperativo",
        "Comite Gestor do IBS cuidara da gestao e fiscalizacao desse tributo, em parceria inedita entre as "
        "administracoes tributarias dos entes federados",
        f"{_NOTICIAS_2026}/nova-lei-de-regulamentacao-da-reforma-tributaria-aprofunda-o-federalismo-fiscal-"
        "cooperativo",
        datetime(2026, 1, 13, 12),
    ),
    NovaNoticia(
        "Fazenda, Receita e Serpro lancam Reforma Tributaria do Consumo em cerimonia em Brasilia",
        "Evento com autoridades do Governo Federal marca o inicio da maior infraestrutura digital tributaria "
        "da historia do pais",
        f"{_NOTICIAS_2026}/fazenda-receita-e-serpro-lancam-reforma-tributaria-do-consumo-em-cerimonia-em-brasilia",
        datetime(2026, 1, 10, 12),
    ),
    NovaNoticia(
        "CBS e IBS: entenda o novo modelo de tributacao sobre consumo",
        "A Reforma Tributaria substitui cinco tributos por dois: CBS (federal) e IBS (estadual/municipal)",
        f"{_REFORMA}#cbs-e-ibs",
        datetime(2026, 1, 8, 12),
    ),
    NovaNoticia(
        "Split Payment entra em vigor em 2027: saiba como funciona",
        "Sistema de pagamento dividido retem automaticamente o imposto nas transacoes bancarias",
        f"{_REFORMA}#split-payment",
        datetime(2026, 1, 5, 12),
    ),
    NovaNoticia(
        "Cesta Basica Nacional tera aliquota zero de CBS e IBS",
        "22 produtos essenciais, incluindo arroz, feijao, carnes e leite, terao isencao total dos novos "
        "tributos sobre consumo",
        f"{_REFORMA}#cesta-basica",
        datetime(2026, 1, 3, 12),
    ),
)
