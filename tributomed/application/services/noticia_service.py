# tributomed/application/services/noticia_service.py
from __future__ import annotations

import logging

import httpx

from tributomed.domain.reforma.noticias import (
    NOTICIAS_EXEMPLO,
    URL_NOTICIAS_FAZENDA,
    NoticiaRepository,
    NovaNoticia,
    extrair_noticias,
    validar_limite,
)

from ..dtos.noticia_dto import AtualizacaoNoticiasDTO, NoticiaDTO

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; TributoMedBot/1.0)"


class NoticiaService:
    def __init__(
        self,
        repo: NoticiaRepository,
        url_fonte: str = URL_NOTICIAS_FAZENDA,
        timeout: float = 15.0,
    ) -> None:
        self._repo = repo
        self._url_fonte = url_fonte
        self._timeout = timeout

    def listar(self, limit: int) -> list[NoticiaDTO]:
        return [NoticiaDTO.from_domain(n) for n in self._repo.listar_publicadas(validar_limite(limit))]

    def atualizar(self) -> AtualizacaoNoticiasDTO:
        """Baixa a listagem do Ministerio da Fazenda e grava as noticias novas.

        Raises:
            httpx.HTTPError: falha de rede ou status de erro da fonte.
        """
        response = httpx.get(
            self._url_fonte,
            headers={"User-Agent": USER_AGENT},
            timeout=self._timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
        encontradas = extrair_noticias(response.text)
        logger.info("%d noticias relevantes em %s", len(encontradas), self._url_fonte)
        return self._gravar(encontradas)

    def seed(self) -> AtualizacaoNoticiasDTO:
        return self._gravar(list(NOTICIAS_EXEMPLO))

    def _gravar(self, noticias: list[NovaNoticia]) -> AtualizacaoNoticiasDTO:
        inseridas = [self._repo.salvar(n) for n in noticias if not self._repo.existe_url(n.url)]
        return AtualizacaoNoticiasDTO(
            encontradas=len(noticias),
            inseridas=len(inseridas),
            noticias=[NoticiaDTO.from_domain(n) for n in inseridas],
        )
