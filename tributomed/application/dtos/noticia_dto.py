# tributomed/application/dtos/noticia_dto.py
from __future__ import annotations

from pydantic import BaseModel

from tributomed.domain.reforma.noticias import Noticia


class NoticiaDTO(BaseModel):
    id: str
    titulo: str
    descricao: str
    url: str
    publicada_em: str
    fonte: str
    status: str

    @classmethod
    def from_domain(cls, noticia: Noticia) -> NoticiaDTO:
        return cls(
            id=str(noticia.id),
            titulo=noticia.titulo,
            descricao=noticia.descricao,
            url=noticia.url,
            publicada_em=noticia.publicada_em.isoformat(),
            fonte=noticia.fonte,
            status=noticia.status.value,
        )


class AtualizacaoNoticiasDTO(BaseModel):
    encontradas: int
    inseridas: int
    noticias: list[NoticiaDTO]
