# tributomed/application/dtos/conhecimento_dto.py
from __future__ import annotations

from pydantic import BaseModel

from tributomed.domain.reforma.conhecimento import (
    CASHBACK,
    CESTA_BASICA,
    CONCEITOS_CHAVE,
    CRONOGRAMA,
    REGIMES_DIFERENCIADOS,
)


class MarcoReformaDTO(BaseModel):
    ano: int
    fase: str
    mudancas: list[str]
    aliquota_cbs: str | None
    aliquota_ibs: str | None
    reducao_icms_iss: int | None


class RegimeDiferenciadoDTO(BaseModel):
    id: str
    nome: str
    percentual_reducao: int
    descricao: str
    setores: list[str]
    exemplos: list[str]


class ItemCestaBasicaDTO(BaseModel):
    nome: str
    categoria: str
    tratamento: str
    descricao: str


class RegraCashbackDTO(BaseModel):
    categoria: str
    devolucao_cbs: int
    devolucao_ibs: int
    elegibilidade: str


class ConceitoChaveDTO(BaseModel):
    id: str
    titulo: str
    descricao: str
    itens: list[str]


class ConhecimentoReformaDTO(BaseModel):
    cronograma: list[MarcoReformaDTO]
    regimes_diferenciados: list[RegimeDiferenciadoDTO]
    cesta_basica: list[ItemCestaBasicaDTO]
    cashback: list[RegraCashbackDTO]
    conceitos_chave: list[ConceitoChaveDTO]

    @classmethod
    def carregar(cls) -> ConhecimentoReformaDTO:
        return cls(
            cronograma=[
                MarcoReformaDTO(
                    ano=m.ano,
                    fase=m.fase,
                    mudancas=list(m.mudancas),
                    aliquota_cbs=str(m.aliquota_cbs) if m.aliquota_cbs is not None else None,
                    aliquota_ibs=str(m.aliquota_ibs) if m.aliquota_ibs is not None else None,
                    reducao_icms_iss=m.reducao_icms_iss,
                )
                for m in CRONOGRAMA
            ],
            regimes_diferenciados=[
                RegimeDiferenciadoDTO(
                    id=r.id,
                    nome=r.nome,
                    percentual_reducao=r.percentual_reducao,
                    descricao=r.descricao,
                    setores=list(r.setores),
                    exemplos=list(r.exemplos),
                )
                for r in REGIMES_DIFERENCIADOS
            ],
            cesta_basica=[
                ItemCestaBasicaDTO(nome=i.nome, categoria=i.categoria, tratamento=i.tratamento.value, descricao=i.descricao)
                for i in CESTA_BASICA
            ],
            cashback=[
                RegraCashbackDTO(
                    categoria=c.categoria,
                    devolucao_cbs=c.devolucao_cbs,
                    devolucao_ibs=c.devolucao_ibs,
                    elegibilidade=c.elegibilidade,
                )
                for c in CASHBACK
            ],
            conceitos_chave=[
                ConceitoChaveDTO(id=c.id, titulo=c.titulo, descricao=c.descricao, itens=list(c.itens))
                for c in CONCEITOS_CHAVE
            ],
        )
