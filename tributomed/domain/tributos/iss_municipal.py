# tributomed/domain/tributos/iss_municipal.py
#
# ISS por municipio: aliquota variavel e ISS fixo anual por profissional
# habilitado em Sociedade Uniprofissional (SUP).
#
# Design decisions:
#   - Chave da tabela = nome do municipio em maiusculas, sem acentos.
#   - Municipio desconhecido recebe o padrao conservador (5%, R$ 300/mes),
#     preservando o nome informado para exibicao.
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from tributomed.domain.texto import normalizar


@dataclass(frozen=True)
class ISSMunicipal:
    municipio: str
    uf: str
    aliquota: Decimal  # percentual
    iss_fixo_anual_por_profissional: Decimal
    legislacao: str | None = None

    @property
    def iss_fixo_mensal(self) -> Decimal:
        return self.iss_fixo_anual_por_profissional / 12


def _anual(valor: str) -> Decimal:
    return Decimal(valor) * 12


ISS_PADRAO = ISSMunicipal("Padrao", "", Decimal("5"), _anual("300"))

ISS_MUNICIPIOS: dict[str, ISSMunicipal] = {
    # Minas Gerais
    "MONTES CLAROS": ISSMunicipal("Montes Claros", "MG", Decimal("4"), _anual("119.71"), "CTM Montes Claros"),
    "BELO HORIZONTE": ISSMunicipal("Belo Horizonte", "MG", Decimal("5"), _anual("350"), "Lei Municipal 5.641/1989"),
    "UBERLANDIA": ISSMunicipal("Uberlandia", "MG", Decimal("5"), _anual("320"), "CTM Uberlandia"),
    "JUIZ DE FORA": ISSMunicipal("Juiz de Fora", "MG", Decimal("5"), _anual("300"), "CTM Juiz de Fora"),
    "CONTAGEM": ISSMunicipal("Contagem", "MG", Decimal("5"), _anual("280"), "CTM Contagem"),
    "BETIM": ISSMunicipal("Betim", "MG", Decimal("5"), _anual("280"), "CTM Betim"),
    "GOVERNADOR VALADARES": ISSMunicipal(
        "Governador Valadares", "MG", Decimal("5"), _anual("250"), "CTM Gov. Valadares"
    ),
    "IPATINGA": ISSMunicipal("Ipatinga", "MG", Decimal("5"), _anual("280"), "CTM Ipatinga"),
    # Capitais
    "SAO PAULO": ISSMunicipal("Sao Paulo", "SP", Decimal("5"), _anual("300"), "Lei Municipal 13.701/2003"),
    "RIO DE JANEIRO": ISSMunicipal("Rio de Janeiro", "RJ", Decimal("5"), _anual("400"), "CTM Rio de Janeiro"),
    "BRASILIA": ISSMunicipal("Brasilia", "DF", Decimal("5"), _anual("350"), "Lei Complementar 687/2003"),
    "CURITIBA": ISSMunicipal("Curitiba", "PR", Decimal("5"), _anual("320"), "CTM Curitiba"),
    "PORTO ALEGRE": ISSMunicipal("Porto Alegre", "RS", Decimal("5"), _anual("350"), "CTM Porto Alegre"),
    "SALVADOR": ISSMunicipal("Salvador", "BA", Decimal("5"), _anual("300"), "CTM Salvador"),
    "FORTALEZA": ISSMunicipal("Fortaleza", "CE", Decimal("5"), _anual("280"), "CTM Fortaleza"),
    "RECIFE": ISSMunicipal("Recife", "PE", Decimal("5"), _anual("300"), "CTM Recife"),
}


def consultar_iss(municipio: str) -> ISSMunicipal:
    encontrado = ISS_MUNICIPIOS.get(normalizar(municipio))
    if encontrado is not None:
        return encontrado
    return replace(ISS_PADRAO, municipio=municipio.strip() or ISS_PADRAO.municipio)


def iss_fixo_mensal(municipio: str) -> Decimal:
    return consultar_iss(municipio).iss_fixo_mensal
