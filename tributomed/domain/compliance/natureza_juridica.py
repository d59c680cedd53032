# tributomed/domain/compliance/natureza_juridica.py
#
# Deteccao da natureza juridica a partir de texto livre (cartao CNPJ,
# contrato social, razao social).
#
# Design decisions:
#   - Ordem de precedencia: codigos CONCLA/IBGE (mais confiaveis), nomes
#     completos, siglas e por fim MEI. "SLU" tem precedencia sobre "LTDA".
#   - Comparacao feita sobre texto em maiusculas e sem acentos.
from __future__ import annotations

import re
from enum import StrEnum

from tributomed.domain.texto import normalizar


class NaturezaJuridica(StrEnum):
    EI = "EI"
    EIRELI = "EIRELI"
    LTDA = "LTDA"
    SLU = "SLU"
    SA = "SA"
    COOPERATIVA = "COOPERATIVA"
    MEI = "MEI"
    DESCONHECIDA = "DESCONHECIDA"


_CODIGOS_CONCLA: tuple[tuple[re.Pattern[str], NaturezaJuridica], ...] = (
    (re.compile(r"\b213[-\s]?5\b"), NaturezaJuridica.EI),
    (re.compile(r"\b(230[-\s]?5|231[-\s]?3)\b"), NaturezaJuridica.EIRELI),
    (re.compile(r"\b(224[-\s]?0|225[-\s]?9)\b"), NaturezaJuridica.SA),
    (re.compile(r"\b214[-\s]?3\b"), NaturezaJuridica.COOPERATIVA),
)
_CODIGO_LIMITADA = re.compile(r"\b206[-\s]?2\b")

ANALISES: dict[NaturezaJuridica, str] = {
    NaturezaJuridica.EI: (
        "Identificada natureza juridica: Empresario Individual (EI). ATENCAO: responsabilidade ilimitada, "
        "o patrimonio pessoal responde pelas dividas. Nao recomendado para profissionais da saude."
    ),
    NaturezaJuridica.EIRELI: (
        "Identificada natureza juridica: EIRELI. ATENCAO: formato extinto desde 2021. "
        "Recomenda-se migracao para SLU."
    ),
    NaturezaJuridica.SLU: (
        "Identificada natureza juridica: SLU (Sociedade Limitada Unipessoal). Estrutura adequada para "
        "profissional individual com protecao patrimonial."
    ),
    NaturezaJuridica.LTDA: (
        "Identificada natureza juridica: LTDA (Sociedade Limitada). Estrutura adequada para sociedades "
        "com multiplos socios."
    ),
    NaturezaJuridica.SA: (
        "Identificada natureza juridica: S/A (Sociedade Anonima). Estrutura complexa, geralmente utilizada "
        "por grandes empresas."
    ),
    NaturezaJuridica.COOPERATIVA: (
        "Identificada natureza juridica: Cooperativa. Estrutura especifica com regime tributario diferenciado."
    ),
    NaturezaJuridica.MEI: (
        "Identificada natureza juridica: MEI (Microempreendedor Individual). INCOMPATIVEL com atividades "
        "regulamentadas por conselhos profissionais."
    ),
    NaturezaJuridica.DESCONHECIDA: (
        "Natureza juridica nao identificada nos documentos fornecidos. Anexe o Cartao CNPJ ou o Contrato "
        "Social para uma analise precisa."
    ),
}


def _limitada(texto: str) -> NaturezaJuridica:
    if "UNIPESSOAL" in texto or re.search(r"\bSLU\b", texto):
        return NaturezaJuridica.SLU
    return NaturezaJuridica.LTDA


def detectar_natureza_juridica(texto: str) -> NaturezaJuridica:
    t = normalizar(texto)

    if _CODIGO_LIMITADA.search(t):
        return _limitada(t)
    for padrao, natureza in _CODIGOS_CONCLA:
        if padrao.search(t):
            return natureza

    if "SOCIEDADE LIMITADA UNIPESSOAL" in t:
        return NaturezaJuridica.SLU
    if "SOCIEDADE EMPRESARIA LIMITADA" in t or "SOCIEDADE SIMPLES LIMITADA" in t:
        return _limitada(t)
    if "SOCIEDADE ANONIMA" in t:
        return NaturezaJuridica.SA
    if "EMPRESARIO INDIVIDUAL" in t:
        return NaturezaJuridica.EI

    if "EIRELI" in t or "EMPRESA INDIVIDUAL DE RESPONSABILIDADE LIMITADA" in t:
        return NaturezaJuridica.EIRELI
    if re.search(r"\bSLU\b", t):
        return NaturezaJuridica.SLU
    if re.search(r"\bLTDA\b", t) or "LIMITADA" in t:
        return NaturezaJuridica.LTDA
    if "S/A" in t or re.search(r"\bS\.A\.?", t):
        return NaturezaJuridica.SA
    if "COOPERATIVA" in t:
        return NaturezaJuridica.COOPERATIVA
    if re.search(r"\bMEI\b", t) or "MICROEMPREENDEDOR INDIVIDUAL" in t:
        return NaturezaJuridica.MEI
    return NaturezaJuridica.DESCONHECIDA


def analisar_natureza_juridica(texto: str) -> str:
    return ANALISES[detectar_natureza_juridica(texto)]
