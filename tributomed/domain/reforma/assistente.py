# tributomed/domain/reforma/assistente.py
#
# Nucleo puro do assistente de Reforma Tributaria: montagem de prompts e
# pos-processamento da resposta do modelo. A chamada ao LLM fica na camada
# de aplicacao.
#
# Design decisions:
#   - O historico enviado ao modelo e limitado as ultimas 5 mensagens.
#   - Topicos relacionados e nivel de complexidade sao derivados por palavras-
#     chave sobre texto normalizado (maiusculas, sem acentos).
#   - Referencias legais preservam a grafia encontrada na resposta e a ordem
#     da primeira ocorrencia.
from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum

from tributomed.domain.texto import formatar_numero_br, normalizar

from .conhecimento import CASHBACK, CESTA_BASICA, CONCEITOS_CHAVE, CRONOGRAMA, REGIMES_DIFERENCIADOS

MAX_HISTORICO = 5
MAX_TOPICOS = 5
TEMPERATURA = 0.7
MAX_TOKENS = 2000
MENSAGEM_ERRO = "Desculpe, ocorreu um erro ao processar sua pergunta. Por favor, tente novamente."


class PapelMensagem(StrEnum):
    USUARIO = "user"
    ASSISTENTE = "assistant"


class NivelComplexidade(StrEnum):
    BASICO = "basico"
    INTERMEDIARIO = "intermediario"
    AVANCADO = "avancado"


@dataclass(frozen=True)
class MensagemChat:
    papel: PapelMensagem
    conteudo: str


@dataclass(frozen=True)
class ContextoCliente:
    regime_atual: str | None = None
    faturamento_anual: Decimal | None = None
    setor: str | None = None


@dataclass(frozen=True)
class PerguntaAssistente:
    pergunta: str
    historico: tuple[MensagemChat, ...] = ()
    contexto: ContextoCliente | None = None

    def __post_init__(self) -> None:
        if not self.pergunta.strip():
            raise ValueError("Pergunta nao pode estar vazia")


@dataclass(frozen=True)
class RespostaAssistente:
    sucesso: bool
    mensagem: str
    referencias_legais: tuple[str, ...] = ()
    topicos_relacionados: tuple[str, ...] = ()
    nivel_complexidade: NivelComplexidade = NivelComplexidade.BASICO
    erro: str | None = field(default=None)


_REFERENCIAS_LEGAIS = (
    re.compile(r"LC\s*214/2025", re.IGNORECASE),
    re.compile(r"Lei Complementar\s*214/2025", re.IGNORECASE),
    re.compile(r"PLP\s*108/2024", re.IGNORECASE),
    re.compile(r"Projeto de Lei Complementar\s*108/2024", re.IGNORECASE),
    re.compile(r"EC\s*132/2023", re.IGNORECASE),
    re.compile(r"Emenda Constitucional\s*132/2023", re.IGNORECASE),
)

_MAPA_TOPICOS: dict[str, tuple[str, ...]] = {
    "CBS": ("IBS - Imposto sobre Bens e Servicos", "Split Payment", "Creditamento"),
    "IBS": ("CBS - Contribuicao sobre Bens e Servicos", "Transicao 2029-2032", "ICMS e ISS"),
    "SIMPLES": ("Regime Hibrido no Simples", "Sublimites Estaduais", "Creditamento para Clientes"),
    "PRESUMIDO": ("Lucro Real", "Planejamento Tributario", "Migracao de Regime"),
    "CASHBACK": ("Cesta Basica", "Devolucao de Tributos", "Cadastro Unico"),
    "SPLIT PAYMENT": ("Retencao Automatica", "Fluxo de Caixa", "Sistema Bancario"),
    "CESTA BASICA": ("Aliquota Zero", "Produtos Essenciais", "Cashback"),
    "TRANSICAO": ("Cronograma 2026-2033", "Ano-Teste 2026", "Extincao ICMS/ISS"),
}

_TERMOS_TECNICOS = (
    "CREDITAMENTO",
    "SPLIT PAYMENT",
    "NAO CUMULATIVIDADE",
    "ALIQUOTA EFETIVA",
    "REGIME HIBRIDO",
    "COMITE GESTOR",
    "IMPOSTO SELETIVO",
    "PRINCIPIO DO DESTINO",
)


def _contexto_conhecimento() -> str:
    linhas = ["## CRONOGRAMA DA REFORMA TRIBUTARIA (2026-2033)", ""]
    for marco in CRONOGRAMA:
        linhas.append(f"**{marco.ano}** - {marco.fase}")
        linhas += [f"  - {m}" for m in marco.mudancas]

    linhas += ["", "## REGIMES DIFERENCIADOS", ""]
    for regime in REGIMES_DIFERENCIADOS:
        linhas.append(f"**{regime.nome}**: {regime.descricao}")
        linhas.append(f"Setores: {', '.join(regime.setores)}")

    linhas += ["", "## CESTA BASICA NACIONAL", ""]
    linhas += [f"- {item.nome} ({item.categoria}, {item.tratamento})" for item in CESTA_BASICA]

    linhas += ["", "## REGRAS DE CASHBACK", ""]
    for regra in CASHBACK:
        linhas.append(
            f"**{regra.categoria}**: CBS {regra.devolucao_cbs}% / IBS {regra.devolucao_ibs}% ({regra.elegibilidade})"
        )

    linhas += ["", "## CONCEITOS-CHAVE", ""]
    linhas += [f"**{c.titulo}**: {c.descricao}" for c in CONCEITOS_CHAVE]
    return "\n".join(linhas)


def montar_prompt_sistema() -> str:
    return f"""Voce e um Especialista em Reforma Tributaria Brasileira, com profundo conhecimento da Lei \
Complementar 214/2025 e do Projeto de Lei Complementar 108/2024.

## SUA MISSAO
Auxiliar profissionais da contabilidade e empresarios a compreender e se preparar para a transicao \
tributaria de 2026 a 2033.

## BASE DE CONHECIMENTO
{_contexto_conhecimento()}

## DIRETRIZES
1. Comece respondendo objetivamente a pergunta.
2. Cite as bases legais (LC 214/2025, PLP 108/2024, EC 132/2023).
3. Explique o impacto pratico para empresas e contribuintes.
4. Mencione prazos do cronograma quando aplicavel.
5. Sugira proximos passos ou topicos relacionados.

Use Markdown, destaque termos importantes em negrito e use listas. Se a pergunta estiver fora do escopo da \
Reforma Tributaria, seja honesto sobre as limitacoes e indique as fontes oficiais \
(www.gov.br/fazenda/reforma-tributaria) ou um contador especializado."""


def montar_prompt_usuario(entrada: PerguntaAssistente) -> str:
    partes: list[str] = []
    if entrada.historico:
        partes.append("## HISTORICO DA CONVERSA\n")
        for msg in entrada.historico[-MAX_HISTORICO:]:
            papel = "USUARIO" if msg.papel is PapelMensagem.USUARIO else "ASSISTENTE"
            partes.append(f"**{papel}**: {msg.conteudo}\n")
        partes.append("\n---\n")

    ctx = entrada.contexto
    if ctx is not None:
        partes.append("## CONTEXTO DO CLIENTE\n")
        if ctx.regime_atual:
            partes.append(f"- Regime Tributario Atual: {ctx.regime_atual}")
        if ctx.faturamento_anual:
            partes.append(f"- Faturamento Anual: R$ {formatar_numero_br(ctx.faturamento_anual)}")
        if ctx.setor:
            partes.append(f"- Setor: {ctx.setor}")
        partes.append("\n")

    partes.append(f"## PERGUNTA ATUAL\n{entrada.pergunta}")
    return "\n".join(partes)


def extrair_referencias_legais(texto: str) -> tuple[str, ...]:
    encontradas: dict[str, None] = {}
    for padrao in _REFERENCIAS_LEGAIS:
        for match in padrao.finditer(texto):
            encontradas[match.group(0).strip()] = None
    return tuple(encontradas)


def extrair_topicos_relacionados(resposta: str, pergunta: str) -> tuple[str, ...]:
    texto = normalizar(f"{pergunta} {resposta}")
    topicos: dict[str, None] = {}
    for chave, relacionados in _MAPA_TOPICOS.items():
        if chave in texto:
            topicos.update(dict.fromkeys(relacionados))
    return tuple(topicos)[:MAX_TOPICOS]


def avaliar_complexidade(texto: str) -> NivelComplexidade:
    normalizado = normalizar(texto)
    termos = sum(1 for t in _TERMOS_TECNICOS if t in normalizado)
    if termos >= 4:
        return NivelComplexidade.AVANCADO
    if termos >= 2:
        return NivelComplexidade.INTERMEDIARIO
    return NivelComplexidade.BASICO


def processar_resposta(texto: str, pergunta: str) -> RespostaAssistente:
    return RespostaAssistente(
        sucesso=True,
        mensagem=texto,
        referencias_legais=extrair_referencias_legais(texto),
        topicos_relacionados=extrair_topicos_relacionados(texto, pergunta),
        nivel_complexidade=avaliar_complexidade(texto),
    )


def resposta_de_erro(erro: str) -> RespostaAssistente:
    return RespostaAssistente(sucesso=False, mensagem=MENSAGEM_ERRO, erro=erro)
