# tributomed/domain/analise/narrativa.py
#
# Resumo executivo da analise: prompt para o modelo de linguagem e o resumo
# deterministico usado quando nao ha modelo ou quando ele falha.
#
# Design decisions:
#   - Os numeros sao sempre do motor. O modelo so redige; o prompt fornece
#     os cenarios ja calculados e proibe recalculo.
#   - Formato Markdown com titulos em negrito: recomendacao atual, projecoes,
#     pontos de atencao.
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from tributomed.domain.compliance.regras import AlertaCompliance
from tributomed.domain.texto import formatar_numero_br
from tributomed.domain.tributos.entities import Cenario
from tributomed.domain.tributos.motor import melhor_cenario
from tributomed.domain.tributos.projecoes import PontoEquilibrio, ProjecaoFaturamento

TEMPERATURA_NARRATIVA = 0.4
MAX_TOKENS_NARRATIVA = 1500

PROMPT_SISTEMA = (
    "Voce e um contador-chefe e consultor de negocios para profissionais da area medica no Brasil, "
    "atualizado com a legislacao vigente de 2025. Responda sempre em portugues do Brasil.\n"
    "Os cenarios tributarios abaixo ja foram calculados: nao recalcule nem altere valores.\n"
    "Escreva um resumo executivo conciso em topicos, usando Markdown com titulos em negrito:\n"
    "- **Recomendacao para o Cenario Atual:** regime mais vantajoso (em R$ e %).\n"
    "- **Analise das Projecoes:** pontos de inflexao de faturamento entre regimes.\n"
    "- **Pontos de Atencao:** aliquota de ISS, elegibilidade a beneficios e alertas de compliance."
)


@dataclass(frozen=True)
class DadosNarrativa:
    faturamento_mensal: Decimal
    cenarios: tuple[Cenario, ...]
    projecoes: tuple[ProjecaoFaturamento, ...]
    ponto_equilibrio: PontoEquilibrio
    alertas: tuple[AlertaCompliance, ...] = ()
    empresa: str = ""
    aliquota_iss: Decimal | None = None
    texto_cliente: str = ""


def _reais(valor: Decimal) -> str:
    return f"R$ {formatar_numero_br(valor)}"


def montar_prompt_narrativa(dados: DadosNarrativa) -> str:
    linhas = [f"Faturamento mensal: {_reais(dados.faturamento_mensal)}"]
    if dados.empresa:
        linhas.append(f"Empresa: {dados.empresa}")
    if dados.aliquota_iss is not None:
        linhas.append(f"Aliquota de ISS informada: {dados.aliquota_iss}%")

    linhas.append("\nCenarios (do mais barato ao mais caro):")
    for c in dados.cenarios:
        situacao = "elegivel" if c.elegivel else f"inelegivel ({c.nota_elegibilidade})"
        linhas.append(f"- {c.nome}: {_reais(c.imposto_total)}/mes, {c.aliquota_efetiva:.2f}% - {situacao}")

    linhas.append("\nProjecoes:")
    for p in dados.projecoes:
        melhor = f"{p.melhor.nome} ({_reais(p.melhor.imposto_total)})" if p.melhor else "nenhum elegivel"
        linhas.append(f"- +{p.crescimento:.0f}% ({_reais(p.faturamento_mensal)}): {melhor}")
    linhas.append(f"\nPonto de equilibrio: {dados.ponto_equilibrio.descricao}")

    if dados.alertas:
        linhas.append("\nAlertas de compliance:")
        linhas.extend(f"- {a.titulo}: {a.descricao}" for a in dados.alertas)
    if dados.texto_cliente:
        linhas.append(f"\nInformacoes do cliente:\n{dados.texto_cliente}")
    return "\n".join(linhas)


def resumo_deterministico(dados: DadosNarrativa) -> str:
    """Resumo em Markdown montado so com os numeros do motor."""
    melhor = melhor_cenario(list(dados.cenarios))
    partes = ["**Recomendacao para o Cenario Atual:**"]
    if melhor is None:
        partes.append("- Nenhum cenario elegivel para o perfil informado.")
    else:
        partes.append(
            f"- {melhor.nome}: {_reais(melhor.imposto_total)}/mes "
            f"({melhor.aliquota_efetiva:.2f}% do faturamento de {_reais(dados.faturamento_mensal)})."
        )
        pior = max((c for c in dados.cenarios if c.elegivel), key=lambda c: c.imposto_total)
        economia = pior.imposto_total - melhor.imposto_total
        if economia > 0:
            partes.append(f"- Economia de {_reais(economia)}/mes em relacao a {pior.nome}.")

    partes.append("\n**Analise das Projecoes:**")
    for p in dados.projecoes:
        if p.melhor is not None:
            partes.append(f"- +{p.crescimento:.0f}% ({_reais(p.faturamento_mensal)}/mes): {p.melhor.nome}.")
    partes.append(f"- {dados.ponto_equilibrio.descricao}")

    partes.append("\n**Pontos de Atencao:**")
    if dados.aliquota_iss is not None:
        partes.append(f"- ISS considerado: {dados.aliquota_iss}%. A aliquota varia por municipio.")
    inelegiveis = [c for c in dados.cenarios if not c.elegivel]
    if inelegiveis:
        partes.append(f"- Cenarios inelegiveis: {', '.join(c.nome for c in inelegiveis)}.")
    partes.extend(f"- {a.titulo}" for a in dados.alertas)
    return "\n".join(partes)
