# tributomed/domain/reforma/comparativo.py
#
# Converte cenarios atuais no equivalente pos-reforma (CBS + IBS) e monta o
# relatorio de impacto apresentado ao cliente.
#
# Design decisions:
#   - Aliquota de referencia: CBS 8,5% + IBS 8,5% (17%). Setor de saude
#     (texto contendo SAUDE, MEDIC ou CLINICA) recebe a reducao de 60%.
#   - O melhor cenario atual e o mais barato entre os elegiveis; sem
#     elegiveis, o mais barato de todos.
#   - A data de referencia e recebida do chamador para manter o modulo puro.
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import StrEnum

from tributomed.domain.texto import normalizar
from tributomed.domain.tributos.entities import Cenario, ItemTributo
from tributomed.domain.tributos.motor import melhor_cenario

_ZERO = Decimal("0")
_CEM = Decimal("100")

ALIQUOTA_CBS_PADRAO = Decimal("8.5")
ALIQUOTA_IBS_PADRAO = Decimal("8.5")
REDUCAO_SAUDE = Decimal("0.60")
_TERMOS_SAUDE = ("SAUDE", "MEDIC", "CLINICA")


class Severidade(StrEnum):
    BAIXA = "low"
    MEDIA = "medium"
    ALTA = "high"


@dataclass(frozen=True)
class CenarioReforma:
    nome: str
    regime: str
    cbs: Decimal
    ibs: Decimal
    imposto_total: Decimal
    aliquota_efetiva: Decimal
    aliquota_padrao: Decimal
    reducao_aplicada: Decimal | None
    composicao: tuple[ItemTributo, ...]
    notas: tuple[str, ...]
    split_payment: bool = True
    creditamento: bool = True


@dataclass(frozen=True)
class Diferenca:
    absoluta: Decimal
    percentual: Decimal
    aumento: bool

    @property
    def mensal(self) -> Decimal:
        return self.absoluta

    @property
    def anual(self) -> Decimal:
        return self.absoluta * 12


@dataclass(frozen=True)
class Destaque:
    titulo: str
    descricao: str


@dataclass(frozen=True)
class Aviso:
    titulo: str
    descricao: str
    severidade: Severidade


@dataclass(frozen=True)
class Comparacao:
    atual: Cenario
    reforma: CenarioReforma
    diferenca: Diferenca
    mudancas_operacionais: tuple[Destaque, ...]
    oportunidades: tuple[Destaque, ...]
    avisos: tuple[Aviso, ...]


@dataclass(frozen=True)
class EtapaTransicao:
    ano: int
    fase: str
    descricao: str
    impacto_esperado: str
    acoes: tuple[str, ...]


@dataclass(frozen=True)
class DadosClienteReforma:
    faturamento_mensal: Decimal
    empresa: str | None = None
    regime: str | None = None
    setor: str | None = None
    cnaes: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResumoExecutivo:
    impacto_geral: str  # "positivo" | "negativo"
    principais_conclusoes: tuple[str, ...]
    recomendacoes: tuple[str, ...]


@dataclass(frozen=True)
class RelatorioImpacto:
    cliente: str
    data_analise: date
    faturamento_mensal: Decimal
    regime_atual: str
    setor: str
    cnaes: tuple[str, ...]
    melhor_atual: Cenario
    melhor_reforma: CenarioReforma
    comparacao: Comparacao
    todas_comparacoes: tuple[Comparacao, ...]
    cronograma: tuple[EtapaTransicao, ...]
    resumo: ResumoExecutivo


CRONOGRAMA_TRANSICAO: tuple[EtapaTransicao, ...] = (
    EtapaTransicao(
        2026,
        "Ano-Teste (Opcional)",
        "Empresas podem testar CBS/IBS em paralelo com o sistema atual",
        "Sem impacto obrigatorio",
        ("Avaliar viabilidade de participacao no teste", "Preparar sistemas para dupla escrituracao"),
    ),
    EtapaTransicao(
        2027,
        "Inicio da Transicao",
        "CBS entra em vigor",
        "Aumento marginal na carga",
        ("Adaptar ERP para CBS", "Treinar equipe contabil", "Revisar precificacao"),
    ),
    EtapaTransicao(
        2029,
        "Extincao Gradual ICMS/ISS",
        "Inicio da reducao de ICMS e ISS, aumento de CBS/IBS",
        "Transicao proporcional",
        ("Monitorar aliquotas efetivas", "Ajustar fluxo de caixa (Split Payment)"),
    ),
    EtapaTransicao(
        2032,
        "Transicao Avancada",
        "CBS/IBS em aliquotas proximas ao final, ICMS/ISS residuais",
        "Impacto proximo ao cenario final",
        ("Validar calculos finais", "Otimizar creditamento"),
    ),
    EtapaTransicao(
        2033,
        "Reforma Completa",
        "Extincao total de ICMS, ISS, PIS e COFINS. Apenas CBS e IBS",
        "Impacto total da reforma",
        ("Operar 100% no novo sistema", "Revisar planejamento tributario"),
    ),
)

_MUDANCAS_OPERACIONAIS = (
    Destaque("Split Payment", "Tributos retidos automaticamente no momento do pagamento."),
    Destaque("Creditamento", "Clientes PJ podem creditar 100% do IBS/CBS, aumentando a competitividade."),
    Destaque(
        "Nota Fiscal",
        "Nota Fiscal Eletronica unificada no padrao nacional, com simplificacao de obrigacoes acessorias.",
    ),
)

_OPORTUNIDADES = (
    Destaque(
        "Creditamento Total",
        "Clientes PJ poderao creditar 100% do CBS/IBS, tornando os servicos mais atrativos.",
    ),
    Destaque(
        "Simplificacao Tributaria",
        "Cinco tributos (ICMS, ISS, PIS, COFINS, IPI) substituidos por dois (CBS, IBS).",
    ),
    Destaque("Fluxo de Caixa Previsivel", "Split Payment garante retencao automatica, eliminando surpresas."),
)

_AVISOS = (
    Aviso(
        "Adaptacao de Sistemas",
        "ERP e sistemas contabeis precisarao ser atualizados para CBS/IBS.",
        Severidade.MEDIA,
    ),
    Aviso(
        "Transicao Gradual",
        "Periodo de 2026 a 2033 com dupla escrituracao e complexidade temporaria.",
        Severidade.MEDIA,
    ),
    Aviso(
        "Treinamento Necessario",
        "A equipe contabil precisara ser treinada no novo sistema tributario.",
        Severidade.BAIXA,
    ),
)


def setor_saude(setor: str | None) -> bool:
    texto = normalizar(setor or "")
    return any(t in texto for t in _TERMOS_SAUDE)


def calcular_cenario_reforma(
    cenario: Cenario,
    faturamento: Decimal,
    setor: str | None = None,
) -> CenarioReforma:
    """Equivalente CBS + IBS do cenario informado."""
    diferenciado = setor_saude(setor)
    reducao = REDUCAO_SAUDE if diferenciado else _ZERO
    cbs = faturamento * ALIQUOTA_CBS_PADRAO * (1 - reducao) / _CEM
    ibs = faturamento * ALIQUOTA_IBS_PADRAO * (1 - reducao) / _CEM
    total = cbs + ibs
    return CenarioReforma(
        nome="CBS + IBS (Regime Diferenciado - Saude)" if diferenciado else "CBS + IBS (Regime Padrao)",
        regime="CBS+IBS (Diferenciado)" if diferenciado else "CBS+IBS",
        cbs=cbs,
        ibs=ibs,
        imposto_total=total,
        aliquota_efetiva=total / faturamento * _CEM if faturamento > 0 else _ZERO,
        aliquota_padrao=ALIQUOTA_CBS_PADRAO + ALIQUOTA_IBS_PADRAO,
        reducao_aplicada=reducao * _CEM if diferenciado else None,
        composicao=(
            ItemTributo("CBS (Federal)", cbs),
            ItemTributo("IBS (Estadual/Municipal)", ibs),
        ),
        notas=(
            f"Reducao de {reducao * _CEM:.0f}% aplicada (setor de saude)"
            if diferenciado
            else "Aliquota padrao aplicada",
            "Split Payment: retencao automatica no pagamento",
            "Creditamento total para clientes PJ",
            "Nota Fiscal Eletronica unificada (padrao nacional)",
        ),
    )


def comparar_cenarios(atual: Cenario, reforma: CenarioReforma) -> Comparacao:
    absoluta = reforma.imposto_total - atual.imposto_total
    percentual = absoluta / atual.imposto_total * _CEM if atual.imposto_total > 0 else _ZERO
    return Comparacao(
        atual=atual,
        reforma=reforma,
        diferenca=Diferenca(absoluta=absoluta, percentual=percentual, aumento=absoluta > 0),
        mudancas_operacionais=_MUDANCAS_OPERACIONAIS,
        oportunidades=_OPORTUNIDADES,
        avisos=_AVISOS,
    )


def gerar_relatorio_impacto(
    cenarios: list[Cenario],
    dados: DadosClienteReforma,
    referencia: date,
) -> RelatorioImpacto:
    """Relatorio comparando o melhor cenario atual com o regime CBS + IBS.

    Raises:
        ValueError: lista de cenarios vazia.
    """
    if not cenarios:
        raise ValueError("Nenhum cenario informado para o relatorio de impacto")

    melhor_atual = melhor_cenario(cenarios) or min(cenarios, key=lambda c: c.imposto_total)
    melhor_reforma = calcular_cenario_reforma(melhor_atual, dados.faturamento_mensal, dados.setor)
    comparacao = comparar_cenarios(melhor_atual, melhor_reforma)
    todas = tuple(
        comparar_cenarios(c, calcular_cenario_reforma(c, dados.faturamento_mensal, dados.setor)) for c in cenarios
    )

    dif = comparacao.diferenca
    conclusoes = (
        f"Regime atual: {melhor_atual.nome} - R$ {melhor_atual.imposto_total:.2f}/mes",
        f"Pos-reforma: {melhor_reforma.nome} - R$ {melhor_reforma.imposto_total:.2f}/mes",
        f"Impacto: {'Aumento' if dif.aumento else 'Reducao'} de R$ {abs(dif.absoluta):.2f}/mes "
        f"({abs(dif.percentual):.1f}%)",
        f"Economia/Custo anual: R$ {abs(dif.anual):.2f}",
    )
    recomendacoes = (
        "Avaliar estrategias de mitigacao do aumento de carga"
        if dif.aumento
        else "Aproveitar a reducao de carga para investimentos",
        "Iniciar preparacao de sistemas para CBS/IBS",
        "Treinar equipe contabil no novo modelo tributario",
        "Monitorar cronograma de transicao (2026-2033)",
    )

    return RelatorioImpacto(
        cliente=dados.empresa or "Cliente",
        data_analise=referencia,
        faturamento_mensal=dados.faturamento_mensal,
        regime_atual=dados.regime or melhor_atual.nome,
        setor=dados.setor or "Nao especificado",
        cnaes=dados.cnaes,
        melhor_atual=melhor_atual,
        melhor_reforma=melhor_reforma,
        comparacao=comparacao,
        todas_comparacoes=todas,
        cronograma=CRONOGRAMA_TRANSICAO,
        resumo=ResumoExecutivo(
            impacto_geral="negativo" if dif.aumento else "positivo",
            principais_conclusoes=conclusoes,
            recomendacoes=recomendacoes,
        ),
    )
