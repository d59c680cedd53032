# tributomed/domain/reforma/impacto.py
#
# Estimativa do impacto da Reforma Tributaria ano a ano (2026-2033) sobre a
# carga de tributos sobre consumo do cliente.
#
# Design decisions:
#   - Carga atual vem do cenario cujo nome contem o regime informado, com
#     preferencia pelos elegiveis (PIS/COFINS, ICMS e ISS lidos da
#     composicao). Sem cenario correspondente,
#     usa estimativas por regime: Simples 6% (ate R$ 180 mil/mes) ou 11,2%;
#     Presumido 3,65% + ISS 5%; Real 9,25% + ICMS 12%.
#   - 2026 e neutro: CBS 0,9% e IBS 0,1% sao integralmente compensaveis.
#   - 2029-2032: a cada ano mais 10% de ICMS/ISS e substituido por IBS.
#   - 2033: CBS 12% + IBS 14,5% sobre o faturamento.
#
# Invariants:
#   - percentual_mudanca e zero quando a carga atual e zero.
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from tributomed.domain.texto import normalizar
from tributomed.domain.tributos.entities import Cenario

_ZERO = Decimal("0")
_CEM = Decimal("100")

CBS_TESTE = Decimal("0.009")
IBS_TESTE = Decimal("0.001")
CBS_PLENA = Decimal("0.12")
IBS_PLENO = Decimal("0.145")
ANOS_TRANSICAO = (2029, 2030, 2031, 2032)
_LIMITE_SIMPLES_REDUZIDO = Decimal("180000")
_LIMIAR_AUMENTO = Decimal("0.10")


class TipoAlertaReforma(StrEnum):
    ATENCAO = "atencao"
    OPORTUNIDADE = "oportunidade"
    RISCO = "risco"


@dataclass(frozen=True)
class AlertaReforma:
    tipo: TipoAlertaReforma
    titulo: str
    descricao: str


@dataclass(frozen=True)
class CargaAtual:
    pis_cofins: Decimal
    total: Decimal
    icms: Decimal | None = None
    iss: Decimal | None = None


@dataclass(frozen=True)
class Projecao2026:
    cbs_teste: Decimal
    ibs_teste: Decimal
    compensacao_pis_cofins: Decimal
    impacto_liquido: Decimal


@dataclass(frozen=True)
class Projecao2027:
    cbs: Decimal
    imposto_seletivo: Decimal
    total: Decimal


@dataclass(frozen=True)
class AnoTransicao:
    ano: int
    icms_percentual: int
    iss_percentual: int
    ibs_percentual: int
    carga_total_estimada: Decimal


@dataclass(frozen=True)
class Projecao2033:
    cbs: Decimal
    ibs: Decimal
    total: Decimal
    diferenca_vs_atual: Decimal
    percentual_mudanca: Decimal


@dataclass(frozen=True)
class ImpactoReforma:
    regime_atual: str
    faturamento_mensal: Decimal
    carga_atual: CargaAtual
    projecao_2026: Projecao2026
    projecao_2027: Projecao2027
    transicao_ibs: tuple[AnoTransicao, ...]
    projecao_2033: Projecao2033
    recomendacoes: tuple[str, ...]
    alertas: tuple[AlertaReforma, ...]


def _simples(regime: str) -> bool:
    return "SIMPLES" in normalizar(regime)


def estimar_carga_atual(regime: str, faturamento: Decimal, cenarios: list[Cenario]) -> CargaAtual:
    alvo = normalizar(regime)
    candidatos = [c for c in cenarios if alvo and alvo in normalizar(c.nome)]
    cenario = next((c for c in candidatos if c.elegivel), candidatos[0] if candidatos else None)
    if cenario is not None:
        pis_cofins = cenario.item("PIS") or cenario.item("COFINS")
        icms = cenario.item("ICMS")
        iss = cenario.item("ISS")
        return CargaAtual(
            pis_cofins=pis_cofins.valor if pis_cofins else _ZERO,
            icms=icms.valor if icms else None,
            iss=iss.valor if iss else None,
            total=cenario.imposto_total,
        )

    if _simples(regime):
        aliquota = Decimal("0.06") if faturamento <= _LIMITE_SIMPLES_REDUZIDO else Decimal("0.112")
        return CargaAtual(pis_cofins=_ZERO, total=faturamento * aliquota)
    if "PRESUMIDO" in alvo:
        return CargaAtual(
            pis_cofins=faturamento * Decimal("0.0365"),
            iss=faturamento * Decimal("0.05"),
            total=faturamento * Decimal("0.0865"),
        )
    return CargaAtual(
        pis_cofins=faturamento * Decimal("0.0925"),
        icms=faturamento * Decimal("0.12"),
        total=faturamento * Decimal("0.2125"),
    )


def _transicao(faturamento: Decimal, carga: CargaAtual, cbs_2027: Decimal) -> tuple[AnoTransicao, ...]:
    ibs_2033 = faturamento * IBS_PLENO
    anos = []
    for ano in ANOS_TRANSICAO:
        reducao = (ano - ANOS_TRANSICAO[0] + 1) * 10
        fracao = Decimal(reducao) / _CEM
        icms = (carga.icms or _ZERO) * (1 - fracao)
        iss = (carga.iss or _ZERO) * (1 - fracao)
        anos.append(
            AnoTransicao(
                ano=ano,
                icms_percentual=100 - reducao,
                iss_percentual=100 - reducao,
                ibs_percentual=reducao,
                carga_total_estimada=cbs_2027 + icms + iss + ibs_2033 * fracao,
            )
        )
    return tuple(anos)


def _recomendacoes(regime: str, atual: Decimal, futura: Decimal) -> tuple[str, ...]:
    recomendacoes: list[str] = []
    if atual > 0 and futura > atual and (futura - atual) / atual * _CEM > 10:
        recomendacoes += [
            "Prepare-se para aumento significativo da carga tributaria a partir de 2027",
            "Considere revisar precificacao e margens de lucro",
            "Avalie migracao de regime tributario antes de 2027",
        ]
    if _simples(regime):
        recomendacoes += [
            "Avalie a opcao pelo Regime Hibrido no Simples para transferir creditos plenos aos clientes",
            "Clientes B2B podem preferir fornecedores que geram credito de CBS/IBS",
        ]
    recomendacoes += [
        "Prepare sistemas para Split Payment: o imposto sera retido automaticamente",
        "Capacite a equipe sobre creditamento amplo e as novas regras",
        "Revise contratos de fornecimento considerando o novo modelo de creditos",
    ]
    return tuple(recomendacoes)


def _alertas(regime: str, atual: Decimal, futura: Decimal) -> tuple[AlertaReforma, ...]:
    alertas: list[AlertaReforma] = []
    diferenca = futura - atual
    if atual > 0 and diferenca > atual * _LIMIAR_AUMENTO:
        alertas.append(
            AlertaReforma(
                TipoAlertaReforma.RISCO,
                "Aumento Significativo Previsto",
                f"A carga tributaria pode aumentar em {diferenca / atual * _CEM:.1f}% ate 2033. "
                "Planeje ajustes financeiros.",
            )
        )
    if diferenca < 0:
        reducao = abs(diferenca / atual * _CEM) if atual > 0 else _ZERO
        alertas.append(
            AlertaReforma(
                TipoAlertaReforma.OPORTUNIDADE,
                "Reducao de Carga Tributaria",
                f"Estimativa de reducao de {reducao:.1f}% na carga total.",
            )
        )
    alertas.append(
        AlertaReforma(
            TipoAlertaReforma.ATENCAO,
            "Split Payment em 2027",
            "O imposto sera retido automaticamente nas transacoes bancarias. Ajuste o fluxo de caixa.",
        )
    )
    if _simples(regime):
        alertas.append(
            AlertaReforma(
                TipoAlertaReforma.OPORTUNIDADE,
                "Regime Hibrido Disponivel",
                "Empresas do Simples podem recolher CBS/IBS no regime regular mantendo os demais tributos no "
                "Simples.",
            )
        )
    return tuple(alertas)


def calcular_impacto_reforma(
    faturamento: Decimal,
    regime_atual: str,
    cenarios: list[Cenario] | None = None,
) -> ImpactoReforma:
    """Projeta a carga sobre consumo de 2026 a 2033 para o regime informado.

    Args:
        faturamento: Faturamento mensal.
        regime_atual: Nome (ou trecho do nome) do regime atual, ex: "Lucro Presumido".
        cenarios: Cenarios do motor; o primeiro cujo nome contem o regime fornece a carga atual.

    Raises:
        ValueError: faturamento negativo.
    """
    if faturamento < 0:
        raise ValueError("Faturamento mensal nao pode ser negativo")

    carga = estimar_carga_atual(regime_atual, faturamento, cenarios or [])

    cbs_teste = faturamento * CBS_TESTE
    ibs_teste = faturamento * IBS_TESTE
    cbs_2027 = faturamento * CBS_PLENA
    cbs_2033 = faturamento * CBS_PLENA
    ibs_2033 = faturamento * IBS_PLENO
    total_2033 = cbs_2033 + ibs_2033
    diferenca = total_2033 - carga.total

    return ImpactoReforma(
        regime_atual=regime_atual,
        faturamento_mensal=faturamento,
        carga_atual=carga,
        projecao_2026=Projecao2026(
            cbs_teste=cbs_teste,
            ibs_teste=ibs_teste,
            compensacao_pis_cofins=cbs_teste + ibs_teste,
            impacto_liquido=_ZERO,
        ),
        projecao_2027=Projecao2027(cbs=cbs_2027, imposto_seletivo=_ZERO, total=cbs_2027),
        transicao_ibs=_transicao(faturamento, carga, cbs_2027),
        projecao_2033=Projecao2033(
            cbs=cbs_2033,
            ibs=ibs_2033,
            total=total_2033,
            diferenca_vs_atual=diferenca,
            percentual_mudanca=diferenca / carga.total * _CEM if carga.total > 0 else _ZERO,
        ),
        recomendacoes=_recomendacoes(regime_atual, carga.total, total_2033),
        alertas=_alertas(regime_atual, carga.total, total_2033),
    )
