# tributomed/domain/tributos/irpf.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .constantes import TABELA_IRRF, faixa_para
from .entities import Cenario
from .enums import TipoCenario
from .folha import calcular_irrf

_REGIMES: dict[TipoCenario, str] = {
    TipoCenario.SIMPLES_ANEXO_III: "Simples Nacional Anexo III",
    TipoCenario.SIMPLES_ANEXO_V: "Simples Nacional Anexo V",
    TipoCenario.PRESUMIDO: "Lucro Presumido",
    TipoCenario.PRESUMIDO_UNIPROFISSIONAL: "Lucro Presumido",
    TipoCenario.PRESUMIDO_HOSPITALAR: "Lucro Presumido",
    TipoCenario.PRESUMIDO_MISTO: "Lucro Presumido",
    TipoCenario.LUCRO_REAL: "Lucro Real",
}


@dataclass(frozen=True)
class ImpactoIRPF:
    regime: str
    rendimento_tributavel: Decimal
    faixa: str
    irpf_devido: Decimal
    deducoes: Decimal
    impacto_liquido: Decimal
    resumo: str


def regime_do_cenario(cenario: Cenario) -> str | None:
    """Regime de IRPF do socio para cenarios com pro-labore; None para PF e MEI."""
    if cenario.pro_labore is None:
        return None
    return _REGIMES.get(cenario.tipo)


def rotulo_faixa(base: Decimal) -> str:
    """Aliquota da faixa no formato brasileiro: '27,5%'."""
    aliquota = faixa_para(TABELA_IRRF, base).aliquota * 100
    return f"{aliquota:.1f}".replace(".", ",") + "%"


def calcular_impacto_irpf(regime: str, pro_labore: Decimal, inss: Decimal) -> ImpactoIRPF:
    """IRPF mensal do socio sobre o pro-labore. Dividendos sao isentos."""
    base = pro_labore - inss
    irpf = calcular_irrf(base)
    faixa = rotulo_faixa(base)
    resumo = (
        f"Considerando o regime {regime}, com um pro-labore de R$ {pro_labore:.2f} e deducao de INSS "
        f"de R$ {inss:.2f}, a base de calculo e de R$ {base:.2f}. Isso enquadra o cliente na faixa de "
        f"{faixa}, resultando em um IRPF estimado de R$ {irpf:.2f}."
    )
    return ImpactoIRPF(
        regime=regime,
        rendimento_tributavel=base,
        faixa=faixa,
        irpf_devido=irpf,
        deducoes=inss,
        impacto_liquido=irpf,
        resumo=resumo,
    )


def impactos_irpf(cenarios: list[Cenario]) -> dict[str, ImpactoIRPF]:
    """Impacto no IRPF por nome de cenario, apenas onde ha pro-labore."""
    impactos: dict[str, ImpactoIRPF] = {}
    for cenario in cenarios:
        regime = regime_do_cenario(cenario)
        if regime is None or cenario.pro_labore is None:
            continue
        impactos[cenario.nome] = calcular_impacto_irpf(regime, cenario.pro_labore.base, cenario.pro_labore.inss)
    return impactos
