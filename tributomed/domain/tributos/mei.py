# tributomed/domain/tributos/mei.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .constantes import DAS_MEI_ICMS, DAS_MEI_INSS, DAS_MEI_ISS, LIMITE_MEI_ANUAL
from .entities import Atividade
from .enums import TipoAtividade


@dataclass(frozen=True)
class ResultadoMEI:
    elegivel: bool
    nota: str
    inss: Decimal
    icms: Decimal
    iss: Decimal

    @property
    def total(self) -> Decimal:
        return self.inss + self.icms + self.iss


def verificar_mei(faturamento_anual: Decimal, atividades: tuple[Atividade, ...]) -> ResultadoMEI:
    """Elegibilidade e DAS fixo do MEI.

    Todas as atividades precisam ser permitidas no MEI e o faturamento anual
    nao pode exceder o limite. O DAS soma INSS (5% do salario minimo), ICMS
    quando ha comercio ou industria e ISS quando ha servico.
    """
    dentro_do_limite = faturamento_anual <= LIMITE_MEI_ANUAL
    atividades_permitidas = all(a.elegivel_mei for a in atividades)

    if not dentro_do_limite:
        nota = (
            f"Faturamento anual projetado (R$ {faturamento_anual:.2f}) excede "
            f"o limite do MEI (R$ {LIMITE_MEI_ANUAL:.2f})."
        )
    elif not atividades_permitidas:
        nota = "Possui atividades nao permitidas no MEI."
    else:
        nota = "Elegivel ao MEI."

    tem_comercio = any(a.tipo in (TipoAtividade.COMERCIO, TipoAtividade.INDUSTRIA) for a in atividades)
    tem_servico = any(a.tipo is TipoAtividade.SERVICO for a in atividades)
    return ResultadoMEI(
        elegivel=dentro_do_limite and atividades_permitidas,
        nota=nota,
        inss=DAS_MEI_INSS,
        icms=DAS_MEI_ICMS if tem_comercio else Decimal("0"),
        iss=DAS_MEI_ISS if tem_servico else Decimal("0"),
    )
