# tributomed/application/services/cenario_service.py
from __future__ import annotations

from tributomed.domain.tributos.entities import PerfilTributario
from tributomed.domain.tributos.irpf import impactos_irpf
from tributomed.domain.tributos.iss_municipal import consultar_iss
from tributomed.domain.tributos.motor import gerar_cenarios, melhor_cenario
from tributomed.domain.tributos.projecoes import ponto_de_equilibrio, projetar_faturamento

from ..dtos.cenario_dto import (
    ISSDTO,
    CenarioDTO,
    ImpactoIRPFDTO,
    PontoEquilibrioDTO,
    ProjecaoDTO,
    SimulacaoDTO,
)


class CenarioService:
    """Simulacao sem persistencia: motor, IRPF por cenario e projecoes."""

    def simular(self, perfil: PerfilTributario) -> SimulacaoDTO:
        cenarios = gerar_cenarios(perfil)
        melhor = melhor_cenario(cenarios)
        return SimulacaoDTO(
            cenarios=[CenarioDTO.from_domain(c) for c in cenarios],
            melhor_cenario=CenarioDTO.from_domain(melhor) if melhor else None,
            impactos_irpf={nome: ImpactoIRPFDTO.from_domain(i) for nome, i in impactos_irpf(cenarios).items()},
            projecoes=[ProjecaoDTO.from_domain(p) for p in projetar_faturamento(perfil)],
            ponto_equilibrio=PontoEquilibrioDTO.from_domain(ponto_de_equilibrio(perfil)),
        )

    def consultar_iss(self, municipio: str) -> ISSDTO:
        return ISSDTO.from_domain(consultar_iss(municipio))
