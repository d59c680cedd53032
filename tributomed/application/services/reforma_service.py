# tributomed/application/services/reforma_service.py
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from openai import OpenAIError

from tributomed.domain.reforma.assistente import (
    MAX_TOKENS,
    TEMPERATURA,
    PerguntaAssistente,
    montar_prompt_sistema,
    montar_prompt_usuario,
    processar_resposta,
    resposta_de_erro,
)
from tributomed.domain.reforma.comparativo import DadosClienteReforma, gerar_relatorio_impacto
from tributomed.domain.reforma.impacto import calcular_impacto_reforma
from tributomed.domain.tributos.entities import PerfilTributario
from tributomed.domain.tributos.motor import gerar_cenarios
from tributomed.infrastructure.llm_client import ModeloLinguagem

from ..dtos.reforma_dto import ImpactoReformaDTO, RelatorioImpactoDTO, RespostaAssistenteDTO

logger = logging.getLogger(__name__)


class ReformaService:
    def __init__(self, llm: ModeloLinguagem | None = None) -> None:
        self._llm = llm

    def impacto(
        self,
        faturamento_mensal: Decimal,
        regime_atual: str,
        perfil: PerfilTributario | None = None,
    ) -> ImpactoReformaDTO:
        cenarios = gerar_cenarios(perfil) if perfil is not None else []
        impacto = calcular_impacto_reforma(faturamento_mensal, regime_atual, cenarios)
        return ImpactoReformaDTO.from_domain(impacto)

    def relatorio(self, perfil: PerfilTributario, dados: DadosClienteReforma) -> RelatorioImpactoDTO:
        relatorio = gerar_relatorio_impacto(gerar_cenarios(perfil), dados, date.today())
        return RelatorioImpactoDTO.from_domain(relatorio)

    def perguntar(self, pergunta: PerguntaAssistente) -> RespostaAssistenteDTO:
        """Resposta do assistente. Falha do modelo vira resposta com sucesso=False."""
        if self._llm is None:
            return RespostaAssistenteDTO.from_domain(resposta_de_erro("Assistente indisponivel: OPENAI_API_KEY ausente"))
        try:
            texto = self._llm.completar(
                montar_prompt_sistema(),
                montar_prompt_usuario(pergunta),
                TEMPERATURA,
                MAX_TOKENS,
            )
        except OpenAIError as err:
            logger.warning("Assistente da reforma falhou: %s", err)
            return RespostaAssistenteDTO.from_domain(resposta_de_erro(str(err)))
        return RespostaAssistenteDTO.from_domain(processar_resposta(texto, pergunta.pergunta))
