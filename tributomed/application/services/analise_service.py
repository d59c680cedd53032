# tributomed/application/services/analise_service.py
#
# Fluxo completo da analise de um cliente.
#
# Design decisions:
#   - Imperative Shell: extracao de anexos, LLM, webhook e persistencia
#     ficam aqui; todo calculo vem do nucleo puro (motor, compliance, IRPF,
#     projecoes, reforma).
#   - O modelo de linguagem so redige o resumo executivo. Sem modelo, ou com
#     falha do modelo, o resumo deterministico e usado e a analise segue.
#   - O conteudo persistido e o proprio AnaliseDTO serializado; o historico
#     reconstroi o DTO com model_validate.
#
# Invariants:
#   - Nenhum IO acontece antes de validar_entrada.
#   - Toda analise aceita e persistida, inclusive quando o webhook falha.
from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from decimal import Decimal

from openai import OpenAIError

from tributomed.domain.analise.entities import ArquivoAnexo, EntradaAnalise, RegistroAnalise, validar_entrada
from tributomed.domain.analise.narrativa import (
    MAX_TOKENS_NARRATIVA,
    PROMPT_SISTEMA,
    TEMPERATURA_NARRATIVA,
    DadosNarrativa,
    montar_prompt_narrativa,
    resumo_deterministico,
)
from tributomed.domain.analise.repository import AnaliseRepository
from tributomed.domain.cliente.value_objects import formatar_cnae
from tributomed.domain.compliance.natureza_juridica import analisar_natureza_juridica
from tributomed.domain.compliance.regras import DadosCompliance, avaliar_compliance
from tributomed.domain.reforma.comparativo import DadosClienteReforma, gerar_relatorio_impacto
from tributomed.domain.reforma.impacto import calcular_impacto_reforma
from tributomed.domain.tributos.entities import PerfilTributario
from tributomed.domain.tributos.irpf import impactos_irpf
from tributomed.domain.tributos.iss_municipal import consultar_iss
from tributomed.domain.tributos.motor import gerar_cenarios, melhor_cenario
from tributomed.domain.tributos.projecoes import ponto_de_equilibrio, projetar_faturamento
from tributomed.infrastructure.llm_client import ModeloLinguagem
from tributomed.infrastructure.webhook_client import WebhookClient

from ..dtos.analise_dto import AlertaComplianceDTO, AnaliseDTO, AnaliseResumoDTO, AnexoDTO
from ..dtos.cenario_dto import CenarioDTO, ImpactoIRPFDTO, PontoEquilibrioDTO, ProjecaoDTO
from ..dtos.reforma_dto import ImpactoReformaDTO, RelatorioImpactoDTO
from .extracao_service import ExtracaoService, juntar_textos

logger = logging.getLogger(__name__)

SETOR_REFORMA = "Saude"
REGIME_REFORMA_PADRAO = "Simples Nacional"


def montar_perfil(entrada: EntradaAnalise) -> PerfilTributario:
    """Perfil do motor a partir do formulario. ISS omitido usa a aliquota do municipio."""
    faturamento = entrada.faturamento_mensal or Decimal("0")
    folha = entrada.folha_mensal
    if folha is None:
        folha = entrada.fs12 / 12 if entrada.fs12 else Decimal("0")
    aliquota_iss = entrada.aliquota_iss
    if aliquota_iss is None:
        aliquota_iss = consultar_iss(entrada.municipio).aliquota
    return PerfilTributario(
        faturamento_mensal=faturamento,
        rbt12=entrada.rbt12,
        folha_mensal=folha,
        aliquota_iss=aliquota_iss,
        equiparacao_hospitalar=entrada.equiparacao_hospitalar,
        sociedade_uniprofissional=entrada.sociedade_uniprofissional,
        numero_socios=entrada.numero_socios,
        municipio=entrada.municipio,
        atividades=entrada.atividades,
        margem_lucro_real=entrada.margem_lucro_real,
    )


class AnaliseService:
    """Imperative Shell: orquestra IO (anexos, LLM, webhook, repo) e chama o Pure Core."""

    def __init__(
        self,
        repo: AnaliseRepository,
        llm: ModeloLinguagem | None = None,
        webhook: WebhookClient | None = None,
    ) -> None:
        self._repo = repo
        self._llm = llm
        self._webhook = webhook
        self._extracao = ExtracaoService(llm)

    def analisar(self, entrada: EntradaAnalise, anexos: list[ArquivoAnexo]) -> AnaliseDTO:
        """Gera, persiste e devolve a analise.

        Raises:
            ValueError: entrada invalida (faturamento, dados ausentes, anexos).
        """
        validar_entrada(entrada, anexos)

        # IO (imperative shell)
        processados = self._extracao.extrair_todos(anexos)
        texto_documentos = juntar_textos(processados)

        # Pure core
        perfil = montar_perfil(entrada)
        cenarios = gerar_cenarios(perfil)
        melhor = melhor_cenario(cenarios)
        cnaes = tuple(formatar_cnae(c) for c in entrada.cnaes if c.strip())
        alertas = avaliar_compliance(
            DadosCompliance(
                texto_documentos=texto_documentos,
                razao_social=entrada.empresa,
                dados_cliente=entrada.texto_cliente,
                cnaes=cnaes,
                atividades=tuple(a.nome for a in entrada.atividades),
                faturamento_mensal=perfil.faturamento_mensal,
                folha_mensal=perfil.folha_mensal,
                numero_socios=perfil.numero_socios,
            ),
            cenarios,
        )
        natureza = analisar_natureza_juridica(f"{texto_documentos} {entrada.empresa} {entrada.texto_cliente}")
        projecoes = projetar_faturamento(perfil)
        ponto = ponto_de_equilibrio(perfil)

        narrativa = DadosNarrativa(
            faturamento_mensal=perfil.faturamento_mensal,
            cenarios=tuple(cenarios),
            projecoes=tuple(projecoes),
            ponto_equilibrio=ponto,
            alertas=tuple(alertas),
            empresa=entrada.empresa,
            aliquota_iss=perfil.aliquota_iss,
            texto_cliente="\n\n".join(t for t in (entrada.texto_cliente, texto_documentos) if t),
        )
        resumo, gerado_por_ia = self._resumo(narrativa)

        regime = melhor.nome if melhor else REGIME_REFORMA_PADRAO
        impacto = calcular_impacto_reforma(perfil.faturamento_mensal, regime, cenarios)
        relatorio = gerar_relatorio_impacto(
            cenarios,
            DadosClienteReforma(
                faturamento_mensal=perfil.faturamento_mensal,
                empresa=entrada.empresa or None,
                regime=regime,
                setor=SETOR_REFORMA,
                cnaes=cnaes,
            ),
            date.today(),
        )

        analise_id = uuid.uuid4()
        criada_em = datetime.now()
        analise = AnaliseDTO(
            id=str(analise_id),
            criada_em=criada_em.isoformat(),
            tipo_cliente=entrada.tipo_cliente.value,
            empresa=entrada.empresa or None,
            cnpj=entrada.cnpj or None,
            faturamento_mensal=f"{perfil.faturamento_mensal:.2f}",
            cnaes=list(cnaes),
            natureza_juridica=natureza,
            cenarios=[CenarioDTO.from_domain(c) for c in cenarios],
            melhor_cenario=CenarioDTO.from_domain(melhor) if melhor else None,
            alertas_compliance=[AlertaComplianceDTO.from_domain(a) for a in alertas],
            impactos_irpf={nome: ImpactoIRPFDTO.from_domain(i) for nome, i in impactos_irpf(cenarios).items()},
            projecoes=[ProjecaoDTO.from_domain(p) for p in projecoes],
            ponto_equilibrio=PontoEquilibrioDTO.from_domain(ponto),
            resumo_executivo=resumo,
            resumo_gerado_por_ia=gerado_por_ia,
            impacto_reforma=ImpactoReformaDTO.from_domain(impacto),
            relatorio_reforma=RelatorioImpactoDTO.from_domain(relatorio),
            anexos=[AnexoDTO.from_domain(a) for a in processados],
            texto_documentos=texto_documentos,
        )

        if self._webhook is not None:
            analise.webhook_resposta = self._webhook.enviar(analise.model_dump(mode="json"))

        self._repo.salvar(
            RegistroAnalise(
                id=analise_id,
                criada_em=criada_em,
                tipo_cliente=analise.tipo_cliente,
                empresa=analise.empresa,
                cnpj=analise.cnpj,
                faturamento_mensal=perfil.faturamento_mensal,
                melhor_cenario=melhor.nome if melhor else None,
                conteudo=analise.model_dump(mode="json"),
            )
        )
        logger.info("Analise %s gerada com %d cenarios", analise_id, len(cenarios))
        return analise

    def listar(self, limit: int) -> list[AnaliseResumoDTO]:
        return [AnaliseResumoDTO.from_registro(r) for r in self._repo.listar_recentes(limit)]

    def obter(self, analise_id: uuid.UUID) -> AnaliseDTO | None:
        registro = self._repo.buscar(analise_id)
        if registro is None:
            return None
        return AnaliseDTO.model_validate(registro.conteudo)

    def _resumo(self, dados: DadosNarrativa) -> tuple[str, bool]:
        if self._llm is None:
            return resumo_deterministico(dados), False
        try:
            texto = self._llm.completar(
                PROMPT_SISTEMA,
                montar_prompt_narrativa(dados),
                TEMPERATURA_NARRATIVA,
                MAX_TOKENS_NARRATIVA,
            )
        except OpenAIError:
            logger.exception("Falha ao gerar resumo executivo; usando resumo deterministico")
            return resumo_deterministico(dados), False
        if not texto:
            return resumo_deterministico(dados), False
        return texto, True
