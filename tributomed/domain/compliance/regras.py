# tributomed/domain/compliance/regras.py
#
# Regras de compliance societario e tributario para atividades de saude.
#
# Design decisions:
#   - Cada regra e uma funcao pura (DadosCompliance, cenarios) -> bool
#     associada a um alerta fixo. Regras sao independentes entre si: a ordem
#     so define a ordem dos alertas na saida.
#   - Termos livres (documentos, razao social, atividades) sao comparados
#     apos normalizar(): maiusculas, sem acentos.
#
# Invariants:
#   - avaliar_compliance nunca levanta excecao para dados incompletos; regra
#     sem dados suficientes simplesmente nao dispara.
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from tributomed.domain.texto import normalizar
from tributomed.domain.tributos.entities import Cenario
from tributomed.domain.tributos.enums import TipoCenario

from .natureza_juridica import NaturezaJuridica, detectar_natureza_juridica


class TipoAlertaCompliance(StrEnum):
    PERIGO = "perigo"
    ATENCAO = "atencao"
    INFO = "info"
    OPORTUNIDADE = "oportunidade"


@dataclass(frozen=True)
class AlertaCompliance:
    tipo: TipoAlertaCompliance
    titulo: str
    descricao: str
    sugestao: str | None = None


@dataclass(frozen=True)
class DadosCompliance:
    """Dados do cliente relevantes para as regras."""
    texto_documentos: str = ""
    razao_social: str = ""
    dados_cliente: str = ""
    cnaes: tuple[str, ...] = ()
    atividades: tuple[str, ...] = ()
    faturamento_mensal: Decimal = Decimal("0")
    folha_mensal: Decimal = Decimal("0")
    numero_socios: int = 1

    @property
    def texto_completo(self) -> str:
        return f"{self.texto_documentos} {self.razao_social} {self.dados_cliente}"


_CATEGORIAS_ATIVIDADE: dict[str, tuple[str, ...]] = {
    "saude": ("MEDIC", "SAUDE", "CLINIC", "HOSPITAL", "ODONT"),
    "educacao": ("PROFESSOR", "ENSINO", "AULA", "CURSO", "EDUCAC", "TREINAM"),
    "comercio": ("VENDA", "COMERCIO", "LOJA", "PRODUTO"),
    "servicos": ("CONSULT", "SERVICO", "ASSESSOR"),
}
_PATRIMONIO = re.compile(r"IMOVEL|ALUGUEL|LOCACAO|PATRIMON")
_CNAE_CIRURGICO = "8630-5/04"
_FATOR_R_PROXIMO = Decimal("0.20")
_FATOR_R_LIMIAR = Decimal("0.28")
_FATURAMENTO_ALTA_RENDA = Decimal("80000")


def _natureza(dados: DadosCompliance) -> NaturezaJuridica:
    return detectar_natureza_juridica(dados.texto_completo)


def _ei_atividade_medica(dados: DadosCompliance, _: list[Cenario]) -> bool:
    medica = any(c.startswith("863") for c in dados.cnaes) or "MEDIC" in normalizar(dados.texto_documentos)
    return medica and _natureza(dados) is NaturezaJuridica.EI


def _eireli(dados: DadosCompliance, _: list[Cenario]) -> bool:
    return _natureza(dados) is NaturezaJuridica.EIRELI


def _mei(dados: DadosCompliance, _: list[Cenario]) -> bool:
    return _natureza(dados) is NaturezaJuridica.MEI


def _equiparacao_hospitalar(dados: DadosCompliance, _: list[Cenario]) -> bool:
    return _CNAE_CIRURGICO in dados.cnaes or "CIRURGICO" in normalizar(dados.texto_documentos)


def _atividades_mistas(dados: DadosCompliance, _: list[Cenario]) -> bool:
    if len(dados.atividades) < 2:
        return False
    categorias = set()
    for nome in dados.atividades:
        n = normalizar(nome)
        for categoria, termos in _CATEGORIAS_ATIVIDADE.items():
            if any(t in n for t in termos):
                categorias.add(categoria)
    return len(categorias) >= 2


def _anexo_v_mais_caro(_: DadosCompliance, cenarios: list[Cenario]) -> bool:
    por_tipo = {c.tipo: c for c in cenarios}
    anexo_v = por_tipo.get(TipoCenario.SIMPLES_ANEXO_V)
    presumido = por_tipo.get(TipoCenario.PRESUMIDO) or por_tipo.get(TipoCenario.PRESUMIDO_UNIPROFISSIONAL)
    if anexo_v is None or presumido is None:
        return False
    return anexo_v.imposto_total > presumido.imposto_total


def _fator_r_proximo(dados: DadosCompliance, _: list[Cenario]) -> bool:
    if dados.faturamento_mensal == 0:
        return False
    fator_r = dados.folha_mensal / dados.faturamento_mensal
    return _FATOR_R_PROXIMO <= fator_r < _FATOR_R_LIMIAR


def _holding_recomendada(dados: DadosCompliance, _: list[Cenario]) -> bool:
    return (
        dados.faturamento_mensal >= _FATURAMENTO_ALTA_RENDA
        or dados.numero_socios >= 2
        or _PATRIMONIO.search(normalizar(dados.texto_documentos)) is not None
    )


_Regra = Callable[[DadosCompliance, list[Cenario]], bool]

REGRAS: tuple[tuple[_Regra, AlertaCompliance], ...] = (
    (
        _ei_atividade_medica,
        AlertaCompliance(
            TipoAlertaCompliance.PERIGO,
            "Incompatibilidade: EI para Atividade Medica",
            "Empresario Individual (EI) possui responsabilidade ilimitada: o patrimonio pessoal responde pelas "
            "dividas da empresa. Para profissionais da saude isso representa alto risco.",
            "Migrar para SLU (Sociedade Limitada Unipessoal), que oferece protecao patrimonial e mantem a "
            "simplicidade de gestao.",
        ),
    ),
    (
        _eireli,
        AlertaCompliance(
            TipoAlertaCompliance.ATENCAO,
            "Natureza Juridica Obsoleta: EIRELI",
            "A EIRELI foi extinta pela Lei 14.195/2021. Empresas existentes podem continuar operando, mas nao e "
            "possivel abrir novas EIRELIs.",
            "Considerar migracao para SLU, com as mesmas vantagens e menos burocracia.",
        ),
    ),
    (
        _mei,
        AlertaCompliance(
            TipoAlertaCompliance.PERIGO,
            "MEI Incompativel com Atividade Medica",
            "O MEI nao pode exercer atividades regulamentadas por conselhos profissionais, incluindo medicina.",
            "Regularizar imediatamente como SLU ou LTDA para evitar autuacoes fiscais e impedimentos no CRM.",
        ),
    ),
    (
        _equiparacao_hospitalar,
        AlertaCompliance(
            TipoAlertaCompliance.OPORTUNIDADE,
            "Potencial Equiparacao Hospitalar",
            "Identificada atividade com CNAE 8630-5/04 (procedimentos cirurgicos). Com infraestrutura hospitalar, "
            "a clinica pode se beneficiar de bases de presuncao reduzidas.",
            "Verificar requisitos da ANVISA: centro cirurgico, leitos de observacao e equipamentos especificos. "
            "Beneficio: IRPJ 8% e CSLL 12% no Lucro Presumido.",
        ),
    ),
    (
        _atividades_mistas,
        AlertaCompliance(
            TipoAlertaCompliance.OPORTUNIDADE,
            "Atividades Mistas Detectadas",
            "Identificamos multiplas categorias de atividades (ex: medica e educacional, clinica e produtos). "
            "Separar em CNPJs distintos pode gerar economia tributaria.",
            "Avaliar a tributacao individual de cada atividade e se uma atividade contamina o regime da outra.",
        ),
    ),
    (
        _anexo_v_mais_caro,
        AlertaCompliance(
            TipoAlertaCompliance.ATENCAO,
            "Simples Nacional (Anexo V) Mais Caro que Lucro Presumido",
            "O Simples Nacional no Anexo V esta custando mais que o Lucro Presumido. Isso ocorre quando o Fator R "
            "fica abaixo de 28%.",
            "Opcoes: aumentar o pro-labore para atingir Fator R >= 28%, migrar para o Lucro Presumido ou avaliar "
            "holding para otimizar a distribuicao.",
        ),
    ),
    (
        _fator_r_proximo,
        AlertaCompliance(
            TipoAlertaCompliance.OPORTUNIDADE,
            "Fator R Proximo do Limiar de Otimizacao",
            "O Fator R esta proximo de 28%, limiar que move atividades do Anexo V para o Anexo III. Um pequeno "
            "aumento no pro-labore pode gerar economia significativa.",
            "Simule o pro-labore necessario para Fator R = 28% e compare o INSS adicional com a economia no DAS.",
        ),
    ),
    (
        _holding_recomendada,
        AlertaCompliance(
            TipoAlertaCompliance.OPORTUNIDADE,
            "Planejamento Patrimonial Recomendado",
            "O perfil indica potencial beneficio com Holding Patrimonial: economia de ITCMD na sucessao (ate 8% "
            "do patrimonio) e de IRPF sobre alugueis (de 27,5% para cerca de 11%).",
            "Use o diagnostico de Holding Patrimonial para simular a economia em sucessao e rendimentos.",
        ),
    ),
)


def avaliar_compliance(dados: DadosCompliance, cenarios: list[Cenario] | None = None) -> list[AlertaCompliance]:
    """Executa todas as regras e devolve os alertas disparados, na ordem das regras."""
    cenarios = cenarios or []
    return [alerta for regra, alerta in REGRAS if regra(dados, cenarios)]
