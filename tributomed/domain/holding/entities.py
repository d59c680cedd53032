# tributomed/domain/holding/entities.py
#
# Estado do diagnostico de holding patrimonial: familia, inventario de bens,
# passivos, regras de governanca, checklist de due diligence e premissas
# financeiras.
#
# Design decisions:
#   - Valores monetarios em Decimal; premissas financeiras em percentual
#     (5 = 5%), como digitadas no assistente.
#   - Defaults iguais aos do assistente: agregados vedados, mediacao
#     obrigatoria, 75% para venda de imoveis, 25% de dividendo minimo,
#     administrador eleito por voto.
#   - Checklist: True significa "regular". Cada False e uma pendencia.
from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from enum import StrEnum


class PapelFamiliar(StrEnum):
    PATRIARCA = "PATRIARCH"
    MATRIARCA = "MATRIARCH"
    HERDEIRO = "HEIR"
    CONJUGE = "SPOUSE"
    SOCIO = "PARTNER"


class RegimeBens(StrEnum):
    COMUNHAO_TOTAL = "COMUNHAO_TOTAL"
    COMUNHAO_PARCIAL = "COMUNHAO_PARCIAL"
    SEPARACAO_TOTAL = "SEPARACAO_TOTAL"
    PARTICIPACAO_FINAL = "PARTICIPACAO_FINAL"
    UNIAO_ESTAVEL = "UNIAO_ESTAVEL"


class TipoAtivo(StrEnum):
    IMOVEL = "REAL_ESTATE"
    FINANCEIRO = "FINANCIAL"
    VEICULO = "VEHICLE"
    QUOTA_EMPRESA = "COMPANY_QUOTA"
    PROPRIEDADE_INTELECTUAL = "IP"
    OUTRO = "OTHER"


class TipoPassivo(StrEnum):
    BANCARIO = "BANK"
    FISCAL = "FISCAL"
    FAMILIAR = "FAMILY"
    TRABALHISTA = "LABOR"


class SucessaoGestao(StrEnum):
    FAMILIA = "FAMILY"
    VOTO = "VOTE"
    PROFISSIONAL = "PROFESSIONAL"


@dataclass(frozen=True)
class MembroFamilia:
    nome: str
    papel: PapelFamiliar
    regime_bens: RegimeBens | None = None
    nome_conjuge: str | None = None
    em_conflito: bool = False


@dataclass(frozen=True)
class Ativo:
    nome: str
    tipo: TipoAtivo
    valor_mercado: Decimal
    valor_contabil: Decimal  # valor historico declarado no IR
    renda_aluguel: Decimal = Decimal("0")  # mensal
    uf: str | None = None

    def __post_init__(self) -> None:
        if self.valor_mercado < 0 or self.valor_contabil < 0 or self.renda_aluguel < 0:
            raise ValueError(f"Valores do bem '{self.nome}' nao podem ser negativos")


@dataclass(frozen=True)
class Passivo:
    nome: str
    valor: Decimal
    tipo: TipoPassivo
    descricao: str | None = None


@dataclass(frozen=True)
class Governanca:
    permitir_agregados: bool = False
    mediacao_obrigatoria: bool = True
    quorum_venda: int = 75  # percentual do capital votante
    dividendo_minimo: int = 25  # percentual do lucro liquido
    sucessao_gestao: SucessaoGestao = SucessaoGestao.VOTO

    def __post_init__(self) -> None:
        if not 0 <= self.quorum_venda <= 100 or not 0 <= self.dividendo_minimo <= 100:
            raise ValueError("Percentuais de governanca devem estar entre 0 e 100")


@dataclass(frozen=True)
class ChecklistCompliance:
    certidoes_federais: bool = True
    sem_dividas_trabalhistas: bool = True
    matriculas_atualizadas: bool = True
    sem_passivo_ambiental: bool = True
    contratos_locacao: bool = True

    def pendencias(self) -> list[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name)]


@dataclass(frozen=True)
class PremissasFinanceiras:
    valorizacao: Decimal = Decimal("5")  # % a.a.
    vacancia: Decimal = Decimal("10")  # % do aluguel
    manutencao: Decimal = Decimal("1")  # % a.a. do valor dos imoveis
    custo_administrativo: Decimal = Decimal("1200")  # R$ por mes


@dataclass(frozen=True)
class DiagnosticoHolding:
    familia: tuple[MembroFamilia, ...] = ()
    ativos: tuple[Ativo, ...] = ()
    passivos: tuple[Passivo, ...] = ()
    governanca: Governanca = Governanca()
    compliance: ChecklistCompliance = ChecklistCompliance()
    premissas: PremissasFinanceiras = PremissasFinanceiras()
    uf: str = "SP"

    @property
    def valor_mercado(self) -> Decimal:
        return sum((a.valor_mercado for a in self.ativos), Decimal("0"))

    @property
    def valor_contabil(self) -> Decimal:
        return sum((a.valor_contabil for a in self.ativos), Decimal("0"))

    @property
    def renda_aluguel(self) -> Decimal:
        return sum((a.renda_aluguel for a in self.ativos), Decimal("0"))

    @property
    def total_passivos(self) -> Decimal:
        return sum((p.valor for p in self.passivos), Decimal("0"))

    def membros(self, *papeis: PapelFamiliar) -> list[MembroFamilia]:
        return [m for m in self.familia if m.papel in papeis]
