# tributomed/domain/tributos/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .constantes import MARGEM_LUCRO_REAL_PADRAO
from .enums import Anexo, CategoriaCenario, TipoAtividade, TipoCenario


@dataclass(frozen=True)
class Atividade:
    """Uma linha de receita da empresa (ex: consultas, venda de produtos)."""
    nome: str
    receita_mensal: Decimal
    tipo: TipoAtividade
    anexo: Anexo
    elegivel_mei: bool = False

    def __post_init__(self) -> None:
        if self.receita_mensal < 0:
            raise ValueError("Receita da atividade nao pode ser negativa")


@dataclass(frozen=True)
class PerfilTributario:
    """Entrada do motor de cenarios."""
    faturamento_mensal: Decimal
    rbt12: Decimal | None = None
    folha_mensal: Decimal = Decimal("0")
    aliquota_iss: Decimal = Decimal("5")
    equiparacao_hospitalar: bool = False
    sociedade_uniprofissional: bool = False
    numero_socios: int = 1
    municipio: str = ""
    atividades: tuple[Atividade, ...] = ()
    margem_lucro_real: Decimal = MARGEM_LUCRO_REAL_PADRAO  # fracao

    def __post_init__(self) -> None:
        if self.faturamento_mensal < 0:
            raise ValueError("Faturamento mensal nao pode ser negativo")
        if self.folha_mensal < 0:
            raise ValueError("Folha mensal nao pode ser negativa")
        if self.numero_socios < 1:
            raise ValueError("Numero de socios deve ser ao menos 1")
        if not 0 <= self.margem_lucro_real <= 1:
            raise ValueError("Margem de lucro deve estar entre 0 e 100%")

    @property
    def receita_12_meses(self) -> Decimal:
        if self.rbt12:
            return self.rbt12
        return self.faturamento_mensal * 12


@dataclass(frozen=True)
class ItemTributo:
    nome: str
    valor: Decimal
    aliquota: Decimal = Decimal("0")  # percentual, 0 quando variavel


@dataclass(frozen=True)
class AnaliseProLabore:
    base: Decimal
    inss: Decimal
    irrf: Decimal

    @property
    def liquido(self) -> Decimal:
        return self.base - self.inss - self.irrf


@dataclass(frozen=True)
class Cenario:
    """Resultado de um regime tributario para o perfil simulado."""
    nome: str
    categoria: CategoriaCenario
    tipo: TipoCenario
    elegivel: bool
    nota_elegibilidade: str
    imposto_total: Decimal
    aliquota_efetiva: Decimal
    lucro_distribuivel: Decimal
    observacoes: str
    composicao: tuple[ItemTributo, ...] = ()
    pro_labore: AnaliseProLabore | None = None

    def item(self, trecho: str) -> ItemTributo | None:
        """Primeiro item da composicao cujo nome contem o trecho."""
        return next((i for i in self.composicao if trecho in i.nome), None)


@dataclass(frozen=True)
class ResultadoSimples:
    imposto: Decimal
    aliquota_efetiva: Decimal  # percentual
    aliquota_nominal: Decimal  # percentual
    composicao: tuple[ItemTributo, ...] = field(default=())


@dataclass(frozen=True)
class ResultadoLucro:
    """Tributos federais e municipais de Lucro Presumido ou Real."""
    pis: Decimal
    cofins: Decimal
    irpj: Decimal
    csll: Decimal
    iss: Decimal = Decimal("0")
    icms: Decimal = Decimal("0")

    @property
    def pis_cofins(self) -> Decimal:
        return self.pis + self.cofins

    @property
    def irpj_csll(self) -> Decimal:
        return self.irpj + self.csll

    @property
    def total(self) -> Decimal:
        return self.pis + self.cofins + self.irpj + self.csll + self.iss + self.icms
