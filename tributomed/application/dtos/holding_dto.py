# tributomed/application/dtos/holding_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from tributomed.domain.holding.calculadora import AnaliseHolding, CustosEstrutura
from tributomed.domain.holding.diagnostico import ResultadoDiagnostico
from tributomed.domain.holding.entities import (
    Ativo,
    ChecklistCompliance,
    DiagnosticoHolding,
    Governanca,
    MembroFamilia,
    PapelFamiliar,
    Passivo,
    PremissasFinanceiras,
    RegimeBens,
    SucessaoGestao,
    TipoAtivo,
    TipoPassivo,
)


class MembroFamiliaDTO(BaseModel):
    nome: str = Field(min_length=1)
    papel: PapelFamiliar
    regime_bens: RegimeBens | None = None
    nome_conjuge: str | None = None
    em_conflito: bool = False


class AtivoDTO(BaseModel):
    nome: str = Field(min_length=1)
    tipo: TipoAtivo = TipoAtivo.IMOVEL
    valor_mercado: Decimal = Field(ge=0)
    valor_contabil: Decimal = Field(ge=0)
    renda_aluguel: Decimal = Field(default=Decimal("0"), ge=0)
    uf: str | None = None


class PassivoDTO(BaseModel):
    nome: str
    valor: Decimal = Field(ge=0)
    tipo: TipoPassivo
    descricao: str | None = None


class GovernancaDTO(BaseModel):
    permitir_agregados: bool = False
    mediacao_obrigatoria: bool = True
    quorum_venda: int = Field(default=75, ge=0, le=100)
    dividendo_minimo: int = Field(default=25, ge=0, le=100)
    sucessao_gestao: SucessaoGestao = SucessaoGestao.VOTO


class ChecklistComplianceDTO(BaseModel):
    certidoes_federais: bool = True
    sem_dividas_trabalhistas: bool = True
    matriculas_atualizadas: bool = True
    sem_passivo_ambiental: bool = True
    contratos_locacao: bool = True


class PremissasFinanceirasDTO(BaseModel):
    valorizacao: Decimal = Decimal("5")
    vacancia: Decimal = Field(default=Decimal("10"), ge=0, le=100)
    manutencao: Decimal = Field(default=Decimal("1"), ge=0)
    custo_administrativo: Decimal = Field(default=Decimal("1200"), ge=0)


class DiagnosticoHoldingRequestDTO(BaseModel):
    familia: list[MembroFamiliaDTO] = []
    ativos: list[AtivoDTO] = []
    passivos: list[PassivoDTO] = []
    governanca: GovernancaDTO = GovernancaDTO()
    compliance: ChecklistComplianceDTO = ChecklistComplianceDTO()
    premissas: PremissasFinanceirasDTO = PremissasFinanceirasDTO()
    uf: str = Field(default="SP", min_length=2, max_length=5)

    def to_domain(self) -> DiagnosticoHolding:
        return DiagnosticoHolding(
            familia=tuple(MembroFamilia(**m.model_dump()) for m in self.familia),
            ativos=tuple(Ativo(**a.model_dump()) for a in self.ativos),
            passivos=tuple(Passivo(**p.model_dump()) for p in self.passivos),
            governanca=Governanca(**self.governanca.model_dump()),
            compliance=ChecklistCompliance(**self.compliance.model_dump()),
            premissas=PremissasFinanceiras(**self.premissas.model_dump()),
            uf=self.uf.upper(),
        )


class CustosEstruturaDTO(BaseModel):
    imposto_mensal: str
    liquido_mensal: str
    custo_sucessao: str

    @classmethod
    def from_domain(cls, custos: CustosEstrutura) -> CustosEstruturaDTO:
        return cls(
            imposto_mensal=f"{custos.imposto_mensal:.2f}",
            liquido_mensal=f"{custos.liquido_mensal:.2f}",
            custo_sucessao=f"{custos.custo_sucessao:.2f}",
        )


class AnaliseHoldingDTO(BaseModel):
    pessoa_fisica: CustosEstruturaDTO
    holding: CustosEstruturaDTO
    economia_mensal: str
    economia_mensal_percentual: str
    economia_sucessao: str
    economia_sucessao_percentual: str
    vale_a_pena: bool
    breakeven_anos: str | None
    custo_anual_holding: str

    @classmethod
    def from_domain(cls, analise: AnaliseHolding) -> AnaliseHoldingDTO:
        eco = analise.economia
        return cls(
            pessoa_fisica=CustosEstruturaDTO.from_domain(analise.pessoa_fisica),
            holding=CustosEstruturaDTO.from_domain(analise.holding),
            economia_mensal=f"{eco.mensal:.2f}",
            economia_mensal_percentual=f"{eco.mensal_percentual:.2f}",
            economia_sucessao=f"{eco.sucessao:.2f}",
            economia_sucessao_percentual=f"{eco.sucessao_percentual:.2f}",
            vale_a_pena=analise.vale_a_pena,
            breakeven_anos=str(analise.breakeven_anos) if analise.breakeven_anos is not None else None,
            custo_anual_holding=f"{analise.custo_anual_holding:.2f}",
        )


class ProjecaoAnualDTO(BaseModel):
    ano: int
    valor_patrimonio: str
    receita_aluguel: str
    custo_manutencao: str
    impostos: str
    lucro_liquido: str
    patrimonio_acumulado: str


class ResultadoDiagnosticoDTO(BaseModel):
    valor_mercado: str
    valor_contabil: str
    gap_sucessorio: str
    renda_aluguel: str
    total_passivos: str
    herdeiros: int
    apto_para_integralizacao: bool
    pendencias: list[str]
    riscos: list[str]
    analise: AnaliseHoldingDTO
    projecoes: list[ProjecaoAnualDTO]
    lucro_projetado: str

    @classmethod
    def from_domain(cls, resultado: ResultadoDiagnostico) -> ResultadoDiagnosticoDTO:
        return cls(
            valor_mercado=f"{resultado.valor_mercado:.2f}",
            valor_contabil=f"{resultado.valor_contabil:.2f}",
            gap_sucessorio=f"{resultado.gap_sucessorio:.2f}",
            renda_aluguel=f"{resultado.renda_aluguel:.2f}",
            total_passivos=f"{resultado.total_passivos:.2f}",
            herdeiros=resultado.herdeiros,
            apto_para_integralizacao=resultado.apto_para_integralizacao,
            pendencias=list(resultado.pendencias),
            riscos=list(resultado.riscos),
            analise=AnaliseHoldingDTO.from_domain(resultado.analise),
            projecoes=[
                ProjecaoAnualDTO(
                    ano=p.ano,
                    valor_patrimonio=f"{p.valor_patrimonio:.2f}",
                    receita_aluguel=f"{p.receita_aluguel:.2f}",
                    custo_manutencao=f"{p.custo_manutencao:.2f}",
                    impostos=f"{p.impostos:.2f}",
                    lucro_liquido=f"{p.lucro_liquido:.2f}",
                    patrimonio_acumulado=f"{p.patrimonio_acumulado:.2f}",
                )
                for p in resultado.projecoes
            ],
            lucro_projetado=f"{resultado.lucro_projetado:.2f}",
        )


class DocumentosHoldingDTO(BaseModel):
    protocolo_familiar: str
    lista_integralizacao: str
