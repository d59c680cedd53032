# tributomed/application/dtos/cenario_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from tributomed.domain.tributos.entities import Atividade, Cenario, PerfilTributario
from tributomed.domain.tributos.enums import Anexo, TipoAtividade
from tributomed.domain.tributos.irpf import ImpactoIRPF
from tributomed.domain.tributos.iss_municipal import ISSMunicipal
from tributomed.domain.tributos.projecoes import PontoEquilibrio, ProjecaoFaturamento


class AtividadeDTO(BaseModel):
    nome: str
    receita_mensal: Decimal = Field(ge=0)
    tipo: TipoAtividade = TipoAtividade.SERVICO
    anexo: Anexo = Anexo.V
    elegivel_mei: bool = False

    def to_domain(self) -> Atividade:
        return Atividade(
            nome=self.nome,
            receita_mensal=self.receita_mensal,
            tipo=self.tipo,
            anexo=self.anexo,
            elegivel_mei=self.elegivel_mei,
        )


class PerfilDTO(BaseModel):
    """Corpo de POST /cenarios/simular. Percentuais como digitados (5 = 5%)."""

    faturamento_mensal: Decimal = Field(ge=0)
    rbt12: Decimal | None = Field(default=None, ge=0)
    folha_mensal: Decimal = Field(default=Decimal("0"), ge=0)
    aliquota_iss: Decimal = Field(default=Decimal("5"), ge=0, le=5)
    equiparacao_hospitalar: bool = False
    sociedade_uniprofissional: bool = False
    numero_socios: int = Field(default=1, ge=1)
    municipio: str = ""
    margem_lucro_real: Decimal = Field(default=Decimal("30"), ge=0, le=100)
    atividades: list[AtividadeDTO] = []

    def to_domain(self) -> PerfilTributario:
        return PerfilTributario(
            faturamento_mensal=self.faturamento_mensal,
            rbt12=self.rbt12,
            folha_mensal=self.folha_mensal,
            aliquota_iss=self.aliquota_iss,
            equiparacao_hospitalar=self.equiparacao_hospitalar,
            sociedade_uniprofissional=self.sociedade_uniprofissional,
            numero_socios=self.numero_socios,
            municipio=self.municipio,
            atividades=tuple(a.to_domain() for a in self.atividades),
            margem_lucro_real=self.margem_lucro_real / 100,
        )


class ItemTributoDTO(BaseModel):
    nome: str
    valor: str
    aliquota: str


class ProLaboreDTO(BaseModel):
    base: str
    inss: str
    irrf: str
    liquido: str


class CenarioDTO(BaseModel):
    nome: str
    categoria: str
    tipo: str
    elegivel: bool
    nota_elegibilidade: str
    imposto_total: str
    aliquota_efetiva: str
    lucro_distribuivel: str
    observacoes: str
    pro_labore: ProLaboreDTO | None
    composicao: list[ItemTributoDTO]

    @classmethod
    def from_domain(cls, cenario: Cenario) -> CenarioDTO:
        pro_labore = cenario.pro_labore
        return cls(
            nome=cenario.nome,
            categoria=cenario.categoria.value,
            tipo=cenario.tipo.value,
            elegivel=cenario.elegivel,
            nota_elegibilidade=cenario.nota_elegibilidade,
            imposto_total=f"{cenario.imposto_total:.2f}",
            aliquota_efetiva=f"{cenario.aliquota_efetiva:.2f}",
            lucro_distribuivel=f"{cenario.lucro_distribuivel:.2f}",
            observacoes=cenario.observacoes,
            pro_labore=ProLaboreDTO(
                base=f"{pro_labore.base:.2f}",
                inss=f"{pro_labore.inss:.2f}",
                irrf=f"{pro_labore.irrf:.2f}",
                liquido=f"{pro_labore.liquido:.2f}",
            )
            if pro_labore
            else None,
            composicao=[
                ItemTributoDTO(nome=i.nome, valor=f"{i.valor:.2f}", aliquota=f"{i.aliquota:.2f}")
                for i in cenario.composicao
            ],
        )


class ImpactoIRPFDTO(BaseModel):
    regime: str
    rendimento_tributavel: str
    faixa: str
    irpf_devido: str
    deducoes: str
    impacto_liquido: str
    resumo: str

    @classmethod
    def from_domain(cls, impacto: ImpactoIRPF) -> ImpactoIRPFDTO:
        return cls(
            regime=impacto.regime,
            rendimento_tributavel=f"{impacto.rendimento_tributavel:.2f}",
            faixa=impacto.faixa,
            irpf_devido=f"{impacto.irpf_devido:.2f}",
            deducoes=f"{impacto.deducoes:.2f}",
            impacto_liquido=f"{impacto.impacto_liquido:.2f}",
            resumo=impacto.resumo,
        )


class ProjecaoDTO(BaseModel):
    crescimento: str
    faturamento_mensal: str
    melhor_cenario: str | None
    imposto_total: str | None

    @classmethod
    def from_domain(cls, projecao: ProjecaoFaturamento) -> ProjecaoDTO:
        melhor = projecao.melhor
        return cls(
            crescimento=f"{projecao.crescimento:.0f}",
            faturamento_mensal=f"{projecao.faturamento_mensal:.2f}",
            melhor_cenario=melhor.nome if melhor else None,
            imposto_total=f"{melhor.imposto_total:.2f}" if melhor else None,
        )


class PontoEquilibrioDTO(BaseModel):
    faturamento_mensal: str | None
    descricao: str

    @classmethod
    def from_domain(cls, ponto: PontoEquilibrio) -> PontoEquilibrioDTO:
        return cls(
            faturamento_mensal=f"{ponto.faturamento_mensal:.2f}" if ponto.faturamento_mensal is not None else None,
            descricao=ponto.descricao,
        )


class SimulacaoDTO(BaseModel):
    cenarios: list[CenarioDTO]
    melhor_cenario: CenarioDTO | None
    impactos_irpf: dict[str, ImpactoIRPFDTO]
    projecoes: list[ProjecaoDTO]
    ponto_equilibrio: PontoEquilibrioDTO


class ISSDTO(BaseModel):
    municipio: str
    uf: str
    aliquota: str
    iss_fixo_anual_por_profissional: str
    iss_fixo_mensal: str
    legislacao: str | None

    @classmethod
    def from_domain(cls, iss: ISSMunicipal) -> ISSDTO:
        return cls(
            municipio=iss.municipio,
            uf=iss.uf,
            aliquota=f"{iss.aliquota:.2f}",
            iss_fixo_anual_por_profissional=f"{iss.iss_fixo_anual_por_profissional:.2f}",
            iss_fixo_mensal=f"{iss.iss_fixo_mensal:.2f}",
            legislacao=iss.legislacao,
        )
