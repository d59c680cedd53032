# tributomed/domain/reforma/conhecimento.py
#
# Base de conhecimento da Reforma Tributaria (EC 132/2023, LC 214/2025).
#
# Design decisions:
#   - Conteudo estatico em tuplas de dataclasses congeladas: e lido pela API
#     (/reforma/conhecimento) e pelo prompt do assistente, nunca alterado.
#   - Aliquotas em percentual, como publicadas na legislacao.
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum


class TratamentoCesta(StrEnum):
    ZERO = "zero"
    REDUCAO_60 = "reducao_60"


@dataclass(frozen=True)
class MarcoReforma:
    ano: int
    fase: str
    mudancas: tuple[str, ...]
    aliquota_cbs: Decimal | None = None
    aliquota_ibs: Decimal | None = None
    reducao_icms_iss: int | None = None  # percentual ja substituido pelo IBS


@dataclass(frozen=True)
class RegimeDiferenciado:
    id: str
    nome: str
    percentual_reducao: int
    descricao: str
    setores: tuple[str, ...]
    exemplos: tuple[str, ...]


@dataclass(frozen=True)
class ItemCestaBasica:
    nome: str
    categoria: str
    tratamento: TratamentoCesta
    descricao: str


@dataclass(frozen=True)
class RegraCashback:
    categoria: str
    devolucao_cbs: int
    devolucao_ibs: int
    elegibilidade: str


@dataclass(frozen=True)
class ConceitoChave:
    id: str
    titulo: str
    descricao: str
    itens: tuple[str, ...] = field(default=())


CRONOGRAMA: tuple[MarcoReforma, ...] = (
    MarcoReforma(
        2026,
        "Ano-Teste",
        (
            "Aliquotas de teste: CBS 0,9% e IBS 0,1%",
            "Registro informativo nas notas fiscais",
            "Valores compensaveis com PIS/Cofins",
            "Sem cobranca efetiva para contribuintes regulares",
        ),
        aliquota_cbs=Decimal("0.9"),
        aliquota_ibs=Decimal("0.1"),
    ),
    MarcoReforma(
        2027,
        "Extincao PIS/Cofins",
        (
            "Entrada plena da CBS",
            "Extincao definitiva do PIS e da Cofins",
            "Implementacao do Imposto Seletivo",
            "Aliquota de IPI reduzida a zero (exceto ZFM)",
        ),
        aliquota_cbs=Decimal("12.0"),
        aliquota_ibs=Decimal("0.1"),
    ),
    MarcoReforma(
        2029,
        "Inicio da Transicao ICMS/ISS",
        ("Reducao de 10% do ICMS e ISS", "Aumento proporcional do IBS", "Inicio do periodo de transicao gradual"),
        reducao_icms_iss=10,
    ),
    MarcoReforma(2030, "Transicao 20%", ("Reducao de 20% do ICMS e ISS",), reducao_icms_iss=20),
    MarcoReforma(2031, "Transicao 30%", ("Reducao de 30% do ICMS e ISS",), reducao_icms_iss=30),
    MarcoReforma(2032, "Transicao 40%", ("Reducao de 40% do ICMS e ISS",), reducao_icms_iss=40),
    MarcoReforma(
        2033,
        "Modelo Final",
        (
            "Vigencia integral do IVA Dual",
            "Extincao total do ICMS e ISS",
            "Sistema completamente unificado",
            "Tributacao 100% no destino",
        ),
        reducao_icms_iss=100,
    ),
)

REGIMES_DIFERENCIADOS: tuple[RegimeDiferenciado, ...] = (
    RegimeDiferenciado(
        "reducao-60",
        "Reducao de 60%",
        60,
        "Setores estrategicos com reducao significativa da carga tributaria",
        (
            "Educacao",
            "Saude",
            "Dispositivos medicos",
            "Medicamentos",
            "Insumos agropecuarios",
            "Producoes artisticas",
            "Atividades desportivas",
            "Comunicacao institucional",
            "Bens e servicos relacionados a seguranca e soberania nacional",
        ),
        (
            "Escolas e universidades",
            "Hospitais e clinicas",
            "Fabricantes de equipamentos medicos",
            "Industria farmaceutica",
            "Produtores rurais",
        ),
    ),
    RegimeDiferenciado(
        "reducao-30",
        "Reducao de 30%",
        30,
        "Profissionais liberais regulamentados",
        (
            "Advocacia",
            "Engenharia",
            "Arquitetura",
            "Medicina (autonomos)",
            "Contabilidade",
            "Outras profissoes regulamentadas",
        ),
        (
            "Escritorios de advocacia",
            "Consultorios medicos individuais",
            "Escritorios de engenharia",
            "Arquitetos autonomos",
        ),
    ),
    RegimeDiferenciado(
        "aliquota-zero",
        "Aliquota Zero",
        0,
        "Isencao total de CBS e IBS",
        (
            "Cesta Basica Nacional (22 produtos)",
            "Transporte publico coletivo",
            "Dispositivos para PcD",
            "Medicamentos para SUS",
            "Produtos agropecuarios in natura",
            "Insumos agropecuarios",
            "Alimentos destinados ao consumo humano",
            "Produtos de higiene pessoal e limpeza (cesta basica)",
        ),
        (
            "Arroz, feijao, leite, carnes",
            "Onibus urbanos",
            "Cadeiras de rodas",
            "Medicamentos do programa Farmacia Popular",
        ),
    ),
)


def _zero(nome: str, categoria: str, descricao: str) -> ItemCestaBasica:
    return ItemCestaBasica(nome, categoria, TratamentoCesta.ZERO, descricao)


def _reduzido(nome: str, categoria: str, descricao: str) -> ItemCestaBasica:
    return ItemCestaBasica(nome, categoria, TratamentoCesta.REDUCAO_60, descricao)


CESTA_BASICA: tuple[ItemCestaBasica, ...] = (
    _zero("Arroz", "graos", "Arroz em graos"),
    _zero("Feijoes", "graos", "Todos os tipos de feijao"),
    _zero("Leite fluido", "laticinios", "Leite pasteurizado e UHT"),
    _zero("Leite em po", "laticinios", "Leite em po integral e desnatado"),
    _zero("Queijos", "laticinios", "Queijos tipo minas, mussarela, prato"),
    _zero("Farinha de trigo", "graos", "Farinha de trigo comum"),
    _zero("Farinha de milho", "graos", "Fuba e farinha de milho"),
    _zero("Farinha de mandioca", "graos", "Farinha de mandioca"),
    _zero("Aveia", "graos", "Aveia em flocos"),
    _zero("Carnes bovinas", "proteinas", "Cortes bovinos frescos e congelados"),
    _zero("Carnes suinas", "proteinas", "Cortes suinos frescos e congelados"),
    _zero("Aves", "proteinas", "Frango, chester, peru"),
    _zero("Peixes", "proteinas", "Peixes frescos e congelados"),
    _zero("Ovos", "proteinas", "Ovos de galinha"),
    _zero("Acucar", "outros", "Acucar cristal e refinado"),
    _zero("Sal", "outros", "Sal de cozinha"),
    _zero("Cafe", "outros", "Cafe torrado e moido"),
    _zero("Oleo de babacu", "outros", "Oleo de babacu"),
    _zero("Pao frances", "outros", "Pao frances comum"),
    _zero("Massas alimenticias", "outros", "Macarrao e massas"),
    _zero("Hortalicas", "hortifruti", "Verduras e legumes frescos"),
    _zero("Frutas", "hortifruti", "Frutas frescas nacionais"),
    _reduzido("Crustaceos", "proteinas", "Camarao, lagosta, siri"),
    _reduzido("Oleo de soja", "outros", "Oleo de soja refinado"),
    _reduzido("Oleo de milho", "outros", "Oleo de milho refinado"),
    _reduzido("Sucos naturais", "outros", "Sucos sem acucar adicionado"),
)

_CADUNICO = "Familias CadUnico com renda per capita ate 1/2 salario minimo"

CASHBACK: tuple[RegraCashback, ...] = (
    RegraCashback("Botijao de gas (ate 13kg)", 100, 20, _CADUNICO),
    RegraCashback("Energia eletrica", 100, 20, _CADUNICO),
    RegraCashback("Agua e esgoto", 100, 20, _CADUNICO),
    RegraCashback("Gas natural", 100, 20, _CADUNICO),
    RegraCashback("Demais produtos e servicos", 20, 20, _CADUNICO),
)

CONCEITOS_CHAVE: tuple[ConceitoChave, ...] = (
    ConceitoChave(
        "iva_dual",
        "IVA Dual",
        "Imposto sobre Valor Agregado composto por CBS (federal) e IBS (estadual/municipal).",
        ("CBS - Contribuicao sobre Bens e Servicos", "IBS - Imposto sobre Bens e Servicos"),
    ),
    ConceitoChave(
        "cbs",
        "CBS - Contribuicao sobre Bens e Servicos",
        "Tributo federal que substitui PIS, Cofins e IPI. Competencia da Uniao, vigencia plena em 2027.",
        ("PIS", "Cofins", "IPI"),
    ),
    ConceitoChave(
        "ibs",
        "IBS - Imposto sobre Bens e Servicos",
        "Tributo compartilhado por Estados e Municipios que substitui ICMS e ISS. Vigencia plena em 2033, "
        "gestao pelo CGIBS (Comite Gestor do IBS).",
        ("ICMS", "ISS"),
    ),
    ConceitoChave(
        "split_payment",
        "Split Payment (Pagamento Dividido)",
        "O banco retem o imposto no momento da transacao e entrega apenas o liquido ao vendedor. Elimina o "
        "float financeiro: o valor do imposto deixa de ser capital de giro.",
    ),
    ConceitoChave(
        "creditamento_amplo",
        "Credito Financeiro Amplo",
        "Credito sobre qualquer aquisicao de bens ou servicos usados na atividade economica, no lugar do "
        "credito fisico restrito.",
        ("Uso pessoal", "Joias", "Bebidas alcoolicas", "Tabaco", "Armas", "Servicos esteticos"),
    ),
    ConceitoChave(
        "imposto_seletivo",
        "Imposto Seletivo",
        "Tributo sobre produtos prejudiciais a saude ou ao meio ambiente.",
        (
            "Cigarros e derivados do tabaco",
            "Bebidas alcoolicas",
            "Bebidas acucaradas",
            "Veiculos poluentes",
            "Extracao de minerio e petroleo",
            "Apostas (bets)",
        ),
    ),
)
