# tributomed/domain/analise/entities.py
#
# Entrada do formulario de analise, anexos e o registro persistido.
#
# Design decisions:
#   - O registro persistido guarda o conteudo da analise ja serializado
#     (dict JSON-compativel). O dominio so conhece os campos de listagem;
#     quem monta e le o conteudo e a camada de aplicacao.
#   - Validacao acontece antes de qualquer IO (extracao, LLM, webhook).
#
# Invariants:
#   - Toda analise aceita tem faturamento mensal > 0 e dados do cliente ou
#     ao menos um anexo.
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from tributomed.domain.cliente.value_objects import TipoCliente
from tributomed.domain.tributos.constantes import MARGEM_LUCRO_REAL_PADRAO
from tributomed.domain.tributos.entities import Atividade

MAX_ANEXO_BYTES = 12 * 1024 * 1024
TIPOS_ANEXO_PERMITIDOS = frozenset(
    {
        "application/pdf",
        "image/jpeg",
        "image/png",
        "image/heic",
        "image/heif",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "text/csv",
        "text/plain",
    }
)
TIPOS_IMAGEM = frozenset({"image/jpeg", "image/png", "image/heic", "image/heif"})
ALIQUOTA_ISS_MAXIMA = Decimal("5")


@dataclass(frozen=True)
class EntradaAnalise:
    tipo_cliente: TipoCliente
    faturamento_mensal: Decimal | None
    empresa: str = ""
    cnpj: str = ""
    dados_cliente: str = ""
    transcricao: str = ""
    cnaes: tuple[str, ...] = ()
    rbt12: Decimal | None = None
    fs12: Decimal | None = None
    folha_mensal: Decimal | None = None
    aliquota_iss: Decimal | None = None
    municipio: str = ""
    numero_socios: int = 1
    margem_lucro_real: Decimal = MARGEM_LUCRO_REAL_PADRAO
    equiparacao_hospitalar: bool = False
    sociedade_uniprofissional: bool = False
    atividades: tuple[Atividade, ...] = ()

    @property
    def tem_dados_cliente(self) -> bool:
        return bool(self.dados_cliente.strip() or self.transcricao.strip())

    @property
    def texto_cliente(self) -> str:
        """Dados livres e transcricao da negociacao, na ordem do formulario."""
        partes = []
        if self.dados_cliente.strip():
            partes.append(self.dados_cliente.strip())
        if self.transcricao.strip():
            partes.append(f"Transcricao da negociacao:\n{self.transcricao.strip()}")
        return "\n\n".join(partes)


@dataclass(frozen=True)
class ArquivoAnexo:
    nome: str
    tipo: str
    conteudo: bytes = field(repr=False)

    @property
    def tamanho(self) -> int:
        return len(self.conteudo)


@dataclass(frozen=True)
class AnexoProcessado:
    nome: str
    tipo: str
    tamanho: int
    texto_extraido: str


def validar_entrada(entrada: EntradaAnalise, anexos: list[ArquivoAnexo]) -> None:
    """Rejeita a analise antes de qualquer processamento.

    Raises:
        ValueError: faturamento ausente, aliquota de ISS fora de 0..5%, nenhum
            dado informado, anexo grande demais ou de tipo nao suportado.
    """
    if entrada.faturamento_mensal is None or entrada.faturamento_mensal <= 0:
        raise ValueError(
            "Informe o faturamento mensal estimado para que possamos gerar os cenarios tributarios."
        )
    if entrada.aliquota_iss is not None and not 0 <= entrada.aliquota_iss <= ALIQUOTA_ISS_MAXIMA:
        raise ValueError(f"Aliquota de ISS deve estar entre 0 e {ALIQUOTA_ISS_MAXIMA}%")
    validos = [a for a in anexos if a.tamanho > 0]
    if not entrada.tem_dados_cliente and not validos:
        raise ValueError(
            "Por favor, forneca as informacoes financeiras ou anexe um ou mais documentos para analise."
        )
    for anexo in validos:
        if anexo.tamanho > MAX_ANEXO_BYTES:
            raise ValueError(
                f'O arquivo "{anexo.nome}" ultrapassa o limite de {MAX_ANEXO_BYTES // (1024 * 1024)} MB. '
                "Reduza o tamanho antes de reenviar."
            )
        if anexo.tipo and anexo.tipo not in TIPOS_ANEXO_PERMITIDOS:
            raise ValueError(
                f'O tipo de arquivo "{anexo.nome}" ({anexo.tipo}) nao e suportado. '
                "Envie PDF, imagens (JPEG/PNG/HEIC), planilhas XLSX, CSV ou texto."
            )


@dataclass(frozen=True)
class RegistroAnalise:
    """Analise persistida: campos de listagem + conteudo completo serializado."""
    id: uuid.UUID
    criada_em: datetime
    tipo_cliente: str
    empresa: str | None
    cnpj: str | None
    faturamento_mensal: Decimal
    melhor_cenario: str | None
    conteudo: dict[str, Any] = field(repr=False)
