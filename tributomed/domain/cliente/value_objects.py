# tributomed/domain/cliente/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import StrEnum


class TipoCliente(StrEnum):
    NOVA_EMPRESA = "Novo aberturas de empresa"
    TRANSFERENCIA = "Transferencias de contabilidade"


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    pesos_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    resto = sum(int(d) * p for d, p in zip(digitos[:12], pesos_1)) % 11
    d1 = 0 if resto < 2 else 11 - resto
    if int(digitos[12]) != d1:
        return False

    pesos_2 = [6, *pesos_1]
    resto = sum(int(d) * p for d, p in zip(digitos[:13], pesos_2)) % 11
    d2 = 0 if resto < 2 else 11 - resto
    return int(digitos[13]) == d2


def somente_digitos(raw: str) -> str:
    return "".join(c for c in raw if c.isdigit())


@dataclass(frozen=True)
class CNPJ:
    """CNPJ do cliente. Valida digitos verificadores no construtor."""

    _valor: str

    def __init__(self, raw: str) -> None:
        digitos = somente_digitos(raw)
        if len(digitos) != 14:
            raise ValueError(f"CNPJ invalido: comprimento {len(digitos)}, esperado 14")
        if len(set(digitos)) == 1:
            raise ValueError("CNPJ invalido: todos digitos iguais")
        if not _verificar_cnpj(digitos):
            raise ValueError("CNPJ invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        d = self._valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def __str__(self) -> str:
        return self.formatado


def parse_decimal_br(raw: str | None) -> Decimal | None:
    """Converte valor digitado no formato brasileiro ("12.500,50") em Decimal.

    Pontos sao separadores de milhar e a virgula e o separador decimal.
    Vazio ou None devolve None.

    Raises:
        ValueError: texto que nao representa um numero.
    """
    if raw is None or not raw.strip():
        return None
    texto = raw.strip().replace("R$", "").replace(" ", "").replace(".", "").replace(",", ".")
    try:
        valor = Decimal(texto)
    except InvalidOperation as err:
        raise ValueError(f"Valor monetario invalido: {raw!r}") from err
    if not valor.is_finite():
        raise ValueError(f"Valor monetario invalido: {raw!r}")
    return valor


def formatar_cnae(codigo: str | int) -> str:
    """'8630503' -> '8630-5/03'. Codigos fora do padrao sao devolvidos como vieram."""
    digitos = somente_digitos(str(codigo)).zfill(7)
    if len(digitos) != 7:
        return str(codigo)
    return f"{digitos[:4]}-{digitos[4]}/{digitos[5:]}"
