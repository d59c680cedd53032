# tributomed/domain/texto.py
from __future__ import annotations

import unicodedata
from decimal import Decimal


def normalizar(texto: str) -> str:
    """Maiusculas, sem acentos e sem espacos nas pontas: ' São Paulo' -> 'SAO PAULO'."""
    decomposto = unicodedata.normalize("NFD", texto.strip().upper())
    return "".join(c for c in decomposto if not unicodedata.combining(c))


def formatar_numero_br(valor: Decimal) -> str:
    """Decimal com separadores brasileiros: 1234567.5 -> '1.234.567,50'."""
    return f"{valor:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
