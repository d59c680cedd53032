# tests/domain/test_cliente_vo.py
import dataclasses
from decimal import Decimal

import pytest

from tributomed.domain.cliente.value_objects import CNPJ, formatar_cnae, parse_decimal_br


def test_cnpj_valido_formatado():
    cnpj = CNPJ("11.222.333/0001-81")
    assert cnpj.valor == "11222333000181"
    assert str(cnpj) == "11.222.333/0001-81"


def test_cnpj_digitos_verificadores_invalidos():
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    with pytest.raises(ValueError):
        CNPJ("11111111111111")


def test_cnpj_comprimento_errado():
    with pytest.raises(ValueError, match="comprimento"):
        CNPJ("123")


def test_cnpj_imutavel_e_igual_por_valor():
    a = CNPJ("11222333000181")
    b = CNPJ("11.222.333/0001-81")
    assert a == b
    with pytest.raises(dataclasses.FrozenInstanceError):
        a._valor = "outro"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("raw", "esperado"),
    [
        ("12.500,50", Decimal("12500.50")),
        ("R$ 1.000", Decimal("1000")),
        ("30000", Decimal("30000")),
        ("5,5", Decimal("5.5")),
    ],
)
def test_parse_decimal_br(raw, esperado):
    assert parse_decimal_br(raw) == esperado


def test_parse_decimal_br_vazio():
    assert parse_decimal_br(None) is None
    assert parse_decimal_br("   ") is None


def test_parse_decimal_br_invalido():
    with pytest.raises(ValueError, match="Valor monetario invalido"):
        parse_decimal_br("doze mil")


def test_formatar_cnae():
    assert formatar_cnae("8630503") == "8630-5/03"
    assert formatar_cnae(8630503) == "8630-5/03"
    assert formatar_cnae("8630-5/03") == "8630-5/03"
    assert formatar_cnae("123456789") == "123456789"
