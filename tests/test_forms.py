"""Tests for the form field presets."""

import pytest

from components.forms import (
    PATTERNS,
    card_input,
    currency_input,
    date_input,
    document_input,
    password_input,
    phone_input,
    text_input,
)
from components.masks import MaskKind


def _type(inp, keys: str) -> None:
    for ch in keys:
        inp._field.value = (inp._field.value or "") + ch
        inp._on_change()


def test_phone_preset() -> None:
    seen: list[str] = []
    inp = phone_input(on_change=seen.append)
    _type(inp, "11987654321")
    assert inp.value == "(11) 98765-4321"
    assert seen[-1] == "(11) 98765-4321"
    assert inp._field.max_length == len(PATTERNS["phone"])


def test_date_and_card_presets() -> None:
    d = date_input()
    _type(d, "31122024")
    assert d.value == "31/12/2024"
    c = card_input()
    _type(c, "4111111111111111")
    assert c.value == "4111 1111 1111 1111"


@pytest.mark.parametrize(
    "kind, keys, expected",
    [
        ("cpf", "12345678901", "123.456.789-01"),
        ("cnpj", "12345678000195", "12.345.678/0001-95"),
        ("cep", "01310100", "01310-100"),
    ],
)
def test_document_presets(kind: str, keys: str, expected: str) -> None:
    inp = document_input("Doc", kind)
    _type(inp, keys)
    assert inp.value == expected


def test_document_preset_requires_known_kind() -> None:
    with pytest.raises(ValueError):
        document_input("Doc", "rg")


def test_currency_preset_defaults_to_dot_divider() -> None:
    inp = currency_input("Valor")
    assert inp.spec.kind is MaskKind.CURRENCY
    _type(inp, "1234567,89")
    assert inp.value == "1.234.567,89"


def test_text_and_password_presets() -> None:
    t = text_input("Nome", value="Ana")
    assert t.floating
    _type(t, "!")
    assert t.value == "Ana!"
    p = password_input()
    assert p.is_password and p._field.password
