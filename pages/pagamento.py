# pages/pagamento.py — valores com máscara de moeda
from __future__ import annotations
import flet as ft

from components.forms import FieldRow, currency_input, document_input, section_card, snack_ok

_FOCO = {"auto": None, "flutuante": True, "repouso": False}


def build(page: ft.Page) -> ft.Control:
    resumo = ft.Text("", size=12, color=ft.Colors.ON_SURFACE_VARIANT)

    def _resumo(_=None):
        resumo.value = f"BRL: {valor_brl.value or '-'} | USD: {valor_usd.value or '-'}"
        try: resumo.update()
        except AssertionError: pass

    valor_brl = currency_input("Valor (R$)", divider=".", on_change=_resumo)
    valor_usd = currency_input("Amount (US$)", divider=",", on_change=_resumo)
    cep = document_input("CEP de cobrança", "cep")

    def _on_foco(e: ft.ControlEvent):
        forced = _FOCO.get(e.control.value)
        for f in (valor_brl, valor_usd, cep):
            f.set_focused(forced)

    foco = ft.Dropdown(
        width=220, dense=True, value="auto",
        options=[ft.dropdown.Option(k) for k in _FOCO],
        on_change=_on_foco,
    )

    campos = ft.Column(spacing=12, controls=[
        valor_brl.control(), valor_usd.control(), cep.control(), resumo,
    ])
    return ft.Column(
        spacing=16,
        expand=True,
        controls=[
            section_card("Pagamento", campos),
            section_card("Label", FieldRow("Foco externo (is_focused)", foco)),
            ft.Row(controls=[ft.ElevatedButton(
                "Confirmar", icon=ft.Icons.CHECK,
                on_click=lambda e: snack_ok(page, f"Pagamento de R$ {valor_brl.value or '0'} registrado"),
            )]),
        ],
    )
