# components/forms.py  (campos prontos com label flutuante)
from __future__ import annotations
import flet as ft

from components.inputs import FloatingLabelInput
from components.styles import GlobalStyles

# ----------------- padrões de máscara -----------------
PATTERNS = {
    "phone": "(99) 99999-9999",
    "date":  "99/99/9999",
    "card":  "9999 9999 9999 9999",
    "cpf":   "999.999.999-99",
    "cnpj":  "99.999.999/9999-99",
    "cep":   "99999-999",
}

# ----------------- componentes visuais -----------------
def FieldRow(label: str, control: ft.Control, width: int | None = None) -> ft.Container:
    return ft.Container(
        width=width,
        content=ft.Column(
            spacing=4,
            controls=[
                ft.Text(label, size=12, color=ft.Colors.ON_SURFACE_VARIANT),
                control,
            ],
        ),
    )

def section_card(title: str, child: ft.Control) -> ft.Container:
    return ft.Container(
        bgcolor=ft.Colors.with_opacity(0.04, ft.Colors.ON_SURFACE),
        border_radius=16,
        padding=16,
        content=ft.Column(
            spacing=12,
            controls=[ft.Text(title, size=14, weight=ft.FontWeight.W_700), child],
        ),
    )

def snack_ok(page: ft.Page, msg: str) -> None:
    page.snack_bar = ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.GREEN_600)
    page.snack_bar.open = True
    page.update()

def snack_err(page: ft.Page, msg: str) -> None:
    page.snack_bar = ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.ERROR)
    page.snack_bar.open = True
    page.update()

# ----------------- inputs -----------------
def _controlled(inp: FloatingLabelInput, on_change=None) -> FloatingLabelInput:
    """Realimenta o valor formatado (disciplina de componente controlado)."""
    def _feed(v: str):
        inp.set_value(v)
        if on_change:
            on_change(v)
    inp.on_change_text = _feed
    return inp

def text_input(label: str, value: str = "", on_change=None, styles: GlobalStyles | None = None, **kw) -> FloatingLabelInput:
    return _controlled(FloatingLabelInput(label=label, value=value or "", global_styles=styles, **kw), on_change)

def password_input(label: str = "Senha", value: str = "", dark_theme: bool = False, on_submit=None,
                   styles: GlobalStyles | None = None) -> FloatingLabelInput:
    return text_input(label, value, is_password=True, dark_theme=dark_theme, on_submit=on_submit, styles=styles)

def masked_input(label: str, kind: str, value: str = "", on_change=None,
                 styles: GlobalStyles | None = None) -> FloatingLabelInput:
    # phone/date/card têm mask_type próprio; documentos vão só com o padrão
    mask_type = kind if kind in ("phone", "date", "card") else None
    return text_input(label, value, on_change=on_change, styles=styles,
                      mask=PATTERNS[kind], mask_type=mask_type, keyboard_type=ft.KeyboardType.NUMBER)

def phone_input(label: str = "Telefone", value: str = "", **kw) -> FloatingLabelInput:
    return masked_input(label, "phone", value, **kw)

def date_input(label: str = "Data (dd/mm/aaaa)", value: str = "", **kw) -> FloatingLabelInput:
    return masked_input(label, "date", value, **kw)

def card_input(label: str = "Cartão", value: str = "", **kw) -> FloatingLabelInput:
    return masked_input(label, "card", value, **kw)

def document_input(label: str, kind: str = "cpf", value: str = "", **kw) -> FloatingLabelInput:
    if kind not in ("cpf", "cnpj", "cep"):
        raise ValueError(f"documento sem padrão: {kind!r}")
    return masked_input(label, kind, value, **kw)

def currency_input(label: str, value: str = "", divider: str = ".", on_change=None,
                   styles: GlobalStyles | None = None) -> FloatingLabelInput:
    return text_input(label, value, on_change=on_change, styles=styles, mask_type="currency",
                      currency_divider=divider, keyboard_type=ft.KeyboardType.NUMBER)
