# pages/cadastro.py — cadastro com campos de label flutuante
from __future__ import annotations
import flet as ft

from components.forms import (
    card_input, date_input, document_input, password_input, phone_input,
    section_card, snack_err, snack_ok, text_input,
)
from components.styles import GlobalStyles
from theme import is_dark

STYLES = GlobalStyles(container={"width": 360})


def build(page: ft.Page) -> ft.Control:
    nome = text_input("Nome completo", styles=STYLES)
    email = text_input("E-mail", styles=STYLES, keyboard_type=ft.KeyboardType.EMAIL)
    telefone = phone_input(styles=STYLES)
    nascimento = date_input("Data de nascimento", styles=STYLES)
    cpf = document_input("CPF", "cpf", styles=STYLES)
    cartao = card_input(styles=STYLES)

    def salvar(e=None):
        faltando = [f.label for f in (nome, email, telefone) if not f.value.strip()]
        if faltando:
            snack_err(page, "Preencha: " + ", ".join(faltando))
            return
        snack_ok(page, f"Cadastro de {nome.value} salvo")

    senha = password_input(dark_theme=not is_dark(page), on_submit=salvar, styles=STYLES)

    # ícone do mostrar/ocultar acompanha o tema
    page.data = dict(page.data or {}, password_fields=[senha])

    pessoais = ft.Column(spacing=12, controls=[nome.control(), email.control(), senha.control()])
    contato = ft.Column(spacing=12, controls=[
        telefone.control(), nascimento.control(), cpf.control(), cartao.control(),
    ])
    return ft.Column(
        spacing=16,
        scroll=ft.ScrollMode.AUTO,
        expand=True,
        controls=[
            section_card("Dados pessoais", pessoais),
            section_card("Contato e documentos", contato),
            ft.Row(controls=[ft.ElevatedButton("Salvar", icon=ft.Icons.SAVE, on_click=salvar)]),
        ],
    )
