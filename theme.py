# === theme.py — Flet 0.28.x (tema claro/escuro com persistência) ===
from __future__ import annotations
from typing import Callable, Optional
import flet as ft

_STORAGE_KEY = "theme_mode"  # "light" | "dark"

def _current_pref(page: ft.Page, default: str = "dark") -> str:
    try:
        v = page.client_storage.get(_STORAGE_KEY)
        if v in ("light", "dark"):
            return v
    except Exception:
        pass
    return default

def _apply_palette(page: ft.Page, mode: str):
    page.theme = ft.Theme(use_material3=True)
    page.theme_mode = ft.ThemeMode.DARK if mode == "dark" else ft.ThemeMode.LIGHT

def is_dark(page: ft.Page) -> bool:
    return page.theme_mode == ft.ThemeMode.DARK

def apply_theme(page: ft.Page, default: str = "dark") -> None:
    _apply_palette(page, _current_pref(page, default))
    page.update()

def build_theme_toggle(page: ft.Page, on_change: Optional[Callable[[bool], None]] = None) -> ft.IconButton:
    btn = ft.IconButton(tooltip="Alternar tema")

    def _sync_icon():
        btn.icon = ft.Icons.LIGHT_MODE if is_dark(page) else ft.Icons.DARK_MODE

    def _toggle(_):
        new_mode = "light" if is_dark(page) else "dark"
        _apply_palette(page, new_mode)
        try:
            page.client_storage.set(_STORAGE_KEY, new_mode)
        except Exception:
            pass
        _sync_icon()
        # campos de senha trocam a cor do ícone mostrar/ocultar
        if on_change:
            on_change(is_dark(page))
        page.update()

    btn.on_click = _toggle
    _sync_icon()
    return btn
