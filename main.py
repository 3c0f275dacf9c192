from __future__ import annotations
import importlib
import logging
import traceback
from dataclasses import dataclass
from pathlib import Path
import flet as ft

from services.settings import Settings, setup_logging
from theme import apply_theme, build_theme_toggle

log = logging.getLogger(__name__)


NAV = [
    ("cadastro",  "Cadastro",  ft.Icons.PERSON),
    ("pagamento", "Pagamento", ft.Icons.PAYMENTS),
]

@dataclass
class UIState:
    collapsed: bool = False
    current_key: str = NAV[0][0]


# ======================== HELPERS ========================
def page_factory(module_name: str):
    mod = importlib.import_module(module_name)
    for fn in ("build", "view", "page"):
        if hasattr(mod, fn):
            return getattr(mod, fn)
    raise AttributeError(f"{module_name} não possui função de fábrica compatível.")

def _sync_password_icons(page: ft.Page, dark: bool) -> None:
    for f in (page.data or {}).get("password_fields", []):
        f.set_dark_theme(not dark)


# ======================== APP ========================
def main(page: ft.Page, settings: Settings | None = None):
    settings = settings or Settings.from_env()
    setup_logging(settings)

    # “modo mínimo” de diagnóstico, se necessário
    if settings.minimal:
        page.add(ft.Container(padding=20, content=ft.Text("Minimal OK", size=20, weight=ft.FontWeight.W_700)))
        return

    page.title = "Floating Label Input"
    page.padding = 0
    page.spacing = 0
    apply_theme(page, settings.theme)

    state = UIState()
    PAGES = {k: f"pages.{k}" for (k, *_ ) in NAV}
    PAGE_CACHE: dict[str, callable] = {}

    theme_btn = build_theme_toggle(page, on_change=lambda dark: _sync_password_icons(page, dark))

    header = ft.Container(
        height=64,
        padding=ft.padding.symmetric(horizontal=12, vertical=8),
        content=ft.Row(
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
            controls=[
                ft.Text("FLOATING LABEL INPUT", weight=ft.FontWeight.W_700, size=15),
                theme_btn,
            ],
        ),
    )

    host = ft.Container(expand=True)
    content = ft.Container(expand=True, padding=10, content=host)

    # ---------- sidebar ----------
    collapse_btn = ft.IconButton(icon=ft.Icons.CHEVRON_LEFT, tooltip="Recolher/Expandir menu")

    def nav_button(key: str, label: str, icon):
        text = ft.Text(label, size=14, visible=not state.collapsed, no_wrap=True)
        return ft.TextButton(
            data=key,
            style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=8),
                                 padding=ft.padding.symmetric(6, 10)),
            content=ft.Row(spacing=10, controls=[ft.Icon(icon, size=22), text]),
            on_click=lambda e: render(key),
        )

    nav_list = ft.Column(spacing=4, expand=True)
    def rebuild_nav():
        nav_list.controls = [nav_button(k, lbl, ic) for (k, lbl, ic) in NAV]

    sidebar = ft.Container(
        padding=ft.padding.all(10),
        width=200,
        content=ft.Column(expand=True, spacing=10, controls=[collapse_btn, nav_list]),
    )

    def toggle_sidebar(e=None):
        state.collapsed = not state.collapsed
        sidebar.width = 72 if state.collapsed else 200
        collapse_btn.icon = ft.Icons.CHEVRON_RIGHT if state.collapsed else ft.Icons.CHEVRON_LEFT
        rebuild_nav()
        page.update()

    collapse_btn.on_click = toggle_sidebar
    rebuild_nav()

    page.add(ft.Container(
        expand=True,
        content=ft.Column(spacing=0, expand=True, controls=[
            header,
            ft.Divider(height=1),
            ft.Row(spacing=0, expand=True, controls=[
                sidebar,
                ft.VerticalDivider(width=1),
                ft.Container(expand=True, content=content),
            ]),
        ]),
    ))

    # ---------- render de página ----------
    def get_builder(key: str):
        if key not in PAGE_CACHE:
            try:
                PAGE_CACHE[key] = page_factory(PAGES[key])
            except Exception as ex:
                log.exception("falha ao carregar página '%s'", key)
                def _err(_page: ft.Page, ex=ex):
                    return ft.Container(
                        padding=20,
                        content=ft.Column(spacing=8, controls=[
                            ft.Text(f"Falha ao carregar '{key}'", color="#B00020", weight=ft.FontWeight.W_700),
                            ft.Text(str(ex), size=12),
                        ]),
                    )
                PAGE_CACHE[key] = _err
        return PAGE_CACHE[key]

    def view_of(key: str):
        builder = get_builder(key)
        try:
            v = builder(page)
        except Exception as ex:
            log.exception("erro ao montar página '%s'", key)
            v = ft.Container(padding=20, content=ft.Text(f"Erro ao montar '{key}': {ex}", color="#B00020"))
        return v if isinstance(v, ft.Control) else ft.Column(controls=[v], expand=True)

    def render(key: str):
        state.current_key = key
        page.data = {}
        host.content = view_of(key)
        page.update()

    # ---------- primeira pintura ----------
    try:
        render(state.current_key)
    except Exception:
        err = traceback.format_exc()
        log.error("primeira pintura falhou:\n%s", err)
        host.content = ft.Container(padding=20, content=ft.Text(err, color="#B00020", selectable=True))
        page.update()


if __name__ == "__main__":
    ROOT = Path(__file__).resolve().parent
    ft.app(target=main, view=ft.AppView.FLET_APP, assets_dir=str(ROOT))
