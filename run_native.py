# run_native.py — launcher (janela nativa ou navegador conforme FLI_VIEW)
from __future__ import annotations
import logging
from pathlib import Path
import flet as ft

from main import main as app_main
from services.settings import Settings, setup_logging

log = logging.getLogger("boot")


def launch(settings: Settings | None = None) -> None:
    settings = settings or Settings.from_env()
    setup_logging(settings)
    root = Path(__file__).resolve().parent
    view = ft.AppView.WEB_BROWSER if settings.view == "web" else ft.AppView.FLET_APP
    log.info("Starting Flet app | view=%s port=%s assets=%s", settings.view, settings.port, root)
    ft.app(
        target=lambda page: app_main(page, settings),
        view=view,
        assets_dir=str(root),
        port=settings.port,
    )


if __name__ == "__main__":
    launch()
