# === services/settings.py ===
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    theme: str = "dark"       # "light" | "dark"
    view: str = "app"         # "app" (janela nativa) | "web" (navegador)
    port: int = 0             # 0 = o sistema escolhe uma porta livre
    minimal: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        level = (env.get("FLI_LOG_LEVEL") or "").strip().upper()
        theme = (env.get("FLI_THEME") or "").strip().lower()
        view = (env.get("FLI_VIEW") or "").strip().lower()
        try:
            port = int(env.get("PORT", "0"))
        except ValueError:
            port = 0
        return cls(
            log_level=level if level in _LEVELS else cls.log_level,
            theme=theme if theme in ("light", "dark") else cls.theme,
            view=view if view in ("app", "web") else cls.view,
            port=max(port, 0),
            minimal=env.get("APP_MINIMAL") == "1",
        )


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(settings.log_level)
    logging.getLogger(__name__).debug("logging em %s", settings.log_level)
