# === components/styles.py ===
from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional

LABEL_COLOR = "#49658c"


@dataclass(frozen=True)
class LabelStyle:
    """Posição/tamanho/cor do label nos dois estados (flutuando x repouso)."""
    left_focused: float = 15
    left_blurred: float = 15
    top_focused: float = 0
    top_blurred: float = 18
    font_size_focused: float = 10
    font_size_blurred: float = 14
    color_focused: str = LABEL_COLOR
    color_blurred: str = LABEL_COLOR

    def merged(self, overrides: Optional[Dict[str, Any]]) -> "LabelStyle":
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"custom_label_styles com chaves desconhecidas: {sorted(unknown)}")
        return replace(self, **overrides)


@dataclass(frozen=True)
class GlobalStyles:
    """
    Estilos compartilhados por todos os campos de uma tela.
    Os dicts são repassados como kwargs para os controles do Flet.
    """
    container: Dict[str, Any] = field(default_factory=dict)
    label: Dict[str, Any] = field(default_factory=dict)
    input: Dict[str, Any] = field(default_factory=dict)
    custom_label: Dict[str, Any] = field(default_factory=dict)
    show_password_container: Dict[str, Any] = field(default_factory=dict)
    show_password_image: Dict[str, Any] = field(default_factory=dict)


def resolve_styles(global_styles: Optional[GlobalStyles], instance: Optional[GlobalStyles]) -> GlobalStyles:
    """Instância > global > padrão. Não altera nenhum dos dois."""
    g = global_styles or GlobalStyles()
    i = instance or GlobalStyles()
    return GlobalStyles(**{
        f.name: {**getattr(g, f.name), **getattr(i, f.name)}
        for f in fields(GlobalStyles)
    })

def resolve_label_style(styles: GlobalStyles) -> LabelStyle:
    return LabelStyle().merged(styles.custom_label)

def label_props(style: LabelStyle, floating: bool) -> dict:
    if floating:
        return dict(left=style.left_focused, top=style.top_focused,
                    size=style.font_size_focused, color=style.color_focused)
    return dict(left=style.left_blurred, top=style.top_blurred,
                size=style.font_size_blurred, color=style.color_blurred)
