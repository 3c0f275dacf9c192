# === components/focus_label.py ===
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class External:
    focused: bool


@dataclass(frozen=True)
class Internal:
    pass


INTERNAL = Internal()
FocusSource = Union[External, Internal]


def source_of(is_focused: bool | None) -> FocusSource:
    return INTERNAL if is_focused is None else External(bool(is_focused))

def is_label_floating(source: FocusSource, internal_focused: bool, value: str | None) -> bool:
    if isinstance(source, External):
        return source.focused
    return internal_focused or bool(value)


class FocusLabelController:
    """
    Estado do label flutuante de um campo.
    - `source` externo (is_focused do chamador) sempre vence
    - foco/blur internos continuam sendo registrados por baixo
    - `on_transition(floating)` dispara só quando o estado visível muda
    """
    def __init__(self, value: str | None = None, is_focused: bool | None = None,
                 on_transition: Optional[Callable[[bool], None]] = None):
        self.source: FocusSource = source_of(is_focused)
        self.internal_focused = False
        self.value = value
        self.on_transition = on_transition
        # foco real do campo (o internal_focused só cai no blur se estiver vazio)
        self._has_focus = False
        self._floating = self.floating

    @property
    def floating(self) -> bool:
        return is_label_floating(self.source, self.internal_focused, self.value)

    # -------- eventos --------
    def focus_gained(self) -> bool:
        self._has_focus = True
        self.internal_focused = True
        return self._recompute()

    def focus_lost(self) -> bool:
        self._has_focus = False
        if not self.value:
            self.internal_focused = False
        return self._recompute()

    def set_external(self, is_focused: bool | None) -> bool:
        self.source = source_of(is_focused)
        return self._recompute()

    def value_changed(self, value: str | None) -> bool:
        self.value = value
        if not value and not self._has_focus:
            self.internal_focused = False
        return self._recompute()

    def _recompute(self) -> bool:
        now = self.floating
        if now != self._floating:
            self._floating = now
            log.debug("label %s", "flutuando" if now else "em repouso")
            if self.on_transition:
                self.on_transition(now)
        return now
