# components/inputs.py — campo com label flutuante e máscara
from __future__ import annotations
import logging
from typing import Callable, Optional
import flet as ft

from components.focus_label import FocusLabelController
from components.mask_router import accepts, route
from components.masks import MaskSpec
from components.styles import GlobalStyles, label_props, resolve_label_style, resolve_styles

log = logging.getLogger(__name__)

LABEL_ANIMATION = ft.Animation(220, ft.AnimationCurve.EASE_OUT)


def _safe_update(ctrl: ft.Control) -> None:
    try:
        ctrl.update()
    except AssertionError:
        # controle ainda não está na página
        pass


class FloatingLabelInput:
    """
    TextField com label que flutua no foco/conteúdo e máscara opcional.
    - mask + mask_type != "currency": máscara por padrão ("(99) 99999-9999")
    - mask_type="currency": agrupamento de milhar com currency_divider
    - value=None: campo não controlado (guarda o texto formatado sozinho)
    - value="...": controlado; o valor só muda via set_value() no callback
    """
    def __init__(
        self,
        label: str,
        value: str | None = None,
        on_change_text: Optional[Callable[[str], None]] = None,
        on_submit: Optional[Callable[[], None]] = None,
        mask: str | None = None,
        mask_type: str | None = None,
        currency_divider: str | None = None,
        is_focused: bool | None = None,
        is_password: bool = False,
        dark_theme: bool = False,
        custom_show_password_icon: str | None = None,
        styles: GlobalStyles | None = None,
        global_styles: GlobalStyles | None = None,
        **field_kwargs,
    ):
        self.label = label
        self.spec = MaskSpec.from_config(mask_type, mask, currency_divider)
        self.on_change_text = on_change_text
        self.on_submit = on_submit
        self.is_password = is_password
        self.dark_theme = dark_theme
        self.custom_show_password_icon = custom_show_password_icon
        self.styles = resolve_styles(global_styles, styles)
        self._label_style = resolve_label_style(self.styles)

        self._controlled = value is not None
        self._value = value
        self._shown = value or ""
        self.secure = True

        self._focus = FocusLabelController(value=value, is_focused=is_focused,
                                           on_transition=self._on_label_transition)
        self._build(field_kwargs)

    # -------- API pública --------
    def control(self) -> ft.Control:
        return self._container

    @property
    def value(self) -> str:
        return self._shown

    @property
    def floating(self) -> bool:
        return self._focus.floating

    def set_value(self, value: str | None) -> None:
        self._value = value
        self._shown = value or ""
        self._field.value = self._shown
        self._focus.value_changed(value)
        _safe_update(self._field)

    def set_focused(self, is_focused: bool | None) -> None:
        self._focus.set_external(is_focused)

    def focus(self) -> None:
        try:
            self._field.focus()
        except AssertionError:
            log.debug("focus() ignorado: campo '%s' fora da página", self.label)

    def blur(self) -> None:
        blur = getattr(self._field, "blur", None)
        if callable(blur):
            try:
                blur()
            except AssertionError:
                log.debug("blur() ignorado: campo '%s' fora da página", self.label)
        else:
            # Flet 0.28 não tem blur() no TextField
            self._on_blur()

    def set_dark_theme(self, dark_theme: bool) -> None:
        self.dark_theme = dark_theme
        if self._toggle_btn is not None:
            self._toggle_btn.icon_color = ft.Colors.BLACK if dark_theme else ft.Colors.WHITE
            _safe_update(self._toggle_btn)

    def toggle_visibility(self) -> None:
        self.secure = not self.secure
        self._field.password = self.is_password and self.secure
        if self._toggle_btn is not None:
            self._toggle_btn.icon = self._toggle_icon()
            _safe_update(self._toggle_btn)
        _safe_update(self._field)

    # -------- eventos do TextField --------
    def _on_change(self, e=None):
        raw = self._field.value or ""
        previous = self._shown
        if not accepts(self.spec, previous, raw):
            log.debug("campo '%s': edição recusada (%d > %s)", self.label, len(raw), self.spec.max_length)
            self._field.value = previous
            _safe_update(self._field)
            return

        formatted = route(self.spec, previous, raw)
        if not self._controlled:
            self._shown = formatted
            self._field.value = formatted
            self._focus.value_changed(formatted)
        if self.on_change_text:
            self.on_change_text(formatted)
        if self._controlled:
            # sem set_value no callback o campo volta ao valor controlado
            self._field.value = self._shown
        _safe_update(self._field)

    def _on_focus(self, e=None):
        self._focus.focus_gained()

    def _on_blur(self, e=None):
        self._focus.focus_lost()

    def _on_submit(self, e=None):
        if self.on_submit is not None:
            self.on_submit()

    def _on_label_transition(self, floating: bool) -> None:
        self._apply_label(floating)
        _safe_update(self._label_box)

    # -------- construção --------
    def _apply_label(self, floating: bool) -> None:
        props = {**label_props(self._label_style, floating), **self.styles.label}
        self._label_box.left = props.pop("left")
        self._label_box.top = props.pop("top")
        for k, v in props.items():
            setattr(self._label, k, v)

    def _toggle_icon(self) -> str:
        if self.custom_show_password_icon is not None:
            return self.custom_show_password_icon
        return ft.Icons.VISIBILITY if self.secure else ft.Icons.VISIBILITY_OFF

    def _build(self, field_kwargs: dict) -> None:
        field_opts = dict(
            color=self._label_style.color_focused,
            border=ft.InputBorder.NONE,
            dense=True,
            content_padding=ft.padding.only(left=15, top=22, right=48 if self.is_password else 15, bottom=8),
        )
        field_opts.update(self.styles.input)
        field_opts.update(field_kwargs)
        self._field = ft.TextField(
            value=self._shown,
            max_length=self.spec.max_length,
            password=self.is_password and self.secure,
            on_change=self._on_change,
            on_focus=self._on_focus,
            on_blur=self._on_blur,
            on_submit=self._on_submit,
            **field_opts,
        )

        self._label = ft.Text(self.label)
        self._label_box = ft.Container(
            content=self._label,
            animate_position=LABEL_ANIMATION,
            on_click=lambda e: self.focus(),
        )
        self._apply_label(self._focus.floating)

        controls: list[ft.Control] = [self._field, self._label_box]
        self._toggle_btn: ft.IconButton | None = None
        if self.is_password:
            self._toggle_btn = ft.IconButton(
                icon=self._toggle_icon(),
                icon_color=ft.Colors.BLACK if self.dark_theme else ft.Colors.WHITE,
                on_click=lambda e: self.toggle_visibility(),
                **self.styles.show_password_image,
            )
            controls.append(ft.Container(right=4, top=4, content=self._toggle_btn,
                                         **self.styles.show_password_container))

        container_opts = dict(
            border=ft.border.all(1, ft.Colors.with_opacity(0.3, ft.Colors.ON_SURFACE)),
            border_radius=8,
            height=58,
        )
        container_opts.update(self.styles.container)
        self._container = ft.Container(content=ft.Stack(controls=controls), **container_opts)
