# === components/mask_router.py ===
from __future__ import annotations
from components.masks import MaskKind, MaskSpec, apply_currency_mask, apply_pattern_mask, pattern_accepts


def accepts(spec: MaskSpec, previous: str | None, raw: str) -> bool:
    """False quando a edição deve ser descartada (sem callback)."""
    if spec.kind is MaskKind.PATTERN:
        return pattern_accepts(spec.pattern, raw)
    return True

def route(spec: MaskSpec, previous: str | None, raw: str) -> str:
    raw = raw or ""
    if spec.kind is MaskKind.PATTERN and spec.pattern:
        return apply_pattern_mask(spec.pattern, raw, previous or "")
    if spec.kind is MaskKind.CURRENCY and spec.divider:
        return apply_currency_mask(spec.divider, spec.decimal, previous, raw)
    return raw
