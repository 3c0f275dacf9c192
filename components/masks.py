# === components/masks.py ===
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)

_re_slot = re.compile(r"[0-9A-Za-z]")
_re_content = re.compile(r"[^0-9A-Za-z]+")

MASK_TYPES = ("currency", "phone", "date", "card")

# divisor de milhar -> separador decimal
_CURRENCY_PAIRS = {",": ".", ".": ","}


class MaskKind(str, Enum):
    NONE = "none"
    PATTERN = "pattern"
    CURRENCY = "currency"


@dataclass(frozen=True)
class Literal:
    char: str


@dataclass(frozen=True)
class Placeholder:
    pass


SLOT = Placeholder()


@dataclass(frozen=True)
class MaskSpec:
    """
    Configuração de máscara de um campo (imutável por render).
    - PATTERN: `pattern` com posições [0-9A-Za-z] e literais
    - CURRENCY: par `divider`/`decimal` (sem divisor o motor não roda)
    """
    kind: MaskKind = MaskKind.NONE
    pattern: str = ""
    divider: str | None = None
    decimal: str | None = None

    @classmethod
    def from_config(cls, mask_type: str | None = None, mask: str | None = None,
                    currency_divider: str | None = None) -> "MaskSpec":
        if mask_type is not None and mask_type not in MASK_TYPES:
            raise ValueError(f"mask_type inválido: {mask_type!r} (use {', '.join(MASK_TYPES)})")
        if currency_divider is not None and currency_divider not in _CURRENCY_PAIRS:
            raise ValueError(f"currency_divider inválido: {currency_divider!r} (use ',' ou '.')")

        if mask_type == "currency":
            if currency_divider is None:
                return cls(kind=MaskKind.CURRENCY, pattern=mask or "")
            return cls(kind=MaskKind.CURRENCY, pattern=mask or "",
                       divider=currency_divider, decimal=_CURRENCY_PAIRS[currency_divider])
        if mask:
            return cls(kind=MaskKind.PATTERN, pattern=mask)
        return cls()

    @property
    def max_length(self) -> int | None:
        return len(self.pattern) if self.pattern else None


# ----------------- máscara por padrão -----------------
def is_slot(ch: str) -> bool:
    return bool(_re_slot.fullmatch(ch))

def parse_pattern(pattern: str) -> list[Literal | Placeholder]:
    return [SLOT if is_slot(ch) else Literal(ch) for ch in pattern or ""]

def unmask(s: str) -> str:
    """Só o conteúdo digitado (letras e dígitos), sem os literais."""
    return _re_content.sub("", s or "")

def pattern_accepts(pattern: str, raw: str) -> bool:
    raw = raw or ""
    if len(raw) > len(pattern):
        return False
    slots = sum(1 for seg in parse_pattern(pattern) if seg is SLOT)
    return len(unmask(raw)) <= slots

def apply_pattern_mask(pattern: str, raw: str, previous: str = "") -> str:
    """
    Reconstrói o valor mascarado a cada edição:
    percorre os segmentos do padrão preenchendo cada posição com o próximo
    caractere digitado. Literais só entram quando existe um caractere depois
    deles, então apagar um separador não o faz reaparecer.
    Se a entrada estoura o padrão, a edição é recusada (devolve `previous`).
    """
    if not pattern_accepts(pattern, raw):
        log.debug("edição recusada: %r não cabe em %r", raw, pattern)
        return previous

    content = unmask(raw)
    out: list[str] = []
    pending: list[str] = []
    pos = 0
    for seg in parse_pattern(pattern):
        if pos >= len(content):
            break
        if isinstance(seg, Literal):
            pending.append(seg.char)
            continue
        out.extend(pending)
        pending.clear()
        out.append(content[pos])
        pos += 1
    return "".join(out)


# ----------------- máscara de moeda -----------------
def group_thousands(digits: str, divider: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups += [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return divider.join(g for g in groups if g)

def apply_currency_mask(divider: str | None, decimal: str | None,
                        previous: str | None, raw: str) -> str:
    raw = raw or ""
    if not divider or not decimal:
        return raw
    # apagando: deixa o campo agir sobre o texto agrupado
    if len(raw) <= len(previous or ""):
        return raw
    # com decimal o agrupamento congela
    if decimal in raw:
        return raw
    if len(raw) <= 3:
        return raw
    unmasked = raw.replace(divider, "").replace(decimal, "")
    return group_thousands(unmasked, divider)
