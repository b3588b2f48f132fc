from __future__ import annotations
import random
from typing import Optional

from ..errors import InvalidDocument
from ..utils.chars import is_alnum_upper, is_digit, is_upper_alpha
from ..utils.layout import insert_separators, to_compact
from ..utils.random_source import ALNUM_UPPER, DIGITS, UPPER, draw, resolve_rng

KIND = "Placa"
COMPACT_LENGTH = 7
LAYOUT = {3: "-."}  # ABC-1234 (canônico) ou ABC.1234

LEGACY = "legacy"
MERCOSUL = "mercosul"

# LLL D X DD: a posição 4 é dígito no padrão antigo e letra ou dígito no Mercosul
_RULES = (
    is_upper_alpha, is_upper_alpha, is_upper_alpha,
    is_digit,
    is_alnum_upper,
    is_digit, is_digit,
)


def compact_plate(plate: str) -> Optional[str]:
    raw = to_compact(plate, COMPACT_LENGTH, {8: LAYOUT})
    if raw is None:
        return None
    if not all(rule(ch) for rule, ch in zip(_RULES, raw)):
        return None
    return raw


def is_valid_plate(plate: str) -> bool:
    return compact_plate(plate) is not None


def format_plate(plate: str) -> str:
    raw = compact_plate(plate)
    if raw is None:
        raise InvalidDocument(KIND, plate)
    return insert_separators(raw, LAYOUT)


def plate_format(plate: str) -> Optional[str]:
    """'legacy' (ABC1234), 'mercosul' (ABC1D23) ou None se inválida."""
    raw = compact_plate(plate)
    if raw is None:
        return None
    return LEGACY if is_digit(raw[4]) else MERCOSUL


def generate_plate(rng: Optional[random.Random] = None) -> str:
    rng = resolve_rng(rng)
    raw = draw(rng, UPPER, 3) + draw(rng, DIGITS, 1) + draw(rng, ALNUM_UPPER, 1) + draw(rng, DIGITS, 2)
    return insert_separators(raw, LAYOUT)
