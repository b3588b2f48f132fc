from __future__ import annotations
import random
from typing import Optional

from ..errors import InvalidDocument
from ..utils.chars import is_digit
from ..utils.layout import insert_separators, to_compact
from ..utils.random_source import DIGITS, draw, resolve_rng

KIND = "CEP"
COMPACT_LENGTH = 8
LAYOUT = {5: "-"}  # XXXXX-XXX
DOTTED_LAYOUT = {2: ".", 6: "-"}  # XX.XXX-XXX


def compact_cep(cep: str) -> Optional[str]:
    """CEP só tem validação de formato: 8 dígitos, sem dígito verificador."""
    raw = to_compact(cep, COMPACT_LENGTH, {9: LAYOUT, 10: DOTTED_LAYOUT})
    if raw is None or not all(is_digit(ch) for ch in raw):
        return None
    return raw


def is_valid_cep(cep: str) -> bool:
    return compact_cep(cep) is not None


def format_cep(cep: str) -> str:
    raw = compact_cep(cep)
    if raw is None:
        raise InvalidDocument(KIND, cep)
    return insert_separators(raw, LAYOUT)


def generate_cep(rng: Optional[random.Random] = None) -> str:
    return insert_separators(draw(resolve_rng(rng), DIGITS, COMPACT_LENGTH), LAYOUT)
