from __future__ import annotations
import random
from typing import Optional, Sequence, Tuple

from ..errors import InvalidDocument
from ..utils.checksum import check_digit_from_sum, digit_value, extract_values, weighted_sum
from ..utils.layout import to_compact
from ..utils.random_source import DIGITS, draw, resolve_rng

KIND = "CNH"
COMPACT_LENGTH = 11

FIRST_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 10)
SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 10, 11, 2)


def check_digits(payload: Sequence[int]) -> Tuple[int, int]:
    sum1 = weighted_sum(payload, FIRST_WEIGHTS)
    d1 = check_digit_from_sum(sum1)
    # SECOND_WEIGHTS[i] == FIRST_WEIGHTS[i] + 1 nas 9 primeiras posições,
    # então a segunda soma é sum1 + soma dos dígitos + 2 * d1
    d2 = check_digit_from_sum(sum1 + sum(payload) + 2 * d1)
    return d1, d2


def compact_cnh(cnh: str) -> Optional[str]:
    """CNH não tem forma pontuada: só 11 dígitos."""
    raw = to_compact(cnh, COMPACT_LENGTH)
    if raw is None:
        return None
    values = extract_values(raw, digit_value)
    if values is None:
        return None
    if check_digits(values[:9]) != (values[9], values[10]):
        return None
    return raw


def is_valid_cnh(cnh: str) -> bool:
    return compact_cnh(cnh) is not None


def format_cnh(cnh: str) -> str:
    raw = compact_cnh(cnh)
    if raw is None:
        raise InvalidDocument(KIND, cnh)
    return raw


def generate_cnh(rng: Optional[random.Random] = None) -> str:
    payload = draw(resolve_rng(rng), DIGITS, 9)
    d1, d2 = check_digits([int(c) for c in payload])
    return f"{payload}{d1}{d2}"
