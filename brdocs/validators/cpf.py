from __future__ import annotations
import random
from typing import Optional, Sequence, Tuple

from ..errors import InvalidDocument
from ..utils.checksum import check_digit, digit_value, extract_values
from ..utils.layout import insert_separators, to_compact
from ..utils.random_source import DIGITS, draw, resolve_rng

KIND = "CPF"
COMPACT_LENGTH = 11
LAYOUT = {3: ".", 7: ".", 11: "-"}  # XXX.XXX.XXX-XX

FIRST_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_WEIGHTS = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)


def check_digits(payload: Sequence[int]) -> Tuple[int, int]:
    """Dígitos verificadores para os 9 primeiros dígitos do CPF."""
    d1 = check_digit(payload, FIRST_WEIGHTS)
    d2 = check_digit([*payload, d1], SECOND_WEIGHTS)
    return d1, d2


def compact_cpf(cpf: str) -> Optional[str]:
    """
    Retorna os 11 dígitos de um CPF válido ou None.
    Aceita XXXXXXXXXXX ou XXX.XXX.XXX-XX (separadores só nessas posições).
    """
    raw = to_compact(cpf, COMPACT_LENGTH, {14: LAYOUT})
    if raw is None:
        return None
    values = extract_values(raw, digit_value)
    if values is None:
        return None
    if check_digits(values[:9]) != (values[9], values[10]):
        return None
    return raw


def is_valid_cpf(cpf: str) -> bool:
    return compact_cpf(cpf) is not None


def format_cpf(cpf: str) -> str:
    raw = compact_cpf(cpf)
    if raw is None:
        raise InvalidDocument(KIND, cpf)
    return insert_separators(raw, LAYOUT)


def generate_cpf(rng: Optional[random.Random] = None) -> str:
    payload = draw(resolve_rng(rng), DIGITS, 9)
    d1, d2 = check_digits([int(c) for c in payload])
    return insert_separators(f"{payload}{d1}{d2}", LAYOUT)
