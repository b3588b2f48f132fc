from __future__ import annotations
import random
from typing import Optional, Sequence, Tuple

from ..errors import InvalidDocument
from ..utils.chars import to_upper_ascii
from ..utils.checksum import alnum_value, check_digit, digit_value, extract_values
from ..utils.config import cnpj_numeric_only
from ..utils.layout import insert_separators, to_compact
from ..utils.random_source import ALNUM_UPPER, DIGITS, draw, resolve_rng

KIND = "CNPJ"
COMPACT_LENGTH = 14
PAYLOAD_LENGTH = 12
LAYOUT = {2: ".", 6: ".", 10: "/", 15: "-"}  # XX.XXX.XXX/XXXX-XX

FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def check_digits(payload: Sequence[int]) -> Tuple[int, int]:
    """
    Dígitos verificadores para os 12 valores da raiz + ordem.
    No CNPJ alfanumérico cada letra entra com ord(letra) - ord('0').
    """
    d1 = check_digit(payload, FIRST_WEIGHTS)
    d2 = check_digit([*payload, d1], SECOND_WEIGHTS)
    return d1, d2


def compact_cnpj(cnpj: str, numeric_only: bool = False) -> Optional[str]:
    """
    Retorna os 14 caracteres (letras em maiúscula) de um CNPJ válido ou None.

    Aceita XXXXXXXXXXXXXX ou XX.XXX.XXX/XXXX-XX. As 12 primeiras posições
    podem ser letras (qualquer caixa) ou dígitos; as 2 últimas, só dígitos.
    Com `numeric_only=True` letras são recusadas.
    """
    raw = to_compact(cnpj, COMPACT_LENGTH, {18: LAYOUT})
    if raw is None:
        return None
    payload = extract_values(raw[:PAYLOAD_LENGTH], digit_value if numeric_only else alnum_value)
    if payload is None:
        return None
    dv = extract_values(raw[PAYLOAD_LENGTH:], digit_value)
    if dv is None:
        return None
    if check_digits(payload) != tuple(dv):
        return None
    return "".join(to_upper_ascii(ch) for ch in raw)


def is_valid_cnpj(cnpj: str, numeric_only: bool = False) -> bool:
    return compact_cnpj(cnpj, numeric_only) is not None


def format_cnpj(cnpj: str, numeric_only: bool = False) -> str:
    raw = compact_cnpj(cnpj, numeric_only)
    if raw is None:
        raise InvalidDocument(KIND, cnpj)
    return insert_separators(raw, LAYOUT)


def generate_cnpj(rng: Optional[random.Random] = None, numeric_only: Optional[bool] = None) -> str:
    """Gera um CNPJ formatado; sem `numeric_only` segue BRDOCS_CNPJ_NUMERIC_ONLY."""
    if numeric_only is None:
        numeric_only = cnpj_numeric_only()
    payload = draw(resolve_rng(rng), DIGITS if numeric_only else ALNUM_UPPER, PAYLOAD_LENGTH)
    d1, d2 = check_digits([alnum_value(ch) for ch in payload])
    return insert_separators(f"{payload}{d1}{d2}", LAYOUT)
