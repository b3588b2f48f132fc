from __future__ import annotations
import random
from typing import Optional

from ..errors import InvalidDocument
from ..utils.checksum import digit_value, extract_values, weighted_sum
from ..utils.layout import insert_separators, to_compact
from ..utils.random_source import DIGITS, draw, resolve_rng

KIND = "CNS"
COMPACT_LENGTH = 15
LAYOUT = {3: " ", 8: " ", 13: " "}  # XXX XXXX XXXX XXXX

LEADING_DIGITS = "12789"
WEIGHTS = tuple(range(15, 0, -1))  # 15, 14, ..., 1


def compact_cns(cns: str) -> Optional[str]:
    """
    Retorna os 15 dígitos de um CNS válido ou None.

    O CNS não tem dígito verificador separado: a soma ponderada (pesos 15..1)
    dos 15 dígitos precisa ser múltipla de 11. O primeiro dígito deve ser
    1 ou 2 (definitivo) ou 7, 8, 9 (provisório).
    """
    raw = to_compact(cns, COMPACT_LENGTH, {18: LAYOUT})
    if raw is None or raw[0] not in LEADING_DIGITS:
        return None
    values = extract_values(raw, digit_value)
    if values is None:
        return None
    if weighted_sum(values, WEIGHTS) % 11 != 0:
        return None
    return raw


def is_valid_cns(cns: str) -> bool:
    return compact_cns(cns) is not None


def format_cns(cns: str) -> str:
    raw = compact_cns(cns)
    if raw is None:
        raise InvalidDocument(KIND, cns)
    return insert_separators(raw, LAYOUT)


def generate_cns(rng: Optional[random.Random] = None) -> str:
    """
    Gera um CNS formatado: 11 dígitos sorteados + '000' (ou '001') + dv.

    Quando o dv calculado daria 10, soma-se 2 ao total (o '1' na posição de
    peso 2) e o dv é recalculado com o novo resto.
    """
    rng = resolve_rng(rng)
    payload = rng.choice(LEADING_DIGITS) + draw(rng, DIGITS, 10)
    total = weighted_sum([int(c) for c in payload], WEIGHTS[:11])

    infix = "000"
    dv = 11 - total % 11
    if dv == 11:
        dv = 0
    elif dv == 10:
        total += 2
        infix = "001"
        dv = 11 - total % 11

    return insert_separators(f"{payload}{infix}{dv}", LAYOUT)
