from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence

from .chars import is_alnum_upper, is_digit, to_upper_ascii

ValueRule = Callable[[str], Optional[int]]


def digit_value(ch: str) -> Optional[int]:
    """Valor de um dígito ASCII; None para qualquer outro caractere."""
    if not is_digit(ch):
        return None
    return ord(ch) - ord("0")


def alnum_value(ch: str) -> Optional[int]:
    """
    Valor usado pelo CNPJ alfanumérico: código ASCII menos '0'.
    Dígitos valem 0..9 e letras (sem distinção de caixa) valem 17..42.
    """
    up = to_upper_ascii(ch)
    if not is_alnum_upper(up):
        return None
    return ord(up) - ord("0")


def extract_values(chars: Iterable[str], value_of: ValueRule) -> Optional[List[int]]:
    """
    Converte os caracteres em valores numéricos segundo `value_of`.
    Para no primeiro caractere rejeitado e retorna None, antes de qualquer conta.
    """
    values: List[int] = []
    for ch in chars:
        v = value_of(ch)
        if v is None:
            return None
        values.append(v)
    return values


def weighted_sum(values: Sequence[int], weights: Sequence[int]) -> int:
    if len(values) != len(weights):
        raise ValueError(f"{len(values)} valores para {len(weights)} pesos")
    return sum(v * w for v, w in zip(values, weights))


def check_digit_from_sum(total: int) -> int:
    # módulo 11: resto 0 ou 1 vira dígito 0
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def check_digit(values: Sequence[int], weights: Sequence[int]) -> int:
    return check_digit_from_sum(weighted_sum(values, weights))
