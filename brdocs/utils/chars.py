from __future__ import annotations

# Classificadores de caractere restritos a ASCII. Recebem um único caractere;
# qualquer outra coisa (string vazia, vários caracteres, não-str) é rejeitada.


def _single(ch: object) -> bool:
    return isinstance(ch, str) and len(ch) == 1


def is_digit(ch: str) -> bool:
    # str.isdigit() aceitaria "٣" e "²"
    return _single(ch) and "0" <= ch <= "9"


def is_upper_alpha(ch: str) -> bool:
    return _single(ch) and "A" <= ch <= "Z"


def is_alnum_upper(ch: str) -> bool:
    return is_digit(ch) or is_upper_alpha(ch)


def to_upper_ascii(ch: str) -> str:
    """Maiúscula apenas para a-z; demais caracteres voltam inalterados."""
    if _single(ch) and "a" <= ch <= "z":
        return chr(ord(ch) - 32)
    return ch
