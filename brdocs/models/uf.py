from __future__ import annotations
from enum import Enum
from functools import lru_cache
from typing import Any, Dict

from ..errors import InvalidDocument
from ..utils.text import squash

_NOMES: Dict[int, str] = {
    11: "Rondônia",
    12: "Acre",
    13: "Amazonas",
    14: "Roraima",
    15: "Pará",
    16: "Amapá",
    17: "Tocantins",
    21: "Maranhão",
    22: "Piauí",
    23: "Ceará",
    24: "Rio Grande do Norte",
    25: "Paraíba",
    26: "Pernambuco",
    27: "Alagoas",
    28: "Sergipe",
    29: "Bahia",
    31: "Minas Gerais",
    32: "Espírito Santo",
    33: "Rio de Janeiro",
    35: "São Paulo",
    41: "Paraná",
    42: "Santa Catarina",
    43: "Rio Grande do Sul",
    50: "Mato Grosso do Sul",
    51: "Mato Grosso",
    52: "Goiás",
    53: "Distrito Federal",
}


class UF(int, Enum):
    """Unidade Federativa; o valor é o código IBGE."""

    RO = 11
    AC = 12
    AM = 13
    RR = 14
    PA = 15
    AP = 16
    TO = 17
    MA = 21
    PI = 22
    CE = 23
    RN = 24
    PB = 25
    PE = 26
    AL = 27
    SE = 28
    BA = 29
    MG = 31
    ES = 32
    RJ = 33
    SP = 35
    PR = 41
    SC = 42
    RS = 43
    MS = 50
    MT = 51
    GO = 52
    DF = 53

    @property
    def sigla(self) -> str:
        return self.name

    @property
    def nome(self) -> str:
        return _NOMES[self.value]

    @property
    def codigo(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_code(cls, codigo: Any) -> "UF":
        if isinstance(codigo, bool):
            raise InvalidDocument("UF", message=f"código de UF desconhecido: {codigo!r}")
        try:
            return cls(int(codigo))
        except (TypeError, ValueError):
            raise InvalidDocument("UF", message=f"código de UF desconhecido: {codigo!r}") from None

    @classmethod
    def from_str(cls, text: Any) -> "UF":
        """
        Aceita sigla ou nome, com ou sem acento, com ou sem espaços:
        'sp', 'São Paulo', 'sao paulo', 'saopaulo'.
        """
        uf = _by_key().get(squash(text)) if isinstance(text, str) else None
        if uf is None:
            raise InvalidDocument("UF", message=f"UF desconhecida: {text!r}")
        return uf

    @classmethod
    def coerce(cls, value: Any) -> "UF":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_code(value)
        s = str(value).strip() if value is not None else ""
        return cls.from_code(s) if s.isdigit() else cls.from_str(s)


@lru_cache(maxsize=1)
def _by_key() -> Dict[str, UF]:
    index: Dict[str, UF] = {}
    for uf in UF:
        index[squash(uf.sigla)] = uf
        index[squash(uf.nome)] = uf
    return index
