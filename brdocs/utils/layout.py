from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from pydantic import RootModel

# Layout: posição no texto formatado -> separadores aceitos naquela posição.
# O primeiro separador da string é o usado na formatação canônica.
Layout = Mapping[int, str]


def formatted_length(compact_length: int, layout: Layout) -> int:
    return compact_length + len(layout)


def strip_separators(text: str, layout: Layout) -> Optional[str]:
    """
    Remove os separadores das posições fixas do layout.
    Retorna None se alguma dessas posições tiver outro caractere.
    Separadores fora de posição continuam no resultado e são barrados
    depois pela checagem de classe de caractere.
    """
    out = []
    for i, ch in enumerate(text):
        allowed = layout.get(i)
        if allowed is None:
            out.append(ch)
        elif ch not in allowed:
            return None
    return "".join(out)


def insert_separators(compact: str, layout: Layout) -> str:
    out = []
    chars = iter(compact)
    for i in range(formatted_length(len(compact), layout)):
        sep = layout.get(i)
        out.append(sep[0] if sep else next(chars))
    return "".join(out)


def unwrap(value: Any) -> Any:
    """Documento já validado (RootModel) -> texto guardado; o resto passa intacto."""
    if isinstance(value, RootModel):
        return value.root
    return value


def to_compact(text: Any, compact_length: int, layouts: Dict[int, Layout] | None = None) -> Optional[str]:
    """
    Aceita a forma compacta (`compact_length` caracteres) ou qualquer forma
    formatada de `layouts` (chave = comprimento total). Não valida classes.
    Instâncias de documento são lidas pelo texto canônico.
    """
    text = unwrap(text)
    if not isinstance(text, str):
        return None
    if len(text) == compact_length:
        return text
    layout = (layouts or {}).get(len(text))
    if layout is None:
        return None
    return strip_separators(text, layout)
