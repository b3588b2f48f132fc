from __future__ import annotations
from typing import Any, Dict, Optional

import pandas as pd

from ..errors import InvalidDocument
from .registry import DocumentKind, document_type

VALID_SUFFIX = "_valido"
FORMATTED_SUFFIX = "_formatado"


def _is_missing(v: Any) -> bool:
    if v is None:
        return True
    try:
        return bool(pd.isna(v))
    except (TypeError, ValueError):
        return False


def validate_series(values: pd.Series, kind: str | DocumentKind) -> pd.DataFrame:
    """
    Valida cada valor da série como documento do tipo `kind`.
    Retorna um DataFrame com o mesmo índice e as colunas 'valido' (bool)
    e 'formatado' (forma canônica ou None). Espaços nas pontas são ignorados;
    leia CSVs com dtype=str para não perder zeros à esquerda.
    """
    doc_type = document_type(kind)

    def _canonical(v: Any) -> Optional[str]:
        if _is_missing(v):
            return None
        try:
            return doc_type.parse(str(v).strip()).format()
        except InvalidDocument:
            return None

    formatted = values.map(_canonical)
    return pd.DataFrame({"valido": formatted.notna(), "formatado": formatted}, index=values.index)


def validate_frame(df: pd.DataFrame, column: str, kind: str | DocumentKind) -> pd.DataFrame:
    """
    Cópia de `df` com as colunas '<column>_valido' e '<column>_formatado'.
    Não altera o DataFrame original.
    """
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {list(df.columns)}")
    view = df.copy()
    result = validate_series(view[column], kind)
    view[f"{column}{VALID_SUFFIX}"] = result["valido"]
    view[f"{column}{FORMATTED_SUFFIX}"] = result["formatado"]
    return view


def summarize(result: pd.DataFrame, column: Optional[str] = None) -> Dict[str, int]:
    """Contagem de válidos/inválidos a partir da saída de validate_series/validate_frame."""
    flag = "valido" if column is None else f"{column}{VALID_SUFFIX}"
    total = int(len(result))
    valid = int(result[flag].sum()) if total else 0
    return {"total": total, "validos": valid, "invalidos": total - valid}
