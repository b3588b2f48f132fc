from __future__ import annotations
from pathlib import Path

import pandas as pd

from brdocs.utils.logs import get_logger  # noqa: F401

# ----------------- paths -----------------
def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

# ----------------- io helpers -----------------
def read_csv(path: Path, sep: str = ",") -> pd.DataFrame:
    # dtype=str preserva zeros à esquerda de CPF/CNPJ/CEP
    df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_csv(df: pd.DataFrame, path: Path, sep: str = ",") -> None:
    ensure_parent(path)
    df.to_csv(path, index=False, sep=sep)
