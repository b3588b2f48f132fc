from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict, Optional

from .text import safe_int, to_bool

_DEFAULTS: Dict[str, str] = {
    # Logging
    "BRDOCS_LOG_LEVEL": "WARNING",
    # Geradores
    "BRDOCS_SEED": "",
    "BRDOCS_CNPJ_NUMERIC_ONLY": "0",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}


@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. BRDOCS_SEED)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = env_val.strip()
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)


def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    _runtime_overrides.update({k: str(v).strip() for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]


def reset_settings() -> None:
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]


def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' inexistente. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]


# ---------------- acessores tipados ----------------

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level() -> str:
    """Nível de log; nomes desconhecidos caem em WARNING."""
    level = (setting("BRDOCS_LOG_LEVEL") or "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


def default_seed() -> Optional[int]:
    return safe_int(setting("BRDOCS_SEED"))


def cnpj_numeric_only() -> bool:
    return bool(to_bool(setting("BRDOCS_CNPJ_NUMERIC_ONLY")))
