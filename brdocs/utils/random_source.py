from __future__ import annotations
import logging
import random
import threading
from typing import Optional, Sequence

from .config import default_seed

DIGITS = "0123456789"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALNUM_UPPER = DIGITS + UPPER

# uma instância de random.Random por thread; nada é compartilhado entre threads
_local = threading.local()

log = logging.getLogger(__name__)


def _new_rng() -> random.Random:
    seed = default_seed()
    if seed is None:
        return random.Random()
    log.debug("random source da thread %s semeado com BRDOCS_SEED", threading.get_ident())
    return random.Random(seed)


def default_rng() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = _local.rng = _new_rng()
    return rng


def seed_default_rng(seed: Optional[int]) -> random.Random:
    """Ressemeia (ou recria, com seed=None) a instância da thread atual."""
    _local.rng = random.Random(seed)
    log.debug("random source da thread %s ressemeado", threading.get_ident())
    return _local.rng


def resolve_rng(rng: Optional[random.Random] = None) -> random.Random:
    return rng if rng is not None else default_rng()


def draw(rng: random.Random, alphabet: Sequence[str], k: int) -> str:
    return "".join(rng.choice(alphabet) for _ in range(k))
