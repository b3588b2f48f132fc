from __future__ import annotations
import random
import pytest

from brdocs.utils import config
from brdocs.utils.random_source import seed_default_rng

ENV_KEYS = ("BRDOCS_LOG_LEVEL", "BRDOCS_SEED", "BRDOCS_CNPJ_NUMERIC_ONLY")

# ---------- CONFIG LIMPA A CADA TESTE ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Remove variáveis BRDOCS_* do ambiente e overrides de runtime,
    para que a configuração da máquina não vaze nos testes.
    """
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()

@pytest.fixture(autouse=True)
def fresh_default_rng():
    # evita que um teste que semeia o gerador da thread afete o próximo
    seed_default_rng(None)
    yield

# ---------- GERADOR DETERMINÍSTICO ----------

@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)

class SequenceRng:
    """Substituto de random.Random que devolve escolhas pré-definidas."""

    def __init__(self, picks):
        self._picks = iter(picks)

    def choice(self, seq):
        pick = next(self._picks)
        assert pick in seq, f"{pick!r} fora de {seq!r}"
        return pick

@pytest.fixture
def sequence_rng():
    return SequenceRng

# ---------- VETORES CONHECIDOS ----------

@pytest.fixture
def valid_cpfs() -> list[str]:
    return ["453.178.287-91", "45317828791", "529.982.247-25", "111.444.777-35", "12345678909", "000.000.001-91"]

@pytest.fixture
def valid_cnpjs() -> list[str]:
    return [
        "33.000.167/1002-46", "33000167100246",
        "00.000.000/0001-91", "00000000000191",
        "34.588.324/0001-04", "72.285.712/0001-05", "11.222.333/0001-81",
        "AA.AAA.AAA/AAAA-45", "AAAAAAAAAAAA45", "aa.aaa.aaa/aaaa-45", "aaaaaaaaaaaa45",
        "AB.CDE.FGI/HIJK-56", "12ABC34501DE35", "12.ABC.345/01DE-35",
    ]
