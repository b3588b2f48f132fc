from __future__ import annotations
import random
import pytest

from brdocs.errors import InvalidDocument
from brdocs.models import CEP, CNH, CNPJ, CNS, CPF, Plate
from brdocs.validators import (
    generate_cep, generate_cnh, generate_cnpj, generate_cns, generate_cpf, generate_plate,
    is_valid_cep, is_valid_cnh, is_valid_cnpj, is_valid_cns, is_valid_cpf, is_valid_plate,
)

DOC_TYPES = [CPF, CNPJ, CNH, CNS, Plate, CEP]
NOISE = "0123456789.-/ AaBbZz\té"

def _noise(rng: random.Random) -> str:
    return "".join(rng.choice(NOISE) for _ in range(rng.randrange(0, 21)))

@pytest.mark.parametrize("doc_type", DOC_TYPES, ids=lambda t: t.__name__)
def test_generated_documents_always_validate(doc_type, rng):
    for _ in range(3000):
        doc = doc_type.generate(rng)
        assert doc_type.is_valid(doc.format()), doc
        assert doc_type.is_valid(doc.compact), doc

@pytest.mark.parametrize("doc_type", DOC_TYPES, ids=lambda t: t.__name__)
def test_format_is_idempotent_and_parse_round_trips(doc_type, rng):
    for _ in range(300):
        doc = doc_type.generate(rng)
        again = doc_type.parse(doc.format())
        assert again == doc
        assert again.format() == doc.format()
        assert doc_type.parse(doc.compact) == doc

@pytest.mark.parametrize("doc_type", DOC_TYPES, ids=lambda t: t.__name__)
def test_is_valid_agrees_with_parse_on_noise(doc_type):
    noise_rng = random.Random(7)
    for _ in range(3000):
        text = _noise(noise_rng)
        try:
            doc_type.parse(text)
            parsed = True
        except InvalidDocument:
            parsed = False
        assert doc_type.is_valid(text) is parsed, repr(text)

@pytest.mark.parametrize("doc_type", [CPF, CNPJ, CNH, CNS], ids=lambda t: t.__name__)
def test_changing_last_check_digit_invalidates(doc_type, rng):
    for _ in range(500):
        raw = doc_type.generate(rng).compact
        last = raw[-1]
        for d in "0123456789":
            if d != last:
                assert not doc_type.is_valid(raw[:-1] + d), raw[:-1] + d

def test_changing_first_check_digit_invalidates(rng):
    for doc_type in (CPF, CNPJ, CNH):
        for _ in range(200):
            raw = doc_type.generate(rng).compact
            d = str((int(raw[-2]) + 1) % 10)
            assert not doc_type.is_valid(raw[:-2] + d + raw[-1])

LONG_RUN = 1_000_000

@pytest.mark.slow
@pytest.mark.parametrize(
    "generate,is_valid",
    [
        (generate_cpf, is_valid_cpf), (generate_cnpj, is_valid_cnpj), (generate_cnh, is_valid_cnh),
        (generate_cns, is_valid_cns), (generate_plate, is_valid_plate), (generate_cep, is_valid_cep),
    ],
    ids=["cpf", "cnpj", "cnh", "cns", "placa", "cep"],
)
def test_million_generated_documents_validate(generate, is_valid):
    # rodar com: pytest -m slow
    rng = random.Random(LONG_RUN)
    for _ in range(LONG_RUN):
        text = generate(rng)
        assert is_valid(text), text
