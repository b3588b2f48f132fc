from __future__ import annotations
import pytest
from pydantic import BaseModel, ValidationError

from brdocs.errors import InvalidDocument
from brdocs.models import CEP, CNH, CNPJ, CNS, CPF, BrDocument, Plate
from brdocs.services import format_document
from brdocs.validators import (
    format_cep, format_cnh, format_cnpj, format_cns, format_cpf, format_plate,
    is_valid_cep, is_valid_cnh, is_valid_cnpj, is_valid_cns, is_valid_cpf, is_valid_plate,
)

def test_cpf_parse_compact_and_formatted_are_equal():
    a = CPF.parse("45317828791")
    b = CPF.parse("453.178.287-91")
    assert a == b and hash(a) == hash(b)
    assert str(a) == a.format() == "453.178.287-91"
    assert a.compact == "45317828791"
    assert CPF.parse(a.format()) == a

def test_parse_raises_typed_error():
    with pytest.raises(InvalidDocument) as exc:
        CPF.parse("453.178.287-92")
    assert exc.value.kind == "CPF" and exc.value.length == 14
    assert "comprimento 14" in str(exc.value)
    assert isinstance(exc.value, ValueError)
    with pytest.raises(InvalidDocument) as exc:
        CNS.parse(None)
    assert exc.value.length is None

def test_models_are_immutable():
    cpf = CPF.parse("45317828791")
    with pytest.raises(ValidationError):
        cpf.root = "52998224725"

def test_cnpj_model_alphanumeric_and_numeric_only():
    doc = CNPJ.parse("aa.aaa.aaa/aaaa-45")
    assert doc.format() == "AA.AAA.AAA/AAAA-45"
    assert doc.compact == "AAAAAAAAAAAA45"
    assert doc.is_numeric is False
    assert CNPJ.parse("33000167100246").is_numeric is True
    assert CNPJ.is_valid("12ABC34501DE35") and not CNPJ.is_valid("12ABC34501DE35", numeric_only=True)
    with pytest.raises(InvalidDocument):
        CNPJ.parse("12ABC34501DE35", numeric_only=True)

def test_other_models():
    assert CNH.parse("96300689842").format() == "96300689842"
    cns = CNS.parse("708521331850008")
    assert str(cns) == "708 5213 3185 0008" and cns.is_provisional is True
    assert CNS.parse("174598435280018").is_provisional is False
    plate = Plate.parse("BRA.2A23")
    assert str(plate) == "BRA-2A23" and plate.plate_format == "mercosul"
    assert Plate.parse("BRA2023").plate_format == "legacy"
    assert CEP.parse("01310100").format() == "01310-100"

def test_documents_as_pydantic_fields():
    class Cliente(BaseModel):
        nome: str
        cpf: CPF
        placa: Plate | None = None

    c = Cliente(nome="Ana", cpf="45317828791", placa="BRA2023")
    assert c.cpf == CPF.parse("453.178.287-91")
    assert c.model_dump() == {"nome": "Ana", "cpf": "453.178.287-91", "placa": "BRA-2023"}
    assert '"cpf":"453.178.287-91"' in c.model_dump_json()
    assert Cliente(nome="Ana", cpf=c.cpf).cpf == c.cpf

    with pytest.raises(ValidationError) as exc:
        Cliente(nome="Bia", cpf="453.178.287-92")
    assert "CPF inválido" in str(exc.value)

def test_model_validate_normalizes():
    assert CNPJ.model_validate("12abc34501de35").root == "12.ABC.345/01DE-35"
    with pytest.raises(ValidationError):
        CNH.model_validate("96300689843")

FUNCTIONAL = [
    (CPF, is_valid_cpf, format_cpf),
    (CNPJ, is_valid_cnpj, format_cnpj),
    (CNH, is_valid_cnh, format_cnh),
    (CNS, is_valid_cns, format_cns),
    (Plate, is_valid_plate, format_plate),
    (CEP, is_valid_cep, format_cep),
]

@pytest.mark.parametrize("doc_type,is_valid,fmt", FUNCTIONAL, ids=lambda v: getattr(v, "__name__", ""))
def test_validated_document_is_accepted_everywhere(doc_type, is_valid, fmt, rng):
    doc = doc_type.generate(rng)
    assert is_valid(doc) is True
    assert doc_type.is_valid(doc) is True
    assert fmt(doc) == doc.format()
    assert doc_type.parse(doc) == doc
    assert format_document(doc_type.kind, doc) == doc.format()

def test_document_of_another_kind_is_checked_by_its_text():
    cpf = CPF.parse("45317828791")
    assert CNH.is_valid(cpf) is False
    with pytest.raises(InvalidDocument):
        CNPJ.parse(cpf)

def test_base_document_is_abstract():
    assert BrDocument.__abstractmethods__ == {"canonicalize", "is_valid", "generate"}
    with pytest.raises(TypeError):
        BrDocument("453.178.287-91")
    for doc_type in (CPF, CNPJ, CNH, CNS, Plate, CEP):
        assert not doc_type.__abstractmethods__
