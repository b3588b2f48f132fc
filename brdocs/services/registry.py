from __future__ import annotations
import random
from enum import Enum
from typing import Any, Dict, Optional, Type

from ..errors import UnknownKind
from ..models import BrDocument, CEP, CNH, CNPJ, CNS, CPF, Plate
from ..utils.text import normalize


class DocumentKind(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"
    CNH = "cnh"
    CNS = "cns"
    PLACA = "placa"
    CEP = "cep"


_ALIASES: Dict[str, DocumentKind] = {
    "plate": DocumentKind.PLACA,
    "placas": DocumentKind.PLACA,
    "cartao sus": DocumentKind.CNS,
}

_TYPES: Dict[DocumentKind, Type[BrDocument]] = {
    DocumentKind.CPF: CPF,
    DocumentKind.CNPJ: CNPJ,
    DocumentKind.CNH: CNH,
    DocumentKind.CNS: CNS,
    DocumentKind.PLACA: Plate,
    DocumentKind.CEP: CEP,
}


def resolve_kind(kind: str | DocumentKind) -> DocumentKind:
    """'CPF', ' cpf ', 'plate', DocumentKind.PLACA... -> DocumentKind."""
    if isinstance(kind, DocumentKind):
        return kind
    key = normalize(kind) if isinstance(kind, str) else ""
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return DocumentKind(key)
    except ValueError:
        raise UnknownKind(kind) from None


def document_type(kind: str | DocumentKind) -> Type[BrDocument]:
    return _TYPES[resolve_kind(kind)]


def parse_document(kind: str | DocumentKind, value: Any) -> BrDocument:
    """Valida e devolve o documento canônico; InvalidDocument se inválido."""
    return document_type(kind).parse(value)


def is_valid_document(kind: str | DocumentKind, value: Any) -> bool:
    return document_type(kind).is_valid(value)


def format_document(kind: str | DocumentKind, value: Any) -> str:
    return document_type(kind).parse(value).format()


def generate_document(kind: str | DocumentKind, rng: Optional[random.Random] = None) -> BrDocument:
    return document_type(kind).generate(rng)
