"""brdocs: validação, formatação e geração de documentos brasileiros.

CPF, CNPJ (numérico e alfanumérico), CNH, CNS, placas de veículo (padrão
antigo e Mercosul) e CEP, nas formas compacta e formatada.
"""
from .errors import BrDocsError, InvalidDocument, InvalidAddress, UnknownKind
from .models import BrDocument, CPF, CNPJ, CNH, CNS, Plate, CEP, UF, Address, AddressResolver
from .validators import (
    is_valid_cpf, format_cpf, generate_cpf,
    is_valid_cnpj, format_cnpj, generate_cnpj,
    is_valid_cnh, format_cnh, generate_cnh,
    is_valid_cns, format_cns, generate_cns,
    is_valid_plate, format_plate, generate_plate, plate_format,
    is_valid_cep, format_cep, generate_cep,
)
from .services import (
    DocumentKind,
    parse_document, is_valid_document, format_document, generate_document,
)

__version__ = "0.1.0"

__all__ = [
    "BrDocsError", "InvalidDocument", "InvalidAddress", "UnknownKind",
    "BrDocument", "CPF", "CNPJ", "CNH", "CNS", "Plate", "CEP", "UF", "Address", "AddressResolver",
    "is_valid_cpf", "format_cpf", "generate_cpf",
    "is_valid_cnpj", "format_cnpj", "generate_cnpj",
    "is_valid_cnh", "format_cnh", "generate_cnh",
    "is_valid_cns", "format_cns", "generate_cns",
    "is_valid_plate", "format_plate", "generate_plate", "plate_format",
    "is_valid_cep", "format_cep", "generate_cep",
    "DocumentKind", "parse_document", "is_valid_document", "format_document", "generate_document",
]
