from .documents import BrDocument, CPF, CNPJ, CNH, CNS, Plate, CEP
from .uf import UF
from .address import Address, AddressResolver

__all__ = [
    "BrDocument",
    "CPF",
    "CNPJ",
    "CNH",
    "CNS",
    "Plate",
    "CEP",
    "UF",
    "Address",
    "AddressResolver",
]
