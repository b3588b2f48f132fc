from .cpf import compact_cpf, is_valid_cpf, format_cpf, generate_cpf
from .cnpj import compact_cnpj, is_valid_cnpj, format_cnpj, generate_cnpj
from .cnh import compact_cnh, is_valid_cnh, format_cnh, generate_cnh
from .cns import compact_cns, is_valid_cns, format_cns, generate_cns
from .plate import compact_plate, is_valid_plate, format_plate, generate_plate, plate_format
from .cep import compact_cep, is_valid_cep, format_cep, generate_cep

__all__ = [
    "compact_cpf", "is_valid_cpf", "format_cpf", "generate_cpf",
    "compact_cnpj", "is_valid_cnpj", "format_cnpj", "generate_cnpj",
    "compact_cnh", "is_valid_cnh", "format_cnh", "generate_cnh",
    "compact_cns", "is_valid_cns", "format_cns", "generate_cns",
    "compact_plate", "is_valid_plate", "format_plate", "generate_plate", "plate_format",
    "compact_cep", "is_valid_cep", "format_cep", "generate_cep",
]
