from __future__ import annotations
import random
from abc import abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import ConfigDict, RootModel, field_validator

from ..errors import InvalidDocument
from ..validators import cep, cnh, cnpj, cns, cpf, plate


class BrDocument(RootModel[str]):
    """
    Documento já validado, guardado na forma canônica (formatada).
    Imutável: reformatar sempre produz outro valor.

    Pode ser usado como tipo de campo em outros modelos pydantic:
    a entrada compacta ou formatada é validada e normalizada.

    Classe abstrata: cada tipo concreto implementa canonicalize, is_valid
    e generate.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = ""

    @field_validator("root", mode="before")
    @classmethod
    def _to_canonical(cls, v: Any) -> str:
        return cls.canonicalize(v)

    @classmethod
    @abstractmethod
    def canonicalize(cls, value: Any) -> str:
        """Forma canônica de `value`; InvalidDocument se inválido."""

    @classmethod
    @abstractmethod
    def is_valid(cls, value: Any) -> bool:
        """Nunca levanta exceção."""

    @classmethod
    @abstractmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "BrDocument":
        """Documento válido sorteado de `rng` (ou do gerador da thread)."""

    @classmethod
    def parse(cls, value: Any):
        return cls(cls.canonicalize(value))

    def format(self) -> str:
        return self.root

    @property
    def compact(self) -> str:
        return "".join(ch for ch in self.root if ch.isalnum())

    def __str__(self) -> str:
        return self.root


class CPF(BrDocument):
    kind: ClassVar[str] = cpf.KIND

    @classmethod
    def canonicalize(cls, value: Any) -> str:
        return cpf.format_cpf(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cpf.is_valid_cpf(value)

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "CPF":
        return cls(cpf.generate_cpf(rng))


class CNPJ(BrDocument):
    """CNPJ numérico ou alfanumérico; letras ficam em maiúscula."""

    kind: ClassVar[str] = cnpj.KIND

    @classmethod
    def canonicalize(cls, value: Any) -> str:
        return cnpj.format_cnpj(value)

    @classmethod
    def is_valid(cls, value: Any, numeric_only: bool = False) -> bool:
        return cnpj.is_valid_cnpj(value, numeric_only)

    @classmethod
    def parse(cls, value: Any, numeric_only: bool = False) -> "CNPJ":
        if numeric_only and not cnpj.is_valid_cnpj(value, numeric_only=True):
            raise InvalidDocument(cls.kind, value)
        return cls(cls.canonicalize(value))

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None, numeric_only: Optional[bool] = None) -> "CNPJ":
        return cls(cnpj.generate_cnpj(rng, numeric_only))

    @property
    def is_numeric(self) -> bool:
        return self.compact.isdigit()


class CNH(BrDocument):
    kind: ClassVar[str] = cnh.KIND

    @classmethod
    def canonicalize(cls, value: Any) -> str:
        return cnh.format_cnh(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cnh.is_valid_cnh(value)

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "CNH":
        return cls(cnh.generate_cnh(rng))


class CNS(BrDocument):
    kind: ClassVar[str] = cns.KIND

    @classmethod
    def canonicalize(cls, value: Any) -> str:
        return cns.format_cns(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cns.is_valid_cns(value)

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "CNS":
        return cls(cns.generate_cns(rng))

    @property
    def is_provisional(self) -> bool:
        # 7, 8 e 9 iniciam números provisórios
        return self.root[0] in "789"


class Plate(BrDocument):
    """Placa de veículo no padrão antigo (ABC-1234) ou Mercosul (ABC-1D23)."""

    kind: ClassVar[str] = plate.KIND

    @classmethod
    def canonicalize(cls, value: Any) -> str:
        return plate.format_plate(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return plate.is_valid_plate(value)

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "Plate":
        return cls(plate.generate_plate(rng))

    @property
    def plate_format(self) -> str:
        return plate.plate_format(self.root) or ""


class CEP(BrDocument):
    kind: ClassVar[str] = cep.KIND

    @classmethod
    def canonicalize(cls, value: Any) -> str:
        return cep.format_cep(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cep.is_valid_cep(value)

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "CEP":
        return cls(cep.generate_cep(rng))
