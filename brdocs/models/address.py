from __future__ import annotations
from typing import Any, Optional, Protocol

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from ..errors import InvalidAddress, InvalidDocument
from .documents import CEP
from .uf import UF

SEPARATOR = ";"


class Address(BaseModel):
    """
    Endereço associado a um CEP, no formato devolvido pelos serviços postais.
    Serializa em uma linha: UF;localidade;logradouro;complemento;bairro;nome_unidade;CEP
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    uf: UF
    localidade: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    nome_unidade: str = ""
    cep: CEP

    @field_validator("uf", mode="before")
    @classmethod
    def _norm_uf(cls, v: Any):
        return UF.coerce(v)

    @field_validator("localidade", "logradouro", "complemento", "bairro", "nome_unidade", mode="before")
    @classmethod
    def _strip(cls, v: Any):
        if v is None:
            return ""
        s = str(v).strip()
        if SEPARATOR in s:
            raise ValueError(f"campo não pode conter '{SEPARATOR}'")
        return s

    @field_serializer("uf")
    def _dump_uf(self, uf: UF) -> str:
        return uf.sigla

    def serialize(self) -> str:
        return SEPARATOR.join([
            self.uf.sigla,
            self.localidade,
            self.logradouro,
            self.complemento,
            self.bairro,
            self.nome_unidade,
            self.cep.compact,
        ])

    @classmethod
    def deserialize(cls, text: str) -> "Address":
        parts = str(text).split(SEPARATOR)
        if len(parts) != 7:
            raise InvalidAddress(f"endereço serializado inválido: {len(parts)} campos, esperado 7")
        try:
            uf = UF.from_str(parts[0])
        except InvalidDocument:
            raise InvalidAddress(f"endereço serializado inválido: UF desconhecida {parts[0]!r}") from None
        try:
            cep = CEP.parse(parts[6])
        except InvalidDocument:
            raise InvalidAddress(f"endereço serializado inválido: CEP {parts[6]!r}") from None
        return cls(
            uf=uf,
            localidade=parts[1],
            logradouro=parts[2],
            complemento=parts[3],
            bairro=parts[4],
            nome_unidade=parts[5],
            cep=cep,
        )


class AddressResolver(Protocol):
    """Consulta de endereço por CEP (serviço externo, fora deste pacote)."""

    def resolve(self, cep: CEP) -> Optional[Address]:
        """Endereço do CEP, ou None quando o CEP não existe."""
        ...
