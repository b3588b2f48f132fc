from __future__ import annotations
from typing import Optional


class BrDocsError(Exception):
    """Erro base do pacote."""


class InvalidDocument(BrDocsError, ValueError):
    """
    Documento rejeitado por formato ou dígito verificador.
    É a única falha que os validadores conhecem; como herda de ValueError,
    o pydantic a converte em ValidationError quando usada em modelos.
    """

    def __init__(self, kind: str, value: object = None, message: Optional[str] = None):
        self.kind = kind
        self.length = len(value) if isinstance(value, str) else None
        if message is None:
            message = f"{kind} inválido"
            if self.length is not None:
                message += f" (comprimento {self.length})"
        super().__init__(message)


class InvalidAddress(InvalidDocument):
    def __init__(self, message: str):
        super().__init__("Endereço", message=message)


class UnknownKind(BrDocsError, LookupError):
    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"tipo de documento desconhecido: {kind!r}")
