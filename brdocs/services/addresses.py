from __future__ import annotations
import logging
from typing import Any, Optional

from ..models import Address, AddressResolver, CEP
from ..utils.logs import mask_document

log = logging.getLogger(__name__)


def resolve_address(cep: Any, resolver: AddressResolver) -> Optional[Address]:
    """
    Valida o CEP antes de consultar o resolvedor (InvalidDocument se inválido)
    e devolve o endereço, ou None se o CEP não existir.
    """
    parsed = cep if isinstance(cep, CEP) else CEP.parse(cep)
    address = resolver.resolve(parsed)
    if address is None:
        log.debug("CEP %s sem endereço", mask_document(parsed.compact, 3))
    return address
