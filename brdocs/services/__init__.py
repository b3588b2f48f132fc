from .registry import (
    DocumentKind,
    resolve_kind,
    document_type,
    parse_document,
    is_valid_document,
    format_document,
    generate_document,
)
from .bulk import validate_series, validate_frame, summarize
from .addresses import resolve_address

__all__ = [
    "DocumentKind",
    "resolve_kind",
    "document_type",
    "parse_document",
    "is_valid_document",
    "format_document",
    "generate_document",
    "validate_series",
    "validate_frame",
    "summarize",
    "resolve_address",
]
