# etl/__init__.py
"""Scripts em lote sobre o brdocs.

Use como módulos:
    python -m etl.validate_documents --src clientes.csv --column cpf --kind cpf
"""
__all__ = []
