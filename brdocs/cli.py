from __future__ import annotations
import argparse
import sys
from typing import Any, Dict, Optional, Sequence

from .errors import InvalidDocument, UnknownKind
from .services.registry import DocumentKind, document_type, resolve_kind
from .utils.config import LOG_LEVELS
from .utils.logs import get_logger, mask_document
from .utils.random_source import seed_default_rng

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

USAGE_EPILOG = """\
exemplos:
  brdocs cpf                    gera um CPF válido
  brdocs cpf 453.178.287-91     valida um CPF
  brdocs --silent placa BRA2023 só o código de saída (0 válido, 1 inválido)

tipos: cpf, cnpj, cnh, cns, placa (ou plate), cep
código 2: uso incorreto (tipo desconhecido ou argumentos a mais)
"""


class _QuietParser(argparse.ArgumentParser):
    """Com --silent, erro de uso vira só o código de saída, sem mensagem."""

    def error(self, message: str):
        self.exit(EXIT_USAGE)


def build_parser(silent: bool = False) -> argparse.ArgumentParser:
    parser_cls = _QuietParser if silent else argparse.ArgumentParser
    ap = parser_cls(
        prog="brdocs",
        description="Valida ou gera documentos brasileiros.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("kind", help="tipo de documento")
    ap.add_argument("value", nargs="?", default=None, help="valor a validar (omita para gerar)")
    ap.add_argument("--silent", action="store_true",
                    help="sem saída; 0 se válido, 1 se inválido (ignorado ao gerar)")
    ap.add_argument("--numeric-cnpj", action="store_true",
                    help="CNPJ: só aceita/gera CNPJs numéricos")
    ap.add_argument("--seed", type=int, default=None, help="semente do gerador")
    ap.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                    help="nível de log (padrão: BRDOCS_LOG_LEVEL)")
    return ap


def _options(kind: DocumentKind, args: argparse.Namespace) -> Dict[str, Any]:
    if kind is DocumentKind.CNPJ and args.numeric_cnpj:
        return {"numeric_only": True}
    return {}


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    ap = build_parser(silent="--silent" in argv)
    args = ap.parse_args(argv)
    # handler no logger raiz do pacote; os módulos internos propagam para ele
    log = get_logger("brdocs", args.log_level)

    try:
        kind = resolve_kind(args.kind.strip())
    except UnknownKind:
        if not args.silent:
            print(f"documento desconhecido: {args.kind}", file=sys.stderr)
            ap.print_usage(sys.stderr)
        return EXIT_USAGE

    doc_type = document_type(kind)
    opts = _options(kind, args)

    if args.value is None:
        if args.seed is not None:
            seed_default_rng(args.seed)
        doc = doc_type.generate(**opts)
        log.debug("%s gerado", doc_type.kind)
        print(doc)
        return EXIT_OK

    value = args.value.strip()
    try:
        doc = doc_type.parse(value, **opts)
    except InvalidDocument as e:
        log.info("%s rejeitado: %s", mask_document(value), e)
        if not args.silent:
            print(f"{doc_type.kind} {value} é inválido 🚫")
        return EXIT_INVALID

    if not args.silent:
        print(f"{doc_type.kind} {doc} é válido ✅")
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
