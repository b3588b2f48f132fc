# etl/validate_documents.py
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from brdocs.errors import UnknownKind
from brdocs.services.bulk import summarize, validate_frame
from brdocs.services.registry import resolve_kind
from etl.common import get_logger, read_csv, write_csv


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Valida e formata uma coluna de documentos de um CSV.")
    ap.add_argument("--src", required=True, help="CSV de entrada")
    ap.add_argument("--column", required=True, help="coluna com os documentos")
    ap.add_argument("--kind", required=True, help="cpf, cnpj, cnh, cns, placa, cep")
    ap.add_argument("--out", default=None, help="CSV de saída (default: <src>_validado.csv)")
    ap.add_argument("--sep", default=",")
    ap.add_argument("--strict", action="store_true", help="sai com código 1 se houver inválidos")
    args = ap.parse_args(argv)

    log = get_logger("etl.validate_documents", "INFO")

    src = Path(args.src)
    if not src.exists():
        log.error(f"Faltando: {src}")
        return 2
    try:
        kind = resolve_kind(args.kind)
    except UnknownKind as e:
        log.error(str(e))
        return 2

    df = read_csv(src, sep=args.sep)
    if args.column not in df.columns:
        log.error(f"Coluna '{args.column}' não encontrada em {src.name}: {list(df.columns)}")
        return 2

    out_df = validate_frame(df, args.column, kind)
    out = Path(args.out) if args.out else src.with_name(f"{src.stem}_validado.csv")
    write_csv(out_df, out, sep=args.sep)

    stats = summarize(out_df, args.column)
    log.info(f"{stats['validos']}/{stats['total']} {kind.value} válidos; saída em {out}")
    if stats["invalidos"]:
        log.warning(f"{stats['invalidos']} linha(s) inválida(s) em '{args.column}'")
        if args.strict:
            return 1
    else:
        log.info("✅ Todos os documentos são válidos.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
