"""Points d'entrée CLI pour ubl-invoice."""

import argparse
import sys
from pathlib import Path

from ubl_invoice.config import get_settings
from ubl_invoice.errors import UBLInvoiceError
from ubl_invoice.generators.ubl import UBLGenerator
from ubl_invoice.logging_config import configure_logging
from ubl_invoice.processing.pipeline import prepare_invoice


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def generate(argv: list[str] | None = None) -> int:
    """Point d'entrée pour la commande `ubl-generate`.

    FR: Lit une facture JSON et écrit le XML UBL dans ``-o``, sinon dans le
        fichier suggéré par ``outputFile``, sinon sur la sortie standard.
    EN: Reads a JSON invoice and writes the UBL XML to ``-o``, else to the
        ``outputFile`` hint, else to stdout.
    """
    parser = argparse.ArgumentParser(
        prog="ubl-generate",
        description="Generate a UBL 2.1 / PEPPOL BIS Billing 3.0 invoice.",
    )
    parser.add_argument("input", help="JSON invoice file, or - for stdin")
    parser.add_argument("-o", "--output", help="output XML file")
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        invoice = prepare_invoice(_read_input(args.input))
        result = UBLGenerator().generate(invoice)
        output = args.output or invoice.output_file
        if output:
            result.save(output)
        else:
            sys.stdout.write(result.xml)
    except (OSError, UnicodeDecodeError, UBLInvoiceError) as exc:
        print(f"ubl-generate : {exc}", file=sys.stderr)
        return 1
    return 0


def validate(argv: list[str] | None = None) -> int:
    """Point d'entrée pour la commande `ubl-validate`.

    FR: Vérifie qu'une facture JSON passe la normalisation et la validation.
    EN: Checks that a JSON invoice passes normalization and validation.
    """
    parser = argparse.ArgumentParser(
        prog="ubl-validate",
        description="Check a JSON invoice before UBL generation.",
    )
    parser.add_argument("input", help="JSON invoice file, or - for stdin")
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        invoice = prepare_invoice(_read_input(args.input))
    except (OSError, UnicodeDecodeError, UBLInvoiceError) as exc:
        print(f"ubl-validate : {exc}", file=sys.stderr)
        return 1

    print(f"{invoice.invoice_number} : OK")
    return 0


def main_generate() -> None:
    sys.exit(generate())


def main_validate() -> None:
    sys.exit(validate())
