"""Enchaînement lecture → normalisation → validation."""

from typing import Any

from ubl_invoice.models.invoice import Invoice
from ubl_invoice.processing.normalizer import normalize_invoice
from ubl_invoice.processing.parser import parse_request_body
from ubl_invoice.processing.validator import load_invoice


def prepare_invoice(body: Any) -> Invoice:
    """Transforme un corps de requête brut en facture typée.

    Raises:
        ParseError: Corps JSON invalide.
        ValidationError: Conversion impossible ou champ manquant.
    """
    data = parse_request_body(body)
    return load_invoice(normalize_invoice(data))
