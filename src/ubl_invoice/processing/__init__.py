"""Préparation de la facture : lecture, normalisation et validation."""

from ubl_invoice.processing.normalizer import normalize_invoice
from ubl_invoice.processing.parser import parse_request_body
from ubl_invoice.processing.pipeline import prepare_invoice
from ubl_invoice.processing.validator import load_invoice, validate_invoice

__all__ = [
    "load_invoice",
    "normalize_invoice",
    "parse_request_body",
    "prepare_invoice",
    "validate_invoice",
]
