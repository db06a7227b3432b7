"""Modèles de données Pydantic pour la facture UBL."""

from ubl_invoice.models.invoice import Amounts, Invoice, InvoiceItem, Tax
from ubl_invoice.models.party import Address, Party

__all__ = [
    "Address",
    "Amounts",
    "Invoice",
    "InvoiceItem",
    "Party",
    "Tax",
]
