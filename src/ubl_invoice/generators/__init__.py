"""Générateur de factures UBL 2.1."""

from ubl_invoice.generators.base import GenerationResult
from ubl_invoice.generators.ubl import UBLGenerator

__all__ = [
    "GenerationResult",
    "UBLGenerator",
]
