"""Énumérations pour les factures UBL.

FR: Codes conformes aux listes EN16931 utilisées par le générateur
    (UNTDID 1001, UNTDID 5305, UN/ECE Rec. 20).
EN: Codes from the EN16931 code lists used by the generator.
"""

from enum import StrEnum


class InvoiceTypeCode(StrEnum):
    """Code du type de facture (UNTDID 1001).

    FR: Seule la facture commerciale est prise en charge.
    EN: Only the commercial invoice is supported.
    """

    INVOICE = "380"
    """Facture commerciale / Commercial invoice"""


class VATCategory(StrEnum):
    """Catégorie de TVA (UNTDID 5305)."""

    STANDARD = "S"
    """Taux normal / Standard rate"""


class TaxSchemeCode(StrEnum):
    """Schéma de taxe (UNCL 5153)."""

    VAT = "VAT"
    """Taxe sur la valeur ajoutée / Value added tax"""


class UnitOfMeasure(StrEnum):
    """Code unité de mesure (UN/ECE Rec. 20)."""

    EACH = "EA"
    """Chaque / Each (unité par défaut des lignes)"""
