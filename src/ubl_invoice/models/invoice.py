"""Modèles principaux pour la facture UBL.

FR: Taxe, montants, lignes et facture racine. Les montants sont des entiers
    déjà normalisés ; aucun calcul n'est refait (montant de ligne, total TTC).
EN: Tax, amounts, lines and root invoice. Amounts are normalized integers;
    nothing is recomputed (line amount, tax-inclusive total).
"""

from datetime import date

from pydantic import Field

from ubl_invoice.models.base import UBLModel
from ubl_invoice.models.party import Party

DEFAULT_PAYMENT_TERMS = "30 days from receipt of invoice"


class Tax(UBLModel):
    """Taux de TVA unique appliqué à toute la facture."""

    percent: int = Field(..., description="Taux de TVA en % / VAT rate in %")
    amount: int = Field(..., description="Montant de TVA / Tax amount")


class Amounts(UBLModel):
    """Totaux de la facture.

    FR: ``total`` devrait valoir ``taxable + tax.amount`` ; ce n'est pas vérifié.
    EN: ``total`` is expected to equal ``taxable + tax.amount``; not checked.
    """

    taxable: int = Field(..., description="Total HT / Tax exclusive total")
    total: int = Field(..., description="Total TTC / Tax inclusive total")


class InvoiceItem(UBLModel):
    """Ligne de facture.

    FR: Le montant de ligne est repris tel quel, sans recalcul
        ``quantity × price``.
    EN: The line amount is taken as given, never recomputed.
    """

    name: str = Field(..., description="Désignation / Item name")
    description: str | None = Field(
        default=None,
        description="Description détaillée / Item description",
    )
    quantity: int = Field(..., description="Quantité facturée / Invoiced quantity")
    price: int = Field(..., description="Prix unitaire HT / Unit price")
    line_amount: int = Field(..., description="Montant HT de la ligne / Line amount")
    unit_code: str | None = Field(
        default=None,
        description="Code unité UN/ECE Rec. 20 (défaut EA) / Unit code",
    )


class Invoice(UBLModel):
    """Facture commerciale (type 380).

    FR: Modèle racine construit à partir du corps de requête normalisé
        et validé. Vit le temps d'une requête.
    EN: Root model built from the normalized, validated request body.
        Lives for a single request.
    """

    # --- Identification ---
    invoice_number: str = Field(..., description="Numéro de facture / Invoice number")
    issue_date: date = Field(..., description="Date d'émission / Issue date")
    due_date: date = Field(..., description="Date d'échéance / Due date")
    currency: str = Field(..., description="Code devise ISO 4217 / Currency code")

    # --- Références acheteur ---
    accounting_cost: str | None = Field(
        default=None,
        description="Référence comptable acheteur / Buyer accounting reference",
    )
    buyer_reference: str | None = Field(
        default=None,
        description="Référence acheteur / Buyer reference",
    )

    # --- Parties ---
    supplier: Party = Field(..., description="Fournisseur / Supplier")
    customer: Party = Field(..., description="Client / Customer")

    # --- Paiement, taxe et totaux ---
    payment_terms: str | None = Field(
        default=None,
        description="Conditions de paiement / Payment terms note",
    )
    tax: Tax
    amounts: Amounts

    # --- Lignes ---
    items: list[InvoiceItem] = Field(..., min_length=1)

    output_file: str | None = Field(
        default=None,
        description="Fichier de sortie suggéré / Output file hint",
    )

    @property
    def payment_terms_note(self) -> str:
        """Note de conditions de paiement, avec le texte par défaut."""
        return self.payment_terms or DEFAULT_PAYMENT_TERMS
