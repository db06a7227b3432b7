"""Modèles pour les parties (fournisseur, client) et adresses.

FR: Représentation des entités émettrice et destinataire de la facture,
    avec leurs identifiants fiscaux et légaux.
EN: Representation of the issuing and receiving legal entities,
    with their tax and company identifiers.
"""

from pydantic import Field

from ubl_invoice.models.base import UBLModel


class Address(UBLModel):
    """Adresse postale.

    FR: Tous les champs sont obligatoires dès que l'adresse est fournie.
    EN: All fields are required once the address is present.
    """

    street: str = Field(..., description="Rue et numéro / Street and number")
    city: str = Field(..., description="Ville / City")
    postcode: str = Field(..., description="Code postal / Postal code")
    country: str = Field(
        ...,
        description="Code pays ISO 3166-1 alpha-2 / Country code",
    )


class Party(UBLModel):
    """Partie impliquée dans une facture (fournisseur ou client).

    FR: Entité légale émettrice ou destinataire, identifiée par son
        numéro de TVA (taxId) et son numéro d'entreprise (companyId).
    EN: Issuing or receiving legal entity, identified by its VAT number
        (taxId) and company registration number (companyId).
    """

    id: str | None = Field(
        default=None,
        description="Identifiant externe de la partie / External party identifier",
    )
    name: str = Field(..., description="Raison sociale / Legal name")
    tax_id: str = Field(..., description="Numéro de TVA / VAT identifier")
    company_id: str = Field(
        ...,
        description="Numéro d'enregistrement légal / Company registration ID",
    )
    address: Address = Field(..., description="Adresse principale / Main address")
