"""Validation de présence des champs obligatoires.

FR: Vérifie, dans un ordre fixe, la présence de chaque champ utilisé sans
    condition par le générateur UBL. S'arrête au premier champ manquant
    pour produire un message prévisible.
EN: Checks, in a fixed order, that every field the UBL generator
    unconditionally reads is present. Stops at the first missing field.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ubl_invoice.errors import ValidationError
from ubl_invoice.models.invoice import Invoice

ROOT_FIELDS = ("invoiceNumber", "issueDate", "dueDate", "currency")
PARTY_FIELDS = ("name", "taxId", "companyId")
ADDRESS_FIELDS = ("street", "city", "postcode", "country")
TAX_FIELDS = ("percent", "amount")
AMOUNTS_FIELDS = ("taxable", "total")
ITEM_FIELDS = ("name", "quantity", "price", "lineAmount")

ITEMS_NOT_EMPTY = "Items must be an array with at least one element."


def _get(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return None


def _require(value: Any, field: str) -> None:
    """Lève ValidationError si la valeur est absente ou vide."""
    if value is None or value == "":
        raise ValidationError(f"{field} is required", field=field)


def _require_fields(record: Any, fields: tuple[str, ...], prefix: str) -> None:
    for name in fields:
        _require(_get(record, name), f"{prefix}.{name}")


def _validate_party(party: Any, prefix: str) -> None:
    _require(party, prefix)
    _require_fields(party, PARTY_FIELDS, prefix)

    address = _get(party, "address")
    _require(address, f"{prefix}.address")
    _require_fields(address, ADDRESS_FIELDS, f"{prefix}.address")


def validate_invoice(data: Mapping[str, Any]) -> None:
    """Vérifie la présence des champs obligatoires de la facture.

    Ordre : en-tête, fournisseur, client, taxe, totaux, lignes.

    Raises:
        ValidationError: Au premier champ manquant, avec son chemin
            (ex: ``supplier.address.city``, ``items[2].price``).
    """
    for name in ROOT_FIELDS:
        _require(data.get(name), name)

    _validate_party(data.get("supplier"), "supplier")
    _validate_party(data.get("customer"), "customer")

    tax = data.get("tax")
    _require(tax, "tax")
    _require_fields(tax, TAX_FIELDS, "tax")

    amounts = data.get("amounts")
    _require(amounts, "amounts")
    _require_fields(amounts, AMOUNTS_FIELDS, "amounts")

    items = data.get("items")
    _require(items, "items")
    if not isinstance(items, list) or not items:
        raise ValidationError(ITEMS_NOT_EMPTY, field="items")
    for idx, item in enumerate(items):
        _require_fields(item, ITEM_FIELDS, f"items[{idx}]")


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Formate une localisation Pydantic en chemin ``a.b[0].c``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def load_invoice(data: Mapping[str, Any]) -> Invoice:
    """Valide puis construit le modèle ``Invoice``.

    Raises:
        ValidationError: Champ manquant, ou type incompatible détecté
            par Pydantic (premier champ en erreur).
    """
    validate_invoice(data)
    try:
        return Invoice.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = _format_location(first["loc"])
        raise ValidationError(f"{field}: {first['msg']}", field=field) from exc
