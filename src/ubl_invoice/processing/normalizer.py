"""Normalisation des dates et montants de la facture.

FR: Convertit les dates d'émission et d'échéance, la taxe, les totaux et
    les quantités/prix des lignes avant la validation. La première erreur
    interrompt toute la normalisation.
EN: Casts issue/due dates, tax, totals and line quantities/prices before
    validation. The first failure aborts the whole normalization.
"""

from collections.abc import Mapping
from typing import Any

from ubl_invoice.errors import ValidationError
from ubl_invoice.processing.casting import FieldSpec, cast_object

ROOT_SCHEMA: dict[str, FieldSpec] = {
    "issueDate": {"type": "date"},
    "dueDate": {"type": "date"},
}

TAX_SCHEMA: dict[str, FieldSpec] = {
    "percent": {"type": "integer"},
    "amount": {"type": "integer"},
}

AMOUNTS_SCHEMA: dict[str, FieldSpec] = {
    "taxable": {"type": "integer"},
    "total": {"type": "integer"},
}

ITEM_SCHEMA: dict[str, FieldSpec] = {
    "quantity": {"type": "integer"},
    "price": {"type": "integer"},
    "lineAmount": {"type": "integer"},
}


def _cast(
    record: Mapping[str, Any], schema: dict[str, FieldSpec], path: str
) -> dict[str, Any]:
    """Convertit ``record`` et fusionne les champs convertis."""
    result = cast_object(record, schema, strict=True, path=path)
    if not result.success:
        raise ValidationError(
            result.error or f"{path}: invalid value", field=result.field_path
        )
    return {**record, **result.value}


def normalize_invoice(data: Mapping[str, Any]) -> dict[str, Any]:
    """Retourne une copie normalisée de la facture.

    Les sous-enregistrements absents ou mal formés sont laissés tels quels
    pour que le validateur signale le champ manquant.

    Raises:
        ValidationError: Si un champ présent n'est pas convertible.
    """
    normalized = _cast(data, ROOT_SCHEMA, "")

    for key, schema in (("tax", TAX_SCHEMA), ("amounts", AMOUNTS_SCHEMA)):
        record = data.get(key)
        if isinstance(record, Mapping):
            normalized[key] = _cast(record, schema, key)

    items = data.get("items")
    if isinstance(items, list):
        normalized["items"] = [
            _cast(item, ITEM_SCHEMA, f"items[{idx}]")
            if isinstance(item, Mapping)
            else item
            for idx, item in enumerate(items)
        ]

    return normalized
