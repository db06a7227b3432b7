"""Conversion stricte des champs d'entrée.

FR: Convertit les champs déclarés d'un enregistrement vers leur type
    canonique (entier, date). Une valeur absente est ignorée ; une valeur
    présente mais non convertible est une erreur.
EN: Casts the declared fields of a record to their canonical type
    (integer, date). Absent values are skipped; present but
    non-convertible values are errors.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal, TypedDict

FieldType = Literal["integer", "date"]

# Montants et quantités : au-delà, la valeur n'est plus un montant plausible
MAX_INTEGER_DIGITS = 18

_INTEGER_RE = re.compile(r"[+-]?\d+(?:\.\d*)?")


class FieldSpec(TypedDict):
    """Déclaration du type cible d'un champ."""

    type: FieldType


@dataclass(frozen=True)
class CastResult:
    """Résultat d'une conversion.

    ``value`` ne contient que les champs convertis, à fusionner dans
    l'enregistrement d'origine.
    """

    success: bool
    value: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    field_path: str | None = None


def cast_integer(value: object) -> int:
    """Convertit une valeur à valeur entière (``"1500"``, ``1500.0``) en ``int``.

    Les chaînes sont limitées à la notation décimale (``"1500"``,
    ``"1500.00"``) : pas d'exposant, au plus ``MAX_INTEGER_DIGITS`` chiffres.

    Raises:
        TypeError: Type non numérique (booléen inclus).
        ValueError: Valeur non entière, non finie ou trop grande.
    """
    if isinstance(value, bool):
        raise TypeError("boolean is not an integer")
    if isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not integer-valued")
        number = Decimal(value)
    elif isinstance(value, Decimal):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise ValueError(f"{value!r} is not a decimal integer")
        number = Decimal(text)
    else:
        raise TypeError(f"cannot cast {type(value).__name__} to integer")

    if not number.is_finite():
        raise ValueError(f"{value!r} is not finite")
    # adjusted() = position du chiffre le plus significatif, sans développer
    if number and number.adjusted() >= MAX_INTEGER_DIGITS:
        raise ValueError(f"integer exceeds {MAX_INTEGER_DIGITS} digits")
    if number != number.to_integral_value():
        raise ValueError(f"{value!r} is not integer-valued")
    return int(number)


def cast_date(value: object) -> date:
    """Convertit une date ISO 8601 (ou un datetime) en ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"cannot cast {type(value).__name__} to date")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


_CASTERS: dict[FieldType, Callable[[object], Any]] = {
    "integer": cast_integer,
    "date": cast_date,
}


def cast_object(
    data: Mapping[str, Any],
    schema: Mapping[str, FieldSpec],
    *,
    strict: bool = True,
    path: str = "",
) -> CastResult:
    """Convertit les champs de ``data`` déclarés dans ``schema``.

    Args:
        data: Enregistrement source (non modifié).
        schema: Type cible par nom de champ.
        strict: Échoue au premier champ non convertible ; sinon le champ
            est laissé tel quel.
        path: Préfixe du chemin de champ pour les messages d'erreur.

    Returns:
        Le résultat, avec les seuls champs convertis dans ``value``.
    """
    converted: dict[str, Any] = {}
    for name, spec in schema.items():
        raw = data.get(name)
        if raw is None:
            continue
        field_type = spec["type"]
        try:
            converted[name] = _CASTERS[field_type](raw)
        except (TypeError, ValueError, ArithmeticError):
            if not strict:
                continue
            field_path = f"{path}.{name}" if path else name
            return CastResult(
                success=False,
                error=f"{field_path}: invalid {field_type}",
                field_path=field_path,
            )
    return CastResult(success=True, value=converted)
