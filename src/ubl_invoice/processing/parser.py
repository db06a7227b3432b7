"""Lecture du corps de requête.

FR: Accepte indifféremment un objet déjà décodé ou une chaîne JSON.
EN: Accepts either already-decoded data or a JSON-encoded string.
"""

import json
from collections.abc import Mapping
from typing import Any

from ubl_invoice.errors import ParseError


def parse_request_body(body: Any) -> dict[str, Any]:
    """Retourne la facture sous forme de dictionnaire.

    Args:
        body: Corps de requête (dict, str ou bytes JSON).

    Returns:
        La facture non typée.

    Raises:
        ParseError: Si le corps n'est pas un JSON décodable en objet.
    """
    data = body
    # Un corps doublement encodé ("{\"invoiceNumber\": ...}") est décodé deux fois
    for _ in range(2):
        if not isinstance(data, (str, bytes, bytearray)):
            break
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise ParseError() from exc

    if not isinstance(data, Mapping):
        raise ParseError()
    return dict(data)
