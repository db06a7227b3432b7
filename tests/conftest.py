"""Fixtures partagées : facture JSON de référence et modèle typé."""

import copy
from typing import Any

import pytest

from ubl_invoice.models import Invoice
from ubl_invoice.processing import load_invoice, normalize_invoice

INVOICE_PAYLOAD: dict[str, Any] = {
    "invoiceNumber": "INV-1",
    "issueDate": "2024-01-01",
    "dueDate": "2024-01-31",
    "currency": "EUR",
    "supplier": {
        "name": "A",
        "taxId": "T1",
        "companyId": "C1",
        "address": {
            "street": "S",
            "city": "C",
            "postcode": "P",
            "country": "BE",
        },
    },
    "customer": {
        "name": "B",
        "taxId": "T2",
        "companyId": "C2",
        "address": {
            "street": "Rue de la Loi 16",
            "city": "Bruxelles",
            "postcode": "1000",
            "country": "BE",
        },
    },
    "tax": {"percent": 21, "amount": 210},
    "amounts": {"taxable": 1000, "total": 1210},
    "items": [
        {"name": "Item", "quantity": 1, "price": 1000, "lineAmount": 1000},
    ],
}


@pytest.fixture
def invoice_payload() -> dict[str, Any]:
    """Corps de requête minimal valide (copie modifiable)."""
    return copy.deepcopy(INVOICE_PAYLOAD)


@pytest.fixture
def sample_invoice(invoice_payload: dict[str, Any]) -> Invoice:
    """Facture typée construite depuis le corps de référence."""
    return load_invoice(normalize_invoice(invoice_payload))
