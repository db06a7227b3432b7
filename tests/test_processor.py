"""Tests du gestionnaire de requêtes de bout en bout."""

import json
import logging
from typing import Any

import httpx
import pytest
from lxml import etree
from pydantic import SecretStr

from ubl_invoice.config import Settings
from ubl_invoice.messages import Request
from ubl_invoice.processor import DISPATCH_ERROR_MESSAGE, UBLInvoiceProcessor
from ubl_invoice.push.connectors.http import HttpStorageService
from ubl_invoice.push.connectors.memory import MemoryStorageService
from ubl_invoice.push.dispatcher import DocumentDispatcher

INV_NS = "urn:oasis:names:specification:ubl:schema:xsd:Invoice-2"
CBC_NS = "urn:oasis:names:specification:ubl:schema:xsd:CommonBasicComponents-2"


def _processor(service: Any) -> UBLInvoiceProcessor:
    return UBLInvoiceProcessor(
        dispatcher=DocumentDispatcher(service, clock=lambda: 1700000000.0)
    )


def _request(body: Any, record_id: str | None = "rec-1") -> Request:
    query = {"record_id": record_id} if record_id is not None else {}
    return Request(body=body, query=query)


class TestSuccess:
    async def test_generates_and_pushes(self, invoice_payload: dict[str, Any]) -> None:
        service = MemoryStorageService(status_code=200)

        response = await _processor(service).process(_request(invoice_payload))

        assert response.status_code == 200
        assert response.body == {"success": True}
        assert response.content_type == "application/json"

        pushed = service.get_files("rec-1")
        assert [f.file_name for f in pushed] == ["INV-1_1700000000000.xml"]
        root = etree.fromstring(pushed[0].content)
        assert root.tag == f"{{{INV_NS}}}Invoice"
        assert root.findtext(f"{{{CBC_NS}}}ID") == "INV-1"

    async def test_json_string_body(self, invoice_payload: dict[str, Any]) -> None:
        service = MemoryStorageService()
        response = await _processor(service).process(
            _request(json.dumps(invoice_payload))
        )
        assert response.body == {"success": True}

    async def test_stringly_typed_amounts(
        self, invoice_payload: dict[str, Any]
    ) -> None:
        invoice_payload["amounts"] = {"taxable": "1500", "total": "1815"}
        service = MemoryStorageService()

        await _processor(service).process(_request(invoice_payload))

        xml = service.get_files("rec-1")[0].content
        assert b'<cbc:TaxExclusiveAmount currencyID="EUR">1500<' in xml

    async def test_non_2xx_status_passed_through(
        self, invoice_payload: dict[str, Any]
    ) -> None:
        service = MemoryStorageService(status_code=500)
        response = await _processor(service).process(_request(invoice_payload))
        assert response.status_code == 500
        assert response.body == {"success": False}

    async def test_over_http(self, invoice_payload: dict[str, Any]) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201)

        service = HttpStorageService(
            target_id="pod",
            namespace="ns",
            auth_token="tok",
            base_url="http://storage",
            transport=httpx.MockTransport(handler),
        )
        response = await _processor(service).process(_request(invoice_payload))

        assert response.status_code == 201
        assert response.body == {"success": True}
        assert seen[0].url.path == "/namespaces/ns/pods/pod/records/rec-1"


class TestBadRequest:
    async def test_invalid_json(self) -> None:
        service = MemoryStorageService()
        response = await _processor(service).process(_request("{not json"))

        assert response.status_code == 400
        assert response.body == "Invalid JSON request body"
        assert response.content_type == "text/plain"
        assert service.pushes == []

    async def test_missing_field(self, invoice_payload: dict[str, Any]) -> None:
        del invoice_payload["supplier"]["address"]["city"]
        service = MemoryStorageService()

        response = await _processor(service).process(_request(invoice_payload))

        assert response.status_code == 400
        assert response.body == "supplier.address.city is required"
        assert service.pushes == []

    async def test_empty_items(self, invoice_payload: dict[str, Any]) -> None:
        invoice_payload["items"] = []
        response = await _processor(MemoryStorageService()).process(
            _request(invoice_payload)
        )
        assert response.status_code == 400
        assert "at least one element" in response.body

    async def test_non_numeric_amount(self, invoice_payload: dict[str, Any]) -> None:
        invoice_payload["tax"]["percent"] = "twenty"
        response = await _processor(MemoryStorageService()).process(
            _request(invoice_payload)
        )
        assert response.status_code == 400
        assert response.body == "tax.percent: invalid integer"

    async def test_control_character_in_text(
        self, invoice_payload: dict[str, Any]
    ) -> None:
        invoice_payload["supplier"]["name"] = "ACME\x07"
        service = MemoryStorageService()

        response = await _processor(service).process(_request(invoice_payload))

        assert response.status_code == 400
        assert response.body.startswith("Invalid XML content: ")
        assert service.pushes == []

    @pytest.mark.parametrize("amount", ["1e5000", "1e3000000"])
    async def test_exponent_amount_rejected(
        self, invoice_payload: dict[str, Any], amount: str
    ) -> None:
        invoice_payload["tax"]["amount"] = amount
        response = await _processor(MemoryStorageService()).process(
            _request(invoice_payload)
        )
        assert response.status_code == 400
        assert response.body == "tax.amount: invalid integer"

    async def test_missing_record_id(self, invoice_payload: dict[str, Any]) -> None:
        response = await _processor(MemoryStorageService()).process(
            _request(invoice_payload, record_id=None)
        )
        assert response.status_code == 400
        assert response.body == "record_id query parameter is required"

    @pytest.mark.parametrize("body", [None, ""])
    async def test_missing_body(self, body: Any) -> None:
        response = await _processor(MemoryStorageService()).process(_request(body))
        assert response.status_code == 400
        assert response.body == "Request body is required"


class TestDispatchFailure:
    async def test_transport_failure(
        self, invoice_payload: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        service = MemoryStorageService(fail_with="connection refused")

        with caplog.at_level(logging.ERROR, logger="ubl_invoice.processor"):
            response = await _processor(service).process(_request(invoice_payload))

        assert response.status_code == 500
        assert response.body == DISPATCH_ERROR_MESSAGE == "An error has occurred"
        assert "connection refused" not in response.body
        assert any("INV-1" in record.getMessage() for record in caplog.records)


class TestFromSettings:
    def test_builds_http_connector(self) -> None:
        settings = Settings(
            pod_update_invoice_id="pod",
            instance_namespace="ns",
            pod_update_invoice_auth_token=SecretStr("tok"),
        )
        processor = UBLInvoiceProcessor.from_settings(settings)

        assert isinstance(processor.dispatcher.service, HttpStorageService)
        assert processor.dispatcher.service.target_id == "pod"
