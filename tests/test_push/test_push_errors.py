"""Tests de la hiérarchie d'exceptions d'envoi."""

import pytest

from ubl_invoice.errors import ParseError, UBLInvoiceError, ValidationError
from ubl_invoice.push.errors import (
    DispatchAuthenticationError,
    DispatchConnectionError,
    DispatchError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls", [DispatchConnectionError, DispatchAuthenticationError]
    )
    def test_dispatch_subclasses(self, cls: type[DispatchError]) -> None:
        assert issubclass(cls, DispatchError)
        assert issubclass(cls, UBLInvoiceError)

    def test_request_errors_are_not_dispatch_errors(self) -> None:
        assert not issubclass(ParseError, DispatchError)
        assert not issubclass(ValidationError, DispatchError)

    def test_message_kept(self) -> None:
        assert str(DispatchConnectionError("down")) == "down"


class TestRequestErrors:
    def test_parse_error_default_message(self) -> None:
        assert str(ParseError()) == "Invalid JSON request body"

    def test_validation_error_field(self) -> None:
        exc = ValidationError("tax.amount is required", field="tax.amount")
        assert exc.field == "tax.amount"
