"""Gestionnaire de requête : facture JSON → UBL → service de stockage.

FR: Lit et valide la requête, génère le XML UBL puis le transmet au
    service de stockage. Les erreurs de lecture, normalisation, validation
    et génération donnent une réponse 400 ; une panne d'envoi donne une
    erreur générique. Aucune exception n'est propagée à l'hôte.
EN: Reads and validates the request, generates the UBL XML then pushes it
    to the storage service. Parse/normalize/validate/generate errors yield
    a 400 response; a dispatch failure yields a generic error.
"""

from __future__ import annotations

import logging

from ubl_invoice.config import Settings, get_settings
from ubl_invoice.errors import UBLInvoiceError, ValidationError
from ubl_invoice.generators.ubl import UBLGenerator
from ubl_invoice.messages import Request, Response, ResponseBuilder
from ubl_invoice.processing.pipeline import prepare_invoice
from ubl_invoice.push.connectors.http import HttpStorageService
from ubl_invoice.push.dispatcher import DocumentDispatcher
from ubl_invoice.push.errors import DispatchError

logger = logging.getLogger(__name__)

RECORD_ID_PARAM = "record_id"
DISPATCH_ERROR_MESSAGE = "An error has occurred"


class UBLInvoiceProcessor:
    """Gestionnaire de génération et d'envoi de factures UBL."""

    def __init__(
        self,
        dispatcher: DocumentDispatcher,
        generator: UBLGenerator | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.generator = generator or UBLGenerator()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> UBLInvoiceProcessor:
        """Construit le gestionnaire avec le connecteur HTTP configuré."""
        settings = settings or get_settings()
        service = HttpStorageService.from_settings(settings)
        return cls(dispatcher=DocumentDispatcher(service))

    def validate_input(self, request: Request) -> None:
        """Vérifie la présence du corps et du paramètre ``record_id``."""
        if request.body is None or request.body in ("", b""):
            raise ValidationError("Request body is required", field="body")
        if not request.query.get(RECORD_ID_PARAM):
            msg = f"{RECORD_ID_PARAM} query parameter is required"
            raise ValidationError(msg, field=RECORD_ID_PARAM)

    async def process(self, request: Request) -> Response:
        """Traite une requête de bout en bout."""
        try:
            self.validate_input(request)
            invoice = prepare_invoice(request.body)
            xml_content = self.generator.generate_xml(invoice)
        except UBLInvoiceError as exc:
            logger.warning("Requête rejetée : %s", exc)
            return ResponseBuilder.bad_request(str(exc))
        except Exception as exc:
            logger.exception("Erreur inattendue lors de la génération UBL")
            return ResponseBuilder.bad_request(str(exc) or "Unknown error")

        try:
            result = await self.dispatcher.dispatch(
                invoice.invoice_number,
                xml_content,
                request.query[RECORD_ID_PARAM],
            )
        except DispatchError:
            logger.exception(
                "Erreur d'envoi au service de stockage pour facture %s",
                invoice.invoice_number,
            )
            return ResponseBuilder.error(DISPATCH_ERROR_MESSAGE)

        return ResponseBuilder.create(result.status_code, {"success": result.success})
