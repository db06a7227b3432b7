"""Envoi du document UBL au service de stockage.

FR: Nomme le fichier ``<numéro>_<epoch ms>.xml``, le pousse avec
    l'identifiant d'enregistrement fourni par l'appelant et traduit le
    code HTTP en résultat. Une seule tentative, sans relance.
EN: Names the file ``<number>_<epoch ms>.xml``, pushes it with the
    caller-supplied record id and maps the HTTP status to a result.
    Single attempt, no retry.
"""

import logging
import time
from collections.abc import Callable

from ubl_invoice.push.base import BaseStorageService
from ubl_invoice.push.errors import DispatchConnectionError, DispatchError
from ubl_invoice.push.models import DispatchResult, PushData

logger = logging.getLogger(__name__)

UBL_FILE_FIELD = "ubl_file"


class DocumentDispatcher:
    """Transmet les factures générées au service de stockage."""

    def __init__(
        self,
        service: BaseStorageService,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.service = service
        self._clock = clock

    def build_file_name(self, invoice_number: str) -> str:
        """Nom du fichier : ``<invoiceNumber>_<epochMillis>.xml``."""
        return f"{invoice_number}_{int(self._clock() * 1000)}.xml"

    async def dispatch(
        self, invoice_number: str, xml_content: str, record_id: str
    ) -> DispatchResult:
        """Pousse le XML vers l'enregistrement ``record_id``.

        Returns:
            Le résultat ; ``success`` est False pour un code non 2xx.

        Raises:
            DispatchError: Si l'appel échoue au niveau transport.
        """
        file_name = self.build_file_name(invoice_number)
        data = PushData(
            files={
                UBL_FILE_FIELD: self.service.get_push_data_file(xml_content, file_name),
            }
        )

        try:
            response = await self.service.push(record_id, data)
        except DispatchError:
            raise
        except Exception as exc:
            msg = f"Storage service call failed: {exc}"
            raise DispatchConnectionError(msg) from exc

        success = 200 <= response.status_code < 300
        if success:
            logger.info(
                "Facture %s envoyée (enregistrement %s) : HTTP %s",
                invoice_number,
                record_id,
                response.status_code,
            )
        else:
            logger.warning(
                "Facture %s refusée (enregistrement %s) : HTTP %s %s",
                invoice_number,
                record_id,
                response.status_code,
                response.body,
            )
        return DispatchResult(
            success=success,
            status_code=response.status_code,
            file_name=file_name,
        )
