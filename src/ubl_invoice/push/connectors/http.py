"""Connecteur HTTP vers le service de stockage.

FR: Envoie les fichiers en multipart (PUT) avec un jeton Bearer, via httpx.
    Une seule tentative ; le timeout est celui du client HTTP.
EN: Sends the files as multipart (PUT) with a Bearer token, via httpx.
    Single attempt; the timeout is the HTTP client's.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from ubl_invoice.push.base import BaseStorageService
from ubl_invoice.push.errors import (
    DispatchAuthenticationError,
    DispatchConnectionError,
)
from ubl_invoice.push.models import PushData, PushResponse

if TYPE_CHECKING:
    from ubl_invoice.config import Settings

logger = logging.getLogger(__name__)


class HttpStorageService(BaseStorageService):
    """Connecteur HTTP du service de stockage."""

    def __init__(
        self,
        target_id: str,
        namespace: str,
        auth_token: str,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not auth_token:
            msg = "Storage service auth token is not configured"
            raise DispatchAuthenticationError(msg)
        super().__init__(
            target_id=target_id, namespace=namespace, auth_token=auth_token
        )
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HttpStorageService:
        """Construit le connecteur depuis la configuration."""
        return cls(
            target_id=settings.pod_update_invoice_id,
            namespace=settings.instance_namespace,
            auth_token=settings.pod_update_invoice_auth_token.get_secret_value(),
            base_url=settings.pod_base_url,
            timeout=settings.pod_timeout,
            transport=transport,
        )

    def record_url(self, record_id: str) -> str:
        """URL de l'enregistrement cible."""
        return (
            f"{self.base_url}/namespaces/{quote(self.namespace, safe='')}"
            f"/pods/{quote(self.target_id, safe='')}"
            f"/records/{quote(record_id, safe='')}"
        )

    async def push(self, record_id: str, data: PushData) -> PushResponse:
        """Pousse les fichiers en multipart vers l'enregistrement."""
        files = {
            name: (f.file_name, f.content, f.content_type)
            for name, f in data.files.items()
        }
        url = self.record_url(record_id)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"Authorization": f"Bearer {self.auth_token}"},
            ) as client:
                response = await client.put(url, files=files)
        except httpx.HTTPError as exc:
            msg = f"Storage service unreachable: {exc}"
            raise DispatchConnectionError(msg) from exc

        logger.debug("PUT %s -> %s", url, response.status_code)
        return PushResponse(
            status_code=response.status_code, body=_decode_body(response)
        )


def _decode_body(response: httpx.Response) -> dict | list | str | None:
    """Décode le corps en JSON si possible, sinon en texte."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
