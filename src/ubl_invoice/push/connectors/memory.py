"""Connecteur de stockage en mémoire pour les tests et le développement.

FR: Conserve les fichiers poussés en mémoire et répond avec un code HTTP
    configurable. Peut simuler une panne de transport.
EN: Keeps pushed files in memory and answers with a configurable HTTP
    status. Can simulate a transport failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ubl_invoice.push.base import BaseStorageService
from ubl_invoice.push.errors import DispatchConnectionError
from ubl_invoice.push.models import PushData, PushFile, PushResponse


@dataclass
class _StoredPush:
    """Envoi conservé en mémoire."""

    record_id: str
    files: dict[str, PushFile]
    pushed_at: datetime


class MemoryStorageService(BaseStorageService):
    """Connecteur de stockage en mémoire."""

    def __init__(
        self,
        status_code: int = 200,
        fail_with: str | None = None,
        body: dict | list | str | None = None,
    ) -> None:
        super().__init__(target_id="memory", namespace="test", auth_token="memory")
        self.status_code = status_code
        self.fail_with = fail_with
        self.body = body
        self.pushes: list[_StoredPush] = []

    async def push(self, record_id: str, data: PushData) -> PushResponse:
        """Enregistre l'envoi, ou simule une panne de transport."""
        if self.fail_with is not None:
            raise DispatchConnectionError(self.fail_with)

        self.pushes.append(
            _StoredPush(
                record_id=record_id,
                files=dict(data.files),
                pushed_at=datetime.now(timezone.utc),
            )
        )
        return PushResponse(status_code=self.status_code, body=self.body)

    # --- Méthodes utilitaires (propres au connecteur mémoire) ---

    def get_files(self, record_id: str) -> list[PushFile]:
        """Retourne les fichiers poussés vers un enregistrement."""
        return [
            f
            for stored in self.pushes
            if stored.record_id == record_id
            for f in stored.files.values()
        ]
