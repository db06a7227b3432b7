"""Modèles de données pour l'envoi au service de stockage.

FR: Fichier à pousser, charge utile, réponse brute du service et
    résultat de l'envoi exposé à l'appelant.
EN: File to push, payload, raw service response and dispatch result
    exposed to the caller.
"""

from pydantic import BaseModel, Field


class PushFile(BaseModel):
    """Fichier nommé à transmettre."""

    file_name: str
    content: bytes
    content_type: str = "application/xml"


class PushData(BaseModel):
    """Charge utile d'un envoi : fichiers indexés par nom de champ."""

    files: dict[str, PushFile] = Field(default_factory=dict)


class PushResponse(BaseModel):
    """Réponse du service de stockage.

    FR: Code HTTP retourné et corps décodé (JSON si possible, sinon texte).
    EN: Returned HTTP status and decoded body (JSON when possible).
    """

    status_code: int
    body: dict | list | str | None = None


class DispatchResult(BaseModel):
    """Résultat d'un envoi.

    FR: ``success`` vaut True pour un code 2xx ; le code est toujours exposé.
    EN: ``success`` is True for a 2xx status; the status is always exposed.
    """

    success: bool
    status_code: int
    file_name: str
