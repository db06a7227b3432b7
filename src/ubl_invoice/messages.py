"""Requête et réponse du gestionnaire, indépendantes du framework HTTP.

FR: Le framework hôte construit une ``Request`` (corps + paramètres de
    requête) et retransmet la ``Response`` produite.
EN: The host framework builds a ``Request`` (body + query parameters)
    and relays the produced ``Response``.
"""

from typing import Any

from pydantic import BaseModel, Field


class Request(BaseModel):
    """Requête entrante."""

    body: Any = None
    query: dict[str, str] = Field(default_factory=dict)


class Response(BaseModel):
    """Réponse sortante."""

    status_code: int
    body: Any = None
    content_type: str = "application/json"


class ResponseBuilder:
    """Fabrique de réponses."""

    @staticmethod
    def create(status_code: int, payload: Any) -> Response:
        """Réponse JSON avec le code donné."""
        return Response(status_code=status_code, body=payload)

    @staticmethod
    def bad_request(message: str) -> Response:
        """Réponse 400 en texte brut."""
        return Response(status_code=400, body=message, content_type="text/plain")

    @staticmethod
    def error(message: str, status_code: int = 500) -> Response:
        """Réponse d'erreur générique en texte brut."""
        return Response(
            status_code=status_code, body=message, content_type="text/plain"
        )
