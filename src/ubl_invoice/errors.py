"""Hiérarchie d'exceptions pour le traitement des factures.

FR: Exceptions typées pour les erreurs de lecture du corps de requête
    et de validation des champs de la facture.
EN: Typed exceptions for request body parsing and invoice field
    validation errors.
"""


class UBLInvoiceError(Exception):
    """Erreur de base pour toutes les opérations du paquet.

    FR: Classe parente de toutes les exceptions levées lors du traitement
        d'une facture (lecture, normalisation, validation, envoi).
    EN: Base class for every exception raised while processing an invoice.
    """


class ParseError(UBLInvoiceError):
    """Corps de requête illisible (JSON invalide).

    FR: Le corps est une chaîne qui ne se décode pas en objet JSON.
    EN: The body is a string that does not decode to a JSON object.
    """

    default_message = "Invalid JSON request body"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ValidationError(UBLInvoiceError):
    """Champ obligatoire absent ou conversion de type impossible.

    FR: Porte le chemin du champ fautif (ex: ``items[2].price``) pour
        produire un message d'erreur prévisible.
    EN: Carries the offending field path (e.g. ``items[2].price``).
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SerializationError(UBLInvoiceError):
    """Valeur impossible à écrire en XML.

    FR: Caractère interdit par XML 1.0 (octet nul, caractère de contrôle)
        dans un texte ou un attribut du document.
    EN: Character not allowed by XML 1.0 (NUL byte, control character)
        in a text or attribute of the document.
    """
