"""Hiérarchie d'exceptions pour l'envoi au service de stockage.

FR: Exceptions typées pour les erreurs de transport et de configuration
    lors de la transmission du document UBL.
EN: Typed exceptions for transport and configuration errors while
    pushing the UBL document.
"""

from ubl_invoice.errors import UBLInvoiceError


class DispatchError(UBLInvoiceError):
    """Erreur de base pour l'envoi du document.

    FR: Classe parente des erreurs d'envoi. Jamais relancée : une seule
        tentative par requête.
    EN: Base class for dispatch errors. Never retried.
    """


class DispatchConnectionError(DispatchError):
    """Erreur de transport vers le service de stockage.

    FR: Timeout, DNS, TLS, connexion refusée ou toute exception levée
        pendant l'appel.
    EN: Timeout, DNS, TLS, refused connection or any exception raised
        during the call.
    """


class DispatchAuthenticationError(DispatchError):
    """Jeton d'accès au service de stockage absent.

    FR: Levée à la construction du connecteur, avant tout appel réseau.
    EN: Raised when building the connector, before any network call.
    """
