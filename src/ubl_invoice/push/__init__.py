"""Envoi des documents UBL au service de stockage.

FR: Interface abstraite de connecteur, connecteurs HTTP et mémoire,
    et répartiteur qui nomme et transmet le document.
EN: Abstract connector interface, HTTP and memory connectors, and the
    dispatcher that names and pushes the document.
"""

from ubl_invoice.push.base import BaseStorageService
from ubl_invoice.push.dispatcher import DocumentDispatcher
from ubl_invoice.push.errors import (
    DispatchAuthenticationError,
    DispatchConnectionError,
    DispatchError,
)
from ubl_invoice.push.models import DispatchResult, PushData, PushFile, PushResponse

__all__ = [
    "BaseStorageService",
    "DispatchAuthenticationError",
    "DispatchConnectionError",
    "DispatchError",
    "DispatchResult",
    "DocumentDispatcher",
    "PushData",
    "PushFile",
    "PushResponse",
]
