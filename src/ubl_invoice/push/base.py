"""Interface abstraite pour les connecteurs du service de stockage.

FR: Un connecteur pousse un ou plusieurs fichiers vers un enregistrement
    du service de stockage/mise à jour, identifié par ``record_id``.
    La configuration (cible, namespace, jeton) est injectée à la
    construction.
EN: A connector pushes one or more files to a record of the storage/update
    service. Configuration (target, namespace, token) is injected at
    construction.
"""

from abc import ABCMeta, abstractmethod

from ubl_invoice.push.models import PushData, PushFile, PushResponse


class BaseStorageService(metaclass=ABCMeta):
    """Classe de base abstraite pour les connecteurs de stockage."""

    def __init__(self, target_id: str, namespace: str, auth_token: str) -> None:
        self.target_id = target_id
        self.namespace = namespace
        self.auth_token = auth_token

    def get_push_data_file(
        self,
        content: str | bytes,
        file_name: str,
        content_type: str = "application/xml",
    ) -> PushFile:
        """Emballe un contenu dans un fichier nommé."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        return PushFile(file_name=file_name, content=content, content_type=content_type)

    @abstractmethod
    async def push(self, record_id: str, data: PushData) -> PushResponse:
        """Pousse les fichiers vers un enregistrement.

        Args:
            record_id: Identifiant de l'enregistrement à mettre à jour.
            data: Fichiers à transmettre.

        Returns:
            La réponse du service (tout code HTTP est retourné, sans lever).

        Raises:
            DispatchConnectionError: Si l'appel échoue au niveau transport.
        """
        ...
