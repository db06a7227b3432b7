"""Résultat de génération d'une facture."""

from pathlib import Path


class GenerationResult:
    """Résultat de la génération d'une facture.

    FR: Contient le XML généré et le nom de fichier proposé.
    EN: Contains the generated XML and the suggested file name.
    """

    def __init__(self, xml: str, file_name: str) -> None:
        self.xml = xml
        self.file_name = file_name

    def save(self, path: str | Path | None = None) -> Path:
        """Sauvegarde le XML (par défaut sous ``file_name``)."""
        target = Path(path) if path is not None else Path(self.file_name)
        target.write_text(self.xml, encoding="utf-8")
        return target
