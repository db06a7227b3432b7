"""Configuration commune des modèles."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UBLModel(BaseModel):
    """Modèle immuable lu depuis le JSON camelCase du client.

    FR: Attributs en snake_case, clés JSON en camelCase, clés inconnues
        ignorées. Les nombres sont acceptés pour les champs texte.
    EN: snake_case attributes, camelCase JSON keys, unknown keys ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )
