"""Configuration lue depuis l'environnement.

FR: Paramètres du service de stockage (cible, namespace, jeton) et de
    journalisation, chargés par pydantic-settings (variables
    d'environnement ou fichier ``.env``) puis injectés dans les connecteurs.
EN: Storage service (target, namespace, token) and logging settings,
    loaded by pydantic-settings then injected into the connectors.
"""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    pod_base_url: str = "http://localhost:8080"
    pod_update_invoice_id: str = ""
    instance_namespace: str = ""
    pod_update_invoice_auth_token: SecretStr = SecretStr("")
    pod_timeout: float = 30.0
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
