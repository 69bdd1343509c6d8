"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINEASTS_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est obligatoire pour lancer un export : laissée à la valeur
sentinelle "..", la CLI affiche l'aide et s'arrête avant tout appel réseau.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cineasts.utils.constants import (
    API_KEY_PLACEHOLDER,
    DEFAULT_MIN_VOTE_COUNT,
    DEFAULT_REQUEST_DELAY_MS,
    TMDB_BASE_URL,
)

# Trouver le fichier .env à la racine du projet (parent de cineasts/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINEASTS_.
    Exemple : CINEASTS_REQUEST_DELAY_MS=500

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEASTS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TMDB
    tmdb_api_key: str = Field(default=API_KEY_PLACEHOLDER)
    tmdb_base_url: str = Field(default=TMDB_BASE_URL)
    http_timeout: float = Field(default=30.0, gt=0)

    # Parcours du catalogue
    request_delay_ms: int = Field(default=DEFAULT_REQUEST_DELAY_MS, ge=0)
    min_vote_count: int = Field(default=DEFAULT_MIN_VOTE_COUNT, ge=0)

    # Cache des réponses (et répertoire par défaut des CSV)
    cache_dir: Path = Field(default=Path("cache"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cineasts.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si la clé API TMDB a été renseignée."""
        return bool(self.tmdb_api_key) and self.tmdb_api_key != API_KEY_PLACEHOLDER
