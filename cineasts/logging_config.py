"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console (stderr) : lisible par l'humain, colorée. La sortie standard
  reste réservée au script Cypher, qu'aucun message de log ne doit corrompre.
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique

Le handler console peut être suspendu pendant l'affichage d'une barre de
progression Rich ; le handler fichier continue alors de tout enregistrer.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Handler console courant (None tant que configure_logging n'a pas été appelé)
_console_handler_id: Optional[int] = None
_console_level = "INFO"


def _add_console_handler(log_level: str) -> int:
    return logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cineasts.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    global _console_handler_id, _console_level

    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    _console_level = log_level
    _console_handler_id = _add_console_handler(log_level)

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Capture tous les niveaux (appels API en DEBUG)
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)


@contextmanager
def console_logging_paused() -> Iterator[None]:
    """
    Suspend uniquement le handler console.

    Les autres handlers (fichier JSON) restent actifs. Sans configure_logging
    préalable, ne fait rien.
    """
    global _console_handler_id

    if _console_handler_id is None:
        yield
        return

    try:
        logger.remove(_console_handler_id)
    except ValueError:
        # Handler déjà retiré par un logger.remove() global
        _console_handler_id = None
        yield
        return

    _console_handler_id = None
    try:
        yield
    finally:
        _console_handler_id = _add_console_handler(_console_level)
