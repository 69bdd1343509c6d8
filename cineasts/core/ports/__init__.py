"""
Ports (interfaces abstraites) de la couche domaine.

- IMovieCatalogClient : lecture du catalogue (discover, films, personnes)
- IMovieExporter : émission d'un film dans un format de sortie
"""

from cineasts.core.ports.api_clients import IMovieCatalogClient
from cineasts.core.ports.exporters import IMovieExporter

__all__ = [
    "IMovieCatalogClient",
    "IMovieExporter",
]
