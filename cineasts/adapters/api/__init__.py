"""
Client API externe pour le parcours du catalogue.

Ce module fournit les adaptateurs pour communiquer avec TMDB:
- TMDBClient: listing discover, details films et personnes
- ResponseCache: cache persistant des reponses brutes (diskcache)

Le client implemente IMovieCatalogClient defini dans core/ports/api_clients.py.
"""

from cineasts.adapters.api.cache import ResponseCache, cache_key_for_url
from cineasts.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "ResponseCache",
    "TMDBClient",
    "cache_key_for_url",
]
