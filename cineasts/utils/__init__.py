"""
Utilitaires et constantes pour Cineasts.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from cineasts.utils.constants import (
    API_KEY_PLACEHOLDER,
    CSV_HEADERS,
    CYPHER_INDEX_STATEMENTS,
    DIRECTOR_JOB,
    TMDB_BASE_URL,
)

__all__ = [
    "API_KEY_PLACEHOLDER",
    "CSV_HEADERS",
    "CYPHER_INDEX_STATEMENTS",
    "DIRECTOR_JOB",
    "TMDB_BASE_URL",
]
