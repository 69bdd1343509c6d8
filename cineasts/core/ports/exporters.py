"""
Interface port pour les formats d'export.

Chaque exporteur consomme un film résolu et produit une unité de sortie
dans son format (bloc Cypher, lignes CSV).
"""

from abc import ABC, abstractmethod

from cineasts.core.entities.film import Movie


class IMovieExporter(ABC):
    """
    Interface des exporteurs de films.

    Un exporteur vit le temps d'un export complet : il possède l'état de
    déduplication des personnes déjà émises.
    """

    @abstractmethod
    def write_header(self) -> None:
        """Émet ce qui précède le premier film (index, en-têtes)."""
        ...

    @abstractmethod
    def export_movie(self, movie: Movie) -> bool:
        """
        Émet l'unité de sortie d'un film.

        Args :
            movie : Film résolu avec ses crédits

        Retourne :
            True si le film a été émis, False s'il a été exclu
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Vide les tampons et libère les fichiers de sortie."""
        ...
