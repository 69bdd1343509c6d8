"""
Interface port pour le client du catalogue de films.

Interface abstraite (port) définissant le contrat de l'API de métadonnées.
L'implémentation (adaptateur) fournit le client TMDB concret avec cache disque.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cineasts.core.entities.film import DiscoverPage, Movie, Person


class IMovieCatalogClient(ABC):
    """
    Interface de base pour l'API de métadonnées films.

    Les trois méthodes sont en lecture seule. Elles retournent None quand la
    ressource n'a pas pu être récupérée ou décodée : l'appelant ignore alors
    l'enregistrement et poursuit l'export.
    """

    @abstractmethod
    def get_discover_page(self, page: int, min_vote_count: int) -> Optional[DiscoverPage]:
        """
        Récupère une page du listing discover.

        Args :
            page : Numéro de page (à partir de 1)
            min_vote_count : Nombre minimum de votes pour qu'un film soit listé

        Retourne :
            DiscoverPage, ou None en cas d'échec
        """
        ...

    @abstractmethod
    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """
        Récupère un film avec son casting et son équipe technique.

        Args :
            movie_id : ID TMDB du film

        Retourne :
            Movie, ou None en cas d'échec
        """
        ...

    @abstractmethod
    def get_person(self, person_id: int) -> Optional[Person]:
        """
        Récupère une personne (nom, dates de naissance et de décès).

        Args :
            person_id : ID TMDB de la personne

        Retourne :
            Person, ou None en cas d'échec
        """
        ...

    def close(self) -> None:
        """Libère les ressources du client (aucune par défaut)."""
