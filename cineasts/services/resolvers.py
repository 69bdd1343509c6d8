"""
Resolution des films et des personnes a partir de leur ID TMDB.

Les resolvers s'appuient sur le client du catalogue (et donc sur son cache).
Un enregistrement introuvable ou illisible donne None : l'appelant l'ignore.
"""

from typing import Optional

from loguru import logger

from cineasts.core.entities.film import Movie, Person
from cineasts.core.ports.api_clients import IMovieCatalogClient
from cineasts.utils.helpers import year_from_date


def release_year(movie: Movie) -> int:
    """
    Annee de sortie d'un film.

    Si les 4 premiers caracteres de la date ne sont pas des chiffres,
    l'anomalie est journalisee et 0 est retourne : le film reste exportable.
    """
    year = year_from_date(movie.release_date)
    if year == 0 and len(movie.release_date) >= 4:
        logger.warning(
            "Date de sortie illisible",
            movie_id=movie.id,
            release_date=movie.release_date,
        )
    return year


class PersonResolver:
    """Resout une personne par son ID."""

    def __init__(self, client: IMovieCatalogClient) -> None:
        self._client = client

    def resolve(self, person_id: int) -> Optional[Person]:
        person = self._client.get_person(person_id)
        if person is None:
            logger.info("Personne ignoree", person_id=person_id)
        return person


class MovieResolver:
    """Resout un film (avec casting et equipe technique) par son ID."""

    def __init__(self, client: IMovieCatalogClient) -> None:
        self._client = client

    def resolve(self, movie_id: int) -> Optional[Movie]:
        movie = self._client.get_movie(movie_id)
        if movie is None:
            logger.info("Film ignore", movie_id=movie_id)
        return movie
