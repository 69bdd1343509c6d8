"""
Fixtures pytest partagees pour les tests Cineasts.

Ce module contient les fixtures communes utilisees dans les tests:
- Entites du catalogue (films, personnes)
- Mock de IMovieCatalogClient alimente par ces entites
- Settings de test avec chemins temporaires
- Capture des messages loguru
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from loguru import logger

from cineasts.config import Settings
from cineasts.core.entities.film import CastEntry, CrewEntry, DiscoverPage, Movie, Person
from cineasts.core.ports.api_clients import IMovieCatalogClient
from cineasts.services.resolvers import PersonResolver
from tests.fixtures.catalog import ALL_PEOPLE


@pytest.fixture
def people() -> dict[int, Person]:
    """Personnes connues du catalogue de test, par ID."""
    return {person.id: person for person in ALL_PEOPLE}


@pytest.fixture
def fight_club() -> Movie:
    """Fight Club avec deux acteurs, un realisateur et un scenariste."""
    return Movie(
        id=550,
        title="Fight Club",
        tagline="Mischief. Mayhem. Soap.",
        release_date="1999-10-15",
        genres=("Drama",),
        vote_average=8.4,
        cast=(
            CastEntry(287, "Brad Pitt", "Tyler Durden"),
            CastEntry(819, "Edward Norton", "The Narrator"),
        ),
        crew=(
            CrewEntry(7467, "David Fincher", "Director"),
            CrewEntry(7469, "Jim Uhls", "Screenplay"),
        ),
    )


@pytest.fixture
def mock_catalog_client(people: dict[int, Person]) -> MagicMock:
    """
    Mock de IMovieCatalogClient pour les tests.

    get_person() sert les personnes de la fixture people (None si inconnue).
    get_movie() et get_discover_page() doivent etre configures dans chaque test.
    """
    mock = MagicMock(spec=IMovieCatalogClient)
    mock.get_person.side_effect = people.get
    mock.get_movie.return_value = None
    mock.get_discover_page.return_value = None
    return mock


@pytest.fixture
def person_resolver(mock_catalog_client: MagicMock) -> PersonResolver:
    """PersonResolver branche sur le mock du catalogue."""
    return PersonResolver(mock_catalog_client)


@pytest.fixture
def listing(mock_catalog_client: MagicMock):
    """
    Configure le mock avec un listing discover.

    Usage:
        listing({1: [movie_a, movie_b], 2: [movie_c]})

    Chaque cle est un numero de page, chaque valeur la liste des films de
    la page. total_pages vaut le nombre de pages fournies.
    """

    def configure(pages: dict[int, list[Movie]]) -> MagicMock:
        total = len(pages)
        movies = {movie.id: movie for page in pages.values() for movie in page}

        def discover(page: int, min_vote_count: int):
            if page not in pages:
                return None
            return DiscoverPage(
                page=page,
                movie_ids=tuple(movie.id for movie in pages[page]),
                total_pages=total,
                total_results=len(movies),
            )

        mock_catalog_client.get_discover_page.side_effect = discover
        mock_catalog_client.get_movie.side_effect = movies.get
        return mock_catalog_client

    return configure


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le cache et les logs de chaque test.
    """
    return Settings(
        tmdb_api_key="test_api_key",
        request_delay_ms=0,
        min_vote_count=10,
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def loguru_messages() -> list[str]:
    """
    Capture les messages loguru emis pendant le test.

    Chaque element est une ligne "NIVEAU|message".
    """
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.strip()),
        level="DEBUG",
        format="{level}|{message}",
    )
    yield messages
    logger.remove(handler_id)
