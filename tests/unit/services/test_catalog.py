"""
Tests unitaires pour CatalogPaginator.

Tests couvrant:
- Ordre du listing conserve, page par page
- Filtrage des films sans casting ou sans equipe technique
- Arret exact a la derniere page annoncee
- Reprise a une page arbitraire et borne end_page
- Pages et films illisibles ignores
"""

from unittest.mock import MagicMock, call

import pytest

from cineasts.core.entities.film import DiscoverPage
from cineasts.services.catalog import CatalogPaginator
from tests.fixtures.catalog import make_movie


@pytest.fixture
def three_pages(listing) -> MagicMock:
    """Listing de trois pages de deux films."""
    return listing({
        1: [make_movie(11), make_movie(12)],
        2: [make_movie(21), make_movie(22)],
        3: [make_movie(31), make_movie(32)],
    })


def requested_pages(client: MagicMock) -> list[int]:
    return [c.args[0] for c in client.get_discover_page.call_args_list]


class TestPaginate:
    """Tests pour CatalogPaginator.paginate()."""

    def test_yields_movies_in_listing_order(self, three_pages: MagicMock) -> None:
        movies = list(CatalogPaginator(three_pages).paginate())

        assert [m.id for m in movies] == [11, 12, 21, 22, 31, 32]

    def test_stops_exactly_at_total_pages(self, three_pages: MagicMock) -> None:
        list(CatalogPaginator(three_pages).paginate())

        assert requested_pages(three_pages) == [1, 2, 3]

    def test_resumes_from_arbitrary_page(self, three_pages: MagicMock) -> None:
        movies = list(CatalogPaginator(three_pages).paginate(start_page=2))

        assert [m.id for m in movies] == [21, 22, 31, 32]
        assert requested_pages(three_pages) == [2, 3]

    def test_start_on_last_page(self, three_pages: MagicMock) -> None:
        movies = list(CatalogPaginator(three_pages).paginate(start_page=3))

        assert [m.id for m in movies] == [31, 32]
        assert requested_pages(three_pages) == [3]

    def test_end_page_bounds_the_walk(self, three_pages: MagicMock) -> None:
        movies = list(CatalogPaginator(three_pages).paginate(start_page=1, end_page=2))

        assert [m.id for m in movies] == [11, 12, 21, 22]
        assert requested_pages(three_pages) == [1, 2]

    def test_start_page_below_one_is_rejected(self, three_pages: MagicMock) -> None:
        with pytest.raises(ValueError):
            list(CatalogPaginator(three_pages).paginate(start_page=0))

    def test_is_lazy(self, three_pages: MagicMock) -> None:
        """Aucune page n'est lue avant la consommation du generateur."""
        movies = CatalogPaginator(three_pages).paginate()
        three_pages.get_discover_page.assert_not_called()

        next(movies)
        assert requested_pages(three_pages) == [1]

    def test_passes_min_vote_count(self, three_pages: MagicMock) -> None:
        list(CatalogPaginator(three_pages, min_vote_count=500).paginate(end_page=1))

        three_pages.get_discover_page.assert_called_once_with(1, 500)

    def test_movies_without_credits_are_filtered(self, listing) -> None:
        client = listing({
            1: [make_movie(1), make_movie(2, cast=()), make_movie(3, crew=()), make_movie(4)],
        })

        movies = list(CatalogPaginator(client).paginate())

        assert [m.id for m in movies] == [1, 4]

    def test_unresolvable_movie_is_skipped(self, listing) -> None:
        client = listing({1: [make_movie(1), make_movie(2)]})
        client.get_movie.side_effect = lambda movie_id: None if movie_id == 1 else make_movie(movie_id)

        movies = list(CatalogPaginator(client).paginate())

        assert [m.id for m in movies] == [2]


class TestDamagedPages:
    """Pages illisibles au milieu du parcours."""

    def test_damaged_page_is_skipped_and_walk_continues(self, mock_catalog_client: MagicMock) -> None:
        pages = {
            1: DiscoverPage(page=1, movie_ids=(11,), total_pages=3),
            3: DiscoverPage(page=3, movie_ids=(31,), total_pages=3),
        }
        mock_catalog_client.get_discover_page.side_effect = lambda page, votes: pages.get(page)
        mock_catalog_client.get_movie.side_effect = lambda movie_id: make_movie(movie_id)

        movies = list(CatalogPaginator(mock_catalog_client).paginate())

        assert [m.id for m in movies] == [11, 31]
        assert mock_catalog_client.get_discover_page.call_args_list == [
            call(1, 10),
            call(2, 10),
            call(3, 10),
        ]

    def test_damaged_first_page_stops_the_walk(self, mock_catalog_client: MagicMock) -> None:
        mock_catalog_client.get_discover_page.return_value = None

        assert list(CatalogPaginator(mock_catalog_client).paginate(start_page=5)) == []
        mock_catalog_client.get_discover_page.assert_called_once_with(5, 10)

    def test_empty_catalog(self, mock_catalog_client: MagicMock) -> None:
        mock_catalog_client.get_discover_page.return_value = DiscoverPage(page=1, total_pages=0)

        assert list(CatalogPaginator(mock_catalog_client).paginate()) == []
        mock_catalog_client.get_discover_page.assert_called_once()
