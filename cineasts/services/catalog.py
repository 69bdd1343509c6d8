"""
Parcours du listing discover de TMDB.

Le paginateur lit les pages dans l'ordre, resout chaque film liste et
ne produit que ceux qui ont un casting ET une equipe technique. Il peut
demarrer a n'importe quelle page : grace au cache disque, relancer un
export interrompu ne refait pas les appels deja effectues.
"""

from typing import Iterator, Optional

from loguru import logger

from cineasts.core.entities.film import Movie
from cineasts.core.ports.api_clients import IMovieCatalogClient
from cineasts.services.resolvers import MovieResolver
from cineasts.utils.constants import DEFAULT_MIN_VOTE_COUNT


class CatalogPaginator:
    """
    Generateur paresseux des films du listing discover.

    Les films sont produits dans l'ordre du listing, page par page,
    sans tri. Le parcours s'arrete a la derniere page annoncee par l'API
    (ou a end_page si elle est plus petite).
    """

    def __init__(
        self,
        client: IMovieCatalogClient,
        min_vote_count: int = DEFAULT_MIN_VOTE_COUNT,
    ) -> None:
        self._client = client
        self._movie_resolver = MovieResolver(client)
        self._min_vote_count = min_vote_count

    def paginate(self, start_page: int = 1, end_page: Optional[int] = None) -> Iterator[Movie]:
        """
        Parcourt le listing a partir de start_page.

        Args:
            start_page: Premiere page a lire (a partir de 1)
            end_page: Derniere page a lire (incluse), None pour aller jusqu'au bout

        Yields:
            Les films resolus ayant casting et equipe technique

        Raises:
            ValueError: Si start_page < 1
        """
        if start_page < 1:
            raise ValueError(f"start_page doit etre >= 1 (recu {start_page})")

        page_num = start_page
        total_pages: Optional[int] = None

        while True:
            page = self._client.get_discover_page(page_num, self._min_vote_count)
            if page is None:
                if total_pages is None:
                    logger.error("Premiere page illisible, parcours interrompu", page=page_num)
                    return
                logger.warning("Page ignoree", page=page_num)
            else:
                total_pages = page.total_pages
                logger.info("Page discover", page=page_num, total_pages=total_pages)
                yield from self._resolve_page(page.movie_ids)

            last_page = total_pages if end_page is None else min(total_pages, end_page)
            if page_num >= last_page:
                return
            page_num += 1

    def _resolve_page(self, movie_ids: tuple[int, ...]) -> Iterator[Movie]:
        """Resout les films d'une page et filtre ceux sans credits."""
        for movie_id in movie_ids:
            movie = self._movie_resolver.resolve(movie_id)
            if movie is None:
                continue
            if not movie.has_credits:
                logger.debug("Film sans credits ignore", movie_id=movie_id)
                continue
            yield movie
