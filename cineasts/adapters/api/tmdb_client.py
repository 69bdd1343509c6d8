"""
Client TMDB pour le parcours du catalogue de films.

Implemente l'interface IMovieCatalogClient pour TMDB (The Movie Database).
Chaque reponse brute passe par le cache disque : seul un cache miss
declenche un appel reseau, precede d'un delai fixe pour rester sous
le rate limit de l'API.

Usage:
    cache = ResponseCache("cache")
    with TMDBClient(api_key="your_key", cache=cache) as client:
        page = client.get_discover_page(1, min_vote_count=10)
        movie = client.get_movie(page.movie_ids[0])
"""

import json
import time
from typing import Any, Optional

import httpx
from loguru import logger

from cineasts.adapters.api.cache import ResponseCache, cache_key_for_url
from cineasts.core.entities.film import CastEntry, CrewEntry, DiscoverPage, Movie, Person
from cineasts.core.ports.api_clients import IMovieCatalogClient
from cineasts.utils.constants import DEFAULT_REQUEST_DELAY_MS, TMDB_BASE_URL


class TMDBClient(IMovieCatalogClient):
    """
    Client API TMDB pour l'export du catalogue.

    Implemente IMovieCatalogClient avec:
    - Listing discover pagine, filtre par nombre de votes
    - Details d'un film avec ses credits (append_to_response=casts)
    - Details d'une personne
    - Cache persistant cle par URL (pas d'expiration)

    Les erreurs reseau, HTTP et de decodage sont journalisees et
    converties en None : un enregistrement defectueux n'interrompt pas
    un export de plusieurs heures.
    """

    def __init__(
        self,
        api_key: str,
        cache: ResponseCache,
        base_url: str = TMDB_BASE_URL,
        request_delay_ms: int = DEFAULT_REQUEST_DELAY_MS,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB v3
            cache: Instance ResponseCache pour les reponses brutes
            base_url: URL de base de l'API
            request_delay_ms: Delai avant chaque appel reseau (millisecondes)
            timeout: Timeout HTTP en secondes
        """
        self._api_key = api_key
        self._cache = cache
        self._base_url = base_url.rstrip("/")
        self._delay_seconds = request_delay_ms / 1000
        self._timeout = timeout
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    def _fetch_json(self, path: str, params: dict[str, Any]) -> Optional[Any]:
        """
        Recupere un document JSON, depuis le cache ou le reseau.

        Args:
            path: Chemin relatif a l'URL de base (ex: "/movie/550")
            params: Parametres de requete, hors cle API

        Returns:
            Le document decode, ou None en cas d'erreur
        """
        client = self._get_client()
        request = client.build_request(
            "GET",
            f"{self._base_url}{path}",
            params={"api_key": self._api_key, **params},
        )
        cache_key = cache_key_for_url(str(request.url), self._api_key)

        def populate() -> bytes:
            time.sleep(self._delay_seconds)
            logger.debug("Appel API", path=path)
            response = client.send(request)
            response.raise_for_status()
            return response.content

        try:
            body = self._cache.get_or_populate(cache_key, populate)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Reponse HTTP en erreur, enregistrement ignore",
                path=path,
                status=e.response.status_code,
            )
            return None
        except httpx.HTTPError as e:
            logger.warning("Erreur reseau, enregistrement ignore", path=path, error=str(e))
            return None

        try:
            return json.loads(body)
        except ValueError as e:
            logger.warning("JSON invalide, enregistrement ignore", path=path, error=str(e))
            return None

    def get_discover_page(self, page: int, min_vote_count: int) -> Optional[DiscoverPage]:
        """
        Recupere une page du listing discover.

        Args:
            page: Numero de page (a partir de 1)
            min_vote_count: Nombre minimum de votes (vote_count.gte)

        Returns:
            DiscoverPage, ou None si la page est inexploitable
        """
        data = self._fetch_json(
            "/discover/movie",
            {"page": page, "vote_count.gte": min_vote_count},
        )
        if data is None:
            return None
        try:
            return parse_discover_page(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Page discover illisible", page=page, error=repr(e))
            return None

    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """
        Recupere un film avec ses credits.

        Args:
            movie_id: ID TMDB du film

        Returns:
            Movie, ou None si le film est inexploitable
        """
        data = self._fetch_json(f"/movie/{movie_id}", {"append_to_response": "casts"})
        if data is None:
            return None
        try:
            return parse_movie(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Film illisible", movie_id=movie_id, error=repr(e))
            return None

    def get_person(self, person_id: int) -> Optional[Person]:
        """
        Recupere une personne.

        Args:
            person_id: ID TMDB de la personne

        Returns:
            Person, ou None si la personne est inexploitable
        """
        data = self._fetch_json(f"/person/{person_id}", {})
        if data is None:
            return None
        try:
            return parse_person(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Personne illisible", person_id=person_id, error=repr(e))
            return None

    def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "TMDBClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def parse_discover_page(data: dict) -> DiscoverPage:
    """Convertit une reponse /discover/movie en DiscoverPage."""
    return DiscoverPage(
        page=int(data["page"]),
        movie_ids=tuple(int(item["id"]) for item in data.get("results") or []),
        total_pages=int(data.get("total_pages") or 0),
        total_results=int(data.get("total_results") or 0),
    )


def parse_movie(data: dict) -> Movie:
    """Convertit une reponse /movie/{id}?append_to_response=casts en Movie."""
    casts = data.get("casts") or {}
    return Movie(
        id=int(data["id"]),
        title=data.get("title") or "",
        tagline=data.get("tagline") or "",
        release_date=data.get("release_date") or "",
        genres=tuple(
            genre["name"] for genre in data.get("genres") or [] if genre.get("name")
        ),
        vote_average=float(data.get("vote_average") or 0.0),
        cast=tuple(
            CastEntry(
                person_id=int(item["id"]),
                name=item.get("name") or "",
                character=item.get("character") or "",
            )
            for item in casts.get("cast") or []
        ),
        crew=tuple(
            CrewEntry(
                person_id=int(item["id"]),
                name=item.get("name") or "",
                job=item.get("job") or "",
            )
            for item in casts.get("crew") or []
        ),
    )


def parse_person(data: dict) -> Person:
    """Convertit une reponse /person/{id} en Person."""
    return Person(
        id=int(data["id"]),
        name=data.get("name") or "",
        birthday=data.get("birthday") or "",
        deathday=data.get("deathday") or "",
    )
