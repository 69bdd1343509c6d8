"""
Cache persistant des reponses de l'API TMDB.

Le cache utilise diskcache pour la persistence sur disque, ce qui permet
de relancer un export interrompu sans refaire les appels reseau deja
effectues. Les entrees n'expirent jamais : un second export sur un cache
deja rempli produit exactement la meme sortie.

La cle d'une reponse est l'URL complete de la requete, dans laquelle
les "/" et la cle API sont remplaces par "_".
"""

from typing import Any, Callable, Optional

from diskcache import Cache
from loguru import logger


def cache_key_for_url(url: str, api_key: str) -> str:
    """
    Construit la cle de cache d'une URL.

    Args:
        url: URL complete de la requete (cle API incluse)
        api_key: Cle API a masquer dans la cle

    Returns:
        L'URL avec les "/" et la cle API remplaces par "_"
    """
    if api_key:
        url = url.replace(api_key, "_")
    return url.replace("/", "_")


class ResponseCache:
    """
    Cache cle-valeur sur disque pour les reponses brutes de l'API.

    Example:
        cache = ResponseCache(cache_dir="cache")
        body = cache.get_or_populate(key, lambda: fetch(url))
        cache.close()
    """

    def __init__(self, cache_dir: str = "cache") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur stockee ou None si absente."""
        return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:
        """Stocke une valeur sans date d'expiration."""
        self._cache.set(key, value)

    def get_or_populate(self, key: str, populate: Callable[[], Any]) -> Any:
        """
        Retourne la valeur en cache, ou la calcule et la stocke.

        Si populate() leve une exception, rien n'est stocke et l'exception
        est propagee a l'appelant.

        Args:
            key: Cle unique identifiant la donnee
            populate: Fonction sans argument produisant la valeur manquante

        Returns:
            La valeur en cache ou celle produite par populate()
        """
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit", key=key)
            return cached

        value = populate()
        self._cache.set(key, value)
        return value

    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        self._cache.clear()

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()

    def __enter__(self) -> "ResponseCache":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
