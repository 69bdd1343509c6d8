"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : configuration,
cache des reponses, client TMDB, paginateur et exporteurs.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import ResponseCache
from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .services.catalog import CatalogPaginator
from .services.csv_exporter import CsvExporter
from .services.cypher_exporter import CypherExporter
from .services.resolvers import PersonResolver


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.config.override(Settings(tmdb_api_key="xxx"))
        paginator = container.catalog_paginator()
        exporter = container.cypher_exporter(output=sys.stdout)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache des reponses brutes - Singleton partage par tout l'export
    response_cache = providers.Singleton(
        ResponseCache,
        cache_dir=config.provided.cache_dir,
    )

    # Client API - Singleton avec api_key et delai depuis config
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        cache=response_cache,
        base_url=config.provided.tmdb_base_url,
        request_delay_ms=config.provided.request_delay_ms,
        timeout=config.provided.http_timeout,
    )

    person_resolver = providers.Singleton(PersonResolver, client=tmdb_client)

    catalog_paginator = providers.Factory(
        CatalogPaginator,
        client=tmdb_client,
        min_vote_count=config.provided.min_vote_count,
    )

    # Exporteurs - Factory, la sortie est fournie a l'appel
    # Utiliser: container.cypher_exporter(output=sys.stdout)
    #           container.csv_exporter(output_dir=Path("cache"))
    cypher_exporter = providers.Factory(
        CypherExporter,
        person_resolver=person_resolver,
    )
    csv_exporter = providers.Factory(
        CsvExporter,
        person_resolver=person_resolver,
    )
