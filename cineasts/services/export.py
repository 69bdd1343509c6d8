"""
Service d'export du catalogue : paginateur -> exporteur.

Enchaine le parcours du listing discover et l'emission de chaque film
dans le format choisi, un film a la fois, et tient les statistiques.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from cineasts.core.ports.exporters import IMovieExporter
from cineasts.services.catalog import CatalogPaginator


class ExportResult(str, Enum):
    """Resultat d'export pour un film."""

    EXPORTED = "exported"
    SKIPPED = "skipped"


@dataclass
class ProgressInfo:
    """Information de progression pour le callback."""

    current: int
    movie_id: int
    movie_title: str
    result: ExportResult


@dataclass
class ExportStats:
    """Statistiques d'un export."""

    movies_seen: int = 0
    movies_exported: int = 0
    movies_skipped: int = 0


class ExportService:
    """
    Service d'export d'un catalogue complet.

    L'exporteur est prepare (write_header) avant le premier film et
    ferme (close) a la fin, meme si le parcours est interrompu.
    """

    def __init__(self, paginator: CatalogPaginator, exporter: IMovieExporter) -> None:
        self._paginator = paginator
        self._exporter = exporter

    def run(
        self,
        start_page: int = 1,
        end_page: Optional[int] = None,
        on_progress: Optional[Callable[[ProgressInfo], None]] = None,
    ) -> ExportStats:
        """
        Exporte tous les films du listing a partir de start_page.

        Args:
            start_page: Premiere page du listing discover
            end_page: Derniere page (incluse), None pour tout parcourir
            on_progress: Callback de progression optionnel

        Returns:
            Statistiques d'export
        """
        stats = ExportStats()
        try:
            self._exporter.write_header()
            for movie in self._paginator.paginate(start_page, end_page):
                stats.movies_seen += 1
                if self._exporter.export_movie(movie):
                    stats.movies_exported += 1
                    result = ExportResult.EXPORTED
                else:
                    stats.movies_skipped += 1
                    result = ExportResult.SKIPPED

                if on_progress:
                    on_progress(ProgressInfo(
                        current=stats.movies_seen,
                        movie_id=movie.id,
                        movie_title=movie.title,
                        result=result,
                    ))
        finally:
            self._exporter.close()

        logger.info(
            "Export termine",
            seen=stats.movies_seen,
            exported=stats.movies_exported,
            skipped=stats.movies_skipped,
        )
        return stats
