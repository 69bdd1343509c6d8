"""
Commandes CLI d'export du catalogue : cypher et csv.
"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from cineasts.adapters.cli.helpers import (
    build_settings,
    console,
    require_api_key,
    suppress_loguru,
)
from cineasts.container import Container
from cineasts.core.ports.exporters import IMovieExporter
from cineasts.services.export import ExportResult, ExportService, ProgressInfo

ApiKeyOption = Annotated[
    Optional[str],
    typer.Option("--apikey", help="Cle API themoviedb.org"),
]
DelayOption = Annotated[
    Optional[int],
    typer.Option("--delay", min=0, help="Delai entre deux requetes (ms), contre le rate limit"),
]
VoteCountOption = Annotated[
    Optional[int],
    typer.Option("--votecount", min=0, help="Nombre minimum de votes, ecarte les films confidentiels"),
]
StartPageOption = Annotated[
    int,
    typer.Option("--start-page", min=1, help="Page du listing discover ou reprendre"),
]
EndPageOption = Annotated[
    Optional[int],
    typer.Option("--end-page", min=1, help="Derniere page a exporter (incluse)"),
]


def cypher(
    ctx: typer.Context,
    apikey: ApiKeyOption = None,
    delay: DelayOption = None,
    votecount: VoteCountOption = None,
    start_page: StartPageOption = 1,
    end_page: EndPageOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier de sortie (stdout par defaut)"),
    ] = None,
) -> None:
    """Exporte le catalogue en script Cypher de chargement Neo4j."""
    settings = build_settings(
        tmdb_api_key=apikey,
        request_delay_ms=delay,
        min_vote_count=votecount,
    )
    require_api_key(ctx, settings)

    container = Container()
    container.config.override(settings)

    stream = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        exporter = container.cypher_exporter(output=stream)
        _run_export(container, exporter, start_page, end_page)
    finally:
        if output:
            stream.close()
        _shutdown(container)


def csv(
    ctx: typer.Context,
    apikey: ApiKeyOption = None,
    delay: DelayOption = None,
    votecount: VoteCountOption = None,
    start_page: StartPageOption = 1,
    end_page: EndPageOption = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", help="Repertoire des CSV (repertoire du cache par defaut)"),
    ] = None,
) -> None:
    """Exporte le catalogue en quatre tables CSV (movies, people, actors, directors)."""
    settings = build_settings(
        tmdb_api_key=apikey,
        request_delay_ms=delay,
        min_vote_count=votecount,
    )
    require_api_key(ctx, settings)

    container = Container()
    container.config.override(settings)

    try:
        exporter = container.csv_exporter(output_dir=output_dir or settings.cache_dir)
        _run_export(container, exporter, start_page, end_page)
    finally:
        _shutdown(container)


def _run_export(
    container: Container,
    exporter: IMovieExporter,
    start_page: int,
    end_page: Optional[int],
) -> None:
    """Lance l'export avec une barre de progression sur stderr."""
    service = ExportService(
        paginator=container.catalog_paginator(),
        exporter=exporter,
    )

    with suppress_loguru():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("[cyan]Export...", total=None)

            def on_progress(info: ProgressInfo) -> None:
                """Callback de progression."""
                progress.update(
                    task,
                    description=f"[cyan]Export[/cyan] {info.current} film(s) - {info.movie_title}",
                )
                if info.result == ExportResult.SKIPPED:
                    progress.console.print(
                        f"  [dim]-[/dim] {info.movie_title} ({info.movie_id}) - exclu"
                    )

            stats = service.run(
                start_page=start_page,
                end_page=end_page,
                on_progress=on_progress,
            )

    console.print("\n[bold]Resume:[/bold]")
    console.print(f"  [green]{stats.movies_exported}[/green] film(s) exporte(s)")
    if stats.movies_skipped > 0:
        console.print(f"  [yellow]{stats.movies_skipped}[/yellow] film(s) exclu(s)")


def _shutdown(container: Container) -> None:
    """Ferme le client HTTP et le cache."""
    container.tmdb_client().close()
    container.response_cache().close()
