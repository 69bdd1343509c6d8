"""
Point d'entrée CLI de Cineasts.

Configure le logging et fournit les commandes d'export du catalogue TMDB.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import csv, cypher
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="cineasts",
    help="Export du catalogue TMDB en script Cypher ou en tables CSV",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Cineasts - Export du catalogue de films TMDB."""
    settings = Settings()
    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG"
    else:
        log_level = settings.log_level
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(cypher)
app.command()(csv)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    logger.info("Configuration Cineasts")
    typer.echo(f"API TMDB : {config.tmdb_base_url}")
    typer.echo(f"Clé API : {'renseignée' if config.tmdb_enabled else 'absente'}")
    typer.echo(f"Délai entre requêtes : {config.request_delay_ms} ms")
    typer.echo(f"Votes minimum : {config.min_vote_count}")
    typer.echo(f"Cache : {config.cache_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Cineasts v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
