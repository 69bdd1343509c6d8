"""
Utilitaires partages pour les commandes CLI de Cineasts.

Ce module fournit :
- console : instance Rich Console sur stderr (stdout reste reserve au script Cypher)
- suppress_loguru : context manager pour couper la sortie console loguru
- build_settings : Settings avec surcharge par les options de la ligne de commande
- require_api_key : arret propre si la cle API n'est pas renseignee
"""

from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console

from cineasts.config import Settings
from cineasts.logging_config import console_logging_paused

console = Console(stderr=True)


@contextmanager
def suppress_loguru():
    """
    Context manager pour couper la sortie console loguru pendant l'affichage Rich.

    Seul le handler stderr est suspendu : le fichier de log continue de
    recevoir les avertissements (pages, films et personnes ignores).

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    with console_logging_paused():
        yield


def build_settings(**overrides: Any) -> Settings:
    """
    Construit les Settings, les options CLI renseignees l'emportant sur l'environnement.

    Les options laissees a None ne surchargent rien.
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def require_api_key(ctx: typer.Context, settings: Settings) -> None:
    """
    Verifie que la cle API TMDB est renseignee.

    Sinon, affiche l'aide de la commande et termine proprement (code 0),
    avant tout appel reseau.
    """
    if settings.tmdb_enabled:
        return
    typer.echo("you must specify an API key (--apikey or CINEASTS_TMDB_API_KEY)")
    typer.echo(ctx.get_help())
    raise typer.Exit()
