"""
Point d'entree CLI de vimeo-model.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import classify_error, inspect_user, inspect_video
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level

app = typer.Typer(
    name="vimeo-model",
    help="Inspection des enregistrements de l'API Vimeo",
)
container = Container()


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
    """vimeo-model - Etat derive des videos, utilisateurs et erreurs de l'API."""
    if quiet or verbose:
        settings = get_config()
        configure_logging(settings, level=console_level(settings, verbose=verbose, quiet=quiet))


app.command(name="inspect-video")(inspect_video)
app.command(name="inspect-user")(inspect_user)
app.command(name="classify-error")(classify_error)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"API : {config.api_base_url}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"vimeo-model v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    configure_logging(container.config())
    logger.debug("Demarrage de vimeo-model", version=__version__)
    app()


if __name__ == "__main__":
    main()
