"""
Logging de vimeo-model via loguru.

Deux sinks, tous deux limites aux logs du package `vimeo_model` :
- stderr : lisible, niveau pilote par Settings.log_level ou par --verbose/--quiet
- fichier : JSON serialise, toujours en DEBUG, avec rotation

Les adaptateurs loguent avec un contexte en mots-cles
(ex: `logger.debug("Date mal formee ignoree", field=..., value=...)`) ;
ce contexte est affiche en console et conserve dans le JSON du fichier.
"""

import sys
from typing import Optional

from loguru import logger

from vimeo_model.config import Settings

PACKAGE_NAME = "vimeo_model"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def console_level(settings: Settings, verbose: int = 0, quiet: bool = False) -> str:
    """
    Niveau de la sortie console selon les options de la CLI.

    --quiet l'emporte sur --verbose ; sans option, le niveau configure s'applique.
    """
    if quiet:
        return "ERROR"
    if verbose:
        return "DEBUG"
    return settings.log_level


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """
    (Re)configure les sinks de l'application.

    Peut etre appelee plusieurs fois : les sinks precedents sont retires.

    Args:
        settings: Parametres (fichier de log, rotation, retention, niveau)
        level: Niveau console explicite, sinon settings.log_level
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level or settings.log_level,
        format=CONSOLE_FORMAT,
        filter=PACKAGE_NAME,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        filter=PACKAGE_NAME,
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        console_level=level or settings.log_level,
    )
