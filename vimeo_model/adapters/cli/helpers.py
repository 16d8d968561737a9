"""
Utilitaires partages pour les commandes CLI de vimeo-model.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
- load_json_payload : lecture d'un fichier JSON avec sortie propre en cas d'erreur
- render_fields : affichage d'une table libelle/valeur
"""

import json
from functools import wraps
from pathlib import Path
from typing import Any, Iterable

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from vimeo_model.container import Container

console = Console()


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            deserializer = container.deserializer()
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(Container(), *args, **kwargs)

    return wrapper


def load_json_payload(path: Path) -> Any:
    """
    Charge un fichier JSON.

    Raises:
        typer.Exit: Si le fichier est introuvable ou n'est pas du JSON valide
    """
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError:
        console.print(f"[red]Fichier introuvable :[/red] {path}")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as exc:
        logger.debug("JSON invalide", path=str(path), error=str(exc))
        console.print(f"[red]JSON invalide :[/red] {path} ({exc.msg}, ligne {exc.lineno})")
        raise typer.Exit(code=1)


def _format_value(value: Any) -> str:
    if value is None:
        return "[dim]-[/dim]"
    if isinstance(value, bool):
        return "[green]oui[/green]" if value else "[red]non[/red]"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def render_fields(title: str, rows: Iterable[tuple[str, Any]]) -> None:
    """Affiche une table a deux colonnes (libelle, valeur)."""
    table = Table(title=title, show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    for label, value in rows:
        table.add_row(label, _format_value(value))
    console.print(table)
