"""
Commandes CLI d'inspection : inspect-video, inspect-user, classify-error.

Chaque commande lit un corps de reponse JSON sauvegarde, le decode via le
deserialiseur du container et affiche l'etat derive.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from vimeo_model.adapters.cli.helpers import (
    console,
    load_json_payload,
    render_fields,
    with_container,
)
from vimeo_model.adapters.json.deserializer import DeserializationError
from vimeo_model.core.errors import ResponseInfo


def _parse_headers(headers: list[str]) -> tuple[tuple[str, str], ...]:
    """Convertit des options "Nom: valeur" en paires (nom, valeur)."""
    pairs = []
    for header in headers:
        name, separator, value = header.partition(":")
        if not separator or not name.strip():
            console.print(f"[red]En-tete invalide (attendu NOM:VALEUR) :[/red] {header}")
            raise typer.Exit(code=1)
        pairs.append((name.strip(), value.strip()))
    return tuple(pairs)


def inspect_video(
    file: Annotated[Path, typer.Argument(help="Fichier JSON d'une video")],
) -> None:
    """
    Affiche l'etat derive d'une video : statut, lecture, TVOD, engagement.

    Exemple:
      vimeo-model inspect-video video.json
    """
    _inspect_video(file)


@with_container
def _inspect_video(container, file: Path) -> None:
    payload = load_json_payload(file)
    try:
        video = container.deserializer().decode_video(payload)
    except DeserializationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    render_fields(
        f"Video {video.name or video.uri or ''}".strip(),
        [
            ("URI", video.uri),
            ("Resource key", video.resource_key),
            ("Statut brut", video.raw_status),
            ("Statut", video.status),
            ("Lisible", video.is_playable),
            ("Statut de lecture", video.play_status),
            ("Fichiers", video.play.file_count if video.play is not None else 0),
            ("Video 360", video.is_360),
            ("Reprise (s)", video.play_progress_seconds),
            ("Reprise (ms)", video.play_progress_millis),
            ("Type TVOD", video.tvod_video_type.name),
            ("Expiration TVOD", video.tvod_expiration),
            ("Saison", video.tvod_season_name),
            ("Likes", video.likes_count),
            ("Commentaires", video.comments_count),
            ("Peut liker", video.can_like),
            ("Like", video.is_liked),
            ("A regarder plus tard", video.is_watch_later),
            ("Recommandations", video.recommendations_uri),
        ],
    )


def inspect_user(
    file: Annotated[Path, typer.Argument(help="Fichier JSON d'un utilisateur")],
) -> None:
    """
    Affiche l'etat derive d'un utilisateur : compte, compteurs, quota.

    Exemple:
      vimeo-model inspect-user user.json
    """
    _inspect_user(file)


@with_container
def _inspect_user(container, file: Path) -> None:
    payload = load_json_payload(file)
    try:
        user = container.deserializer().decode_user(payload)
    except DeserializationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    render_fields(
        f"Utilisateur {user.name or user.uri or ''}".strip(),
        [
            ("URI", user.uri),
            ("Compte", user.account_type),
            ("Plus ou Pro", user.is_plus_or_pro),
            ("Badge", user.badge_type),
            ("Abonnes", user.followers_count),
            ("Abonnements", user.following_count),
            ("Likes", user.likes_count),
            ("Videos", user.videos_count),
            ("Chaines", user.channels_count),
            ("Chaines moderees", user.moderated_channels_count),
            ("Apparitions", user.appearances_count),
            ("Notifications non lues", user.unread_notifications_count),
            ("Peut suivre", user.can_follow),
            ("Suivi", user.is_following),
            ("Peut ajouter une image", user.can_upload_picture),
            ("Espace libre (octets)", user.free_upload_space),
        ],
    )


def classify_error(
    file: Annotated[
        Optional[Path],
        typer.Argument(help="Fichier JSON du corps d'erreur (optionnel)"),
    ] = None,
    status: Annotated[
        Optional[int],
        typer.Option("--status", "-s", help="Code HTTP de la reponse recue"),
    ] = None,
    header: Annotated[
        Optional[list[str]],
        typer.Option("--header", "-H", help="En-tete de la reponse (NOM:VALEUR), repetable"),
    ] = None,
    canceled: Annotated[
        bool,
        typer.Option("--canceled", help="L'appel a ete annule par l'utilisateur"),
    ] = False,
) -> None:
    """
    Classifie une erreur d'appel API.

    Sans --status, l'erreur est consideree comme survenue avant toute reponse.

    Exemples:
      vimeo-model classify-error error.json --status 401 -H 'WWW-Authenticate: Bearer error="invalid_token"'
      vimeo-model classify-error --canceled
    """
    _classify_error(file, status, header or [], canceled)


@with_container
def _classify_error(
    container,
    file: Optional[Path],
    status: Optional[int],
    headers: list[str],
    canceled: bool,
) -> None:
    payload = load_json_payload(file) if file is not None else None
    response = None
    if status is not None:
        response = ResponseInfo(status_code=status, headers=_parse_headers(headers))

    try:
        error = container.deserializer().decode_error(payload, response=response)
    except DeserializationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    if canceled:
        error = error.as_canceled()

    render_fields(
        "Classification de l'erreur",
        [
            ("Code HTTP", error.effective_http_status),
            ("Code d'erreur", error.code.name),
            ("Erreur reseau", error.is_network_error),
            ("Service indisponible", error.is_service_unavailable),
            ("Interdit", error.is_forbidden),
            ("Jeton invalide", error.is_invalid_token),
            ("Mot de passe requis", error.is_password_required),
            ("Message", error.log_string),
        ],
    )
