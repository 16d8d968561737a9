"""
Objets valeur du graphe d'engagement (champ `metadata`).

Le graphe se compose des connexions (aretes comptees vers des ressources
liees) et des interactions (drapeaux propres a l'utilisateur courant).
Chaque arete et chaque drapeau est optionnel : l'absence est un etat normal.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from vimeo_model.core.value_objects.status import Stream


@dataclass(frozen=True)
class Connection:
    """
    Arete vers une collection de ressources liees.

    Attributs :
        uri : URI de la collection
        options : Methodes HTTP autorisees sur la collection (ex: "GET", "POST")
        total : Nombre d'elements dans la collection
        name : Nom affiche (utilise par la connexion `season`)
    """

    uri: Optional[str] = None
    options: tuple[str, ...] = ()
    total: int = 0
    name: Optional[str] = None


@dataclass(frozen=True)
class NotificationConnection(Connection):
    """Connexion vers les notifications, avec compteurs de non-lus et nouveaux."""

    unread_total: int = 0
    new_total: int = 0


@dataclass(frozen=True)
class Interaction:
    """
    Interaction de l'utilisateur courant avec une ressource.

    La presence de l'objet signifie que l'action est possible ; `added`
    indique qu'elle a ete effectuee.

    Attributs :
        added : L'utilisateur a effectue l'action (like, follow, ...)
        added_time : Date de l'action
        expiration : Date d'expiration (locations et abonnements TVOD)
        stream : Source d'achat (Stream.PURCHASED pour un achat effectif)
        uri : URI de l'interaction
    """

    added: bool = False
    added_time: Optional[datetime] = None
    expiration: Optional[datetime] = None
    stream: Optional[Stream] = None
    uri: Optional[str] = None

    @property
    def is_purchased(self) -> bool:
        """Vrai si l'interaction provient d'un achat."""
        return self.stream is Stream.PURCHASED


@dataclass(frozen=True)
class ConnectionCollection:
    """Ensemble des connexions nommees d'une video ou d'un utilisateur."""

    followers: Optional[Connection] = None
    following: Optional[Connection] = None
    likes: Optional[Connection] = None
    videos: Optional[Connection] = None
    comments: Optional[Connection] = None
    channels: Optional[Connection] = None
    moderated_channels: Optional[Connection] = None
    appearances: Optional[Connection] = None
    watchlater: Optional[Connection] = None
    watched_videos: Optional[Connection] = None
    notifications: Optional[NotificationConnection] = None
    related: Optional[Connection] = None
    recommendations: Optional[Connection] = None
    season: Optional[Connection] = None
    trailer: Optional[Connection] = None
    playback_failure_reason: Optional[Connection] = None
    tvod: Optional[Connection] = None
    pictures: Optional[Connection] = None
    feed: Optional[Connection] = None


@dataclass(frozen=True)
class InteractionCollection:
    """Ensemble des interactions nommees."""

    follow: Optional[Interaction] = None
    like: Optional[Interaction] = None
    watchlater: Optional[Interaction] = None
    rent: Optional[Interaction] = None
    buy: Optional[Interaction] = None
    subscribe: Optional[Interaction] = None


@dataclass(frozen=True)
class Metadata:
    """Graphe d'engagement : connexions + interactions."""

    connections: Optional[ConnectionCollection] = None
    interactions: Optional[InteractionCollection] = None
