"""
Acces au graphe d'engagement (connexions et interactions).

Mixin partage par Video et User. Chaque arete nommee expose l'objet brut
(ou None) et une requete de commodite (compteur ou booleen). Un graphe
absent, une collection absente ou une arete absente donnent tous 0 ou False :
l'appelant ne peut pas distinguer ces cas.

Convention :
- can_X : l'interaction X est presente (quelle que soit sa valeur `added`)
- is_X : l'interaction X est presente ET `added` est vrai
"""

from typing import Optional

from vimeo_model.core.navigation import dig
from vimeo_model.core.value_objects.engagement import (
    Connection,
    Interaction,
    Metadata,
    NotificationConnection,
)
from vimeo_model.utils.constants import OPTIONS_POST


class EngagementMixin:
    """Accesseurs sans exception sur `self.metadata`."""

    metadata: Optional[Metadata]

    # --- Acces generique ---

    def connection(self, name: str) -> Optional[Connection]:
        """Retourne la connexion nommee, ou None si un maillon manque."""
        return dig(self, "metadata", "connections", name)

    def interaction(self, name: str) -> Optional[Interaction]:
        """Retourne l'interaction nommee, ou None si un maillon manque."""
        return dig(self, "metadata", "interactions", name)

    def connection_total(self, name: str) -> int:
        """Nombre d'elements de la connexion nommee (0 si absente)."""
        return dig(self.connection(name), "total", default=0)

    def can_interact(self, name: str) -> bool:
        """Vrai si l'interaction nommee est proposee a l'utilisateur."""
        return self.interaction(name) is not None

    def has_interacted(self, name: str) -> bool:
        """Vrai si l'interaction nommee est presente et effectuee."""
        interaction = self.interaction(name)
        return interaction is not None and interaction.added

    # --- Connexions ---

    @property
    def followers_connection(self) -> Optional[Connection]:
        return self.connection("followers")

    @property
    def following_connection(self) -> Optional[Connection]:
        return self.connection("following")

    @property
    def likes_connection(self) -> Optional[Connection]:
        return self.connection("likes")

    @property
    def videos_connection(self) -> Optional[Connection]:
        return self.connection("videos")

    @property
    def comments_connection(self) -> Optional[Connection]:
        return self.connection("comments")

    @property
    def channels_connection(self) -> Optional[Connection]:
        return self.connection("channels")

    @property
    def moderated_channels_connection(self) -> Optional[Connection]:
        return self.connection("moderated_channels")

    @property
    def appearances_connection(self) -> Optional[Connection]:
        return self.connection("appearances")

    @property
    def watch_later_connection(self) -> Optional[Connection]:
        return self.connection("watchlater")

    @property
    def watched_videos_connection(self) -> Optional[Connection]:
        return self.connection("watched_videos")

    @property
    def notifications_connection(self) -> Optional[NotificationConnection]:
        return self.connection("notifications")

    @property
    def related_connection(self) -> Optional[Connection]:
        return self.connection("related")

    @property
    def recommendations_connection(self) -> Optional[Connection]:
        return self.connection("recommendations")

    @property
    def season_connection(self) -> Optional[Connection]:
        return self.connection("season")

    @property
    def trailer_connection(self) -> Optional[Connection]:
        return self.connection("trailer")

    @property
    def playback_failure_connection(self) -> Optional[Connection]:
        return self.connection("playback_failure_reason")

    @property
    def tvod_connection(self) -> Optional[Connection]:
        return self.connection("tvod")

    @property
    def pictures_connection(self) -> Optional[Connection]:
        return self.connection("pictures")

    @property
    def feed_connection(self) -> Optional[Connection]:
        return self.connection("feed")

    # --- Compteurs ---

    @property
    def followers_count(self) -> int:
        return self.connection_total("followers")

    @property
    def following_count(self) -> int:
        return self.connection_total("following")

    @property
    def likes_count(self) -> int:
        return self.connection_total("likes")

    @property
    def videos_count(self) -> int:
        return self.connection_total("videos")

    @property
    def comments_count(self) -> int:
        return self.connection_total("comments")

    @property
    def channels_count(self) -> int:
        return self.connection_total("channels")

    @property
    def moderated_channels_count(self) -> int:
        return self.connection_total("moderated_channels")

    @property
    def appearances_count(self) -> int:
        return self.connection_total("appearances")

    @property
    def unread_notifications_count(self) -> int:
        return dig(self.notifications_connection, "unread_total", default=0)

    # --- Interactions ---

    @property
    def follow_interaction(self) -> Optional[Interaction]:
        return self.interaction("follow")

    @property
    def like_interaction(self) -> Optional[Interaction]:
        return self.interaction("like")

    @property
    def watch_later_interaction(self) -> Optional[Interaction]:
        return self.interaction("watchlater")

    @property
    def rent_interaction(self) -> Optional[Interaction]:
        return self.interaction("rent")

    @property
    def buy_interaction(self) -> Optional[Interaction]:
        return self.interaction("buy")

    @property
    def subscribe_interaction(self) -> Optional[Interaction]:
        return self.interaction("subscribe")

    # --- Affordances ---

    @property
    def can_follow(self) -> bool:
        return self.can_interact("follow")

    @property
    def is_following(self) -> bool:
        return self.has_interacted("follow")

    @property
    def can_like(self) -> bool:
        return self.can_interact("like")

    @property
    def is_liked(self) -> bool:
        return self.has_interacted("like")

    @property
    def can_watch_later(self) -> bool:
        return self.can_interact("watchlater")

    @property
    def is_watch_later(self) -> bool:
        return self.has_interacted("watchlater")

    @property
    def can_upload_picture(self) -> bool:
        """Vrai si la connexion `pictures` annonce la capacite POST."""
        options = dig(self.pictures_connection, "options", default=())
        return OPTIONS_POST in options
