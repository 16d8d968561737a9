"""
Entite video.

Porte les champs decodes d'une video et resout l'etat derive :
statut simplifie, lecture possible, type d'achat TVOD, position de reprise.
Aucune methode ne leve pour un champ optionnel absent.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from vimeo_model.core.entities.engagement import EngagementMixin
from vimeo_model.core.entities.user import User
from vimeo_model.core.navigation import dig
from vimeo_model.core.value_objects import (
    Interaction,
    Metadata,
    PictureCollection,
    Play,
    PlayProgress,
    PlayStatus,
    Spatial,
    StatsCollection,
    TvodVideoType,
    VideoBadge,
    VideoBadgeType,
    VideoStatus,
)
from vimeo_model.utils.constants import ENDPOINT_RECOMMENDATIONS


def _as_aware(value: datetime) -> datetime:
    """Une date sans fuseau est consideree comme UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _rental_expires_later(
    rental_expires: Optional[datetime],
    subscription_expires: Optional[datetime],
) -> bool:
    """Vrai si les deux dates existent et que la location expire strictement apres."""
    return (
        rental_expires is not None
        and subscription_expires is not None
        and _as_aware(rental_expires) > _as_aware(subscription_expires)
    )


def _is_purchased(interaction: Optional[Interaction]) -> bool:
    return interaction is not None and interaction.is_purchased


@dataclass(eq=False)
class Video(EngagementMixin):
    """
    Video de la plateforme.

    L'identite est portee par `resource_key` uniquement : deux videos sont
    egales si leurs cles sont egales et non nulles. Une video sans cle n'est
    egale a aucune autre instance.

    Attributs :
        uri : URI de la ressource (ex: "/videos/123")
        resource_key : Identifiant stable utilise pour l'egalite
        name : Titre
        description : Description
        link : URL publique
        duration : Duree en secondes
        width : Largeur en pixels
        height : Hauteur en pixels
        language : Code langue
        created_time : Date de creation
        modified_time : Date de derniere modification
        release_time : Date de publication
        content_rating : Classifications de contenu
        license : Licence Creative Commons
        pictures : Vignettes
        stats : Statistiques publiques
        metadata : Graphe d'engagement
        user : Proprietaire
        api_status : Statut brut recu de l'API (None si absent)
        password : Mot de passe (uniquement pour le proprietaire)
        review_link : Lien de revue privee
        play : Sous-enregistrement de lecture
        badge : Badge de la video
        spatial : Marqueur de video 360
    """

    uri: Optional[str] = None
    resource_key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    duration: int = 0
    width: int = 0
    height: int = 0
    language: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    release_time: Optional[datetime] = None
    content_rating: list[str] = field(default_factory=list)
    license: Optional[str] = None
    pictures: Optional[PictureCollection] = None
    stats: Optional[StatsCollection] = None
    metadata: Optional[Metadata] = None
    user: Optional[User] = None
    api_status: Optional[VideoStatus] = None
    password: Optional[str] = None
    review_link: Optional[str] = None
    play: Optional[Play] = None
    badge: Optional[VideoBadge] = None
    spatial: Optional[Spatial] = None

    # --- Identite ---

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Video):
            return NotImplemented
        return (
            self.resource_key is not None
            and other.resource_key is not None
            and self.resource_key == other.resource_key
        )

    def __hash__(self) -> int:
        return hash(self.resource_key) if self.resource_key is not None else 0

    # --- Statut ---

    @property
    def raw_status(self) -> VideoStatus:
        """Statut tel que recu de l'API, NONE si absent."""
        return self.api_status if self.api_status is not None else VideoStatus.NONE

    @property
    def status(self) -> VideoStatus:
        """
        Statut simplifie pour l'affichage.

        TRANSCODE_STARTING et TRANSCODING sont equivalents cote client :
        le premier est rapporte comme TRANSCODING. Les autres statuts sont
        inchanges.
        """
        if self.raw_status is VideoStatus.TRANSCODE_STARTING:
            return VideoStatus.TRANSCODING
        return self.raw_status

    @property
    def is_360(self) -> bool:
        return self.spatial is not None

    @property
    def badge_type(self) -> VideoBadgeType:
        return dig(self, "badge", "badge_type", default=VideoBadgeType.NONE)

    # --- Lecture ---

    @property
    def play_status(self) -> Optional[PlayStatus]:
        return dig(self, "play", "status")

    @property
    def is_playable(self) -> bool:
        """
        Vrai si la video est theoriquement lisible.

        Des limitations propres a l'appareil peuvent encore empecher la lecture.
        """
        return self.play_status is PlayStatus.PLAYABLE

    @property
    def play_progress(self) -> Optional[PlayProgress]:
        return dig(self, "play", "progress")

    @property
    def play_progress_seconds(self) -> Optional[float]:
        """
        Position de reprise en secondes.

        Returns:
            None sans objet `progress` (capacite API manquante), 0 si la
            position n'est pas renseignee, sinon la position recue.

        La position est retournee telle quelle : aucun seuil lie a la duree
        de la video n'est applique ici.
        """
        progress = self.play_progress
        if progress is None:
            return None
        return progress.seconds if progress.seconds is not None else 0

    @property
    def play_progress_millis(self) -> Optional[int]:
        """Position de reprise en millisecondes, None propage tel quel."""
        seconds = self.play_progress_seconds
        if seconds is None:
            return None
        return int(seconds) * 1000

    @property
    def play_count(self) -> Optional[int]:
        """Nombre de lectures, None si le proprietaire masque le compteur."""
        return dig(self, "stats", "plays")

    # --- TVOD ---

    @property
    def is_tvod(self) -> bool:
        return self.tvod_connection is not None

    @property
    def is_trailer(self) -> bool:
        """
        Vrai si la video est la bande-annonce d'une video TVOD.

        Une video TVOD qui possede une bande-annonce expose la connexion
        `trailer` ; la bande-annonce elle-meme ne l'expose pas. C'est donc
        l'ABSENCE de la connexion qui marque une bande-annonce.
        """
        return self.is_tvod and self.trailer_connection is None

    def _is_possible_tvod_purchase(self) -> bool:
        return (
            self.is_tvod
            and not self.is_trailer
            and dig(self, "metadata", "interactions") is not None
        )

    @property
    def is_tvod_rental(self) -> bool:
        return self._is_possible_tvod_purchase() and _is_purchased(self.rent_interaction)

    @property
    def is_tvod_subscription(self) -> bool:
        return self._is_possible_tvod_purchase() and _is_purchased(self.subscribe_interaction)

    @property
    def is_tvod_purchase(self) -> bool:
        return self._is_possible_tvod_purchase() and _is_purchased(self.buy_interaction)

    @property
    def tvod_rental_expiration(self) -> Optional[datetime]:
        """Date d'expiration de la location, None si la video n'est pas louee."""
        if not self.is_tvod_rental:
            return None
        return dig(self.rent_interaction, "expiration")

    @property
    def tvod_subscription_expiration(self) -> Optional[datetime]:
        """Date d'expiration de l'abonnement, None sans abonnement."""
        if not self.is_tvod_subscription:
            return None
        return dig(self.subscribe_interaction, "expiration")

    @property
    def tvod_expiration(self) -> Optional[datetime]:
        """
        Date d'expiration TVOD.

        Si la video est a la fois louee et incluse dans un abonnement, la
        date la plus tardive est retenue ; a egalite, celle de l'abonnement.
        """
        if not self.is_tvod:
            return None
        rental_expires = self.tvod_rental_expiration
        subscription_expires = self.tvod_subscription_expiration
        if _rental_expires_later(rental_expires, subscription_expires):
            return rental_expires
        if subscription_expires is not None:
            return subscription_expires
        return rental_expires

    @property
    def tvod_video_type(self) -> TvodVideoType:
        """
        Type d'achat TVOD, plusieurs achats pouvant etre actifs a la fois.

        Priorite :
        1) bande-annonce
        2) achat definitif
        3) location et abonnement : l'expiration la plus tardive l'emporte,
           l'abonnement a egalite
        4) abonnement
        5) location

        Returns:
            NONE hors TVOD, UNKNOWN pour une video TVOD sans achat reconnu
            (video de l'utilisateur, code promo, bonus d'une saison...)
        """
        if not self.is_tvod:
            return TvodVideoType.NONE
        if self.is_trailer:
            return TvodVideoType.TRAILER
        if self.is_tvod_purchase:
            return TvodVideoType.PURCHASE
        if _rental_expires_later(self.tvod_rental_expiration, self.tvod_subscription_expiration):
            return TvodVideoType.RENTAL
        if self.is_tvod_subscription:
            return TvodVideoType.SUBSCRIPTION
        if self.is_tvod_rental:
            return TvodVideoType.RENTAL
        return TvodVideoType.UNKNOWN

    @property
    def tvod_season_name(self) -> Optional[str]:
        """Nom de la saison a laquelle appartient la video TVOD."""
        return dig(self.season_connection, "name")

    @property
    def trailer_uri(self) -> Optional[str]:
        return dig(self.trailer_connection, "uri")

    # --- URIs derivees ---

    @property
    def playback_failure_uri(self) -> Optional[str]:
        """
        URI a interroger apres un echec de lecture.

        Les echecs rapportes concernent les DRM ; l'API repond par un code
        d'erreur DRM, ou par un succes vide s'il n'y a pas d'echec associe.
        """
        return dig(self.playback_failure_connection, "uri")

    @property
    def recommendations_uri(self) -> Optional[str]:
        """URI des recommandations, construite depuis `uri` a defaut de connexion."""
        uri = dig(self.recommendations_connection, "uri")
        if uri is None and self.uri is not None:
            uri = self.uri + ENDPOINT_RECOMMENDATIONS
        return uri
