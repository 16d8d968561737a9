"""
Entite utilisateur.

Identite par `uri` uniquement. Le niveau de compte brut est converti en
AccountType (BASIC par defaut) et le graphe d'engagement est expose via
EngagementMixin.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from vimeo_model.core.entities.engagement import EngagementMixin
from vimeo_model.core.navigation import dig
from vimeo_model.core.value_objects import (
    AccountType,
    Email,
    Metadata,
    Picture,
    PictureCollection,
    Preferences,
    UploadQuota,
    UserBadge,
    UserBadgeType,
    Website,
)


@dataclass(eq=False)
class User(EngagementMixin):
    """
    Utilisateur de la plateforme.

    Un utilisateur peut etre cree avec sa seule `uri` (lien profond) puis
    complete plus tard : tous les autres champs sont optionnels.

    Attributs :
        uri : URI de la ressource, seule cle d'egalite
        name : Nom affiche
        link : URL du profil
        location : Localisation declaree
        bio : Biographie
        created_time : Date de creation du compte
        account : Niveau de compte brut ("basic", "plus", ...)
        pictures : Avatar
        emails : Adresses verifiees
        websites : Sites du profil
        metadata : Graphe d'engagement
        upload_quota : Quota d'upload
        preferences : Preferences du compte
        badge : Badge utilisateur
    """

    uri: Optional[str] = None
    name: Optional[str] = None
    link: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    created_time: Optional[datetime] = None
    account: Optional[str] = None
    pictures: Optional[PictureCollection] = None
    emails: list[Email] = field(default_factory=list)
    websites: list[Website] = field(default_factory=list)
    metadata: Optional[Metadata] = None
    upload_quota: Optional[UploadQuota] = None
    preferences: Optional[Preferences] = None
    badge: Optional[UserBadge] = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        return self.uri is not None and other.uri is not None and self.uri == other.uri

    def __hash__(self) -> int:
        return hash(self.uri) if self.uri is not None else 0

    @property
    def account_type(self) -> AccountType:
        """Niveau de compte ; BASIC si absent ou non reconnu."""
        return AccountType.from_wire(self.account, AccountType.BASIC)

    @property
    def is_plus_or_pro(self) -> bool:
        return self.account_type in (AccountType.PLUS, AccountType.PRO)

    @property
    def badge_type(self) -> UserBadgeType:
        return dig(self, "badge", "badge_type", default=UserBadgeType.NONE)

    @property
    def pictures_list(self) -> list[Picture]:
        """Tailles d'avatar disponibles (liste vide si aucune)."""
        return list(dig(self, "pictures", "sizes", default=()))

    @property
    def free_upload_space(self) -> Optional[int]:
        """Espace d'upload libre en octets, None sans quota."""
        return dig(self, "upload_quota", "free_upload_space")

    @property
    def preferred_video_privacy(self) -> Optional[str]:
        """Confidentialite appliquee par defaut aux nouvelles videos."""
        return dig(self, "preferences", "videos", "privacy", "view")
