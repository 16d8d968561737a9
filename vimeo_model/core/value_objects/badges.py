"""
Badges attaches aux videos et aux utilisateurs.
"""

from dataclasses import dataclass
from typing import Optional

from vimeo_model.core.value_objects.status import WireEnum


class VideoBadgeType(WireEnum):
    """Type de badge video (champ `badge.type`)."""

    NONE = "none"
    STAFF_PICK = "staffpick"
    STAFF_PICK_PREMIERE = "staffpick-premiere"
    STAFF_PICK_BEST_OF_THE_MONTH = "staffpick-best-of-the-month"
    STAFF_PICK_BEST_OF_THE_YEAR = "staffpick-best-of-the-year"
    WEEKEND_CHALLENGE = "weekendchallenge"
    VOD = "vod"


class UserBadgeType(WireEnum):
    """Type de badge utilisateur (champ `badge.type`)."""

    NONE = "none"
    ALUM = "alum"
    BUSINESS = "business"
    CURATION = "curation"
    PLUS = "plus"
    PRO = "pro"
    PRODUCER = "producer"
    SPONSOR = "sponsor"
    STAFF = "staff"
    SUPPORT = "support"


@dataclass(frozen=True)
class VideoBadge:
    """
    Badge d'une video.

    Attributs :
        badge_type : Type de badge (NONE si inconnu)
        festival : Nom du festival pour les badges de selection
        link : Lien vers la page du badge
        text : Libelle affichable
    """

    badge_type: VideoBadgeType = VideoBadgeType.NONE
    festival: Optional[str] = None
    link: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class UserBadge:
    """Badge d'un utilisateur."""

    badge_type: UserBadgeType = UserBadgeType.NONE
    alt_text: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
