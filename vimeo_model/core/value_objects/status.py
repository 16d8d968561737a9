"""
Enums de statut avec correspondance bidirectionnelle vers les chaines de l'API.

Chaque enum porte sa chaine "wire" comme valeur. La recherche inverse
(chaine -> membre) passe par from_wire(), qui ne leve jamais : une valeur
inconnue ou absente retombe sur un membre par defaut nomme.
"""

from enum import Enum
from typing import Any, Optional, TypeVar

_E = TypeVar("_E", bound="WireEnum")


class WireEnum(Enum):
    """Enum dont la valeur est la chaine echangee avec l'API."""

    @classmethod
    def from_wire(cls: type[_E], value: Any, default: Optional[_E] = None) -> Optional[_E]:
        """
        Retrouve le membre correspondant a une chaine de l'API.

        Args:
            value: Chaine recue (ou None)
            default: Membre retourne si la valeur est absente ou inconnue

        Returns:
            Le membre correspondant, ou default
        """
        if value is None:
            return default
        try:
            return cls(value)
        except ValueError:
            return default

    def __str__(self) -> str:
        return self.value


class VideoStatus(WireEnum):
    """Statut brut du cycle de vie d'une video (champ `status`)."""

    NONE = "N/A"
    AVAILABLE = "available"
    UPLOADING = "uploading"
    TRANSCODE_STARTING = "transcode_starting"
    TRANSCODING = "transcoding"
    # Erreurs
    UPLOADING_ERROR = "uploading_error"
    TRANSCODING_ERROR = "transcoding_error"
    QUOTA_EXCEEDED = "quota_exceeded"


class PlayStatus(WireEnum):
    """Statut de lecture (champ `play.status`).

    Valeurs:
        UNAVAILABLE: Transcodage non termine
        PLAYABLE: Lisible, le transcodage est termine
        PURCHASE_REQUIRED: Video a la demande non achetee par l'utilisateur
        RESTRICTED: Ni lisible ni achetable depuis la region de l'utilisateur
    """

    UNAVAILABLE = "unavailable"
    PLAYABLE = "playable"
    PURCHASE_REQUIRED = "purchase_required"
    RESTRICTED = "restricted"


class AccountType(WireEnum):
    """Niveau de compte d'un utilisateur (champ `account`)."""

    BASIC = "basic"
    BUSINESS = "business"
    PLUS = "plus"
    PRO = "pro"
    STAFF = "staff"


class Stream(WireEnum):
    """Source d'une interaction d'achat (champ `stream` des interactions TVOD)."""

    PURCHASED = "purchased"
    RESTRICTED = "restricted"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class TvodVideoType(Enum):
    """Type d'achat resolu pour une video TVOD.

    Valeurs:
        NONE: La video n'est pas une video TVOD
        TRAILER: Bande-annonce d'une video TVOD
        RENTAL: Location en cours
        SUBSCRIPTION: Abonnement en cours
        PURCHASE: Achat definitif
        UNKNOWN: Video TVOD sans signal d'achat exploitable
    """

    NONE = "none"
    TRAILER = "trailer"
    RENTAL = "rental"
    SUBSCRIPTION = "subscription"
    PURCHASE = "purchase"
    UNKNOWN = "unknown"
