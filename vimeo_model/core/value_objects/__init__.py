"""
Objets valeur immutables representant les sous-enregistrements de l'API.

Exports :
- WireEnum et enums de statut : VideoStatus, PlayStatus, AccountType, Stream, TvodVideoType
- ErrorCode : Codes d'erreur structures
- Play, PlayProgress, VideoFile, ProgressiveVideoFile, Drm, DrmContent : Lecture
- Connection, NotificationConnection, Interaction, ConnectionCollection,
  InteractionCollection, Metadata : Graphe d'engagement
- VideoBadge, UserBadge et leurs types
- Spatial, StatsCollection, Picture, PictureCollection : Annexes video
- UploadQuota, Space, Preferences, Email, Website : Compte utilisateur
- PinCodeInfo : Autorisation par code PIN
"""

from vimeo_model.core.value_objects.status import (
    AccountType,
    PlayStatus,
    Stream,
    TvodVideoType,
    VideoStatus,
    WireEnum,
)
from vimeo_model.core.value_objects.error_code import ErrorCode, PASSWORD_ERROR_CODES
from vimeo_model.core.value_objects.playback import (
    Drm,
    DrmContent,
    Play,
    PlayProgress,
    ProgressiveVideoFile,
    VideoFile,
)
from vimeo_model.core.value_objects.engagement import (
    Connection,
    ConnectionCollection,
    Interaction,
    InteractionCollection,
    Metadata,
    NotificationConnection,
)
from vimeo_model.core.value_objects.badges import (
    UserBadge,
    UserBadgeType,
    VideoBadge,
    VideoBadgeType,
)
from vimeo_model.core.value_objects.media import (
    Picture,
    PictureCollection,
    Spatial,
    StatsCollection,
)
from vimeo_model.core.value_objects.account import (
    Email,
    Preferences,
    Privacy,
    Space,
    UploadQuota,
    VideoPreferences,
    Website,
)
from vimeo_model.core.value_objects.auth import PinCodeInfo

__all__ = [
    # Enums
    "WireEnum",
    "VideoStatus",
    "PlayStatus",
    "AccountType",
    "Stream",
    "TvodVideoType",
    "ErrorCode",
    "PASSWORD_ERROR_CODES",
    # Lecture
    "Play",
    "PlayProgress",
    "VideoFile",
    "ProgressiveVideoFile",
    "Drm",
    "DrmContent",
    # Engagement
    "Connection",
    "NotificationConnection",
    "Interaction",
    "ConnectionCollection",
    "InteractionCollection",
    "Metadata",
    # Badges
    "VideoBadge",
    "VideoBadgeType",
    "UserBadge",
    "UserBadgeType",
    # Annexes
    "Spatial",
    "StatsCollection",
    "Picture",
    "PictureCollection",
    "UploadQuota",
    "Space",
    "Preferences",
    "VideoPreferences",
    "Privacy",
    "Email",
    "Website",
    "PinCodeInfo",
]
