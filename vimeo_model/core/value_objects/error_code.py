"""
Codes d'erreur structures renvoyes par l'API (champ `error_code`).

Seuls les codes interpretes par le client sont enumeres. Tout autre code,
ou l'absence de code, correspond a ErrorCode.DEFAULT.
"""

from typing import Any, Optional

from vimeo_model.core.value_objects.status import WireEnum


class ErrorCode(WireEnum):
    """Code d'erreur de l'API. DEFAULT signifie "pas de code exploitable"."""

    DEFAULT = "default"

    # Mot de passe video
    INVALID_INPUT_VIDEO_PASSWORD_MISMATCH = "2222"
    INVALID_INPUT_VIDEO_NO_PASSWORD = "2223"

    # DRM (remontes par la connexion playback_failure_reason)
    DRM_STREAM_LIMIT_HIT = "3419"
    DRM_CONCURRENT_STREAM_LIMIT_HIT = "3420"
    DRM_DEVICE_LIMIT_HIT = "3421"

    # Authentification
    INVALID_TOKEN = "8003"

    @classmethod
    def from_wire(cls, value: Any, default: Optional["ErrorCode"] = None) -> Optional["ErrorCode"]:
        """Accepte les codes numeriques (l'API les envoie en entier)."""
        if value is None:
            return default
        return super().from_wire(str(value), default)


PASSWORD_ERROR_CODES = frozenset({
    ErrorCode.INVALID_INPUT_VIDEO_NO_PASSWORD,
    ErrorCode.INVALID_INPUT_VIDEO_PASSWORD_MISMATCH,
})
