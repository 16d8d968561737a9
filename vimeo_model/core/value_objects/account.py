"""
Objets valeur lies au compte utilisateur : quota d'upload, preferences,
adresses et sites web.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Space:
    """
    Espace d'upload en octets.

    Attributs :
        free : Espace restant
        max : Espace total autorise
        used : Espace consomme
    """

    free: int = 0
    max: int = 0
    used: int = 0


@dataclass(frozen=True)
class UploadQuota:
    """Quota d'upload d'un utilisateur (champ `upload_quota`)."""

    space: Optional[Space] = None

    @property
    def free_upload_space(self) -> Optional[int]:
        """Espace libre en octets, None sans objet `space`."""
        return self.space.free if self.space is not None else None


@dataclass(frozen=True)
class Privacy:
    """Parametres de confidentialite (seul `view` est exploite)."""

    view: Optional[str] = None


@dataclass(frozen=True)
class VideoPreferences:
    """Preferences appliquees aux nouvelles videos."""

    privacy: Optional[Privacy] = None


@dataclass(frozen=True)
class Preferences:
    """Preferences du compte (champ `preferences`)."""

    videos: Optional[VideoPreferences] = None


@dataclass(frozen=True)
class Email:
    """Adresse email verifiee."""

    email: str = ""


@dataclass(frozen=True)
class Website:
    """Site web affiche sur le profil."""

    link: str = ""
    name: Optional[str] = None
    description: Optional[str] = None
