"""
Objets valeur pour le sous-enregistrement de lecture (champ `play`).

Tous les objets valeur utilisent @dataclass(frozen=True). Les listes de
l'API sont stockees en tuples pour garantir l'immutabilite.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from vimeo_model.core.value_objects.status import PlayStatus


@dataclass(frozen=True)
class PlayProgress:
    """
    Progression de lecture de l'utilisateur courant.

    Attributs :
        seconds : Position atteinte en secondes (None si non renseignee)
    """

    seconds: Optional[float] = None


@dataclass(frozen=True)
class VideoFile:
    """
    Manifeste de streaming adaptatif (HLS ou DASH).

    Attributs :
        link : URL du manifeste
        link_expiration_time : Date d'expiration du lien signe
        log : URL de journalisation de lecture
    """

    link: Optional[str] = None
    link_expiration_time: Optional[datetime] = None
    log: Optional[str] = None


@dataclass(frozen=True)
class ProgressiveVideoFile:
    """
    Fichier progressif (MP4) a une qualite donnee.

    Attributs :
        link : URL du fichier
        width : Largeur en pixels
        height : Hauteur en pixels
        fps : Images par seconde
        size : Taille en octets
        md5 : Empreinte du fichier
        link_expiration_time : Date d'expiration du lien signe
    """

    link: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    fps: Optional[float] = None
    size: Optional[int] = None
    md5: Optional[str] = None
    link_expiration_time: Optional[datetime] = None


@dataclass(frozen=True)
class DrmContent:
    """Informations de licence pour un systeme DRM."""

    link: Optional[str] = None
    license_link: Optional[str] = None
    certificate_link: Optional[str] = None


@dataclass(frozen=True)
class Drm:
    """Systemes DRM disponibles pour la video."""

    widevine: Optional[DrmContent] = None
    playready: Optional[DrmContent] = None
    fairplay: Optional[DrmContent] = None


@dataclass(frozen=True)
class Play:
    """
    Sous-enregistrement de lecture d'une video.

    Attributs :
        status : Statut de lecture (None si absent ou inconnu)
        progress : Progression de lecture de l'utilisateur
        hls : Manifeste HLS
        dash : Manifeste DASH
        progressive : Fichiers progressifs, None si le champ est absent
        drm : Informations DRM
    """

    status: Optional[PlayStatus] = None
    progress: Optional[PlayProgress] = None
    hls: Optional[VideoFile] = None
    dash: Optional[VideoFile] = None
    progressive: Optional[tuple[ProgressiveVideoFile, ...]] = None
    drm: Optional[Drm] = None

    @property
    def file_count(self) -> int:
        """
        Nombre de fichiers livrables.

        Compte 1 pour HLS, 1 pour DASH, un par fichier progressif et 1 si
        une licence Widevine est presente.
        """
        count = 0
        if self.hls is not None:
            count += 1
        if self.dash is not None:
            count += 1
        if self.progressive is not None:
            count += len(self.progressive)
        if self.drm is not None and self.drm.widevine is not None:
            count += 1
        return count
