"""
Objets valeur annexes d'une video : marqueur spatial, statistiques, images.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Spatial:
    """
    Marqueur de video immersive (360).

    Seule la presence de l'objet est significative ; les attributs
    decrivent le rendu.

    Attributs :
        projection : Projection (ex: "equirectangular", "cubical")
        stereo_format : Format stereo (ex: "mono", "left-right", "top-bottom")
        field_of_view : Champ de vision en degres
    """

    projection: Optional[str] = None
    stereo_format: Optional[str] = None
    field_of_view: Optional[int] = None


@dataclass(frozen=True)
class StatsCollection:
    """Statistiques publiques. `plays` vaut None si le proprietaire les masque."""

    plays: Optional[int] = None


@dataclass(frozen=True)
class Picture:
    """Une taille d'image (vignette, avatar)."""

    link: Optional[str] = None
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class PictureCollection:
    """Ensemble des tailles disponibles pour une image."""

    uri: Optional[str] = None
    active: bool = False
    sizes: tuple[Picture, ...] = ()
