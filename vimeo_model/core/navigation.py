"""
Navigation sure dans les chaines de champs optionnels.

Les enregistrements de l'API sont des graphes ou chaque niveau peut etre absent
(metadata -> connections -> likes -> total). Plutot que de repeter les tests
`is not None` a chaque accesseur, tous les accesseurs derives passent par dig().
"""

from typing import Any, Optional


def dig(root: Any, *path: str, default: Optional[Any] = None) -> Any:
    """
    Parcourt une suite d'attributs en s'arretant au premier maillon absent.

    Args:
        root: Objet de depart (peut etre None)
        *path: Noms d'attributs a suivre dans l'ordre
        default: Valeur retournee si un maillon (ou la valeur finale) est None

    Returns:
        La valeur au bout du chemin, ou default

    Example:
        dig(video, "metadata", "connections", "likes", "total", default=0)
    """
    current = root
    for name in path:
        if current is None:
            return default
        current = getattr(current, name, None)
    return default if current is None else current
