"""
Objet valeur pour l'autorisation par code PIN (appareils sans clavier).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PinCodeInfo:
    """
    Informations de code PIN renvoyees lors d'une autorisation d'appareil.

    Attributs :
        device_code : Code a echanger contre un jeton une fois le PIN valide
        user_code : Code a saisir par l'utilisateur
        authorize_link : URL interrogee par l'appareil pendant l'attente
        activate_link : URL ou l'utilisateur saisit le code
        expires_in : Duree de validite en secondes
        interval : Intervalle d'interrogation en secondes
    """

    device_code: Optional[str] = None
    user_code: Optional[str] = None
    authorize_link: Optional[str] = None
    activate_link: Optional[str] = None
    expires_in: int = 0
    interval: int = 0
