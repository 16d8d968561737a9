"""
Interface port pour le deserialiseur.

Le deserialiseur est un collaborateur externe : il transforme le JSON de
l'API en enregistrements types. Le domaine ne depend que de ce contrat ;
les implementations (adaptateurs) gerent la correspondance des noms de champs.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from vimeo_model.core.entities import User, Video
from vimeo_model.core.errors import ErrorRecord, ResponseInfo
from vimeo_model.core.value_objects import PinCodeInfo


class IRecordDeserializer(ABC):
    """
    Contrat de decodage des corps de reponse de l'API.

    Les entrees sont des objets JSON deja analyses (dict). Les champs absents
    ou mal formes donnent des champs None : le decodage d'un objet valide ne
    leve pas.
    """

    @abstractmethod
    def decode_video(self, payload: Mapping[str, Any]) -> Video:
        """Decode un objet video."""
        ...

    @abstractmethod
    def decode_user(self, payload: Mapping[str, Any]) -> User:
        """Decode un objet utilisateur."""
        ...

    @abstractmethod
    def decode_error(
        self,
        payload: Optional[Mapping[str, Any]],
        response: Optional[ResponseInfo] = None,
    ) -> ErrorRecord:
        """
        Decode un corps d'erreur.

        Args :
            payload : Corps JSON de l'erreur (None si la reponse n'en avait pas)
            response : Reponse de transport associee

        Retourne :
            L'enregistrement d'erreur
        """
        ...

    @abstractmethod
    def decode_pin_code_info(self, payload: Mapping[str, Any]) -> PinCodeInfo:
        """Decode la reponse d'une demande de code PIN."""
        ...
