"""
Enregistrement d'erreur et classification des echecs d'appel.

ErrorRecord est une valeur de donnees : le corps d'erreur de l'API, la reponse
de transport si elle a ete recue, la cause locale sinon. Les predicats de
classification (reseau, 503, 403, jeton invalide, mot de passe requis) ne
levent jamais ; ils servent aux decisions de relance et d'affichage.

VimeoRequestError est l'exception distincte qui transporte un ErrorRecord
quand l'appelant a besoin d'interrompre le flot d'execution.
"""

from dataclasses import dataclass, replace
from typing import Optional

from vimeo_model.core.value_objects.error_code import ErrorCode, PASSWORD_ERROR_CODES
from vimeo_model.utils.constants import AUTHENTICATION_HEADER, AUTHENTICATION_TOKEN_ERROR


@dataclass(frozen=True)
class ResponseInfo:
    """
    Reponse de transport associee a un echec.

    Attributs :
        status_code : Code HTTP recu
        headers : En-tetes en paires (nom, valeur) ; un nom peut se repeter
    """

    status_code: int
    headers: tuple[tuple[str, str], ...] = ()

    def header_values(self, name: str) -> list[str]:
        """Toutes les valeurs d'un en-tete, nom compare sans casse."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]


@dataclass(frozen=True)
class InvalidParameter:
    """
    Parametre refuse par l'API (element de `invalid_parameters`).

    Attributs :
        field : Nom du parametre
        error_code : Code d'erreur associe
        developer_message : Message technique
    """

    field: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    developer_message: Optional[str] = None


@dataclass
class ErrorRecord:
    """
    Echec d'un appel a l'API.

    Tous les champs sont fixes a la construction, sauf la liste des
    parametres invalides qui peut etre completee par add_invalid_parameter().

    Attributs :
        error_message : Message brut renvoye par le serveur (`error`)
        link : Lien d'aide (`link`)
        developer_message : Message technique (`developer_message`)
        error_code : Code structure (`error_code`)
        invalid_parameters : Parametres refuses, dans l'ordre de l'API
        response : Reponse de transport, None si aucune reponse n'a ete recue
        cause : Exception locale quand aucune reponse n'a ete recue
        http_status_code : Code HTTP de repli, utilise seulement sans reponse
        is_canceled : L'appel a ete annule par l'utilisateur
    """

    error_message: Optional[str] = None
    link: Optional[str] = None
    developer_message: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    invalid_parameters: Optional[list[InvalidParameter]] = None
    response: Optional[ResponseInfo] = None
    cause: Optional[BaseException] = None
    http_status_code: Optional[int] = None
    is_canceled: bool = False

    @classmethod
    def from_message(cls, message: str, cause: Optional[BaseException] = None) -> "ErrorRecord":
        """Construit une erreur locale a partir d'un message technique."""
        return cls(developer_message=message, cause=cause)

    # --- Accesseurs ---

    @property
    def code(self) -> ErrorCode:
        return self.error_code if self.error_code is not None else ErrorCode.DEFAULT

    @property
    def invalid_parameter(self) -> Optional[InvalidParameter]:
        """Premier parametre invalide, None si la liste est absente ou vide."""
        if not self.invalid_parameters:
            return None
        return self.invalid_parameters[0]

    @property
    def invalid_parameter_error_code(self) -> Optional[ErrorCode]:
        parameter = self.invalid_parameter
        return parameter.error_code if parameter is not None else None

    @property
    def effective_developer_message(self) -> Optional[str]:
        """Message technique s'il est non vide, sinon le message brut du serveur."""
        if self.developer_message:
            return self.developer_message
        return self.error_message

    @property
    def effective_http_status(self) -> Optional[int]:
        """Code HTTP de la reponse, sinon le code de repli, sinon None."""
        if self.response is not None:
            return self.response.status_code
        return self.http_status_code

    # --- Classification ---

    @property
    def is_network_error(self) -> bool:
        """
        Vrai si l'echec vient de la couche reseau (connectivite, socket ferme...).

        Sans reponse de transport, l'echec a eu lieu avant toute reponse.
        Une annulation n'est jamais une erreur reseau.
        """
        return not self.is_canceled and self.response is None

    @property
    def is_service_unavailable(self) -> bool:
        return self.response is not None and self.response.status_code == 503

    @property
    def is_forbidden(self) -> bool:
        return self.response is not None and self.response.status_code == 403

    @property
    def is_invalid_token(self) -> bool:
        """Vrai pour un 401 dont le challenge signale un jeton invalide."""
        if self.response is None or self.response.status_code != 401:
            return False
        return AUTHENTICATION_TOKEN_ERROR in self.response.header_values(AUTHENTICATION_HEADER)

    @property
    def is_password_required(self) -> bool:
        """
        Vrai si la video demande un mot de passe absent ou errone.

        Seul le premier parametre invalide est examine.
        """
        return (
            self.invalid_parameter_error_code in PASSWORD_ERROR_CODES
            or self.code in PASSWORD_ERROR_CODES
        )

    @property
    def log_string(self) -> str:
        """Le message le plus utile disponible, ou "" si aucun."""
        if self.effective_developer_message:
            return self.effective_developer_message
        if self.error_message:
            return self.error_message
        if self.cause is not None and str(self.cause):
            return f"Exception: {self.cause}"
        if self.code is not ErrorCode.DEFAULT:
            return f"Error Code {self.code.name}"
        if self.effective_http_status is not None:
            return f"HTTP Status Code: {self.effective_http_status}"
        return ""

    def as_canceled(self) -> "ErrorRecord":
        """
        Copie de l'erreur marquee comme annulee.

        La copie possede sa propre liste de parametres invalides.
        """
        parameters = list(self.invalid_parameters) if self.invalid_parameters is not None else None
        return replace(self, invalid_parameters=parameters, is_canceled=True)

    # --- Mutation ---

    def add_invalid_parameter(
        self,
        field: Optional[str],
        code: Optional[ErrorCode],
        developer_message: Optional[str],
    ) -> None:
        """Ajoute un parametre invalide en fin de liste (creee si absente)."""
        if self.invalid_parameters is None:
            self.invalid_parameters = []
        self.invalid_parameters.append(
            InvalidParameter(field=field, error_code=code, developer_message=developer_message)
        )


class VimeoRequestError(Exception):
    """
    Exception levee par un appelant pour interrompre le flot sur un echec.

    Attributes:
        error: L'enregistrement d'erreur classifiable
    """

    def __init__(self, error: ErrorRecord) -> None:
        self.error = error
        super().__init__(error.log_string or "Vimeo request failed")
