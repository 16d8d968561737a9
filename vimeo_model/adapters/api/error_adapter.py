"""
Conversion des echecs httpx en ErrorRecord.

Point de jonction entre la couche de transport (hors de ce package) et le
classifieur d'erreurs : une reponse recue devient un ResponseInfo (code +
en-tetes multi-valeurs) et son corps JSON est decode ; une exception levee
avant toute reponse devient la cause de l'erreur.

Usage:
    try:
        response = await client.get("/videos/123")
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        error = error_from_response(exc.response, deserializer)
    except httpx.TransportError as exc:
        error = error_from_exception(exc)
    if error.is_invalid_token:
        ...
"""

from typing import Optional

import httpx
from loguru import logger

from vimeo_model.core.errors import ErrorRecord, ResponseInfo
from vimeo_model.core.ports.deserializer import IRecordDeserializer


def response_info(response: httpx.Response) -> ResponseInfo:
    """Extrait le code et tous les en-tetes (doublons conserves) d'une reponse."""
    return ResponseInfo(
        status_code=response.status_code,
        headers=tuple(response.headers.multi_items()),
    )


def error_from_response(
    response: httpx.Response,
    deserializer: IRecordDeserializer,
) -> ErrorRecord:
    """
    Construit l'erreur associee a une reponse en echec.

    Un corps absent ou non JSON ne bloque pas la conversion : l'erreur
    porte alors seulement la reponse de transport.

    Args:
        response: Reponse httpx recue (4xx, 5xx)
        deserializer: Deserialiseur pour le corps d'erreur

    Returns:
        ErrorRecord avec la reponse attachee
    """
    info = response_info(response)
    payload = None
    try:
        body = response.json()
    except ValueError:
        logger.debug("Corps d'erreur non JSON", status_code=response.status_code)
    else:
        if isinstance(body, dict):
            payload = body
        else:
            logger.debug("Corps d'erreur inattendu", status_code=response.status_code)

    error = deserializer.decode_error(payload, response=info)
    logger.debug(
        "Erreur API convertie",
        status_code=info.status_code,
        error_code=error.code.name,
    )
    return error


def error_from_exception(
    exc: BaseException,
    message: Optional[str] = None,
    canceled: bool = False,
    http_status_code: Optional[int] = None,
) -> ErrorRecord:
    """
    Construit l'erreur d'un appel qui n'a recu aucune reponse.

    Args:
        exc: Exception levee par la couche de transport
        message: Message technique optionnel
        canceled: L'appel a ete annule par l'utilisateur
        http_status_code: Code HTTP de repli fixe localement

    Returns:
        ErrorRecord sans reponse (erreur reseau sauf annulation)
    """
    logger.debug("Echec sans reponse", exception=type(exc).__name__, canceled=canceled)
    return ErrorRecord(
        developer_message=message,
        cause=exc,
        http_status_code=http_status_code,
        is_canceled=canceled,
    )
