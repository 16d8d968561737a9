"""
Frontiere avec la couche HTTP.

Ce module ne fait aucune requete : il convertit ce que la couche de transport
a obtenu (httpx.Response ou exception) en ErrorRecord classifiable.
"""

from vimeo_model.adapters.api.error_adapter import (
    error_from_exception,
    error_from_response,
    response_info,
)

__all__ = [
    "error_from_exception",
    "error_from_response",
    "response_info",
]
