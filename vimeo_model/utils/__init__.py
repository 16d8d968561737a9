"""
Constantes partagees pour vimeo-model.
"""

from vimeo_model.utils.constants import (
    AUTHENTICATION_HEADER,
    AUTHENTICATION_TOKEN_ERROR,
    ENDPOINT_RECOMMENDATIONS,
    OPTIONS_POST,
)

__all__ = [
    "AUTHENTICATION_HEADER",
    "AUTHENTICATION_TOKEN_ERROR",
    "ENDPOINT_RECOMMENDATIONS",
    "OPTIONS_POST",
]
