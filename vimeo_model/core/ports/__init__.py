"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports de decodage :
- IRecordDeserializer : JSON de l'API -> Video, User, ErrorRecord, PinCodeInfo
"""

from vimeo_model.core.ports.deserializer import IRecordDeserializer

__all__ = [
    "IRecordDeserializer",
]
