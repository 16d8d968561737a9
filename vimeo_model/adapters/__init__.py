"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et font le lien
avec les systemes externes.

Sous-packages :
- json/ : Deserialiseur de reference (dict JSON -> enregistrements)
- api/ : Conversion des reponses et exceptions httpx en ErrorRecord
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from vimeo_model.adapters.json.deserializer import DeserializationError, JsonRecordDeserializer

__all__ = [
    "DeserializationError",
    "JsonRecordDeserializer",
]
