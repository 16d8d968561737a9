"""Deserialiseur JSON de reference."""

from vimeo_model.adapters.json.deserializer import DeserializationError, JsonRecordDeserializer

__all__ = [
    "DeserializationError",
    "JsonRecordDeserializer",
]
