"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration et le deserialiseur a la CLI.
"""

from dependency_injector import containers, providers

from .adapters.json.deserializer import JsonRecordDeserializer
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        deserializer = container.deserializer()
        video = deserializer.decode_video(payload)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    deserializer = providers.Singleton(JsonRecordDeserializer)
