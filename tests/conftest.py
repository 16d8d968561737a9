"""
Fixtures pytest partagees pour les tests vimeo-model.

Ce module contient les fixtures communes utilisees dans les tests:
- Deserialiseur JSON de reference
- Constructeurs de graphes d'engagement
- Settings de test avec chemins temporaires
"""

from pathlib import Path

import pytest

from vimeo_model.adapters.json.deserializer import JsonRecordDeserializer
from vimeo_model.config import Settings
from vimeo_model.core.value_objects import (
    Connection,
    ConnectionCollection,
    Interaction,
    InteractionCollection,
    Metadata,
)


@pytest.fixture
def deserializer() -> JsonRecordDeserializer:
    """Deserialiseur de reference (sans etat)."""
    return JsonRecordDeserializer()


@pytest.fixture
def empty_graph() -> Metadata:
    """Graphe present mais sans aucune connexion ni interaction."""
    return Metadata(connections=ConnectionCollection(), interactions=InteractionCollection())


@pytest.fixture
def full_graph() -> Metadata:
    """Graphe avec likes, commentaires et interactions like/follow/watchlater."""
    return Metadata(
        connections=ConnectionCollection(
            likes=Connection(uri="/likes", total=12),
            comments=Connection(uri="/comments", total=3),
            followers=Connection(uri="/followers", total=99),
            pictures=Connection(uri="/pictures", options=("GET", "POST")),
        ),
        interactions=InteractionCollection(
            like=Interaction(added=True),
            follow=Interaction(added=False),
            watchlater=Interaction(added=True),
        ),
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log.
    """
    return Settings(
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
    )
