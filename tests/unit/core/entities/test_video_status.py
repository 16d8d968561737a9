"""
Tests unitaires pour les resolveurs de statut et de lecture de Video.

Tests couvrant:
- raw_status / status (TRANSCODE_STARTING -> TRANSCODING)
- is_playable, is_360
- position de reprise (secondes, millisecondes, valeur "non disponible")
- identite par resource_key
"""

import pytest

from vimeo_model.core.entities import User, Video
from vimeo_model.core.value_objects import (
    Connection,
    ConnectionCollection,
    Metadata,
    Play,
    PlayProgress,
    PlayStatus,
    Spatial,
    StatsCollection,
    VideoBadge,
    VideoBadgeType,
    VideoStatus,
)


class TestVideoStatus:
    """Tests pour raw_status et status."""

    def test_transcode_starting_is_reported_as_transcoding(self) -> None:
        """TRANSCODE_STARTING est simplifie en TRANSCODING."""
        video = Video(api_status=VideoStatus.TRANSCODE_STARTING)
        assert video.status is VideoStatus.TRANSCODING
        assert video.raw_status is VideoStatus.TRANSCODE_STARTING

    @pytest.mark.parametrize(
        "raw",
        [status for status in VideoStatus if status is not VideoStatus.TRANSCODE_STARTING],
    )
    def test_other_statuses_pass_through(self, raw: VideoStatus) -> None:
        """Tous les autres statuts sont inchanges."""
        video = Video(api_status=raw)
        assert video.status is raw
        assert video.raw_status is raw

    def test_missing_status_is_none(self) -> None:
        """Un statut absent est traite comme NONE."""
        video = Video()
        assert video.raw_status is VideoStatus.NONE
        assert video.status is VideoStatus.NONE


class TestVideoPlayback:
    """Tests pour is_playable, play_status et file_count."""

    def test_playable_status(self) -> None:
        video = Video(play=Play(status=PlayStatus.PLAYABLE))
        assert video.is_playable
        assert video.play_status is PlayStatus.PLAYABLE

    @pytest.mark.parametrize(
        "status",
        [PlayStatus.UNAVAILABLE, PlayStatus.PURCHASE_REQUIRED, PlayStatus.RESTRICTED, None],
    )
    def test_non_playable_statuses(self, status) -> None:
        assert not Video(play=Play(status=status)).is_playable

    def test_without_play_record(self) -> None:
        """Sans objet play : ni lisible ni statut."""
        video = Video()
        assert not video.is_playable
        assert video.play_status is None
        assert video.play_progress is None


class TestVideo360:
    """Tests pour is_360."""

    def test_spatial_marker_present(self) -> None:
        """La seule presence du marqueur suffit."""
        assert Video(spatial=Spatial()).is_360

    def test_spatial_marker_absent(self) -> None:
        assert not Video(width=3840, height=1920).is_360


class TestPlayProgress:
    """Tests pour la position de reprise."""

    def test_no_progress_record_is_not_available(self) -> None:
        """Sans objet progress : None (capacite API manquante)."""
        video = Video(play=Play())
        assert video.play_progress_seconds is None

    def test_progress_without_seconds_defaults_to_zero(self) -> None:
        """Objet progress sans position : 0."""
        video = Video(play=Play(progress=PlayProgress()))
        assert video.play_progress_seconds == 0
        assert video.play_progress_millis == 0

    def test_progress_seconds_returned_as_is(self) -> None:
        video = Video(play=Play(progress=PlayProgress(seconds=42.7)))
        assert video.play_progress_seconds == 42.7

    def test_millis_truncates_seconds_before_conversion(self) -> None:
        """42.7 s -> 42 000 ms (troncature a la seconde)."""
        video = Video(play=Play(progress=PlayProgress(seconds=42.7)))
        assert video.play_progress_millis == 42000

    def test_millis_propagates_not_available(self) -> None:
        """La valeur "non disponible" n'est pas multipliee."""
        video = Video()
        assert video.play_progress_seconds is None
        assert video.play_progress_millis is None

    def test_no_duration_threshold_is_applied(self) -> None:
        """
        Aucun seuil lie a la duree n'est applique.

        Une video courte (< 5 min) dont la position est proche de la fin
        garde sa position telle que recue, contrairement a ce que decrit
        la documentation de l'API.
        """
        video = Video(duration=120, play=Play(progress=PlayProgress(seconds=110)))
        assert video.play_progress_seconds == 110

        short_watch = Video(duration=3600, play=Play(progress=PlayProgress(seconds=5)))
        assert short_watch.play_progress_seconds == 5


class TestVideoMisc:
    """Tests pour les accesseurs annexes."""

    def test_play_count_hidden_by_owner(self) -> None:
        assert Video(stats=StatsCollection(plays=None)).play_count is None
        assert Video().play_count is None

    def test_play_count(self) -> None:
        assert Video(stats=StatsCollection(plays=10)).play_count == 10

    def test_badge_type_defaults_to_none(self) -> None:
        assert Video().badge_type is VideoBadgeType.NONE
        assert Video(badge=VideoBadge(badge_type=VideoBadgeType.STAFF_PICK)).badge_type is VideoBadgeType.STAFF_PICK

    def test_recommendations_uri_from_connection(self) -> None:
        video = Video(
            uri="/videos/1",
            metadata=Metadata(
                connections=ConnectionCollection(recommendations=Connection(uri="/videos/1/recs"))
            ),
        )
        assert video.recommendations_uri == "/videos/1/recs"

    def test_recommendations_uri_built_from_video_uri(self) -> None:
        assert Video(uri="/videos/1").recommendations_uri == "/videos/1/recommendations"

    def test_recommendations_uri_without_any_uri(self) -> None:
        assert Video().recommendations_uri is None

    def test_playback_failure_uri(self) -> None:
        video = Video(
            metadata=Metadata(
                connections=ConnectionCollection(
                    playback_failure_reason=Connection(uri="/videos/1/playback_failure")
                )
            )
        )
        assert video.playback_failure_uri == "/videos/1/playback_failure"
        assert Video().playback_failure_uri is None


class TestVideoIdentity:
    """Tests pour l'egalite par resource_key."""

    def test_equal_resource_keys_are_equal(self) -> None:
        """Meme cle, contenus differents : egales."""
        first = Video(resource_key="abc", name="One")
        second = Video(resource_key="abc", name="Two")
        assert first == second
        assert hash(first) == hash(second)

    def test_different_resource_keys_are_not_equal(self) -> None:
        assert Video(resource_key="abc") != Video(resource_key="xyz")

    def test_missing_key_is_never_equal(self) -> None:
        """Sans cle, deux videos identiques ne sont pas egales."""
        assert Video(uri="/videos/1") != Video(uri="/videos/1")
        assert Video(resource_key="abc") != Video()
        assert Video() != Video(resource_key="abc")

    def test_same_instance_is_equal(self) -> None:
        video = Video()
        assert video == video

    def test_not_equal_to_other_types(self) -> None:
        assert Video(resource_key="abc") != "abc"
        assert Video(uri="/users/1", resource_key="abc") != User(uri="/users/1")

    def test_usable_in_sets(self) -> None:
        """Deduplication par resource_key."""
        videos = {Video(resource_key="abc"), Video(resource_key="abc"), Video(resource_key="def")}
        assert len(videos) == 2
