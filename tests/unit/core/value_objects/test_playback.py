"""
Tests unitaires pour Play.file_count et les objets valeur de lecture.
"""

import pytest

from vimeo_model.core.value_objects import (
    Drm,
    DrmContent,
    Interaction,
    Play,
    ProgressiveVideoFile,
    Stream,
    UploadQuota,
    Space,
    VideoFile,
)


class TestPlayFileCount:
    """Tests pour Play.file_count."""

    def test_empty_play_has_no_files(self) -> None:
        """Aucun fichier livrable."""
        assert Play().file_count == 0

    def test_counts_every_delivery(self) -> None:
        """HLS + DASH + 2 progressifs + Widevine = 5."""
        play = Play(
            hls=VideoFile(link="hls"),
            dash=VideoFile(link="dash"),
            progressive=(ProgressiveVideoFile(link="360"), ProgressiveVideoFile(link="720")),
            drm=Drm(widevine=DrmContent(license_link="wv")),
        )
        assert play.file_count == 5

    def test_drm_without_widevine_is_not_counted(self) -> None:
        """Seule la licence Widevine compte comme fichier."""
        play = Play(drm=Drm(playready=DrmContent(license_link="pr")))
        assert play.file_count == 0

    def test_empty_progressive_list_counts_zero(self) -> None:
        """Une liste progressive vide ne compte pas."""
        assert Play(hls=VideoFile(), progressive=()).file_count == 1

    def test_play_is_immutable(self) -> None:
        """Les objets valeur sont figes."""
        play = Play()
        with pytest.raises(AttributeError):
            play.hls = VideoFile()  # type: ignore[misc]


class TestInteractionPurchase:
    """Tests pour Interaction.is_purchased."""

    def test_purchased_stream(self) -> None:
        assert Interaction(stream=Stream.PURCHASED).is_purchased

    @pytest.mark.parametrize("stream", [None, Stream.AVAILABLE, Stream.RESTRICTED, Stream.UNAVAILABLE])
    def test_other_streams_are_not_purchases(self, stream) -> None:
        assert not Interaction(stream=stream, added=True).is_purchased


class TestUploadQuota:
    """Tests pour UploadQuota.free_upload_space."""

    def test_free_space_from_space_object(self) -> None:
        assert UploadQuota(space=Space(free=1024, max=2048, used=1024)).free_upload_space == 1024

    def test_free_space_without_space_object(self) -> None:
        assert UploadQuota().free_upload_space is None
