"""
Tests unitaires pour la resolution TVOD de Video.

Verifie la table de priorite (bande-annonce, achat, location/abonnement),
la regle "expiration la plus tardive" et la detection inversee des
bandes-annonces.
"""

from datetime import datetime, timezone
from typing import Optional

import pytest

from vimeo_model.core.entities import Video
from vimeo_model.core.value_objects import (
    Connection,
    ConnectionCollection,
    Interaction,
    InteractionCollection,
    Metadata,
    Stream,
    TvodVideoType,
)

JAN_05 = datetime(2024, 1, 5, tzinfo=timezone.utc)
JAN_10 = datetime(2024, 1, 10, tzinfo=timezone.utc)


def _purchased(expiration: Optional[datetime] = None) -> Interaction:
    return Interaction(stream=Stream.PURCHASED, expiration=expiration)


def make_tvod_video(
    tvod: bool = True,
    has_trailer: bool = True,
    rent: Optional[Interaction] = None,
    subscribe: Optional[Interaction] = None,
    buy: Optional[Interaction] = None,
    with_interactions: bool = True,
) -> Video:
    """Construit une video avec les connexions TVOD et interactions demandees."""
    connections = ConnectionCollection(
        tvod=Connection(uri="/ondemand/pages/1") if tvod else None,
        trailer=Connection(uri="/videos/2") if has_trailer else None,
        season=Connection(uri="/ondemand/pages/1/seasons/1", name="Season 1"),
    )
    interactions = None
    if with_interactions:
        interactions = InteractionCollection(rent=rent, subscribe=subscribe, buy=buy)
    return Video(
        uri="/videos/1",
        resource_key="key1",
        metadata=Metadata(connections=connections, interactions=interactions),
    )


class TestTvodPriorityTable:
    """Tests pour tvod_video_type."""

    def test_no_tvod_connection_is_none(self) -> None:
        """Pas de connexion TVOD : NONE, quelles que soient les interactions."""
        video = make_tvod_video(tvod=False, buy=_purchased())
        assert video.tvod_video_type is TvodVideoType.NONE

    def test_without_metadata_is_none(self) -> None:
        assert Video().tvod_video_type is TvodVideoType.NONE

    def test_tvod_without_trailer_edge_is_trailer(self) -> None:
        """TVOD sans connexion trailer : c'est la bande-annonce elle-meme."""
        video = make_tvod_video(has_trailer=False, buy=_purchased())
        assert video.tvod_video_type is TvodVideoType.TRAILER

    def test_buy_purchased_is_purchase(self) -> None:
        """L'achat definitif passe avant location et abonnement."""
        video = make_tvod_video(
            buy=_purchased(),
            rent=_purchased(JAN_10),
            subscribe=_purchased(JAN_05),
        )
        assert video.tvod_video_type is TvodVideoType.PURCHASE

    def test_later_rental_wins_over_subscription(self) -> None:
        """Location 2024-01-10, abonnement 2024-01-05 : RENTAL."""
        video = make_tvod_video(rent=_purchased(JAN_10), subscribe=_purchased(JAN_05))
        assert video.tvod_video_type is TvodVideoType.RENTAL

    def test_later_subscription_wins_over_rental(self) -> None:
        video = make_tvod_video(rent=_purchased(JAN_05), subscribe=_purchased(JAN_10))
        assert video.tvod_video_type is TvodVideoType.SUBSCRIPTION

    def test_equal_expirations_favor_subscription(self) -> None:
        video = make_tvod_video(rent=_purchased(JAN_10), subscribe=_purchased(JAN_10))
        assert video.tvod_video_type is TvodVideoType.SUBSCRIPTION

    def test_only_subscription_purchased(self) -> None:
        video = make_tvod_video(subscribe=_purchased(JAN_05))
        assert video.tvod_video_type is TvodVideoType.SUBSCRIPTION

    def test_only_rental_purchased(self) -> None:
        video = make_tvod_video(rent=_purchased(JAN_05))
        assert video.tvod_video_type is TvodVideoType.RENTAL

    def test_both_purchased_without_expirations_favor_subscription(self) -> None:
        """Sans dates comparables, l'abonnement passe avant la location."""
        video = make_tvod_video(rent=_purchased(), subscribe=_purchased())
        assert video.tvod_video_type is TvodVideoType.SUBSCRIPTION

    def test_tvod_without_purchase_is_unknown(self) -> None:
        """TVOD sans aucun achat reconnu : UNKNOWN."""
        video = make_tvod_video(
            rent=Interaction(stream=Stream.AVAILABLE, expiration=JAN_10),
            buy=Interaction(stream=Stream.AVAILABLE),
        )
        assert video.tvod_video_type is TvodVideoType.UNKNOWN

    def test_tvod_without_interactions_is_unknown(self) -> None:
        video = make_tvod_video(with_interactions=False)
        assert video.tvod_video_type is TvodVideoType.UNKNOWN

    def test_added_flag_does_not_mean_purchased(self) -> None:
        """Seul stream == purchased compte comme achat."""
        video = make_tvod_video(buy=Interaction(added=True))
        assert video.tvod_video_type is TvodVideoType.UNKNOWN


class TestTvodPredicates:
    """Tests pour is_tvod, is_trailer et les predicats d'achat."""

    def test_trailer_detection_is_inverted(self) -> None:
        """La presence de la connexion trailer signifie "a une bande-annonce"."""
        assert not make_tvod_video(has_trailer=True).is_trailer
        assert make_tvod_video(has_trailer=False).is_trailer

    def test_non_tvod_is_never_a_trailer(self) -> None:
        assert not make_tvod_video(tvod=False, has_trailer=False).is_trailer

    def test_trailer_is_never_a_purchase(self) -> None:
        video = make_tvod_video(has_trailer=False, rent=_purchased(JAN_10), buy=_purchased())
        assert not video.is_tvod_purchase
        assert not video.is_tvod_rental
        assert video.tvod_rental_expiration is None

    def test_purchase_predicates(self) -> None:
        video = make_tvod_video(rent=_purchased(JAN_10), subscribe=_purchased(JAN_05))
        assert video.is_tvod
        assert video.is_tvod_rental
        assert video.is_tvod_subscription
        assert not video.is_tvod_purchase

    def test_season_name_and_trailer_uri(self) -> None:
        video = make_tvod_video()
        assert video.tvod_season_name == "Season 1"
        assert video.trailer_uri == "/videos/2"


class TestTvodExpiration:
    """Tests pour tvod_expiration et les accesseurs d'expiration."""

    def test_later_rental_expiration(self) -> None:
        video = make_tvod_video(rent=_purchased(JAN_10), subscribe=_purchased(JAN_05))
        assert video.tvod_expiration == JAN_10

    def test_later_subscription_expiration(self) -> None:
        video = make_tvod_video(rent=_purchased(JAN_05), subscribe=_purchased(JAN_10))
        assert video.tvod_expiration == JAN_10

    def test_equal_expirations_return_subscription_date(self) -> None:
        rental_date = datetime(2024, 1, 10, tzinfo=timezone.utc)
        subscription_date = datetime(2024, 1, 10, tzinfo=timezone.utc)
        video = make_tvod_video(rent=_purchased(rental_date), subscribe=_purchased(subscription_date))
        assert video.tvod_expiration is subscription_date

    @pytest.mark.parametrize(
        "rent, subscribe, expected",
        [
            (_purchased(JAN_10), None, JAN_10),
            (None, _purchased(JAN_05), JAN_05),
            (None, None, None),
        ],
    )
    def test_missing_date_lets_the_other_win(self, rent, subscribe, expected) -> None:
        video = make_tvod_video(rent=rent, subscribe=subscribe)
        assert video.tvod_expiration == expected

    def test_not_tvod_has_no_expiration(self) -> None:
        video = make_tvod_video(tvod=False, rent=_purchased(JAN_10))
        assert video.tvod_expiration is None

    def test_rental_expiration_requires_rental(self) -> None:
        """Location non achetee : pas d'expiration, pas d'erreur."""
        video = make_tvod_video(rent=Interaction(stream=Stream.AVAILABLE, expiration=JAN_10))
        assert video.tvod_rental_expiration is None

    def test_subscription_expiration_requires_subscription(self) -> None:
        video = make_tvod_video(subscribe=None)
        assert video.tvod_subscription_expiration is None

    def test_expiration_accessors_on_empty_video(self) -> None:
        """Aucun maillon du graphe : tous les accesseurs retournent None."""
        video = Video()
        assert video.tvod_rental_expiration is None
        assert video.tvod_subscription_expiration is None
        assert video.tvod_expiration is None

    def test_naive_and_aware_dates_are_comparable(self) -> None:
        """Une date sans fuseau est comparee comme une date UTC."""
        naive_rental = datetime(2024, 1, 10)
        video = make_tvod_video(rent=_purchased(naive_rental), subscribe=_purchased(JAN_05))

        assert video.tvod_video_type is TvodVideoType.RENTAL
        assert video.tvod_expiration is naive_rental
