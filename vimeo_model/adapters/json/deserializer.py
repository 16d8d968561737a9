"""
Deserialiseur JSON de reference pour les enregistrements de l'API.

Implemente IRecordDeserializer a partir d'objets JSON deja analyses (dict).
Les noms de champs de l'API sont repris tels quels ; quelques champs ont un
nom alternatif (ex: `ondemand` pour `tvod`).

Politique d'erreur :
- Un payload qui n'est pas un objet JSON leve DeserializationError
- Une valeur de feuille mal formee (date, entier, enum inconnu) devient None,
  avec un log DEBUG

Usage:
    deserializer = JsonRecordDeserializer()
    video = deserializer.decode_video(response.json())
    print(video.tvod_video_type)
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from loguru import logger

from vimeo_model.core.entities import User, Video
from vimeo_model.core.errors import ErrorRecord, InvalidParameter, ResponseInfo
from vimeo_model.core.ports.deserializer import IRecordDeserializer
from vimeo_model.core.value_objects import (
    Connection,
    ConnectionCollection,
    Drm,
    DrmContent,
    Email,
    ErrorCode,
    Interaction,
    InteractionCollection,
    Metadata,
    NotificationConnection,
    Picture,
    PictureCollection,
    PinCodeInfo,
    Play,
    PlayProgress,
    PlayStatus,
    Preferences,
    Privacy,
    ProgressiveVideoFile,
    Space,
    Spatial,
    StatsCollection,
    Stream,
    UploadQuota,
    UserBadge,
    UserBadgeType,
    VideoBadge,
    VideoBadgeType,
    VideoFile,
    VideoPreferences,
    VideoStatus,
    Website,
)

# Nom d'attribut -> noms acceptes dans le JSON, par ordre de preference
CONNECTION_FIELDS: dict[str, tuple[str, ...]] = {
    "followers": ("followers",),
    "following": ("following",),
    "likes": ("likes",),
    "videos": ("videos",),
    "comments": ("comments",),
    "channels": ("channels",),
    "moderated_channels": ("moderated_channels",),
    "appearances": ("appearances",),
    "watchlater": ("watchlater",),
    "watched_videos": ("watched_videos",),
    "related": ("related",),
    "recommendations": ("recommendations",),
    "season": ("season",),
    "trailer": ("trailer",),
    "playback_failure_reason": ("playback_failure_reason", "playback"),
    "tvod": ("tvod", "ondemand"),
    "pictures": ("pictures",),
    "feed": ("feed",),
}

INTERACTION_FIELDS: tuple[str, ...] = ("follow", "like", "watchlater", "rent", "buy", "subscribe")


class DeserializationError(ValueError):
    """Levee quand un payload n'a pas la forme d'un objet JSON."""


# ============================================================================
# Lecture des feuilles
# ============================================================================


def _mapping(value: Any) -> Optional[Mapping[str, Any]]:
    return value if isinstance(value, Mapping) else None


def _first(data: Mapping[str, Any], *names: str) -> Any:
    """Premiere valeur non nulle parmi plusieurs noms de champ."""
    for name in names:
        value = data.get(name)
        if value is not None:
            return value
    return None


def _str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _int(value: Any, field: str, default: Optional[int] = None) -> Optional[int]:
    if value is None:
        return default
    if isinstance(value, bool):
        logger.debug("Entier attendu, booleen ignore", field=field, value=value)
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("Entier mal forme ignore", field=field, value=value)
        return default


def _float(value: Any, field: str) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("Nombre mal forme ignore", field=field, value=value)
        return None


def _datetime(value: Any, field: str) -> Optional[datetime]:
    """
    Analyse une date ISO 8601 (ex: 2024-01-10T12:00:00+00:00).

    Une date sans decalage horaire est consideree comme UTC.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Date mal formee ignoree", field=field, value=value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _list(value: Any, field: str) -> list[Any]:
    """Liste JSON attendue ; toute autre valeur donne une liste vide."""
    if value is None:
        return []
    if not isinstance(value, list):
        logger.debug("Liste attendue, valeur ignoree", field=field, value=value)
        return []
    return value


def _enum(enum_cls: Any, value: Any, field: str, default: Any = None) -> Any:
    member = enum_cls.from_wire(value, default)
    if value is not None and member is default:
        logger.debug("Valeur d'enum inconnue", field=field, value=value)
    return member


def _string_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


# ============================================================================
# Sous-enregistrements
# ============================================================================


def _connection(data: Optional[Mapping[str, Any]], name: str) -> Optional[Connection]:
    if data is None:
        return None
    return Connection(
        uri=_str(data.get("uri")),
        options=_string_tuple(data.get("options")),
        total=_int(data.get("total"), f"connections.{name}.total", default=0),
        name=_str(data.get("name")),
    )


def _notification_connection(data: Optional[Mapping[str, Any]]) -> Optional[NotificationConnection]:
    if data is None:
        return None
    return NotificationConnection(
        uri=_str(data.get("uri")),
        options=_string_tuple(data.get("options")),
        total=_int(data.get("total"), "connections.notifications.total", default=0),
        name=_str(data.get("name")),
        unread_total=_int(data.get("unread_total"), "connections.notifications.unread_total", default=0),
        new_total=_int(data.get("new_total"), "connections.notifications.new_total", default=0),
    )


def _interaction(data: Optional[Mapping[str, Any]], name: str) -> Optional[Interaction]:
    if data is None:
        return None
    return Interaction(
        added=data.get("added") is True,
        added_time=_datetime(data.get("added_time"), f"interactions.{name}.added_time"),
        expiration=_datetime(
            _first(data, "expires_time", "expiration"), f"interactions.{name}.expires_time"
        ),
        stream=_enum(Stream, data.get("stream"), f"interactions.{name}.stream"),
        uri=_str(data.get("uri")),
    )


def _metadata(data: Optional[Mapping[str, Any]]) -> Optional[Metadata]:
    if data is None:
        return None

    connections = None
    raw_connections = _mapping(data.get("connections"))
    if raw_connections is not None:
        edges = {
            attribute: _connection(_mapping(_first(raw_connections, *names)), attribute)
            for attribute, names in CONNECTION_FIELDS.items()
        }
        connections = ConnectionCollection(
            notifications=_notification_connection(_mapping(raw_connections.get("notifications"))),
            **edges,
        )

    interactions = None
    raw_interactions = _mapping(data.get("interactions"))
    if raw_interactions is not None:
        interactions = InteractionCollection(**{
            name: _interaction(_mapping(raw_interactions.get(name)), name)
            for name in INTERACTION_FIELDS
        })

    return Metadata(connections=connections, interactions=interactions)


def _video_file(data: Optional[Mapping[str, Any]], field: str) -> Optional[VideoFile]:
    if data is None:
        return None
    return VideoFile(
        link=_str(data.get("link")),
        link_expiration_time=_datetime(data.get("link_expiration_time"), f"{field}.link_expiration_time"),
        log=_str(data.get("log")),
    )


def _progressive_files(value: Any) -> Optional[tuple[ProgressiveVideoFile, ...]]:
    if not isinstance(value, list):
        return None
    files = []
    for item in value:
        data = _mapping(item)
        if data is None:
            continue
        files.append(
            ProgressiveVideoFile(
                link=_str(data.get("link")),
                width=_int(data.get("width"), "play.progressive.width"),
                height=_int(data.get("height"), "play.progressive.height"),
                fps=_float(data.get("fps"), "play.progressive.fps"),
                size=_int(data.get("size"), "play.progressive.size"),
                md5=_str(data.get("md5")),
                link_expiration_time=_datetime(
                    data.get("link_expiration_time"), "play.progressive.link_expiration_time"
                ),
            )
        )
    return tuple(files)


def _drm_content(data: Optional[Mapping[str, Any]]) -> Optional[DrmContent]:
    if data is None:
        return None
    return DrmContent(
        link=_str(data.get("link")),
        license_link=_str(data.get("license_link")),
        certificate_link=_str(data.get("certificate_link")),
    )


def _play(data: Optional[Mapping[str, Any]]) -> Optional[Play]:
    if data is None:
        return None

    progress = None
    raw_progress = _mapping(data.get("progress"))
    if raw_progress is not None:
        progress = PlayProgress(seconds=_float(raw_progress.get("seconds"), "play.progress.seconds"))

    drm = None
    raw_drm = _mapping(data.get("drm"))
    if raw_drm is not None:
        drm = Drm(
            widevine=_drm_content(_mapping(raw_drm.get("widevine"))),
            playready=_drm_content(_mapping(raw_drm.get("playready"))),
            fairplay=_drm_content(_mapping(raw_drm.get("fairplay"))),
        )

    return Play(
        status=_enum(PlayStatus, data.get("status"), "play.status"),
        progress=progress,
        hls=_video_file(_mapping(data.get("hls")), "play.hls"),
        dash=_video_file(_mapping(data.get("dash")), "play.dash"),
        progressive=_progressive_files(data.get("progressive")),
        drm=drm,
    )


def _pictures(data: Optional[Mapping[str, Any]]) -> Optional[PictureCollection]:
    if data is None:
        return None
    sizes = []
    for item in _list(data.get("sizes"), "pictures.sizes"):
        size = _mapping(item)
        if size is None:
            continue
        sizes.append(
            Picture(
                link=_str(size.get("link")),
                width=_int(size.get("width"), "pictures.sizes.width", default=0),
                height=_int(size.get("height"), "pictures.sizes.height", default=0),
            )
        )
    return PictureCollection(
        uri=_str(data.get("uri")),
        active=data.get("active") is True,
        sizes=tuple(sizes),
    )


def _spatial(value: Any) -> Optional[Spatial]:
    data = _mapping(value)
    if data is None:
        return None
    return Spatial(
        projection=_str(data.get("projection")),
        stereo_format=_str(data.get("stereo_format")),
        field_of_view=_int(data.get("field_of_view"), "spatial.field_of_view"),
    )


def _upload_quota(data: Optional[Mapping[str, Any]]) -> Optional[UploadQuota]:
    if data is None:
        return None
    space = None
    raw_space = _mapping(data.get("space"))
    if raw_space is not None:
        space = Space(
            free=_int(raw_space.get("free"), "upload_quota.space.free", default=0),
            max=_int(raw_space.get("max"), "upload_quota.space.max", default=0),
            used=_int(raw_space.get("used"), "upload_quota.space.used", default=0),
        )
    return UploadQuota(space=space)


def _preferences(data: Optional[Mapping[str, Any]]) -> Optional[Preferences]:
    if data is None:
        return None
    videos = _mapping(data.get("videos"))
    if videos is None:
        return Preferences()
    privacy = _mapping(videos.get("privacy"))
    return Preferences(
        videos=VideoPreferences(
            privacy=Privacy(view=_str(privacy.get("view"))) if privacy is not None else None
        )
    )


def _invalid_parameters(value: Any) -> Optional[list[InvalidParameter]]:
    if not isinstance(value, list):
        return None
    parameters = []
    for item in value:
        data = _mapping(item)
        if data is None:
            continue
        parameters.append(
            InvalidParameter(
                field=_str(data.get("field")),
                error_code=_enum(
                    ErrorCode, data.get("error_code"), "invalid_parameters.error_code", ErrorCode.DEFAULT
                ),
                developer_message=_str(data.get("developer_message")),
            )
        )
    # Une liste vide est equivalente a une liste absente
    return parameters or None


def _require_mapping(payload: Any, kind: str) -> Mapping[str, Any]:
    data = _mapping(payload)
    if data is None:
        raise DeserializationError(f"Objet JSON attendu pour {kind}, recu {type(payload).__name__}")
    return data


# ============================================================================
# Adaptateur
# ============================================================================


class JsonRecordDeserializer(IRecordDeserializer):
    """
    Deserialiseur de reference base sur des dict Python.

    N'effectue aucune entree/sortie : le corps de reponse doit deja etre
    analyse (ex: httpx.Response.json()).
    """

    def decode_video(self, payload: Mapping[str, Any]) -> Video:
        data = _require_mapping(payload, "video")

        user = None
        raw_user = _mapping(data.get("user"))
        if raw_user is not None:
            user = self.decode_user(raw_user)

        badge = None
        raw_badge = _mapping(data.get("badge"))
        if raw_badge is not None:
            badge = VideoBadge(
                badge_type=_enum(VideoBadgeType, raw_badge.get("type"), "badge.type", VideoBadgeType.NONE),
                festival=_str(raw_badge.get("festival")),
                link=_str(raw_badge.get("link")),
                text=_str(raw_badge.get("text")),
            )

        stats = None
        raw_stats = _mapping(data.get("stats"))
        if raw_stats is not None:
            stats = StatsCollection(plays=_int(raw_stats.get("plays"), "stats.plays"))

        video = Video(
            uri=_str(data.get("uri")),
            resource_key=_str(data.get("resource_key")),
            name=_str(data.get("name")),
            description=_str(data.get("description")),
            link=_str(data.get("link")),
            duration=_int(data.get("duration"), "duration", default=0),
            width=_int(data.get("width"), "width", default=0),
            height=_int(data.get("height"), "height", default=0),
            language=_str(data.get("language")),
            created_time=_datetime(data.get("created_time"), "created_time"),
            modified_time=_datetime(data.get("modified_time"), "modified_time"),
            release_time=_datetime(data.get("release_time"), "release_time"),
            content_rating=list(_string_tuple(data.get("content_rating"))),
            license=_str(data.get("license")),
            pictures=_pictures(_mapping(data.get("pictures"))),
            stats=stats,
            metadata=_metadata(_mapping(data.get("metadata"))),
            user=user,
            api_status=_enum(VideoStatus, data.get("status"), "status"),
            password=_str(data.get("password")),
            review_link=_str(data.get("review_link")),
            play=_play(_mapping(data.get("play"))),
            badge=badge,
            spatial=_spatial(data.get("spatial")),
        )
        logger.debug("Video decodee", uri=video.uri, status=str(video.raw_status))
        return video

    def decode_user(self, payload: Mapping[str, Any]) -> User:
        data = _require_mapping(payload, "user")

        badge = None
        raw_badge = _mapping(data.get("badge"))
        if raw_badge is not None:
            badge = UserBadge(
                badge_type=_enum(UserBadgeType, raw_badge.get("type"), "badge.type", UserBadgeType.NONE),
                alt_text=_str(raw_badge.get("alt_text")),
                text=_str(raw_badge.get("text")),
                url=_str(raw_badge.get("url")),
            )

        emails = [
            Email(email=item["email"])
            for item in _list(data.get("emails"), "emails")
            if isinstance(item, Mapping) and isinstance(item.get("email"), str)
        ]
        websites = [
            Website(
                link=item["link"],
                name=_str(item.get("name")),
                description=_str(item.get("description")),
            )
            for item in _list(data.get("websites"), "websites")
            if isinstance(item, Mapping) and isinstance(item.get("link"), str)
        ]

        return User(
            uri=_str(data.get("uri")),
            name=_str(data.get("name")),
            link=_str(data.get("link")),
            location=_str(data.get("location")),
            bio=_str(data.get("bio")),
            created_time=_datetime(data.get("created_time"), "created_time"),
            account=_str(data.get("account")),
            pictures=_pictures(_mapping(data.get("pictures"))),
            emails=emails,
            websites=websites,
            metadata=_metadata(_mapping(data.get("metadata"))),
            upload_quota=_upload_quota(_mapping(data.get("upload_quota"))),
            preferences=_preferences(_mapping(data.get("preferences"))),
            badge=badge,
        )

    def decode_error(
        self,
        payload: Optional[Mapping[str, Any]],
        response: Optional[ResponseInfo] = None,
    ) -> ErrorRecord:
        if payload is None:
            return ErrorRecord(response=response)
        data = _require_mapping(payload, "error")
        return ErrorRecord(
            error_message=_str(data.get("error")),
            link=_str(data.get("link")),
            developer_message=_str(data.get("developer_message")),
            error_code=_enum(ErrorCode, data.get("error_code"), "error_code"),
            invalid_parameters=_invalid_parameters(data.get("invalid_parameters")),
            response=response,
        )

    def decode_pin_code_info(self, payload: Mapping[str, Any]) -> PinCodeInfo:
        data = _require_mapping(payload, "pin code")
        return PinCodeInfo(
            device_code=_str(data.get("device_code")),
            user_code=_str(data.get("user_code")),
            authorize_link=_str(data.get("authorize_link")),
            activate_link=_str(data.get("activate_link")),
            expires_in=_int(data.get("expires_in"), "expires_in", default=0),
            interval=_int(data.get("interval"), "interval", default=0),
        )
