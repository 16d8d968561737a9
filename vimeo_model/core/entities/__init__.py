"""
Business entities representing API resources.

Entities are mutable records populated by the deserializer. Their identity is
carried by a single key and they resolve derived state from optional fields.

Exports:
- Video: A video with status, playback and TVOD resolution
- User: A user with account tier and engagement counts
- EngagementMixin: Null-safe accessors over the connections/interactions graph
"""

from vimeo_model.core.entities.engagement import EngagementMixin
from vimeo_model.core.entities.user import User
from vimeo_model.core.entities.video import Video

__all__ = [
    "EngagementMixin",
    "User",
    "Video",
]
