"""Request builders and endpoint groups, one module per API area."""

from .artist import ArtistEndpoints
from .base import EndpointGroup, RequestExecutor
from .mood import MoodEndpoints
from .playlist import PlaylistEndpoints
from .release import ReleaseEndpoints
from .user import UserEndpoints

__all__ = [
    "ArtistEndpoints",
    "EndpointGroup",
    "MoodEndpoints",
    "PlaylistEndpoints",
    "ReleaseEndpoints",
    "RequestExecutor",
    "UserEndpoints",
]
