"""Public façade for the mixtape.pipeline package.

Creation-time pipeline: import a playlist (fetch + extract + preview), then
turn it into a share link. Other packages should import from this façade.
"""

from .importer import import_playlist, record_to_preview
from .sharing import (
    ShareLink,
    build_mixtape,
    create_share_link,
    mixtape_from_playlist,
)

__all__ = [
    "import_playlist",
    "record_to_preview",
    "ShareLink",
    "build_mixtape",
    "mixtape_from_playlist",
    "create_share_link",
]
