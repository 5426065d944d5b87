from dataclasses import dataclass
from typing import Iterable, Union

from mixtape.config import APP_URL, DESCRIPTION_MAX_LENGTH
from mixtape.core import EncodedMixtape, PlaylistPreview, PlaylistRecord, log_info
from mixtape.data import build_share_link, encode_mixtape, sanitize_description


@dataclass(frozen=True)
class ShareLink:
    token: str
    url: str


def build_mixtape(
    name: str,
    owner: str,
    description: str,
    track_ids: Iterable[str],
    *,
    description_limit: int = DESCRIPTION_MAX_LENGTH,
) -> EncodedMixtape:
    """
    Build the minimal link record.

    The description is sanitized and bounded here: it is never checked again
    once it is inside a link.
    """
    return EncodedMixtape(
        name=name,
        owner=owner,
        description=sanitize_description(description, limit=description_limit),
        track_ids=list(track_ids),
    )


def mixtape_from_playlist(
    playlist: Union[PlaylistPreview, PlaylistRecord],
    *,
    description_limit: int = DESCRIPTION_MAX_LENGTH,
) -> EncodedMixtape:
    return build_mixtape(
        playlist.name,
        playlist.owner,
        playlist.description,
        [t.id for t in playlist.tracks],
        description_limit=description_limit,
    )


def create_share_link(mixtape: EncodedMixtape, base_url: str = APP_URL) -> ShareLink:
    token = encode_mixtape(mixtape)
    log_info("Mixtape %r: %d tracks, token of %d chars.", mixtape.name, mixtape.track_count, len(token))
    return ShareLink(token=token, url=build_share_link(token, base_url))
