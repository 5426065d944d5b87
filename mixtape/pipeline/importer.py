from typing import Optional

from mixtape.core import (
    InvalidPlaylistInput,
    PlaylistPreview,
    PlaylistRecord,
    TrackPreview,
    error_for_kind,
    log_step,
    log_success,
    log_warning,
)
from mixtape.data import sanitize_description
from mixtape.spotify import EmbedPageFetcher, extract_playlist, extract_playlist_id


def record_to_preview(record: PlaylistRecord) -> PlaylistPreview:
    """Normalize an extracted record into the import-preview shape."""
    return PlaylistPreview(
        name=record.name,
        owner=record.owner,
        description=sanitize_description(record.description),
        tracks=[
            TrackPreview(id=t.id, name=t.name, artist=t.artist)
            for t in record.tracks
        ],
    )


def import_playlist(
    raw_input: str,
    *,
    fetcher: Optional[EmbedPageFetcher] = None,
) -> PlaylistPreview:
    """
    Import a public playlist from a URL, URI or bare id.

    Steps:
      1) normalize the input into a playlist id
      2) fetch the public embed page (single shot, one retry on network blips)
      3) extract the embedded playlist entity
      4) build the preview (sanitized description, ordered tracks)

    Raises a PlaylistImportError subclass on failure.
    """
    playlist_id = extract_playlist_id(raw_input)
    if playlist_id is None:
        raise InvalidPlaylistInput()

    fetcher = fetcher or EmbedPageFetcher()

    log_step("Fetching embed page for playlist %s...", playlist_id)
    html = fetcher.fetch_playlist_html(playlist_id)

    result = extract_playlist(html)
    if not result.ok:
        log_warning("Playlist %s: extraction failed (%s).", playlist_id, result.error.value)
        raise error_for_kind(result.error)

    preview = record_to_preview(result.record)
    log_success("Imported %r (%d tracks).", preview.name, len(preview.tracks))
    return preview
