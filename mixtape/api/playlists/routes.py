from fastapi import APIRouter, Depends

from mixtape.core import PlaylistImportError, PlaylistPreview, log_error
from mixtape.pipeline import import_playlist
from mixtape.spotify import EmbedPageFetcher

from ..errors import STATUS_BY_KIND, ErrorResponse, error_response

router = APIRouter()


def get_fetcher() -> EmbedPageFetcher:
    return EmbedPageFetcher()


@router.get(
    "/playlist/{playlist_ref:path}",
    response_model=PlaylistPreview,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def get_playlist(
    playlist_ref: str,
    fetcher: EmbedPageFetcher = Depends(get_fetcher),
):
    """
    Import preview for a public playlist.

    `playlist_ref` is a bare id, a playlist URL or a spotify:playlist: URI.
    Nothing is stored: the caller turns the preview into a link with POST /mixtape.
    """
    try:
        return import_playlist(playlist_ref, fetcher=fetcher)
    except PlaylistImportError as e:
        return error_response(STATUS_BY_KIND[e.kind], e.message)
    except Exception:
        log_error("Unexpected failure importing playlist %r", playlist_ref, exc_info=True)
        return error_response(500, "Failed to fetch playlist")
