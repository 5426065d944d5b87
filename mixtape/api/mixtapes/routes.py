from fastapi import APIRouter

from mixtape.data import decode_mixtape
from mixtape.pipeline import build_mixtape, create_share_link
from mixtape.spotify import track_uri

from ..errors import ErrorResponse, error_response
from .schemas import CreateMixtapeRequest, MixtapeResponse, ShareLinkResponse

router = APIRouter()

INVALID_LINK_MESSAGE = "Invalid mixtape link"


@router.post("/mixtape", response_model=ShareLinkResponse)
def create_mixtape(body: CreateMixtapeRequest) -> ShareLinkResponse:
    """
    Encode a playlist into a shareable link.

    The description is stripped of markup and bounded before encoding.
    """
    mixtape = build_mixtape(
        body.name,
        body.owner,
        body.description,
        body.track_ids(),
    )
    link = create_share_link(mixtape)
    return ShareLinkResponse(token=link.token, url=link.url, track_count=mixtape.track_count)


@router.get(
    "/mixtape/{token}",
    response_model=MixtapeResponse,
    responses={400: {"model": ErrorResponse}},
)
def open_mixtape(token: str):
    """
    Decode a share token.

    Any malformed token gets the same answer; there is no way to recover one.
    """
    mixtape = decode_mixtape(token)
    if mixtape is None:
        return error_response(400, INVALID_LINK_MESSAGE)
    return MixtapeResponse(
        name=mixtape.name,
        owner=mixtape.owner,
        description=mixtape.description,
        track_ids=list(mixtape.track_ids),
        track_uris=[track_uri(t) for t in mixtape.track_ids],
        track_count=mixtape.track_count,
    )
