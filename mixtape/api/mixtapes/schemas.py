from typing import List, Union

from pydantic import BaseModel, Field, field_validator


class TrackRef(BaseModel):
    id: str
    name: str = ""
    artist: str = ""


class CreateMixtapeRequest(BaseModel):
    """
    Body for POST /mixtape.

    `tracks` accepts bare track ids or the track objects of an import preview,
    so a preview can be posted back as-is.
    """

    name: str
    owner: str = ""
    description: str = ""
    tracks: List[Union[str, TrackRef]] = Field(min_length=1)

    @field_validator("tracks")
    @classmethod
    def _ids_not_blank(cls, value: List[Union[str, TrackRef]]) -> List[Union[str, TrackRef]]:
        for item in value:
            track_id = item if isinstance(item, str) else item.id
            if not track_id.strip():
                raise ValueError("track ids must be non-empty")
        return value

    def track_ids(self) -> List[str]:
        return [
            (item if isinstance(item, str) else item.id).strip()
            for item in self.tracks
        ]


class ShareLinkResponse(BaseModel):
    token: str
    url: str
    track_count: int


class MixtapeResponse(BaseModel):
    name: str
    owner: str
    description: str
    track_ids: List[str]
    track_uris: List[str]
    track_count: int
