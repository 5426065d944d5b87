from dataclasses import dataclass
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class Track:
    id: str
    name: str
    artist: str


@dataclass(frozen=True)
class PlaylistRecord:
    """
    Playlist as extracted from the provider page.

    - description : raw text, may still contain markup
    - tracks      : ordered, order is significant end-to-end
    """

    name: str
    owner: str
    description: str
    tracks: Tuple[Track, ...]


class TrackPreview(BaseModel):
    id: str
    name: str
    artist: str


class PlaylistPreview(BaseModel):
    """Import preview returned to the caller (description already sanitized)."""

    name: str
    owner: str
    description: str
    tracks: List[TrackPreview]


class EncodedMixtape(BaseModel):
    """
    Minimal record carried inside a share link.

    Wire keys are single letters (n, o, d, t) to keep links short. Only track
    ids are kept; titles and artists are rendered by the player from the id.
    Validation is strict so a decoded link is either complete or rejected.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True, frozen=True)

    name: str = Field(alias="n")
    owner: str = Field(alias="o")
    description: str = Field(alias="d")
    track_ids: List[str] = Field(alias="t", min_length=1)

    @field_validator("track_ids")
    @classmethod
    def _track_ids_not_blank(cls, value: List[str]) -> List[str]:
        if any(not track_id.strip() for track_id in value):
            raise ValueError("track ids must be non-empty")
        return value

    @property
    def track_count(self) -> int:
        return len(self.track_ids)
