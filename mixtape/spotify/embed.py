"""Entity extraction from a playlist's public embed page.

The embed page is server-rendered and ships its state as inline script JSON.
Most inline scripts are not JSON, and some JSON blocks mention ``pageProps``
without carrying a playlist, so every candidate is parsed and validated on
its own and the scan simply moves on when one does not fit.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mixtape.core import ImportErrorKind, PlaylistRecord, Track

from .ids import id_from_uri

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(r"<script[^>]*>(.*?)</script>", re.IGNORECASE | re.DOTALL)
PAGE_PROPS_SENTINEL = '"pageProps"'
ENTITY_PATH = ("props", "pageProps", "state", "data", "entity")


class EmbedTrackEntry(BaseModel):
    uri: str
    title: Optional[str] = None
    subtitle: Optional[str] = None


class EmbedEntity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    # Entries are validated one by one in _track_from_entry
    track_list: Optional[List[Any]] = Field(default=None, alias="trackList")


@dataclass(frozen=True)
class ExtractionResult:
    """Tagged outcome: exactly one of `record` / `error` is set."""

    record: Optional[PlaylistRecord] = None
    error: Optional[ImportErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, record: PlaylistRecord) -> "ExtractionResult":
        return cls(record=record)

    @classmethod
    def failure(cls, kind: ImportErrorKind) -> "ExtractionResult":
        return cls(error=kind)


def iter_script_blocks(html: str) -> Iterator[str]:
    """Yield the text content of every inline <script> block, in document order."""
    for match in _SCRIPT_RE.finditer(html or ""):
        yield match.group(1).strip()


def parse_candidate(text: str) -> Optional[EmbedEntity]:
    """
    Validate one script block against the expected page-properties shape.

    Returns the entity, or None when the block is not JSON or does not
    resolve to a playlist entity along ENTITY_PATH.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None

    node: Any = data
    for key in ENTITY_PATH:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if not isinstance(node, dict):
        return None

    try:
        return EmbedEntity.model_validate(node)
    except ValidationError:
        return None


def _track_from_entry(entry: Any) -> Optional[Track]:
    if not isinstance(entry, dict):
        return None
    try:
        item = EmbedTrackEntry.model_validate(entry)
    except ValidationError:
        return None
    track_id = id_from_uri(item.uri)
    if not track_id:
        return None
    return Track(id=track_id, name=item.title or "", artist=item.subtitle or "")


def entity_to_record(entity: EmbedEntity) -> PlaylistRecord:
    tracks = []
    for position, entry in enumerate(entity.track_list or []):
        track = _track_from_entry(entry)
        if track is None:
            logger.debug("Skipping unusable track entry at position %d", position)
            continue
        tracks.append(track)
    return PlaylistRecord(
        name=entity.name,
        owner=entity.subtitle or "",
        description=entity.description or "",
        tracks=tuple(tracks),
    )


def extract_playlist(html: str) -> ExtractionResult:
    """
    Extract the playlist record embedded in an embed page.

    The first script block that validates as a playlist entity wins.
    Failures: UNPARSEABLE when no block fits, EMPTY_RESULT when the matched
    playlist has no usable track.
    """
    for index, block in enumerate(iter_script_blocks(html)):
        if PAGE_PROPS_SENTINEL not in block:
            continue
        entity = parse_candidate(block)
        if entity is None:
            logger.debug("Script block %d mentions pageProps but is not a playlist entity", index)
            continue

        record = entity_to_record(entity)
        if not record.tracks:
            return ExtractionResult.failure(ImportErrorKind.EMPTY_RESULT)
        return ExtractionResult.success(record)

    return ExtractionResult.failure(ImportErrorKind.UNPARSEABLE)
