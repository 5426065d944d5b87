"""Error taxonomy for playlist import and link handling.

Each error carries a fixed, user-facing message. Parser and network details
are logged where they happen and never travel inside these messages.
"""

from enum import Enum


class ImportErrorKind(str, Enum):
    """Failure categories shared by the extractor, the import service and the API."""

    NOT_FOUND = "not_found"
    UNPARSEABLE = "unparseable"
    EMPTY_RESULT = "empty_result"
    INVALID_INPUT = "invalid_input"


class PlaylistImportError(Exception):
    """Base class for every import failure."""

    kind: ImportErrorKind
    message: str = "Failed to fetch playlist"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class PlaylistNotFound(PlaylistImportError):
    kind = ImportErrorKind.NOT_FOUND
    message = "Playlist not found"


class PlaylistUnparseable(PlaylistImportError):
    kind = ImportErrorKind.UNPARSEABLE
    message = "Could not parse playlist data"


class PlaylistEmpty(PlaylistImportError):
    kind = ImportErrorKind.EMPTY_RESULT
    message = "Playlist is empty"


class InvalidPlaylistInput(PlaylistImportError):
    kind = ImportErrorKind.INVALID_INPUT
    message = "Invalid playlist link or ID"


ERRORS_BY_KIND: dict[ImportErrorKind, type[PlaylistImportError]] = {
    cls.kind: cls
    for cls in (PlaylistNotFound, PlaylistUnparseable, PlaylistEmpty, InvalidPlaylistInput)
}


def error_for_kind(kind: ImportErrorKind) -> PlaylistImportError:
    """Build the import error matching an extractor / service failure kind."""
    return ERRORS_BY_KIND[kind]()
