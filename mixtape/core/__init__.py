"""Public façade for the mixtape.core package.

This module exposes logging helpers, the error taxonomy and the base models
that are safe to import from other packages. Callers should import these
cross-cutting concerns from this façade instead of the internal submodules.
"""

from .errors import (
    ImportErrorKind,
    InvalidPlaylistInput,
    PlaylistEmpty,
    PlaylistImportError,
    PlaylistNotFound,
    PlaylistUnparseable,
    error_for_kind,
)
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    EncodedMixtape,
    PlaylistPreview,
    PlaylistRecord,
    Track,
    TrackPreview,
)

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "ImportErrorKind",
    "PlaylistImportError",
    "PlaylistNotFound",
    "PlaylistUnparseable",
    "PlaylistEmpty",
    "InvalidPlaylistInput",
    "error_for_kind",
    "Track",
    "PlaylistRecord",
    "TrackPreview",
    "PlaylistPreview",
    "EncodedMixtape",
]
