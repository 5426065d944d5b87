"""Public façade for the mixtape.data package.

A mixtape has no server-side record: the share link is its storage. This
package holds the link codec and the sanitizing applied before anything is
written into a link.
"""

from .codec import build_share_link, decode_mixtape, encode_mixtape
from .sanitize import sanitize_description, strip_markup

__all__ = [
    "encode_mixtape",
    "decode_mixtape",
    "build_share_link",
    "sanitize_description",
    "strip_markup",
]
