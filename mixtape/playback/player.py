from typing import Protocol, runtime_checkable


@runtime_checkable
class PlayerHandle(Protocol):
    """
    Handle on the external single-track player widget.

    Bound to exactly one track at a time. Status reports come back through
    StatusUpdate events, not through this handle.
    """

    def load_uri(self, uri: str) -> None: ...

    def play(self) -> None: ...

    def toggle_play(self) -> None: ...

    def destroy(self) -> None: ...
