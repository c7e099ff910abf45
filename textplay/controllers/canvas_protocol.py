"""Drawing surface contract used by the InteractionController."""

from typing import Any, Protocol


class TextCanvas(Protocol):
    """Canvas that hosts text objects.

    ``draw`` returns an opaque handle; the other methods accept only handles
    previously returned by the same canvas.
    """

    def draw(self, text: str, position: tuple[float, float], style: str, size: int) -> Any:
        ...

    def restyle(self, handle: Any, style: str) -> None:
        ...

    def resize(self, handle: Any, size: int) -> None:
        ...

    def erase(self, handle: Any) -> None:
        ...
