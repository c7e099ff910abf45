"""
InteractionController - Turns UI events into text object mutations.

This module contains no Qt dependencies. It owns the TextPlayModel, drives
a TextCanvas collaborator and notifies views of changes through an
observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from ..models.displayed_text import DisplayedTextData
from ..models.fonts import clamp_font_size, is_valid_font_style
from ..models.text_play import STATE_ACTIVE, TextPlayModel

from .canvas_protocol import TextCanvas
from .events import FontSelected, PointerClick, RemovePressed, SizeChanged

logger = logging.getLogger(__name__)


class InteractionController:
    """
    Controller for the text playground.

    Holds at most one current text. Clicks create a new text with the
    pending font defaults, the slider and dropdown change those defaults
    and restyle the current text, and Remove erases the current text.
    Texts created before the current one stay on the canvas untouched.

    Observer events:
        text_created (DisplayedTextData) - A text was drawn and became current
        text_removed (DisplayedTextData) - The current text was erased
        font_style_changed (str) - The pending font family changed
        font_size_changed (int) - The pending font size changed
    """

    def __init__(self, canvas: TextCanvas, text_source: Callable[[], str],
                 model: Optional[TextPlayModel] = None):
        self.canvas = canvas
        self.model = model or TextPlayModel()
        self._text_source = text_source
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- State ---

    @property
    def current(self) -> Optional[DisplayedTextData]:
        return self.model.current

    @property
    def has_current(self) -> bool:
        return self.model.state == STATE_ACTIVE

    @property
    def state(self) -> str:
        return self.model.state

    @property
    def font_size(self) -> int:
        return self.model.font_size

    @property
    def font_style(self) -> str:
        return self.model.font_style

    # --- Event dispatch ---

    def dispatch(self, event) -> None:
        """Route a UI event to its handler.

        Raises:
            TypeError: ``event`` is not one of the UIEvent types.
        """
        if isinstance(event, PointerClick):
            self.on_pointer_click(event.point)
        elif isinstance(event, RemovePressed):
            self.on_remove()
        elif isinstance(event, FontSelected):
            self.on_font_style_selected(event.name)
        elif isinstance(event, SizeChanged):
            self.on_font_size_changed(event.value)
        else:
            raise TypeError(f"Unsupported UI event: {event!r}")

    # --- Handlers ---

    def on_pointer_click(self, point: tuple[float, float]) -> DisplayedTextData:
        """
        Draw the text field's content at ``point`` and make it current.

        The previous current text, if any, stays drawn; only the reference
        moves. An empty text field still produces a (blank) text.

        Returns:
            The newly created DisplayedTextData.
        """
        text = self.model.new_text(self._text_source(), point)
        text.handle = self.canvas.draw(text.text, text.position,
                                       text.font_family, text.font_size)
        previous = self.model.current
        self.model.current = text
        if previous is not None:
            logger.debug("Text %r superseded, left on canvas", previous.text)
        logger.debug("Created text %s", text.to_dict())
        self._notify('text_created', text)
        return text

    def on_remove(self) -> None:
        """Erase the current text. Does nothing when there is none."""
        text = self.model.current
        if text is None:
            return
        self.canvas.erase(text.handle)
        self.model.current = None
        logger.debug("Removed text %r", text.text)
        self._notify('text_removed', text)

    def on_font_style_selected(self, name: str) -> None:
        """Set the pending font family and apply it to the current text."""
        if not is_valid_font_style(name):
            logger.warning("Unknown font style %r, ignoring", name)
            return
        self.model.font_style = name
        text = self.model.current
        if text is not None:
            self.canvas.restyle(text.handle, name)
            text.font_family = name
        self._notify('font_style_changed', name)

    def on_font_size_changed(self, size: int) -> None:
        """Set the pending font size and apply it to the current text."""
        clamped = clamp_font_size(size)
        if clamped != size:
            logger.debug("Font size %r clamped to %d", size, clamped)
        self.model.font_size = clamped
        text = self.model.current
        if text is not None:
            self.canvas.resize(text.handle, clamped)
            text.font_size = clamped
        self._notify('font_size_changed', clamped)
