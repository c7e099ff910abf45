from .control_panel import ControlPanel
from .displayed_text_item import DisplayedTextItem
from .keybindings import KeybindingsRegistry
from .main_window import MainWindow
from .text_canvas import SceneTextCanvas, TextCanvasView

__all__ = [
    'ControlPanel',
    'DisplayedTextItem',
    'KeybindingsRegistry',
    'MainWindow',
    'SceneTextCanvas',
    'TextCanvasView',
]
