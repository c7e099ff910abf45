from ..models.fonts import DEFAULT_FONT_SIZE, FONT_STYLES, MAX_FONT_SIZE, MIN_FONT_SIZE
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (QComboBox, QGridLayout, QHBoxLayout, QLabel,
                             QLineEdit, QPushButton, QSlider, QWidget)

from .styles import (REMOVE_BUTTON_LABEL, SLIDER_TICK_INTERVAL,
                     TEXT_FIELD_COLUMNS, theme_manager)


class ControlPanel(QWidget):
    """Bottom panel holding the text field and the font controls.

    Two rows: the remove button, font dropdown and size slider on top,
    the text field underneath.
    """

    removeRequested = pyqtSignal()
    fontStyleSelected = pyqtSignal(str)
    fontSizeChanged = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("controlPanel")
        self.init_ui()
        theme_manager.bind_widget(self, self._apply_theme)

    def init_ui(self):
        """Initialize the control panel UI"""
        layout = QGridLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)

        # Row 1: one column per control
        controls = QHBoxLayout()

        self.remove_button = QPushButton(REMOVE_BUTTON_LABEL)
        self.remove_button.clicked.connect(self.removeRequested)
        controls.addWidget(self.remove_button, 1)

        self.font_combo = QComboBox()
        self.font_combo.addItems(FONT_STYLES)
        self.font_combo.currentTextChanged.connect(self.fontStyleSelected)
        controls.addWidget(self.font_combo, 1)

        slider_box = QHBoxLayout()
        self.size_slider = QSlider(Qt.Orientation.Horizontal)
        self.size_slider.setRange(MIN_FONT_SIZE, MAX_FONT_SIZE)
        self.size_slider.setValue(DEFAULT_FONT_SIZE)
        self.size_slider.setTickInterval(SLIDER_TICK_INTERVAL)
        self.size_slider.setToolTip("Font size")
        self.size_slider.valueChanged.connect(self._on_slider_moved)
        slider_box.addWidget(self.size_slider, 1)

        self.size_label = QLabel()
        self.size_label.setMinimumWidth(36)
        slider_box.addWidget(self.size_label)
        controls.addLayout(slider_box, 1)

        layout.addLayout(controls, 0, 0)

        # Row 2: text typed here is drawn on the next canvas click
        self.text_field = QLineEdit()
        self.text_field.setPlaceholderText("Type text, then click the canvas")
        width = self.text_field.fontMetrics().averageCharWidth() * TEXT_FIELD_COLUMNS
        self.text_field.setMinimumWidth(width)
        layout.addWidget(self.text_field, 1, 0)

        self._update_size_label(self.size_slider.value())

    def text(self):
        """Return the text field's live content."""
        return self.text_field.text()

    def font_style(self):
        return self.font_combo.currentText()

    def font_size(self):
        return self.size_slider.value()

    def _on_slider_moved(self, value):
        self._update_size_label(value)
        self.fontSizeChanged.emit(value)

    def _update_size_label(self, value):
        self.size_label.setText(f"{value} pt")

    def _apply_theme(self, theme):
        self.setStyleSheet(theme.stylesheet("control_panel"))
        self.size_label.setFont(theme.font("size_label"))
        self.size_label.setStyleSheet(theme.stylesheet("muted_label"))
