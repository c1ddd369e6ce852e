# ui/player_bar.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QToolButton, QSlider

from core.utils import format_time
from ui.icons import svg_icon, SVG_PREV, SVG_NEXT, SVG_PLAY, SVG_PAUSE


class PlayerBar(QWidget):
    """
    Transport buttons plus the seek slider. The slider works in
    milliseconds; the controller in seconds.
    """
    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller

        self._dragging = False

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 6, 16, 6)
        root.setSpacing(10)

        # --- buttons ---
        self._icons = {
            "prev": svg_icon(SVG_PREV, 26),
            "next": svg_icon(SVG_NEXT, 26),
            "play": svg_icon(SVG_PLAY, 30),
            "pause": svg_icon(SVG_PAUSE, 30),
        }

        self.btn_prev = QToolButton()
        self.btn_prev.setObjectName("BtnPrev")
        self.btn_prev.setIcon(self._icons["prev"])
        self.btn_prev.setIconSize(QSize(26, 26))
        self.btn_prev.setToolTip("Previous")

        self.btn_play = QToolButton()
        self.btn_play.setObjectName("BtnPlay")
        self.btn_play.setIcon(self._icons["play"])
        self.btn_play.setIconSize(QSize(30, 30))
        self.btn_play.setToolTip("Play")

        self.btn_next = QToolButton()
        self.btn_next.setObjectName("BtnNext")
        self.btn_next.setIcon(self._icons["next"])
        self.btn_next.setIconSize(QSize(26, 26))
        self.btn_next.setToolTip("Next")

        buttons = QHBoxLayout()
        buttons.setSpacing(40)
        buttons.addStretch(1)
        buttons.addWidget(self.btn_prev)
        buttons.addWidget(self.btn_play)
        buttons.addWidget(self.btn_next)
        buttons.addStretch(1)

        # --- time labels ---
        self.lbl_time = QLabel(format_time(0))
        self.lbl_dur = QLabel(format_time(0))

        times = QHBoxLayout()
        times.addWidget(self.lbl_time)
        times.addStretch(1)
        times.addWidget(self.lbl_dur)

        # --- slider ---
        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setObjectName("SeekSlider")
        self.slider.setRange(0, 0)
        self.slider.setSingleStep(1000)
        self.slider.setPageStep(5000)

        root.addLayout(buttons)
        root.addLayout(times)
        root.addWidget(self.slider)

        # --- signals ---
        self.slider.sliderPressed.connect(self._on_slider_pressed)
        self.slider.sliderReleased.connect(self._on_slider_released)
        self.slider.sliderMoved.connect(self._on_slider_moved)
        # groove clicks and arrow/page keys change the value without a drag
        self.slider.valueChanged.connect(self._on_slider_value_changed)

        self.btn_prev.clicked.connect(self.controller.previous)
        self.btn_play.clicked.connect(self.controller.toggle_play_pause)
        self.btn_next.clicked.connect(self.controller.next)

        self.controller.stateChanged.connect(self.render_state)

        self.setObjectName("PlayerBar")
        self._apply_styles()
        self.render_state(self.controller.state)

    # --- slider handling ---
    def _on_slider_pressed(self):
        self._dragging = True
        self.controller.begin_seek()

    def _on_slider_moved(self, value: int):
        # show preview time while dragging
        self.lbl_time.setText(format_time(value / 1000))

    def _on_slider_released(self):
        self._dragging = False
        self.controller.seek(self.slider.value() / 1000)

    def _on_slider_value_changed(self, value: int):
        if self._dragging:
            return
        self.controller.seek(value / 1000)

    # --- state updates ---
    def render_state(self, state):
        if state.is_playing:
            self.btn_play.setIcon(self._icons["pause"])
            self.btn_play.setToolTip("Pause")
        else:
            self.btn_play.setIcon(self._icons["play"])
            self.btn_play.setToolTip("Play")

        self.lbl_dur.setText(format_time(state.duration_seconds))

        # programmatic updates must not read back as user seeks
        self.slider.blockSignals(True)
        duration_ms = int(state.duration_seconds * 1000)
        if self.slider.maximum() != duration_ms:
            self.slider.setRange(0, duration_ms)
        if not self._dragging:
            self.lbl_time.setText(format_time(state.position_seconds))
            self.slider.setValue(int(state.position_seconds * 1000))
        self.slider.blockSignals(False)

    def _apply_styles(self):
        self.setStyleSheet("""
        QToolButton {
            border: 1px solid transparent;
            background: rgba(107, 114, 128, 0.8);
            padding: 12px;
            border-radius: 27px;
            min-width: 30px;
            min-height: 30px;
        }
        QToolButton:hover {
            border-color: #38bdf8;
        }
        QToolButton:pressed {
            background: #0f172a;
        }

        QSlider::groove:horizontal {
            height: 4px;
            background: #0f172a;
            border-radius: 2px;
        }
        QSlider::handle:horizontal {
            width: 14px;
            height: 14px;
            margin: -5px 0;
            border-radius: 7px;
            background: #e5e7eb;
        }
        QSlider::sub-page:horizontal {
            background: #38bdf8;
            border-radius: 2px;
        }

        QLabel {
            color: #e5e7eb;
            font-size: 11px;
        }
        """)
