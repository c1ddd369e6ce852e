from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QToolButton
)
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QShortcut, QKeySequence, QPixmap

from ui.player_bar import PlayerBar
from ui.dialogs.track_list_dialog import TrackListDialog
from ui.toast import Toast
from ui.icons import (
    svg_icon, SVG_VOLUME, SVG_SHUFFLE, SVG_LIST, REPEAT_GLYPHS, ACCENT, MUTED
)

ARTWORK_SIZE = 260
VOLUME_STEPS = 100


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("Music Player")
        self.resize(420, 760)
        self.app_state = app_state
        self.controller = app_state.controller

        self._artwork_id = None

        # --- Shortcuts ---
        QShortcut(QKeySequence("Space"), self, activated=self.controller.toggle_play_pause)
        QShortcut(QKeySequence("Ctrl+Right"), self, activated=self.controller.next)
        QShortcut(QKeySequence("Ctrl+Left"), self, activated=self.controller.previous)
        QShortcut(QKeySequence("Ctrl+L"), self, activated=self.open_track_list)

        self.central_widget = QWidget()
        self.central_widget.setObjectName("PlayerRoot")
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)
        self.layout.setContentsMargins(30, 30, 30, 10)

        self.app_state.notification.connect(self._on_notify)

        # --- Volume row ---
        volume_row = QHBoxLayout()
        self.lbl_volume = QLabel()
        self.lbl_volume.setPixmap(svg_icon(SVG_VOLUME, 22, MUTED).pixmap(22, 22))

        self.volume_slider = QSlider(Qt.Orientation.Horizontal)
        self.volume_slider.setObjectName("VolumeSlider")
        self.volume_slider.setRange(0, VOLUME_STEPS)
        self.volume_slider.setToolTip("Volume")
        self.volume_slider.valueChanged.connect(self._on_volume_changed)

        volume_row.addWidget(self.lbl_volume)
        volume_row.addWidget(self.volume_slider, 1)
        self.layout.addLayout(volume_row)

        # --- Artwork + title ---
        self.lbl_artwork = QLabel()
        self.lbl_artwork.setObjectName("Artwork")
        self.lbl_artwork.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_artwork.setMinimumSize(ARTWORK_SIZE, ARTWORK_SIZE)

        self.lbl_title = QLabel()
        self.lbl_title.setObjectName("TrackTitle")
        self.lbl_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_title.setWordWrap(True)

        self.layout.addStretch(1)
        self.layout.addWidget(self.lbl_artwork)
        self.layout.addWidget(self.lbl_title)
        self.layout.addStretch(1)

        # --- Transport + seek ---
        self.player_bar = PlayerBar(self.controller, self)
        self.layout.addWidget(self.player_bar)

        # --- Shuffle / repeat / list ---
        modes_row = QHBoxLayout()

        self.btn_shuffle = QToolButton()
        self.btn_shuffle.setObjectName("BtnShuffle")
        self.btn_shuffle.setIconSize(QSize(28, 28))
        self.btn_shuffle.clicked.connect(self.controller.toggle_shuffle)

        self.btn_repeat = QToolButton()
        self.btn_repeat.setObjectName("BtnRepeat")
        self.btn_repeat.setIconSize(QSize(28, 28))
        self.btn_repeat.clicked.connect(self.controller.cycle_repeat_mode)

        self.btn_list = QToolButton()
        self.btn_list.setObjectName("BtnList")
        self.btn_list.setIcon(svg_icon(SVG_LIST, 28, MUTED))
        self.btn_list.setIconSize(QSize(28, 28))
        self.btn_list.setToolTip("Song list")
        self.btn_list.clicked.connect(self.open_track_list)

        modes_row.addWidget(self.btn_shuffle)
        modes_row.addStretch(1)
        modes_row.addWidget(self.btn_repeat)
        modes_row.addStretch(1)
        modes_row.addWidget(self.btn_list)
        self.layout.addLayout(modes_row)

        self.controller.stateChanged.connect(self.render_state)
        self.render_state(self.controller.state)
        self.show_queued_notifications()

        self.setStyleSheet("""
            QWidget#PlayerRoot {
                background: qlineargradient(
                    x1:0, y1:0, x2:0, y2:1,
                    stop:0 #1f2937, stop:1 #020617
                );
            }
            QLabel#TrackTitle {
                color: #ffffff;
                font-size: 22px;
                font-weight: bold;
                padding-bottom: 20px;
            }
            QToolButton#BtnShuffle, QToolButton#BtnRepeat, QToolButton#BtnList {
                border: none;
                background: transparent;
                padding: 6px;
            }
            QSlider#VolumeSlider::groove:horizontal {
                height: 4px;
                background: #0f172a;
                border-radius: 2px;
            }
            QSlider#VolumeSlider::sub-page:horizontal {
                background: #9ca3af;
                border-radius: 2px;
            }
            QSlider#VolumeSlider::handle:horizontal {
                width: 12px;
                margin: -4px 0;
                border-radius: 6px;
                background: #e5e7eb;
            }
            """)

    # ------------------ rendering ------------------
    def render_state(self, state):
        track = self.controller.tracks[state.current_index]
        self.lbl_title.setText(track.title)

        if track.artwork_id != self._artwork_id:
            self._artwork_id = track.artwork_id
            self._show_artwork(track.artwork_id)

        self.btn_shuffle.setIcon(svg_icon(SVG_SHUFFLE, 28, ACCENT if state.is_shuffle else MUTED))
        self.btn_shuffle.setToolTip("Shuffle: on" if state.is_shuffle else "Shuffle: off")

        glyph, color = REPEAT_GLYPHS[state.repeat_mode.icon_name]
        self.btn_repeat.setIcon(svg_icon(glyph, 28, color))
        self.btn_repeat.setToolTip(state.repeat_mode.label)

        slider_value = round(state.volume * VOLUME_STEPS)
        if self.volume_slider.value() != slider_value:
            self.volume_slider.blockSignals(True)
            self.volume_slider.setValue(slider_value)
            self.volume_slider.blockSignals(False)

    def _show_artwork(self, artwork_id: str):
        assets = self.app_state.assets
        path = assets.artwork_path(artwork_id) if assets else None
        pm = QPixmap(path) if path else QPixmap()
        if pm.isNull():
            self.lbl_artwork.clear()
            return
        self.lbl_artwork.setPixmap(pm.scaled(
            ARTWORK_SIZE, ARTWORK_SIZE,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        ))

    # ------------------ user intents ------------------
    def _on_volume_changed(self, value: int):
        self.controller.set_volume(value / VOLUME_STEPS)

    def open_track_list(self):
        dlg = TrackListDialog(
            self.controller.tracks,
            self.controller.state.current_index,
            assets=self.app_state.assets,
            parent=self,
        )
        dlg.trackSelected.connect(self.controller.select_track)
        dlg.exec()

    # ------------------ notifications ------------------
    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self._on_notify(n)
        self.app_state.queued_notifications.clear()

    def _on_notify(self, n):
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        kind = (getattr(n, "notify_type", "info") or "info").lower()
        Toast(self, msg, kind).show_bottom()
