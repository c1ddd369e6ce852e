from __future__ import annotations

from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QPixmap, QIcon
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QListWidget, QListWidgetItem, QLabel
)

ARTWORK_SIZE = 72

class TrackListDialog(QDialog):
    """Modal song picker. Emits trackSelected(index) and closes on click."""

    trackSelected = Signal(int)

    def __init__(self, tracks, current_index: int, assets=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Song List")
        self.resize(420, 560)
        self.tracks = tracks
        self.assets = assets
        self.current_index = current_index

        layout = QVBoxLayout(self)

        header = QLabel("Song List")
        header.setObjectName("SongListHeader")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(header)

        self.list_widget = QListWidget()
        self.list_widget.setIconSize(QSize(ARTWORK_SIZE, ARTWORK_SIZE))
        layout.addWidget(self.list_widget)

        self._load()

        self.list_widget.itemClicked.connect(self._on_item_clicked)

        self.setStyleSheet("""
        QLabel#SongListHeader { font-size: 20px; font-weight: bold; }
        QListWidget::item { padding: 8px; }
        QListWidget::item:selected { background: #0b1222; color: #e5e7eb; }
        """)

    def _artwork(self, artwork_id: str) -> QIcon:
        path = self.assets.artwork_path(artwork_id) if self.assets else None
        if not path:
            return QIcon()
        pm = QPixmap(path)
        if pm.isNull():
            return QIcon()
        return QIcon(pm.scaled(ARTWORK_SIZE, ARTWORK_SIZE,
                               Qt.AspectRatioMode.KeepAspectRatio,
                               Qt.TransformationMode.SmoothTransformation))

    def _load(self):
        self.list_widget.clear()
        for i, track in enumerate(self.tracks):
            current = i == self.current_index
            text = f"{track.title}  ✓" if current else track.title
            item = QListWidgetItem(self._artwork(track.artwork_id), text)
            item.setData(Qt.ItemDataRole.UserRole, i)
            if current:
                font = item.font()
                font.setBold(True)
                item.setFont(font)
                item.setToolTip("Now playing")
            self.list_widget.addItem(item)

        if 0 <= self.current_index < self.list_widget.count():
            self.list_widget.setCurrentRow(self.current_index)

    def _on_item_clicked(self, item: QListWidgetItem):
        index = item.data(Qt.ItemDataRole.UserRole)
        if index is None:
            return
        self.trackSelected.emit(int(index))
        self.accept()
