from PySide6.QtWidgets import QFrame, QLabel, QHBoxLayout
from PySide6.QtCore import Qt, QTimer

class Toast(QFrame):
    def __init__(self, parent, text: str, kind: str = "info", ms: int = 4000):
        super().__init__(parent)
        self.setWindowFlags(Qt.ToolTip)  # floats above
        self.setAttribute(Qt.WA_DeleteOnClose, True)

        self.label = QLabel(text)
        self.label.setWordWrap(True)
        layout = QHBoxLayout(self)
        layout.addWidget(self.label)

        if kind == "warn":
            kind = "warning"
        self.kind = kind
        self.setObjectName(f"toast-{kind}")
        self.setStyleSheet("""
        QFrame { border-radius: 10px; padding: 10px 12px; background: #0b1222; color: #e5e7eb; }
        QFrame#toast-success { background: #052e1a; }
        QFrame#toast-warning { background: #2a1a05; }
        QFrame#toast-error { background: #2a0a0a; }
        """)

        QTimer.singleShot(ms, self.close)

    def show_bottom(self, margin=16):
        p = self.parentWidget()
        if not p:
            self.show()
            return
        self.adjustSize()
        top_left = p.mapToGlobal(p.rect().topLeft())
        x = top_left.x() + (p.width() - self.width()) // 2
        y = top_left.y() + p.height() - self.height() - margin
        self.move(x, y)
        self.show()
