from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtGui import QPainter, QColor
from PySide6.QtCore import Qt, QSize

from chip8.display import WIDTH, HEIGHT
from chip8.keyboard import key_for_code

PIXEL_COLOR = QColor(0xFF, 0xFF, 0xFF)
BACKGROUND = QColor(0x00, 0x00, 0x00)


class DisplayPanel(QWidget):
    """
    Paints the last framebuffer snapshot scaled up, and forwards host key
    events to the CPU keypad.
    """
    def __init__(self, cpu, scale: int, parent=None):
        super().__init__(parent)
        self.cpu = cpu
        self.scale = scale
        self.frame = cpu.snapshot()
        self.setFocusPolicy(Qt.StrongFocus)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

    def sizeHint(self):
        return QSize(WIDTH * self.scale, HEIGHT * self.scale)

    def minimumSizeHint(self):
        return self.sizeHint()

    def present(self):
        """Take a copy of the framebuffer and schedule a repaint"""
        self.frame = self.cpu.snapshot()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), BACKGROUND)
        s = self.scale
        for idx, lit in enumerate(self.frame):
            if lit:
                y, x = divmod(idx, WIDTH)
                painter.fillRect(x * s, y * s, s, s, PIXEL_COLOR)
        painter.end()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.window().close()
            return
        key = key_for_code(event.key())
        if key is None or event.isAutoRepeat():
            super().keyPressEvent(event)
            return
        self.cpu.keypad.press(key)

    def keyReleaseEvent(self, event):
        key = key_for_code(event.key())
        if key is None or event.isAutoRepeat():
            super().keyReleaseEvent(event)
            return
        self.cpu.keypad.release(key)

    def focusOutEvent(self, event):
        # Releases are lost while unfocused
        self.cpu.keypad.clear()
        super().focusOutEvent(event)
