import logging
import os
import tempfile

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtWidgets import QLabel

from .tone import write_square_wave

logger = logging.getLogger(__name__)


class ToneOutput:
    """Buzzer driven by the sound timer. A looped square wave plays for as
    long as the tone is active; the state is mirrored in a status label."""

    def __init__(self, indicator: QLabel = None):
        self.indicator = indicator
        self.active = False
        fd, self.path = tempfile.mkstemp(prefix="chip8-tone-", suffix=".wav")
        os.close(fd)
        write_square_wave(self.path)
        self.effect = QSoundEffect()
        self.effect.setSource(QUrl.fromLocalFile(self.path))
        self.effect.setLoopCount(QSoundEffect.Loop.Infinite)
        self.effect.setVolume(0.25)

    def set_tone(self, active: bool):
        if active == self.active:
            return
        self.active = active
        if active:
            self.effect.play()
        else:
            self.effect.stop()
        if self.indicator is not None:
            self.indicator.setText("♪" if active else "")

    def close(self):
        self.set_tone(False)
        try:
            os.remove(self.path)
        except OSError as e:
            logger.warning("Cannot remove %s: %s", self.path, e)
