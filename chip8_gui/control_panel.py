import logging
from pathlib import Path

from PySide6.QtWidgets import (QWidget, QPushButton, QHBoxLayout, QLabel,
                               QFileDialog, QMessageBox)
from PySide6.QtCore import QTimer

from chip8.clock import FrameClock
from chip8.cpu_core import CPUState
from chip8.errors import Chip8Error
from .audio import ToneOutput

logger = logging.getLogger(__name__)


class ControlPanel(QWidget):
    """
    Load / Step / Run / Pause / Reset buttons and a status label.
    While running, a frame QTimer fires at the timer rate; every frame runs a
    batch of instructions, ticks the timers once and presents the display.
    """
    def __init__(self, cpu, display, config, parent=None):
        super().__init__(parent)
        self.cpu = cpu
        self.display = display
        self.clock = FrameClock(config.cpu_hz, config.timer_hz)

        self.btn_load  = QPushButton("Load")
        self.btn_step  = QPushButton("Step")
        self.btn_run   = QPushButton("Run")
        self.btn_pause = QPushButton("Pause")
        self.btn_reset = QPushButton("Reset")
        self.status    = QLabel("Stopped")
        self.tone_label = QLabel("")
        self.tone = ToneOutput(self.tone_label)

        lay = QHBoxLayout(self)
        for b in (self.btn_load, self.btn_step, self.btn_run,
                  self.btn_pause, self.btn_reset, self.status, self.tone_label):
            lay.addWidget(b)

        self.btn_load.clicked.connect(self.load)
        self.btn_step.clicked.connect(self.step_once)
        self.btn_run.clicked.connect(self.run)
        self.btn_pause.clicked.connect(self.pause)
        self.btn_reset.clicked.connect(self.reset)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.frame)
        self.timer.setInterval(self.clock.frame_interval_ms)

    def _fail(self, err):
        self.timer.stop()
        self.tone.set_tone(False)
        logger.error("Program stopped: %s", err)
        self.status.setText(str(err))

    def step_once(self):
        try:
            self.cpu.step()
        except Chip8Error as e:
            self._fail(e)
            return
        self.display.present()
        self.status.setText(f"PC={self.cpu.reg.pc:03X}")

    def frame(self):
        try:
            for _ in range(self.clock.next_batch()):
                self.cpu.step()
                if self.cpu.state is CPUState.AWAITING_KEY:
                    break
        except Chip8Error as e:
            self._fail(e)
            return
        self.cpu.tick_timers()
        self.tone.set_tone(self.cpu.sound_active)
        self.display.present()
        if self.cpu.state is CPUState.AWAITING_KEY:
            self.status.setText("Waiting for key")
        else:
            self.status.setText("Running")

    def run(self):
        self.clock.reset()
        self.timer.start()
        self.display.setFocus()
        self.status.setText("Running")
        logger.info("Run")

    def pause(self):
        self.timer.stop()
        self.tone.set_tone(False)
        self.status.setText("Paused")
        logger.info("Pause")

    def reset(self):
        self.pause()
        self.cpu.reset()
        self.display.present()
        self.status.setText("Reset OK")

    def load(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load ROM", "",
                                              "CHIP-8 programs (*.ch8 *.c8);;All files (*)")
        if not path:
            return
        try:
            data = Path(path).read_bytes()
            self.pause()
            self.cpu.load_program(data)
        except (OSError, ValueError) as e:
            logger.error("Cannot load %s: %s", path, e)
            QMessageBox.warning(self, "Load failed", str(e))
            return
        self.display.present()
        self.window().setWindowTitle(f"CHIP-8 - {Path(path).name}")
        self.status.setText(f"Loaded {Path(path).name}")
