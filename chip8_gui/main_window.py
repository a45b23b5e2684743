from PySide6.QtWidgets import QMainWindow, QDockWidget, QApplication
from PySide6.QtCore import Qt
from .display_panel import DisplayPanel
from .register_panel import RegisterPanel
from .memory_panel import MemoryPanel
from .control_panel import ControlPanel
from chip8.config import EmulatorConfig
import sys


class MainWindow(QMainWindow):
    def __init__(self, cpu, config: EmulatorConfig, title="CHIP-8"):
        super().__init__()
        self.cpu = cpu
        self.setWindowTitle(title)

        # Central widget: the screen
        self.display_panel = DisplayPanel(self.cpu, config.scale)
        self.setCentralWidget(self.display_panel)

        # Dock 1: registers
        reg_dock = QDockWidget("Registers", self)
        reg_dock.setWidget(RegisterPanel(self.cpu))
        self.addDockWidget(Qt.LeftDockWidgetArea, reg_dock)

        # Dock 2: memory
        mem_dock = QDockWidget("Memory", self)
        self.memory_panel = MemoryPanel(self.cpu)
        mem_dock.setWidget(self.memory_panel)
        self.addDockWidget(Qt.RightDockWidgetArea, mem_dock)

        # Dock 3: controls
        ctrl_dock = QDockWidget("Control", self)
        self.control_panel = ControlPanel(self.cpu, self.display_panel, config)
        ctrl_dock.setWidget(self.control_panel)
        self.addDockWidget(Qt.BottomDockWidgetArea, ctrl_dock)

    def closeEvent(self, event):
        self.control_panel.pause()
        self.control_panel.tone.close()
        super().closeEvent(event)


def run(cpu, config: EmulatorConfig, title="CHIP-8", autostart=True):
    app = QApplication(sys.argv[:1])
    mw = MainWindow(cpu, config, title)
    mw.show()
    if autostart:
        mw.control_panel.run()
    sys.exit(app.exec())
