from PySide6.QtWidgets import QWidget, QLabel, QLineEdit, QGridLayout, QMessageBox
from PySide6.QtCore import Qt, QTimer, Slot
from chip8.registers import GENERAL_REGS, SPECIAL_REGS


class RegisterPanel(QWidget):
    """
    V0–VF and the special registers (I, PC, SP, DT, ST) in a grid.
    Refreshed by a 200 ms QTimer. V registers can be edited directly.
    """
    def __init__(self, cpu, parent=None):
        super().__init__(parent)
        self.cpu = cpu
        self.edits = []

        layout = QGridLayout(self)

        for i in range(GENERAL_REGS):
            lbl = QLabel(f"V{i:X}")
            edit = QLineEdit()
            edit.setAlignment(Qt.AlignRight)
            edit.editingFinished.connect(self.register_edited)
            edit.setObjectName(f"V{i:X}")
            layout.addWidget(lbl, i, 0)
            layout.addWidget(edit, i, 1)
            self.edits.append(edit)

        for row, name in enumerate(SPECIAL_REGS, GENERAL_REGS):
            lbl = QLabel(name)
            edit = QLineEdit()
            edit.setReadOnly(True)
            edit.setAlignment(Qt.AlignRight)
            layout.addWidget(lbl, row, 0)
            layout.addWidget(edit, row, 1)
            self.edits.append(edit)

        layout.setColumnStretch(1, 1)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_view)
        self.timer.start(200)   # ms

        # Set while update_view writes, so editingFinished is ignored
        self.updating = False

    def update_view(self):
        """Update register display from CPU state"""
        self.updating = True
        reg = self.cpu.reg
        for i in range(GENERAL_REGS):
            if not self.edits[i].hasFocus():
                self.edits[i].setText(f"{reg[i]:02X}")
        specials = [f"{reg.i:03X}", f"{reg.pc:03X}", f"{reg.sp}", f"{reg.dt:02X}", f"{reg.st:02X}"]
        for edit, text in zip(self.edits[GENERAL_REGS:], specials):
            edit.setText(text)
        self.updating = False

    @Slot()
    def register_edited(self):
        """Handle direct editing of register values"""
        if self.updating:
            return

        sender = self.sender()
        if not sender:
            return

        try:
            reg_idx = int(sender.objectName()[1:], 16)  # "VA" -> 10
            value = int(sender.text(), 16)
            if not 0 <= value <= 0xFF:
                raise ValueError(value)
            self.cpu.reg[reg_idx] = value
        except (ValueError, IndexError):
            QMessageBox.warning(self, "Invalid Input",
                                "Please enter a hexadecimal byte (00-FF).")
            self.update_view()  # Reset to current value
