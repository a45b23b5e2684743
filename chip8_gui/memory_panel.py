from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (QTableView, QWidget, QVBoxLayout, QLabel, QHBoxLayout,
                               QPushButton, QInputDialog, QMessageBox)

from chip8.instructions import disassemble
from chip8.memory import MEM_SIZE

WORD_ROWS = MEM_SIZE // 2


class MemoryModel(QAbstractTableModel):
    """4 KiB memory as 2048 big-endian words, with a disassembly column."""
    COLUMNS = ["Word", "Instruction"]

    def __init__(self, cpu, parent=None):
        super().__init__(parent)
        self.cpu = cpu

    def rowCount(self, parent=QModelIndex()):
        return WORD_ROWS

    def columnCount(self, parent=QModelIndex()):
        return len(self.COLUMNS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        addr = index.row() * 2
        if role in (Qt.DisplayRole, Qt.EditRole):
            word = self.cpu.mem.read_word(addr)
            if index.column() == 0:
                return f"{word:04X}"
            return disassemble(word)
        if role == Qt.BackgroundRole and addr == self.cpu.reg.pc:
            return QColor(Qt.yellow)
        return None

    def headerData(self, section, orientation, role):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Vertical:
            return f"{section * 2:03X}"
        return self.COLUMNS[section]

    def flags(self, index):
        if index.column() == 0:
            return Qt.ItemIsSelectable | Qt.ItemIsEnabled | Qt.ItemIsEditable
        return Qt.ItemIsSelectable | Qt.ItemIsEnabled

    def setData(self, index, value, role):
        if role == Qt.EditRole and index.column() == 0:
            try:
                word = int(value, 16)
            except ValueError:
                return False
            if not 0 <= word <= 0xFFFF:
                return False
            addr = index.row() * 2
            self.cpu.mem.write(addr, word >> 8)
            self.cpu.mem.write(addr + 1, word)
            self.dataChanged.emit(index, self.index(index.row(), 1), [Qt.DisplayRole])
            return True
        return False


class MemoryPanel(QWidget):
    """Scrollable memory view with edit controls."""
    def __init__(self, cpu, parent=None):
        super().__init__(parent)
        self.cpu = cpu

        layout = QVBoxLayout(self)

        instr_label = QLabel("Double-click a word to edit memory directly")
        layout.addWidget(instr_label)

        self.table_view = QTableView(self)
        self.table_view.setModel(MemoryModel(cpu, self))
        self.table_view.setSelectionBehavior(QTableView.SelectRows)
        self.table_view.verticalHeader().setDefaultSectionSize(20)
        self.table_view.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.table_view)

        edit_layout = QHBoxLayout()

        self.btn_edit = QPushButton("Edit Address")
        self.btn_edit.clicked.connect(self.edit_address)
        edit_layout.addWidget(self.btn_edit)

        self.btn_goto_pc = QPushButton("Go to PC")
        self.btn_goto_pc.clicked.connect(self.goto_pc)
        edit_layout.addWidget(self.btn_goto_pc)

        layout.addLayout(edit_layout)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.refresh)
        self.timer.start(500)  # ms

    def refresh(self):
        """Refresh the memory view"""
        self.table_view.model().layoutChanged.emit()

    def goto_pc(self):
        row = self.cpu.reg.pc // 2
        self.table_view.scrollTo(self.table_view.model().index(row, 0),
                                 QTableView.PositionAtCenter)

    def edit_address(self):
        """Edit a single byte of memory"""
        addr, ok1 = QInputDialog.getInt(self, "Edit Memory",
                                        "Enter memory address (0-4095):",
                                        0, 0, MEM_SIZE - 1)
        if not ok1:
            return

        current_val = self.cpu.mem.read(addr)
        value_str, ok2 = QInputDialog.getText(self, "Edit Memory",
                                              f"Enter new value for address {addr:03X} (hex):",
                                              text=f"{current_val:02X}")
        if ok2:
            try:
                value = int(value_str, 16)
                if not 0 <= value <= 0xFF:
                    raise ValueError(value)
                self.cpu.mem.write(addr, value)
                self.refresh()
            except ValueError:
                QMessageBox.warning(self, "Invalid Input",
                                    "Please enter a hexadecimal byte (00-FF).")
