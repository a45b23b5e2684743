from dataclasses import dataclass, field
from typing import List

from .alu import ALU
from .errors import StackOverflowError, StackUnderflowError
from .memory import ADDR_MASK, PROGRAM_START, font_address

GENERAL_REGS = 16         # V0–VF
VF = 0xF
STACK_DEPTH = 16
SPECIAL_REGS = ["I", "PC", "SP", "DT", "ST"]


@dataclass
class Registers:
    """Register file, call stack and timers, with the primitive operations
    that need neither memory nor the display.

    Each primitive is a single state transition. Flag-producing ops compute
    the flag from the operands as they were before the write, store the
    result, then store VF last, so for ``dst == VF`` the flag is what remains.
    """
    v: List[int] = field(default_factory=lambda: [0]*GENERAL_REGS)
    i: int = 0
    pc: int = PROGRAM_START
    dt: int = 0
    st: int = 0
    stack: List[int] = field(default_factory=list)

    def __getitem__(self, idx: int) -> int:
        if 0 <= idx < GENERAL_REGS:
            return self.v[idx]
        raise IndexError("Invalid register index")

    def __setitem__(self, idx: int, value: int) -> None:
        if 0 <= idx < GENERAL_REGS:
            self.v[idx] = value & 0xFF
        else:
            raise IndexError("Invalid register index")

    @property
    def sp(self) -> int:
        """Number of active stack frames"""
        return len(self.stack)

    # ───────────────────────────── ALU ──────────────────────────────
    def alu(self, op: str, dst: int, src: int):
        result, flag = ALU.execute(op, self[dst], self[src])
        self[dst] = result
        if flag is not None:
            self[VF] = flag

    def add_registers(self, dst: int, src: int):
        self.alu("ADD", dst, src)

    def sub_registers(self, dst: int, src: int):
        self.alu("SUB", dst, src)

    def subn_registers(self, dst: int, src: int):
        """dst ← src − dst"""
        self.alu("SUBN", dst, src)

    def shift_right(self, reg: int):
        self.alu("SHR", reg, reg)

    def shift_left(self, reg: int):
        self.alu("SHL", reg, reg)

    def add_immediate(self, reg: int, value: int):
        """7xkk: wraps, VF untouched"""
        self[reg] = self[reg] + value

    # ─────────────────────────── control flow ───────────────────────
    # PC is advanced at fetch time, so by the time an instruction runs it
    # already holds the address of the next one.
    def jump(self, addr: int):
        self.pc = addr & ADDR_MASK

    def skip(self):
        self.pc = (self.pc + 2) & ADDR_MASK

    def _current(self) -> int:
        """Address of the instruction being executed"""
        return (self.pc - 2) & ADDR_MASK

    def call(self, addr: int):
        if len(self.stack) >= STACK_DEPTH:
            raise StackOverflowError(self._current(), len(self.stack))
        self.stack.append(self.pc)
        self.jump(addr)

    def ret(self):
        if not self.stack:
            raise StackUnderflowError(self._current())
        self.pc = self.stack.pop()

    # ───────────────────────────── misc ─────────────────────────────
    def set_i(self, addr: int):
        self.i = addr & ADDR_MASK

    def set_sprite_address(self, digit: int):
        """I ← glyph address of the digit held in a register (Fx29)"""
        self.i = font_address(digit)

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1
        if self.st > 0:
            self.st -= 1
