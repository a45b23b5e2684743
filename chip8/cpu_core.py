import logging
import random
from enum import Enum
from typing import Optional

from .display import Framebuffer
from .instructions import Instruction, Op, decode
from .keyboard import Keypad
from .memory import ADDR_MASK, Memory
from .registers import VF, Registers

logger = logging.getLogger(__name__)


class CPUState(Enum):
    RUNNING = "running"
    AWAITING_KEY = "awaiting_key"


class CPU:
    """
    CHIP-8 interpreter core.
    ─────────────────────────────────────────────────────
    • fetch()   : read the big-endian word at PC into IR, PC += 2
    • execute() : dispatch one decoded instruction
    • step()    : one cycle (fetch → decode → execute), or one key poll
                  while blocked in Fx0A
    • tick_timers(): one 60 Hz timer tick, called by the host
    • reset()   : power-on state, the loaded program is kept
    """

    def __init__(self, seed: Optional[int] = None, keypad: Optional[Keypad] = None):
        self.seed = seed
        self.keypad = keypad if keypad is not None else Keypad()
        self._power_on(b"")

    def _power_on(self, program: bytes):
        mem = Memory()
        mem.load_program(program)   # raises before any state is replaced
        self.mem = mem
        self.program = program
        self.rng = random.Random(self.seed)
        self.reg = Registers()
        self.display = Framebuffer()
        self.ir = 0
        self.state = CPUState.RUNNING
        self.key_register = 0
        self.cycles = 0

    def load_program(self, data: bytes):
        """Power-cycle the machine with a new program image at 0x200."""
        self._power_on(bytes(data))
        logger.info("Program loaded (%d bytes)", len(data))

    def reset(self):
        self._power_on(self.program)
        self.keypad.clear()
        logger.info("CPU reset")

    @property
    def sound_active(self) -> bool:
        return self.reg.st > 0

    # ───────────────────────────── fetch ─────────────────────────────
    def fetch(self) -> int:
        self.ir = self.mem.read_word(self.reg.pc)
        self.reg.pc = (self.reg.pc + 2) & ADDR_MASK
        return self.ir

    # ───────────────────────────── runner ────────────────────────────
    def step(self):
        if self.state is CPUState.AWAITING_KEY:
            self._poll_key()
            return

        opcode = self.fetch()
        instr = decode(opcode)
        self.cycles += 1
        if instr is None:
            logger.debug("Unknown opcode %04X at 0x%03X, skipped",
                         opcode, (self.reg.pc - 2) & ADDR_MASK)
            return
        self.execute(instr)

    def run(self, max_steps: int) -> int:
        """Headless loop of `max_steps` steps. Returns the number of
        instructions fetched; key polls while blocked in Fx0A don't count."""
        start = self.cycles
        for _ in range(max_steps):
            self.step()
        return self.cycles - start

    def tick_timers(self):
        self.reg.tick_timers()

    def snapshot(self) -> bytes:
        return self.display.snapshot()

    # ─────────────────────────── wait for key ────────────────────────
    def _begin_key_wait(self, x: int):
        key = self.keypad.first_pressed()
        if key is not None:
            self.reg[x] = key
            return
        # Park PC on the Fx0A itself until a key arrives
        self.reg.pc = (self.reg.pc - 2) & ADDR_MASK
        self.key_register = x
        self.state = CPUState.AWAITING_KEY
        logger.debug("Waiting for key into V%X", x)

    def _poll_key(self):
        key = self.keypad.first_pressed()
        if key is None:
            return
        self.reg[self.key_register] = key
        self.reg.skip()
        self.state = CPUState.RUNNING
        logger.debug("Key %X received into V%X", key, self.key_register)

    # ───────────────────────────── execute ───────────────────────────
    def execute(self, instr: Instruction):
        reg, mem = self.reg, self.mem
        op, x, y = instr.op, instr.x, instr.y

        # ───────────── 0: CLS / RET ─────────────
        if op is Op.CLS:
            self.display.clear()
        elif op is Op.RET:
            reg.ret()

        # ───────────── 1/2/B: jumps ─────────────
        elif op is Op.JP:
            reg.jump(instr.nnn)
        elif op is Op.CALL:
            reg.call(instr.nnn)
        elif op is Op.JP_V0:
            reg.jump(instr.nnn + reg[0])

        # ───────────── 3/4/5/9: skips ───────────
        elif op is Op.SE_BYTE:
            if reg[x] == instr.kk:
                reg.skip()
        elif op is Op.SNE_BYTE:
            if reg[x] != instr.kk:
                reg.skip()
        elif op is Op.SE_REG:
            if reg[x] == reg[y]:
                reg.skip()
        elif op is Op.SNE_REG:
            if reg[x] != reg[y]:
                reg.skip()

        # ───────────── 6/7: immediates ──────────
        elif op is Op.LD_BYTE:
            reg[x] = instr.kk
        elif op is Op.ADD_BYTE:
            reg.add_immediate(x, instr.kk)

        # ───────────── 8: register ALU ──────────
        elif op is Op.LD_REG:
            reg.alu("LD", x, y)
        elif op is Op.OR:
            reg.alu("OR", x, y)
        elif op is Op.AND:
            reg.alu("AND", x, y)
        elif op is Op.XOR:
            reg.alu("XOR", x, y)
        elif op is Op.ADD_REG:
            reg.add_registers(x, y)
        elif op is Op.SUB:
            reg.sub_registers(x, y)
        elif op is Op.SUBN:
            reg.subn_registers(x, y)
        elif op is Op.SHR:
            reg.shift_right(x)
        elif op is Op.SHL:
            reg.shift_left(x)

        # ───────────── A/C/D ────────────────────
        elif op is Op.LD_I:
            reg.set_i(instr.nnn)
        elif op is Op.RND:
            reg[x] = self.rng.randrange(256) & instr.kk
        elif op is Op.DRW:
            rows = [mem.read(reg.i + j) for j in range(instr.n)]
            reg[VF] = self.display.draw_sprite(reg[x], reg[y], rows)

        # ───────────── E: keypad ────────────────
        elif op is Op.SKP:
            if self.keypad.is_pressed(reg[x]):
                reg.skip()
        elif op is Op.SKNP:
            if not self.keypad.is_pressed(reg[x]):
                reg.skip()

        # ───────────── F: timers / memory ───────
        elif op is Op.LD_VX_DT:
            reg[x] = reg.dt
        elif op is Op.LD_VX_K:
            self._begin_key_wait(x)
        elif op is Op.LD_DT_VX:
            reg.dt = reg[x]
        elif op is Op.LD_ST_VX:
            reg.st = reg[x]
        elif op is Op.ADD_I:
            reg.set_i(reg.i + reg[x])
        elif op is Op.LD_F:
            reg.set_sprite_address(reg[x])
        elif op is Op.LD_B:
            value = reg[x]
            mem.write(reg.i, value // 100)
            mem.write(reg.i + 1, (value // 10) % 10)
            mem.write(reg.i + 2, value % 10)
        elif op is Op.LD_MEM_VX:
            for j in range(x + 1):
                mem.write(reg.i + j, reg[j])
        elif op is Op.LD_VX_MEM:
            for j in range(x + 1):
                reg[j] = mem.read(reg.i + j)

        else:
            raise RuntimeError(f"Unhandled instruction {instr}")
