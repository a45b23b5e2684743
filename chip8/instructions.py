"""Opcode decoder.

Field names follow Cowgod's technical reference:

    nnn  low 12 bits, an address
    x    second nibble, register selector
    y    third nibble, register selector
    kk   low byte, an immediate
    n    low nibble, sprite height

`decode` is total: any 16-bit word yields either an `Instruction` or ``None``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Op(Enum):
    CLS = "CLS"
    RET = "RET"
    JP = "JP"
    CALL = "CALL"
    SE_BYTE = "SE_BYTE"
    SNE_BYTE = "SNE_BYTE"
    SE_REG = "SE_REG"
    LD_BYTE = "LD_BYTE"
    ADD_BYTE = "ADD_BYTE"
    LD_REG = "LD_REG"
    OR = "OR"
    AND = "AND"
    XOR = "XOR"
    ADD_REG = "ADD_REG"
    SUB = "SUB"
    SHR = "SHR"
    SUBN = "SUBN"
    SHL = "SHL"
    SNE_REG = "SNE_REG"
    LD_I = "LD_I"
    JP_V0 = "JP_V0"
    RND = "RND"
    DRW = "DRW"
    SKP = "SKP"
    SKNP = "SKNP"
    LD_VX_DT = "LD_VX_DT"
    LD_VX_K = "LD_VX_K"
    LD_DT_VX = "LD_DT_VX"
    LD_ST_VX = "LD_ST_VX"
    ADD_I = "ADD_I"
    LD_F = "LD_F"
    LD_B = "LD_B"
    LD_MEM_VX = "LD_MEM_VX"
    LD_VX_MEM = "LD_VX_MEM"


@dataclass(frozen=True)
class Instruction:
    op: Op
    x: int = 0
    y: int = 0
    kk: int = 0
    nnn: int = 0
    n: int = 0

    def __str__(self):
        return _FORMATS[self.op].format(
            x=self.x, y=self.y, kk=self.kk, nnn=self.nnn, n=self.n)


_FORMATS = {
    Op.CLS:       "CLS",
    Op.RET:       "RET",
    Op.JP:        "JP 0x{nnn:03X}",
    Op.CALL:      "CALL 0x{nnn:03X}",
    Op.SE_BYTE:   "SE V{x:X}, 0x{kk:02X}",
    Op.SNE_BYTE:  "SNE V{x:X}, 0x{kk:02X}",
    Op.SE_REG:    "SE V{x:X}, V{y:X}",
    Op.LD_BYTE:   "LD V{x:X}, 0x{kk:02X}",
    Op.ADD_BYTE:  "ADD V{x:X}, 0x{kk:02X}",
    Op.LD_REG:    "LD V{x:X}, V{y:X}",
    Op.OR:        "OR V{x:X}, V{y:X}",
    Op.AND:       "AND V{x:X}, V{y:X}",
    Op.XOR:       "XOR V{x:X}, V{y:X}",
    Op.ADD_REG:   "ADD V{x:X}, V{y:X}",
    Op.SUB:       "SUB V{x:X}, V{y:X}",
    Op.SHR:       "SHR V{x:X}",
    Op.SUBN:      "SUBN V{x:X}, V{y:X}",
    Op.SHL:       "SHL V{x:X}",
    Op.SNE_REG:   "SNE V{x:X}, V{y:X}",
    Op.LD_I:      "LD I, 0x{nnn:03X}",
    Op.JP_V0:     "JP V0, 0x{nnn:03X}",
    Op.RND:       "RND V{x:X}, 0x{kk:02X}",
    Op.DRW:       "DRW V{x:X}, V{y:X}, {n}",
    Op.SKP:       "SKP V{x:X}",
    Op.SKNP:      "SKNP V{x:X}",
    Op.LD_VX_DT:  "LD V{x:X}, DT",
    Op.LD_VX_K:   "LD V{x:X}, K",
    Op.LD_DT_VX:  "LD DT, V{x:X}",
    Op.LD_ST_VX:  "LD ST, V{x:X}",
    Op.ADD_I:     "ADD I, V{x:X}",
    Op.LD_F:      "LD F, V{x:X}",
    Op.LD_B:      "LD B, V{x:X}",
    Op.LD_MEM_VX: "LD [I], V{x:X}",
    Op.LD_VX_MEM: "LD V{x:X}, [I]",
}

# Secondary tables, keyed by low nibble (families 5/8/9) or low byte (0/E/F)
_SYS = {0xE0: Op.CLS, 0xEE: Op.RET}
_ALU = {
    0x0: Op.LD_REG, 0x1: Op.OR, 0x2: Op.AND, 0x3: Op.XOR, 0x4: Op.ADD_REG,
    0x5: Op.SUB, 0x6: Op.SHR, 0x7: Op.SUBN, 0xE: Op.SHL,
}
_KEYS = {0x9E: Op.SKP, 0xA1: Op.SKNP}
_MISC = {
    0x07: Op.LD_VX_DT, 0x0A: Op.LD_VX_K, 0x15: Op.LD_DT_VX,
    0x18: Op.LD_ST_VX, 0x1E: Op.ADD_I, 0x29: Op.LD_F, 0x33: Op.LD_B,
    0x55: Op.LD_MEM_VX, 0x65: Op.LD_VX_MEM,
}
# Families fully selected by the first nibble
_DIRECT = {
    0x1: Op.JP, 0x2: Op.CALL, 0x3: Op.SE_BYTE, 0x4: Op.SNE_BYTE,
    0x6: Op.LD_BYTE, 0x7: Op.ADD_BYTE, 0xA: Op.LD_I, 0xB: Op.JP_V0,
    0xC: Op.RND, 0xD: Op.DRW,
}


def decode(opcode: int) -> Optional[Instruction]:
    """Map a 16-bit word to an `Instruction`, or ``None`` if it is not one
    of the 35 documented instructions (0nnn SYS calls included)."""
    opcode &= 0xFFFF
    family = opcode >> 12
    x = (opcode >> 8) & 0xF
    y = (opcode >> 4) & 0xF
    n = opcode & 0xF
    kk = opcode & 0xFF
    nnn = opcode & 0xFFF

    if family in _DIRECT:
        op = _DIRECT[family]
    elif family == 0x0:
        op = _SYS.get(opcode)
    elif family == 0x5:
        op = Op.SE_REG if n == 0 else None
    elif family == 0x8:
        op = _ALU.get(n)
    elif family == 0x9:
        op = Op.SNE_REG if n == 0 else None
    elif family == 0xE:
        op = _KEYS.get(kk)
    else:  # 0xF
        op = _MISC.get(kk)

    if op is None:
        return None
    return Instruction(op, x=x, y=y, kk=kk, nnn=nnn, n=n)


def disassemble(opcode: int) -> str:
    """Mnemonic for one word; undecodable words render as data."""
    instr = decode(opcode)
    if instr is None:
        return f"DW 0x{opcode & 0xFFFF:04X}"
    return str(instr)
