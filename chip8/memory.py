import logging

logger = logging.getLogger(__name__)

MEM_SIZE = 0x1000        # 4 KiB
ADDR_MASK = MEM_SIZE - 1
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEM_SIZE - PROGRAM_START

FONT_START = 0x000
GLYPH_SIZE = 5
FONT = (
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
)


def font_address(digit: int) -> int:
    """Address of the glyph for hex digit `digit` (low nibble only)."""
    return FONT_START + (digit & 0xF) * GLYPH_SIZE


class Memory:
    """Flat 4 KiB byte store. Every address wraps modulo 4096."""

    def __init__(self):
        self.mem = bytearray(MEM_SIZE)
        self.mem[FONT_START:FONT_START + len(FONT)] = bytes(FONT)

    def read(self, addr: int) -> int:
        return self.mem[addr & ADDR_MASK]

    def write(self, addr: int, value: int):
        self.mem[addr & ADDR_MASK] = value & 0xFF

    def read_word(self, addr: int) -> int:
        """Big-endian 16-bit read, as the instruction fetch does it"""
        return (self.read(addr) << 8) | self.read(addr + 1)

    def load_program(self, data: bytes):
        """Copy a program image to 0x200. The font region is never touched."""
        if len(data) > MAX_PROGRAM_SIZE:
            raise ValueError(
                f"Program is {len(data)} bytes, limit is {MAX_PROGRAM_SIZE}")
        self.mem[PROGRAM_START:PROGRAM_START + len(data)] = bytes(data)
        logger.debug("Loaded %d bytes at 0x%03X", len(data), PROGRAM_START)

    def dump(self, start: int = 0, length: int = MEM_SIZE) -> bytes:
        return bytes(self.read(start + i) for i in range(length))
