class Chip8Error(RuntimeError):
    """Fatal condition raised while a program is running."""


class StackOverflowError(Chip8Error):
    def __init__(self, pc: int, depth: int):
        super().__init__(f"Stack overflow at PC=0x{pc:03X} (depth {depth})")
        self.pc = pc
        self.depth = depth


class StackUnderflowError(Chip8Error):
    def __init__(self, pc: int):
        super().__init__(f"Return with empty stack at PC=0x{pc:03X}")
        self.pc = pc
