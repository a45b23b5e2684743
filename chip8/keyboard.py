from typing import Optional

KEY_COUNT = 16

# Host keys on a QWERTY board, laid out like the COSMAC VIP hex pad:
#   1 2 3 C        1 2 3 4
#   4 5 6 D   ←    Q W E R
#   7 8 9 E        A S D F
#   A 0 B F        Z X C V
KEY_LAYOUT = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}


def key_for_char(ch: str) -> Optional[int]:
    if not ch:
        return None
    return KEY_LAYOUT.get(ch.upper())


def key_for_code(code: int) -> Optional[int]:
    """Hex key for a host key code. Digit and letter codes are their
    upper-case ASCII values (as Qt.Key_0..Key_9, Key_A..Key_Z are), so
    Shift and other modifiers don't change the result."""
    if not 0x20 < code < 0x7F:
        return None
    return key_for_char(chr(code))


class Keypad:
    """State of the 16-key hex pad as last reported by the host."""

    def __init__(self):
        self.keys = [False] * KEY_COUNT

    def press(self, key: int):
        self.keys[key & 0xF] = True

    def release(self, key: int):
        self.keys[key & 0xF] = False

    def clear(self):
        self.keys = [False] * KEY_COUNT

    def is_pressed(self, key: int) -> bool:
        return 0 <= key < KEY_COUNT and self.keys[key]

    def first_pressed(self) -> Optional[int]:
        for key, down in enumerate(self.keys):
            if down:
                return key
        return None
