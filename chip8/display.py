WIDTH = 64
HEIGHT = 32
PIXELS = WIDTH * HEIGHT
SPRITE_WIDTH = 8


class Framebuffer:
    """64×32 monochrome grid, row-major, one byte (0/1) per pixel."""

    def __init__(self):
        self.pixels = bytearray(PIXELS)

    def clear(self):
        self.pixels[:] = bytes(PIXELS)

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[(y * WIDTH + x) % PIXELS]

    def draw_sprite(self, x: int, y: int, rows) -> int:
        """XOR `rows` (one byte per row, MSB leftmost) onto the grid at (x, y).

        Indices wrap modulo the whole grid. Returns 1 if any lit pixel was
        switched off, else 0.
        """
        collision = 0
        for row, byte in enumerate(rows):
            for col in range(SPRITE_WIDTH):
                if not (byte >> (7 - col)) & 1:
                    continue
                idx = (WIDTH * (y + row) + x + col) % PIXELS
                if self.pixels[idx]:
                    collision = 1
                self.pixels[idx] ^= 1
        return collision

    def snapshot(self) -> bytes:
        return bytes(self.pixels)
