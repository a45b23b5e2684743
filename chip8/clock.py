class FrameClock:
    """Splits an instruction rate into per-frame batches.

    The host refreshes at `timer_hz`; each frame it asks `next_batch()` how
    many instructions to run. The fractional remainder is carried over, so
    over one second exactly `cpu_hz` instructions are issued even when the
    two rates do not divide.
    """

    def __init__(self, cpu_hz: int, timer_hz: int):
        if cpu_hz <= 0 or timer_hz <= 0:
            raise ValueError("Clock rates must be positive")
        self.cpu_hz = cpu_hz
        self.timer_hz = timer_hz
        self._carry = 0

    @property
    def frame_interval_ms(self) -> int:
        return max(1, round(1000 / self.timer_hz))

    def next_batch(self) -> int:
        total = self._carry + self.cpu_hz
        batch, self._carry = divmod(total, self.timer_hz)
        return batch

    def reset(self):
        self._carry = 0
