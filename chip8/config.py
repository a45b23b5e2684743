from dataclasses import dataclass
from typing import Optional

DEFAULT_CPU_HZ = 700      # instructions per second
DEFAULT_TIMER_HZ = 60     # timer ticks and screen refreshes per second
DEFAULT_SCALE = 10        # screen pixels per CHIP-8 pixel


@dataclass
class EmulatorConfig:
    cpu_hz: int = DEFAULT_CPU_HZ
    timer_hz: int = DEFAULT_TIMER_HZ
    scale: int = DEFAULT_SCALE
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("cpu_hz", "timer_hz", "scale"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
