import pytest

from chip8.clock import FrameClock
from chip8.config import EmulatorConfig


def test_even_split():
    clock = FrameClock(600, 60)
    assert [clock.next_batch() for _ in range(5)] == [10] * 5


def test_fractional_rate_carries_over():
    clock = FrameClock(700, 60)
    batches = [clock.next_batch() for _ in range(60)]
    assert sum(batches) == 700
    assert set(batches) == {11, 12}


def test_rate_slower_than_frames():
    clock = FrameClock(30, 60)
    assert [clock.next_batch() for _ in range(4)] == [0, 1, 0, 1]


def test_reset_drops_carry():
    clock = FrameClock(90, 60)
    clock.next_batch()
    clock.reset()
    assert clock.next_batch() == 1


def test_frame_interval():
    assert FrameClock(500, 60).frame_interval_ms == 17
    assert FrameClock(500, 2000).frame_interval_ms == 1


@pytest.mark.parametrize("cpu_hz, timer_hz", [(0, 60), (500, 0), (-1, 60)])
def test_rates_must_be_positive(cpu_hz, timer_hz):
    with pytest.raises(ValueError):
        FrameClock(cpu_hz, timer_hz)


def test_config_defaults():
    config = EmulatorConfig()
    assert (config.cpu_hz, config.timer_hz, config.scale, config.seed) == (700, 60, 10, None)


@pytest.mark.parametrize("field", ["cpu_hz", "timer_hz", "scale"])
def test_config_rejects_non_positive(field):
    with pytest.raises(ValueError):
        EmulatorConfig(**{field: 0})
