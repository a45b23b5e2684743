import struct
import wave

TONE_HZ = 440
SAMPLE_RATE = 22050
AMPLITUDE = 0x2000


def write_square_wave(path, freq: int = TONE_HZ, rate: int = SAMPLE_RATE, periods: int = 100):
    """Write a mono 16-bit square wave of whole periods to `path`, so it
    loops without a click."""
    half = max(1, rate // (2 * freq))
    one_period = [AMPLITUDE] * half + [-AMPLITUDE] * half
    frames = struct.pack(f"<{len(one_period)}h", *one_period) * periods
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(rate)
        w.writeframes(frames)
    return len(one_period) * periods
