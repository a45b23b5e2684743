"""Application entry-point for the CHIP-8 interpreter.
Run `python main.py ROM` from the project root to launch the GUI."""
import argparse
import logging
import sys
from pathlib import Path

from chip8.config import (EmulatorConfig, DEFAULT_CPU_HZ, DEFAULT_TIMER_HZ,
                          DEFAULT_SCALE)
from chip8.cpu_core import CPU

logger = logging.getLogger("chip8")


def build_parser():
    parser = argparse.ArgumentParser(
        description="CHIP-8 interpreter with a Qt front end")
    parser.add_argument("rom", help="path to a CHIP-8 program image")
    parser.add_argument("--cpu-hz", type=int, default=DEFAULT_CPU_HZ, metavar="N",
                        help=f"instructions per second (default {DEFAULT_CPU_HZ})")
    parser.add_argument("--timer-hz", type=int, default=DEFAULT_TIMER_HZ, metavar="N",
                        help=f"timer and refresh rate (default {DEFAULT_TIMER_HZ})")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE, metavar="N",
                        help=f"screen pixels per CHIP-8 pixel (default {DEFAULT_SCALE})")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the RND instruction")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def load_rom(path):
    return Path(path).read_bytes()


def create_cpu(argv=None):
    """Parse arguments, read the ROM and build a loaded CPU.

    Exits with status 1 when the ROM cannot be read or does not fit.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = EmulatorConfig(cpu_hz=args.cpu_hz, timer_hz=args.timer_hz,
                                scale=args.scale, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    try:
        rom = load_rom(args.rom)
    except OSError as e:
        logger.error("Cannot read ROM %s: %s", args.rom, e)
        sys.exit(1)

    cpu = CPU(seed=config.seed)
    try:
        cpu.load_program(rom)
    except ValueError as e:
        logger.error("Cannot load ROM %s: %s", args.rom, e)
        sys.exit(1)
    return cpu, config, Path(args.rom).name


def main(argv=None):
    cpu, config, name = create_cpu(argv)
    from chip8_gui.main_window import run
    run(cpu, config, title=f"CHIP-8 - {name}")


if __name__ == "__main__":
    main()
