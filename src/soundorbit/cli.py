"""
CLI entry point for Sound Orbit.

Usage:
    soundorbit [options]
    python -m soundorbit [options]
"""

import argparse
import sys
from pathlib import Path

from soundorbit.config import OrbitConfig


def _device(value: str) -> int | str:
    """Input device by index or by name substring."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soundorbit",
        description="Audio-reactive orbit visuals driven by the microphone",
    )

    # Window
    parser.add_argument("--width", type=int, default=1280, help="Window width (default: 1280)")
    parser.add_argument("--height", type=int, default=720, help="Window height (default: 720)")
    parser.add_argument("-f", "--fps", type=int, default=60, help="Target frames per second (default: 60)")
    parser.add_argument("--fullscreen", action="store_true", help="Run fullscreen")

    # Audio
    parser.add_argument(
        "-d", "--device", type=_device, default=None,
        help="Input device index or name (default: system default)",
    )
    parser.add_argument(
        "--autostart", action="store_true",
        help="Request the microphone immediately instead of waiting for ENTER",
    )

    # Misc
    parser.add_argument("--seed", type=int, default=None, help="Seed for the particle layout")
    parser.add_argument(
        "--snapshot-dir", type=Path, default=Path("."),
        help="Directory for saved snapshots (default: current directory)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    for name in ("width", "height", "fps"):
        if getattr(args, name) <= 0:
            print(f"Error: --{name} must be positive", file=sys.stderr)
            sys.exit(1)

    config = OrbitConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        fullscreen=args.fullscreen,
        device=args.device,
    )

    # pygame is imported here so --help works without a display
    from soundorbit.app import OrbitApp

    app = OrbitApp(config, seed=args.seed, snapshot_dir=args.snapshot_dir, quiet=args.quiet)
    app.run(autostart=args.autostart)


if __name__ == "__main__":
    main()
