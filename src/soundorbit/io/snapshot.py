"""
Still-image export of the current frame.
"""

from datetime import datetime
from pathlib import Path
from typing import Union

from PIL import Image

from soundorbit.visualizers.canvas import Canvas


def snapshot_name(prefix: str, now: datetime) -> str:
    """Filename stem stamped with the wall-clock time as HHMMSS."""
    return f"{prefix}_{now.hour:02d}{now.minute:02d}{now.second:02d}"


def save_snapshot(
    canvas: Canvas,
    directory: Union[str, Path] = ".",
    prefix: str = "soft_error_card",
    now: datetime | None = None,
) -> Path:
    """
    Write the canvas to a JPEG file.

    Args:
        canvas: Canvas holding the rendered frame.
        directory: Output directory, created if missing.
        prefix: Filename prefix.
        now: Timestamp for the name (defaults to the current time).

    Returns:
        Path to the written file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    output_path = directory / f"{snapshot_name(prefix, now or datetime.now())}.jpg"
    Image.fromarray(canvas.to_array()).save(output_path, "JPEG", quality=92)
    return output_path
