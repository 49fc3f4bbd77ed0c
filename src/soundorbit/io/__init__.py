"""Frame export."""

from soundorbit.io.snapshot import save_snapshot, snapshot_name

__all__ = ["save_snapshot", "snapshot_name"]
