"""Data loading utilities."""

from .snapshot_loader import (
    build_store,
    dump_snapshot,
    get_demo_snapshot_path,
    load_snapshot,
    load_snapshot_file,
)

__all__ = [
    "build_store",
    "dump_snapshot",
    "get_demo_snapshot_path",
    "load_snapshot",
    "load_snapshot_file",
]
