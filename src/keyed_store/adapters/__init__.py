from .file_io import SUPPORTED_FORMATS, SnapshotWriter, render_snapshot, write_snapshot

__all__ = ["SUPPORTED_FORMATS", "SnapshotWriter", "render_snapshot", "write_snapshot"]
