"""File writing helpers."""

import os
import shutil
import tempfile
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Create path (and parents) if it does not exist. Safe to call repeatedly."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def atomic_write_text(path: Path, content: str, encoding: str = "utf-8") -> Path:
    """
    Write content to path without ever leaving a truncated file behind.

    The content goes to a temporary file in the destination directory first and
    is then moved over the destination.

    Args:
        path: Destination file
        content: Text to write
        encoding: Text encoding

    Returns:
        The destination path

    Raises:
        OSError: If the temporary file cannot be created, written or moved
    """
    temp_fd, temp_path = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent), text=True
    )
    try:
        with os.fdopen(temp_fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
        os.chmod(temp_path, 0o644)

        # Only replace the destination once the write succeeded
        shutil.move(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise

    return path
