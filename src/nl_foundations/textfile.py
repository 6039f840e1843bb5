from __future__ import annotations

import mmap
import os
from pathlib import Path

__all__ = ["TextFileError", "read_text"]


class TextFileError(OSError):
    """A text file could not be opened, sized, mapped or decoded."""


def read_text(path: str | Path) -> str:
    """Map ``path`` read-only and decode it as strict UTF-8."""
    try:
        with open(path, "rb") as handle:
            size = os.fstat(handle.fileno()).st_size
            if size == 0:
                return ""
            with mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) as region:
                raw = region[:]
    except OSError as exc:
        raise TextFileError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise TextFileError(f"cannot read {path}: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TextFileError(f"cannot read {path}: invalid UTF-8 at byte {exc.start}") from exc
