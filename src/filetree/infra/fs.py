from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Wraps directory enumeration so that platform failures come back as values
instead of exceptions. Callers receive whatever entries were read before a
failure together with a description of what went wrong.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirEntryInfo:
    """
    Snapshot of a single directory entry.

    Attributes:
        name: Base name of the entry.
        path: Parent path as given, joined with the name.
        is_dir: True for directories, including symlinks to directories.
    """
    name: str
    path: str
    is_dir: bool


@dataclass(frozen=True)
class ReadError:
    """
    Encapsulates a failed directory read.

    Attributes:
        path: Directory whose listing failed.
        error: Descriptive exception message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class DirectoryListing:
    """
    Outcome of listing a directory.

    On failure, entries holds everything read before the error occurred.
    """
    path: str
    entries: List[DirEntryInfo] = field(default_factory=list)
    error: Optional[ReadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def path_exists(path: str) -> bool:
    """Check whether a path exists, following symlinks."""
    return os.path.exists(path)


def list_directory(path: str) -> DirectoryListing:
    """
    Enumerate the direct entries of a directory in platform order.

    The scandir handle is released when iteration finishes or fails.

    Args:
        path: Directory to enumerate.

    Returns:
        DirectoryListing: Entries read, plus a ReadError if enumeration failed.
    """
    entries: List[DirEntryInfo] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                entries.append(
                    DirEntryInfo(name=entry.name, path=entry.path, is_dir=entry.is_dir())
                )
    except OSError as e:
        return DirectoryListing(path=path, entries=entries, error=ReadError(path=path, error=str(e)))

    return DirectoryListing(path=path, entries=entries)
