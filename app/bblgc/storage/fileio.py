"""Filesystem access for state directory cleanup.

The garbage collector only touches storage through the FileIO
interface, so tests can substitute a recording fake and callers can
switch to a dry-run implementation.
"""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DirEntry:
    """A single entry returned by a directory listing.

    Attributes:
        name: Entry name without any directory component.
        is_dir: Whether the entry is a directory (symlinks are not followed).
    """

    name: str
    is_dir: bool = False


class FileIO(ABC):
    """Abstract filesystem operations used during cleanup.

    Implementations must raise FileNotFoundError from remove() when the
    target is absent, and let every other failure propagate as OSError.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path (dangling symlinks included)."""

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a single file or an empty directory.

        Raises:
            FileNotFoundError: If path does not exist.
            OSError: If the entry cannot be removed.
        """

    @abstractmethod
    def remove_all(self, path: str) -> None:
        """Remove path and everything below it. Absent paths are ignored.

        Raises:
            OSError: If any entry cannot be removed.
        """

    @abstractmethod
    def read_dir(self, path: str) -> list[DirEntry]:
        """List the entries of a directory.

        Raises:
            OSError: If path is missing, not a directory, or unreadable.
        """

    @abstractmethod
    def write_file(self, path: str, data: bytes | str, mode: int = 0o644) -> None:
        """Write data to path, replacing any existing content.

        Raises:
            OSError: If the file cannot be written.
        """


class LocalFileIO(FileIO):
    """FileIO backed by the local filesystem.

    Attributes:
        _dry_run: If True, log mutations instead of performing them.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the LocalFileIO.

        Args:
            dry_run: If True, report what would be deleted or written
                without touching the filesystem.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether mutations are simulated."""
        return self._dry_run

    def exists(self, path: str) -> bool:
        target = Path(path)
        return target.exists() or target.is_symlink()

    def remove(self, path: str) -> None:
        target = Path(path)

        if self._dry_run:
            if not self.exists(path):
                raise FileNotFoundError(2, "No such file or directory", path)
            logger.info("Dry-run: would delete %s", path)
            return

        # Directories (but not symlinks to directories) must be empty
        if target.is_dir() and not target.is_symlink():
            os.rmdir(path)
        else:
            os.remove(path)
        logger.debug("Removed %s", path)

    def remove_all(self, path: str) -> None:
        target = Path(path)

        if not self.exists(path):
            return

        if self._dry_run:
            logger.info("Dry-run: would delete %s recursively", path)
            return

        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(path)
        else:
            target.unlink()
        logger.debug("Removed %s recursively", path)

    def read_dir(self, path: str) -> list[DirEntry]:
        with os.scandir(path) as it:
            entries = [DirEntry(name=e.name, is_dir=e.is_dir(follow_symlinks=False)) for e in it]
        return sorted(entries, key=lambda e: e.name)

    def write_file(self, path: str, data: bytes | str, mode: int = 0o644) -> None:
        if self._dry_run:
            logger.info("Dry-run: would write %s", path)
            return

        payload = data.encode() if isinstance(data, str) else data
        target = Path(path)
        target.write_bytes(payload)
        target.chmod(mode)
