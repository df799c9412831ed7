"""Selective cleanup of a bbl state directory at teardown time.

Deletes the files bbl generated into a state directory while leaving
anything a user added to the managed directories in place. Preserved
files are announced through a Reporter, once per managed area.
"""

import logging
import os
from dataclasses import dataclass, field

from bblgc.storage.fileio import FileIO
from bblgc.storage.policy import DEFAULT_POLICY, Classification, ManagedArea, OwnershipPolicy
from bblgc.storage.reporter import Reporter

logger = logging.getLogger(__name__)

LEFTOVER_HEADER = "The following files were not created by bbl and have been left in place:"


class GarbageCollectionError(RuntimeError):
    """Raised when a path in the state directory cannot be cleaned up.

    Attributes:
        path: Path whose removal or listing failed.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


@dataclass(slots=True)
class CollectionResult:
    """Outcome of a successful cleanup run.

    Attributes:
        removed: Paths that were deleted (or would be, in dry-run mode).
        preserved: Foreign paths left in place, relative to the state directory.
    """

    removed: list[str] = field(default_factory=list)
    preserved: list[str] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        """True when there was nothing to clean up."""
        return not self.removed and not self.preserved


def format_leftover_report(paths: list[str]) -> str:
    """Build the warning emitted for foreign files in one managed area.

    Args:
        paths: Foreign paths relative to the state directory.

    Returns:
        Header line followed by one sorted path per line.
    """
    lines = [LEFTOVER_HEADER]
    lines.extend(f"  {p}" for p in sorted(paths))
    return "\n".join(lines)


class GarbageCollector:
    """Removes bbl-generated files from a state directory.

    Steps run in a fixed order: state file, helper scripts, selective
    areas, then wholly owned directories. A failure aborts the run
    without rolling back earlier steps; running again is safe.

    Example:
        >>> gc = GarbageCollector(LocalFileIO(), ConsoleReporter())
        >>> gc.remove("/home/user/envs/prod")
    """

    def __init__(
        self,
        file_io: FileIO,
        reporter: Reporter,
        policy: OwnershipPolicy = DEFAULT_POLICY,
    ) -> None:
        """Initialize the GarbageCollector.

        Args:
            file_io: Filesystem access used for every operation.
            reporter: Sink for warnings about preserved files.
            policy: Ownership rules for the state directory.
        """
        self._file_io = file_io
        self._reporter = reporter
        self._policy = policy

    @property
    def policy(self) -> OwnershipPolicy:
        """Ownership rules applied by this collector."""
        return self._policy

    def remove(self, directory: str) -> CollectionResult:
        """Clean up a state directory.

        Does nothing if the state file is missing, so a directory bbl
        never initialized is left untouched.

        Args:
            directory: Path to the state directory.

        Returns:
            CollectionResult describing what was removed and preserved.

        Raises:
            GarbageCollectionError: If any entry cannot be removed or a
                managed directory cannot be listed.
        """
        directory = str(directory)
        result = CollectionResult()

        state_file = os.path.join(directory, self._policy.state_file)
        if not self._file_io.exists(state_file):
            logger.debug("No %s in %s, nothing to clean up", self._policy.state_file, directory)
            return result

        self._remove_file(state_file, result)
        self._remove_scripts(directory, result)

        for area in self._policy.selective_areas:
            self._collect_area(directory, area, result)

        for area in self._policy.owned_directories:
            path = os.path.join(directory, area.path)
            if not self._file_io.exists(path):
                continue
            try:
                self._file_io.remove_all(path)
            except OSError as e:
                raise self._error("remove", path, e) from e
            result.removed.append(path)

        logger.debug(
            "Cleaned up %s: %d removed, %d preserved",
            directory,
            len(result.removed),
            len(result.preserved),
        )
        return result

    def _remove_scripts(self, directory: str, result: CollectionResult) -> None:
        """Remove every helper script, raising the first failure afterwards."""
        first_error: GarbageCollectionError | None = None

        for script in self._policy.scripts:
            try:
                self._remove_file(os.path.join(directory, script), result)
            except GarbageCollectionError as e:
                logger.debug("Continuing after failure: %s", e)
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def _collect_area(self, directory: str, area: ManagedArea, result: CollectionResult) -> None:
        """Remove the known files of one area and, if nothing foreign, the area itself."""
        area_path = os.path.join(directory, area.path)
        if not self._file_io.exists(area_path):
            logger.debug("Skipping missing area %s", area_path)
            return

        try:
            entries = self._file_io.read_dir(area_path)
        except OSError as e:
            raise self._error("list", area_path, e) from e

        foreign = [
            os.path.join(area.path, entry.name)
            for entry in entries
            if area.classify(entry.name, entry.is_dir) == Classification.FOREIGN
        ]
        listed_dirs = {entry.name for entry in entries if entry.is_dir}

        for name in sorted(area.known_files - listed_dirs):
            self._remove_file(os.path.join(area_path, name), result)

        if foreign:
            foreign.sort()
            logger.debug("Keeping %s, found %d foreign entries", area_path, len(foreign))
            self._reporter.report(format_leftover_report(foreign))
            result.preserved.extend(foreign)
            return

        self._remove_file(area_path, result)

    def _remove_file(self, path: str, result: CollectionResult) -> None:
        """Remove a single entry, treating absence as success."""
        try:
            self._file_io.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise self._error("remove", path, e) from e
        result.removed.append(path)

    @staticmethod
    def _error(action: str, path: str, cause: OSError) -> GarbageCollectionError:
        msg = f"Cannot {action} {path}: {cause}"
        return GarbageCollectionError(msg, path)
