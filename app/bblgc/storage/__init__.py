"""State directory storage module.

This module provides the ownership policy for bbl state directories,
the filesystem and reporter interfaces, and the garbage collector that
removes generated files at teardown time.
"""

from bblgc.storage.fileio import DirEntry, FileIO, LocalFileIO
from bblgc.storage.garbage_collector import (
    CollectionResult,
    GarbageCollectionError,
    GarbageCollector,
    format_leftover_report,
)
from bblgc.storage.policy import (
    DEFAULT_POLICY,
    Classification,
    DeletionMode,
    ManagedArea,
    OwnershipPolicy,
)
from bblgc.storage.reporter import ConsoleReporter, RecordingReporter, Reporter

__all__ = [
    "DEFAULT_POLICY",
    "Classification",
    "CollectionResult",
    "ConsoleReporter",
    "DeletionMode",
    "DirEntry",
    "FileIO",
    "GarbageCollectionError",
    "GarbageCollector",
    "LocalFileIO",
    "ManagedArea",
    "OwnershipPolicy",
    "RecordingReporter",
    "Reporter",
    "format_leftover_report",
]
