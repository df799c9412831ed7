"""State directory resolution for bblgc.

The state directory is chosen in this order:
1. An explicit --state-dir option
2. The BBL_STATE_DIR environment variable
3. The current working directory
"""

import os
from pathlib import Path

# Environment variable shared with bbl itself
STATE_DIR_ENV = "BBL_STATE_DIR"


def resolve_state_dir(explicit: Path | None = None) -> Path:
    """Resolve the state directory to clean up.

    Args:
        explicit: Directory given on the command line, if any.

    Returns:
        Absolute path to the state directory.
    """
    if explicit is not None:
        return explicit.expanduser().absolute()

    base = os.environ.get(STATE_DIR_ENV)
    if base:
        return Path(base).expanduser().absolute()

    return Path.cwd()


def require_state_dir(explicit: Path | None = None) -> Path:
    """Resolve the state directory and check that it is a directory.

    Args:
        explicit: Directory given on the command line, if any.

    Returns:
        Absolute path to an existing directory.

    Raises:
        RuntimeError: If the path does not exist or is not a directory.
    """
    path = resolve_state_dir(explicit)
    if not path.exists():
        msg = f"State directory {path} does not exist"
        raise RuntimeError(msg)
    if not path.is_dir():
        msg = f"State directory {path} is not a directory"
        raise RuntimeError(msg)
    return path
