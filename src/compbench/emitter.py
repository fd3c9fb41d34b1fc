"""Write generated scripts to disk and mark them executable."""

import logging
from pathlib import Path

from .errors import ScriptPermissionError, WriteError

logger = logging.getLogger("compbench.emitter")

SCRIPT_MODE = 0o755


def emit(path: Path | str, content: str, mode: int = SCRIPT_MODE) -> Path:
    """Write content to path, replacing any existing file, then chmod it.

    The write is not atomic; a crash can leave a truncated script, which the
    next run overwrites.

    Raises:
        WriteError: if the file cannot be written
        ScriptPermissionError: if the mode cannot be set afterwards
    """
    path = Path(path)

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"Cannot write {path}: {e}") from e

    try:
        path.chmod(mode)
    except OSError as e:
        raise ScriptPermissionError(f"Cannot set mode {mode:o} on {path}: {e}") from e

    logger.info(f"Wrote {path} ({len(content)} bytes)")
    return path
