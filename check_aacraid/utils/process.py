"""Process table helpers."""

import logging
import subprocess

logger = logging.getLogger(__name__)


def is_running(name: str) -> bool:
    """Check whether a process called name is running, using pgrep.

    If pgrep is not installed the check cannot be made and False is returned.
    """
    try:
        result = subprocess.run(
            ['pgrep', name],
            capture_output=True,
            text=True
        )
    except OSError as e:
        logger.debug(f"pgrep unavailable, skipping running check for {name}: {e}")
        return False

    # pgrep: 0 = match, 1 = no match, anything else is an error
    if result.returncode > 1:
        logger.debug(f"pgrep failed with status {result.returncode}: {result.stderr.strip()}")
        return False

    pids = result.stdout.split()
    if pids:
        logger.debug(f"Found running {name}: pids {', '.join(pids)}")
    return bool(pids)
