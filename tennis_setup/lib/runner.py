"""Process runner used for every external command.

All calls to docker and docker-compose go through a ProcessRunner so tests
can swap in a stub that records calls instead of touching real tooling.
"""

import shutil
import subprocess
import sys
from collections.abc import Sequence
from typing import Optional

from .logger import get_logger

logger = get_logger(__name__)


class ProcessRunner:
    """Resolve executables on PATH and run commands"""

    def which(self, name: str) -> Optional[str]:
        """Return the resolved path of an executable, or None if not on PATH"""
        path = shutil.which(name)
        logger.debug(f"which {name} -> {path}")
        return path

    def run(self, cmd: Sequence[str], capture_output: bool = True) -> subprocess.CompletedProcess:
        """Run a command and wait for it to finish.

        Args:
            cmd: Command and arguments
            capture_output: Capture stdout/stderr as text. When False the
                command writes straight to the terminal.

        Returns:
            The CompletedProcess, never raising on a non-zero exit status
        """
        cmd = list(cmd)
        logger.info(f"Running: {' '.join(cmd)}")

        if capture_output:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        else:
            # Keep our own buffered output ahead of the child's
            sys.stdout.flush()
            result = subprocess.run(cmd)

        logger.info(f"Exit status {result.returncode}: {' '.join(cmd)}")
        return result
