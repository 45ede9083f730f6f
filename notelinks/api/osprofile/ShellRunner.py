"""Shell command runner backed by subprocess."""

import logging
import subprocess

from ._AbstractRunner import _AbstractRunner

logger = logging.getLogger(__name__)


class ShellRunner(_AbstractRunner):
    """Run commands through the system shell, blocking until they finish."""

    def read_line(self, command: str) -> str | None:
        logger.debug(f"read_line: {command}")
        result = subprocess.run(
            command,
            shell=True,
            check=False,
            capture_output=True,
            text=True,
        )
        lines = result.stdout.splitlines()
        return lines[0] if lines else None

    def run(self, command: str) -> int:
        logger.debug(f"run: {command}")
        # Output is not captured so interactive editors keep the terminal
        result = subprocess.run(command, shell=True, check=False)
        if result.returncode != 0:
            logger.info(f"Command exited with status {result.returncode}: {command}")
        return result.returncode
