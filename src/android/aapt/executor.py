"""Executor for assembled aapt commands.

Runs the argv produced by a command builder and captures the result. It does
not interpret aapt's output beyond the exit status.
"""

import asyncio
import shlex
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.core.config.settings import get_settings
from src.core.exceptions.errors import CommandBuildError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

# Amount of stderr kept in error_message
MAX_ERROR_CHARS = 1000


@dataclass
class AaptResult:
    """Result of an aapt execution.

    Attributes:
        success: Whether aapt exited with status 0.
        return_code: Exit code, -1 if the process never finished.
        stdout: Standard output from aapt.
        stderr: Standard error from aapt.
        duration_seconds: Wall time of the run.
        command: Shell rendering of the executed argv.
        error_message: Error message if the run failed.
    """

    success: bool
    return_code: int = 0
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = 0.0
    command: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and JSON output."""
        return {
            "success": self.success,
            "return_code": self.return_code,
            "duration_seconds": self.duration_seconds,
            "command": self.command,
            "error_message": self.error_message,
        }


class AaptExecutor:
    """Runs aapt commands as subprocesses."""

    def __init__(self, timeout: int | None = None):
        """Initialize the executor.

        Args:
            timeout: Maximum run time in seconds. Defaults to the
                executor settings.
        """
        self.timeout = timeout if timeout is not None else get_settings().executor.timeout

    async def execute(
        self,
        commands: Sequence[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> AaptResult:
        """Execute an assembled command.

        Args:
            commands: Token list from a builder; commands[0] is the executable.
            cwd: Working directory.
            env: Environment variables.

        Returns:
            AaptResult with execution details.

        Raises:
            CommandBuildError: If commands is empty.
        """
        if not commands:
            raise CommandBuildError("Cannot execute an empty aapt command")

        command = shlex.join(commands)
        logger.info(f"Running aapt: {command}")
        start_time = time.time()

        try:
            process = await asyncio.create_subprocess_exec(
                *commands,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=env,
            )
        except OSError as e:
            logger.warning(f"Could not start aapt: {e}")
            return AaptResult(
                success=False,
                return_code=-1,
                stderr=str(e),
                duration_seconds=time.time() - start_time,
                command=command,
                error_message=str(e),
            )

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            logger.warning(f"aapt timed out after {self.timeout} seconds")
            return AaptResult(
                success=False,
                return_code=-1,
                stderr=f"Command timed out after {self.timeout} seconds",
                duration_seconds=time.time() - start_time,
                command=command,
                error_message="Timeout",
            )

        duration = time.time() - start_time
        stdout_str = stdout.decode("utf-8", errors="replace")
        stderr_str = stderr.decode("utf-8", errors="replace")
        success = process.returncode == 0

        if success:
            logger.debug(f"aapt finished in {duration:.1f}s")
        else:
            logger.warning(f"aapt failed with code {process.returncode}")

        return AaptResult(
            success=success,
            return_code=process.returncode or 0,
            stdout=stdout_str,
            stderr=stderr_str,
            duration_seconds=duration,
            command=command,
            error_message=None if success else stderr_str[:MAX_ERROR_CHARS],
        )

    def run(
        self,
        commands: Sequence[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> AaptResult:
        """Blocking wrapper around execute()."""
        return asyncio.run(self.execute(commands, cwd=cwd, env=env))
