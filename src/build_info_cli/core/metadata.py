"""Source-control metadata lookups backed by git."""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..config import DEFAULT_GIT_TIMEOUT
from ..utils.console import _rich_error, _rich_success
from ..utils.helpers import is_tool_available
from .models import LookupResult


USER_COMMAND = ["git", "config", "user.name"]
REVISION_COMMAND = ["git", "rev-parse", "--short", "HEAD"]

# (status, stdout, stderr)
GitOutput = Tuple[int, str, str]
GitExecutor = Callable[[List[str]], GitOutput]


class MetadataSource(ABC):
    """Base interface for build metadata lookups."""

    @abstractmethod
    async def current_user(self) -> LookupResult:
        """Look up the identity of the committing user."""
        pass

    @abstractmethod
    async def current_revision(self) -> LookupResult:
        """Look up the short hash of the current revision."""
        pass


class GitMetadataSource(MetadataSource):
    """Answers metadata lookups by running git in the project directory.

    Each lookup runs in a worker thread so that both can be awaited
    concurrently. Failures are logged and reported as absent results.
    """

    def __init__(self, working_dir: Path, timeout: float = DEFAULT_GIT_TIMEOUT,
                 executor: Optional[GitExecutor] = None):
        """Initialize the source.

        Args:
            working_dir: Directory git commands run in
            timeout: Seconds before a git command is killed
            executor: Optional replacement for the GitPython-backed runner
        """
        self.working_dir = Path(working_dir)
        self.timeout = timeout
        self._executor = executor or self._execute_with_gitpython

    async def current_user(self) -> LookupResult:
        return await self._lookup(USER_COMMAND, "git user")

    async def current_revision(self) -> LookupResult:
        return await self._lookup(REVISION_COMMAND, "latest commit hash")

    async def _lookup(self, command: List[str], label: str) -> LookupResult:
        try:
            status, stdout, stderr = await asyncio.to_thread(self._executor, command)
        except Exception as e:
            _rich_error(f"Error getting {label}, skipping... ({_printable(str(e))})", symbol="error")
            return LookupResult.absent()

        value = (stdout or "").rstrip("\r\n")
        if status != 0 or stderr or not value:
            detail = _printable((stderr or "").strip()) or f"exit status {status}"
            _rich_error(f"Error getting {label}, skipping... ({detail})", symbol="error")
            return LookupResult.absent()

        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            # GitPython hands undecodable bytes back as lone surrogates
            _rich_error(f"Error getting {label}, skipping... (output is not valid UTF-8)", symbol="error")
            return LookupResult.absent()

        _rich_success(f"Found {label}: {value}", symbol="check")
        return LookupResult.of(value)

    def _execute_with_gitpython(self, command: List[str]) -> GitOutput:
        """Run a git command through GitPython, never raising on a failed exit."""
        if not is_tool_available("git"):
            return 127, "", "git executable not found"

        # GitPython refuses to import without a git executable, so import late
        from git import Git
        from git.exc import GitCommandError, GitCommandNotFound

        try:
            return Git(str(self.working_dir)).execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                kill_after_timeout=self.timeout,
            )
        except GitCommandNotFound as e:
            return 127, "", str(e)
        except GitCommandError as e:
            return e.status if isinstance(e.status, int) else 1, "", str(e.stderr or e)


def _printable(text: str) -> str:
    """Escape lone surrogates left by undecodable git output."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")
