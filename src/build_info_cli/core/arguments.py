"""Command-line flag validation for build-info."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from ..errors import BuildInfoError


HELP = "--help"
INIT = "--init"
NO_HASH = "--no-hash"
NO_USER = "--no-user"
NO_VERSION = "--no-version"
NO_TIME = "--no-time"

RECOGNIZED_FLAGS = (HELP, INIT, NO_HASH, NO_USER, NO_VERSION, NO_TIME)


class InvalidArgument(BuildInfoError):
    """Raised when a command-line token is not a recognized flag."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f'Unknown arg "{token}", please re-check arguments before running the tool again!'
        )


@dataclass(frozen=True)
class FlagSet:
    """The validated set of flags passed on the command line."""
    flags: FrozenSet[str] = frozenset()

    def __contains__(self, flag: str) -> bool:
        return flag in self.flags

    @property
    def help(self) -> bool:
        return HELP in self.flags

    @property
    def init(self) -> bool:
        return INIT in self.flags

    @property
    def include_hash(self) -> bool:
        return NO_HASH not in self.flags

    @property
    def include_user(self) -> bool:
        return NO_USER not in self.flags

    @property
    def include_version(self) -> bool:
        return NO_VERSION not in self.flags

    @property
    def include_timestamp(self) -> bool:
        return NO_TIME not in self.flags


def parse_flags(args: Iterable[str]) -> FlagSet:
    """Validate raw arguments against the recognized flag set.

    Args:
        args: Raw command-line tokens, without the program name

    Returns:
        FlagSet: The validated flags

    Raises:
        InvalidArgument: On the first token that is not a recognized flag
    """
    seen = set()
    for arg in args:
        if arg not in RECOGNIZED_FLAGS:
            raise InvalidArgument(arg)
        seen.add(arg)
    return FlagSet(frozenset(seen))
