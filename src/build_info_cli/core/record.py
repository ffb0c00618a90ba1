"""Assemble the build record from flags and metadata sources."""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .arguments import FlagSet
from .manifest import read_manifest_version
from .metadata import MetadataSource
from .models import BuildRecord, LookupResult, HASH, USER, VERSION, TIMESTAMP


# English month names regardless of the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

PLACEHOLDER_USER = "Octocat"
PLACEHOLDER_HASH = "1e872b5"
PLACEHOLDER_VERSION = "1.0.0"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a time as ``Month DD, YYYY HH:mm:ss`` on a 24-hour clock."""
    moment = moment or datetime.now()
    return f"{MONTH_NAMES[moment.month - 1]} {moment:%d, %Y %H:%M:%S}"


async def _skipped() -> LookupResult:
    return LookupResult.absent()


async def assemble_record(flags: FlagSet, source: MetadataSource, manifest_path: Path,
                          clock: Callable[[], datetime] = datetime.now) -> BuildRecord:
    """Collect every non-suppressed field into a new record.

    The revision and identity lookups are awaited together; only lookups for
    included fields are started. Fields are inserted in the order hash, user,
    version, timestamp whatever order the lookups finish in.

    Args:
        flags: Validated command-line flags
        source: Metadata source answering the git lookups
        manifest_path: Manifest holding the host project's version
        clock: Returns the time used for the timestamp field

    Returns:
        BuildRecord: The assembled record
    """
    revision, user = await asyncio.gather(
        source.current_revision() if flags.include_hash else _skipped(),
        source.current_user() if flags.include_user else _skipped(),
    )

    record = BuildRecord()
    if flags.include_hash:
        record.set(HASH, revision)
    if flags.include_user:
        record.set(USER, user)
    if flags.include_version:
        record.set(VERSION, read_manifest_version(manifest_path))
    if flags.include_timestamp:
        record.set(TIMESTAMP, LookupResult.of(format_timestamp(clock())))
    return record


def placeholder_record(clock: Callable[[], datetime] = datetime.now) -> BuildRecord:
    """Sample record written by ``--init``; only the timestamp is live."""
    record = BuildRecord()
    record.set(USER, LookupResult.of(PLACEHOLDER_USER))
    record.set(HASH, LookupResult.of(PLACEHOLDER_HASH))
    record.set(VERSION, LookupResult.of(PLACEHOLDER_VERSION))
    record.set(TIMESTAMP, LookupResult.of(format_timestamp(clock())))
    return record
