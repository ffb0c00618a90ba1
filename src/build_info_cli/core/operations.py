"""Core operations for the build-info CLI: help, init and the build pipeline."""

import asyncio
from typing import Optional

from ..config import BuildInfoConfig
from ..utils.console import (
    _rich_info, _rich_panel, _rich_table, _create_record_table
)
from ..version import get_version
from .arguments import FlagSet
from .emitter import write_artifact
from .metadata import GitMetadataSource, MetadataSource
from .models import BuildRecord
from .record import assemble_record, placeholder_record
from .serializer import serialize_record


PROJECT_URL = "https://github.com/4dams/angular-build-info"

USAGE_LINES = (
    "--help          Displays this message",
    "--init          Creates template `build.ts` file so you can start implementing it",
    "--no-hash       Will not add latest commit hash to final `build.ts`",
    "--no-user       Will not add git username to final `build.ts`",
    "--no-version    Will not add version from `package.json` to `build.ts`",
    "--no-time       Will not add timestamp to final `build.ts`",
)


def display_manual() -> None:
    """Print the usage text. Touches no files."""
    _rich_info(f"Welcome to `build-info` v{get_version()}!")
    _rich_info("")
    for line in USAGE_LINES:
        _rich_info(line)


async def _emit(record: BuildRecord, config: BuildInfoConfig) -> bool:
    content = serialize_record(record, config.export_name)
    return await asyncio.to_thread(write_artifact, content, config.output_path)


async def run_build(flags: FlagSet, config: BuildInfoConfig,
                    source: Optional[MetadataSource] = None) -> BuildRecord:
    """Collect build information and write it to the configured output.

    Args:
        flags: Validated command-line flags
        config: Resolved configuration for this run
        source: Metadata source, defaults to git in the project root

    Returns:
        BuildRecord: The record that was serialized
    """
    _rich_info("Collecting build information...", symbol="start")

    if source is None:
        source = GitMetadataSource(config.project_root, timeout=config.git_timeout)

    record = await assemble_record(flags, source, config.manifest_path)
    _rich_table(_create_record_table(dict(record.items())))

    await _emit(record, config)
    return record


async def run_init(config: BuildInfoConfig) -> BuildRecord:
    """Write a placeholder build file and print onboarding guidance."""
    _rich_info("Welcome to `build-info`!")
    _rich_info(
        f"We will now create a boilerplate `{config.output_path.name}` file in `{config.output_path}` "
        "and fill it with basic information so you can start implementing it in your front-end."
    )
    _rich_info(
        "If you wish for more info on how to implement the provided info in your Angular app, "
        f"feel free to check out the main repo over at {PROJECT_URL}"
    )
    _rich_info(f"Creating `{config.output_path.name}` file...", symbol="start")

    record = placeholder_record()
    if await _emit(record, config):
        next_steps = [
            "Modify the build/deploy scripts in your `package.json` so this tool runs "
            "every time before your Angular app is built, for example:",
            '[...] "build": "build-info && ng build --prod", [...]',
            f"You can find more info on implementing this tool on the main repo: {PROJECT_URL}",
        ]
        _rich_panel("\n".join(next_steps), title="Next Steps", style="green")
    return record
