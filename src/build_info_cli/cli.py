"""Command-line interface for build-info."""

import asyncio
import sys

import click

from build_info_cli.config import BuildInfoConfig, ConfigurationError
from build_info_cli.core.arguments import InvalidArgument, parse_flags
from build_info_cli.core.operations import display_manual, run_build, run_init
from build_info_cli.utils.console import _rich_error


# Flags are validated by parse_flags, so click passes every token through
# untouched and its own --help handling is switched off.
CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "help_option_names": [],
}


class RawArgsCommand(click.Command):
    """Command that keeps the exact tokens it was given.

    click consumes a bare ``--`` as its end-of-options marker; the raw list
    lets parse_flags see and reject it like any other unknown token.
    """

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


@click.command(cls=RawArgsCommand, context_settings=CONTEXT_SETTINGS,
               help="Generate a TypeScript build information file for front-end apps")
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, args):
    """Dispatch to init, help or the build pipeline (first match wins)."""
    try:
        flags = parse_flags(ctx.meta.get("raw_args", args))
    except InvalidArgument as e:
        _rich_error(f"Error: {e}", symbol="error")
        sys.exit(1)

    if flags.help and not flags.init:
        display_manual()
        return

    try:
        config = BuildInfoConfig.from_environment()
    except ConfigurationError as e:
        _rich_error(f"Configuration error: {e}", symbol="error")
        sys.exit(1)

    if flags.init:
        asyncio.run(run_init(config))
    else:
        asyncio.run(run_build(flags, config))


def main():
    """Main entry point for the build-info console script."""
    cli(prog_name="build-info")


if __name__ == "__main__":
    main()
