"""Click CLI entry point for lintreview."""

from __future__ import annotations

import logging

import click

from lintreview._version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="lintreview")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """lintreview - change-scoped Android Lint feedback for code review.

    Reads the lint XML report and reports only what the change touched.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from lintreview.cli.run_cmd import run  # noqa: E402
from lintreview.cli.rules_cmd import rules  # noqa: E402

cli.add_command(run)
cli.add_command(rules)


if __name__ == "__main__":
    cli()
