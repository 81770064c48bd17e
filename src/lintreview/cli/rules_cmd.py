"""lintreview rules command."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from lintreview.core.config import load_config
from lintreview.core.errors import LintReviewError
from lintreview.core.output import print_error, print_rules
from lintreview.fix.corrections import load_rules


@click.command()
@click.option("--corrections", "correction_file", type=str, default=None, help="Correction rule file (JSON)")
@click.option("--project", "-p", "project", default=".", help="Project directory (default: current dir)")
def rules(correction_file: str | None, project: str):
    """List the correction rules that inline mode would use."""
    project_path = Path(project).resolve()
    try:
        config = load_config(project_path)
    except LintReviewError as exc:
        print_error(str(exc))
        sys.exit(1)

    source = Path(correction_file or config.lint.correction_file)
    if not source.is_absolute():
        source = project_path / source
    print_rules(load_rules(source), str(source))
