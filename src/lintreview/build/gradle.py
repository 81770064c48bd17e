"""Gradle build step that produces the lint report."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from lintreview.core.errors import PreconditionError

logger = logging.getLogger(__name__)

GRADLEW = "gradlew"


def gradlew_exists(project_path: Path) -> bool:
    return (project_path / GRADLEW).is_file()


def run_gradle_task(project_path: Path, task: str) -> int:
    """Run ``./gradlew <task>`` and return its exit code.

    Output is captured so that stdout stays reserved for the review itself.
    """
    logger.info("Running ./%s %s", GRADLEW, task)
    try:
        completed = subprocess.run(
            [f"./{GRADLEW}", task],
            cwd=str(project_path),
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise PreconditionError(f"Could not run `./{GRADLEW} {task}`: {exc}") from exc

    if completed.returncode != 0:
        tail = "\n".join(completed.stdout.splitlines()[-20:] + completed.stderr.splitlines()[-20:])
        logger.warning(
            "./%s %s exited with %d\n%s", GRADLEW, task, completed.returncode, tail
        )
    else:
        logger.debug("./%s %s finished", GRADLEW, task)
    return completed.returncode
