"""Git collaborator: which files changed, and how."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from lintreview.core.errors import PreconditionError
from lintreview.core.models import ChangeSet

logger = logging.getLogger(__name__)


class GitRepository:
    """Reads the change under review from a git working tree.

    Paths are reported relative to ``project_path`` so they line up with
    lint report paths once the project prefix is stripped.
    """

    def __init__(self, project_path: Path, base: str = "HEAD"):
        self.project_path = project_path
        self.base = base
        self._untracked: set[str] | None = None
        self._merge_base: str | None = None

    def change_set(self) -> ChangeSet:
        """Collect modified, added and deleted files since the merge-base with ``base``."""
        modified: set[str] = set()
        added: set[str] = set()
        deleted: set[str] = set()

        output = self._git("diff", "--relative", "--name-status", self.merge_base())
        for raw_line in output.splitlines():
            if not raw_line.strip():
                continue
            parts = raw_line.split("\t")
            status = parts[0][:1]
            if status == "R" and len(parts) == 3:
                deleted.add(parts[1])
                added.add(parts[2])
            elif status == "C" and len(parts) == 3:
                added.add(parts[2])
            elif status == "A":
                added.add(parts[1])
            elif status == "D":
                deleted.add(parts[1])
            elif len(parts) >= 2:
                modified.add(parts[-1])

        added |= self._untracked_files()

        return ChangeSet(
            modified=frozenset(modified),
            added=frozenset(added),
            deleted=frozenset(deleted),
        )

    def patch_for(self, path: str) -> str | None:
        """Unified diff for one file, or ``None`` when it has no changes."""
        if path in self._untracked_files():
            # --no-index exits 1 when the files differ
            patch = self._git("diff", "--no-index", "--", "/dev/null", path, ok_codes=(0, 1))
        else:
            patch = self._git("diff", self.merge_base(), "--", path)
        return patch or None

    def merge_base(self) -> str:
        """Commit where the change split off from ``base``.

        Diffing against it keeps commits that landed on ``base`` afterwards
        out of the change.
        """
        if self._merge_base is None:
            self._merge_base = self._git("merge-base", self.base, "HEAD").strip()
        return self._merge_base

    def _untracked_files(self) -> set[str]:
        if self._untracked is None:
            output = self._git("ls-files", "--others", "--exclude-standard")
            self._untracked = {line for line in output.splitlines() if line}
        return self._untracked

    def _git(self, *args: str, ok_codes: tuple[int, ...] = (0,)) -> str:
        try:
            completed = subprocess.run(
                ["git", *args],
                cwd=str(self.project_path),
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise PreconditionError(f"Could not run git: {exc}") from exc

        if completed.returncode not in ok_codes:
            logger.debug("git %s failed: %s", " ".join(args), completed.stderr.strip())
            raise PreconditionError(
                f"`git {' '.join(args)}` failed: {completed.stderr.strip() or completed.returncode}"
            )
        return completed.stdout
