"""Map unified-diff patches onto the lines they add."""

from __future__ import annotations

import logging
import re
from typing import Callable

logger = logging.getLogger(__name__)

# e.g. "@@ -32,10 +32,7 @@"; only the new-file start is used
_HUNK_HEADER = re.compile(r"\+(\d+)(?:,\d+)? @@")
_NO_NEWLINE_MARKER = "\\"


def parse_added_lines(patch: str) -> dict[int, str]:
    """Return ``{new-file line number: content}`` for every added line.

    Context lines advance the new-file counter, removed lines do not, and
    nothing is recorded before the first hunk header. A line that opens
    like a header but does not parse stops recording until the next valid
    header.
    """
    added: dict[int, str] = {}
    current: int | None = None

    for line in patch.strip().split("\n"):
        header = _HUNK_HEADER.search(line)
        if header:
            current = int(header.group(1))
            continue
        if line.startswith("@@"):
            logger.debug("Unparseable hunk header %r", line)
            current = None
            continue
        if current is None:
            continue
        if line.startswith("+"):
            added[current] = line[1:]
            current += 1
        elif line.startswith("-") or line.startswith(_NO_NEWLINE_MARKER):
            continue
        else:
            current += 1

    return added


class AddedLineIndex:
    """Per-run cache of added-line maps, one per file path.

    ``patch_source`` returns the patch text for a path, or ``None`` when the
    file has no diff.
    """

    def __init__(self, patch_source: Callable[[str], str | None]):
        self._patch_source = patch_source
        self._maps: dict[str, dict[int, str]] = {}

    def for_file(self, path: str) -> dict[int, str]:
        if path not in self._maps:
            patch = self._patch_source(path)
            self._maps[path] = parse_added_lines(patch) if patch else {}
        return self._maps[path]

    @classmethod
    def from_patches(cls, patches: dict[str, str]) -> AddedLineIndex:
        return cls(patches.get)
