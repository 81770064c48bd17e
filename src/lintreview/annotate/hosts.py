"""Review hosts that receive inline annotations."""

from __future__ import annotations

import json
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from lintreview.core.models import Annotation, AnnotationLevel
from lintreview.core.output import console as default_console


class ReviewHost(ABC):
    """Somewhere inline comments can be posted (a PR, a CI log, a file)."""

    name: str = ""

    @abstractmethod
    def warn(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        """Post a non-blocking comment."""

    @abstractmethod
    def fail(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        """Post a blocking comment."""

    def post(self, annotation: Annotation) -> None:
        actions = {
            AnnotationLevel.WARN: self.warn,
            AnnotationLevel.FAIL: self.fail,
        }
        actions[annotation.level](
            annotation.message,
            file=annotation.file,
            line=annotation.line,
            comment=annotation.comment,
        )

    def finish(self) -> None:
        """Called once after the last annotation of a run."""


class RecordingHost(ReviewHost):
    """Keeps annotations in memory; also backs the JSON export."""

    name = "json"

    def __init__(self):
        self.annotations: list[Annotation] = []

    def warn(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        self.annotations.append(Annotation(AnnotationLevel.WARN, message, file, line, comment))

    def fail(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        self.annotations.append(Annotation(AnnotationLevel.FAIL, message, file, line, comment))

    def to_json(self) -> str:
        return json.dumps(
            [
                {
                    "level": a.level.value,
                    "file": a.file,
                    "line": a.line,
                    "message": a.message,
                    "comment": a.comment,
                }
                for a in self.annotations
            ],
            indent=2,
        )


class ConsoleHost(ReviewHost):
    """Prints annotations to the terminal."""

    name = "console"

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def warn(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        self._print("yellow", "warn", message, file, line, comment)

    def fail(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        self._print("red", "fail", message, file, line, comment)

    def _print(self, color, label, message, file, line, comment) -> None:
        self.console.print(
            f"  [{color}]● {label}[/{color}]  {escape(file)}:{line}  {escape(message)}",
            highlight=False,
        )
        if comment is not None:
            self.console.print("     [dim]Suggested fix:[/dim]", end=" ")
            self.console.print(comment, markup=False, highlight=False)


class GitHubActionsHost(ReviewHost):
    """Emits GitHub Actions workflow commands, which show up as PR annotations."""

    name = "github"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def warn(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        self._emit("warning", message, file, line, comment)

    def fail(self, message: str, *, file: str, line: int, comment: str | None = None) -> None:
        self._emit("error", message, file, line, comment)

    def _emit(self, command: str, message: str, file: str, line: int, comment: str | None) -> None:
        body = message
        if comment is not None:
            body += f"\n\n```suggestion\n{comment}\n```"
        props = f"file={_escape_property(file)},line={line}"
        self.stream.write(f"::{command} {props}::{_escape_data(body)}\n")


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


HOSTS = {
    "console": ConsoleHost,
    "github": GitHubActionsHost,
    "json": RecordingHost,
}
