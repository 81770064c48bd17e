"""Errors that abort a review run."""

from __future__ import annotations


class LintReviewError(Exception):
    """Base class for failures that stop a run before any output."""


class ConfigurationError(LintReviewError):
    """Raised when a configuration value is outside the recognized set."""


class PreconditionError(LintReviewError):
    """Raised when a required input (gradlew, lint report, git) is missing."""
