# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Exception hierarchy for the patchaudit CLI application.

User facing failures (unreadable input, failed output, bad configuration)
derive from PatchAuditError and are reported by handle_patchaudit_exception.
Malformed patch text is never an error: unrecognised lines are skipped.
"""

import contextlib

import typer
from loguru import logger
from rich.markup import escape


class PatchAuditError(Exception):
    """
    Base exception for all patchaudit errors.

    All patchaudit-specific exceptions should inherit from this class
    so the CLI can report them consistently.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a PatchAuditError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class InputError(PatchAuditError):
    """
    Errors acquiring the patch text.

    Raised when the input file is missing or unreadable,
    or when standard input cannot be read.
    """

    pass


class OutputError(PatchAuditError):
    """
    Errors serializing or writing the extracted changesets.
    """

    pass


class ConfigurationError(PatchAuditError):
    """
    Configuration-related errors.

    Raised when configuration values are invalid or
    incompatible with each other.
    """

    pass


class SegmentationError(RuntimeError):
    """
    Internal invariant violation inside the segmentation pipeline.

    This is a programming error, not bad input, so it does not inherit
    from PatchAuditError and is never turned into a friendly exit.
    """

    pass


def input_not_found(path: str) -> InputError:
    """Create an InputError for a missing input file."""
    return InputError(
        f"Input file not found: {path}",
        "Check the path, or omit it to read the patch from standard input",
    )


def input_unreadable(source: str, reason: str) -> InputError:
    """Create an InputError for an input that exists but cannot be read."""
    return InputError(f"Could not read patch text from {source}", reason)


def output_write_failed(target: str, reason: str) -> OutputError:
    """Create an OutputError for a failed write."""
    return OutputError(f"Could not write output to {target}", reason)


@contextlib.contextmanager
def handle_patchaudit_exception(exit_on_fail: bool = True):
    """
    Report PatchAuditError to the user and exit with a non-zero code.

    Works both as a context manager and as a decorator.
    """
    try:
        yield
    except PatchAuditError as e:
        logger.error(f"[red]Error:[/red] {escape(e.message)}")
        if e.details:
            logger.debug(f"Details: {e.details}")
        if exit_on_fail:
            raise typer.Exit(1)
        raise
    except KeyboardInterrupt:
        logger.info("[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
