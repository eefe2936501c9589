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
Logging configuration for the patchaudit CLI.

Console messages go to stderr through rich so that records written to
stdout stay machine readable. Every run also gets a DEBUG log file.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from patchaudit import constants


class StructuredLogger:
    """Sets up loguru sinks for one command invocation."""

    def __init__(self, command_name: str, silent: bool = False):
        self.command_name = command_name
        self.silent = silent
        self.console = Console(stderr=True)
        self._setup_logger()

    def _setup_logger(self) -> None:
        # Clear existing sinks to avoid duplicates
        logger.remove()

        log_level = os.getenv("PATCHAUDIT_LOG_LEVEL", "INFO").upper()
        console_level = os.getenv("PATCHAUDIT_CONSOLE_LOG_LEVEL", log_level).upper()

        log_dir = constants.LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = log_dir / f"{constants.APP_NAME}_{timestamp}.log"

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            self.console.print(text, highlight=False)

        if not self.silent:
            logger.add(
                console_sink, level=console_level, format="{message}", catch=True
            )

        logger.add(
            logfile,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path:
        return self.logfile


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Show DEBUG messages on the console
        silent: Do not log to the console at all

    Returns:
        Path to the log file
    """
    if debug:
        os.environ["PATCHAUDIT_LOG_LEVEL"] = "DEBUG"
        os.environ["PATCHAUDIT_CONSOLE_LOG_LEVEL"] = "DEBUG"

    structured_logger = StructuredLogger(command_name, silent=silent)
    return structured_logger.get_logfile()
