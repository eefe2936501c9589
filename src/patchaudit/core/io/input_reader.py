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

import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

from patchaudit.core.exceptions import input_not_found, input_unreadable

STDIN_MARKER = "-"


def read_input(path: str | None, stdin: TextIO | None = None) -> str:
    """
    Read the whole patch text from `path`, or from standard input when no
    path (or "-") is given. A leading UTF-8 byte order mark is dropped.
    """
    if path is None or path == STDIN_MARKER:
        return _read_stdin(stdin or sys.stdin)

    file_path = Path(path)
    if not file_path.is_file():
        raise input_not_found(path)

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise input_unreadable(path, str(e)) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def _read_stdin(stream: TextIO) -> str:
    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise input_unreadable("standard input", str(e)) from e

    logger.debug(f"Read {len(text)} characters from standard input")
    return text.removeprefix("\ufeff")
