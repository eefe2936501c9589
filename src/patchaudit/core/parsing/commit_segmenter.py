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

import re
from collections.abc import Iterator

from loguru import logger

from patchaudit.core.data.header import Header
from patchaudit.core.data.text_region import TextRegion


class CommitSegmenter:
    """
    Splits a multi-commit patch export into one region per commit.

    A commit starts with three lines:

        From <40 hex hash> <anything>
        From: <author>
        Date: <date>

    The region of commit i runs from the end of its header to the start of the
    next header (or the end of the text). Anything before the first header is
    dropped.
    """

    _COMMIT_MARKER_RE = re.compile(
        r"^From ([0-9a-fA-F]{40})\b[^\n]*\n"
        r"From:[ \t]*([^\r\n]*)\r?\n"
        r"Date:[ \t]*([^\r\n]*)",
        re.MULTILINE,
    )

    def segments(self, text: str) -> Iterator[tuple[Header, TextRegion]]:
        previous: re.Match | None = None
        count = 0

        for match in self._COMMIT_MARKER_RE.finditer(text):
            if previous is not None:
                yield self._read_header(previous), TextRegion(
                    text, previous.end(), match.start()
                )
                count += 1
            previous = match

        if previous is None:
            logger.debug("No commit headers found in input")
            return

        yield self._read_header(previous), TextRegion(text, previous.end(), len(text))
        count += 1
        logger.debug("Segmented {count} commits", count=count)

    def _read_header(self, match: re.Match) -> Header:
        return Header(
            hash=match.group(1).strip(),
            author=match.group(2).strip(),
            date=match.group(3).strip(),
        )
