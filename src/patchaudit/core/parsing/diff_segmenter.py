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

from patchaudit.core.data.diff import Diff, parse_diff_marker
from patchaudit.core.data.text_region import TextRegion


class DiffSegmenter:
    """
    Splits one commit region into one region per `diff --git` marker.

    Each region runs from the end of its marker line to the next marker (or
    the end of the commit region). A marker whose a/ and b/ paths cannot be
    located ends the previous region but yields nothing itself, so its lines
    are never attributed to another file.
    """

    _DIFF_MARKER_RE = re.compile(r"^diff --git[^\r\n]*", re.MULTILINE)

    def segments(self, region: TextRegion) -> Iterator[tuple[Diff, TextRegion]]:
        previous: re.Match | None = None

        for match in self._DIFF_MARKER_RE.finditer(
            region.buffer, region.start, region.end
        ):
            if previous is not None:
                yield from self._segment(region.buffer, previous, match.start())
            previous = match

        if previous is not None:
            yield from self._segment(region.buffer, previous, region.end)

    def _segment(
        self, buffer: str, marker: re.Match, end: int
    ) -> Iterator[tuple[Diff, TextRegion]]:
        diff = parse_diff_marker(marker.group(0))
        if diff is None:
            logger.debug(f"Skipping malformed diff marker: {marker.group(0)!r}")
            return
        yield diff, TextRegion(buffer, marker.end(), end)
