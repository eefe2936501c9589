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
from collections.abc import Iterable, Iterator

from patchaudit.core.data.diff import DIFF_MARKER_PREFIX, parse_diff_marker
from patchaudit.core.data.events import (
    Addition,
    CommitEvent,
    Deletion,
    DiffEvent,
    Event,
    FileBoundary,
)


class LineClassifier:
    """
    Maps one line of patch text to an Event, or None when the line carries
    nothing we track (hunk headers, context lines, mode lines, ...).

    Rules are checked in order and the first match wins. `+++` and `---`
    are unified diff file headers, not additions or deletions of `++`/`--`.
    """

    _COMMIT_LINE_RE = re.compile(r"^From ([0-9a-fA-F]{40})\b")

    def classify(self, line: str) -> Event | None:
        if line.endswith("\r"):
            line = line[:-1]

        if len(line) <= 1:
            return None

        if line.startswith("+"):
            if not line.startswith("+++"):
                return Addition(line[1:])
            return None

        if line.startswith("-"):
            if not line.startswith("---"):
                return Deletion(line[1:])
            return None

        if line.startswith(DIFF_MARKER_PREFIX):
            diff = parse_diff_marker(line)
            return DiffEvent(diff) if diff is not None else None

        m = self._COMMIT_LINE_RE.match(line)
        if m:
            return CommitEvent(m.group(1))

        return None

    def classify_lines(self, lines: Iterable[str]) -> Iterator[Event]:
        for line in lines:
            event = self.classify(line)
            if event is not None:
                yield event

    def classify_stream(self, lines: Iterable[str]) -> Iterator[Event]:
        """
        Like classify_lines, for a whole patch read as one stream of lines.

        Also yields a FileBoundary wherever a file region ends without a
        readable diff marker: after a malformed `diff --git` line, and after a
        complete `From <hash>` / `From:` / `Date:` commit header. A `From <hash>`
        line that is not followed by the other two header lines is only a
        CommitEvent and does not end the file.
        """
        # header lines still expected after a `From <hash>` line
        expecting: tuple[str, ...] = ()

        for line in lines:
            if expecting:
                if line.startswith(expecting[0]):
                    expecting = expecting[1:]
                    if not expecting:
                        yield FileBoundary()
                else:
                    expecting = ()

            event = self.classify(line)
            if event is None:
                if line.startswith(DIFF_MARKER_PREFIX):
                    yield FileBoundary()
                continue

            if isinstance(event, CommitEvent):
                expecting = ("From:", "Date:")
            yield event
