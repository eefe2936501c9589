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

from collections.abc import Iterable, Iterator

from loguru import logger

from patchaudit.core.data.changeset import Changeset
from patchaudit.core.data.diff import Diff
from patchaudit.core.data.events import (
    CommitEvent,
    DiffEvent,
    Event,
    FileBoundary,
    LineEvent,
)


class PathFilter:
    """
    Keeps only the files whose post-change path contains `substring`.

    Plain substring containment, no globbing. An empty substring admits
    everything. Counts of admitted and rejected files are kept for logging.
    """

    def __init__(self, substring: str):
        self.substring = substring
        self.admitted = 0
        self.rejected = 0

    def matches(self, path: str) -> bool:
        return self.substring in path

    def _decide(self, path: str) -> bool:
        if self.matches(path):
            self.admitted += 1
            return True
        self.rejected += 1
        logger.debug(f"Filtered out {path} (no {self.substring!r})")
        return False

    def filter(self, changesets: Iterable[Changeset]) -> Iterator[Changeset]:
        for changeset in changesets:
            if self._decide(changeset.path):
                yield changeset

    def filter_events(
        self, events: Iterable[Event]
    ) -> Iterator[tuple[Diff, list[LineEvent]]]:
        """
        Batch a flat event stream per file and yield the admitted batches.

        Line events are buffered until the next diff marker or FileBoundary
        (or the end of the stream) closes the file, then the whole batch is
        kept or dropped based on its diff path. Lines outside any file are
        discarded. A bare CommitEvent is not a boundary and is skipped.
        """
        current: Diff | None = None
        buffered: list[LineEvent] = []

        for event in events:
            if isinstance(event, CommitEvent):
                continue
            if isinstance(event, DiffEvent | FileBoundary):
                if current is not None and self._decide(current.path):
                    yield current, buffered
                current = event.diff if isinstance(event, DiffEvent) else None
                buffered = []
            elif current is not None:
                buffered.append(event)

        if current is not None and self._decide(current.path):
            yield current, buffered

    def reset(self) -> None:
        self.admitted = 0
        self.rejected = 0
