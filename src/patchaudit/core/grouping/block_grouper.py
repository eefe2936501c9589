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
from itertools import groupby

from patchaudit.constants import GARBLED_BOM
from patchaudit.core.data.block import Block
from patchaudit.core.data.events import (
    CommitEvent,
    DiffEvent,
    Event,
    EventKind,
    FileBoundary,
    LineEvent,
)
from patchaudit.core.exceptions import SegmentationError


class BlockGrouper:
    """
    Groups the line events of one file region into blocks.

    Consecutive additions form one block, consecutive deletions form another;
    a change of kind closes the open block. Order is preserved inside each of
    the two output lists, so interleaved edits stay separate blocks.
    """

    def __init__(self, noise: str = GARBLED_BOM):
        self.noise = noise

    def group(self, events: Iterable[Event]) -> tuple[list[Block], list[Block]]:
        additions: list[Block] = []
        deletions: list[Block] = []

        for kind, run in groupby(self._line_events(events), key=lambda e: e.kind):
            block = Block(kind, [event.text for event in run])
            if kind == EventKind.ADDITION:
                additions.append(block)
            else:
                deletions.append(block)

        return additions, deletions

    def _line_events(self, events: Iterable[Event]) -> Iterator[LineEvent]:
        for event in events:
            if isinstance(event, DiffEvent | FileBoundary):
                # regions are split on diff markers, so one can never show up here
                raise SegmentationError(
                    f"Unexpected {event.kind.value} event inside a file region"
                )
            if isinstance(event, CommitEvent):
                # a bare hash line without From:/Date: is not a commit boundary
                continue
            if event.text == self.noise:
                continue
            yield event
