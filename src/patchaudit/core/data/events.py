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

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from patchaudit.core.data.diff import Diff


class EventKind(str, Enum):
    COMMIT = "commit"
    DIFF = "diff"
    ADDITION = "addition"
    DELETION = "deletion"
    BOUNDARY = "boundary"


@dataclass(frozen=True, slots=True)
class CommitEvent:
    kind: ClassVar[EventKind] = EventKind.COMMIT
    hash: str


@dataclass(frozen=True, slots=True)
class DiffEvent:
    kind: ClassVar[EventKind] = EventKind.DIFF
    diff: Diff


@dataclass(frozen=True, slots=True)
class FileBoundary:
    """End of a file region that has no readable diff marker of its own."""

    kind: ClassVar[EventKind] = EventKind.BOUNDARY


@dataclass(frozen=True, slots=True)
class Addition:
    kind: ClassVar[EventKind] = EventKind.ADDITION
    text: str


@dataclass(frozen=True, slots=True)
class Deletion:
    kind: ClassVar[EventKind] = EventKind.DELETION
    text: str


Event = CommitEvent | DiffEvent | FileBoundary | Addition | Deletion
LineEvent = Addition | Deletion

LINE_KINDS = frozenset({EventKind.ADDITION, EventKind.DELETION})
