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

from patchaudit.core.data.events import LINE_KINDS, EventKind


@dataclass
class Block:
    """A maximal run of consecutive additions, or of consecutive deletions."""

    kind: EventKind
    lines: list[str]

    def __post_init__(self):
        if self.kind not in LINE_KINDS:
            raise ValueError(f"Blocks only hold additions or deletions, got {self.kind}")
        if not self.lines:
            raise ValueError("A block must contain at least one line")

    def __len__(self) -> int:
        return len(self.lines)
