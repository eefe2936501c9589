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

from dataclasses import dataclass, field

from patchaudit.core.data.block import Block
from patchaudit.core.data.diff import Diff
from patchaudit.core.data.header import Header


@dataclass
class Changeset:
    # header is shared by every changeset of the same commit, None when the
    # pipeline runs without commit attribution.
    header: Header | None
    diff: Diff
    additions: list[Block] = field(default_factory=list)
    deletions: list[Block] = field(default_factory=list)

    @property
    def path(self) -> str:
        return self.diff.path

    def addition_lines(self) -> list[str]:
        return [line for block in self.additions for line in block.lines]

    def deletion_lines(self) -> list[str]:
        return [line for block in self.deletions for line in block.lines]

    def added_count(self) -> int:
        return sum(len(block) for block in self.additions)

    def deleted_count(self) -> int:
        return sum(len(block) for block in self.deletions)

    def is_empty(self) -> bool:
        return not self.additions and not self.deletions
