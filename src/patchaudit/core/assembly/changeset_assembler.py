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

from collections.abc import Iterable

from patchaudit.constants import GAP_MARKER
from patchaudit.core.data.block import Block
from patchaudit.core.data.changeset import Changeset
from patchaudit.core.data.diff import Diff
from patchaudit.core.data.events import Event
from patchaudit.core.data.header import Header
from patchaudit.core.grouping.block_grouper import BlockGrouper

COMMIT_COLUMNS = ("commit", "author", "date")
CHANGE_COLUMNS = ("path", "additions", "deletions")


def row_fields(attributed: bool) -> list[str]:
    """CSV columns for rows built by ChangesetAssembler.to_row."""
    return [*COMMIT_COLUMNS, *CHANGE_COLUMNS] if attributed else list(CHANGE_COLUMNS)


def flat_join(blocks: Iterable[Block]) -> str:
    """All lines of all blocks joined with newlines."""
    return "\n".join(line for block in blocks for line in block.lines)


def gapped_join(blocks: Iterable[Block]) -> str:
    """
    Every line followed by a newline, with GAP_MARKER between two blocks.

    [["a"], ["b"]] renders as "a\\n ...\\nb\\n".
    """
    parts: list[str] = []
    for i, block in enumerate(blocks):
        if i > 0:
            parts.append(GAP_MARKER)
        parts.extend(f"{line}\n" for line in block.lines)
    return "".join(parts)


class ChangesetAssembler:
    """Builds Changesets from grouped events and renders them as records."""

    def __init__(self, grouper: BlockGrouper | None = None, gapped: bool = False):
        self.grouper = grouper or BlockGrouper()
        self.gapped = gapped

    def assemble(
        self, header: Header | None, diff: Diff, events: Iterable[Event]
    ) -> Changeset:
        additions, deletions = self.grouper.group(events)
        return Changeset(
            header=header, diff=diff, additions=additions, deletions=deletions
        )

    def join(self, blocks: Iterable[Block]) -> str:
        return gapped_join(blocks) if self.gapped else flat_join(blocks)

    def to_record(self, changeset: Changeset) -> dict:
        record = {}
        if changeset.header is not None:
            record["commit"] = {
                "hash": changeset.header.hash,
                "author": changeset.header.author,
                "date": changeset.header.date,
            }
        record["path"] = changeset.path
        record["additions"] = self.join(changeset.additions)
        record["deletions"] = self.join(changeset.deletions)
        return record

    def to_row(self, changeset: Changeset) -> dict:
        """Flat variant of to_record for tabular (CSV) export."""
        row = {}
        if changeset.header is not None:
            row["commit"] = changeset.header.hash
            row["author"] = changeset.header.author
            row["date"] = changeset.header.date
        row["path"] = changeset.path
        row["additions"] = self.join(changeset.additions)
        row["deletions"] = self.join(changeset.deletions)
        return row
